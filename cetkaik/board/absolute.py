"""
The absolute frame: the board as printed, independent of who is looking at it.

Squares carry fixed labels, a column letter followed by a row name: 'KA', 'ZO', ...
The two players are identified by the side they started on, A or IA.
The board is sparse: only occupied squares have an entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Self

from cetkaik.board import pieces, relative
from cetkaik.board.hand import Hand, as_hand, with_added, with_first_match_removed
from cetkaik.board.pieces import RankedPiece, SpecialPiece
from cetkaik.core.exceptions import (
    InvalidBoardError,
    InvalidCoordinateError,
    UnknownNameError,
)
from cetkaik.core.shared_types import Color, Profession

_LOGGER = logging.getLogger(__name__)


class AbsoluteSide(Enum):
    A = "A"
    IA = "IA"

    @property
    def opposite(self) -> AbsoluteSide:
        return AbsoluteSide.IA if self is AbsoluteSide.A else AbsoluteSide.A

    def __invert__(self) -> AbsoluteSide:
        return self.opposite

    @classmethod
    def from_label(cls, label: str) -> AbsoluteSide:
        """'A' or 'IA' (exact match)"""
        try:
            return cls(label)
        except ValueError:
            raise UnknownNameError(f"Unknown side: {label!r}") from None


class Row(Enum):
    A = "A"
    E = "E"
    I = "I"
    U = "U"
    O = "O"
    Y = "Y"
    AI = "AI"
    AU = "AU"
    IA = "IA"


class Column(Enum):
    K = "K"
    L = "L"
    N = "N"
    T = "T"
    Z = "Z"
    X = "X"
    C = "C"
    M = "M"
    P = "P"


# Board order. Row A is the edge of the A side, row IA the edge of the IA side.
ROWS: tuple[Row, ...] = (
    Row.A,
    Row.E,
    Row.I,
    Row.U,
    Row.O,
    Row.Y,
    Row.AI,
    Row.AU,
    Row.IA,
)
COLUMNS: tuple[Column, ...] = (
    Column.K,
    Column.L,
    Column.N,
    Column.T,
    Column.Z,
    Column.X,
    Column.C,
    Column.M,
    Column.P,
)

ROW_INDEX: dict[Row, int] = {row: index for index, row in enumerate(ROWS)}
COLUMN_INDEX: dict[Column, int] = {
    column: index for index, column in enumerate(COLUMNS)
}

_ROW_SYMBOLS = {row.value for row in Row}
_COLUMN_SYMBOLS = {column.value for column in Column}


@dataclass(frozen=True, slots=True)
class AbsoluteCoord:
    row: Row
    column: Column

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Label: column symbol + row symbol.

        ex) 'NE' -> (Row.E, Column.N), 'ZAU' -> (Row.AU, Column.Z)
        """
        if not is_valid_label(label):
            _LOGGER.debug("Rejected coordinate label %r", label)
            raise InvalidCoordinateError(f"Cannot interpret {label!r} as a square.")
        return cls(Row(label[1:]), Column(label[0]))

    def to_label(self) -> str:
        return f"{self.column.value}{self.row.value}"

    def __str__(self) -> str:
        return self.to_label()


def is_valid_label(label: str) -> bool:
    """2 or 3 characters: one column symbol, then exactly one row symbol.

    Case-sensitive, no surrounding whitespace.
    """
    if not isinstance(label, str) or not (2 <= len(label) <= 3):
        return False
    return label[0] in _COLUMN_SYMBOLS and label[1:] in _ROW_SYMBOLS


def parse_coord(label: str) -> AbsoluteCoord:
    return AbsoluteCoord.from_label(label)


def serialize_coord(coord: AbsoluteCoord) -> str:
    return coord.to_label()


def all_coords() -> Iterator[AbsoluteCoord]:
    """All 81 squares, row by row in board order"""
    for row in ROWS:
        for column in COLUMNS:
            yield AbsoluteCoord(row, column)


def _canonical_index(coord: AbsoluteCoord) -> relative.RelativeCoord:
    """Index of the square as seen with IA at the bottom (no rotation needed)"""
    return relative.RelativeCoord(ROW_INDEX[coord.row], COLUMN_INDEX[coord.column])


def distance(a: AbsoluteCoord, b: AbsoluteCoord) -> int:
    """Chebyshev distance.

    A 180 degree rotation preserves it, so every indexing perspective agrees.
    """
    return relative.distance(_canonical_index(a), _canonical_index(b))


def is_water(coord: AbsoluteCoord) -> bool:
    """Tam2's water: row O from N to C, and column Z from I to AI. Centered on ZO."""
    return relative.is_water(_canonical_index(coord))


Piece = SpecialPiece | RankedPiece[AbsoluteSide]


def serialize_piece(piece: Piece) -> str:
    """'皇' for Tam2, otherwise color + profession, e.g. '黒王'.

    No direction marker: up and down have no meaning in this frame.
    """
    return pieces.serialize_piece(piece)


def _check_piece(coord: AbsoluteCoord, piece: object) -> None:
    """Only Tam2 or a ranked piece with an absolute side may stand on this board"""
    if isinstance(piece, SpecialPiece):
        return
    if not isinstance(piece, RankedPiece):
        raise InvalidBoardError(f"Not a piece: {piece!r} on {coord}")
    if not isinstance(piece.side, AbsoluteSide):
        raise InvalidBoardError(
            f"Piece on {coord} has no absolute side: {piece.side!r}"
        )


@dataclass(frozen=True, eq=False)
class Board:
    """Sparse board: squares without an entry are empty. `position` is read-only."""

    position: Mapping[AbsoluteCoord, Piece] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # own read-only copy: neither the caller's dict nor a derived board can alter it
        position = dict(self.position)
        for coord, piece in position.items():
            if not isinstance(coord, AbsoluteCoord):
                raise InvalidBoardError(f"Not a square of the board: {coord!r}")
            _check_piece(coord, piece)
        object.__setattr__(self, "position", MappingProxyType(position))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return dict(self.position) == dict(other.position)

    def __hash__(self) -> int:
        return hash(frozenset(self.position.items()))

    @classmethod
    def from_labels(cls, position: Mapping[str, Piece]) -> Self:
        """Convenience builder: {'ZO': TAM2, ...}"""
        return cls(
            {
                AbsoluteCoord.from_label(label): piece
                for label, piece in position.items()
            }
        )

    def piece(self, coord: AbsoluteCoord) -> Optional[Piece]:
        return self.position.get(coord)

    def __contains__(self, coord: object) -> bool:
        return coord in self.position

    def __len__(self) -> int:
        return len(self.position)

    def with_piece(self, coord: AbsoluteCoord, piece: Piece) -> Board:
        return Board({**self.position, coord: piece})

    def without_piece(self, coord: AbsoluteCoord) -> Board:
        return Board(
            {square: p for square, p in self.position.items() if square != coord}
        )

    def occupied(self) -> Iterator[tuple[AbsoluteCoord, Piece]]:
        yield from self.position.items()

    def locate_pieces(
        self,
        color: Optional[Color] = None,
        profession: Optional[Profession] = None,
        side: Optional[AbsoluteSide] = None,
    ) -> list[AbsoluteCoord]:
        """Squares with a ranked piece matching all given attributes (None = any)"""
        return [
            coord
            for coord, piece in self.position.items()
            if isinstance(piece, RankedPiece)
            and (color is None or piece.has_color(color))
            and (profession is None or piece.has_profession(profession))
            and (side is None or piece.has_side(side))
        ]

    def locate_tam2(self) -> Optional[AbsoluteCoord]:
        return next(
            (coord for coord, piece in self.position.items() if piece.is_special()),
            None,
        )


@dataclass(frozen=True)
class Field:
    """The board plus the hand of each player"""

    board: Board
    a_side_hand: Hand = ()
    ia_side_hand: Hand = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "a_side_hand", as_hand(self.a_side_hand))
        object.__setattr__(self, "ia_side_hand", as_hand(self.ia_side_hand))

    def hand_of(self, side: AbsoluteSide) -> Hand:
        return self.a_side_hand if side is AbsoluteSide.A else self.ia_side_hand

    def _with_hand(self, side: AbsoluteSide, hand: Hand) -> Field:
        if side is AbsoluteSide.A:
            return replace(self, a_side_hand=hand)
        return replace(self, ia_side_hand=hand)

    def insert_into_hand(
        self, color: Color, profession: Profession, side: AbsoluteSide
    ) -> Field:
        """Add a captured piece to the end of `side`'s hand"""
        return self._with_hand(side, with_added(self.hand_of(side), color, profession))

    def remove_from_hand(
        self, color: Color, profession: Profession, side: AbsoluteSide
    ) -> Optional[Field]:
        """First matching piece taken out of `side`'s hand. None if there is none."""
        hand = with_first_match_removed(self.hand_of(side), color, profession)
        if hand is None:
            return None
        return self._with_hand(side, hand)
