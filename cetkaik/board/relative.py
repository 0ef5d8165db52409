"""
The relative frame: the board as seen by one of the players.

"Upward" pieces point up, i.e. they belong to the viewer.
"Downward" pieces point down and belong to the opponent.
Squares are addressed by index, `RelativeCoord(row, col)` with both in 0..8.
Row 0 is the row nearest to the Downward player, row 8 the row nearest to the viewer.

The board is dense (all 81 cells are always present),
so it can be indexed directly in search loops.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Self

from cetkaik.board import pieces
from cetkaik.board.hand import Hand, as_hand, with_added, with_first_match_removed
from cetkaik.board.pieces import RankedPiece, SpecialPiece
from cetkaik.core.exceptions import CoordinateOutOfRangeError, InvalidBoardError
from cetkaik.core.shared_types import Color, Profession

# (rows, columns). Always 9x9
BOARD_DIMENSIONS = (9, 9)


class RelativeSide(Enum):
    UPWARD = "upward"  # the viewer
    DOWNWARD = "downward"  # the opponent

    @property
    def opposite(self) -> RelativeSide:
        if self is RelativeSide.UPWARD:
            return RelativeSide.DOWNWARD
        return RelativeSide.UPWARD

    def __invert__(self) -> RelativeSide:
        return self.opposite


SIDE_MARKERS: dict[RelativeSide, str] = {
    RelativeSide.UPWARD: "↑",
    RelativeSide.DOWNWARD: "↓",
}

Piece = SpecialPiece | RankedPiece[RelativeSide]


@dataclass(frozen=True, slots=True)
class RelativeCoord:
    """A square by [row, col] index.

    Out-of-range indices fail fast: construction raises `CoordinateOutOfRangeError`.
    Every other function in this module can therefore assume a valid coordinate.
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        num_rows, num_cols = BOARD_DIMENSIONS
        if not _is_index(self.row, num_rows):
            raise CoordinateOutOfRangeError(f"Row index out of range: {self.row!r}")
        if not _is_index(self.col, num_cols):
            raise CoordinateOutOfRangeError(f"Column index out of range: {self.col!r}")

    def __str__(self) -> str:
        return serialize_coord(self)


def _is_index(value: object, size: int) -> bool:
    # bool is an int subclass, but True is not a row number
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < size


def all_coords() -> Iterator[RelativeCoord]:
    """All 81 squares, row by row"""
    num_rows, num_cols = BOARD_DIMENSIONS
    for row in range(num_rows):
        for col in range(num_cols):
            yield RelativeCoord(row, col)


def serialize_coord(coord: RelativeCoord) -> str:
    """JSON style: RelativeCoord(5, 6) -> '[5,6]'"""
    return f"[{coord.row},{coord.col}]"


def rotate_coord(coord: RelativeCoord) -> RelativeCoord:
    """Point reflection through the center square [4,4]"""
    num_rows, num_cols = BOARD_DIMENSIONS
    return RelativeCoord(num_rows - 1 - coord.row, num_cols - 1 - coord.col)


def is_water(coord: RelativeCoord) -> bool:
    """Tam2's water (tam2 nua2): the cross of 9 squares around [4,4].

    Entry to these squares is restricted.
    """
    return (coord.row == 4 and 2 <= coord.col <= 6) or (
        coord.col == 4 and 2 <= coord.row <= 6
    )


def distance(a: RelativeCoord, b: RelativeCoord) -> int:
    """Chebyshev distance: the larger of the row difference and the column difference"""
    return max(abs(a.row - b.row), abs(a.col - b.col))


def serialize_piece(piece: Piece) -> str:
    """'皇' for Tam2, otherwise color + profession + direction, e.g. '赤将↓'"""
    return pieces.serialize_piece(piece, SIDE_MARKERS)


def rotate_piece(piece: Optional[Piece]) -> Optional[Piece]:
    """Seen from the other player, every ranked piece changes its direction.

    Tam2 and empty squares stay as they are.
    """
    if isinstance(piece, RankedPiece):
        return piece.with_side(~piece.side)
    return piece


BoardRow = tuple[Optional[Piece], ...]
_EMPTY_ROWS: tuple[BoardRow, ...] = tuple(
    (None,) * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])
)


def _check_cell(row: int, col: int, piece: object) -> None:
    """A cell holds None, Tam2, or a ranked piece with a relative side"""
    if piece is None or isinstance(piece, SpecialPiece):
        return
    if not isinstance(piece, RankedPiece):
        raise InvalidBoardError(f"Not a piece: {piece!r} on [{row},{col}]")
    if not isinstance(piece.side, RelativeSide):
        raise InvalidBoardError(
            f"Piece on [{row},{col}] has no relative side: {piece.side!r}"
        )


@dataclass(frozen=True)
class Board:
    """Dense 9x9 grid. `rows[i][j]` holds the piece on [i, j], None if empty."""

    rows: tuple[BoardRow, ...] = _EMPTY_ROWS

    def __post_init__(self) -> None:
        # freeze the nested iterables handed in: no caller keeps a handle on our cells
        rows = tuple(tuple(row) for row in self.rows)
        num_rows, num_cols = BOARD_DIMENSIONS
        if len(rows) != num_rows or any(len(row) != num_cols for row in rows):
            raise InvalidBoardError(
                f"Board must be {num_rows}x{num_cols}, "
                f"got row lengths {[len(row) for row in rows]}"
            )
        for row_index, row in enumerate(rows):
            for col_index, piece in enumerate(row):
                _check_cell(row_index, col_index, piece)
        object.__setattr__(self, "rows", rows)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Optional[Piece]]]) -> Self:
        return cls(tuple(tuple(row) for row in rows))

    def piece(self, coord: RelativeCoord) -> Optional[Piece]:
        return self.rows[coord.row][coord.col]

    def __getitem__(self, coord: RelativeCoord) -> Optional[Piece]:
        return self.piece(coord)

    def with_piece(self, coord: RelativeCoord, piece: Optional[Piece]) -> Board:
        """New board with the given square overwritten (None empties the square)"""
        row = self.rows[coord.row]
        new_row = row[: coord.col] + (piece,) + row[coord.col + 1 :]
        return Board(self.rows[: coord.row] + (new_row,) + self.rows[coord.row + 1 :])

    def without_piece(self, coord: RelativeCoord) -> Board:
        return self.with_piece(coord, None)

    def occupied(self) -> Iterator[tuple[RelativeCoord, Piece]]:
        for coord in all_coords():
            piece = self.piece(coord)
            if piece is not None:
                yield coord, piece

    def locate_pieces(
        self,
        color: Optional[Color] = None,
        profession: Optional[Profession] = None,
        side: Optional[RelativeSide] = None,
    ) -> list[RelativeCoord]:
        """Squares with a ranked piece matching all given attributes (None = any)"""
        return [
            coord
            for coord, piece in self.occupied()
            if isinstance(piece, RankedPiece)
            and (color is None or piece.has_color(color))
            and (profession is None or piece.has_profession(profession))
            and (side is None or piece.has_side(side))
        ]

    def rotated(self) -> Board:
        return rotate_board(self)

    def __str__(self) -> str:
        """One line per row, '.' for an empty square. Meant for logs and debugging."""
        return "\n".join(
            " ".join(
                serialize_piece(piece) if piece is not None else "." for piece in row
            )
            for row in self.rows
        )


def rotate_board(board: Board) -> Board:
    """Turn the board 180 degrees and swap the roles of both players.

    Every square takes the content of its rotated square.
    Ranked pieces flip direction. Applying it twice gives back the same board.
    """
    num_rows, num_cols = BOARD_DIMENSIONS
    return Board(
        tuple(
            tuple(
                rotate_piece(board.piece(rotate_coord(RelativeCoord(row, col))))
                for col in range(num_cols)
            )
            for row in range(num_rows)
        )
    )


@dataclass(frozen=True)
class Field:
    """The board plus the hand of each player"""

    board: Board
    upward_hand: Hand = ()
    downward_hand: Hand = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "upward_hand", as_hand(self.upward_hand))
        object.__setattr__(self, "downward_hand", as_hand(self.downward_hand))

    def hand_of(self, side: RelativeSide) -> Hand:
        return self.upward_hand if side is RelativeSide.UPWARD else self.downward_hand

    def _with_hand(self, side: RelativeSide, hand: Hand) -> Field:
        if side is RelativeSide.UPWARD:
            return replace(self, upward_hand=hand)
        return replace(self, downward_hand=hand)

    def insert_into_hand(
        self, color: Color, profession: Profession, side: RelativeSide
    ) -> Field:
        """Add a captured piece to the end of `side`'s hand"""
        return self._with_hand(side, with_added(self.hand_of(side), color, profession))

    def remove_from_hand(
        self, color: Color, profession: Profession, side: RelativeSide
    ) -> Optional[Field]:
        """First matching piece taken out of `side`'s hand. None if there is none."""
        hand = with_first_match_removed(self.hand_of(side), color, profession)
        if hand is None:
            return None
        return self._with_hand(side, hand)

    def rotated(self) -> Field:
        """The same field, as seen by the other player"""
        return Field(
            board=rotate_board(self.board),
            upward_hand=self.downward_hand,
            downward_hand=self.upward_hand,
        )
