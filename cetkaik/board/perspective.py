"""
Conversions between the absolute frame and the relative frame.

A `Perspective` names the absolute player who is the relative frame's viewer ("Upward"):

* IA_IS_DOWN_AND_POINTS_UPWARD: the IA side sits at the bottom of the view,
  its pieces point up. Relative index i is simply the i-th row/column label
  (row 0 = A, row 8 = IA).
* IA_IS_UP_AND_POINTS_DOWNWARD: the A side is the viewer. The view is rotated
  by 180 degrees, so relative index i is the (8 - i)-th label.

Every function comes as a pair (`*_to_absolute`, `*_to_relative`).
For a fixed perspective the two are inverses.
Pieces on the board and pieces in hand follow the same side mapping.
"""

import logging
from enum import Enum

from cetkaik.board import absolute, relative
from cetkaik.board.absolute import COLUMN_INDEX, COLUMNS, ROW_INDEX, ROWS, AbsoluteSide
from cetkaik.board.pieces import RankedPiece
from cetkaik.board.relative import BOARD_DIMENSIONS, RelativeSide

_LOGGER = logging.getLogger(__name__)


class Perspective(Enum):
    IA_IS_DOWN_AND_POINTS_UPWARD = "ia_is_down_and_points_upward"
    IA_IS_UP_AND_POINTS_DOWNWARD = "ia_is_up_and_points_downward"

    @property
    def ia_is_down(self) -> bool:
        return self is Perspective.IA_IS_DOWN_AND_POINTS_UPWARD

    @property
    def upward_side(self) -> AbsoluteSide:
        """The absolute side that is the viewer under this perspective"""
        return AbsoluteSide.IA if self.ia_is_down else AbsoluteSide.A


# Relative indices coincide with the label order, no rotation needed
CANONICAL_PERSPECTIVE = Perspective.IA_IS_DOWN_AND_POINTS_UPWARD


# --- Sides ---
def side_to_absolute(side: RelativeSide, perspective: Perspective) -> AbsoluteSide:
    if side is RelativeSide.UPWARD:
        return perspective.upward_side
    if side is RelativeSide.DOWNWARD:
        return ~perspective.upward_side
    raise TypeError(f"Expected a RelativeSide, got {side!r}")


def side_to_relative(side: AbsoluteSide, perspective: Perspective) -> RelativeSide:
    if not isinstance(side, AbsoluteSide):
        raise TypeError(f"Expected an AbsoluteSide, got {side!r}")
    if side is perspective.upward_side:
        return RelativeSide.UPWARD
    return RelativeSide.DOWNWARD


# --- Pieces ---
def piece_to_absolute(
    piece: relative.Piece, perspective: Perspective
) -> absolute.Piece:
    """Tam2 stays Tam2. A ranked piece keeps color and profession, its side changes."""
    if isinstance(piece, RankedPiece):
        return piece.with_side(side_to_absolute(piece.side, perspective))
    return piece


def piece_to_relative(
    piece: absolute.Piece, perspective: Perspective
) -> relative.Piece:
    if isinstance(piece, RankedPiece):
        return piece.with_side(side_to_relative(piece.side, perspective))
    return piece


# --- Coordinates ---
def _flip_index(index: int, perspective: Perspective) -> int:
    return index if perspective.ia_is_down else BOARD_DIMENSIONS[0] - 1 - index


def coord_to_absolute(
    coord: relative.RelativeCoord, perspective: Perspective
) -> absolute.AbsoluteCoord:
    """ex) RelativeCoord(2, 4) with IA at the bottom is IZ (row I, column Z)"""
    return absolute.AbsoluteCoord(
        ROWS[_flip_index(coord.row, perspective)],
        COLUMNS[_flip_index(coord.col, perspective)],
    )


def coord_to_relative(
    coord: absolute.AbsoluteCoord, perspective: Perspective
) -> relative.RelativeCoord:
    return relative.RelativeCoord(
        _flip_index(ROW_INDEX[coord.row], perspective),
        _flip_index(COLUMN_INDEX[coord.column], perspective),
    )


# --- Boards ---
def board_to_absolute(
    board: relative.Board, perspective: Perspective
) -> absolute.Board:
    """Visit all 81 cells; empty cells get no entry in the sparse result"""
    return absolute.Board(
        {
            coord_to_absolute(coord, perspective): piece_to_absolute(piece, perspective)
            for coord, piece in board.occupied()
        }
    )


def board_to_relative(
    board: absolute.Board, perspective: Perspective
) -> relative.Board:
    """Probe every one of the 81 squares, so the result is always a full 9x9 grid"""
    num_rows, num_cols = BOARD_DIMENSIONS
    rows = []
    for row in range(num_rows):
        cells = []
        for col in range(num_cols):
            square = coord_to_absolute(relative.RelativeCoord(row, col), perspective)
            piece = board.piece(square)
            cells.append(
                None if piece is None else piece_to_relative(piece, perspective)
            )
        rows.append(cells)
    return relative.Board.from_rows(rows)


# --- Fields ---
def field_to_absolute(
    field: relative.Field, perspective: Perspective
) -> absolute.Field:
    """Board as in `board_to_absolute`.

    The Upward hand goes to whichever absolute side is Upward, and vice versa.
    """
    _LOGGER.debug(
        "Converting relative field to absolute, perspective=%s", perspective.name
    )
    hands = {
        side_to_absolute(RelativeSide.UPWARD, perspective): field.upward_hand,
        side_to_absolute(RelativeSide.DOWNWARD, perspective): field.downward_hand,
    }
    return absolute.Field(
        board=board_to_absolute(field.board, perspective),
        a_side_hand=hands[AbsoluteSide.A],
        ia_side_hand=hands[AbsoluteSide.IA],
    )


def field_to_relative(
    field: absolute.Field, perspective: Perspective
) -> relative.Field:
    _LOGGER.debug(
        "Converting absolute field to relative, perspective=%s", perspective.name
    )
    upward = side_to_absolute(RelativeSide.UPWARD, perspective)
    return relative.Field(
        board=board_to_relative(field.board, perspective),
        upward_hand=field.hand_of(upward),
        downward_hand=field.hand_of(~upward),
    )
