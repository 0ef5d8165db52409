"""
The standardized starting position (y1 huap1), in both frames.

Each call builds a fresh value: callers never share one another's starting board.
The layout is written out as data, one token per square.
'皇' stands for Tam2 and '.' for an empty square.
"""

from enum import Enum
from typing import Optional

from cetkaik.board import absolute, relative
from cetkaik.board.absolute import AbsoluteCoord, AbsoluteSide, Row
from cetkaik.board.pieces import TAM2, RankedPiece, SpecialPiece
from cetkaik.board.relative import RelativeSide
from cetkaik.core.shared_types import SPECIAL_PIECE_TOKEN, parse_color, parse_profession

EMPTY_TOKEN = "."

# Black king at the bottom, i.e. pointing upward. Row 0 first.
_RELATIVE_LAYOUT: tuple[tuple[RelativeSide, str], ...] = (
    (RelativeSide.DOWNWARD, "黒筆 黒馬 黒車 黒将 赤王 赤将 赤車 赤馬 赤筆"),
    (RelativeSide.DOWNWARD, "赤巫 赤弓 . 赤虎 . 黒虎 . 黒弓 黒巫"),
    (RelativeSide.DOWNWARD, "黒兵 赤兵 黒兵 赤兵 赤船 赤兵 黒兵 赤兵 黒兵"),
    (RelativeSide.DOWNWARD, ". . . . . . . . ."),
    (RelativeSide.DOWNWARD, ". . . . 皇 . . . ."),
    (RelativeSide.UPWARD, ". . . . . . . . ."),
    (RelativeSide.UPWARD, "黒兵 赤兵 黒兵 赤兵 黒船 赤兵 黒兵 赤兵 黒兵"),
    (RelativeSide.UPWARD, "黒巫 黒弓 . 黒虎 . 赤虎 . 赤弓 赤巫"),
    (RelativeSide.UPWARD, "赤筆 赤馬 赤車 赤将 黒王 黒将 黒車 黒馬 黒筆"),
)

# Columns K L N T Z X C M P, left to right. Red king starts on ZA, black king on ZIA.
_ABSOLUTE_LAYOUT: dict[Row, tuple[AbsoluteSide, str]] = {
    Row.A: (AbsoluteSide.A, "黒筆 黒馬 黒車 黒将 赤王 赤将 赤車 赤馬 赤筆"),
    Row.E: (AbsoluteSide.A, "赤巫 赤弓 . 赤虎 . 黒虎 . 黒弓 黒巫"),
    Row.I: (AbsoluteSide.A, "黒兵 赤兵 黒兵 赤兵 赤船 赤兵 黒兵 赤兵 黒兵"),
    Row.O: (AbsoluteSide.A, ". . . . 皇 . . . ."),
    Row.AI: (AbsoluteSide.IA, "黒兵 赤兵 黒兵 赤兵 黒船 赤兵 黒兵 赤兵 黒兵"),
    Row.AU: (AbsoluteSide.IA, "黒巫 黒弓 . 黒虎 . 赤虎 . 赤弓 赤巫"),
    Row.IA: (AbsoluteSide.IA, "赤筆 赤馬 赤車 赤将 黒王 黒将 黒車 黒馬 黒筆"),
}


def _piece_from_token(token: str, side: Enum) -> Optional[SpecialPiece | RankedPiece]:
    """'赤将' -> red general on `side`; '皇' -> Tam2; '.' -> None"""
    if token == EMPTY_TOKEN:
        return None
    if token == SPECIAL_PIECE_TOKEN:
        return TAM2
    color_token, profession_token = token
    return RankedPiece(
        parse_color(color_token), parse_profession(profession_token), side
    )


def relative_initial_board_where_black_king_points_upward() -> relative.Board:
    return relative.Board.from_rows(
        [_piece_from_token(token, side) for token in tokens.split()]
        for side, tokens in _RELATIVE_LAYOUT
    )


def relative_initial_board_where_red_king_points_upward() -> relative.Board:
    black_king_upward = relative_initial_board_where_black_king_points_upward()
    return relative.rotate_board(black_king_upward)


def absolute_initial_board() -> absolute.Board:
    position: dict[AbsoluteCoord, absolute.Piece] = {}
    for row, (side, tokens) in _ABSOLUTE_LAYOUT.items():
        for column, token in zip(absolute.COLUMNS, tokens.split(), strict=True):
            piece: Optional[absolute.Piece] = _piece_from_token(token, side)
            if piece is not None:
                position[AbsoluteCoord(row, column)] = piece
    return absolute.Board(position)


# --- Fields: the starting board with both hands empty
def absolute_initial_field() -> absolute.Field:
    return absolute.Field(board=absolute_initial_board())


def relative_initial_field(red_king_points_upward: bool = False) -> relative.Field:
    board = (
        relative_initial_board_where_red_king_points_upward()
        if red_king_points_upward
        else relative_initial_board_where_black_king_points_upward()
    )
    return relative.Field(board=board)
