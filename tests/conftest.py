"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple modules.
"""

import pytest

from cetkaik.board import absolute, relative
from cetkaik.board.absolute import AbsoluteSide
from cetkaik.board.initial import (
    absolute_initial_board,
    relative_initial_board_where_black_king_points_upward,
)
from cetkaik.board.pieces import TAM2, HandPiece, RankedPiece
from cetkaik.board.relative import RelativeCoord, RelativeSide
from cetkaik.core.shared_types import Color, Profession


@pytest.fixture
def relative_start() -> relative.Board:
    return relative_initial_board_where_black_king_points_upward()


@pytest.fixture
def absolute_start() -> absolute.Board:
    return absolute_initial_board()


@pytest.fixture
def sparse_relative_field() -> relative.Field:
    """A mid-game looking field: a few pieces, and both hands hold something.

    The Upward hand holds a duplicate.
    """
    board = (
        relative.Board.empty()
        .with_piece(RelativeCoord(4, 4), TAM2)
        .with_piece(
            RelativeCoord(8, 0),
            RankedPiece(Color.RED, Profession.CLERK, RelativeSide.UPWARD),
        )
        .with_piece(
            RelativeCoord(0, 8),
            RankedPiece(Color.BLACK, Profession.KING, RelativeSide.DOWNWARD),
        )
        .with_piece(
            RelativeCoord(2, 6),
            RankedPiece(Color.BLACK, Profession.TIGER, RelativeSide.UPWARD),
        )
    )
    return relative.Field(
        board=board,
        upward_hand=(
            HandPiece(Color.RED, Profession.PAWN),
            HandPiece(Color.BLACK, Profession.HORSE),
            HandPiece(Color.RED, Profession.PAWN),
        ),
        downward_hand=(HandPiece(Color.BLACK, Profession.GENERAL),),
    )


@pytest.fixture
def sparse_absolute_field() -> absolute.Field:
    board = absolute.Board.from_labels(
        {
            "ZO": TAM2,
            "KA": RankedPiece(Color.BLACK, Profession.CLERK, AbsoluteSide.A),
            "PIA": RankedPiece(Color.RED, Profession.SHAMAN, AbsoluteSide.IA),
            "CU": RankedPiece(Color.RED, Profession.ROOK, AbsoluteSide.IA),
        }
    )
    return absolute.Field(
        board=board,
        a_side_hand=(HandPiece(Color.BLACK, Profession.VESSEL),),
        ia_side_hand=(
            HandPiece(Color.RED, Profession.BISHOP),
            HandPiece(Color.RED, Profession.BISHOP),
        ),
    )
