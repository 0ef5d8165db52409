"""Unit tests for /cetkaik/board/absolute.py"""

import pytest

from cetkaik.board import absolute
from cetkaik.board.absolute import (
    COLUMNS,
    ROWS,
    AbsoluteCoord,
    AbsoluteSide,
    Board,
    Column,
    Row,
    all_coords,
    distance,
    is_valid_label,
    is_water,
    parse_coord,
    serialize_coord,
)
from cetkaik.board.initial import absolute_initial_board
from cetkaik.board.pieces import TAM2, HandPiece, RankedPiece
from cetkaik.board.relative import RelativeSide
from cetkaik.core.exceptions import (
    InvalidBoardError,
    InvalidCoordinateError,
    UnknownNameError,
)
from cetkaik.core.shared_types import Color, Profession


@pytest.mark.parametrize(
    "label, row, column",
    [
        ("NE", Row.E, Column.N),
        ("ZAU", Row.AU, Column.Z),
        ("KA", Row.A, Column.K),
        ("PIA", Row.IA, Column.P),
        ("ZO", Row.O, Column.Z),
        ("CAI", Row.AI, Column.C),
    ],
)
def test_parse_label(label: str, row: Row, column: Column) -> None:
    coord = parse_coord(label)
    assert coord == AbsoluteCoord(row, column)
    assert serialize_coord(coord) == label


@pytest.mark.parametrize("coord", list(all_coords()))
def test_label_round_trip(coord: AbsoluteCoord) -> None:
    """Every one of the 81 squares survives serialize -> parse"""
    label = coord.to_label()
    assert 2 <= len(label) <= 3
    assert AbsoluteCoord.from_label(label) == coord


@pytest.mark.parametrize(
    "label",
    [
        "",  # empty
        "Z",  # column without row
        "ZAUA",  # too long
        "zo",  # case-sensitive
        "Zo",
        "QA",  # unknown column
        "ZAA",  # unknown row
        "ZII",
        " ZO",  # no whitespace tolerance
        "ZO ",
        "AZ",  # row before column
    ],
)
def test_parse_invalid_label(label: str) -> None:
    assert not is_valid_label(label)
    with pytest.raises(InvalidCoordinateError):
        parse_coord(label)


def test_invalid_label_is_a_value_error() -> None:
    """Callers that only know builtin exceptions can still catch a parse failure"""
    with pytest.raises(ValueError):
        AbsoluteCoord.from_label("XX")


def test_label_orderings() -> None:
    assert [row.value for row in ROWS] == "A E I U O Y AI AU IA".split()
    assert [column.value for column in COLUMNS] == "K L N T Z X C M P".split()
    assert len(set(all_coords())) == 81


# -- Sides --
@pytest.mark.parametrize(
    "label, side", [("A", AbsoluteSide.A), ("IA", AbsoluteSide.IA)]
)
def test_side_from_label(label: str, side: AbsoluteSide) -> None:
    assert AbsoluteSide.from_label(label) is side


@pytest.mark.parametrize("label", ["", "a", "ia", "B", "AI"])
def test_side_from_invalid_label(label: str) -> None:
    with pytest.raises(UnknownNameError):
        AbsoluteSide.from_label(label)


# -- Geometry --
def test_water_squares() -> None:
    expected = {"NO", "TO", "ZO", "XO", "CO", "ZI", "ZU", "ZY", "ZAI"}
    water = {coord.to_label() for coord in all_coords() if is_water(coord)}
    assert water == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("ZO", "ZO", 0),
        ("KA", "PIA", 8),
        ("KA", "KIA", 8),
        ("NE", "TI", 1),
        ("ZO", "KA", 4),
        ("XY", "LE", 4),
    ],
)
def test_distance(a: str, b: str, expected: int) -> None:
    coord_a, coord_b = parse_coord(a), parse_coord(b)
    assert distance(coord_a, coord_b) == expected
    assert distance(coord_b, coord_a) == expected


# -- Board --
def test_empty_board() -> None:
    board = Board()
    assert len(board) == 0
    assert board.piece(parse_coord("ZO")) is None


def test_board_lookup() -> None:
    general = RankedPiece(Color.RED, Profession.GENERAL, AbsoluteSide.A)
    board = Board.from_labels({"ZO": TAM2, "TA": general})
    assert board.piece(parse_coord("ZO")) == TAM2
    assert board.piece(parse_coord("TA")) == general
    assert board.piece(parse_coord("TE")) is None
    assert parse_coord("TA") in board
    assert board.locate_tam2() == parse_coord("ZO")


def test_board_is_not_aliased_to_input() -> None:
    """Changing the dict a board was built from must not change the board"""
    position: dict[AbsoluteCoord, absolute.Piece] = {parse_coord("ZO"): TAM2}
    board = Board(position)
    position[parse_coord("KA")] = TAM2
    assert len(board) == 1


def test_with_and_without_piece() -> None:
    pawn = RankedPiece(Color.BLACK, Profession.PAWN, AbsoluteSide.IA)
    board = Board.from_labels({"ZO": TAM2})
    added = board.with_piece(parse_coord("KAI"), pawn)
    assert len(board) == 1
    assert len(added) == 2
    assert added.piece(parse_coord("KAI")) == pawn

    removed = added.without_piece(parse_coord("ZO"))
    assert removed.locate_tam2() is None
    assert added.locate_tam2() == parse_coord("ZO")


def test_locate_pieces(absolute_start: Board) -> None:
    red_king = absolute_start.locate_pieces(color=Color.RED, profession=Profession.KING)
    black_king = absolute_start.locate_pieces(
        color=Color.BLACK, profession=Profession.KING
    )
    assert red_king == [parse_coord("ZA")]
    assert black_king == [parse_coord("ZIA")]
    assert len(absolute_start.locate_pieces(side=AbsoluteSide.A)) == 24
    assert len(absolute_start.locate_pieces(side=AbsoluteSide.IA)) == 24
    assert len(absolute_start.locate_pieces(profession=Profession.PAWN)) == 16


def test_board_rejects_non_coordinates() -> None:
    with pytest.raises(InvalidBoardError):
        Board({"ZO": TAM2})  # type: ignore[dict-item]


@pytest.mark.parametrize(
    "piece",
    [
        RankedPiece(Color.RED, Profession.KING, RelativeSide.UPWARD),  # relative side
        HandPiece(Color.RED, Profession.KING),  # not on the board
        None,  # empty squares have no entry
    ],
)
def test_board_rejects_foreign_pieces(piece: object) -> None:
    with pytest.raises(InvalidBoardError):
        Board({parse_coord("ZO"): piece})  # type: ignore[dict-item]
    with pytest.raises(InvalidBoardError):
        Board().with_piece(parse_coord("ZO"), piece)  # type: ignore[arg-type]


def test_board_equality_ignores_insertion_order() -> None:
    pawn = RankedPiece(Color.BLACK, Profession.PAWN, AbsoluteSide.IA)
    one = Board.from_labels({"ZO": TAM2, "KAI": pawn})
    other = Board.from_labels({"KAI": pawn, "ZO": TAM2})
    assert one == other


def test_board_position_is_read_only() -> None:
    board = Board.from_labels({"ZO": TAM2})
    with pytest.raises(TypeError):
        board.position[parse_coord("KA")] = TAM2  # type: ignore[index]
    assert len(board) == 1


def test_field_update_does_not_leak_into_old_field() -> None:
    """A field and its updated copies share one board, which nobody can change"""
    king = RankedPiece(Color.RED, Profession.KING, AbsoluteSide.A)
    old = absolute.Field(Board.from_labels({"ZO": TAM2}))
    new = old.insert_into_hand(Color.RED, Profession.PAWN, AbsoluteSide.A)
    with pytest.raises(TypeError):
        new.board.position[parse_coord("KA")] = king  # type: ignore[index]
    moved = absolute.Field(new.board.with_piece(parse_coord("KA"), king))
    assert len(moved.board) == 2
    assert len(old.board) == 1
    assert old.a_side_hand == ()


def test_boards_and_fields_are_hashable(
    absolute_start: Board, sparse_absolute_field: absolute.Field
) -> None:
    assert hash(Board()) == hash(Board())
    assert hash(absolute_start) == hash(absolute_initial_board())
    assert len({sparse_absolute_field, sparse_absolute_field}) == 1
