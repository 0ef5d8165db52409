"""
Boundary layer data model(s).

These objects describe a field in the absolute frame using only transport-safe
primitives: coordinate labels, color/profession names and side labels.
A rules engine or a notation layer can hand game state across a process boundary
without knowing about the domain classes.
Serialization itself (`model_dump()`, `model_dump_json()`) is left to the caller.
"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator, model_validator

from cetkaik.board import absolute
from cetkaik.board.absolute import AbsoluteCoord, AbsoluteSide
from cetkaik.board.pieces import TAM2, HandPiece, RankedPiece
from cetkaik.core.exceptions import InvalidRequestError
from cetkaik.core.shared_types import Color, Profession

SideLabel = str
CoordLabel = str


class PieceModel(BaseModel):
    """Either Tam2 (`special=True`, nothing else set) or a complete ranked piece"""

    special: bool = False
    color: Optional[Color] = None
    profession: Optional[Profession] = None
    side: Optional[SideLabel] = None

    @field_validator("side")
    @classmethod
    def validate_side(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if value not in {side.value for side in AbsoluteSide}:
            raise InvalidRequestError(
                f"Cannot interpret side: {value!r}. Pick 'A' or 'IA'."
            )
        return value

    @model_validator(mode="after")
    def validate_attributes(self) -> Self:
        attributes = (self.color, self.profession, self.side)
        if self.special and any(attribute is not None for attribute in attributes):
            raise InvalidRequestError("Tam2 has no color, profession or side.")
        if not self.special and any(attribute is None for attribute in attributes):
            raise InvalidRequestError(
                "A ranked piece needs a color, a profession and a side."
            )
        return self

    @classmethod
    def from_piece(cls, piece: absolute.Piece) -> Self:
        if isinstance(piece, RankedPiece):
            return cls(
                color=piece.color, profession=piece.profession, side=piece.side.value
            )
        return cls(special=True)

    def to_piece(self) -> absolute.Piece:
        if self.special:
            return TAM2
        return RankedPiece(self.color, self.profession, AbsoluteSide(self.side))


class HandPieceModel(BaseModel):
    color: Color
    profession: Profession

    @classmethod
    def from_hand_piece(cls, piece: HandPiece) -> Self:
        return cls(color=piece.color, profession=piece.profession)

    def to_hand_piece(self) -> HandPiece:
        return HandPiece(self.color, self.profession)


class FieldModel(BaseModel):
    """Transport-safe representation of an `absolute.Field`.

    The board is keyed by coordinate label, e.g. 'ZO'.
    """

    board: dict[CoordLabel, PieceModel]
    a_side_hand: list[HandPieceModel] = []
    ia_side_hand: list[HandPieceModel] = []

    @field_validator("board")
    @classmethod
    def validate_labels(cls, value: dict[str, PieceModel]) -> dict[str, PieceModel]:
        for label in value:
            if not absolute.is_valid_label(label):
                raise InvalidRequestError(f"Cannot interpret {label!r} as a square.")
        return value

    @classmethod
    def from_field(cls, field: absolute.Field) -> Self:
        return cls(
            board={
                coord.to_label(): PieceModel.from_piece(piece)
                for coord, piece in field.board.occupied()
            },
            a_side_hand=[HandPieceModel.from_hand_piece(p) for p in field.a_side_hand],
            ia_side_hand=[
                HandPieceModel.from_hand_piece(p) for p in field.ia_side_hand
            ],
        )

    def to_field(self) -> absolute.Field:
        return absolute.Field(
            board=absolute.Board(
                {
                    AbsoluteCoord.from_label(label): piece.to_piece()
                    for label, piece in self.board.items()
                }
            ),
            a_side_hand=tuple(p.to_hand_piece() for p in self.a_side_hand),
            ia_side_hand=tuple(p.to_hand_piece() for p in self.ia_side_hand),
        )
