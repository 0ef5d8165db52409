"""Defines the pieces: Tam2, ranked pieces on the board, and the pieces held in a hand.

A ranked piece is generic over its side.
The absolute frame tags it with an `AbsoluteSide`,
the relative frame with a `RelativeSide`.
Everything else about a piece is shared between both frames.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Generic, Mapping, Optional, TypeVar

from cetkaik.core.shared_types import (
    COLOR_TO_TOKEN,
    PROFESSION_TO_TOKEN,
    SPECIAL_PIECE_TOKEN,
    Color,
    Profession,
)

SideT = TypeVar("SideT", bound=Enum)


@dataclass(frozen=True, slots=True)
class SpecialPiece:
    """Tam2 (皇): owned by neither side and movable by both players. Never captured."""

    def is_special(self) -> bool:
        return True

    def has_color(self, color: Color) -> bool:
        return False

    def has_profession(self, profession: Profession) -> bool:
        return False

    def has_side(self, side: Enum) -> bool:
        return False

    def __str__(self) -> str:
        return SPECIAL_PIECE_TOKEN


TAM2 = SpecialPiece()


@dataclass(frozen=True)
class RankedPiece(Generic[SideT]):
    color: Color
    profession: Profession
    side: SideT

    def is_special(self) -> bool:
        return False

    def has_color(self, color: Color) -> bool:
        return self.color == color

    def has_profession(self, profession: Profession) -> bool:
        return self.profession == profession

    def has_side(self, side: Enum) -> bool:
        # enum identity: an AbsoluteSide never matches a RelativeSide
        return self.side is side

    def with_side(self, side: Enum) -> RankedPiece:
        return replace(self, side=side)

    def to_hand_piece(self) -> HandPiece:
        """What ends up in the capturing player's hand: the side tag is dropped"""
        return HandPiece(self.color, self.profession)

    def __str__(self) -> str:
        return serialize_piece(self)


@dataclass(frozen=True, slots=True)
class HandPiece:
    """A captured piece, waiting off-board. Which hand holds it determines its owner."""

    color: Color
    profession: Profession

    def on_side(self, side: SideT) -> RankedPiece[SideT]:
        return RankedPiece(self.color, self.profession, side)


# --- Module level helpers: callers need not care which piece class they hold
def is_special(piece: SpecialPiece | RankedPiece) -> bool:
    return piece.is_special()


def has_color(piece: SpecialPiece | RankedPiece, color: Color) -> bool:
    return piece.has_color(color)


def has_profession(piece: SpecialPiece | RankedPiece, profession: Profession) -> bool:
    return piece.has_profession(profession)


def has_side(piece: SpecialPiece | RankedPiece, side: Enum) -> bool:
    return piece.has_side(side)


def serialize_piece(
    piece: SpecialPiece | RankedPiece,
    side_markers: Optional[Mapping[Enum, str]] = None,
) -> str:
    """Display token: '皇' for Tam2, color + profession glyph otherwise (e.g. '赤将').

    With `side_markers`, the marker for the piece's side is appended (e.g. '赤将↓').
    """
    if isinstance(piece, SpecialPiece):
        return SPECIAL_PIECE_TOKEN
    token = f"{COLOR_TO_TOKEN[piece.color]}{PROFESSION_TO_TOKEN[piece.profession]}"
    if side_markers is not None:
        token += side_markers[piece.side]
    return token
