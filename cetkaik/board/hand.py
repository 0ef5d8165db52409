"""
The hand (hop1zuo1): the captured pieces a player holds off-board.

A hand is an ordered tuple of `HandPiece`, in order of capture. Duplicates are allowed.
Both frames keep one hand per side in their `Field`,
and use the helpers below to produce updated copies.
"""

import logging
from typing import Iterable, Optional

from cetkaik.board.pieces import HandPiece
from cetkaik.core.exceptions import InvalidBoardError
from cetkaik.core.shared_types import Color, Profession

_LOGGER = logging.getLogger(__name__)

Hand = tuple[HandPiece, ...]


def as_hand(pieces: Iterable[HandPiece]) -> Hand:
    """Freeze an iterable into a hand.

    Only `HandPiece`s are accepted: in particular Tam2 can never be held.
    """
    hand = tuple(pieces)
    for piece in hand:
        if not isinstance(piece, HandPiece):
            raise InvalidBoardError(
                f"Only captured ranked pieces can be held in hand, got {piece!r}"
            )
    return hand


def with_added(hand: Hand, color: Color, profession: Profession) -> Hand:
    return (*hand, HandPiece(color, profession))


def with_first_match_removed(
    hand: Hand, color: Color, profession: Profession
) -> Optional[Hand]:
    """Drop the earliest captured piece with the given color and profession.

    Returns None if the hand holds no such piece.
    The hand that was passed in is never changed.
    """
    wanted = HandPiece(color, profession)
    for index, piece in enumerate(hand):
        if piece == wanted:
            return hand[:index] + hand[index + 1 :]
    _LOGGER.debug("No %s %s in hand %s", color, profession, hand)
    return None
