"""
Type definitions used across layers
"""

from enum import StrEnum

from cetkaik.core.exceptions import UnknownNameError


class Color(StrEnum):
    RED = "red"
    BLACK = "black"


class Profession(StrEnum):
    VESSEL = "vessel"
    PAWN = "pawn"
    ROOK = "rook"
    BISHOP = "bishop"
    TIGER = "tiger"
    HORSE = "horse"
    CLERK = "clerk"
    SHAMAN = "shaman"
    GENERAL = "general"
    KING = "king"


# --- Display tokens. One glyph each: a ranked piece renders as two characters (赤将)
COLOR_TO_TOKEN: dict[Color, str] = {
    Color.RED: "赤",
    Color.BLACK: "黒",
}

PROFESSION_TO_TOKEN: dict[Profession, str] = {
    Profession.VESSEL: "船",
    Profession.PAWN: "兵",
    Profession.ROOK: "弓",
    Profession.BISHOP: "車",
    Profession.TIGER: "虎",
    Profession.HORSE: "馬",
    Profession.CLERK: "筆",
    Profession.SHAMAN: "巫",
    Profession.GENERAL: "将",
    Profession.KING: "王",
}

SPECIAL_PIECE_TOKEN = "皇"


# --- Synonyms. Keys are normalized (stripped, lowercase).
# A new spelling is a new entry, not new code.
COLOR_SYNONYMS: dict[str, Color] = {
    "red": Color.RED,
    "kok1": Color.RED,
    "赤": Color.RED,
    "black": Color.BLACK,
    "huok2": Color.BLACK,
    "黒": Color.BLACK,
}

PROFESSION_SYNONYMS: dict[str, Profession] = {
    # english / romanized / glyph / linzklar
    "vessel": Profession.VESSEL,
    "nuak1": Profession.VESSEL,
    "船": Profession.VESSEL,
    "felkana": Profession.VESSEL,
    "pawn": Profession.PAWN,
    "kauk2": Profession.PAWN,
    "兵": Profession.PAWN,
    "elmer": Profession.PAWN,
    "rook": Profession.ROOK,
    "gua2": Profession.ROOK,
    "弓": Profession.ROOK,
    "gustuer": Profession.ROOK,
    "bishop": Profession.BISHOP,
    "kaun1": Profession.BISHOP,
    "車": Profession.BISHOP,
    "vadyrd": Profession.BISHOP,
    "tiger": Profession.TIGER,
    "dau2": Profession.TIGER,
    "虎": Profession.TIGER,
    "stistyst": Profession.TIGER,
    "horse": Profession.HORSE,
    "maun1": Profession.HORSE,
    "馬": Profession.HORSE,
    "dodor": Profession.HORSE,
    "clerk": Profession.CLERK,
    "kua2": Profession.CLERK,
    "筆": Profession.CLERK,
    "kua": Profession.CLERK,
    "shaman": Profession.SHAMAN,
    "tuk2": Profession.SHAMAN,
    "巫": Profession.SHAMAN,
    "terlsk": Profession.SHAMAN,
    "general": Profession.GENERAL,
    "uai1": Profession.GENERAL,
    "将": Profession.GENERAL,
    "varxle": Profession.GENERAL,
    "king": Profession.KING,
    "io": Profession.KING,
    "王": Profession.KING,
    "ales": Profession.KING,
}


def _normalize(name: str) -> str:
    return name.strip().lower()


def parse_color(name: str) -> Color:
    """Look up a color by any of its known spellings ('red', 'kok1', '赤', ...)"""
    try:
        return COLOR_SYNONYMS[_normalize(name)]
    except KeyError:
        raise UnknownNameError(f"Unknown color name: {name!r}") from None


def parse_profession(name: str) -> Profession:
    """Look up a profession by any known spelling ('general', 'uai1', '将', ...)"""
    try:
        return PROFESSION_SYNONYMS[_normalize(name)]
    except KeyError:
        raise UnknownNameError(f"Unknown profession name: {name!r}") from None
