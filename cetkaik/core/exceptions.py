"""Exceptions raised by the domain and boundary layers"""


class CetkaikError(Exception):
    """Base class, so callers can catch everything this package raises in one go"""


class InvalidCoordinateError(CetkaikError, ValueError):
    """A coordinate label (e.g. 'ZAU') could not be parsed"""


class CoordinateOutOfRangeError(CetkaikError, ValueError):
    """A relative coordinate index fell outside of the 9x9 grid"""


class InvalidBoardError(CetkaikError, ValueError):
    """A board or a hand was constructed with content it cannot hold"""


class UnknownNameError(CetkaikError, KeyError):
    """No color / profession is known under the given name"""


class InvalidRequestError(CetkaikError, ValueError):
    """Transport data failed validation"""
