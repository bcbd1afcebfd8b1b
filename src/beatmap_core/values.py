"""Primitive value codecs: scalars, closed enumerations and flag sets."""

from __future__ import annotations

import re
from enum import Enum, IntEnum, IntFlag

from .errors import DomainValueError


_INT_RE = re.compile(r"^[-+]?\d+$")
_FLOAT_RE = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def parse_int(text: str) -> int:
    text = text.strip()
    if not _INT_RE.match(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def parse_float(text: str) -> float:
    text = text.strip()
    if not _FLOAT_RE.match(text):
        raise ValueError(f"not a number: {text!r}")
    return float(text)


def format_float(value: float) -> str:
    """Integral floats drop their fractional part (``5.0`` → ``5``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


def parse_bool(text: str) -> bool:
    """Accepts ``0``/``1`` as well as ``true``/``false``."""
    text = text.strip()
    if text in ("1", "true"):
        return True
    if text in ("0", "false"):
        return False
    raise ValueError(f"not a boolean: {text!r}")


def format_bool(value: bool) -> str:
    return "1" if value else "0"


def format_value(value: object) -> str:
    """Canonical text for any scalar held by a section field."""
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, float):
        return format_float(value)
    return str(value)


# ---------------------------------------------------------------------------
# Closed enumerations
# ---------------------------------------------------------------------------

def _numeric_member(cls, text: str, kind: str):
    value = parse_int(text)
    try:
        return cls(value)
    except ValueError:
        raise DomainValueError(kind, value) from None


def _word_member(cls, text: str, kind: str):
    text = text.strip()
    try:
        return cls(text)
    except ValueError:
        raise DomainValueError(kind, text) from None


class SampleSet(IntEnum):
    """Numeric sample set used by hit samples and timing points."""

    DEFAULT = 0
    NORMAL = 1
    SOFT = 2
    DRUM = 3

    @classmethod
    def from_text(cls, text: str) -> SampleSet:
        return _numeric_member(cls, text, "sample set")

    def __str__(self) -> str:
        return str(self.value)


class GeneralSampleSet(Enum):
    """Worded sample set of the ``[General]`` section."""

    NORMAL = "Normal"
    SOFT = "Soft"
    DRUM = "Drum"

    @classmethod
    def from_text(cls, text: str) -> GeneralSampleSet:
        return _word_member(cls, text, "sample set")

    def __str__(self) -> str:
        return self.value


class Gamemode(IntEnum):
    STD = 0
    TAIKO = 1
    CTB = 2
    MANIA = 3

    @classmethod
    def from_text(cls, text: str) -> Gamemode:
        return _numeric_member(cls, text, "game mode")

    def __str__(self) -> str:
        return str(self.value)


class Countdown(IntEnum):
    """Speed of the countdown before the first hit object."""

    NONE = 0
    NORMAL = 1
    HALF = 2
    DOUBLE = 3

    @classmethod
    def from_text(cls, text: str) -> Countdown:
        return _numeric_member(cls, text, "countdown")

    def __str__(self) -> str:
        return str(self.value)


class OverlayPosition(Enum):
    """Draw order of hit circle overlays compared to hit numbers."""

    NO_CHANGE = "NoChange"
    BELOW = "Below"
    ABOVE = "Above"

    @classmethod
    def from_text(cls, text: str) -> OverlayPosition:
        return _word_member(cls, text, "overlay position")

    def __str__(self) -> str:
        return self.value


class CurveType(Enum):
    BEZIER = "B"
    CATMULL = "C"
    LINEAR = "L"
    PERFECT = "P"

    @classmethod
    def from_text(cls, text: str) -> CurveType:
        text = text.strip()
        if len(text) != 1:
            raise ValueError(f"not a curve type character: {text!r}")
        return _word_member(cls, text, "curve type")

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Bit-packed flag sets
# ---------------------------------------------------------------------------

def parse_flags(cls, text: str, width: int = 8):
    """Parse an unsigned integer of *width* bits into the flag type *cls*.

    Bits without a named member are kept so that re-encoding is lossless.
    """
    value = parse_int(text)
    if not 0 <= value < (1 << width):
        raise ValueError(f"flag value out of range: {value}")
    return cls(value)


def format_flags(flags: IntFlag) -> str:
    return str(int(flags))


class HitSound(IntFlag):
    NORMAL = 1 << 0
    WHISTLE = 1 << 1
    FINISH = 1 << 2
    CLAP = 1 << 3


class TimingEffects(IntFlag):
    KIAI = 1 << 0
    OMIT_FIRST_BARLINE = 1 << 3


class ObjectTypeFlag(IntFlag):
    HIT_CIRCLE = 1 << 0
    SLIDER = 1 << 1
    NEW_COMBO = 1 << 2
    SPINNER = 1 << 3
    SKIP_ONE = 1 << 4
    SKIP_TWO = 1 << 5
    SKIP_FOUR = 1 << 6
    MANIA_HOLD = 1 << 7
