"""FieldKind and FieldDef: declarative tables for field-block sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .values import (
    format_bool,
    format_float,
    format_value,
    parse_bool,
    parse_float,
    parse_int,
)


@dataclass(frozen=True)
class FieldKind:
    """How one scalar type is read, written and defaulted."""

    name: str
    parse: Callable[[str], Any]
    format: Callable[[Any], str]
    default_factory: Callable[[], Any]

    def default(self) -> Any:
        return self.default_factory()


@dataclass(frozen=True)
class FieldDef:
    key: str   # name as written in the file, e.g. "AudioLeadIn"
    attr: str  # attribute on the section object, e.g. "audio_lead_in"
    kind: FieldKind


# ---------------------------------------------------------------------------
# Built-in kinds
# ---------------------------------------------------------------------------

def _parse_int_list(text: str) -> list[int]:
    if not text:
        return []
    return [parse_int(part) for part in text.split(",")]


def _format_int_list(values: list[int]) -> str:
    return ",".join(str(v) for v in values)


def _parse_word_list(text: str) -> list[str]:
    return text.split()


def _format_word_list(values: list[str]) -> str:
    return " ".join(values)


TEXT = FieldKind("text", str, str, str)
INT = FieldKind("int", parse_int, str, int)
FLOAT = FieldKind("float", parse_float, format_float, float)
BOOL = FieldKind("bool", parse_bool, format_bool, bool)
INT_LIST = FieldKind("int list", _parse_int_list, _format_int_list, list)
WORD_LIST = FieldKind("word list", _parse_word_list, _format_word_list, list)


def enum_kind(cls, default) -> FieldKind:
    """Kind for an enumeration exposing ``from_text`` and canonical ``str``."""
    return FieldKind(cls.__name__, cls.from_text, format_value, lambda: default)
