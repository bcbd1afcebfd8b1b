"""Field writing for ``Key:Value`` sections."""

from __future__ import annotations

from typing import Any

from .typedef import FieldKind


def serialize_field(name: str, value: Any, kind: FieldKind, with_space: bool) -> str | None:
    """Render one ``name:value`` line, or ``None`` when *value* is the default.

    A default value is never written, so after a round trip it cannot be told
    apart from a field that was missing in the source.
    """
    if value == kind.default():
        return None
    sep = ": " if with_space else ":"
    return f"{name}{sep}{kind.format(value)}\n"


def write_field(buf: list[str], name: str, value: Any, kind: FieldKind, with_space: bool) -> None:
    """Append the line for *name* to *buf* unless *value* is the default."""
    line = serialize_field(name, value, kind, with_space)
    if line is not None:
        buf.append(line)
