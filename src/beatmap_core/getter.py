"""Field lookup for ``Key:Value`` sections."""

from __future__ import annotations

from typing import Any, Callable

from .errors import DomainValueError, InvalidFormat, NotValidPair
from .typedef import FieldKind


def convert(field: str, parse: Callable[[str], Any], text: str) -> Any:
    """Run *parse* on *text*, attributing any failure to *field*.

    ``ValueError`` becomes ``InvalidFormat``; a ``DomainValueError`` is
    re-raised with its field filled in.
    """
    try:
        return parse(text)
    except DomainValueError as exc:
        raise DomainValueError(exc.kind, exc.value, field=field) from None
    except ValueError:
        raise InvalidFormat(field) from None


def read_value(line: str) -> str:
    """Return the trimmed text after the first ``:`` of *line*."""
    _, sep, value = line.partition(":")
    if not sep:
        raise NotValidPair(line)
    return value.strip()


def find_line(lines: list[str], name: str) -> str | None:
    """First line containing *name* anywhere in it.

    The match is a plain substring test: looking up ``Countdown`` also hits a
    ``CountdownOffset`` line if that one comes first.
    """
    for line in lines:
        if name in line:
            return line
    return None


def get_field(lines: list[str], name: str, kind: FieldKind) -> Any:
    """Resolve field *name* from the section *lines*.

    - no line mentions *name*: the kind's default
    - matching line without ``:``: ``NotValidPair``
    - value of the wrong type: ``InvalidFormat(name)``
    - value outside an enumeration: ``DomainValueError`` naming *name*
    """
    line = find_line(lines, name)
    if line is None:
        return kind.default()
    return convert(name, kind.parse, read_value(line))
