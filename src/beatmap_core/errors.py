"""Error taxonomy for Beatmap Core."""

from __future__ import annotations


class BeatmapCoreError(Exception):
    """Base class for every error raised while parsing a beatmap."""


# ---------------------------------------------------------------------------
# Structural errors: the grammar itself is broken
# ---------------------------------------------------------------------------

class StructuralError(BeatmapCoreError):
    pass


class SectionNotFound(StructuralError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Mandatory section {name} not found")


class NotValidPair(StructuralError):
    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Tried to read a line which isn't a 'key:value' pair: {line!r}")


# ---------------------------------------------------------------------------
# Format errors: a value is present but is not of its declared type
# ---------------------------------------------------------------------------

class FormatError(BeatmapCoreError):
    pass


class InvalidFormat(FormatError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid data format for the following field: {field}")


# ---------------------------------------------------------------------------
# Domain errors: right primitive type, outside the enumeration
# ---------------------------------------------------------------------------

class DomainValueError(BeatmapCoreError):
    def __init__(self, kind: str, value: object, field: str | None = None) -> None:
        self.kind = kind
        self.value = value
        self.field = field
        where = f" for field {field}" if field else ""
        super().__init__(f"Unexpected {kind} value{where}: {value!r}")


# ---------------------------------------------------------------------------
# Skippable rows: not errors; consumed by the list codec
# ---------------------------------------------------------------------------

class SkippableRow(Exception):
    """Signal raised by a row parser for a line that carries no record."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(line)


class CommentaryRow(SkippableRow):
    pass


class ScriptingRow(SkippableRow):
    pass
