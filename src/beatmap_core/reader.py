"""Reader layer: cuts raw beatmap text into lines and section bodies."""

from __future__ import annotations

import re

from .errors import SectionNotFound


GENERAL = "[General]"
EDITOR = "[Editor]"
METADATA = "[Metadata]"
DIFFICULTY = "[Difficulty]"
EVENTS = "[Events]"
TIMING_POINTS = "[TimingPoints]"
COLOURS = "[Colours]"
HIT_OBJECTS = "[HitObjects]"

# Header literal and whether the section is mandatory, in document order.
SECTION_HEADERS: tuple[tuple[str, bool], ...] = (
    (GENERAL, True),
    (EDITOR, True),
    (METADATA, True),
    (DIFFICULTY, True),
    (EVENTS, True),
    (TIMING_POINTS, False),
    (COLOURS, False),
    (HIT_OBJECTS, True),
)

DEFAULT_FORMAT_VERSION = 14
FORMAT_VERSION_PREFIX = "osu file format v"

_VERSION_RE = re.compile(r"^osu file format v(\d+)")


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------

def split_lines(text: str) -> list[str]:
    """Split *text* on newlines, trimming each line and dropping empty ones."""
    lines = (line.strip() for line in text.strip().split("\n"))
    return [line for line in lines if line]


# ---------------------------------------------------------------------------
# Version line
# ---------------------------------------------------------------------------

def read_format_version(text: str) -> int | None:
    """Return N from a leading ``osu file format vN`` line, if there is one."""
    m = _VERSION_RE.match(text.lstrip("\ufeff").lstrip())
    if m is None:
        return None
    return int(m.group(1))


# ---------------------------------------------------------------------------
# Section splitting
# ---------------------------------------------------------------------------

def split_sections(
    text: str,
    headers: tuple[tuple[str, bool], ...] = SECTION_HEADERS,
) -> dict[str, str | None]:
    """Map every header literal to its trimmed section body.

    Each header is located by its first occurrence anywhere in *text*, not
    only at a line start, so a header literal that appears earlier inside
    unrelated data shifts the section boundary. A missing mandatory header
    raises ``SectionNotFound``; a missing optional one maps to ``None``.

    A section runs from its header to the next *found* header in declaration
    order (or to the end of the text). When that next header sits before it
    in the text the body is empty.
    """
    found: list[tuple[str, int]] = []
    bodies: dict[str, str | None] = {}

    for header, mandatory in headers:
        index = text.find(header)
        if index == -1:
            if mandatory:
                raise SectionNotFound(header)
            bodies[header] = None
            continue
        found.append((header, index))

    for i, (header, start) in enumerate(found):
        end = found[i + 1][1] if i + 1 < len(found) else len(text)
        chunk = text[start:end]
        if chunk.startswith(header):
            bodies[header] = chunk[len(header):].strip()
        else:
            bodies[header] = ""

    return {header: bodies[header] for header, _ in headers}
