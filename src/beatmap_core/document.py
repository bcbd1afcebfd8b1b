"""Document — a whole beatmap, parsed from or serialized to text."""

from __future__ import annotations

from dataclasses import dataclass, field

from .hit_objects import HitObject
from .lists import parse_list, serialize_list
from .model import Event, TimingPoint
from .reader import (
    COLOURS,
    DEFAULT_FORMAT_VERSION,
    DIFFICULTY,
    EDITOR,
    EVENTS,
    FORMAT_VERSION_PREFIX,
    GENERAL,
    HIT_OBJECTS,
    METADATA,
    TIMING_POINTS,
    read_format_version,
    split_sections,
)
from .sections import (
    Colours,
    DifficultySection,
    EditorSection,
    GeneralSection,
    MetadataSection,
)


@dataclass
class Document:
    """Owns every section of one beatmap."""

    general: GeneralSection = field(default_factory=GeneralSection)
    editor: EditorSection = field(default_factory=EditorSection)
    metadata: MetadataSection = field(default_factory=MetadataSection)
    difficulty: DifficultySection = field(default_factory=DifficultySection)
    events: list[Event] = field(default_factory=list)
    timing_points: list[TimingPoint] = field(default_factory=list)
    colours: Colours = field(default_factory=Colours)
    hit_objects: list[HitObject] = field(default_factory=list)
    format_version: int = DEFAULT_FORMAT_VERSION

    # -- Parsing ---------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Document:
        """Parse a complete beatmap.

        Either every mandatory section parses or the first error propagates;
        no partially filled Document is ever returned.
        """
        bodies = split_sections(text)
        timing_body = bodies[TIMING_POINTS]
        colours_body = bodies[COLOURS]
        version = read_format_version(text)

        return cls(
            general=GeneralSection.parse(bodies[GENERAL]),
            editor=EditorSection.parse(bodies[EDITOR]),
            metadata=MetadataSection.parse(bodies[METADATA]),
            difficulty=DifficultySection.parse(bodies[DIFFICULTY]),
            events=parse_list(bodies[EVENTS], Event.parse),
            timing_points=parse_list(timing_body, TimingPoint.parse) if timing_body is not None else [],
            colours=Colours.parse(colours_body) if colours_body is not None else Colours(),
            hit_objects=parse_list(bodies[HIT_OBJECTS], HitObject.parse),
            format_version=version if version is not None else DEFAULT_FORMAT_VERSION,
        )

    # -- Serialization ---------------------------------------------------

    def serialize(self) -> str:
        sections = (
            (GENERAL, self.general.serialize()),
            (EDITOR, self.editor.serialize()),
            (METADATA, self.metadata.serialize()),
            (DIFFICULTY, self.difficulty.serialize()),
            (EVENTS, serialize_list(self.events)),
            (TIMING_POINTS, serialize_list(self.timing_points)),
            (COLOURS, self.colours.serialize()),
            (HIT_OBJECTS, serialize_list(self.hit_objects)),
        )
        blocks = [f"{header}\n{body}" for header, body in sections]
        return f"{FORMAT_VERSION_PREFIX}{self.format_version}\n\n" + "\n".join(blocks)

    def __str__(self) -> str:
        return self.serialize()


def parse(text: str) -> Document:
    return Document.parse(text)


def serialize(document: Document) -> str:
    return document.serialize()
