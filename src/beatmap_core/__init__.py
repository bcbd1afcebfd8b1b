"""Beatmap Core — parser and serializer for the .osu beatmap text format."""

from .document import Document, parse, serialize
from .errors import (
    BeatmapCoreError,
    CommentaryRow,
    DomainValueError,
    FormatError,
    InvalidFormat,
    NotValidPair,
    ScriptingRow,
    SectionNotFound,
    SkippableRow,
    StructuralError,
)
from .files import read_beatmap, write_beatmap
from .hit_objects import (
    EdgeSounds,
    HitCircle,
    HitObject,
    HitSample,
    ManiaHold,
    Slider,
    SliderPoint,
    Spinner,
)
from .model import Background, Break, Colour, Event, Rgb, TimingPoint, Video
from .sections import (
    Colours,
    DifficultySection,
    EditorSection,
    GeneralSection,
    MetadataSection,
)
from .values import (
    Countdown,
    CurveType,
    Gamemode,
    GeneralSampleSet,
    HitSound,
    ObjectTypeFlag,
    OverlayPosition,
    SampleSet,
    TimingEffects,
)

__all__ = [
    "parse",
    "serialize",
    "read_beatmap",
    "write_beatmap",
    "Document",
    "GeneralSection",
    "EditorSection",
    "MetadataSection",
    "DifficultySection",
    "Colours",
    "Colour",
    "Rgb",
    "Event",
    "Background",
    "Video",
    "Break",
    "TimingPoint",
    "HitObject",
    "HitCircle",
    "Slider",
    "Spinner",
    "ManiaHold",
    "HitSample",
    "SliderPoint",
    "EdgeSounds",
    "SampleSet",
    "GeneralSampleSet",
    "Gamemode",
    "Countdown",
    "OverlayPosition",
    "CurveType",
    "HitSound",
    "TimingEffects",
    "ObjectTypeFlag",
    "BeatmapCoreError",
    "StructuralError",
    "SectionNotFound",
    "NotValidPair",
    "FormatError",
    "InvalidFormat",
    "DomainValueError",
    "SkippableRow",
    "CommentaryRow",
    "ScriptingRow",
]
