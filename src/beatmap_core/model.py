"""Data model for the list records: timing points, events and colours."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .errors import DomainValueError, InvalidFormat, NotValidPair, ScriptingRow
from .getter import convert
from .lists import reject_commentary
from .values import (
    SampleSet,
    TimingEffects,
    format_bool,
    format_flags,
    format_float,
    parse_bool,
    parse_flags,
    parse_float,
    parse_int,
)


def _split_commas(line: str) -> list[str]:
    return [part.strip() for part in line.strip().split(",")]


# ---------------------------------------------------------------------------
# Timing points
# ---------------------------------------------------------------------------

_TIMING_FIELDS = (
    "time",
    "beat_length",
    "meter",
    "sample_set",
    "sample_index",
    "volume",
    "uninherited",
    "effects",
)


@dataclass
class TimingPoint:
    """``time,beatLength,meter,sampleSet,sampleIndex,volume,uninherited,effects``

    Only ``time`` and ``beatLength`` are required on read; writing always
    produces all eight fields.
    """

    time: int = 0
    beat_length: float = 0.0
    meter: int = 4
    sample_set: SampleSet = SampleSet.DEFAULT
    sample_index: int = 0
    volume: int = 100
    uninherited: bool = True
    effects: TimingEffects = TimingEffects(0)

    @property
    def bpm(self) -> float | None:
        if not self.uninherited or self.beat_length <= 0:
            return None
        return 60_000.0 / self.beat_length

    @classmethod
    def parse(cls, line: str) -> TimingPoint:
        reject_commentary(line)
        parts = _split_commas(line)
        if len(parts) < 2:
            raise InvalidFormat(_TIMING_FIELDS[len(parts)])
        if len(parts) > len(_TIMING_FIELDS):
            raise InvalidFormat("timing_point")

        parsers = (
            parse_int,
            parse_float,
            parse_int,
            SampleSet.from_text,
            parse_int,
            parse_int,
            parse_bool,
            lambda s: parse_flags(TimingEffects, s),
        )
        values = {
            name: convert(name, parser, text)
            for name, parser, text in zip(_TIMING_FIELDS, parsers, parts)
        }
        return cls(**values)

    def serialize(self) -> str:
        return ",".join((
            str(self.time),
            format_float(self.beat_length),
            str(self.meter),
            str(self.sample_set),
            str(self.sample_index),
            str(self.volume),
            format_bool(self.uninherited),
            format_flags(self.effects),
        ))

    def __str__(self) -> str:
        return self.serialize()


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass
class Background:
    filename: str = ""
    x_offset: int = 0
    y_offset: int = 0


@dataclass
class Video:
    filename: str = ""
    x_offset: int = 0
    y_offset: int = 0


@dataclass
class Break:
    end_time: int = 0


EventParams = Union[Background, Video, Break]

# Event type code, its word alias, and the payload it selects.
EVENT_TYPES: tuple[tuple[str, str, type], ...] = (
    ("0", "Background", Background),
    ("1", "Video", Video),
    ("2", "Break", Break),
)

_EVENT_BY_NAME: dict[str, type] = {}
for _code, _word, _kind in EVENT_TYPES:
    _EVENT_BY_NAME[_code] = _kind
    _EVENT_BY_NAME[_word] = _kind
_EVENT_CODE: dict[type, str] = {kind: code for code, _, kind in EVENT_TYPES}

# Storyboard objects and commands; recognised only so they can be skipped.
STORYBOARD_OBJECTS = frozenset({"3", "4", "5", "6", "Sprite", "Sample", "Animation"})
STORYBOARD_COMMANDS = frozenset({"F", "M", "MX", "MY", "S", "V", "R", "C", "P", "L", "T"})


def _is_storyboard(line: str, head: str) -> bool:
    return line.startswith("_") or head in STORYBOARD_OBJECTS or head in STORYBOARD_COMMANDS


def _parse_image(kind: type, parts: list[str]):
    if len(parts) < 3:
        raise InvalidFormat("filename")
    x_offset = convert("x_offset", parse_int, parts[3]) if len(parts) > 3 else 0
    y_offset = convert("y_offset", parse_int, parts[4]) if len(parts) > 4 else 0
    return kind(filename=parts[2].strip('"'), x_offset=x_offset, y_offset=y_offset)


@dataclass
class Event:
    """Background, video or break in the ``[Events]`` section."""

    start_time: int = 0
    params: EventParams = field(default_factory=Background)

    @classmethod
    def parse(cls, line: str) -> Event:
        reject_commentary(line)
        parts = _split_commas(line)
        head = parts[0]
        if _is_storyboard(line, head):
            raise ScriptingRow(line)

        kind = _EVENT_BY_NAME.get(head)
        if kind is None:
            raise InvalidFormat("event_type")
        if len(parts) < 2:
            raise InvalidFormat("start_time")
        start_time = convert("start_time", parse_int, parts[1])

        params: EventParams
        if kind is Break:
            if len(parts) < 3:
                raise InvalidFormat("end_time")
            params = Break(end_time=convert("end_time", parse_int, parts[2]))
        else:
            params = _parse_image(kind, parts)

        return cls(start_time=start_time, params=params)

    def serialize(self) -> str:
        p = self.params
        head = f"{_EVENT_CODE[type(p)]},{self.start_time}"
        if isinstance(p, Break):
            return f"{head},{p.end_time}"
        return f'{head},"{p.filename}",{p.x_offset},{p.y_offset}'

    def __str__(self) -> str:
        return self.serialize()


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------

COMBO_SLOTS = 8
SLIDER_TRACK_OVERRIDE = "SliderTrackOverride"
SLIDER_BORDER = "SliderBorder"
_COMBO_PREFIX = "Combo"


def _parse_component(name: str, text: str) -> int:
    value = convert(name, parse_int, text)
    if not 0 <= value <= 255:
        raise DomainValueError("colour component", value, field=name)
    return value


@dataclass
class Rgb:
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def parse(cls, text: str) -> Rgb:
        parts = _split_commas(text)
        if len(parts) != 3:
            raise InvalidFormat("colour")
        return cls(
            red=_parse_component("red", parts[0]),
            green=_parse_component("green", parts[1]),
            blue=_parse_component("blue", parts[2]),
        )

    def __str__(self) -> str:
        return f"{self.red},{self.green},{self.blue}"


@dataclass
class Colour:
    """One ``Name : r,g,b`` line of the ``[Colours]`` section."""

    name: str  # "Combo<N>", "SliderTrackOverride" or "SliderBorder"
    rgb: Rgb = field(default_factory=Rgb)

    @property
    def combo_index(self) -> int | None:
        """1-based combo number, or None for the slider colours."""
        if self.name.startswith(_COMBO_PREFIX):
            return int(self.name[len(_COMBO_PREFIX):])
        return None

    @classmethod
    def parse(cls, line: str) -> Colour:
        reject_commentary(line)
        key, sep, value = line.partition(":")
        if not sep:
            raise NotValidPair(line)
        name = key.strip()

        if name.startswith(_COMBO_PREFIX):
            index = convert("colour", parse_int, name[len(_COMBO_PREFIX):])
            if not 1 <= index <= COMBO_SLOTS:
                raise DomainValueError("combo index", index, field="colour")
            name = f"{_COMBO_PREFIX}{index}"
        elif name not in (SLIDER_TRACK_OVERRIDE, SLIDER_BORDER):
            raise InvalidFormat("colour")

        return cls(name=name, rgb=Rgb.parse(value))

    def serialize(self) -> str:
        return f"{self.name} : {self.rgb}"

    def __str__(self) -> str:
        return self.serialize()
