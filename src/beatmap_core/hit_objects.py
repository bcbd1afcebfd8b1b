"""Hit objects: the ``[HitObjects]`` variant record codec.

A hit object line reads::

    x,y,time,type,hitSound[,shape fields],hitSample

``type`` is a bit field. One of four shape bits picks the payload layout;
bit 2 starts a new combo and bits 4–6 count combo colours to skip.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .errors import InvalidFormat
from .getter import convert
from .lists import reject_commentary
from .values import (
    CurveType,
    HitSound,
    ObjectTypeFlag,
    SampleSet,
    format_flags,
    format_float,
    parse_flags,
    parse_float,
    parse_int,
)


# ---------------------------------------------------------------------------
# Hit sample
# ---------------------------------------------------------------------------

@dataclass
class HitSample:
    normal_set: SampleSet = SampleSet.DEFAULT
    addition_set: SampleSet = SampleSet.DEFAULT
    index: int = 0
    volume: int = 0
    filename: str = ""

    @classmethod
    def parse(cls, text: str) -> HitSample:
        """``normalSet:additionSet:index:volume[:filename]``"""
        parts = [p.strip() for p in text.strip().split(":", 4)]
        if len(parts) < 4:
            raise InvalidFormat("hit_sample")
        return cls(
            normal_set=convert("normal_set", SampleSet.from_text, parts[0]),
            addition_set=convert("addition_set", SampleSet.from_text, parts[1]),
            index=convert("index", parse_int, parts[2]),
            volume=convert("volume", parse_int, parts[3]),
            filename=parts[4] if len(parts) == 5 else "",
        )

    def serialize(self) -> str:
        return f"{self.normal_set}:{self.addition_set}:{self.index}:{self.volume}:{self.filename}"

    def __str__(self) -> str:
        return self.serialize()


# ---------------------------------------------------------------------------
# Slider parts
# ---------------------------------------------------------------------------

@dataclass
class SliderPoint:
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> SliderPoint:
        x, sep, y = text.partition(":")
        if not sep:
            raise InvalidFormat("curve_points")
        return cls(convert("curve_points", parse_int, x), convert("curve_points", parse_int, y))

    def __str__(self) -> str:
        return f"{self.x}:{self.y}"


@dataclass
class EdgeSounds:
    """Per-edge hitsounds and per-edge ``normalSet:additionSet`` pairs."""

    sounds: list[int] = field(default_factory=list)
    sets: list[tuple[int, int]] = field(default_factory=list)

    @classmethod
    def parse(cls, sounds_text: str, sets_text: str) -> EdgeSounds:
        sounds = [
            convert("edge_sounds", parse_int, s) for s in sounds_text.split("|")
        ] if sounds_text else []
        sets: list[tuple[int, int]] = []
        if sets_text:
            for pair in sets_text.split("|"):
                a, sep, b = pair.partition(":")
                if not sep:
                    raise InvalidFormat("edge_sets")
                sets.append((convert("edge_sets", parse_int, a), convert("edge_sets", parse_int, b)))
        return cls(sounds=sounds, sets=sets)

    def __bool__(self) -> bool:
        return bool(self.sounds or self.sets)

    def __str__(self) -> str:
        sounds = "|".join(str(s) for s in self.sounds)
        sets = "|".join(f"{a}:{b}" for a, b in self.sets)
        return f"{sounds},{sets}"


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

@dataclass
class HitCircle:
    pass


@dataclass
class Slider:
    curve_type: CurveType = CurveType.LINEAR
    curve_points: list[SliderPoint] = field(default_factory=list)
    slides: int = 0
    length: float = 0.0
    edge_sounds: EdgeSounds = field(default_factory=EdgeSounds)


@dataclass
class Spinner:
    end_time: int = 0


@dataclass
class ManiaHold:
    end_time: int = 0


ObjectParams = Union[HitCircle, Slider, Spinner, ManiaHold]


# Shape bits in decode priority order; the first set bit wins.
SHAPE_BITS: tuple[tuple[ObjectTypeFlag, type], ...] = (
    (ObjectTypeFlag.HIT_CIRCLE, HitCircle),
    (ObjectTypeFlag.SLIDER, Slider),
    (ObjectTypeFlag.SPINNER, Spinner),
    (ObjectTypeFlag.MANIA_HOLD, ManiaHold),
)

# Skip bits and the weight each adds to the combo skip count.
COMBO_SKIP_BITS: tuple[tuple[ObjectTypeFlag, int], ...] = (
    (ObjectTypeFlag.SKIP_ONE, 1),
    (ObjectTypeFlag.SKIP_TWO, 2),
    (ObjectTypeFlag.SKIP_FOUR, 4),
)

COMBO_SKIP_MAX = 0b111

_SHAPE_FLAG: dict[type, ObjectTypeFlag] = {shape: bit for bit, shape in SHAPE_BITS}


def decode_type_bits(flags: ObjectTypeFlag) -> tuple[type, bool, int]:
    """Split a type bit field into ``(shape, new_combo, combo_skip)``.

    Skip bits only count when the new-combo bit is set as well.
    """
    for bit, shape in SHAPE_BITS:
        if flags & bit:
            break
    else:
        raise InvalidFormat("object_params")

    new_combo = bool(flags & ObjectTypeFlag.NEW_COMBO)
    combo_skip = 0
    if new_combo:
        combo_skip = sum(weight for bit, weight in COMBO_SKIP_BITS if flags & bit)
    return shape, new_combo, combo_skip


def encode_type_bits(shape: type, new_combo: bool, combo_skip: int) -> ObjectTypeFlag:
    """Inverse of ``decode_type_bits``.

    Bit *n* of ``combo_skip`` sets the skip bit of weight ``2**n``. A non-zero
    count implies a new combo, so the new-combo bit is set with it.
    """
    flags = _SHAPE_FLAG[shape]
    skip = combo_skip & COMBO_SKIP_MAX
    if new_combo or skip:
        flags |= ObjectTypeFlag.NEW_COMBO
    for bit, weight in COMBO_SKIP_BITS:
        if skip & weight:
            flags |= bit
    return flags


# ---------------------------------------------------------------------------
# Shape tails
# ---------------------------------------------------------------------------

def _parse_slider(tail: str | None) -> tuple[Slider, HitSample]:
    if tail is None:
        raise InvalidFormat("object_params")
    fields = [f.strip() for f in tail.split(",")]
    if not 3 <= len(fields) <= 6:
        raise InvalidFormat("object_params")

    kind, *points = fields[0].split("|")
    slider = Slider(
        curve_type=convert("curve_type", CurveType.from_text, kind),
        curve_points=[SliderPoint.parse(p) for p in points],
        slides=convert("slides", parse_int, fields[1]),
        length=convert("length", parse_float, fields[2]),
        edge_sounds=EdgeSounds.parse(
            fields[3] if len(fields) > 3 else "",
            fields[4] if len(fields) > 4 else "",
        ),
    )
    sample = HitSample.parse(fields[5]) if len(fields) > 5 else HitSample()
    return slider, sample


def _parse_end_time(tail: str | None, sep: str) -> tuple[int, HitSample]:
    # Spinners separate the end time with a comma, mania holds with a colon.
    if tail is None:
        raise InvalidFormat("end_time")
    end_text, found, sample_text = tail.partition(sep)
    end_time = convert("end_time", parse_int, end_text)
    sample = HitSample.parse(sample_text) if found else HitSample()
    return end_time, sample


def _serialize_slider(slider: Slider, sample: HitSample) -> str:
    curve = str(slider.curve_type) + "".join(f"|{p}" for p in slider.curve_points)
    out = f"{curve},{slider.slides},{format_float(slider.length)}"
    if slider.edge_sounds or sample != HitSample():
        out += f",{slider.edge_sounds},{sample}"
    return out


# ---------------------------------------------------------------------------
# HitObject
# ---------------------------------------------------------------------------

_HEAD_FIELDS = ("x", "y", "time", "object_type", "hit_sound")


@dataclass
class HitObject:
    x: int = 0
    y: int = 0
    time: int = 0
    params: ObjectParams = field(default_factory=HitCircle)
    new_combo: bool = False
    combo_skip: int = 0
    hit_sound: HitSound = HitSound.NORMAL
    hit_sample: HitSample = field(default_factory=HitSample)

    @property
    def shape(self) -> str:
        return type(self.params).__name__

    @classmethod
    def parse(cls, line: str) -> HitObject:
        reject_commentary(line)
        split = [p.strip() for p in line.strip().split(",", 5)]
        if len(split) < len(_HEAD_FIELDS):
            raise InvalidFormat(_HEAD_FIELDS[len(split)])

        x = convert("x", parse_int, split[0])
        y = convert("y", parse_int, split[1])
        time = convert("time", parse_int, split[2])
        flags = convert("object_type", lambda s: parse_flags(ObjectTypeFlag, s), split[3])
        hit_sound = convert("hit_sound", lambda s: parse_flags(HitSound, s), split[4])
        tail = split[5] if len(split) > 5 else None

        shape, new_combo, combo_skip = decode_type_bits(flags)

        params: ObjectParams
        if shape is HitCircle:
            params = HitCircle()
            sample = HitSample.parse(tail) if tail is not None else HitSample()
        elif shape is Slider:
            params, sample = _parse_slider(tail)
        elif shape is Spinner:
            end_time, sample = _parse_end_time(tail, ",")
            params = Spinner(end_time)
        else:
            end_time, sample = _parse_end_time(tail, ":")
            params = ManiaHold(end_time)

        return cls(
            x=x,
            y=y,
            time=time,
            params=params,
            new_combo=new_combo,
            combo_skip=combo_skip,
            hit_sound=hit_sound,
            hit_sample=sample,
        )

    def type_bits(self) -> ObjectTypeFlag:
        return encode_type_bits(type(self.params), self.new_combo, self.combo_skip)

    def serialize(self) -> str:
        head = f"{self.x},{self.y},{self.time},{format_flags(self.type_bits())},{format_flags(self.hit_sound)}"
        p = self.params
        sample = self.hit_sample.serialize()
        if isinstance(p, Slider):
            return f"{head},{_serialize_slider(p, self.hit_sample)}"
        if isinstance(p, Spinner):
            return f"{head},{p.end_time},{sample}"
        if isinstance(p, ManiaHold):
            return f"{head},{p.end_time}:{sample}"
        return f"{head},{sample}"

    def __str__(self) -> str:
        return self.serialize()
