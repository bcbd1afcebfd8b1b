"""Field-block sections and the ``[Colours]`` section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .getter import get_field
from .lists import parse_list, serialize_list
from .model import COMBO_SLOTS, SLIDER_BORDER, SLIDER_TRACK_OVERRIDE, Colour, Rgb
from .reader import split_lines
from .setter import write_field
from .typedef import (
    BOOL,
    FLOAT,
    INT,
    INT_LIST,
    TEXT,
    WORD_LIST,
    FieldDef,
    enum_kind,
)
from .values import Countdown, Gamemode, GeneralSampleSet, OverlayPosition


class FieldBlock:
    """Base for sections made of ``Key:Value`` lines.

    Subclasses are dataclasses listing their fields in ``FIELDS`` (the order
    lines are written in) and choosing ``WITH_SPACE`` to match the
    section's own ``Key: Value`` or ``Key:Value`` convention.
    """

    FIELDS: ClassVar[tuple[FieldDef, ...]] = ()
    WITH_SPACE: ClassVar[bool] = False

    @classmethod
    def parse(cls, text: str):
        lines = split_lines(text)
        return cls(**{f.attr: get_field(lines, f.key, f.kind) for f in cls.FIELDS})

    def serialize(self) -> str:
        buf: list[str] = []
        for f in self.FIELDS:
            write_field(buf, f.key, getattr(self, f.attr), f.kind, self.WITH_SPACE)
        return "".join(buf)

    def __str__(self) -> str:
        return self.serialize()


# ---------------------------------------------------------------------------
# [General]
# ---------------------------------------------------------------------------

@dataclass
class GeneralSection(FieldBlock):
    audio_filename: str = ""
    audio_lead_in: int = 0
    audio_hash: str = ""  # deprecated
    preview_time: int = 0
    countdown: Countdown = Countdown.NORMAL
    sample_set: GeneralSampleSet = GeneralSampleSet.NORMAL
    stack_leniency: float = 0.0
    mode: Gamemode = Gamemode.STD
    letterbox_in_breaks: bool = False
    story_fire_in_front: bool = False  # deprecated
    use_skin_sprites: bool = False
    always_show_playfield: bool = False  # deprecated
    overlay_position: OverlayPosition = OverlayPosition.NO_CHANGE
    skin_preference: str = ""
    epilepsy_warning: bool = False
    countdown_offset: int = 0
    special_style: bool = False
    widescreen_storyboard: bool = False
    samples_match_playback_rate: bool = False

    WITH_SPACE = True
    FIELDS = (
        FieldDef("AudioFilename", "audio_filename", TEXT),
        FieldDef("AudioLeadIn", "audio_lead_in", INT),
        FieldDef("AudioHash", "audio_hash", TEXT),
        FieldDef("PreviewTime", "preview_time", INT),
        FieldDef("Countdown", "countdown", enum_kind(Countdown, Countdown.NORMAL)),
        FieldDef("SampleSet", "sample_set", enum_kind(GeneralSampleSet, GeneralSampleSet.NORMAL)),
        FieldDef("StackLeniency", "stack_leniency", FLOAT),
        FieldDef("Mode", "mode", enum_kind(Gamemode, Gamemode.STD)),
        FieldDef("LetterboxInBreaks", "letterbox_in_breaks", BOOL),
        FieldDef("StoryFireInFront", "story_fire_in_front", BOOL),
        FieldDef("UseSkinSprites", "use_skin_sprites", BOOL),
        FieldDef("AlwaysShowPlayfield", "always_show_playfield", BOOL),
        FieldDef("OverlayPosition", "overlay_position", enum_kind(OverlayPosition, OverlayPosition.NO_CHANGE)),
        FieldDef("SkinPreference", "skin_preference", TEXT),
        FieldDef("EpilepsyWarning", "epilepsy_warning", BOOL),
        FieldDef("CountdownOffset", "countdown_offset", INT),
        FieldDef("SpecialStyle", "special_style", BOOL),
        FieldDef("WidescreenStoryboard", "widescreen_storyboard", BOOL),
        FieldDef("SamplesMatchPlaybackRate", "samples_match_playback_rate", BOOL),
    )


# ---------------------------------------------------------------------------
# [Editor]
# ---------------------------------------------------------------------------

@dataclass
class EditorSection(FieldBlock):
    bookmarks: list[int] = field(default_factory=list)
    distance_spacing: float = 0.0
    beat_divisor: float = 0.0
    grid_size: int = 0
    timeline_zoom: float = 0.0

    WITH_SPACE = True
    FIELDS = (
        FieldDef("Bookmarks", "bookmarks", INT_LIST),
        FieldDef("DistanceSpacing", "distance_spacing", FLOAT),
        FieldDef("BeatDivisor", "beat_divisor", FLOAT),
        FieldDef("GridSize", "grid_size", INT),
        FieldDef("TimelineZoom", "timeline_zoom", FLOAT),
    )


# ---------------------------------------------------------------------------
# [Metadata]
# ---------------------------------------------------------------------------

@dataclass
class MetadataSection(FieldBlock):
    title: str = ""
    title_unicode: str = ""
    artist: str = ""
    artist_unicode: str = ""
    creator: str = ""
    version: str = ""
    source: str = ""
    tags: list[str] = field(default_factory=list)
    beatmap_id: int = 0
    beatmap_set_id: int = 0

    FIELDS = (
        FieldDef("Title", "title", TEXT),
        FieldDef("TitleUnicode", "title_unicode", TEXT),
        FieldDef("Artist", "artist", TEXT),
        FieldDef("ArtistUnicode", "artist_unicode", TEXT),
        FieldDef("Creator", "creator", TEXT),
        FieldDef("Version", "version", TEXT),
        FieldDef("Source", "source", TEXT),
        FieldDef("Tags", "tags", WORD_LIST),
        FieldDef("BeatmapID", "beatmap_id", INT),
        FieldDef("BeatmapSetID", "beatmap_set_id", INT),
    )


# ---------------------------------------------------------------------------
# [Difficulty]
# ---------------------------------------------------------------------------

@dataclass
class DifficultySection(FieldBlock):
    hp_drain_rate: float = 0.0
    circle_size: float = 0.0
    overall_difficulty: float = 0.0
    approach_rate: float = 0.0
    slider_multiplier: float = 0.0
    slider_tick_rate: float = 0.0

    FIELDS = (
        FieldDef("HPDrainRate", "hp_drain_rate", FLOAT),
        FieldDef("CircleSize", "circle_size", FLOAT),
        FieldDef("OverallDifficulty", "overall_difficulty", FLOAT),
        FieldDef("ApproachRate", "approach_rate", FLOAT),
        FieldDef("SliderMultiplier", "slider_multiplier", FLOAT),
        FieldDef("SliderTickRate", "slider_tick_rate", FLOAT),
    )


# ---------------------------------------------------------------------------
# [Colours]
# ---------------------------------------------------------------------------

def _empty_combos() -> list[Rgb | None]:
    return [None] * COMBO_SLOTS


@dataclass
class Colours:
    """Combo colours (slots 1–8) and the two slider colour overrides."""

    combos: list[Rgb | None] = field(default_factory=_empty_combos)
    slider_track_override: Rgb | None = None
    slider_border: Rgb | None = None

    @classmethod
    def parse(cls, text: str) -> Colours:
        colours = cls()
        for colour in parse_list(text, Colour.parse):
            index = colour.combo_index
            if index is not None:
                colours.combos[index - 1] = colour.rgb
            elif colour.name == SLIDER_TRACK_OVERRIDE:
                colours.slider_track_override = colour.rgb
            else:
                colours.slider_border = colour.rgb
        return colours

    def records(self) -> list[Colour]:
        """Every set colour as a line record, in writing order."""
        out = [
            Colour(f"Combo{i}", rgb)
            for i, rgb in enumerate(self.combos, 1)
            if rgb is not None
        ]
        if self.slider_track_override is not None:
            out.append(Colour(SLIDER_TRACK_OVERRIDE, self.slider_track_override))
        if self.slider_border is not None:
            out.append(Colour(SLIDER_BORDER, self.slider_border))
        return out

    def serialize(self) -> str:
        return serialize_list(self.records())

    def __str__(self) -> str:
        return self.serialize()
