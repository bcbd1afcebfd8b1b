"""End-to-end tests: whole beatmaps through parse, edit, write and the CLI."""

import io

from beatmap_core import (
    Colours,
    Gamemode,
    HitObject,
    ManiaHold,
    OverlayPosition,
    Rgb,
    TimingEffects,
    parse,
    read_beatmap,
    serialize,
    write_beatmap,
)
from beatmap_core.cli import main


MANIA = """\
osu file format v14

[General]
AudioFilename: audio.mp3
AudioLeadIn: 500
PreviewTime: 42000
Countdown: 0
SampleSet: Soft
StackLeniency: 0.7
Mode: 3
OverlayPosition: Below
SpecialStyle: 1

[Editor]
DistanceSpacing: 1
BeatDivisor: 4
GridSize: 4

[Metadata]
Title:Four Keys
Artist:Someone
Creator:Mapper
Version:4K Hard
Tags:mania keys
BeatmapID:1
BeatmapSetID:2

[Difficulty]
HPDrainRate:7.5
CircleSize:4
OverallDifficulty:8
ApproachRate:5
SliderMultiplier:1.4
SliderTickRate:1

[Events]
//Background and Video events
0,0,"bg.png",0,0
1,-200,"clip.avi",0,0
//Break Periods
//Storyboard Layer 0 (Background)
Sprite,Background,Centre,"sb/bg2.png",320,240
 F,0,0,1000,0,1
//Storyboard Sound Samples

[TimingPoints]
0,500,4,2,1,60,1,0
32000,-100,4,2,1,60,0,1
48000,-100,4,2,1,60,0,0

[HitObjects]
64,192,1000,1,0,0:0:0:0:
192,192,1500,128,0,2000:0:0:0:0:
320,192,2000,5,8,0:0:0:0:
448,192,2500,128,2,3000:1:2:0:70:key.wav
"""


def test_mania_map(tmp_path):
    doc = parse(MANIA)
    assert doc.general.mode is Gamemode.MANIA
    assert doc.general.overlay_position is OverlayPosition.BELOW
    assert doc.general.special_style is True
    assert doc.colours == Colours()
    assert [e.start_time for e in doc.events] == [0, -200]
    assert doc.timing_points[0].bpm == 120.0
    assert TimingEffects.KIAI in doc.timing_points[1].effects

    holds = [o for o in doc.hit_objects if isinstance(o.params, ManiaHold)]
    assert [h.params.end_time for h in holds] == [2000, 3000]
    assert holds[1].hit_sample.filename == "key.wav"

    path = tmp_path / "mania.osu"
    write_beatmap(doc, path)
    assert read_beatmap(path) == doc


def test_mania_map_canonical_form():
    out = serialize(parse(MANIA))
    assert "//" not in out
    assert "Sprite" not in out
    assert "[Colours]\n\n[HitObjects]\n" in out
    assert "448,192,2500,128,2,3000:1:2:0:70:key.wav\n" in out
    assert serialize(parse(out)) == out


def test_add_colours_and_objects(canonical_text):
    doc = parse(canonical_text)
    doc.colours.combos[2] = Rgb(0, 128, 255)
    doc.colours.slider_border = Rgb(255, 255, 255)
    doc.hit_objects.append(HitObject(x=10, y=10, time=13000, new_combo=True, combo_skip=2))

    out = serialize(doc)
    assert "Combo3 : 0,128,255\nSliderBorder : 255,255,255\n" in out
    assert out.endswith("10,10,13000,37,1,0:0:0:0:\n")

    again = parse(out)
    assert again.hit_objects[-1].combo_skip == 2
    assert again.colours == doc.colours


def test_cli_check_then_normalize(tmp_path):
    src = tmp_path / "mania.osu"
    dst = tmp_path / "mania.clean.osu"
    src.write_text(MANIA, encoding="utf-8")

    dest = io.StringIO()
    assert main(["check", str(src)], dest=dest) == 0
    assert main(["normalize", str(src), "-o", str(dst)], dest=dest) == 0
    assert main(["check", str(dst)], dest=dest) == 0
    assert read_beatmap(dst) == read_beatmap(src)
