"""Tests for whole-document parsing and serialization."""

import pytest

import beatmap_core
from beatmap_core import (
    Colours,
    Document,
    HitObject,
    InvalidFormat,
    SectionNotFound,
    Slider,
    Spinner,
    TimingPoint,
    parse,
    serialize,
)
from beatmap_core.errors import DomainValueError


MINIMAL = (
    "osu file format v14\n\n"
    "[General]\n\n[Editor]\n\n[Metadata]\n\n[Difficulty]\n\n[Events]\n\n[HitObjects]\n"
)


class TestRoundTrip:
    def test_canonical_text_is_reproduced(self, canonical_text):
        assert serialize(parse(canonical_text)) == canonical_text

    def test_str(self, canonical_text):
        assert str(Document.parse(canonical_text)) == canonical_text

    def test_loose_text_is_canonicalised(self, loose_text, canonical_text):
        assert serialize(parse(loose_text)) == canonical_text

    def test_idempotent(self, loose_text):
        doc = parse(loose_text)
        assert parse(serialize(doc)) == doc

    def test_empty_document(self):
        text = Document().serialize()
        assert parse(text) == Document()
        assert text.startswith("osu file format v14\n\n[General]\n")


class TestContents:
    def test_sections(self, canonical_text):
        doc = parse(canonical_text)
        assert doc.format_version == 14
        assert doc.general.audio_filename == "marb.mp3"
        assert doc.editor.grid_size == 32
        assert doc.metadata.title == "Marble Soda"
        assert doc.difficulty.slider_multiplier == 1.5
        assert len(doc.events) == 2
        assert len(doc.timing_points) == 2
        assert doc.colours.combos[1].red == 202

    def test_hit_objects_in_order(self, canonical_text):
        shapes = [obj.shape for obj in parse(canonical_text).hit_objects]
        assert shapes == ["HitCircle", "Spinner", "Slider"]

    def test_skipped_rows(self, loose_text):
        doc = parse(loose_text)
        assert [e.start_time for e in doc.events] == [0, 104177]


class TestOptionalSections:
    def test_absent(self):
        doc = parse(MINIMAL)
        assert doc.timing_points == []
        assert doc.colours == Colours()
        assert doc.hit_objects == []

    def test_always_written(self):
        text = parse(MINIMAL).serialize()
        assert "[TimingPoints]\n" in text
        assert "[Colours]\n" in text

    def test_without_version_line(self):
        doc = parse(MINIMAL.replace("osu file format v14\n\n", ""))
        assert doc.format_version == 14

    def test_older_version_kept(self):
        doc = parse(MINIMAL.replace("v14", "v12"))
        assert doc.format_version == 12
        assert doc.serialize().startswith("osu file format v12\n")


class TestErrors:
    @pytest.mark.parametrize("header", ["[General]", "[Editor]", "[Metadata]", "[Difficulty]", "[Events]", "[HitObjects]"])
    def test_missing_mandatory_section(self, canonical_text, header):
        with pytest.raises(SectionNotFound) as exc:
            parse(canonical_text.replace(header, "[Removed]"))
        assert exc.value.name == header

    def test_malformed_field(self, canonical_text):
        with pytest.raises(InvalidFormat) as exc:
            parse(canonical_text.replace("GridSize: 32", "GridSize: abc"))
        assert exc.value.field == "GridSize"

    def test_malformed_record_aborts(self, canonical_text):
        with pytest.raises(InvalidFormat) as exc:
            parse(canonical_text.replace("12000,-25,4,3", "12000,-25,four,3"))
        assert exc.value.field == "meter"

    def test_domain_error(self, canonical_text):
        with pytest.raises(DomainValueError):
            parse(canonical_text.replace("Combo2 :", "Combo12 :"))

    def test_errors_share_a_base(self):
        with pytest.raises(beatmap_core.BeatmapCoreError):
            parse("")


def test_edit_and_reserialize(canonical_text):
    doc = parse(canonical_text)
    doc.difficulty.circle_size = 4.2
    doc.timing_points.append(TimingPoint(time=20000, beat_length=300.0))
    doc.hit_objects.append(HitObject(x=0, y=0, time=20000, params=Spinner(21000), new_combo=True))

    again = parse(doc.serialize())
    assert again.difficulty.circle_size == 4.2
    assert again.timing_points[-1].bpm == 200.0
    assert again.hit_objects[-1].params == Spinner(21000)
    assert isinstance(again.hit_objects[2].params, Slider)
