"""Shared beatmap fixtures."""

import pytest


CANONICAL = (
    "osu file format v14\n"
    "\n"
    "[General]\n"
    "AudioFilename: marb.mp3\n"
    "PreviewTime: 126478\n"
    "Countdown: 0\n"
    "StackLeniency: 0.7\n"
    "LetterboxInBreaks: 1\n"
    "EpilepsyWarning: 1\n"
    "WidescreenStoryboard: 1\n"
    "\n"
    "[Editor]\n"
    "Bookmarks: 121309\n"
    "DistanceSpacing: 0.5\n"
    "BeatDivisor: 4\n"
    "GridSize: 32\n"
    "TimelineZoom: 1.6\n"
    "\n"
    "[Metadata]\n"
    "Title:Marble Soda\n"
    "TitleUnicode:Marble Soda\n"
    "Artist:Shawn Wasabi\n"
    "ArtistUnicode:Shawn Wasabi\n"
    "Creator:Len\n"
    "Version:Crier's Hyper\n"
    "Tags:marble soda wasabi electronic hyper len crier idke\n"
    "BeatmapID:846260\n"
    "BeatmapSetID:387784\n"
    "\n"
    "[Difficulty]\n"
    "HPDrainRate:5\n"
    "CircleSize:4\n"
    "OverallDifficulty:6\n"
    "ApproachRate:8\n"
    "SliderMultiplier:1.5\n"
    "SliderTickRate:1\n"
    "\n"
    "[Events]\n"
    '0,0,"bg.jpg",0,0\n'
    "2,104177,114656\n"
    "\n"
    "[TimingPoints]\n"
    "10000,333.33,4,0,0,100,1,1\n"
    "12000,-25,4,3,0,100,0,1\n"
    "\n"
    "[Colours]\n"
    "Combo1 : 255,0,0\n"
    "Combo2 : 202,202,202\n"
    "\n"
    "[HitObjects]\n"
    "256,192,11000,21,2,0:0:0:0:\n"
    "256,192,11200,8,12,12000,3:0:0:80:\n"
    "100,100,12600,6,1,B|200:200|250:200|250:200|300:150,2,310.123,2|1|2,0:0|0:0|0:2,0:0:0:0:\n"
)


# Same beatmap written by hand: CRLF line endings, stray whitespace, explicit
# defaults, comments, storyboard script and short timing points.
LOOSE = (
    "osu file format v14\r\n"
    "\r\n"
    "[General]\r\n"
    "AudioFilename:marb.mp3\r\n"
    "AudioLeadIn: 0\r\n"
    "PreviewTime: 126478\r\n"
    "Countdown: 0\r\n"
    "SampleSet: Normal\r\n"
    "StackLeniency: 0.70\r\n"
    "Mode: 0\r\n"
    "LetterboxInBreaks: true\r\n"
    "EpilepsyWarning: 1\r\n"
    "WidescreenStoryboard: 1\r\n"
    "\r\n"
    "[Editor]\r\n"
    "  Bookmarks: 121309  \r\n"
    "DistanceSpacing: 0.5\r\n"
    "BeatDivisor: 4.0\r\n"
    "GridSize: 32\r\n"
    "TimelineZoom: 1.6\r\n"
    "\r\n"
    "[Metadata]\r\n"
    "Title: Marble Soda\r\n"
    "TitleUnicode: Marble Soda\r\n"
    "Artist: Shawn Wasabi\r\n"
    "ArtistUnicode: Shawn Wasabi\r\n"
    "Creator: Len\r\n"
    "Version: Crier's Hyper\r\n"
    "Source:\r\n"
    "Tags: marble soda  wasabi electronic hyper len crier idke\r\n"
    "BeatmapID: 846260\r\n"
    "BeatmapSetID: 387784\r\n"
    "\r\n"
    "[Difficulty]\r\n"
    "HPDrainRate: 5.0\r\n"
    "CircleSize: 4\r\n"
    "OverallDifficulty: 6\r\n"
    "ApproachRate: 8\r\n"
    "SliderMultiplier: 1.50\r\n"
    "SliderTickRate: 1\r\n"
    "\r\n"
    "[Events]\r\n"
    "//Background and Video events\r\n"
    'Background,0,"bg.jpg"\r\n'
    "//Break Periods\r\n"
    "Break,104177,114656\r\n"
    "//Storyboard Layer 0 (Background)\r\n"
    'Sprite,Foreground,Centre,"sb/star.png",320,240\r\n'
    " F,0,1000,2000,0,1\r\n"
    "__M,0,1000,2000,320,240,320,200\r\n"
    "//Storyboard Sound Samples\r\n"
    "\r\n"
    "[TimingPoints]\r\n"
    "10000,333.33,4,0,0,100,1,1\r\n"
    "12000,-25.0,4,3,0,100,0,1\r\n"
    "\r\n"
    "\r\n"
    "[Colours]\r\n"
    "Combo1:255,0,0\r\n"
    "Combo2 : 202, 202, 202\r\n"
    "\r\n"
    "[HitObjects]\r\n"
    "256,192,11000,21,2,0:0:0:0:\r\n"
    "256,192,11200,8,12,12000,3:0:0:80:\r\n"
    "100,100,12600,6,1,B|200:200|250:200|250:200|300:150,2,310.123,2|1|2,0:0|0:0|0:2,0:0:0:0:\r\n"
)


@pytest.fixture
def canonical_text():
    return CANONICAL


@pytest.fixture
def loose_text():
    return LOOSE


@pytest.fixture
def beatmap_file(tmp_path):
    path = tmp_path / "marble_soda.osu"
    path.write_text(CANONICAL, encoding="utf-8")
    return path
