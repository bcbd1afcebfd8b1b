"""File helpers around the in-memory codec."""

from __future__ import annotations

import logging
import os
from typing import Union

from .document import Document

logger = logging.getLogger(__name__)

StrPath = Union[str, "os.PathLike[str]"]

# utf-8-sig drops a leading byte-order mark on read and writes none.
DEFAULT_ENCODING = "utf-8-sig"


def read_beatmap(path: StrPath, encoding: str = DEFAULT_ENCODING) -> Document:
    """Read and parse the beatmap at *path*.

    ``OSError`` from opening the file and ``BeatmapCoreError`` from parsing
    both propagate to the caller.
    """
    logger.debug("reading beatmap %s", path)
    with open(path, encoding=encoding, newline="") as fh:
        text = fh.read()
    doc = Document.parse(text)
    logger.debug(
        "parsed %s: %d events, %d timing points, %d hit objects",
        path,
        len(doc.events),
        len(doc.timing_points),
        len(doc.hit_objects),
    )
    return doc


def write_beatmap(document: Document, path: StrPath, encoding: str = "utf-8") -> None:
    """Serialize *document* to *path*, replacing any existing file."""
    text = document.serialize()
    with open(path, "w", encoding=encoding, newline="") as fh:
        fh.write(text)
    logger.debug("wrote beatmap %s (%d bytes)", path, len(text))
