"""Command line front end: ``beatmap-core check|show|normalize``.

Also usable as ``python -m beatmap_core``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from typing import IO, Optional, Sequence

from .document import Document
from .errors import BeatmapCoreError
from .files import read_beatmap, write_beatmap
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _fmt_title(doc: Document) -> str:
    m = doc.metadata
    return f"{m.artist or '?'} - {m.title or '?'} ({m.creator or '?'}) [{m.version or '?'}]"


def _fmt_summary(doc: Document) -> str:
    """Multi-line overview of a parsed beatmap."""
    shapes = Counter(obj.shape for obj in doc.hit_objects)
    width = max((len(s) for s in shapes), default=0)
    lines = [
        _fmt_title(doc),
        f"  format     : v{doc.format_version}",
        f"  mode       : {doc.general.mode.name}",
        f"  events     : {len(doc.events)}",
        f"  timing     : {len(doc.timing_points)}",
        f"  colours    : {len(doc.colours.records())}",
        f"  hit objects: {len(doc.hit_objects)}",
    ]
    for shape, count in sorted(shapes.items()):
        lines.append(f"    {shape:<{width}} : {count}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _check(paths: Sequence[str], dest: IO[str]) -> int:
    """Parse every file; report ``ok`` or the error. Returns the exit code."""
    failed = 0
    for path in paths:
        try:
            read_beatmap(path)
        except (OSError, BeatmapCoreError) as exc:
            failed += 1
            print(f"{path}: {exc}", file=dest)
            logger.debug("check failed for %s", path, exc_info=True)
            continue
        print(f"{path}: ok", file=dest)
    return 1 if failed else 0


def _show(path: str, dest: IO[str]) -> int:
    doc = read_beatmap(path)
    print(_fmt_summary(doc), file=dest)
    return 0


def _normalize(path: str, output: Optional[str], dest: IO[str]) -> int:
    doc = read_beatmap(path)
    if output:
        write_beatmap(doc, output)
        logger.info("normalized %s -> %s", path, output)
    else:
        dest.write(doc.serialize())
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="beatmap-core", description="Parse, check and rewrite .osu beatmaps")
    ap.add_argument("--quiet", action="store_true", help="only log warnings and errors")
    ap.add_argument("--verbose", action="store_true", help="log debug output")

    sub = ap.add_subparsers(dest="command", required=True)

    p_check = sub.add_parser("check", help="parse files and report errors")
    p_check.add_argument("paths", nargs="+")

    p_show = sub.add_parser("show", help="print a summary of one beatmap")
    p_show.add_argument("path")

    p_norm = sub.add_parser("normalize", help="rewrite a beatmap in canonical form")
    p_norm.add_argument("path")
    p_norm.add_argument("-o", "--output", default=None, help="output file (default: stdout)")

    return ap


def main(argv: Optional[Sequence[str]] = None, dest: Optional[IO[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args)
    dest = dest if dest is not None else sys.stdout

    if args.command == "check":
        return _check(args.paths, dest)

    try:
        if args.command == "show":
            return _show(args.path, dest)
        return _normalize(args.path, args.output, dest)
    except (OSError, BeatmapCoreError) as exc:
        logger.error("%s: %s", args.path, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
