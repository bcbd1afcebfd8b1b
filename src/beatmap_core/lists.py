"""Delimited list codec: one record per line."""

from __future__ import annotations

from typing import Callable, Iterable, Protocol, TypeVar

from .errors import CommentaryRow, SkippableRow
from .reader import split_lines


class Row(Protocol):
    def serialize(self) -> str: ...


T = TypeVar("T")


def reject_commentary(line: str) -> None:
    """Raise ``CommentaryRow`` for a ``//`` comment line."""
    if line.startswith("//"):
        raise CommentaryRow(line)


def parse_list(text: str, parse_row: Callable[[str], T]) -> list[T]:
    """Parse every non-empty line of *text* with *parse_row*, in order.

    Rows signalled as skippable (comments, storyboard script) are left out.
    Any other error aborts the whole list.
    """
    records: list[T] = []
    for line in split_lines(text):
        try:
            records.append(parse_row(line))
        except SkippableRow:
            continue
    return records


def serialize_list(records: Iterable[Row]) -> str:
    return "".join(f"{record.serialize()}\n" for record in records)
