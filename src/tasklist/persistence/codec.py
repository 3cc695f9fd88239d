"""Line codec for the task file: ``<flag>|<text>``, one item per line."""

from __future__ import annotations

import logging
from typing import Iterable

from tasklist.types import Item

logger = logging.getLogger(__name__)

DELIMITER = "|"
DONE_FLAG = "1"
OPEN_FLAG = "0"


def encode_item(item: Item) -> str:
    """Encode an item as a single line, without the trailing newline."""
    flag = DONE_FLAG if item.done else OPEN_FLAG
    text = item.text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
    return f"{flag}{DELIMITER}{text}"


def decode_line(line: str) -> Item | None:
    """Decode one stored line, or return None if it is not a valid record.

    Everything after the first delimiter is the text, verbatim. Blank text
    is not a valid record. Only the flag ``1`` marks an item done.
    """
    line = line.rstrip("\r\n")
    flag, sep, text = line.partition(DELIMITER)
    if not sep or not text.strip():
        return None
    return Item(text=text, done=flag == DONE_FLAG)


def decode_lines(lines: Iterable[str], source: object = "<lines>") -> list[Item]:
    """Decode every valid line, skipping malformed records."""
    items: list[Item] = []
    for number, line in enumerate(lines, start=1):
        item = decode_line(line)
        if item is None:
            logger.warning("Skipping malformed record at %s:%d: %r", source, number, line)
            continue
        items.append(item)
    return items
