"""Persistence of the item collection to a flat text file."""

from tasklist.persistence.codec import decode_line, decode_lines, encode_item
from tasklist.persistence.file import FilePersistence

__all__ = [
    "FilePersistence",
    "decode_line",
    "decode_lines",
    "encode_item",
]
