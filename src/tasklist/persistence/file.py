"""Whole-file persistence of the item collection."""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable

from tasklist.exceptions import PersistenceError
from tasklist.persistence.codec import decode_lines, encode_item
from tasklist.types import Item

logger = logging.getLogger(__name__)


class FilePersistence:
    """Saves and restores items using the line format in ``codec``.

    Holds only its configured destination; items are passed in and
    returned per call.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def save(self, items: Iterable[Item], destination: str | Path | None = None) -> None:
        """Replace the destination with one line per item.

        The content is written to a temporary file next to the destination
        and moved into place, so readers see either the old or the new file.
        A symlinked destination is written through to the file it points at,
        and an existing file keeps its permission bits.

        Raises:
            PersistenceError: If the destination cannot be written, including
                text the configured encoding cannot represent.
        """
        target = Path(destination) if destination is not None else self.path
        payload = "".join(f"{encode_item(item)}\n" for item in items)

        tmp_name: str | None = None
        try:
            real_target = Path(os.path.realpath(target))
            with tempfile.NamedTemporaryFile(
                "w",
                encoding=self.encoding,
                newline="\n",
                dir=real_target.parent,
                prefix=f".{real_target.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
            with contextlib.suppress(FileNotFoundError):
                shutil.copymode(real_target, tmp_name)
            os.replace(tmp_name, real_target)
            tmp_name = None
        except (OSError, UnicodeError) as exc:
            raise PersistenceError(
                f"Failed to save {target}: {exc}", path=target, operation="save"
            ) from exc
        finally:
            if tmp_name is not None:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_name)

        logger.debug("Saved %d lines to %s", payload.count("\n"), target)

    def load(self, destination: str | Path | None = None) -> list[Item]:
        """Read items back from the destination.

        A missing file yields an empty list. Malformed lines are skipped.

        Raises:
            PersistenceError: If the file cannot be opened for any reason
                other than not existing, or cannot be read or decoded.
        """
        target = Path(destination) if destination is not None else self.path

        try:
            with target.open("r", encoding=self.encoding) as handle:
                items = decode_lines(handle, source=target)
        except FileNotFoundError:
            logger.debug("No task file at %s; starting empty", target)
            return []
        except (OSError, UnicodeError) as exc:
            raise PersistenceError(
                f"Failed to load {target}: {exc}", path=target, operation="load"
            ) from exc

        logger.debug("Loaded %d items from %s", len(items), target)
        return items
