"""HashStore: a flat string-to-string map persisted as a single JSON object.

Used as the content-hash index of the notes directory:

    index.json
        {
          "<sha256 of note content>": "<note id>",
          ...
        }

The whole file is read on load() and rewritten on save(). There is no
locking; concurrent writers race and the last save wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import ItemsView

logger = logging.getLogger(__name__)


class StoreParseError(ValueError):
    """Backing file exists but is not a flat JSON object of string values."""


class HashStore:
    """In-memory str -> str map, durable via whole-file JSON."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def items(self) -> ItemsView[str, str]:
        return self._entries.items()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self, path: Path | str) -> None:
        """Merge entries from path into the store.

        A missing file is not an error: the store is left as it was.
        Raises StoreParseError if the file is not a flat object of strings;
        nothing is merged in that case.
        """
        path = Path(path)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            logger.debug("no store at %s, starting empty", path)
            return

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"{path}: not valid UTF-8 ({exc})"
            raise StoreParseError(msg) from exc

        if not content.strip():
            return

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            msg = f"{path}: invalid JSON ({exc})"
            raise StoreParseError(msg) from exc

        if not isinstance(data, dict):
            msg = f"{path}: expected a JSON object, got {type(data).__name__}"
            raise StoreParseError(msg)
        for key, value in data.items():
            if not isinstance(value, str):
                msg = f"{path}: value for {key!r} is {type(value).__name__}, expected string"
                raise StoreParseError(msg)

        self._entries.update(data)
        logger.debug("loaded %d entries from %s", len(data), path)

    def save(self, path: Path | str) -> None:
        """Write the full map to path (tmp file + rename)."""
        path = Path(path)
        payload = json.dumps(self._entries, indent=2, sort_keys=True)
        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(payload, encoding="utf-8")
            tmp.replace(path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("saved %d entries to %s", len(self._entries), path)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        """Insert or replace key. The previous value, if any, is dropped."""
        if not isinstance(key, str) or not isinstance(value, str):
            msg = f"HashStore keys and values must be str, got {type(key).__name__}/{type(value).__name__}"
            raise TypeError(msg)
        self._entries[key] = value
