"""Data models for the notes directory."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

NOTE_SUFFIX = ".md"

_NAME_RE = re.compile(r"^(\d+)-(.*)$")
# Path separators and control characters can't go into a file name.
_UNSAFE_RE = re.compile(r"[/\\\x00-\x1f\x7f]")


def safe_title(title: str) -> str:
    """Title as it appears in a note's file name."""
    return _UNSAFE_RE.sub("", title).strip() or "untitled"


@dataclass
class Note:
    """A note file: notes/<id>-<title>.md."""

    id: str                       # unix timestamp of creation, e.g. "1718000000"
    title: str
    created_at: datetime | None = None
    path: Path | None = None

    @classmethod
    def new(cls, title: str, now: datetime | None = None) -> Note:
        now = now or datetime.now(UTC)
        return cls(id=str(int(now.timestamp())), title=title, created_at=now)

    @classmethod
    def from_path(cls, path: Path) -> Note:
        """Recover id and title from a note's file name."""
        m = _NAME_RE.match(path.stem)
        if m is None:
            return cls(id="", title=path.stem, path=path)
        note_id, title = m.groups()
        try:
            created_at = datetime.fromtimestamp(int(note_id), UTC)
        except (OverflowError, OSError, ValueError):
            created_at = None
        return cls(id=note_id, title=title, created_at=created_at, path=path)

    @property
    def created(self) -> str:
        """Creation time as YYYY-MM-DDTHH:MM:SSZ (UTC)."""
        if self.created_at is None:
            return ""
        return self.created_at.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")

    @property
    def filename(self) -> str:
        return f"{self.id}-{safe_title(self.title)}{NOTE_SUFFIX}"
