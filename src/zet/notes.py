"""NoteStore: create, list and open notes under ZetConfig.notes_dir.

NoteStore is the public API:
    store = NoteStore(load_config())
    store.init()
    note = store.create("My idea")
    store.open_in_editor(note.path)

Every created note's content hash is recorded in the HashStore index
(index.json), mapping sha256(content) -> note id.
"""

from __future__ import annotations

import fnmatch
import hashlib
import logging
import shlex
import subprocess
from typing import TYPE_CHECKING

from zet.config import ZetConfig, init_config
from zet.models import NOTE_SUFFIX, Note
from zet.store import HashStore
from zet.template import note_substitutions, substitute

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path

logger = logging.getLogger(__name__)


def content_hash(content: str) -> str:
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


class NoteStore:
    """Markdown notes in a flat directory plus a content-hash index."""

    def __init__(self, cfg: ZetConfig) -> None:
        self.cfg = cfg

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def init(self) -> bool:
        """Create directories, template and zet.toml. Idempotent.

        Returns True if the default template was written.
        """
        wrote_template = self.cfg.ensure_dirs()
        if not self.cfg.config_path.exists():
            init_config(self.cfg.root)
        return wrote_template

    def read_template(self) -> str:
        """Template text, read fresh on every call."""
        return self.cfg.template_path.read_text(encoding="utf-8")

    # ------------------------------------------------------------------
    # Index
    # ------------------------------------------------------------------

    def load_index(self) -> HashStore:
        index = HashStore()
        index.load(self.cfg.index_path)
        return index

    def lookup_hash(self, content: str) -> str | None:
        """Id of the note recorded with exactly this content, if any."""
        return self.load_index().get(content_hash(content))

    def reindex(self) -> int:
        """Rebuild index.json from the notes on disk. Returns entries written."""
        index = HashStore()
        for note in self.list_notes():
            if not note.id or note.path is None:
                continue
            index.put(hashlib.sha256(note.path.read_bytes()).hexdigest(), note.id)
        index.save(self.cfg.index_path)
        logger.info("reindexed %d notes", len(index))
        return len(index)

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    def create(self, title: str, now: datetime | None = None) -> Note:
        """Render the template for a new note and write it to notes_dir."""
        template = self.read_template()
        note = Note.new(title, now)
        content = substitute(template, note_substitutions(note))
        index = self.load_index()

        self.cfg.notes_dir.mkdir(parents=True, exist_ok=True)
        note.path = self.cfg.notes_dir / note.filename
        note.path.write_text(content, encoding="utf-8")
        logger.info("created note %s", note.path)

        index.put(content_hash(content), note.id)
        index.save(self.cfg.index_path)
        return note

    def list_notes(self) -> list[Note]:
        """All *.md files in notes_dir, sorted by file name."""
        paths = sorted(
            p for p in self.cfg.notes_dir.iterdir()
            if p.is_file() and p.name.endswith(NOTE_SUFFIX)
        )
        return [Note.from_path(p) for p in paths]

    def find(self, name: str) -> Note | None:
        """Find a note by file name, file stem, or id."""
        for note in self.list_notes():
            if note.path is None:
                continue
            if name in (note.path.name, note.path.stem) or (note.id and name == note.id):
                return note
        return None

    def matching(self, pattern: str | None = None, limit: int = 0) -> list[Note]:
        """Notes whose file name matches a glob pattern (0 = no limit)."""
        notes = self.list_notes()
        if pattern:
            notes = [n for n in notes if n.path is not None and fnmatch.fnmatch(n.path.name, pattern)]
        if limit < 0:
            msg = f"limit must be >= 0, got {limit}"
            raise ValueError(msg)
        return notes[:limit] if limit else notes

    # ------------------------------------------------------------------
    # Editor
    # ------------------------------------------------------------------

    def open_in_editor(self, path: Path, editor: str | None = None) -> int:
        """Run the editor on path and wait for it. Returns its exit status."""
        cmd = [*shlex.split(editor or self.cfg.editor), str(path)]
        logger.debug("spawning editor: %s", cmd)
        result = subprocess.run(cmd, check=False)
        return result.returncode
