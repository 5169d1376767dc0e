"""Zettelkasten in a directory of markdown files.

Layout (~/.zet by default, see zet.config):
    zet.toml              # optional config
    template.md           # <id>, <title>, <created> placeholders
    index.json            # HashStore: sha256(note content) -> note id
    notes/
        <id>-<title>.md   # id = unix timestamp of creation

Core pieces:
    HashStore    flat str -> str map persisted as one JSON object
    substitute   <name> placeholder substitution over template text
"""

from zet.config import ZetConfig, init_config, load_config
from zet.models import Note
from zet.notes import NoteStore
from zet.store import HashStore, StoreParseError
from zet.template import DEFAULT_TEMPLATE, substitute

__all__ = [
    "DEFAULT_TEMPLATE",
    "HashStore",
    "Note",
    "NoteStore",
    "StoreParseError",
    "ZetConfig",
    "init_config",
    "load_config",
    "substitute",
]
