"""ZetConfig: location of the notes directory and its companions.

Default layout (all relative to the base directory, ~/.zet unless
$ZET_HOME or --home says otherwise):

    zet.toml              # optional config
    template.md           # template for new notes
    index.json            # content hash -> note id
    notes/
        <id>-<title>.md

zet.toml example:

    [zet]
    # notes_dir = "notes"
    # template = "template.md"
    # index = "index.json"
    # editor = "nvim"           # default: $EDITOR, then nvim
    # log_level = "WARNING"
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from zet.template import DEFAULT_TEMPLATE

logger = logging.getLogger(__name__)

_CONFIG_FILENAME = "zet.toml"
_DEFAULT_NOTES_DIR = "notes"
_DEFAULT_TEMPLATE = "template.md"
_DEFAULT_INDEX = "index.json"
_DEFAULT_EDITOR = "nvim"
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class ZetConfig:
    """Resolved configuration for a notes directory."""

    root: Path                      # base directory, e.g. ~/.zet
    notes_dir: Path = field(default_factory=Path)
    template_path: Path = field(default_factory=Path)
    index_path: Path = field(default_factory=Path)
    editor: str = _DEFAULT_EDITOR
    log_level: str = _DEFAULT_LOG_LEVEL

    @property
    def config_path(self) -> Path:
        return self.root / _CONFIG_FILENAME

    def ensure_dirs(self) -> bool:
        """Create root and notes_dir; write the default template if absent.

        Returns True if the template was written. An existing template is
        never overwritten.
        """
        self.root.mkdir(parents=True, exist_ok=True)
        self.notes_dir.mkdir(parents=True, exist_ok=True)
        self.template_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with self.template_path.open("x", encoding="utf-8") as f:
                f.write(DEFAULT_TEMPLATE)
        except FileExistsError:
            return False
        logger.info("wrote default template to %s", self.template_path)
        return True


def default_root() -> Path:
    env = os.environ.get("ZET_HOME")
    if env:
        return Path(env).expanduser()
    return Path.home() / ".zet"


def load_config(root: Path | str | None = None) -> ZetConfig:
    """Load zet.toml from root (default: $ZET_HOME or ~/.zet)."""
    root_path = Path(root).expanduser() if root else default_root()
    config_path = root_path / _CONFIG_FILENAME

    raw: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open("rb") as f:
            raw = tomllib.load(f)

    section = raw.get("zet", {})
    editor = section.get("editor") or os.environ.get("EDITOR") or _DEFAULT_EDITOR

    return ZetConfig(
        root=root_path,
        notes_dir=root_path / section.get("notes_dir", _DEFAULT_NOTES_DIR),
        template_path=root_path / section.get("template", _DEFAULT_TEMPLATE),
        index_path=root_path / section.get("index", _DEFAULT_INDEX),
        editor=str(editor),
        log_level=str(section.get("log_level", _DEFAULT_LOG_LEVEL)),
    )


def init_config(root: Path) -> Path:
    """Write a default zet.toml at root. Raises if already exists."""
    config_path = root / _CONFIG_FILENAME
    if config_path.exists():
        msg = f"zet.toml already exists at {config_path}"
        raise FileExistsError(msg)

    content = """\
[zet]
# notes_dir = "notes"          # default
# template = "template.md"     # default
# index = "index.json"         # content hash -> note id
# editor = "nvim"              # default: $EDITOR, then nvim
# log_level = "WARNING"
"""
    root.mkdir(parents=True, exist_ok=True)
    config_path.write_text(content)
    return config_path
