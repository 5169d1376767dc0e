"""zet CLI — a small Zettelkasten in a directory of markdown files.

Commands:
    zet init                   create ~/.zet, notes/, template.md, zet.toml
    zet new TITLE              create a note from the template and open it
    zet edit NAME              open an existing note
    zet list [PATTERN]         list note files
    zet reindex                rebuild the content-hash index
    zet status                 show paths and counts
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from zet.config import ZetConfig, load_config
from zet.models import Note
from zet.notes import NoteStore
from zet.store import StoreParseError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(message)s",
    )


def _load_cfg(ctx: click.Context) -> ZetConfig:
    home: str | None = ctx.obj.get("home") if ctx.obj else None
    try:
        return load_config(home)
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc


def _store(ctx: click.Context) -> NoteStore:
    return NoteStore(_load_cfg(ctx))


def _list_or_fail(store: NoteStore, pattern: str | None = None, limit: int = 0) -> list[Note]:
    try:
        return store.matching(pattern, limit)
    except FileNotFoundError as exc:
        raise click.ClickException(
            f"No notes directory at {store.cfg.notes_dir} — run `zet init` first"
        ) from exc


def _edit(store: NoteStore, path: Path) -> None:
    try:
        status = store.open_in_editor(path)
    except FileNotFoundError as exc:
        raise click.ClickException(f"Editor not found: {store.cfg.editor}") from exc
    click.echo(f"Editor terminated with status: {status}")


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="zet")
@click.option(
    "--home",
    envvar="ZET_HOME",
    default=None,
    help="Base directory (default: $ZET_HOME or ~/.zet)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, home: str | None, verbose: bool) -> None:
    """zet — a Zettelkasten in plain markdown files."""
    ctx.ensure_object(dict)
    ctx.obj["home"] = home
    _setup_logging("DEBUG" if verbose else _load_cfg(ctx).log_level)


# ---------------------------------------------------------------------------
# zet init
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Create the base directory, notes/, template.md and zet.toml."""
    store = _store(ctx)
    if not store.init():
        click.echo(f"Template already exists at {store.cfg.template_path} — kept")
    click.echo(f"Initialized Zettelkasten at {store.cfg.root}")


# ---------------------------------------------------------------------------
# zet new / zet edit
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("title")
@click.option("--no-edit", is_flag=True, help="Create the note without opening the editor")
@click.pass_context
def new(ctx: click.Context, title: str, no_edit: bool) -> None:
    """Create a note from the template and open it in $EDITOR.

    \b
    zet new "Atomic notes"
    zet new "Inbox" --no-edit
    """
    store = _store(ctx)
    try:
        note = store.create(title)
    except FileNotFoundError as exc:
        raise click.ClickException(f"{exc.filename} not found — run `zet init` first") from exc
    except StoreParseError as exc:
        raise click.ClickException(f"Corrupt index: {exc}") from exc
    path = note.path
    click.echo(str(path))
    if not no_edit:
        _edit(store, path)


@cli.command()
@click.argument("name")
@click.pass_context
def edit(ctx: click.Context, name: str) -> None:
    """Open an existing note by file name, stem or id."""
    store = _store(ctx)
    _list_or_fail(store)
    note = store.find(name)
    if note is None or note.path is None:
        raise click.ClickException(f"Note not found: {name}")
    _edit(store, note.path)


# ---------------------------------------------------------------------------
# zet list
# ---------------------------------------------------------------------------


@cli.command("list")
@click.argument("pattern", required=False)
@click.option(
    "--limit", "-l", default=0, show_default=True, type=click.IntRange(min=0),
    help="Max notes to list (0 = all)",
)
@click.pass_context
def list_cmd(ctx: click.Context, pattern: str | None, limit: int) -> None:
    """List notes, optionally filtered by a glob on the file name.

    \b
    zet list
    zet list '*idea*'
    """
    store = _store(ctx)
    for note in _list_or_fail(store, pattern, limit):
        click.echo(note.path.name)


# ---------------------------------------------------------------------------
# zet reindex / zet status
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_context
def reindex(ctx: click.Context) -> None:
    """Rebuild index.json (content hash -> note id) from the notes on disk."""
    store = _store(ctx)
    _list_or_fail(store)
    n = store.reindex()
    click.echo(f"Indexed {n} notes")


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show paths, note count and index size."""
    from rich.console import Console
    from rich.markup import escape as _markup_escape
    from rich.table import Table

    cfg = _load_cfg(ctx)
    store = NoteStore(cfg)
    console = Console()

    table = Table(title="zet", show_header=True, header_style="bold")
    table.add_column("Metric", style="dim", no_wrap=True)
    table.add_column("Value")

    table.add_row("Home", _markup_escape(str(cfg.root)))
    table.add_row("Config", _markup_escape(str(cfg.config_path)) if cfg.config_path.exists() else "[dim]defaults[/dim]")

    if cfg.notes_dir.is_dir():
        table.add_row("Notes", f"{len(store.list_notes())}  ({_markup_escape(str(cfg.notes_dir))})")
    else:
        table.add_row("Notes", "[red]missing — run `zet init`[/red]")

    if cfg.template_path.exists():
        table.add_row("Template", _markup_escape(str(cfg.template_path)))
    else:
        table.add_row("Template", "[red]missing[/red]")

    try:
        index = store.load_index()
    except StoreParseError as exc:
        table.add_row("Index", f"[red]corrupt: {_markup_escape(str(exc))}[/red]")
    else:
        table.add_row("Index", f"{len(index)} hashes  ({_markup_escape(str(cfg.index_path))})")

    table.add_row("Editor", _markup_escape(cfg.editor))
    console.print(table)
