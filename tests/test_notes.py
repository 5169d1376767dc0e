"""Tests for NoteStore: note creation, listing, index and editor."""

from __future__ import annotations

import hashlib
import json
from datetime import UTC, datetime

import pytest

from zet.notes import NoteStore, content_hash
from zet.store import StoreParseError

NOW = datetime(2024, 6, 10, 6, 13, 20, tzinfo=UTC)


class TestInit:
    def test_creates_layout(self, store: NoteStore):
        assert store.cfg.notes_dir.is_dir()
        assert store.cfg.template_path.exists()
        assert store.cfg.config_path.exists()

    def test_idempotent_keeps_template(self, store: NoteStore):
        store.cfg.template_path.write_text("mine")
        assert store.init() is False
        assert store.read_template() == "mine"


class TestCreate:
    def test_renders_default_template(self, store: NoteStore):
        note = store.create("Hello", NOW)
        assert note.path == store.cfg.notes_dir / "1718000000-Hello.md"
        content = note.path.read_text()
        assert "id: 1718000000\n" in content
        assert "title: Hello\n" in content
        assert "created: 2024-06-10T06:13:20Z\n" in content
        assert "# Hello\n" in content

    def test_template_read_fresh_each_time(self, store: NoteStore):
        store.cfg.template_path.write_text("v1 <title>")
        first = store.create("a", NOW)
        store.cfg.template_path.write_text("v2 <title> <custom>")
        second = store.create("b", NOW)
        assert first.path.read_text() == "v1 a"
        assert second.path.read_text() == "v2 b <custom>"

    def test_records_content_hash(self, store: NoteStore):
        note = store.create("Hello", NOW)
        content = note.path.read_text()
        index = json.loads(store.cfg.index_path.read_text())
        assert index == {content_hash(content): "1718000000"}
        assert store.lookup_hash(content) == "1718000000"
        assert store.lookup_hash("something else") is None

    def test_missing_template(self, cfg):
        with pytest.raises(FileNotFoundError):
            NoteStore(cfg).create("x", NOW)

    def test_corrupt_index(self, store: NoteStore):
        store.cfg.index_path.write_text("[1,2,3]")
        with pytest.raises(StoreParseError):
            store.create("x", NOW)
        assert list(store.cfg.notes_dir.iterdir()) == []


class TestList:
    def test_lists_md_files_sorted(self, store: NoteStore):
        store.create("b", datetime(2024, 1, 2, tzinfo=UTC))
        store.create("a", datetime(2024, 1, 1, tzinfo=UTC))
        (store.cfg.notes_dir / "readme.txt").write_text("skip")
        (store.cfg.notes_dir / "sub.md").mkdir()
        names = [n.path.name for n in store.list_notes()]
        assert names == ["1704067200-a.md", "1704153600-b.md"]

    def test_missing_notes_dir(self, cfg):
        with pytest.raises(FileNotFoundError):
            NoteStore(cfg).list_notes()

    def test_matching(self, store: NoteStore):
        store.create("idea one", datetime(2024, 1, 1, tzinfo=UTC))
        store.create("other", datetime(2024, 1, 2, tzinfo=UTC))
        store.create("idea two", datetime(2024, 1, 3, tzinfo=UTC))
        assert [n.title for n in store.matching("*idea*")] == ["idea one", "idea two"]
        assert [n.title for n in store.matching(limit=1)] == ["idea one"]
        with pytest.raises(ValueError):
            store.matching(limit=-1)

    def test_find(self, store: NoteStore):
        note = store.create("Hello", NOW)
        assert store.find("1718000000").path == note.path
        assert store.find("1718000000-Hello").path == note.path
        assert store.find("1718000000-Hello.md").path == note.path
        assert store.find("Hello") is None


class TestReindex:
    def test_rebuilds_from_disk(self, store: NoteStore):
        a = store.create("a", datetime(2024, 1, 1, tzinfo=UTC))
        b = store.create("b", datetime(2024, 1, 2, tzinfo=UTC))
        b.path.write_text("edited")
        a.path.unlink()

        assert store.reindex() == 1
        index = json.loads(store.cfg.index_path.read_text())
        assert index == {content_hash("edited"): "1704153600"}

    def test_skips_files_without_id(self, store: NoteStore):
        (store.cfg.notes_dir / "scratch.md").write_text("x")
        assert store.reindex() == 0
        assert store.cfg.index_path.read_text() == "{}"

    def test_non_utf8_note(self, store: NoteStore):
        raw = "caf\u00e9".encode("latin-1")
        (store.cfg.notes_dir / "1704067200-latin.md").write_bytes(raw)
        assert store.reindex() == 1
        index = json.loads(store.cfg.index_path.read_text())
        assert index == {hashlib.sha256(raw).hexdigest(): "1704067200"}

    def test_hash_matches_create(self, store: NoteStore):
        note = store.create("Hello \u00e9", NOW)
        store.reindex()
        assert store.lookup_hash(note.path.read_text(encoding="utf-8")) == "1718000000"


class TestEditor:
    def test_spawns_editor_with_path(self, store: NoteStore, editor_calls):
        note = store.create("Hello", NOW)
        assert store.open_in_editor(note.path, "code --wait") == 0
        assert editor_calls == [["code", "--wait", str(note.path)]]

    def test_uses_configured_editor(self, store: NoteStore, editor_calls):
        note = store.create("Hello", NOW)
        store.open_in_editor(note.path)
        assert editor_calls == [["nvim", str(note.path)]]
