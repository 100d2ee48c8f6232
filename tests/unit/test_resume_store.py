"""Unit tests for the CSV resume store."""

import csv
from itertools import count

import pytest

from quire.contexts.templating import StyleConfigError
from quire.utils.resume_store import STORE_COLUMNS, ResumeStore


@pytest.fixture
def store(tmp_path):
    return ResumeStore(tmp_path / "store" / "resumes.csv")


@pytest.fixture
def ticking_clock(monkeypatch):
    """Make now_exact() return strictly increasing timestamps."""
    ticks = count(1)
    monkeypatch.setattr(
        "quire.utils.resume_store.now_exact",
        lambda: f"2026-01-01T00:00:{next(ticks):02d}",
    )


@pytest.mark.unit
class TestResumeStore:
    """Save, read, update, and delete saved resumes."""

    def test_creates_file_with_header(self, store):
        assert store.path.exists()
        with open(store.path, newline="", encoding="utf-8") as f:
            assert next(csv.reader(f)) == STORE_COLUMNS

    def test_save_and_get(self, store):
        content = "## Jane Doe\n### Skills\nPython, \"SQL\", Go"
        record = store.save("Jane Doe", content, template="modern")

        loaded = store.get(record.resume_id)
        assert loaded == record
        assert loaded.content == content
        assert loaded.template == "modern"
        assert loaded.created_at == loaded.updated_at

    def test_get_unknown(self, store):
        assert store.get("missing") is None

    def test_save_rejects_unknown_template(self, store):
        with pytest.raises(StyleConfigError):
            store.save("Jane Doe", "text", template="fancy")
        assert store.list() == []

    def test_list_most_recently_updated_first(self, store, ticking_clock):
        first = store.save("First", "one")
        second = store.save("Second", "two")

        assert [r.resume_id for r in store.list()] == [second.resume_id, first.resume_id]

        store.update(first.resume_id, content="one, revised")
        assert [r.resume_id for r in store.list()] == [first.resume_id, second.resume_id]

    def test_update(self, store, ticking_clock):
        record = store.save("Jane Doe", "old")

        updated = store.update(record.resume_id, content="new")

        assert updated.content == "new"
        assert updated.title == "Jane Doe"
        assert updated.updated_at > record.updated_at
        assert store.get(record.resume_id) == updated

    def test_update_unknown(self, store):
        assert store.update("missing", content="new") is None

    def test_delete(self, store):
        keep = store.save("Keep", "a")
        drop = store.save("Drop", "b")

        assert store.delete(drop.resume_id) is True
        assert store.get(drop.resume_id) is None
        assert store.get(keep.resume_id) == keep
        assert store.delete(drop.resume_id) is False
