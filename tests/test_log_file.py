"""Tests for saving and loading log files."""

import json
import tempfile
from pathlib import Path
from typing import Optional

import pytest
from hypothesis import given, settings

from loggo.models import Activity, LogDocument, Note
from loggo.storage import (
    FileChooser,
    LogFormatError,
    StaticFileChooser,
    load_log,
    read_log,
    save_log,
    write_log,
)

from strategies import document_strategy


class CancelingChooser(FileChooser):
    """Chooser whose dialogs are always dismissed."""

    def ask_save_path(self, default_name: str) -> Optional[Path]:
        return None

    def ask_open_path(self) -> Optional[Path]:
        return None


@pytest.fixture
def document() -> LogDocument:
    doc = LogDocument.create("Poker")
    doc = doc.with_note(Note.create("stop after two losses"))
    doc = doc.with_activity(Activity.create(100, type="win", description="Friday"))
    return doc.with_activity(Activity.create(40, type="loss"))


class TestRoundTrip:
    """
    *For any* log document, saving it and loading it back should give an
    equal document.
    """

    @given(document=document_strategy())
    @settings(max_examples=50)
    def test_write_then_read_is_identity(self, document: LogDocument):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "log.json"

            write_log(document, path)

            assert read_log(path) == document

    def test_save_then_load_through_choosers(self, tmp_path: Path, document: LogDocument):
        path = tmp_path / "poker.json"

        saved = save_log(document, StaticFileChooser(path))
        loaded = load_log(StaticFileChooser(path))

        assert saved.success and saved.file_path == path
        assert loaded.success
        assert loaded.data == document
        assert loaded.file_path == path


class TestFileFormat:
    def test_indented_utf8_json(self, tmp_path: Path):
        doc = LogDocument.create("Café log").with_note(Note.create("ünïcode"))
        path = tmp_path / "log.json"

        write_log(doc, path)
        content = path.read_text(encoding="utf-8")

        assert "Café log" in content
        assert '\n  "notes": [' in content
        data = json.loads(content)
        assert set(data) == {"name", "notes", "activities"}
        assert set(data["notes"][0]) == {"id", "text", "timestamp"}
        assert isinstance(data["notes"][0]["timestamp"], int)

    def test_activity_fields(self, tmp_path: Path, document: LogDocument):
        path = tmp_path / "log.json"

        write_log(document, path)
        activity = json.loads(path.read_text(encoding="utf-8"))["activities"][0]

        assert set(activity) == {"id", "type", "amount", "description", "timestamp"}
        assert activity["type"] == "win"
        assert activity["amount"] == 100

    def test_creates_parent_directories(self, tmp_path: Path, document: LogDocument):
        path = tmp_path / "a" / "b" / "log.json"

        write_log(document, path)

        assert path.exists()

    def test_missing_notes_load_as_empty(self, tmp_path: Path):
        path = tmp_path / "log.json"
        path.write_text(json.dumps({
            "name": "Old log",
            "activities": [
                {"id": "1", "type": "win", "amount": 5, "description": "", "timestamp": 1},
            ],
        }), encoding="utf-8")

        doc = read_log(path)

        assert doc.name == "Old log"
        assert doc.notes == []
        assert len(doc.activities) == 1

    def test_name_only_document(self, tmp_path: Path):
        path = tmp_path / "log.json"
        path.write_text('{"name": "Empty"}', encoding="utf-8")

        doc = read_log(path)

        assert doc == LogDocument(name="Empty")


class TestSaveResults:
    def test_cancel_writes_nothing(self, tmp_path: Path, document: LogDocument):
        result = save_log(document, CancelingChooser())

        assert result.canceled
        assert not result.success
        assert result.error is None
        assert list(tmp_path.iterdir()) == []

    def test_io_failure(self, tmp_path: Path, document: LogDocument):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        result = save_log(document, StaticFileChooser(blocker / "log.json"))

        assert not result.success
        assert not result.canceled
        assert result.error

    def test_unencodable_text_keeps_previous_file(self, tmp_path: Path, document: LogDocument):
        path = tmp_path / "poker.json"
        write_log(document, path)
        before = path.read_bytes()
        broken = document.with_note(Note.create("bad \udcff"))

        result = save_log(broken, StaticFileChooser(path))

        assert not result.success
        assert not result.canceled
        assert result.error
        assert path.read_bytes() == before
        assert [p.name for p in tmp_path.iterdir()] == ["poker.json"]

    def test_failed_write_leaves_no_temp_files(self, tmp_path: Path, document: LogDocument):
        path = tmp_path / "poker.json"
        path.mkdir()

        result = save_log(document, StaticFileChooser(path))

        assert not result.success
        assert result.error
        assert path.is_dir()
        assert [p.name for p in tmp_path.iterdir()] == ["poker.json"]

    def test_static_chooser_appends_extension(self, tmp_path: Path, document: LogDocument):
        result = save_log(document, StaticFileChooser(tmp_path / "poker"))

        assert result.file_path == tmp_path / "poker.json"
        assert (tmp_path / "poker.json").exists()


class TestLoadResults:
    def test_cancel(self):
        result = load_log(CancelingChooser())

        assert result.canceled
        assert not result.success
        assert result.data is None

    def test_missing_file(self, tmp_path: Path):
        result = load_log(StaticFileChooser(tmp_path / "missing.json"))

        assert not result.success
        assert not result.canceled
        assert result.error

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "[1, 2, 3]",
            '{"notes": []}',
            "",
            '{"name": "x", "notes": [{"id": "1", "text": "a", "timestamp": 1e20}]}',
            '{"name": "x", "notes": [{"id": "1", "text": "a", "timestamp": -1e20}]}',
            '{"name": "x", "activities": [{"id": "1", "type": "win", "amount": 5, "timestamp": Infinity}]}',
            '{"name": "x", "activities": [{"id": "1", "type": "win", "amount": 5, "timestamp": NaN}]}',
        ],
    )
    def test_malformed_content(self, tmp_path: Path, content: str):
        path = tmp_path / "bad.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(LogFormatError):
            read_log(path)

        result = load_log(StaticFileChooser(path))
        assert not result.success
        assert result.error
        assert result.data is None

    def test_binary_content(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_bytes(b"\xff\xfe\x00garbage")

        result = load_log(StaticFileChooser(path))

        assert not result.success
        assert result.error
