"""Tests for the file chooser implementations."""

from pathlib import Path

import click
import pytest

from loggo.storage.choosers import (
    PromptFileChooser,
    StaticFileChooser,
    ensure_log_extension,
)


def scripted_prompt(monkeypatch, answers: list):
    """Replace click.prompt with one returning queued answers.

    An answer of None stands for the user pressing Enter, which gives the
    prompt's default; an exception instance is raised instead.
    """
    queue = list(answers)
    asked = []

    def fake_prompt(text, default=None, **kwargs):
        asked.append(text)
        answer = queue.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return default if answer is None else answer

    monkeypatch.setattr(click, "prompt", fake_prompt)
    return asked


class TestEnsureLogExtension:
    @pytest.mark.parametrize(
        "given, expected",
        [
            ("poker", "poker.json"),
            ("poker.json", "poker.json"),
            ("poker.JSON", "poker.JSON"),
            ("poker.v2", "poker.v2.json"),
        ],
    )
    def test_extension(self, given: str, expected: str):
        assert ensure_log_extension(Path(given)) == Path(expected)


class TestStaticFileChooser:
    def test_answers_fixed_path(self, tmp_path: Path):
        chooser = StaticFileChooser(tmp_path / "log.json")

        assert chooser.ask_save_path("ignored.json") == tmp_path / "log.json"
        assert chooser.ask_open_path() == tmp_path / "log.json"


class TestPromptSave:
    def test_default_is_log_name_in_directory(self, tmp_path: Path, monkeypatch):
        scripted_prompt(monkeypatch, [None])

        path = PromptFileChooser(tmp_path).ask_save_path("Poker.json")

        assert path == tmp_path / "Poker.json"

    def test_relative_answer(self, tmp_path: Path, monkeypatch):
        scripted_prompt(monkeypatch, ["sub/other"])

        path = PromptFileChooser(tmp_path).ask_save_path("Poker.json")

        assert path == tmp_path / "sub" / "other.json"

    def test_absolute_answer(self, tmp_path: Path, monkeypatch):
        target = tmp_path / "elsewhere" / "x.json"
        scripted_prompt(monkeypatch, [str(target)])

        assert PromptFileChooser(tmp_path / "logs").ask_save_path("Poker.json") == target

    def test_abort_cancels(self, tmp_path: Path, monkeypatch):
        scripted_prompt(monkeypatch, [click.Abort()])

        assert PromptFileChooser(tmp_path).ask_save_path("Poker.json") is None


class TestPromptOpen:
    @pytest.fixture
    def log_dir(self, tmp_path: Path) -> Path:
        for name in ("b.json", "a.json", "notes.txt"):
            (tmp_path / name).write_text("{}")
        return tmp_path

    def test_lists_only_json_files(self, log_dir: Path):
        logs = PromptFileChooser(log_dir).list_logs()

        assert [p.name for p in logs] == ["a.json", "b.json"]

    def test_missing_directory_lists_nothing(self, tmp_path: Path):
        assert PromptFileChooser(tmp_path / "missing").list_logs() == []

    def test_pick_by_number(self, log_dir: Path, monkeypatch):
        scripted_prompt(monkeypatch, ["2"])

        assert PromptFileChooser(log_dir).ask_open_path() == log_dir / "b.json"

    def test_pick_by_name(self, log_dir: Path, monkeypatch):
        scripted_prompt(monkeypatch, ["a.json"])

        assert PromptFileChooser(log_dir).ask_open_path() == log_dir / "a.json"

    def test_rejects_other_extensions_and_missing_files(self, log_dir: Path, monkeypatch):
        asked = scripted_prompt(monkeypatch, ["notes.txt", "missing.json", "1"])

        path = PromptFileChooser(log_dir).ask_open_path()

        assert path == log_dir / "a.json"
        assert len(asked) == 3

    def test_abort_cancels(self, log_dir: Path, monkeypatch):
        scripted_prompt(monkeypatch, [click.Abort()])

        assert PromptFileChooser(log_dir).ask_open_path() is None

    def test_blank_answer_cancels(self, log_dir: Path, monkeypatch):
        scripted_prompt(monkeypatch, ["   "])

        assert PromptFileChooser(log_dir).ask_open_path() is None
