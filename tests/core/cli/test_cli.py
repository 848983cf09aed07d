"""Tests for the CLI entry point."""

import os

import pytest
from click.testing import CliRunner
from loguru import logger

from noted.core.cli import main


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop loguru sinks bound to the runner's captured streams."""
    yield
    logger.remove()


@pytest.fixture
def launched(monkeypatch):
    """Capture paths passed to click.launch instead of opening them."""
    paths = []
    monkeypatch.setattr("click.launch", lambda path, *args, **kwargs: paths.append(path))
    return paths


def _read(path):
    with open(path) as f:
        return f.read()


class TestCliGroup:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Take notes using CLI" in result.output
        for command in ("create", "open", "search", "config"):
            assert command in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_search_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["search", "--help"])
        assert result.exit_code == 0
        assert "Search only for tags" in result.output

    def test_search_requires_pattern(self, tmp_config_file):
        runner = CliRunner()
        result = runner.invoke(main, ["search"])
        assert result.exit_code != 0
        assert "PATTERN" in result.output


class TestNoteCommand:
    def test_bare_text_is_written_as_note(self, tmp_config_file, note_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["sample note"])
        assert result.exit_code == 0, result.output

        lines = _read(note_dir / "notes.md").split("\n")
        assert lines[1:5] == ["", "sample note", "", "---"]

    def test_tags_are_written(self, tmp_config_file, note_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["-d", "tagged note", "work", "ideas"])
        assert result.exit_code == 0, result.output
        assert "#work;#ideas" in _read(note_dir / "notes.md")

    def test_open_after_write(self, tmp_config_file, note_dir, launched):
        runner = CliRunner()
        result = runner.invoke(main, ["-o", "open me"])
        assert result.exit_code == 0, result.output
        assert launched == [str(note_dir / "notes.md")]

    def test_first_run_creates_config(self, config_home, monkeypatch, note_dir):
        monkeypatch.setenv("NOTED_NOTES__DIRECTORY", str(note_dir))
        runner = CliRunner()
        result = runner.invoke(main, ["first note"])
        assert result.exit_code == 0, result.output
        assert os.path.exists(os.path.join(config_home, "noted", "config.yaml"))
        assert os.path.exists(os.path.join(config_home, "noted", "noted.template"))


class TestCreateCommand:
    def test_create_appends_md(self, tmp_config_file, note_dir, launched):
        runner = CliRunner()
        result = runner.invoke(main, ["create", "meeting"])
        assert result.exit_code == 0, result.output
        assert launched == [str(note_dir / "meeting.md")]
        assert _read(note_dir / "meeting.md").endswith("---\n")

    def test_create_alias(self, tmp_config_file, note_dir, launched):
        runner = CliRunner()
        result = runner.invoke(main, ["new", "todo.md"])
        assert result.exit_code == 0, result.output
        assert launched == [str(note_dir / "todo.md")]


class TestOpenCommand:
    def test_open_current(self, tmp_config_file, note_dir, launched):
        runner = CliRunner()
        result = runner.invoke(main, ["open"])
        assert result.exit_code == 0, result.output
        assert launched == [str(note_dir / "notes.md")]

    def test_open_by_pattern(self, tmp_config_file, note_dir, launched):
        for name in ("2021-01.md", "2021-04-02.md", "2021-04.md"):
            (note_dir / name).touch()
        runner = CliRunner()
        result = runner.invoke(main, ["edit", "2021-04*"])
        assert result.exit_code == 0, result.output
        assert launched == [str(note_dir / "2021-04-02.md")]

    def test_open_no_match(self, tmp_config_file, launched):
        runner = CliRunner()
        result = runner.invoke(main, ["open", "05"])
        assert result.exit_code == 1
        assert "No file found" in result.output
        assert launched == []


class TestSearchCommand:
    def test_search_prints_table(self, tmp_config_file, note_dir):
        (note_dir / "notes.md").write_text("Sample Note\n")
        runner = CliRunner()
        result = runner.invoke(main, ["search", ".?ample.*"])
        assert result.exit_code == 0, result.output

        lines = result.output.splitlines()
        assert lines[0] == "File                           | Line | Content"
        assert lines[1].endswith("| 1    | Sample Note")

    def test_search_tags_alias(self, tmp_config_file, note_dir):
        (note_dir / "notes.md").write_text("text\n#work;#home\n")
        runner = CliRunner()
        result = runner.invoke(main, ["grep", "-t", "home"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[1].endswith("| 2    | #home")

    def test_search_bad_filter(self, tmp_config_file):
        runner = CliRunner()
        result = runner.invoke(main, ["search", "x", "["])
        assert result.exit_code == 1
        assert "Invalid pattern" in result.output

    def test_search_non_utf8_file(self, tmp_config_file, note_dir):
        (note_dir / "notes.md").write_text("Sample Note\n")
        (note_dir / "photo.jpg").write_bytes(b"\xff\xd8\xff\xe0binary")
        runner = CliRunner()
        result = runner.invoke(main, ["search", "Sample"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "photo.jpg" in result.output


class TestConfigCommand:
    def test_config_opens_file(self, tmp_config_file, launched):
        runner = CliRunner()
        result = runner.invoke(main, ["config"])
        assert result.exit_code == 0, result.output
        assert launched == [tmp_config_file]
