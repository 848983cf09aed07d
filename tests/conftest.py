"""Shared test fixtures for noted."""

import os
import tempfile
from pathlib import Path

import pytest
import yaml

from noted.notes.config import NotesConfig, NoteTemplate
from noted.notes.models import FileRolling


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def note_dir(tmp_dir):
    """An empty note directory inside tmp_dir."""
    path = Path(tmp_dir) / "notes"
    path.mkdir()
    return path


@pytest.fixture
def notes_config(note_dir):
    """NotesConfig writing to note_dir with a single notes.md file."""
    return NotesConfig(
        note_directory=note_dir,
        file_rolling=FileRolling.NEVER,
        template=NoteTemplate(date_format="%Y%m"),
    )


@pytest.fixture
def config_home(tmp_dir, monkeypatch):
    """Point XDG_CONFIG_HOME at tmp_dir and clear NOTED_* overrides."""
    for key in list(os.environ):
        if key.startswith("NOTED_"):
            monkeypatch.delenv(key)
    home = os.path.join(tmp_dir, "config")
    monkeypatch.setenv("XDG_CONFIG_HOME", home)
    return home


@pytest.fixture
def tmp_config_file(config_home, note_dir):
    """Create the noted config file selecting note_dir and never-rolling."""
    config_data = {
        "notes": {
            "directory": str(note_dir),
            "use_repository_specific": False,
            "file_rolling": "never",
        },
        "template": {
            "date_format": "%Y%m",
        },
    }
    config_path = os.path.join(config_home, "noted", "config.yaml")
    os.makedirs(os.path.dirname(config_path))
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path
