"""Smoke tests for the command line interface."""

import json

import pytest

from travel_timeline.cli import main
from travel_timeline.config import AppConfig, StorageConfig
from travel_timeline.container import Container
from travel_timeline.services import TimelineService


@pytest.fixture
def container():
    return Container.create_default(AppConfig(storage=StorageConfig(backend="memory")))


def run(container, *argv):
    return main(["--today", "2024-01-01", *argv], container=container)


def test_show(container, capsys):
    assert run(container, "show") == 0

    out = capsys.readouterr().out
    assert "Journey through United States, Japan, Singapore (32 days total)" in out
    assert "Journey through France, Singapore (15 days total)" in out


def test_journeys(container, capsys):
    assert run(container, "journeys") == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "journey-1  2023-01-15 -> 2023-05-01  3 trips  (closed)",
        "journey-2  2023-05-01 -> 2024-01-01  2 trips  (closed)",
    ]


def test_add_then_journeys(container, capsys):
    assert run(container, "add", "--country", "Peru", "--city", "Lima", "--entry-date", "2023-07-01") == 0
    capsys.readouterr()

    run(container, "journeys")

    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "journey-3  2023-07-01 -> 2024-01-01  1 trips  (open)"


def test_edit_and_delete(container, capsys):
    assert run(container, "edit", "4", "--exit-date", "2023-05-10") == 0
    assert run(container, "delete", "1") == 0

    out = capsys.readouterr().out
    assert "Updated Paris, France #4" in out
    assert "Deleted #1" in out


def test_errors_exit_with_status_one(container, capsys):
    assert run(container, "delete", "nope") == 1

    assert capsys.readouterr().err.strip() == "Error: No entry with id nope"


def test_invalid_date_is_reported(container, capsys):
    code = run(container, "add", "--country", "Peru", "--city", "Lima", "--entry-date", "July")

    assert code == 1
    assert "malformed date" in capsys.readouterr().err


def test_home_and_theme(container, capsys):
    assert run(container, "home", "--country", "Portugal", "--city", "Lisbon", "--flag", "PT") == 0
    assert run(container, "theme", "dark") == 0

    out = capsys.readouterr().out
    assert "Home set to Lisbon, Portugal" in out
    assert "Theme set to dark" in out


def test_profile_name_and_email(container, capsys):
    assert run(container, "profile", "--name", "Ana", "--email", "ana@example.com") == 0
    assert run(container, "profile", "--name", "Ana Lima") == 0

    out = capsys.readouterr().out
    assert "Profile: Ana <ana@example.com>" in out
    assert "Profile: Ana Lima <ana@example.com>" in out
    profile = container.resolve(TimelineService).profile
    assert (profile.name, profile.email) == ("Ana Lima", "ana@example.com")


def test_export_then_import(container, tmp_path, capsys):
    path = tmp_path / "travel-timeline.json"

    assert run(container, "export", str(path)) == 0
    assert len(json.loads(path.read_text())) == 5

    path.write_text(json.dumps(json.loads(path.read_text())[:2]))
    assert run(container, "import", str(path)) == 0

    assert "Imported 2 entries" in capsys.readouterr().out


def test_import_missing_file(container, tmp_path, capsys):
    assert run(container, "import", str(tmp_path / "missing.json")) == 1
    assert capsys.readouterr().err.startswith("Error:")
