"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

import main


@pytest.fixture(autouse=True)
def quiet_console(monkeypatch, console):
    monkeypatch.setattr(main, "console", console)


def test_parse_arguments_defaults():
    args = main.parse_arguments([])

    assert args.source is None
    assert args.output is None
    assert args.watch is False
    assert args.dry_run is False
    assert args.verbose is False


def test_parse_arguments_flags():
    args = main.parse_arguments(["-s", "strips", "-o", "public", "--watch", "-v", "--title", "Strip"])

    assert args.source == Path("strips")
    assert args.output == Path("public")
    assert args.watch is True
    assert args.verbose is True
    assert args.title == "Strip"


def test_main_builds_site(site):
    settings = site("2024-01-01: first\n", {"first": ("# First\n![a](a.png)\nHi\n", ["a.png"])})

    main.main([
        "-s", str(settings.source_dir),
        "-o", str(settings.output_dir),
        "--stylesheet", str(settings.stylesheet),
    ])

    assert (settings.output_dir / "2024-01-01.html").is_file()
    assert (settings.output_dir / "index.html").is_file()


def test_main_dry_run_writes_nothing(site, console):
    settings = site("2024-01-01: first\n", {"first": ("# First\n![a](a.png)\nHi\n", ["a.png"])})

    main.main(["-s", str(settings.source_dir), "-o", str(settings.output_dir), "--dry-run"])

    assert not settings.output_dir.exists()
    assert "Would build 1 pages" in console.file.getvalue()


def test_main_exits_when_source_missing(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main.main(["-s", str(tmp_path / "nowhere")])

    assert excinfo.value.code == 1


def test_main_exits_on_bad_date_index(site):
    settings = site("just a string\n")

    with pytest.raises(SystemExit) as excinfo:
        main.main(["-s", str(settings.source_dir), "-o", str(settings.output_dir)])

    assert excinfo.value.code == 1


def test_main_exits_when_interrupted(site, console, monkeypatch):
    settings = site("2024-01-01: first\n", {"first": ("# First\n![a](a.png)\nHi\n", ["a.png"])})

    def interrupt(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(main.SiteBuilder, "build", interrupt)

    with pytest.raises(SystemExit) as excinfo:
        main.main(["-s", str(settings.source_dir), "-o", str(settings.output_dir)])

    assert excinfo.value.code == 1
    assert "Build interrupted by user." in console.file.getvalue()
    assert not (settings.output_dir / "2024-01-01.html").exists()
