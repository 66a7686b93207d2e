"""Tests for the command-line entry point and logger setup."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path

from main import main
from src.observability.logger import get_logger


def _write_settings(path: Path, delimiter: str = ",", max_segments: str = "null") -> Path:
    path.write_text(
        "splitter:\n"
        "  provider: delimiter\n"
        f'  delimiter: "{delimiter}"\n'
        f"  max_segments: {max_segments}\n"
        "observability:\n"
        "  log_level: WARNING\n",
        encoding="utf-8",
    )
    return path


def test_main_splits_each_input_line(tmp_path: Path) -> None:
    config_path = _write_settings(tmp_path / "settings.yaml")
    stdout = io.StringIO()

    exit_code = main([str(config_path)], stdin=io.StringIO("a,b\n,c,\n"), stdout=stdout)

    assert exit_code == 0
    assert stdout.getvalue().splitlines() == ["a", "b", "", "c", ""]


def test_main_respects_max_segments(tmp_path: Path) -> None:
    config_path = _write_settings(tmp_path / "settings.yaml", delimiter=";", max_segments="1")
    stdout = io.StringIO()

    main([str(config_path)], stdin=io.StringIO("a;b;c\n"), stdout=stdout)

    assert stdout.getvalue() == "a\n"


def test_main_reports_configuration_error(tmp_path: Path, capsys) -> None:
    exit_code = main([str(tmp_path / "missing.yaml")], stdin=io.StringIO(""), stdout=io.StringIO())

    assert exit_code == 1
    assert "Configuration error" in capsys.readouterr().err


def test_get_logger_applies_level() -> None:
    logger = get_logger("strsplit.test", log_level="debug")

    assert logger.name == "strsplit.test"
    assert logger.level == logging.DEBUG


def test_get_logger_unknown_level_falls_back_to_info() -> None:
    logger = get_logger("strsplit.test.fallback", log_level="nonsense")

    assert logger.level == logging.INFO


def test_main_reports_unknown_provider(tmp_path: Path, capsys) -> None:
    config_path = _write_settings(tmp_path / "settings.yaml")
    config_path.write_text(
        config_path.read_text(encoding="utf-8").replace("provider: delimiter", "provider: regex"),
        encoding="utf-8",
    )

    exit_code = main([str(config_path)], stdin=io.StringIO("a,b\n"), stdout=io.StringIO())

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Configuration error" in err
    assert "Unsupported Splitter provider: 'regex'" in err


def test_main_reads_current_standard_streams(tmp_path: Path, monkeypatch) -> None:
    config_path = _write_settings(tmp_path / "settings.yaml")
    stdout = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("x,y\n"))
    monkeypatch.setattr(sys, "stdout", stdout)

    exit_code = main([str(config_path)])

    assert exit_code == 0
    assert stdout.getvalue() == "x\ny\n"
