"""Tests for logging, date stamps, and file helpers."""

import os
from datetime import date

from claude_token_optimizer.config import LOG_FILE_ENV
from claude_token_optimizer.scaffold import run_init
from claude_token_optimizer.utils import format_date, log, resolve_log_file, to_native_path, write_text_file


# --- date stamp ---

def test_format_date_is_iso_day():
    """Dates are stamped as zero-padded YYYY-MM-DD."""
    assert format_date(date(2026, 1, 5)) == "2026-01-05"


# --- paths and writes ---

def test_to_native_path_splits_posix_segments():
    """POSIX-style plan paths are joined with the platform separator."""
    assert to_native_path("root", ".claude/sessions/active") == os.path.join("root", ".claude", "sessions", "active")


def test_write_text_file_creates_parent_directories(tmp_path):
    """Missing parent directories are created before writing."""
    target = tmp_path / "docs" / "archive" / "README.md"
    write_text_file(str(target), "# Archive\n")
    assert target.read_text(encoding="utf-8") == "# Archive\n"


def test_write_text_file_keeps_unicode(tmp_path):
    """Emoji and symbols are written as UTF-8."""
    target = tmp_path / "notes.md"
    write_text_file(str(target), "⚠️ CRITICAL ✓\n")
    assert target.read_text(encoding="utf-8") == "⚠️ CRITICAL ✓\n"


# --- log file resolution ---

def test_resolve_log_file_unset_is_off():
    """An empty env value disables file logging."""
    assert resolve_log_file("") == ""


def test_resolve_log_file_relative_is_ignored():
    """Relative paths are ignored so nothing lands in the project directory."""
    assert resolve_log_file("setup.log") == ""


def test_resolve_log_file_expands_home():
    """A ~ path is expanded to the home directory."""
    assert resolve_log_file("~/setup.log") == os.path.join(os.path.expanduser("~"), "setup.log")


def test_resolve_log_file_keeps_absolute(tmp_path):
    """Absolute paths are used as given."""
    assert resolve_log_file(str(tmp_path / "setup.log")) == str(tmp_path / "setup.log")


# --- log ---

def test_log_prints_message(capsys, monkeypatch):
    """Messages always reach the console."""
    monkeypatch.delenv(LOG_FILE_ENV, raising=False)
    log("Creating directory structure...", style="green")
    assert "Creating directory structure..." in capsys.readouterr().out


def test_log_appends_to_configured_file(tmp_path, monkeypatch):
    """With an absolute log path set, each message is appended as a line."""
    log_file = tmp_path / "setup.log"
    monkeypatch.setenv(LOG_FILE_ENV, str(log_file))
    log("first")
    log("second", style="yellow")
    assert log_file.read_text(encoding="utf-8") == "first\nsecond\n"


def test_log_never_raises_on_bad_log_path(tmp_path, monkeypatch):
    """An unwritable log path never breaks the run."""
    monkeypatch.setenv(LOG_FILE_ENV, str(tmp_path / "missing-dir" / "setup.log"))
    log("still printed")


def test_relative_log_path_leaves_declined_run_untouched(tmp_path, monkeypatch):
    """A relative log path plus a declined confirmation still writes nothing to the directory."""
    monkeypatch.setenv(LOG_FILE_ENV, "setup.log")
    monkeypatch.chdir(tmp_path)

    exit_code = run_init(str(tmp_path), lambda label: "", lambda label: False)

    assert exit_code == 1
    assert list(tmp_path.iterdir()) == []
