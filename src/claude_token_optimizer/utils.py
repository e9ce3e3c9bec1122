"""Core utility functions: console output, logging, file writes, dates."""

import os
from datetime import date

from rich.console import Console

from claude_token_optimizer.config import DATE_FORMAT, LOG_FILE_ENV

console = Console(highlight=False)


def resolve_log_file(value: str) -> str:
    """Return the log file path from the env value, or "" when logging to file is off.

    "~" is expanded. Relative paths are ignored: they would resolve inside
    the project being scaffolded.
    """
    path = os.path.expanduser(value.strip())
    if not path or not os.path.isabs(path):
        return ""
    return path


def log(message: str, style: str = "") -> None:
    """Write a message to the console (with optional style) and the optional log file."""
    if style:
        console.print(message, style=style)
    else:
        console.print(message)

    log_file = resolve_log_file(os.environ.get(LOG_FILE_ENV, ""))
    if not log_file:
        return
    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(message + "\n")
    except Exception:
        pass  # Never break the run over logging


def format_date(today: date) -> str:
    """Return the date stamp written into generated documents (YYYY-MM-DD)."""
    return today.strftime(DATE_FORMAT)


def write_text_file(path: str, content: str) -> None:
    """Write content to path, creating parent directories. Overwrites unconditionally."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def to_native_path(root: str, relative: str) -> str:
    """Join a POSIX-style relative path onto root using the platform separator."""
    return os.path.join(root, *relative.split("/"))
