"""Append-only text log and shader source loading."""

from __future__ import annotations

import sys
import time
from pathlib import Path

DEFAULT_LOG_FILE = "gl.log"
MAX_SHADER_LENGTH = 262144


def _format(message: str, args: tuple) -> str:
    return message % args if args else message


class GLLog:
    """A log file that is reopened for every write."""

    def __init__(self, path: str | Path = DEFAULT_LOG_FILE) -> None:
        self.path = Path(path)

    def restart(self) -> bool:
        """Truncate the log and write a header with the local time."""
        try:
            with self.path.open("w") as file:
                file.write(f"GL_LOG_FILE log. local time {time.ctime()}\n\n")
        except OSError:
            print(
                f"ERROR: could not open GL_LOG_FILE log file {self.path} for writing",
                file=sys.stderr,
            )
            return False
        return True

    def _append(self, text: str, echo: bool) -> bool:
        try:
            with self.path.open("a") as file:
                file.write(text)
        except OSError:
            print(
                f"ERROR: could not open GL_LOG_FILE {self.path} file for appending",
                file=sys.stderr,
            )
            return False
        if echo:
            sys.stderr.write(text)
        return True

    def log(self, message: str, *args) -> bool:
        """Append a printf-style formatted message to the log."""
        return self._append(_format(message, args), echo=False)

    def log_err(self, message: str, *args) -> bool:
        """Like :meth:`log`, but also write the message to stderr."""
        return self._append(_format(message, args), echo=True)


def read_shader_source(
    file_name: str | Path, max_len: int = MAX_SHADER_LENGTH, log: GLLog | None = None
) -> str:
    """Read a shader file, logging a complaint for each line past ``max_len``."""
    try:
        file = open(file_name, "r")
    except OSError:
        if log is not None:
            log.log_err("ERROR: opening file for reading: %s\n", str(file_name))
        raise
    parts: list[str] = []
    current_len = 0
    with file:
        for line in file:
            current_len += len(line)
            if current_len >= max_len and log is not None:
                log.log_err(
                    "ERROR: shader length is longer than string buffer length %i\n",
                    max_len,
                )
            parts.append(line)
    return "".join(parts)