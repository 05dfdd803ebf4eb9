"""Append-only log file with thread-safe writes."""

from __future__ import annotations

import os
import threading
from pathlib import Path


class LogFileError(OSError):
    """Raised when the log file cannot be opened or written."""


class LogFile:
    """A file opened for appending; missing parent directories are created."""

    def __init__(self, basename: str | os.PathLike) -> None:
        self.basename = os.fspath(basename)
        self._lock = threading.Lock()
        path = Path(self.basename)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._stream = open(path, "ab")
        except OSError as exc:
            raise LogFileError(f"Failed to open log file: {self.basename}") from exc

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def append(self, data: bytes) -> None:
        with self._lock:
            try:
                self._stream.write(data)
            except (OSError, ValueError) as exc:
                raise LogFileError(
                    f"Failed to write to log file: {self.basename}"
                ) from exc

    def flush(self) -> None:
        with self._lock:
            if not self._stream.closed:
                self._stream.flush()

    def close(self) -> None:
        with self._lock:
            if not self._stream.closed:
                self._stream.close()

    def __enter__(self) -> LogFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()