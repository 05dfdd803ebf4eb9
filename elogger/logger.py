"""Leveled logger that formats lines and hands them to a background writer."""

from __future__ import annotations

import os
import sys
import threading
from datetime import datetime
from enum import Enum

from elogger.async_logging import AsyncLogging
from elogger.buffers import LogStream


class Level(Enum):
    INFO = "INFO"
    ERROR = "ERROR"
    WARNING = "WARNING"
    DEBUG = "DEBUG"
    GENERAL = "GENERAL"
    CRITICAL = "CRITICAL"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return None


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a time as ``YYYY-MM-DD HH:MM:SS,mmm`` in local time."""
    if moment is None:
        moment = datetime.now()
    return f"{moment:%Y-%m-%d %H:%M:%S},{moment.microsecond // 1000:03d}"


class Logger:
    """Writes ``[TIME] [Thread-ID] [LEVEL] message`` lines to a file."""

    def __init__(
        self,
        name: str | os.PathLike,
        flush_interval: float = 2,
        display_log: bool = False,
    ) -> None:
        self.name = os.fspath(name)
        self.display_log = display_log
        self._async = AsyncLogging(self.name, flush_interval)
        self._async.start()

    def log(self, level: Level | str, message: str) -> str:
        """Record one line and return the text that was recorded."""
        level = Level(level)
        line = (
            f"[{format_timestamp()}] "
            f"[Thread-{threading.get_ident()}] "
            f"[{level.value}] "
            f"{message}\n"
        )
        stream = LogStream()
        stream.write(line)
        data = stream.buffer().data()
        self._async.append(data)
        text = data.decode("utf-8")
        if self.display_log:
            sys.stdout.write(text)
        return text

    def info(self, message: str) -> str:
        return self.log(Level.INFO, message)

    def error(self, message: str) -> str:
        return self.log(Level.ERROR, message)

    def warning(self, message: str) -> str:
        return self.log(Level.WARNING, message)

    def debug(self, message: str) -> str:
        return self.log(Level.DEBUG, message)

    def general(self, message: str) -> str:
        return self.log(Level.GENERAL, message)

    def critical(self, message: str) -> str:
        return self.log(Level.CRITICAL, message)

    def close(self) -> None:
        self._async.stop()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()