"""Background writer that batches log lines into buffers and flushes them."""

from __future__ import annotations

import os
import threading

from elogger.buffers import CountDownLatch, FixedBuffer
from elogger.logfile import LogFile, LogFileError

BUFFER_SIZE = 1024


class AsyncLogging:
    """Collects log lines in memory and writes them from a worker thread.

    Lines are gathered in fixed buffers of ``BUFFER_SIZE`` bytes. A full
    buffer wakes the worker; otherwise it writes whatever has gathered every
    ``flush_interval`` seconds. A single line that cannot fit an empty buffer
    is dropped.
    """

    def __init__(self, basename: str | os.PathLike, flush_interval: float = 2) -> None:
        self.basename = os.fspath(basename)
        self.flush_interval = flush_interval
        self._running = False
        self._cond = threading.Condition()
        self._current: FixedBuffer = FixedBuffer(BUFFER_SIZE)
        self._next: FixedBuffer | None = FixedBuffer(BUFFER_SIZE)
        self._buffers: list[FixedBuffer] = []
        self._latch = CountDownLatch(1)
        self._thread: threading.Thread | None = None
        self._startup_error: LogFileError | None = None

    @property
    def running(self) -> bool:
        with self._cond:
            return self._running

    def append(self, logline: bytes) -> None:
        with self._cond:
            if self._current.available() > len(logline):
                self._current.append(logline)
                return
            self._buffers.append(self._current)
            if self._next is not None:
                self._current, self._next = self._next, None
            else:
                self._current = FixedBuffer(BUFFER_SIZE)
            self._current.append(logline)
            self._cond.notify_all()

    def start(self) -> None:
        """Start the worker and wait until it has opened the log file."""
        if self._thread is not None:
            raise RuntimeError("logging thread already started")
        self._latch = CountDownLatch(1)
        self._startup_error = None
        with self._cond:
            self._running = True
        self._thread = threading.Thread(
            target=self._run, name=f"AsyncLogging-{self.basename}", daemon=True
        )
        self._thread.start()
        self._latch.wait()
        if self._startup_error is not None:
            self._thread.join()
            self._thread = None
            with self._cond:
                self._running = False
            raise self._startup_error

    def stop(self) -> None:
        """Stop the worker after it has written everything appended so far."""
        if self._thread is None:
            return
        with self._cond:
            self._running = False
            self._cond.notify_all()
        self._thread.join()
        self._thread = None

    def __enter__(self) -> AsyncLogging:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _run(self) -> None:
        try:
            log_file = LogFile(self.basename)
        except LogFileError as exc:
            self._startup_error = exc
            self._latch.count_down()
            return
        self._latch.count_down()

        with log_file:
            while True:
                spare_current = FixedBuffer(BUFFER_SIZE)
                spare_next = FixedBuffer(BUFFER_SIZE)
                with self._cond:
                    if self._running and not self._buffers:
                        self._cond.wait_for(
                            lambda: bool(self._buffers) or not self._running,
                            self.flush_interval,
                        )
                    still_running = self._running
                    self._buffers.append(self._current)
                    self._current = spare_current
                    to_write, self._buffers = self._buffers, []
                    if self._next is None:
                        self._next = spare_next
                for buffer in to_write:
                    if len(buffer):
                        log_file.append(buffer.data())
                log_file.flush()
                if not still_running:
                    break