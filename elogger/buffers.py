"""Fixed-capacity byte buffers, a small text stream and a count-down latch."""

from __future__ import annotations

import threading

LOG_STREAM_SIZE = 4096


class FixedBuffer:
    """A byte buffer with a fixed capacity.

    One byte of the capacity is always kept free, so a chunk is accepted
    only when it is strictly smaller than the space still available.
    Chunks that do not fit are dropped whole.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"buffer size must be positive, got {size}")
        self._size = size
        self._data = bytearray()

    @property
    def size(self) -> int:
        return self._size

    def append(self, data: bytes) -> bool:
        """Append ``data`` if it fits; return whether it was stored."""
        if self.available() > len(data):
            self._data += data
            return True
        return False

    def available(self) -> int:
        return self._size - len(self._data)

    def reset(self) -> None:
        self._data.clear()

    def data(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FixedBuffer(size={self._size}, length={len(self._data)})"


class LogStream:
    """Collects text into a fixed buffer of ``LOG_STREAM_SIZE`` bytes."""

    def __init__(self) -> None:
        self._buffer = FixedBuffer(LOG_STREAM_SIZE)

    def write(self, text: str | None) -> LogStream:
        """Append text encoded as UTF-8; ``None`` is written as ``(null)``."""
        if text is None:
            self._buffer.append(b"(null)")
        else:
            self._buffer.append(text.encode("utf-8"))
        return self

    def append(self, data: bytes) -> None:
        self._buffer.append(data)

    def buffer(self) -> FixedBuffer:
        return self._buffer

    def reset_buffer(self) -> None:
        self._buffer.reset()


class CountDownLatch:
    """Lets threads wait until a counter has been brought down to zero."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        self._count = count
        self._cond = threading.Condition()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the count reaches zero; return False on timeout."""
        with self._cond:
            return self._cond.wait_for(lambda: self._count == 0, timeout)

    def count_down(self) -> None:
        with self._cond:
            if self._count > 0:
                self._count -= 1
                if self._count == 0:
                    self._cond.notify_all()

    @property
    def count(self) -> int:
        with self._cond:
            return self._count