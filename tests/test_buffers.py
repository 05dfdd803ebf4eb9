import threading

import pytest

from elogger.buffers import LOG_STREAM_SIZE, CountDownLatch, FixedBuffer, LogStream


def test_fixed_buffer_append_and_read_back():
    buf = FixedBuffer(16)
    assert buf.append(b"hello")
    assert buf.append(b" world")
    assert buf.data() == b"hello world"
    assert len(buf) == len(b"hello world")
    assert buf.available() == 16 - len(b"hello world")


def test_fixed_buffer_rejects_chunk_filling_exactly():
    buf = FixedBuffer(4)
    assert not buf.append(b"abcd")
    assert buf.data() == b""
    assert buf.append(b"abc")
    assert buf.available() == 1
    assert not buf.append(b"d")
    assert buf.data() == b"abc"


def test_fixed_buffer_reset():
    buf = FixedBuffer(8)
    buf.append(b"abc")
    buf.reset()
    assert len(buf) == 0
    assert buf.available() == 8
    assert buf.data() == b""


@pytest.mark.parametrize("size", [0, -1])
def test_fixed_buffer_invalid_size(size):
    with pytest.raises(ValueError):
        FixedBuffer(size)


def test_log_stream_write_text_and_none():
    stream = LogStream()
    stream.write("abc").write(None)
    assert stream.buffer().data() == b"abc(null)"


def test_log_stream_append_bytes_and_reset():
    stream = LogStream()
    stream.append(b"xyz")
    assert stream.buffer().data() == b"xyz"
    stream.reset_buffer()
    assert stream.buffer().data() == b""


def test_log_stream_drops_oversized_text():
    stream = LogStream()
    stream.write("a" * LOG_STREAM_SIZE)
    assert len(stream.buffer()) == 0
    stream.write("a" * (LOG_STREAM_SIZE - 1))
    assert len(stream.buffer()) == LOG_STREAM_SIZE - 1


def test_log_stream_encodes_utf8():
    stream = LogStream()
    stream.write("é")
    assert stream.buffer().data() == "é".encode("utf-8")


def test_latch_counts_down_and_stops_at_zero():
    latch = CountDownLatch(2)
    latch.count_down()
    assert latch.count == 1
    latch.count_down()
    latch.count_down()
    assert latch.count == 0


def test_latch_wait_times_out_while_positive():
    latch = CountDownLatch(1)
    assert latch.wait(timeout=0.01) is False


def test_latch_wait_returns_when_released_by_other_thread():
    latch = CountDownLatch(1)
    worker = threading.Thread(target=latch.count_down)
    worker.start()
    assert latch.wait(timeout=5) is True
    worker.join()
    assert latch.count == 0


def test_latch_negative_count():
    with pytest.raises(ValueError):
        CountDownLatch(-1)