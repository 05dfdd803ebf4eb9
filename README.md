# elogger

A small logger that writes lines to a file from a background thread.

Log lines are collected in fixed-size in-memory buffers of 1024 bytes. A
writer thread appends the collected buffers to the log file and flushes it.
It does this as soon as a buffer fills up, and also every `flush_interval`
seconds. The threads that log only touch memory.

## Usage

```python
from elogger.logger import Logger

with Logger("logs/app.log", flush_interval=2, display_log=True) as log:
    log.info("service started")
    log.warning("disk usage at 85%")
    log.error("could not reach upstream")
```

The writer thread starts when the `Logger` is created. Leaving the `with`
block or calling `close()` stops it, after everything logged so far has been
written.

Each line has this format:

```
[2024-05-01 12:34:56,789] [Thread-140201234567] [INFO] service started
```

The time is local time with milliseconds, made by
`elogger.logger.format_timestamp()`. The thread number comes from
`threading.get_ident()`.

The level methods are `info`, `error`, `warning`, `debug`, `general` and
`critical`. You can also call `log(level, message)`. Here `level` is a `Level`
member or its name as a string, in any case, such as `"warning"`. Each call
returns the text of the line it recorded.

If the directory of the log file does not exist, it is created. Lines are
appended to a file that is already there. If the file cannot be opened,
creating the `Logger` raises `elogger.logfile.LogFileError`. When
`display_log` is true, every line is also written to standard output.

## Limits

- A line that does not fit in one 1024-byte buffer is dropped, including the
  prefix and the trailing newline. The line must be smaller than 1024 bytes
  once it is encoded as UTF-8.
- Every message is recorded. There is no level filtering.
- The logger does not rotate or size-limit files.
- There is no command-line tool.

## Lower-level pieces

- `elogger.async_logging.AsyncLogging`: the background writer. Use
  `start()`/`stop()` or a `with` block, and pass raw bytes to `append()`.
- `elogger.logfile.LogFile`: an append-only file with locking, usable as a
  context manager.
- `elogger.buffers`:
  - `FixedBuffer`: a capacity-bounded byte buffer that drops chunks that do
    not fit.
  - `LogStream`: text collected into a 4096-byte buffer. `None` is written as
    `(null)`.
  - `CountDownLatch`: a latch that threads can wait on.

## Tests

The tests use pytest. Install the `test` extra to get it.