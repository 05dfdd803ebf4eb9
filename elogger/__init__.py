"""File logger that batches lines in memory and writes them from a background thread."""

__version__ = "0.1.0"
__all__ = ["buffers", "logfile", "async_logging", "logger"]