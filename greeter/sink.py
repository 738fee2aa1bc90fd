"""Output sinks for rendered greetings.

- `OutputSink`: Context manager that owns either a file or the standard output stream.
"""
import logging
import sys
import typing as t

from greeter.errors import IoWriteError, SinkCreationError

__all__ = ['OutputSink']

logger = logging.getLogger(__name__)


class OutputSink(object):
    """Writable destination for rendered lines.

    If `path` is None, lines are written to standard output (the stream that is `sys.stdout` at the time the sink is
    entered), which is flushed but never closed. Otherwise, a file is created (or truncated) on enter, and closed on
    exit. There is no fallback to standard output when a file cannot be created.

    ```python
    with OutputSink(path) as sink:
        sink.write_line("Salve Mario!")
    ```
    """

    def __init__(self, path: t.Optional[str] = None) -> None:
        self.path = path
        self._stream: t.Optional[t.TextIO] = None

    @property
    def owned(self) -> bool:
        """Return True if this sink owns (and so must close) its stream."""
        return self.path is not None

    @property
    def name(self) -> str:
        """Human-readable sink name for diagnostics."""
        return f"file '{self.path}'" if self.owned else "standard output"

    def open(self) -> 'OutputSink':
        if self.path is None:
            self._stream = sys.stdout
            return self
        try:
            self._stream = open(self.path, "w")
        except OSError as err:
            raise SinkCreationError(self.path, str(err))
        logger.debug("OutputSink.open created output file (%s).", self.path)
        return self

    def write_line(self, line: str) -> None:
        """Write one line followed by a line terminator."""
        if self._stream is None:
            raise IoWriteError.write_error(self.name, "Sink is not open.")
        try:
            self._stream.write(line + "\n")
        except OSError as err:
            raise IoWriteError.write_error(self.name, str(err), line=line)

    def close(self) -> None:
        if self._stream is None:
            return
        stream, self._stream = self._stream, None
        try:
            if self.owned:
                stream.close()
            else:
                stream.flush()
        except OSError as err:
            raise IoWriteError.write_error(self.name, str(err))

    def __enter__(self) -> 'OutputSink':
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.close()
            return
        # Already failing: release the stream without masking the original error.
        try:
            self.close()
        except IoWriteError as err:
            logger.debug("OutputSink.__exit__ failed to close %s: %s", self.name, str(err))
