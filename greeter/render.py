"""Pairing of names and greetings, and rendering of greeting lines.

- `Renderer`: Pairs names with greetings using cyclic indexing and writes greeting lines into an output sink.
"""
import json
import logging
import typing as t

from greeter.errors import InvalidRepeatValueError
from greeter.sink import OutputSink

__all__ = ['format_list', 'Renderer']

logger = logging.getLogger(__name__)


def format_list(items: t.Sequence[str]) -> str:
    """Stable debug representation of a sequence, e.g. `["Salve", "Ciao"]`."""
    return json.dumps(list(items))


class Renderer(object):
    """Render `repeat` greeting lines.

    Line `i` pairs `greetings[i % len(greetings)]` with `names[i % len(names)]`, so when lists have different lengths
    the shorter one wraps around.

    Args:
        names: Normalized, non-empty list of names.
        greetings: Normalized, non-empty list of greetings.
        repeat: Number of greeting lines, positive.
        verbose: If true, write a summary (mode, repeat count, greetings and names) before greeting lines.
    """

    def __init__(self, names: t.Sequence[str], greetings: t.Sequence[str], repeat: int, verbose: bool = False) -> None:
        if not names or not greetings:
            raise ValueError(f"Names and greetings must not be empty (names={names}, greetings={greetings}).")
        if repeat <= 0:
            raise InvalidRepeatValueError(repeat)
        self.names = list(names)
        self.greetings = list(greetings)
        self.repeat = repeat
        self.verbose = verbose

    def check_lengths(self) -> bool:
        """Warn if the number of names differs from the number of greetings.

        Returns:
            True if lists have the same length.
        """
        if len(self.names) == len(self.greetings):
            return True
        logger.warning(
            "The number of names (%d) and greetings (%d) does not match. Names and greetings will be paired "
            "cyclically.", len(self.names), len(self.greetings)
        )
        return False

    def pairs(self) -> t.Iterator[t.Tuple[str, str]]:
        """Yield (greeting, name) pairs in output order."""
        for i in range(self.repeat):
            yield self.greetings[i % len(self.greetings)], self.names[i % len(self.names)]

    def summary(self) -> t.List[str]:
        return [
            "Verbose mode enabled.",
            f"Greeting repetitions: {self.repeat}",
            f"Greetings: {format_list(self.greetings)}",
            f"Names: {format_list(self.names)}",
        ]

    def lines(self) -> t.Iterator[str]:
        """Yield all output lines (without line terminators)."""
        if self.verbose:
            yield from self.summary()
        for greeting, name in self.pairs():
            yield f"{greeting} {name}!"

    def render(self, sink: OutputSink) -> int:
        """Write all lines into an open sink.

        Write errors are not recovered; the sink may contain a prefix of the output.

        Returns:
            Number of greeting lines written.
        """
        self.check_lengths()
        for line in self.lines():
            sink.write_line(line)
        logger.info("Renderer.render wrote %d greeting(s) to %s.", self.repeat, sink.name)
        return self.repeat
