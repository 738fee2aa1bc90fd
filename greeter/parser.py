"""Helper utilities to parse command line arguments.

- `CliParser`: Helper utilities to parse command line arguments.
"""
import logging
import typing as t

from greeter.errors import EmptyListError

__all__ = ['CliParser']

logger = logging.getLogger(__name__)


class CliParser(object):
    """Helper utilities to parse command line arguments."""

    @staticmethod
    def split_list_arg(arg: t.Optional[str], delimiter: str = ",") -> t.List[str]:
        """Parse a string into list of trimmed, non-empty strings.

        Order of items is preserved. Applying this function to its own (joined) output returns the same list.

        Args:
            arg: String of elements separated with `delimiter`.
            delimiter: Elements separator.
        Returns:
            List of items, possibly empty.
        """
        if not arg:
            return []
        return [item.strip() for item in arg.split(delimiter) if item.strip()]

    @staticmethod
    def parse_list_arg(arg: t.Optional[str], label: str, delimiter: str = ",") -> t.List[str]:
        """Parse a list of names or greetings.

        Args:
            arg: String of elements separated with `delimiter`.
            label: What these elements are (`name` or `greeting`).
            delimiter: Elements separator.
        Returns:
            Non-empty list of items.
        """
        items = CliParser.split_list_arg(arg, delimiter)
        if not items:
            raise EmptyListError(label)
        logger.debug("CliParser.parse_list_arg %ss=%s", label, items)
        return items
