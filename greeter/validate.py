"""Classes to perform various validation checks against command line arguments and settings files.

- `Validate`: Validation utils for dictionary-like objects (in particular, DictConfig from omegaconf).
- `TokenPolicy`: Character class and length policy for names and greetings.
"""
import logging
import re
import typing as t

from omegaconf import DictConfig

from greeter.errors import (ArgumentMissingError, ConfigurationError, InvalidCharactersError,
                            InvalidRepeatValueError, TooLongError, TooShortError)

__all__ = ['Validate', 'TokenPolicy']

logger = logging.getLogger(__name__)

Keys = t.Union[str, t.Iterable[str]]
"""One or many dictionary keys."""


class Validate(object):
    """Dictionary validation utils."""

    @staticmethod
    def format_keys(keys: t.Optional[Keys]) -> t.Iterable[str]:
        """Format keys so that they are always represented as list of strings."""
        if keys is None:
            return []
        if isinstance(keys, str):
            return [keys]
        return keys

    def _namespace_msg(self) -> str:
        return f" Namespace = {self.namespace}." if self.namespace else ""

    def __init__(self, config: DictConfig, namespace: t.Optional[str] = None) -> None:
        """Initialize dictionary validation class.

        Args:
            config: Dictionary to run various validation checks.
            namespace: Where this dictionary comes from (e.g., path to a settings file).
        """
        self.config = config
        self.namespace = namespace or ''

    def check_unknown_keys(self, known_keys: t.Iterable[str]) -> 'Validate':
        """Check if this dict contains unknown (== unexpected) keys.

        Args:
            known_keys: Dictionary is expected to contain only these keys.
        """
        unknown_keys = [key for key in self.config if key not in known_keys]
        if unknown_keys:
            raise ConfigurationError(f"Unknown keys: {unknown_keys}.{self._namespace_msg()}")
        return self

    def check_values(self, keys: Keys, type_) -> 'Validate':
        """Check that values of these keys (when present) are of `type_` type."""
        for key in Validate.format_keys(keys):
            value = self.config.get(key, None)
            if value is None:
                continue
            # YAML booleans are python booleans, and those are integers too.
            if not isinstance(value, type_) or (type_ is int and isinstance(value, bool)):
                raise ConfigurationError(f"Expecting {type_} value, key={key}.{self._namespace_msg()}")
        return self

    @staticmethod
    def required(value: t.Optional[str], option: str) -> str:
        """Check that a required command line argument has been provided.

        Args:
            value: Argument value, None if it has not been provided.
            option: Option name (e.g. `--names`) to report to a user.
        """
        if value is None:
            raise ArgumentMissingError(option)
        return value

    @staticmethod
    def repeat(value: int) -> int:
        """Check that the repeat count is a positive integer."""
        if value <= 0:
            raise InvalidRepeatValueError(value)
        return value


class TokenPolicy(object):
    """Policy for individual names and greetings (tokens).

    A token is valid when it contains only ASCII letters, ASCII digits and spaces, and its length is within
    [min_length, max_length]. Non-ASCII letters, tabs and other whitespace characters are rejected.
    """

    PATTERN = re.compile(r"[A-Za-z0-9 ]+")

    def __init__(self, min_length: int = 2, max_length: int = 50) -> None:
        if min_length <= 0 or max_length < min_length:
            raise ConfigurationError(
                f"Invalid token length bounds: min_length={min_length}, max_length={max_length}."
            )
        self.min_length = min_length
        self.max_length = max_length

    def check(self, token: str, label: str) -> str:
        """Check one trimmed token.

        Checks run in this order: characters, minimum length, maximum length. An empty token fails the character
        check.
        """
        if not TokenPolicy.PATTERN.fullmatch(token):
            raise InvalidCharactersError(label, token)
        if len(token) < self.min_length:
            raise TooShortError(label, token, self.min_length)
        if len(token) > self.max_length:
            raise TooLongError(label, token, self.max_length)
        return token

    def validate(self, text: str, label: str, delimiter: str = ",") -> None:
        """Validate every segment of a delimited string, stopping at the first invalid one.

        Args:
            text: Raw command line value, e.g. "Mario, Anna".
            label: What these tokens are (`name` or `greeting`), used in error messages.
            delimiter: Token separator.
        """
        for part in text.split(delimiter):
            self.check(part.strip(), label)
        logger.debug("TokenPolicy.validate %s tokens are valid (text='%s').", label, text)
