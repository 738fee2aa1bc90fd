"""Collection of greeter exceptions.

-GreeterError: Base class for all greeter errors.
 |-ConfigurationError: Base class for all configuration and input errors.
 | |-ArgumentMissingError: Required command line argument has not been provided.
 | |-InvalidRepeatValueError: Repeat count is not a positive integer.
 | |-IllegalTokenError: Base class for names and greetings that violate the token policy.
 | | |-InvalidCharactersError: Token contains characters other than ASCII letters, digits and spaces.
 | | |-TooShortError: Token is shorter than the minimum length.
 | | |-TooLongError: Token is longer than the maximum length.
 | |-EmptyListError: List of names or greetings is empty after normalization.
 |-ExecutionError: Any error related to writing greetings.
   |-SinkCreationError: Output file could not be created.
   |-IoWriteError: Greeting could not be written to the output sink.
"""
import copy
import typing as t


__all__ = [
    'GreeterError',
    'ConfigurationError', 'ArgumentMissingError', 'InvalidRepeatValueError',
    'IllegalTokenError', 'InvalidCharactersError', 'TooShortError', 'TooLongError', 'EmptyListError',
    'ExecutionError', 'SinkCreationError', 'IoWriteError'
]


class GreeterError(Exception):
    """Base class for all greeter errors."""

    exit_code: int = 1
    """Process exit code when this error terminates the program."""


class ConfigurationError(GreeterError):
    """Base class for all configuration errors."""

    pass


class ArgumentMissingError(ConfigurationError):
    """Exception to be raised when a required command line argument is missing."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Missing required option '{option}'.")


class InvalidRepeatValueError(ConfigurationError):
    """Exception to be raised when the repeat count is zero or negative."""

    def __init__(self, value: t.Any) -> None:
        self.value = value
        super().__init__(f"The value of --repeat must be a positive integer (actual value: {value}).")


class IllegalTokenError(ConfigurationError):
    """Base exception for names and greetings that violate the token policy."""

    def __init__(self, label: str, token: str, message: str) -> None:
        """Initialize instance of this error.

        Args:
            label: What this token is (`name` or `greeting`).
            token: The offending token (trimmed).
            message: Human-readable description of the violated rule.
        """
        self.label = label
        self.token = token
        super().__init__(message)


class InvalidCharactersError(IllegalTokenError):
    """Token contains characters other than ASCII letters, digits and spaces."""

    def __init__(self, label: str, token: str) -> None:
        super().__init__(
            label, token,
            f"The {label} '{token}' contains invalid characters. Only alphanumeric characters and spaces are allowed."
        )


class TooShortError(IllegalTokenError):
    """Token is shorter than the minimum allowed length."""

    def __init__(self, label: str, token: str, min_length: int) -> None:
        self.min_length = min_length
        super().__init__(
            label, token,
            f"The {label} '{token}' is too short. The minimum allowed length is {min_length} characters."
        )


class TooLongError(IllegalTokenError):
    """Token is longer than the maximum allowed length."""

    def __init__(self, label: str, token: str, max_length: int) -> None:
        self.max_length = max_length
        super().__init__(
            label, token,
            f"The {label} '{token}' is too long. The maximum allowed length is {max_length} characters."
        )


class EmptyListError(ConfigurationError):
    """Exception to be raised when a list of names or greetings contains no tokens."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"The list of {label}s is empty or contains only whitespaces.")


class ExecutionError(GreeterError):
    """Any error related to writing greetings to an output sink."""

    def __init__(self, message: str, description: t.Optional[str] = None, **kwargs) -> None:
        """Initialize instance of this error.

        Args:
            message: Brief message.
            description: Extended description.
            kwargs: Any related context associated with this error.
        """
        super().__init__(f"{message} {description}" if description else message)
        self.message = message
        self.description = description
        self.context = copy.deepcopy(kwargs)

    def describe(self, frmt: str = 'text') -> str:
        """Convert this error into some other representation.

        Args:
            frmt: Format error according to this value. The only supported value is `text` (human-readable description).
        """
        if frmt != 'text':
            raise ValueError(f"Unsupported error description format ('{frmt}').")
        msg = f"ERROR:\n\tmessage: {self.message}"
        if self.description:
            msg += f"\n\tdescription: {self.description}"
        if self.context:
            msg += f"\n\tcontext: {self.context}"
        return msg


class SinkCreationError(ExecutionError):
    """Output file could not be created (or truncated) for writing."""

    def __init__(self, path: str, error: str) -> None:
        super().__init__(f"Unable to create file '{path}':", error, path=path)
        self.path = path
        self.error = error


class IoWriteError(ExecutionError):
    """Greeting could not be written to (or flushed into) an output sink."""

    @classmethod
    def write_error(cls, sink: str, description: t.Optional[str] = None, **kwargs) -> 'IoWriteError':
        """Return error raised while writing into the `sink` sink."""
        return cls(f"Failed to write to {sink}.", description, **kwargs)
