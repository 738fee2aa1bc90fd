import typing as t
from unittest import TestCase

from greeter.errors import (ArgumentMissingError, ConfigurationError, EmptyListError, ExecutionError, GreeterError,
                            IllegalTokenError, InvalidCharactersError, InvalidRepeatValueError, IoWriteError,
                            SinkCreationError, TooLongError, TooShortError)


class TestErrors(TestCase):

    def check_execution_error_state(self, err: ExecutionError, message: str, description: str, context: t.Dict) -> None:
        self.assertEqual(err.message, message)
        self.assertEqual(err.description, description)
        self.assertDictEqual(err.context, context)

        self.assertEqual(
            err.describe(frmt='text'),
            f"ERROR:\n\tmessage: {message}\n\tdescription: {description}\n\tcontext: {context}"
        )

    def test_execution_error_init_method(self) -> None:
        self.check_execution_error_state(
            ExecutionError("Brief error description.", "Long error description.", param_a='value_a', param_b=1.2),
            "Brief error description.", "Long error description.", {'param_a': 'value_a', 'param_b': 1.2}
        )

    def test_execution_error_describe_format(self) -> None:
        with self.assertRaises(ValueError):
            ExecutionError("Brief error description.").describe(frmt='json')
        self.assertEqual(ExecutionError("Brief.").describe(), "ERROR:\n\tmessage: Brief.")

    def test_sink_creation_error(self) -> None:
        err = SinkCreationError("/invalid_path/out.txt", "[Errno 2] No such file or directory")
        self.check_execution_error_state(
            err, "Unable to create file '/invalid_path/out.txt':", "[Errno 2] No such file or directory",
            {'path': '/invalid_path/out.txt'}
        )
        self.assertEqual(err.path, "/invalid_path/out.txt")
        self.assertEqual(str(err), "Unable to create file '/invalid_path/out.txt': [Errno 2] No such file or directory")

    def test_io_write_error_write_error_method(self) -> None:
        self.check_execution_error_state(
            IoWriteError.write_error("standard output", "[Errno 28] No space left on device", line="Salve Mario!"),
            "Failed to write to standard output.", "[Errno 28] No space left on device", {'line': 'Salve Mario!'}
        )

    def test_token_errors(self) -> None:
        err = InvalidCharactersError("name", "@@@")
        self.assertEqual(
            str(err), "The name '@@@' contains invalid characters. Only alphanumeric characters and spaces are allowed."
        )
        self.assertEqual((err.label, err.token), ("name", "@@@"))

        err = TooShortError("name", "A", 2)
        self.assertEqual(str(err), "The name 'A' is too short. The minimum allowed length is 2 characters.")
        self.assertEqual(err.min_length, 2)

        err = TooLongError("greeting", "Salve" * 11, 50)
        self.assertEqual(
            str(err), f"The greeting '{'Salve' * 11}' is too long. The maximum allowed length is 50 characters."
        )
        self.assertEqual(err.max_length, 50)

    def test_hierarchy(self) -> None:
        for err in (InvalidCharactersError("name", ""), TooShortError("name", "A", 2), TooLongError("name", "A", 1)):
            self.assertIsInstance(err, IllegalTokenError)
            self.assertIsInstance(err, ConfigurationError)
        for err in (ArgumentMissingError("--names"), InvalidRepeatValueError(0), EmptyListError("name")):
            self.assertIsInstance(err, ConfigurationError)
        for err in (SinkCreationError("out.txt", "error"), IoWriteError("error")):
            self.assertIsInstance(err, ExecutionError)

        errors = (ArgumentMissingError("--names"), InvalidRepeatValueError(-3), EmptyListError("greeting"),
                  SinkCreationError("out.txt", "error"), IoWriteError("error"))
        for err in errors:
            self.assertIsInstance(err, GreeterError)
            self.assertEqual(err.exit_code, 1)

    def test_messages(self) -> None:
        self.assertEqual(str(ArgumentMissingError("--names")), "Missing required option '--names'.")
        self.assertEqual(
            str(InvalidRepeatValueError(-3)), "The value of --repeat must be a positive integer (actual value: -3)."
        )
        self.assertEqual(
            str(EmptyListError("greeting")), "The list of greetings is empty or contains only whitespaces."
        )
