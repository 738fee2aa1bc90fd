import io
import tempfile
from pathlib import Path
from unittest import TestCase
from unittest.mock import patch

from omegaconf import OmegaConf

from greeter.config import GreeterConfig
from greeter.errors import (ArgumentMissingError, ConfigurationError, InvalidCharactersError,
                            InvalidRepeatValueError, SinkCreationError, TooLongError, TooShortError)
from greeter.render import Renderer
from greeter.runner import GreeterRunner


class TestGreeterRunner(TestCase):

    def setUp(self) -> None:
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp_dir.name)

    def tearDown(self) -> None:
        self._tmp_dir.cleanup()

    def _run(self, names, greetings, **kwargs) -> str:
        stdout = io.StringIO()
        config = GreeterConfig.create_greeter_config(**kwargs)
        with patch("sys.stdout", new=stdout):
            GreeterRunner(config, names, greetings).run()
        return stdout.getvalue()

    def test_init(self) -> None:
        runner = GreeterRunner({"repeat": 2}, "Mario", "Salve")
        self.assertEqual(runner.config.repeat, 2)
        self.assertEqual(runner.config.max_length, 50)
        with self.assertRaises(ConfigurationError):
            GreeterRunner(["repeat"], "Mario", "Salve")

    def test_configure(self) -> None:
        runner = GreeterRunner(GreeterConfig.create_greeter_config(repeat=3), " Mario , Anna", "Salve,Ciao ")
        renderer = runner.configure()
        self.assertIsInstance(renderer, Renderer)
        self.assertListEqual(renderer.names, ["Mario", "Anna"])
        self.assertListEqual(renderer.greetings, ["Salve", "Ciao"])
        self.assertEqual(renderer.repeat, 3)
        self.assertFalse(renderer.verbose)

    def test_run(self) -> None:
        self.assertEqual(
            self._run("Mario,Anna", "Salve,Ciao", repeat=3), "Salve Mario!\nCiao Anna!\nSalve Mario!\n"
        )
        self.assertEqual(self._run("Mario", "Salve"), "Salve Mario!\n")
        self.assertEqual(self._run("Mario,Anna", "Salve", repeat=2), "Salve Mario!\nSalve Anna!\n")

    def test_validation_order(self) -> None:
        cases = [
            ({"names": None, "greetings": None, "repeat": 0}, InvalidRepeatValueError),
            ({"names": None, "greetings": "Salve"}, ArgumentMissingError),
            ({"names": "Mario", "greetings": None}, ArgumentMissingError),
            ({"names": "A", "greetings": "@@@"}, TooShortError),
            ({"names": "Mario", "greetings": "@@@"}, InvalidCharactersError),
            ({"names": "Mario", "greetings": "Salve" * 11}, TooLongError),
            ({"names": "", "greetings": "Salve"}, InvalidCharactersError),
        ]
        for kwargs, error_type in cases:
            config = GreeterConfig.create_greeter_config(repeat=kwargs.get("repeat"))
            with self.assertRaises(error_type, msg=f"kwargs={kwargs}"):
                GreeterRunner(config, kwargs["names"], kwargs["greetings"]).configure()

    def test_settings_bounds(self) -> None:
        config = GreeterConfig.create_greeter_config(settings=OmegaConf.create({"min_length": 1}))
        self.assertListEqual(GreeterRunner(config, "A", "Hi").configure().names, ["A"])

    def test_no_output_on_failure(self) -> None:
        path = self.tmp_dir / "greetings.txt"
        path.write_text("Old content\n")
        config = GreeterConfig.create_greeter_config()
        with self.assertRaises(TooShortError):
            GreeterRunner(config, "A", "Salve", output=path.as_posix()).run()
        self.assertEqual(path.read_text(), "Old content\n")

        path = self.tmp_dir / "new.txt"
        with self.assertRaises(InvalidCharactersError):
            GreeterRunner(config, "Mario", "", output=path.as_posix()).run()
        self.assertFalse(path.exists())

    def test_file_matches_stdout(self) -> None:
        path = self.tmp_dir / "greetings.txt"
        config = GreeterConfig.create_greeter_config(repeat=5, verbose=True)
        self.assertEqual(GreeterRunner(config, "Mario,Anna,Luigi", "Salve,Ciao", output=path.as_posix()).run(), 5)
        self.assertEqual(path.read_text(), self._run("Mario,Anna,Luigi", "Salve,Ciao", repeat=5, verbose=True))

    def test_sink_creation_error(self) -> None:
        config = GreeterConfig.create_greeter_config()
        stdout = io.StringIO()
        with patch("sys.stdout", new=stdout):
            with self.assertRaises(SinkCreationError):
                GreeterRunner(config, "Mario", "Salve", output=self.tmp_dir.as_posix()).run()
        self.assertEqual(stdout.getvalue(), "")
