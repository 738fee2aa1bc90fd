"""This module runs the greeter pipeline.

- `GreeterRunner`: Validates and normalizes inputs (configure phase), then renders greetings into a sink (run phase).
"""
import logging
import typing as t

from omegaconf import DictConfig, OmegaConf

from greeter.config import GreeterConfig
from greeter.errors import ConfigurationError
from greeter.parser import CliParser
from greeter.render import Renderer
from greeter.sink import OutputSink
from greeter.validate import Validate

__all__ = ["GreeterRunner"]


logger = logging.getLogger(__name__)


class GreeterRunner(object):
    """Greeter pipeline.

    All validation happens in `configure`, before an output sink is opened. So, if any input is invalid, no output is
    produced and no output file is created.
    """

    def __init__(
        self,
        config: t.Union[DictConfig, t.Dict],
        names: t.Optional[str],
        greetings: t.Optional[str],
        output: t.Optional[str] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Effective greeter configuration (see `GreeterConfig.create_greeter_config`).
            names: Raw comma-separated list of names, None if not provided.
            greetings: Raw comma-separated list of greetings, None if not provided.
            output: Path to output file. If None, standard output is used.
        """
        if isinstance(config, dict):
            config: DictConfig = OmegaConf.merge(GreeterConfig.DEFAULT, config)
        if not isinstance(config, DictConfig):
            raise ConfigurationError(f"Invalid config type ('{type(config)}'). Expecting 'DictConfig'.")

        self.config = config
        self.names = names
        self.greetings = greetings
        self.output = output
        self.renderer: t.Optional[Renderer] = None

        logger.debug("%s.__init__ configuration: %s", self.__class__.__name__, str(self.config))

    def configure(self) -> Renderer:
        """Validate command line arguments and build the renderer.

        Checks run in this order: repeat count, required arguments, names, greetings. The first failed check raises.
        """
        Validate.repeat(self.config.repeat)
        names = Validate.required(self.names, "--names")
        greetings = Validate.required(self.greetings, "--greetings")

        policy = GreeterConfig.token_policy(self.config)
        policy.validate(names, "name", self.config.delimiter)
        policy.validate(greetings, "greeting", self.config.delimiter)

        self.renderer = Renderer(
            names=CliParser.parse_list_arg(names, "name", self.config.delimiter),
            greetings=CliParser.parse_list_arg(greetings, "greeting", self.config.delimiter),
            repeat=self.config.repeat,
            verbose=self.config.verbose,
        )
        return self.renderer

    def run(self) -> int:
        """Render greetings.

        Returns:
            Number of greeting lines written.
        """
        renderer = self.renderer or self.configure()
        with OutputSink(self.output) as sink:
            return renderer.render(sink)
