"""Utilities to assemble effective greeter configuration.

The effective configuration is built by merging (1) default values, (2) user settings file and (3) parameters
provided on a command line. The user settings file is a YAML file located at `${HOME}/greeter.yaml`; this location
can be overridden with the `GREETER_SETTINGS` environment variable. The file is optional and is never created
automatically. Example:
```yaml
repeat: 2
min_length: 3
max_length: 20
verbose: false
```

- `GreeterConfig`: Utilities to assemble effective greeter configuration.
"""
import logging
import os
import typing as t
from pathlib import Path

import yaml
from omegaconf import DictConfig, OmegaConf

from greeter.errors import ConfigurationError
from greeter.validate import TokenPolicy, Validate

logger = logging.getLogger(__name__)

__all__ = ["GreeterConfig"]


class GreeterConfig(object):
    """Utilities to assemble effective greeter configuration."""

    DEFAULT = OmegaConf.create(
        {"repeat": 1, "min_length": 2, "max_length": 50, "delimiter": ",", "verbose": False}
    )
    """Default configuration."""

    SETTINGS_KEYS = ("repeat", "min_length", "max_length", "verbose")
    """Keys users can define in the settings file."""

    @staticmethod
    def settings_file() -> str:
        """Return full path to greeter settings file."""
        return os.path.abspath(os.environ.get("GREETER_SETTINGS") or (Path.home() / "greeter.yaml"))

    @staticmethod
    def load_settings(path: t.Optional[str] = None) -> DictConfig:
        """Load user settings file.

        Args:
            path: If not None, path to settings file. If None, default path is used.
        Returns:
            Settings, empty config if settings file does not exist.
        """
        settings_path = Path(path if path is not None else GreeterConfig.settings_file())
        if not settings_path.is_file():
            logger.debug("GreeterConfig.load_settings settings file does not exist (%s).", settings_path.as_posix())
            return OmegaConf.create({})

        logger.info("GreeterConfig.load_settings loading settings file (%s).", settings_path.as_posix())
        try:
            settings = OmegaConf.load(settings_path)
        except (OSError, yaml.YAMLError) as err:
            raise ConfigurationError(f"Unable to load settings file {settings_path.as_posix()}: {err}") from err
        if not isinstance(settings, DictConfig):
            raise ConfigurationError(
                f"Invalid object read from {settings_path} (type = {type(settings)}). Expecting DictConfig."
            )
        Validate(settings, settings_path.as_posix())\
            .check_unknown_keys(GreeterConfig.SETTINGS_KEYS)\
            .check_values(("repeat", "min_length", "max_length"), int)\
            .check_values("verbose", bool)
        return settings

    @staticmethod
    def create_greeter_config(
        repeat: t.Optional[int] = None,
        verbose: bool = False,
        settings: t.Optional[DictConfig] = None,
    ) -> DictConfig:
        """Create greeter configuration merging defaults, user settings and command line arguments.

        Args:
            repeat: Repeat count from command line, None if not provided.
            verbose: Verbose flag from command line. A command line can only enable verbose mode.
            settings: User settings. If None, empty settings are used.
        Returns:
            Read-only effective configuration.
        """
        logger.debug(
            "GreeterConfig.create_greeter_config input_arg repeat=%s, verbose=%s, settings=%s", repeat, verbose, settings
        )
        cli_args: t.Dict[str, t.Any] = {}
        if repeat is not None:
            cli_args["repeat"] = repeat
        if verbose:
            cli_args["verbose"] = True

        config = OmegaConf.merge(
            GreeterConfig.DEFAULT,
            settings if settings is not None else OmegaConf.create({}),
            OmegaConf.create(cli_args),
        )
        OmegaConf.set_readonly(config, True)
        return config

    @staticmethod
    def token_policy(config: DictConfig) -> TokenPolicy:
        """Return token policy defined by this configuration."""
        return TokenPolicy(min_length=config.min_length, max_length=config.max_length)
