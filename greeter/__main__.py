import logging
import shutil
import sys
import typing as t

import click
import coloredlogs

from greeter.cli import GreeterCommand, Options, UsageExamples
from greeter.config import GreeterConfig
from greeter.errors import ExecutionError, GreeterError
from greeter.runner import GreeterRunner

logger = logging.getLogger(__name__)

_TERMINAL_WIDTH = shutil.get_terminal_size()[0]
"""Width of a user terminal. Greeter overrides default (80) character width to make usage examples look better."""


@click.command(
    name="greeter",
    cls=GreeterCommand,
    add_help_option=False,
    epilog=UsageExamples.greeter,
    context_settings={"max_content_width": _TERMINAL_WIDTH},
)
@Options.names
@Options.greetings
@Options.repeat
@Options.output
@Options.verbose
@Options.example
@Options.loglevel
@Options.version
@Options.help
def cli(
    names: t.Optional[str],
    greetings: t.Optional[str],
    repeat: t.Optional[int],
    output: t.Optional[str],
    verbose: bool,
    log_level: t.Optional[str],
) -> None:
    """Greet multiple people with custom greetings.

    Every name is paired with a greeting, and one greeting line (`<greeting> <name>!`) is printed per repetition. When
    the number of names and greetings differ, the shorter list is reused cyclically. Names and greetings are validated
    before anything is printed: they must contain only letters, digits and spaces, and their lengths must be within
    configured bounds. Default values for repeat count, length bounds and verbose mode can be defined in a settings
    file (`~/greeter.yaml` or a file pointed to by `GREETER_SETTINGS` environment variable).

    \f
    Args:
        names: Comma-separated list of names.
        greetings: Comma-separated list of greetings.
        repeat: Number of greeting lines, None if not provided on a command line.
        output: Path to an output file. If None, standard output is used.
        verbose: If true, print summary before greetings.
        log_level: Logging level.
    """
    if log_level:
        log_level = log_level.upper()
        logging.basicConfig(level=log_level)
        coloredlogs.install(level=log_level)
        logging.info("cli setting log Level from CLI argument to '%s'.", log_level)
    logger.debug("cli command=%s", sys.argv)

    try:
        config = GreeterConfig.create_greeter_config(
            repeat=repeat, verbose=verbose, settings=GreeterConfig.load_settings()
        )
        runner = GreeterRunner(config, names=names, greetings=greetings, output=output)
        runner.configure()
        runner.run()
    except GreeterError as err:
        click.echo(f"Error: {err}", err=True)
        if isinstance(err, ExecutionError):
            logger.debug(err.describe())
        sys.exit(err.exit_code)


if __name__ == "__main__":
    cli()
