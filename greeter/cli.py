"""Help formatting and option decorators for the greeter command.

- `markdown2text`: Strip Markdown formatting from help messages.
- `HelpEpilog`: Usage examples shown at the end of the help message.
- `GreeterCommand`: Click command rendering brief/long descriptions and usage examples.
- `UsageExamples`: Usage examples (shared by `--help` and `--example`).
- `Options`: Option decorators of the greeter command.
"""
import inspect
import typing as t
from xml.etree.ElementTree import Element

import click
from markdown import Markdown

from greeter import __version__

__all__ = [
    "markdown2text",
    "HelpEpilog",
    "GreeterCommand",
    "Options",
    "UsageExamples",
]


def _element_text(element: Element) -> str:
    """Serialize a Markdown element tree to plain text. Code spans keep their backticks."""
    text = element.text or ""
    if text and element.tag == "code":
        text = f"`{text}`"
    return text + "".join(_element_text(child) + (child.tail or "") for child in element)


Markdown.output_formats["plain"] = _element_text


def markdown2text(text: str) -> str:
    """Convert Markdown to plain text (links are replaced with their titles, emphasis is dropped).

    Args:
        text: Input text in Markdown format.
    Returns:
        Plain text, or input text if it can not be converted.
    """
    converter = Markdown(output_format="plain")
    # Plain text output has no top-level <div> to strip.
    converter.stripTopLevelTags = False
    try:
        return converter.convert(text)
    except (ValueError, UnicodeDecodeError):
        return text


class HelpEpilog(object):
    """Usage examples printed at the end of a help message.

    Args:
        examples: List of (title, commands) tuples.
    """

    def __init__(self, examples: t.List[t.Tuple[str, t.List[str]]]) -> None:
        self.examples = examples

    def commands(self) -> t.List[str]:
        """Return all example commands in order."""
        return [cmd for _, commands in self.examples for cmd in commands]

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        if not self.examples:
            return
        formatter.write_heading("\nExamples")
        with formatter.indentation():
            for title, commands in self.examples:
                formatter.write_text(f"- {title}")
                with formatter.indentation():
                    for cmd in commands:
                        formatter.write_text(f"$ {cmd}")
                formatter.write_paragraph()


class GreeterCommand(click.Command):
    """Click command with a brief description, a long description and `greeter.cli.HelpEpilog` usage examples.

    Help messages may contain Markdown, it is converted to plain text with `markdown2text`.
    """

    def format_help_text(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Write brief (first line of a docstring) and long (the rest, up to `\\f`) descriptions."""
        if not self.help:
            return
        brief, _, details = inspect.cleandoc(self.help.split("\f")[0]).partition("\n")

        formatter.write_heading("\nBrief description")
        with formatter.indentation():
            formatter.write_text(markdown2text(brief))

        details = markdown2text(details.strip())
        if details:
            formatter.write_heading("\nLong description")
            with formatter.indentation():
                formatter.write_text(details)

    def format_options(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        records = [param.get_help_record(ctx) for param in self.get_params(ctx)]
        opts = [(names, markdown2text(help_text)) for names, help_text in filter(None, records)]
        if opts:
            with formatter.section("Options"):
                formatter.write_dl(opts)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        if isinstance(self.epilog, HelpEpilog):
            self.epilog.format_epilog(ctx, formatter)
        else:
            super().format_epilog(ctx, formatter)


class UsageExamples:
    greeter = HelpEpilog(
        [
            (
                "Greet two people with two greetings three times",
                ['greeter --names "Mario,Anna" --greetings "Salve,Ciao" --repeat 3'],
            ),
            (
                "Same as above, but save greetings to a file",
                ['greeter --names "Mario,Anna" --greetings "Salve,Ciao" --repeat 3 --output greetings.txt'],
            ),
        ]
    )
    """Usage examples for `greeter` command."""

    @staticmethod
    def print_examples(ctx: click.Context, param: click.Parameter, value: bool) -> None:
        """Callback for the `--example` flag: print usage examples and exit, ignoring all other arguments."""
        if not value or ctx.resilient_parsing:
            return
        click.echo("Usage examples:")
        for cmd in UsageExamples.greeter.commands():
            click.echo(f"  {cmd}")
        ctx.exit(0)


class Options:
    """Options for the greeter command."""

    help = click.help_option("--help", "-h", help="Show help message and exit.")

    version = click.version_option(__version__, "--version", prog_name="greeter", help="Show version and exit.")

    loglevel = click.option(
        "--log-level",
        "--log_level",
        required=False,
        default="warning",
        type=click.Choice(["critical", "error", "warning", "info", "debug"]),
        help="Logging level is a lower-case string value for Python's logging library (see "
        "[Logging Levels]({log_level}) for more details). Only messages with this logging level or higher are "
        "logged, so `error` and `critical` also hide the warning about unequal numbers of names and "
        "greetings.".format(log_level="https://docs.python.org/3/library/logging.html#logging-levels"),
    )

    names = click.option(
        "--names",
        "-n",
        required=False,
        type=str,
        default=None,
        metavar="NAMES",
        help="Comma-separated list of names, e.g. `Mario,Anna`. Required unless `--example` is given. Each name must "
        "contain only letters, digits and spaces, and must be 2 to 50 characters long (these bounds can be changed "
        "in the settings file).",
    )

    greetings = click.option(
        "--greetings",
        "-g",
        required=False,
        type=str,
        default=None,
        metavar="GREETINGS",
        help="Comma-separated list of greetings, e.g. `Salve,Ciao`. Required unless `--example` is given. Greetings "
        "follow the same rules as names.",
    )

    repeat = click.option(
        "--repeat",
        "-r",
        required=False,
        type=int,
        default=None,
        metavar="N",
        help="Number of greetings to print (default: 1). Must be a positive integer. When the number of names and "
        "greetings differ, shorter list is reused cyclically.",
    )

    output = click.option(
        "--output",
        "-o",
        required=False,
        type=str,
        default=None,
        metavar="PATH",
        help="Path to an output file. The file is created or truncated. If not specified, greetings are printed to "
        "standard output.",
    )

    verbose = click.option(
        "--verbose",
        "-v",
        is_flag=True,
        default=False,
        help="Print mode, repeat count, greetings and names before greetings.",
    )

    example = click.option(
        "--example",
        "-e",
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=UsageExamples.print_examples,
        help="Print usage examples and exit. All other options are ignored.",
    )
