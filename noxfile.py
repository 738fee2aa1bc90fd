import os
import typing as t
from pathlib import Path

import nox

"""
## Introduction
Run greeter tests. Unit tests run for multiple python versions, the CLI smoke test runs for one. This is based on
`nox` (https://nox.thea.codes/).

## Prerequisites
No need to use greeter python environment - nox will be creating new environments for each test session installing all
required dependencies. Only nox package needs to be installed.

## Examples
```shell
nox --list             # List all available test sessions.
nox                    # Run all default test sessions (see below for more details).
nox -s greeter_unit    # Run unit tests for all python versions.
```

## Environment variables
- `GREETER_PYTHON_VERSIONS`: Comma-separated list of python versions to run nox sessions with (e.g., "3.9,3.10").
"""

nox.options.sessions = ["greeter_unit", "greeter_cli"]
"""Default sessions to run."""

GREETER_PYTHON_VERSIONS = ["3.8", "3.9", "3.10", "3.11", "3.12"]
"""The list of python versions to run nox sessions with. Can be overridden by setting the environment variable."""
if "GREETER_PYTHON_VERSIONS" in os.environ:
    GREETER_PYTHON_VERSIONS = os.environ["GREETER_PYTHON_VERSIONS"].split(",")


# Prevent Python from writing bytecode
os.environ["PYTHONDONTWRITEBYTECODE"] = "1"


# ----------------------------------------------------------------------------------------------------------------------
# ---------------------------------------------------- Test Sessions ---------------------------------------------------
# ----------------------------------------------------------------------------------------------------------------------

@nox.session(python=GREETER_PYTHON_VERSIONS, tags=("greeter", "unit"))
def greeter_unit(session: nox.Session) -> None:
    """Run greeter unit tests.

    Related nox commands:
        ```bash
        nox --list | grep greeter_unit       # Show all sessions.
        nox -s greeter_unit -p 3.10          # Run for one python version (same as `nox -t greeter -p 3.10`).
        nox -s greeter_unit                  # Run for all python versions (same as `nox -t greeter`).
        ```
    """
    session.install("pytest")
    _install_greeter(session, run_unit_test=True)


@nox.session(tags=("greeter", "cli"))
def greeter_cli(session: nox.Session) -> None:
    """Run installed `greeter` command and check its output files.

    Related nox commands:
        ```bash
        nox --list | grep greeter_cli        # Show all sessions.
        nox -s greeter_cli                   # Run this test session.
        ```
    """
    _install_greeter(session)
    session.run("greeter", "--example")
    session.run("greeter", "--version")

    tmp_dir = Path(session.create_tmp())
    output_file = tmp_dir / "greetings.txt"
    session.run(
        "greeter", "--names", "Mario,Anna", "--greetings", "Salve,Ciao", "--repeat", "3", "--output", str(output_file)
    )
    _check_file_content(output_file, ["Salve Mario!", "Ciao Anna!", "Salve Mario!"])

    # Invalid names must fail without creating output file.
    output_file.unlink()
    session.run("greeter", "--names", "A", "--greetings", "Salve", "--output", str(output_file), success_codes=[1])
    if output_file.exists():
        session.error(f"Output file must not exist: {output_file}.")


# ----------------------------------------------------------------------------------------------------------------------
# -------------------------------------------------- Support Functions -------------------------------------------------
# ----------------------------------------------------------------------------------------------------------------------


def _install_greeter(session: nox.Session, run_unit_test: bool = False) -> None:
    """Install greeter library.

    Args:
        session: Current nox session.
        run_unit_test: If true, run unit tests after installation.
    """
    with session.chdir(Path(__file__).parent):
        session.install(".")
        if run_unit_test:
            session.run("pytest", "-v", "greeter/tests")


def _check_file_content(path: Path, lines: t.List[str]) -> None:
    """Check that text file contains exactly these lines."""
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}.")
    actual_lines = path.read_text().splitlines()
    if actual_lines != lines:
        raise ValueError(f"Unexpected content of {path}: expected={lines}, actual={actual_lines}.")
