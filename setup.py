"""This file sets up the greeter module."""

import os
from setuptools import setup, find_packages, Command
from pathlib import Path


def install_requires():
    with open("requirements.txt", "r") as requirements_file:
        return [req.strip() for req in requirements_file.readlines() if req.strip()]


class clean(Command):
    """Custom clean command."""
    user_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        os.system('rm -vrf ./build ./dist ./*.egg-info')


setup(
    name="greeter",
    entry_points={"console_scripts": ["greeter = greeter.__main__:cli"]},
    version="1.0.0",
    description="Command line tool to greet multiple people with custom greetings",
    long_description=Path("README.md").read_text(),
    license="Apache 2.0",
    packages=find_packages(exclude=["greeter.tests", "greeter.tests.*"]),
    long_description_content_type="text/markdown",
    install_requires=install_requires(),
    extras_require={"test": ["pytest", "nox"]},
    python_requires='>=3.8',
    cmdclass={
        'clean': clean,
    }
)
