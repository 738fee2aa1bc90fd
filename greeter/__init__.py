"""greeter
"""

__version__ = "1.0.0"
name = "greeter"
