"""
Error types raised by the console core.
"""


class ConsoleError(Exception):
    """Base class for console errors."""


class ArgumentParseError(ConsoleError):
    """A command's argument parser rejected the tokens it was given.

    Attributes:
        message: Short description of what was wrong with the arguments.
        rendered: Full diagnostic (error, usage and hint) ready for the scrollback.
    """

    def __init__(self, message: str, rendered: str) -> None:
        super().__init__(message)
        self.message = message
        self.rendered = rendered
