"""
Structured argument parsers for console commands.

Each command owns an ``ArgumentParser`` that turns the tokens following the
command name into a typed value. ``TyperParser`` builds one from a typed
callback using typer, so a command's arguments are declared like any other
typer command::

    def log(msg: str, num: Annotated[Optional[int], typer.Argument()] = None) -> LogArgs:
        return LogArgs(msg, num)

    parser = TyperParser("log", log)
"""

import inspect
import logging
import textwrap
from typing import (
    Callable,
    Generic,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    cast,
)

import click
import typer

from frame_console.errors import ArgumentParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class ArgumentParser(Protocol[T_co]):
    """Converts a command's argument tokens into a typed value."""

    @property
    def name(self) -> str: ...

    @property
    def help(self) -> str: ...

    def parse(self, args: Sequence[str]) -> T_co:
        """Parse ``args``; raises ArgumentParseError when they are invalid."""
        ...

    def render_help(self) -> str: ...


class TyperParser(Generic[T]):
    """Argument parser backed by a click command generated by typer."""

    def __init__(
        self, name: str, callback: Callable[..., T], help: Optional[str] = None
    ) -> None:
        self._name = name
        self._help = help if help is not None else (inspect.getdoc(callback) or "")

        app = typer.Typer(add_completion=False, rich_markup_mode=None)
        # No --help flag: help goes through the console's own `help` command
        app.command(
            name=name,
            help=self._help,
            context_settings={"help_option_names": []},
        )(callback)
        self.command: click.Command = typer.main.get_command(app)

    @property
    def name(self) -> str:
        return self._name

    @property
    def help(self) -> str:
        return self._help

    def parse(self, args: Sequence[str]) -> T:
        try:
            with self.command.make_context(self._name, list(args)) as ctx:
                return cast(T, self.command.invoke(ctx))
        except click.ClickException as e:
            logger.debug("Failed to parse `%s` with args %r: %s", self._name, args, e)
            raise ArgumentParseError(
                e.format_message(), self._render_error(e.format_message())
            ) from e

    def usage(self) -> str:
        return self._help_context().get_usage()

    def render_help(self) -> str:
        """Usage line, description and one section per kind of parameter."""
        sections = [self.usage()]
        if self._help:
            sections.append(textwrap.indent(self._help, "  "))

        arguments = [
            self._param_row(param)
            for param in self.command.params
            if param.param_type_name == "argument"
        ]
        options = [
            self._param_row(param)
            for param in self.command.params
            if param.param_type_name == "option"
            and not getattr(param, "hidden", False)
        ]
        if arguments:
            sections.append(_format_section("Arguments", arguments))
        if options:
            sections.append(_format_section("Options", options))
        return "\n\n".join(sections)

    def _help_context(self) -> click.Context:
        return self.command.make_context(self._name, [], resilient_parsing=True)

    def _param_row(self, param: click.Parameter) -> Tuple[str, str]:
        if param.param_type_name == "option":
            name = ", ".join([*param.opts, *param.secondary_opts])
        else:
            name = param.human_readable_name
        # typer keeps the help text on its own Parameter subclasses
        text = getattr(param, "help", None) or ""
        if param.required:
            text = f"{text}  [required]" if text else "[required]"
        return name, text

    def _render_error(self, message: str) -> str:
        return (
            f"error: {message}\n\n"
            f"{self.usage()}\n\n"
            f"For more information, try 'help {self._name}'."
        )


def _format_section(title: str, rows: List[Tuple[str, str]]) -> str:
    width = max(len(name) for name, _ in rows)
    lines = [f"{title}:"]
    lines.extend(f"  {name:<{width}}  {text}".rstrip() for name, text in rows)
    return "\n".join(lines)
