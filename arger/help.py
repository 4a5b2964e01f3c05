# Arger CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Callbacks behind the built-in help and version options.

`Arger.add_help_option()` and `Arger.add_version_option()` register these as
event callbacks. They print through the parser's rich console, escaping any
caller-supplied text so option names like `[debug]` are not read as markup.

Help output:
    Help: <app name>
    <help message, if one was given>
      <name>  <identifiers>  <description>   (one line per registered option)

Version output:
    Version: <app name>

The version line shows the application name only. The version string is
stored on the parser and available through `get_app_version()`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

if TYPE_CHECKING:
    from arger.arger import Arger

NAME_COLUMN_WIDTH = 16
IDENTIFIER_COLUMN_WIDTH = 24


def get_option_line(name: str, identifiers: str, description: str) -> str:
    """Format one help line for an option."""
    line = f"  {name:<{NAME_COLUMN_WIDTH}} {identifiers:<{IDENTIFIER_COLUMN_WIDTH}}"
    if description:
        line = f"{line} {description}"
    return line.rstrip()


def print_help(arger: Arger) -> None:
    """Print the application name followed by one line per registered option."""
    console = arger.console
    console.print(f"[bold]Help:[/bold] {escape(arger.get_app_name())}")
    if arger.config.help_text:
        console.print(escape(arger.config.help_text), soft_wrap=True)
    for name in arger.get_all_options():
        option = arger.get_option(name)
        assert option is not None, "registered name without an option"
        console.print(
            escape(
                get_option_line(
                    option.name, option.get_identifier_text(), option.description
                )
            ),
            soft_wrap=True,
        )


def print_version(arger: Arger) -> None:
    """Print the version line for the application."""
    arger.console.print(f"[bold]Version:[/bold] {escape(arger.get_app_name())}")
