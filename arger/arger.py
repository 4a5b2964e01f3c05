# Arger CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Arger`, a small command-line option parser meant to be
the first thing a command-line tool runs. Options are declared up front, the
raw argument vector is parsed in one left-to-right pass, and the host program
then asks which options were present and with what argument.

Parsing runs in three phases:
- Registry: `add_option()` / `add_option_event()` declare options by name and
  `|`-separated identifiers (e.g. `"-f|--file"`).
- Matcher: `parse()` resolves every token through the identifier index,
  consumes the following token for options that require an argument and
  records each match in order.
- Dispatcher: once the whole vector validated, callbacks of matched event
  options run in the order their options were seen.

The built-in help and version options also run as soon as they are matched.
If configured not to continue, they end the parse early with `parse()`
returning False. Otherwise their callbacks are queued like any other and run
again during dispatch.

Example Usage:
    arger = Arger(sys.argv)
    arger.set_app_name("Example")
    arger.add_help_option("Reads a file.")
    arger.set_continue_on_help(False)
    arger.add_option("file", "-f|--file", "The file to read", RequiresArg.YES)
    arger.add_option("read", "-r|--read", "Read the file")

    try:
        keep_running = arger.parse()
    except ArgerError as error:
        print(f"Error: {error}")
        sys.exit(1)
    if not keep_running:
        sys.exit(0)

    if arger.option_exists("file"):
        path = arger.get_option_argument("file")

Design Notes:
- Identifiers match literally: no prefixes, no `--opt=value`, no bundling.
- Registering an option name or identifier twice is last-write-wins.
- An argument that equals a registered option name is rejected, while one
  that equals an identifier such as `-f` is accepted as a value.
"""
from __future__ import annotations

import sys
from typing import Any, Sequence

from rich.console import Console

from arger.console import console as default_console
from arger.exceptions import (
    MissingArgumentError,
    OptionDefinitionError,
    OptionNotRegisteredError,
    UnknownOptionError,
)
from arger.help import print_help, print_version
from arger.logger import enable_logging, logger
from arger.option import Option, OptionCallback, RequiresArg, split_identifiers
from arger.parser_config import ParserConfig

HELP_OPTION = "help"
VERSION_OPTION = "version"


class Arger:
    """
    Command-line option parser.

    Holds the raw arguments, the option registry and, after `parse()`, the
    options that were passed and their arguments.

    Features:
    - Options with any number of `|`-separated identifiers.
    - Options that consume the next token as their argument.
    - Event options whose callbacks run after a successful parse.
    - Built-in help and version options with optional early exit.
    - Rich console output for help and version.
    """

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        config: ParserConfig | None = None,
        console: Console | None = None,
    ) -> None:
        """
        Initialize the parser with the raw command-line arguments.

        Args:
            argv (Sequence[str] | None): Arguments as received by the program,
                with the program name at index 0. Defaults to `sys.argv`.
            config (ParserConfig | None): Parser configuration. A fresh one is
                created if not provided.
            console (Console | None): Console used for help and version output.
        """
        self.argv: tuple[str, ...] = tuple(sys.argv if argv is None else argv)
        self.config: ParserConfig = config if config is not None else ParserConfig()
        self.console: Console = console if console is not None else default_console
        self._options: dict[str, Option] = {}
        self._identifiers_to_names: dict[str, str] = {}
        self._passed_options: list[str] = []
        self._arguments: dict[str, str | None] = {}
        self._trigger_events: list[OptionCallback] = []
        if self.config.debug:
            enable_logging(console=console)

    def set_app_name(self, app_name: str) -> None:
        """Set the application name shown by the help and version options."""
        self.config.app_name = app_name

    def set_continue_on_help(self, continue_on_help: bool) -> None:
        """
        Set whether parsing continues after the built-in help option fires.

        Defaults to True. With False, `parse()` returns False as soon as the
        help option is matched and nothing after it is looked at, not even
        invalid options. Only applies to the option from `add_help_option()`.
        """
        self.config.continue_on_help = continue_on_help

    def set_continue_on_version(self, continue_on_version: bool) -> None:
        """
        Set whether parsing continues after the built-in version option fires.

        Defaults to True. If help appears first on the command line and stops
        the parse, the version option is never reached.
        """
        self.config.continue_on_version = continue_on_version

    def _register(self, option: Option) -> None:
        if option.name in self._options:
            logger.debug("Replacing existing option '%s'", option.name)
            del self._options[option.name]
        self._options[option.name] = option
        logger.debug(
            "Registered option '%s' %s (requires argument: %s, event: %s)",
            option.name,
            option.identifiers,
            option.requires_argument,
            option.is_event,
        )

    def add_option(
        self,
        name: str,
        identifiers: str,
        description: str = "",
        requires_argument: RequiresArg | bool | str = RequiresArg.NO,
    ) -> None:
        """
        Declare an option to watch for.

        Args:
            name (str): Name used to check whether the option was passed.
            identifiers (str): `|`-separated CLI tokens, e.g. `"-f|--file"`.
            description (str): Help text for the option.
            requires_argument (RequiresArg | bool | str): Whether the next token
                is this option's argument.

        Raises:
            OptionDefinitionError: If no identifier is given.
        """
        self._register(
            Option(
                name=name,
                identifiers=split_identifiers(identifiers),
                description=description,
                requires_argument=_to_requires_arg(requires_argument),
            )
        )

    def add_option_event(
        self,
        name: str,
        identifiers: str,
        description: str,
        requires_argument: RequiresArg | bool | str,
        callback: OptionCallback,
    ) -> None:
        """
        Declare an option and a callback to run when it is passed.

        The callback receives this parser and runs after the whole command line
        has been parsed, once per time the option appeared.

        Raises:
            OptionDefinitionError: If no identifier is given or the callback is
                not callable.
        """
        if not callable(callback):
            raise OptionDefinitionError(f"Callback for option '{name}' is not callable")
        self._register(
            Option(
                name=name,
                identifiers=split_identifiers(identifiers),
                description=description,
                requires_argument=_to_requires_arg(requires_argument),
                callback=callback,
            )
        )

    add_option_with_callback = add_option_event

    def add_help_option(self, help_message: str = "") -> None:
        """Add `-h|--help`, which prints the app name, help message and options."""
        self.config.using_auto_help = True
        self.config.help_text = help_message
        self.add_option_event(
            HELP_OPTION,
            "-h|--help",
            "Display this help message",
            RequiresArg.NO,
            print_help,
        )

    def add_version_option(self, version: str) -> None:
        """Set the app version and add `-v|--version`, which prints version info."""
        self.config.using_auto_version = True
        self.add_option_event(
            VERSION_OPTION,
            "-v|--version",
            "Display the version of this application",
            RequiresArg.NO,
            print_version,
        )
        self.config.version = version

    def _build_identifier_index(self) -> None:
        self._identifiers_to_names = {}
        for name, option in self._options.items():
            for identifier in option.identifiers:
                previous = self._identifiers_to_names.get(identifier)
                if previous is not None and previous != name:
                    logger.debug(
                        "Identifier '%s' of option '%s' is also used by '%s'; '%s' wins",
                        identifier,
                        previous,
                        name,
                        name,
                    )
                self._identifiers_to_names[identifier] = name
        logger.debug(
            "Built identifier index: %d identifiers for %d options",
            len(self._identifiers_to_names),
            len(self._options),
        )

    def _run_builtin(self, name: str) -> bool | None:
        """
        Run the built-in help or version callback inline.

        Returns:
            bool | None: None if `name` is not an enabled built-in, otherwise
            whether parsing should continue.
        """
        if name == HELP_OPTION and self.config.using_auto_help:
            print_help(self)
            return self.config.continue_on_help
        if name == VERSION_OPTION and self.config.using_auto_version:
            print_version(self)
            return self.config.continue_on_version
        return None

    def _consume_argument(self, option: Option, index: int) -> str:
        if index >= len(self.argv):
            raise MissingArgumentError(option.name)
        argument = self.argv[index]
        if argument == "":
            raise MissingArgumentError(option.name)
        if argument in self._options:
            raise MissingArgumentError(option.name)
        return argument

    def parse(self) -> bool:
        """
        Parse the command-line arguments and trigger option callbacks.

        Returns:
            bool: True if the program should keep running, False if it should
            exit because a built-in help or version option asked it to.

        Raises:
            UnknownOptionError: If a token matches no registered identifier.
            MissingArgumentError: If an option that requires an argument is
                last, is followed by an empty token, or is followed by a token
                equal to a registered option name.
        """
        self._passed_options = []
        self._arguments = {}
        self._trigger_events = []
        self._build_identifier_index()

        index = 1
        while index < len(self.argv):
            token = self.argv[index]
            name = self._identifiers_to_names.get(token)
            if name is None:
                raise UnknownOptionError(token)

            logger.debug("Matched '%s' to option '%s'", token, name)
            self._passed_options.append(name)
            option = self._options[name]

            keep_going = self._run_builtin(name)
            if keep_going is False:
                logger.debug("Stopping parse after built-in option '%s'", name)
                return False

            if option.requires_argument:
                index += 1
                self._arguments[name] = self._consume_argument(option, index)

            if option.callback is not None:
                self._trigger_events.append(option.callback)

            index += 1

        for callback in self._trigger_events:
            logger.debug("Dispatching %s", getattr(callback, "__name__", callback))
            callback(self)
        return True

    def get_passed_options(self) -> tuple[str, ...]:
        """Get the names of the passed options, in command-line order."""
        return tuple(self._passed_options)

    def get_all_options(self) -> tuple[str, ...]:
        """
        Get the names of all registered options, in registration order.

        Each name is listed once, however many times it was registered.
        Re-registering a name replaces its option and moves the name to the
        end instead of appending a second copy.
        """
        return tuple(self._options)

    def get_option(self, name: str) -> Option | None:
        """Return the registered `Option` for `name`, if any."""
        return self._options.get(name)

    def option_exists(self, name: str) -> bool:
        """Check if an option was passed in."""
        return name in self._passed_options

    def get_option_argument(self, name: str) -> str | None:
        """
        Get the argument given to an option.

        Returns:
            str | None: The argument, or None if the option was not passed or
            does not take an argument.

        Raises:
            OptionNotRegisteredError: If no option named `name` was registered.
        """
        if name not in self._options:
            raise OptionNotRegisteredError(name)
        return self._arguments.get(name)

    def get_app_name(self) -> str:
        return self.config.app_name

    def get_app_version(self) -> str:
        return self.config.version

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert the registered options into a list of plain dicts.

        Returns:
            List of definitions for introspection or documentation.
        """
        return [option.to_definition() for option in self._options.values()]

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        events = sum(option.is_event for option in self._options.values())
        identifiers = sum(len(option.identifiers) for option in self._options.values())
        return (
            f"Arger(options={len(self._options)}, identifiers={identifiers}, "
            f"events={events}, args={max(len(self.argv) - 1, 0)})"
        )

    def __repr__(self) -> str:
        return str(self)


def _to_requires_arg(value: RequiresArg | bool | str) -> RequiresArg:
    try:
        return RequiresArg(value)
    except ValueError as error:
        raise OptionDefinitionError(str(error)) from error
