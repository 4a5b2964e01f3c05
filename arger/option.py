# Arger CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass and the `RequiresArg` enum used by `Arger`
to describe the command-line options a program accepts.

An `Option` is declarative and immutable once registered: it records the
caller-chosen name, the identifier tokens that select it, help text, whether
the next token is consumed as its argument, and an optional callback. Values
captured while parsing are kept by the parser itself, not on the option.

Key Attributes:
- `name`: Logical name used to query results (e.g. `"file"`)
- `identifiers`: Literal CLI tokens (e.g. `("-f", "--file")`)
- `description`: Help text shown by the built-in help option
- `requires_argument`: `RequiresArg.YES` if the following token is its value
- `callback`: Handler queued for dispatch when the option is matched

Example:
    Option(
        name="file",
        identifiers=split_identifiers("-f|--file"),
        description="The file to read",
        requires_argument=RequiresArg.YES,
    )
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from arger.exceptions import OptionDefinitionError

if TYPE_CHECKING:
    from arger.arger import Arger

OptionCallback = Callable[["Arger"], None]

IDENTIFIER_SEPARATOR = "|"


class RequiresArg(Enum):
    """
    Whether an option consumes the token that follows it as its argument.

    Members:
        NO: The option is a plain switch.
        YES: The next token is stored as the option's argument.

    Aliases:
        - True, "yes", "true", "required" → YES
        - False, "no", "false", "none" → NO

    Example:
        RequiresArg("yes") → RequiresArg.YES
        RequiresArg(False) → RequiresArg.NO
    """

    NO = "no"
    YES = "yes"

    @classmethod
    def choices(cls) -> list[RequiresArg]:
        """Return a list of all members."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "true": "yes",
            "required": "yes",
            "false": "no",
            "none": "no",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> RequiresArg:
        if isinstance(value, bool):
            return cls.YES if value else cls.NO
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __bool__(self) -> bool:
        return self is RequiresArg.YES

    def __str__(self) -> str:
        return self.value


def split_identifiers(identifier_text: str) -> tuple[str, ...]:
    """
    Split a pipe-separated identifier string into its identifier tokens.

    The split is literal: no whitespace trimming and no check of the
    leading-dash convention.

    Args:
        identifier_text (str): Identifiers joined by `|` (e.g. `"-f|--file"`).

    Returns:
        tuple[str, ...]: The identifier tokens, in the order given.

    Raises:
        OptionDefinitionError: If the text is not a string or is empty.
    """
    if not isinstance(identifier_text, str):
        raise OptionDefinitionError(
            f"Identifiers must be a '|' separated string, got {type(identifier_text).__name__}"
        )
    if not identifier_text:
        raise OptionDefinitionError("An option needs at least one identifier")
    return tuple(identifier_text.split(IDENTIFIER_SEPARATOR))


@dataclass(frozen=True)
class Option:
    """
    Represents a declared command-line option.

    Attributes:
        name (str): Logical name of the option, used to query parse results.
        identifiers (tuple[str, ...]): CLI tokens that select this option.
        description (str): Help text for the option.
        requires_argument (RequiresArg): Whether the next token is its argument.
        callback (OptionCallback | None): Handler run when the option is matched.
    """

    name: str
    identifiers: tuple[str, ...]
    description: str = ""
    requires_argument: RequiresArg = RequiresArg.NO
    callback: OptionCallback | None = None

    def __post_init__(self) -> None:
        if not self.identifiers:
            raise OptionDefinitionError(
                f"Option '{self.name}' needs at least one identifier"
            )
        if self.callback is not None and not callable(self.callback):
            raise OptionDefinitionError(
                f"Callback for option '{self.name}' is not callable"
            )

    @property
    def is_event(self) -> bool:
        """True if a callback is attached to this option."""
        return self.callback is not None

    def get_identifier_text(self) -> str:
        """Get the identifiers joined for help rendering."""
        return ", ".join(self.identifiers)

    def to_definition(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "identifiers": self.identifiers,
            "description": self.description,
            "requires_argument": self.requires_argument,
            "event": self.is_event,
        }
