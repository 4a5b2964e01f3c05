# Arger CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by the Arger argument parser.

Every failure surfaces through a single hierarchy rooted at `ArgerError`, so a
host program can wrap `Arger.parse()` in one `except ArgerError` block, print
the message and choose its own exit code.

Exception Hierarchy:
- ArgerError
    ├── UnknownOptionError
    ├── MissingArgumentError
    ├── OptionDefinitionError
    └── OptionNotRegisteredError

Parse errors abort the whole pass. The parser state left behind after one of
them is incomplete and should not be queried.
"""


class ArgerError(Exception):
    """Base exception for the Arger parser."""


class UnknownOptionError(ArgerError):
    """Exception raised when a command-line token matches no registered identifier."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid option: {token}")


class MissingArgumentError(ArgerError):
    """Exception raised when an option that requires an argument did not get one."""

    def __init__(self, option_name: str):
        self.option_name = option_name
        super().__init__(f"Option {option_name} requires an argument.")


class OptionDefinitionError(ArgerError):
    """Exception raised when an option is registered with an invalid definition."""


class OptionNotRegisteredError(ArgerError):
    """Exception raised when querying an option name that was never registered."""

    def __init__(self, option_name: str):
        self.option_name = option_name
        super().__init__(f"Option '{option_name}' is not registered.")
