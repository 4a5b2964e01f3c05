"""
Arger CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arger import Arger
from .exceptions import (
    ArgerError,
    MissingArgumentError,
    OptionDefinitionError,
    OptionNotRegisteredError,
    UnknownOptionError,
)
from .logger import enable_logging, logger
from .option import Option, RequiresArg
from .parser_config import ParserConfig

__version__ = "0.1.0"

__all__ = [
    "Arger",
    "ArgerError",
    "MissingArgumentError",
    "Option",
    "OptionDefinitionError",
    "OptionNotRegisteredError",
    "ParserConfig",
    "RequiresArg",
    "UnknownOptionError",
    "enable_logging",
    "logger",
]
