# Arger CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-parser configuration for `Arger`.

`ParserConfig` gathers the application metadata and the flags that control
the built-in help and version options. Every `Arger` instance owns its own
config, so two parsers in the same process never share these settings.

Fields are validated on assignment, so `config.continue_on_help = "maybe"`
raises a pydantic `ValidationError` instead of silently storing a string.
"""
from pydantic import BaseModel, ConfigDict, Field


class ParserConfig(BaseModel):
    """Application metadata and built-in option behavior for one parser."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    app_name: str = ""
    version: str = ""
    help_text: str = Field(default="", description="Message given to add_help_option().")

    using_auto_help: bool = False
    using_auto_version: bool = False

    # Parsing keeps going after the built-in option fires unless these are False.
    continue_on_help: bool = True
    continue_on_version: bool = True

    # Attach a Rich handler to the "arger" logger at debug level.
    debug: bool = False
