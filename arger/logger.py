# Arger CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logger for the Arger parser.

The parser logs registrations, identifier matches and dispatches at debug
level on the "arger" logger and adds no handlers of its own. `enable_logging()`
attaches one, either a Rich handler for people reading a terminal or a JSON
stream handler for log collectors. `Arger` calls it when its config has
`debug` set.
"""
from __future__ import annotations

import logging

import pythonjsonlogger.json
from rich.console import Console
from rich.logging import RichHandler

logger: logging.Logger = logging.getLogger("arger")

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def enable_logging(
    level: int = logging.DEBUG,
    mode: str = "cli",
    console: Console | None = None,
) -> logging.Handler:
    """
    Attach a handler to the "arger" logger.

    Calling it again replaces the handler added by the previous call, so the
    level and mode can be changed without stacking duplicate output.

    Args:
        level (int): Level for both the logger and the handler.
        mode (str): "cli" for Rich console output, "json" for JSON lines.
        console (Console | None): Console for the Rich handler. Defaults to a
            stderr console so log lines stay apart from help output.

    Returns:
        logging.Handler: The handler that was attached.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if mode == "cli":
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    for existing in list(logger.handlers):
        if getattr(existing, "_arger_handler", False):
            logger.removeHandler(existing)
            existing.close()
    handler._arger_handler = True  # type: ignore[attr-defined]
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.debug("Logging enabled in '%s' mode.", mode)
    return handler
