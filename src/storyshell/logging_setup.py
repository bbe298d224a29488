"""Logging configuration for story output.

Library code never configures logging on import. Applications call
``configure_logging()`` once at their entry point; setting the
``STORYSHELL_DEBUG`` environment variable lowers the default level to trace.
"""

import logging
import os
import sys
from typing import IO

import click

from storyshell.story.levels import level_number, register_trace_level
from storyshell.story.real import ROOT_LOGGER_NAME

DEBUG_ENV_VAR = "STORYSHELL_DEBUG"

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(story_id)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


class StoryFieldsFilter(logging.Filter):
    """Give records from plain loggers the story fields the formatter expects."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "story_id"):
            record.story_id = "-"
        if not hasattr(record, "story_title"):
            record.story_title = ""
        if not hasattr(record, "story_src"):
            record.story_src = ""
        return True


class StoryFormatter(logging.Formatter):
    """Formatter that drops ANSI styling unless it writes to a terminal."""

    def __init__(self, *, strip_styles: bool) -> None:
        super().__init__(LOG_FORMAT, datefmt=DATE_FORMAT)
        self.strip_styles = strip_styles

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if self.strip_styles:
            return click.unstyle(text)
        return text


def _is_terminal(stream: IO[str]) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def default_level() -> str:
    """Return "trace" when STORYSHELL_DEBUG is set, "info" otherwise."""
    if os.getenv(DEBUG_ENV_VAR):
        return "trace"
    return "info"


def configure_logging(
    level: str | None = None,
    stream: IO[str] | None = None,
    logger_name: str = ROOT_LOGGER_NAME,
) -> logging.Handler:
    """Attach a story-aware stream handler to the storyshell logger.

    Calling this again replaces the handler installed by the previous call
    instead of stacking a second one.
    Colors are kept only when the stream is a terminal.

    Args:
        level: Story level name (default: see ``default_level()``)
        stream: Stream to write to (default: sys.stderr)
        logger_name: Logger to configure

    Returns:
        The installed handler

    Raises:
        ValueError: If level is not a known story level
    """
    register_trace_level()
    number = level_number(level or default_level())

    logger = logging.getLogger(logger_name)
    for existing in list(logger.handlers):
        if getattr(existing, "_storyshell_handler", False):
            logger.removeHandler(existing)

    if stream is None:
        stream = sys.stderr
    handler = logging.StreamHandler(stream)
    handler._storyshell_handler = True  # type: ignore[attr-defined]
    handler.addFilter(StoryFieldsFilter())
    handler.setFormatter(StoryFormatter(strip_styles=not _is_terminal(stream)))
    handler.setLevel(number)

    logger.addHandler(handler)
    logger.setLevel(number)
    return handler
