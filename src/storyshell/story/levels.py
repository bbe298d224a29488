"""Story level names and their mapping onto ``logging`` levels."""

import logging

TRACE = 5

LEVELS: dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
}


def register_trace_level() -> None:
    """Make ``logging`` render TRACE records by name instead of "Level 5"."""
    if logging.getLevelName(TRACE) != "TRACE":
        logging.addLevelName(TRACE, "TRACE")


def level_number(name: str) -> int:
    """Translate a story level name into its ``logging`` number.

    Args:
        name: One of trace, debug, info, warn, error, fatal (case-insensitive)

    Returns:
        The numeric logging level

    Raises:
        ValueError: If the name is not a known story level
    """
    number = LEVELS.get(name.lower())
    if number is None:
        valid = ", ".join(LEVELS)
        raise ValueError(f"Unknown log level {name!r} (expected one of: {valid})")
    return number


def validate_level(name: str) -> str:
    """Return the normalized level name, raising ValueError if unknown."""
    level_number(name)
    return name.lower()
