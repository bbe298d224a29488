"""Tests for story-aware logging configuration."""

import io
import logging
from collections.abc import Iterator

import click
import pytest

from storyshell.logging_setup import configure_logging, default_level
from storyshell.shell.real import RealShell
from storyshell.story.levels import TRACE
from storyshell.story.real import LoggingStory

LOGGER_NAME = "storyshell.tests.setup"


@pytest.fixture
def clean_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_configure_logging_renders_story_id(clean_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging("info", stream=stream, logger_name=LOGGER_NAME)
    story = LoggingStory(clean_logger, "Deploy")

    story.info("hello", src="echo")

    output = stream.getvalue()
    assert f"[{story.story_id}] echo hello" in output
    assert "INFO" in output


def test_configure_logging_handles_plain_records(clean_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging("info", stream=stream, logger_name=LOGGER_NAME)

    clean_logger.warning("plain message")

    assert "[-] plain message" in stream.getvalue()


def test_configure_logging_replaces_previous_handler(clean_logger: logging.Logger) -> None:
    configure_logging("info", stream=io.StringIO(), logger_name=LOGGER_NAME)
    configure_logging("debug", stream=io.StringIO(), logger_name=LOGGER_NAME)

    assert len(clean_logger.handlers) == 1
    assert clean_logger.level == logging.DEBUG


def test_configure_logging_trace_level(clean_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging("trace", stream=stream, logger_name=LOGGER_NAME)

    LoggingStory(clean_logger).trace("detail")

    assert "TRACE" in stream.getvalue()
    assert clean_logger.level == TRACE


def test_default_level_follows_debug_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STORYSHELL_DEBUG", raising=False)
    assert default_level() == "info"

    monkeypatch.setenv("STORYSHELL_DEBUG", "1")
    assert default_level() == "trace"


def test_configure_logging_rejects_unknown_level(clean_logger: logging.Logger) -> None:
    with pytest.raises(ValueError):
        configure_logging("verbose", logger_name=LOGGER_NAME)


class TerminalStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_styles_stripped_for_non_terminal_stream(clean_logger: logging.Logger) -> None:
    stream = io.StringIO()
    configure_logging("trace", stream=stream, logger_name=LOGGER_NAME)
    shell = RealShell(story=LoggingStory(clean_logger))

    shell.exec_command("echo hi", cwd=".")

    output = stream.getvalue()
    assert "Started: Run cmd echo hi at ." in output
    assert "\x1b[" not in output


def test_styles_kept_for_terminal_stream(clean_logger: logging.Logger) -> None:
    stream = TerminalStream()
    configure_logging("info", stream=stream, logger_name=LOGGER_NAME)

    LoggingStory(clean_logger).info(click.style("green", fg="green"))

    assert "\x1b[32m" in stream.getvalue()
