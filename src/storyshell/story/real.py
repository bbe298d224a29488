"""Story implementation backed by the standard ``logging`` package."""

import itertools
import logging
import time
from collections.abc import Callable

from storyshell.story.abc import Story
from storyshell.story.levels import level_number, register_trace_level, validate_level

ROOT_LOGGER_NAME = "storyshell"

_story_ids = itertools.count(1)


class LoggingStory(Story):
    """Production story that writes every entry to a ``logging.Logger``.

    Each story gets a process-unique id. Records carry ``story_id``,
    ``story_title`` and ``story_src`` attributes so a formatter (see
    ``storyshell.logging_setup``) or any structured handler can group the
    entries of one story, including entries from concurrent children.

    Example:
        >>> story = LoggingStory(logging.getLogger("deploy"), title="Deploy")
        >>> with story.child("Upload bundle", level="debug") as upload:
        ...     upload.info("42 files")
    """

    def __init__(
        self,
        logger: logging.Logger,
        title: str | None = None,
        *,
        level: str = "info",
        parent: "LoggingStory | None" = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        register_trace_level()
        self._logger = logger
        self._title = title
        self._level = validate_level(level)
        self._parent = parent
        self._clock = clock
        self._story_id = next(_story_ids)
        self._started_at = clock()
        self._closed = False

    @property
    def story_id(self) -> int:
        return self._story_id

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def parent(self) -> "LoggingStory | None":
        return self._parent

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, level: str, message: str, *, src: str | None = None) -> None:
        number = level_number(level)
        if not self._logger.isEnabledFor(number):
            return
        text = f"{src} {message}" if src else message
        self._logger.log(
            number,
            text,
            extra={
                "story_id": self._story_id,
                "story_title": self._title or "",
                "story_src": src or "",
            },
        )

    def child(self, title: str, *, level: str = "info") -> "LoggingStory":
        story = LoggingStory(self._logger, title, level=level, parent=self, clock=self._clock)
        story.log(story._level, f"Started: {title}")
        return story

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._title is None:
            return
        elapsed = self._clock() - self._started_at
        self.log(self._level, f"Finished: {self._title} ({elapsed:.2f}s)")


def root_story(logger: logging.Logger | None = None) -> LoggingStory:
    """Create an untitled top-level story writing to the ``storyshell`` logger.

    Args:
        logger: Logger to write to (default: ``logging.getLogger("storyshell")``)
    """
    return LoggingStory(logger or logging.getLogger(ROOT_LOGGER_NAME))
