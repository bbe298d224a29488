"""Story abstraction: a hierarchical logging handle.

A story receives leveled messages, can open child stories for a nested unit
of work, and is closed explicitly when that work ends. Shell operations take
a story as an injectable dependency so tests can record entries in memory
instead of inspecting log output.
"""

from abc import ABC, abstractmethod
from types import TracebackType


class Story(ABC):
    """Abstract hierarchical logging handle.

    Level-specific helpers (``trace``, ``info``, ...) all funnel into ``log``,
    so implementations only need ``log``, ``child`` and ``close``.

    Stories are context managers; leaving the ``with`` block closes them:

        >>> with story.child("Build assets") as build:
        ...     build.info("compiling")
    """

    @abstractmethod
    def log(self, level: str, message: str, *, src: str | None = None) -> None:
        """Record a message at the given level.

        Args:
            level: Story level name (trace, debug, info, warn, error, fatal)
            message: Text of the entry
            src: Optional short source tag shown next to the message

        Raises:
            ValueError: If level is not a known story level
        """
        ...

    @abstractmethod
    def child(self, title: str, *, level: str = "info") -> "Story":
        """Open a child story for a nested unit of work.

        Args:
            title: Human-readable title of the child story
            level: Level at which the child's open/close entries are logged

        Returns:
            The new child story; the caller is responsible for closing it
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the story. Closing an already closed story does nothing."""
        ...

    def trace(self, message: str, *, src: str | None = None) -> None:
        self.log("trace", message, src=src)

    def debug(self, message: str, *, src: str | None = None) -> None:
        self.log("debug", message, src=src)

    def info(self, message: str, *, src: str | None = None) -> None:
        self.log("info", message, src=src)

    def warn(self, message: str, *, src: str | None = None) -> None:
        self.log("warn", message, src=src)

    def error(self, message: str, *, src: str | None = None) -> None:
        self.log("error", message, src=src)

    def fatal(self, message: str, *, src: str | None = None) -> None:
        self.log("fatal", message, src=src)

    def __enter__(self) -> "Story":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
