"""No-op story used when a caller does not supply one."""

from storyshell.story.abc import Story
from storyshell.story.levels import level_number


class NullStory(Story):
    """Story that discards every entry.

    Level names are still validated so a typo surfaces the same way it would
    with a real story.
    """

    def log(self, level: str, message: str, *, src: str | None = None) -> None:
        level_number(level)

    def child(self, title: str, *, level: str = "info") -> "NullStory":
        level_number(level)
        return self

    def close(self) -> None:
        pass
