from storyshell.story.abc import Story
from storyshell.story.levels import LEVELS, TRACE, level_number, register_trace_level
from storyshell.story.null import NullStory
from storyshell.story.real import LoggingStory, root_story

__all__ = [
    "LEVELS",
    "LoggingStory",
    "NullStory",
    "Story",
    "TRACE",
    "level_number",
    "register_trace_level",
    "root_story",
]
