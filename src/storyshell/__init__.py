"""Filesystem and shell-command helpers that log into hierarchical stories."""

from storyshell.config import ShellConfig, load_config
from storyshell.errors import CommandFailedError, ConfigError, StoryshellError
from storyshell.logging_setup import configure_logging
from storyshell.shell import ExecResult, RealShell, Shell
from storyshell.story import LoggingStory, NullStory, Story, root_story

__all__ = [
    "CommandFailedError",
    "ConfigError",
    "ExecResult",
    "LoggingStory",
    "NullStory",
    "RealShell",
    "Shell",
    "ShellConfig",
    "Story",
    "StoryshellError",
    "configure_logging",
    "load_config",
    "root_story",
]
