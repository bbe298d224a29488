"""Error types raised by storyshell.

Only failures that storyshell itself detects get a dedicated type. Errors
from the filesystem or from process spawning (missing directories, missing
binaries, permission problems) propagate unmodified.
"""


class StoryshellError(Exception):
    """Base exception for all storyshell errors."""


class CommandFailedError(StoryshellError, RuntimeError):
    """Raised when a shell command exits with a non-zero code.

    The message only names the command. Exit code and captured output are
    kept as attributes; the full diagnostic trail lives in the story log.

    Attributes:
        command: The command line that failed
        exit_code: The non-zero exit code
        stdout: Captured standard output
        stderr: Captured standard error
    """

    def __init__(self, command: str, exit_code: int, stdout: str, stderr: str) -> None:
        self.command = command
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"Command failed: {command}")


class ConfigError(StoryshellError, ValueError):
    """Raised when a config file contains invalid values."""
