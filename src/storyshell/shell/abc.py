"""Shell operations interface.

Follows the ops pattern: an ABC defines the operations, ``RealShell`` in
``storyshell.shell.real`` performs them against the operating system.
Every operation accepts an optional ``story`` that overrides the story the
shell was constructed with.
"""

from abc import ABC, abstractmethod

from storyshell.shell.types import ExecResult, StrPath
from storyshell.story.abc import Story


class Shell(ABC):
    """Abstract interface for filesystem and shell-command operations."""

    @abstractmethod
    def cd(self, target_dir: StrPath, *, story: Story | None = None) -> None:
        """Change the process-wide working directory.

        Args:
            target_dir: Directory to change into
            story: Story to log to (default: the shell's story)

        Raises:
            FileNotFoundError: If target_dir does not exist
            NotADirectoryError: If target_dir is not a directory
        """
        ...

    @abstractmethod
    def cp(
        self,
        src: StrPath,
        dst: StrPath,
        *,
        story: Story | None = None,
        strict: bool | None = None,
    ) -> None:
        """Copy src to dst recursively, overwriting existing files.

        Args:
            src: Source path; may contain glob characters
            dst: Destination path; an existing directory receives src inside it
            story: Story to log to (default: the shell's story)
            strict: Raise on failure (True) or log and ignore it (False).
                None uses the shell's configured default.

        Raises:
            OSError: If the copy fails and strict mode is on
        """
        ...

    @abstractmethod
    def mv(
        self,
        src: StrPath,
        dst: StrPath,
        *,
        story: Story | None = None,
        strict: bool | None = None,
    ) -> None:
        """Move src to dst, replacing an existing destination.

        Args:
            src: Source path; may contain glob characters
            dst: Destination path; an existing directory receives src inside it
            story: Story to log to (default: the shell's story)
            strict: Raise on failure (True) or log and ignore it (False).
                None uses the shell's configured default.

        Raises:
            OSError: If the move fails and strict mode is on
        """
        ...

    @abstractmethod
    def exec_command(
        self,
        command: str,
        *,
        story: Story | None = None,
        log_level: str | None = None,
        error_log_level: str | None = None,
        cwd: StrPath | None = None,
    ) -> ExecResult:
        """Run a shell command, logging its output line by line.

        Args:
            command: Command line passed to the shell
            story: Parent story; a child story is opened for the command
            log_level: Level for stdout lines (default from config: "info")
            error_log_level: Level for stderr lines and the failure message
                (default from config: "error")
            cwd: Directory to run the command in (default: current directory)

        Returns:
            ExecResult with exit code 0 and the full stdout/stderr text

        Raises:
            CommandFailedError: If the command exits with a non-zero code
            ValueError: If a level name is unknown
            FileNotFoundError: If cwd does not exist
        """
        ...
