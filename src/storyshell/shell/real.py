"""Production shell operations using os, shutil and subprocess."""

import logging
import os
import subprocess
import threading
from collections.abc import Callable

import click

from storyshell.config import ShellConfig
from storyshell.errors import CommandFailedError
from storyshell.shell.abc import Shell
from storyshell.shell.paths import (
    copy_path,
    expand_sources,
    move_path,
    normalize_path,
    resolve_target,
)
from storyshell.shell.streaming import pump_lines
from storyshell.shell.types import ExecResult, StrPath
from storyshell.story.abc import Story
from storyshell.story.levels import validate_level
from storyshell.story.null import NullStory

logger = logging.getLogger(__name__)


def _path_style(path: StrPath) -> str:
    return click.style(os.fspath(path), fg="cyan", bold=True)


class RealShell(Shell):
    """Shell operations against the real filesystem and processes.

    Commands run through the platform shell. Output is read from pipes and
    logged line by line into a child story, and also buffered for the
    returned ExecResult.

    A ``cwd`` passed to ``exec_command`` is handed to the spawned process;
    the process-wide working directory is only changed by ``cd``.

    Example:
        >>> shell = RealShell(story=root_story())
        >>> result = shell.exec_command("git status --short", cwd=repo_root)
        >>> result.stdout
        ' M README.md\\n'
    """

    def __init__(self, story: Story | None = None, config: ShellConfig | None = None) -> None:
        """Create a shell.

        Args:
            story: Default story for operations called without one
                (default: NullStory, which discards entries)
            config: Default levels and behavior (default: ShellConfig())
        """
        self._story = story if story is not None else NullStory()
        self._config = config if config is not None else ShellConfig()

    @property
    def config(self) -> ShellConfig:
        return self._config

    def _story_for(self, story: Story | None) -> Story:
        return story if story is not None else self._story

    def cd(self, target_dir: StrPath, *, story: Story | None = None) -> None:
        story = self._story_for(story)
        story.trace(f"Changing working directory to {_path_style(target_dir)}...")
        os.chdir(target_dir)

    def cp(
        self,
        src: StrPath,
        dst: StrPath,
        *,
        story: Story | None = None,
        strict: bool | None = None,
    ) -> None:
        story = self._story_for(story)
        src_path = normalize_path(src)
        dst_path = normalize_path(dst)
        story.debug(f"Copying {_path_style(src_path)} -> {_path_style(dst_path)}...")
        self._transfer("copy", copy_path, src_path, dst_path, story, strict)

    def mv(
        self,
        src: StrPath,
        dst: StrPath,
        *,
        story: Story | None = None,
        strict: bool | None = None,
    ) -> None:
        story = self._story_for(story)
        src_path = normalize_path(src)
        dst_path = normalize_path(dst)
        story.debug(f"Moving {_path_style(src_path)} -> {_path_style(dst_path)}...")
        self._transfer("move", move_path, src_path, dst_path, story, strict)

    def _transfer(
        self,
        verb: str,
        operation: Callable[[str, str], None],
        src: str,
        dst: str,
        story: Story,
        strict: bool | None,
    ) -> None:
        """Apply a copy/move to every source matched by src.

        In non-strict mode an OSError is logged on the story and swallowed.
        """
        strict = self._config.strict if strict is None else strict
        try:
            sources = expand_sources(src)
            if len(sources) > 1 and not os.path.isdir(dst):
                raise NotADirectoryError(f"Target is not a directory: {dst}")
            for source in sources:
                operation(source, resolve_target(source, dst))
        except OSError as e:
            if strict:
                raise
            logger.debug("Ignoring %s failure for %s -> %s", verb, src, dst, exc_info=True)
            story.error(f"Failed to {verb} {src} -> {dst}: {e}")

    def exec_command(
        self,
        command: str,
        *,
        story: Story | None = None,
        log_level: str | None = None,
        error_log_level: str | None = None,
        cwd: StrPath | None = None,
    ) -> ExecResult:
        story = self._story_for(story)
        log_level = validate_level(log_level or self._config.log_level)
        error_log_level = validate_level(error_log_level or self._config.error_log_level)

        # An empty cwd means "stay in the current directory".
        if cwd is not None and not os.fspath(cwd):
            cwd = None

        title = f"Run cmd {click.style(command, fg='green', bold=True)}"
        if cwd is not None:
            title += f" at {click.style(os.fspath(cwd), fg='green')}"

        cmd_story = story.child(title, level=log_level)
        try:
            if cwd is not None:
                story.trace(f"Changing working directory to {_path_style(cwd)}...")
            return self._run(command, cmd_story, log_level, error_log_level, cwd)
        finally:
            cmd_story.close()

    def _run(
        self,
        command: str,
        story: Story,
        log_level: str,
        error_log_level: str,
        cwd: StrPath | None,
    ) -> ExecResult:
        """Spawn the command and stream its pipes into the story.

        Stdout is read on the calling thread, stderr on a helper thread, so
        neither pipe can fill up and block the child.
        """
        cmd_name = command.split(" ")[0][: self._config.command_name_width]
        stdout_chunks: list[str] = []
        stderr_chunks: list[str] = []

        def log_stdout(line: str) -> None:
            story.log(log_level, f"| {line}", src=cmd_name)

        def log_stderr(line: str) -> None:
            if line:
                story.log(error_log_level, f"| {line}", src=cmd_name)

        with subprocess.Popen(
            command,
            shell=True,
            cwd=cwd,
            executable=self._config.shell_executable,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        ) as process:
            logger.debug("Spawned pid=%s for %r", process.pid, command)
            assert process.stdout is not None
            assert process.stderr is not None

            stderr_thread = threading.Thread(
                target=pump_lines,
                args=(process.stderr, stderr_chunks, log_stderr),
                daemon=True,
            )
            stderr_thread.start()
            pump_lines(process.stdout, stdout_chunks, log_stdout)
            exit_code = process.wait()
            stderr_thread.join()

        stdout = "".join(stdout_chunks)
        stderr = "".join(stderr_chunks)

        if exit_code != 0:
            story.log(error_log_level, f"Command failed [{exit_code}]")
            raise CommandFailedError(command, exit_code, stdout, stderr)

        story.trace("Command completed successfully")
        return ExecResult(exit_code=exit_code, stdout=stdout, stderr=stderr)
