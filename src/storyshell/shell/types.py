"""Value types shared by shell implementations."""

import os
from dataclasses import dataclass

StrPath = str | os.PathLike[str]


@dataclass(frozen=True)
class ExecResult:
    """Result of a successful command execution.

    Attributes:
        exit_code: Exit code of the command (always 0 for a returned result)
        stdout: Full standard output text
        stderr: Full standard error text
    """

    exit_code: int
    stdout: str
    stderr: str
