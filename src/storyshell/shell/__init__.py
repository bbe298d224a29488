from storyshell.shell.abc import Shell
from storyshell.shell.real import RealShell
from storyshell.shell.types import ExecResult, StrPath

__all__ = [
    "ExecResult",
    "RealShell",
    "Shell",
    "StrPath",
]
