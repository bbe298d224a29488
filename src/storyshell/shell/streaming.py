"""Line splitting for subprocess output pipes."""

import io
from collections.abc import Callable
from typing import IO


def split_line(raw: str) -> str:
    """Strip the line terminator (``\\n`` or ``\\r\\n``) from a raw line."""
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


def pump_lines(
    pipe: IO[bytes],
    chunks: list[str],
    on_line: Callable[[str], None],
    encoding: str = "utf-8",
) -> None:
    """Read a binary pipe to EOF, buffering its text and reporting each line.

    The buffered text is kept byte-for-byte (only ``\\n`` ends a line and no
    newline translation happens), while ``on_line`` receives each line
    without its terminator. A final line lacking a newline is still
    reported; no empty phantom line is reported after a trailing newline.

    Args:
        pipe: Binary stream, typically ``Popen.stdout`` or ``Popen.stderr``
        chunks: List receiving the raw text of every line, in order
        on_line: Called once per line, in order
        encoding: Text encoding of the stream (undecodable bytes are replaced)
    """
    reader = io.TextIOWrapper(pipe, encoding=encoding, errors="replace", newline="\n")
    for raw in reader:
        chunks.append(raw)
        on_line(split_line(raw))
