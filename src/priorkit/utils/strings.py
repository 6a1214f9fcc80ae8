"""Line tokenising helpers for the text stream formats."""

from __future__ import annotations

from typing import TextIO

from priorkit.exceptions import FileFormatError

__all__ = ["tokenise", "read_key_value"]


def tokenise(line: str, delimiter: str = "=") -> list[str]:
    """Splits a line on ``delimiter``.

    Trailing newline characters are dropped first; tokens are otherwise
    returned unchanged, including empty ones, so callers can count them.

    Args:
        line: The line to split.
        delimiter: Separator string.

    Returns:
        List of tokens.
    """
    return line.rstrip("\r\n").split(delimiter)


def read_key_value(stream: TextIO, key: str, delimiter: str = "=") -> str:
    """Reads one ``key=value`` line from ``stream`` and returns the value.

    Args:
        stream: Text stream positioned at the start of a line.
        key: The key the line must carry.
        delimiter: Separator between key and value.

    Returns:
        The value token.

    Raises:
        FileFormatError: If the stream is exhausted, the line does not split
            into exactly two tokens, or the first token is not ``key``.
    """
    line = stream.readline()
    if not line:
        raise FileFormatError(f"unexpected end of stream while looking for '{key}'.")
    tokens = tokenise(line, delimiter)
    if len(tokens) != 2 or tokens[0] != key:
        raise FileFormatError(f"expected a '{key}{delimiter}<value>' line.", line=line.rstrip("\r\n"))
    return tokens[1]
