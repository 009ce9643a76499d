"""Reading of delimiter-separated tables of text."""

from __future__ import annotations

from os import PathLike

from strawberry.buffers import DynamicByteBuffer

Table = list[list[str]]


def _split(text: str, separator: str) -> list[str]:
    parts = text.split(separator)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def from_string(string: str, delimiter: str = "\t") -> Table:
    """Split ``string`` into lines and each line into fields.

    An empty field at the end of a line, and an empty last line, are dropped;
    a blank line in the middle becomes an empty row.
    """
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    return [_split(line, delimiter) for line in _split(string, "\n")]


def from_file(path: str | PathLike[str], delimiter: str = "\t") -> Table | None:
    """Read a table from a UTF-8 file, or return ``None`` if it cannot be read."""
    data = DynamicByteBuffer.from_file(path)
    if data is None:
        return None
    return from_string(data.as_string(), delimiter)