"""Growable and fixed-size byte buffers with packing helpers."""

from __future__ import annotations

import struct
from functools import total_ordering
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, Iterator

from strawberry.errors import ErrorKind, StreamError


def _to_bytes(data: Any) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, int):
        raise TypeError("an integer is not a byte sequence; wrap it in a list")
    return bytes(data)


def _comparable(other: object) -> bytes | None:
    if isinstance(other, (DynamicByteBuffer, ByteBuffer, bytes, bytearray, memoryview)):
        return bytes(other)
    return None


def _unpack(fmt: str, data: bytes) -> Any:
    size = struct.calcsize(fmt)
    if len(data) != size:
        raise ValueError(f"format {fmt!r} needs {size} bytes, buffer holds {len(data)}")
    values = struct.unpack(fmt, data)
    return values[0] if len(values) == 1 else values


@total_ordering
class DynamicByteBuffer:
    """A growable sequence of bytes with a read position."""

    __slots__ = ("_data", "_read_cursor", "_capacity")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Any = b"") -> None:
        self._data = bytearray(_to_bytes(data))
        self._read_cursor = 0
        self._capacity = len(self._data)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> DynamicByteBuffer | None:
        """Load a whole file, or return ``None`` if it is missing or unreadable."""
        file = Path(path)
        if not file.exists():
            return None
        try:
            return cls(file.read_bytes())
        except OSError:
            return None

    @classmethod
    def zeroes(cls, length: int) -> DynamicByteBuffer:
        """A buffer of ``length`` zero bytes."""
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        return cls(bytes(length))

    @classmethod
    def with_capacity(cls, length: int) -> DynamicByteBuffer:
        """An empty buffer expecting about ``length`` bytes."""
        result = cls()
        result.reserve(length)
        return result

    @property
    def capacity(self) -> int:
        """Number of bytes reserved, never less than the size."""
        return max(self._capacity, len(self._data))

    def push(self, data: Any) -> None:
        """Append bytes, a string as UTF-8, another buffer or an iterable of ints."""
        self._data.extend(_to_bytes(data))

    def push_value(self, fmt: str, value: Any) -> None:
        """Append ``value`` packed with the ``struct`` format ``fmt``."""
        self._data.extend(struct.pack(fmt, value))

    def read(self, length: int) -> DynamicByteBuffer:
        """Consume and return the next ``length`` bytes.

        Raises ``StreamError`` with ``END_OF_FILE`` if fewer remain.
        """
        if len(self._data) - self._read_cursor < length:
            raise StreamError(ErrorKind.END_OF_FILE)
        start = self._read_cursor
        self._read_cursor += length
        return DynamicByteBuffer(self._data[start : self._read_cursor])

    def write(self, data: Any) -> int:
        """Append ``data`` and return the number of bytes written."""
        raw = _to_bytes(data)
        self._data.extend(raw)
        return len(raw)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return DynamicByteBuffer(self._data[index])
        return self._data[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            self._data[index] = _to_bytes(value)
        else:
            self._data[index] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"DynamicByteBuffer({bytes(self._data)!r})"

    def __eq__(self, other: object) -> bool:
        raw = _comparable(other)
        if raw is None:
            return NotImplemented
        return bytes(self._data) == raw

    def __lt__(self, other: object) -> bool:
        raw = _comparable(other)
        if raw is None:
            return NotImplemented
        return bytes(self._data) < raw

    def reserve(self, length: int) -> None:
        """Raise the reserved capacity to at least ``length``."""
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        self._capacity = max(self._capacity, length)

    def resize(self, length: int) -> None:
        """Truncate, or extend with zero bytes, to exactly ``length`` bytes."""
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if length < len(self._data):
            del self._data[length:]
        else:
            self._data.extend(bytes(length - len(self._data)))
        self._read_cursor = min(self._read_cursor, length)

    def into(self, fmt: str) -> Any:
        """Unpack the whole buffer with ``fmt``; its size must match exactly."""
        return _unpack(fmt, bytes(self._data))

    def as_static(self, size: int) -> ByteBuffer:
        """A fixed-size copy, truncated or zero-padded to ``size``."""
        return ByteBuffer(size, self._data[:size])

    def as_array(self, size: int) -> bytes:
        """The contents as bytes, which must be exactly ``size`` long."""
        if len(self._data) != size:
            raise ValueError(f"buffer holds {len(self._data)} bytes, expected {size}")
        return bytes(self._data)

    def as_vector(self, fmt: str = "B") -> list[Any]:
        """Unpack the buffer as consecutive items of format ``fmt``."""
        itemsize = struct.calcsize(fmt)
        if itemsize == 0 or len(self._data) % itemsize:
            raise ValueError(f"buffer of {len(self._data)} bytes is not a whole number of {fmt!r}")
        return [item[0] if len(item) == 1 else item for item in struct.iter_unpack(fmt, self._data)]

    def as_string(self) -> str:
        """The contents decoded as UTF-8."""
        return self._data.decode("utf-8")


@total_ordering
class ByteBuffer:
    """A byte sequence of fixed size."""

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int, data: Any = b"") -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        raw = _to_bytes(data)
        if len(raw) > size:
            raise ValueError(f"{len(raw)} bytes do not fit in a buffer of {size}")
        self._data = bytearray(raw) + bytes(size - len(raw))

    @classmethod
    def from_value(cls, fmt: str, value: Any) -> ByteBuffer:
        """A buffer holding ``value`` packed with the ``struct`` format ``fmt``."""
        packed = struct.pack(fmt, value)
        return cls(len(packed), packed)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __setitem__(self, index: int, value: int) -> None:
        if isinstance(index, slice):
            raise TypeError("a fixed-size buffer does not support slice assignment")
        self._data[index] = value

    def __iter__(self) -> Iterable[int]:
        return iter(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"ByteBuffer({len(self._data)}, {bytes(self._data)!r})"

    def __eq__(self, other: object) -> bool:
        raw = _comparable(other)
        if raw is None:
            return NotImplemented
        return bytes(self._data) == raw

    def __lt__(self, other: object) -> bool:
        raw = _comparable(other)
        if raw is None:
            return NotImplemented
        return bytes(self._data) < raw

    def into(self, fmt: str) -> Any:
        """Unpack the buffer with ``fmt``; its size must match exactly."""
        return _unpack(fmt, bytes(self._data))

    def to_dynamic(self) -> DynamicByteBuffer:
        """A growable copy."""
        return DynamicByteBuffer(self._data)