"""Page-granular heap byte buffers: a resizable one and a fixed-length one."""

from __future__ import annotations

import mmap
from functools import cache

from .rng import copy_randombytes
from .types import DryocError

__all__ = ["page_size", "page_round", "HeapBytes", "HeapByteArray"]


@cache
def page_size() -> int:
    """Return the memory page size of the running system, in bytes."""
    return mmap.PAGESIZE


def page_round(size: int, pagesize: int) -> int:
    """Round ``size`` up past the next page boundary.

    A size that is already a whole number of pages still gains one full page,
    which is the room the allocator reserves for its guard region.
    """
    if pagesize <= 0:
        raise ValueError(f"page size must be positive, got {pagesize}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return size + (pagesize - size % pagesize)


def _copy_into(data: bytearray, other) -> None:
    src = bytes(other)
    if len(src) != len(data):
        raise ValueError(
            f"source slice length ({len(src)}) does not match "
            f"destination slice length ({len(data)})"
        )
    data[:] = src


def _get(data: bytearray, index):
    if isinstance(index, slice):
        return bytes(data[index])
    return data[index]


def _set(data: bytearray, index, value) -> None:
    if isinstance(index, slice):
        new = bytes(value)
        if len(data[index]) != len(new):
            raise ValueError("slice assignment cannot change the buffer's length")
        data[index] = new
    else:
        data[index] = value


class _HeapBuffer:
    """Comparison and wipe-on-discard shared by the heap buffers."""

    __slots__ = ("_data",)

    _data: bytearray

    def __eq__(self, other) -> bool:
        if type(other) is type(self):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __del__(self) -> None:
        data = getattr(self, "_data", None)
        if data is not None:
            data[:] = bytes(len(data))


class HeapBytes(_HeapBuffer):
    """A resizable byte buffer that is wiped when discarded."""

    __slots__ = ()

    def __init__(self, data=None) -> None:
        self._data = bytearray() if data is None else bytearray(bytes(data))

    def resize(self, new_len: int, value: int = 0) -> None:
        """Grow or shrink to ``new_len`` bytes, filling new bytes with ``value``."""
        if new_len < 0:
            raise ValueError(f"length must not be negative, got {new_len}")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"fill value {value} does not fit in a byte")
        current = len(self._data)
        if new_len < current:
            self._data[new_len:] = bytes(current - new_len)
            del self._data[new_len:]
        else:
            self._data += bytes([value]) * (new_len - current)

    def as_slice(self) -> bytes:
        """Return the contents as bytes."""
        return bytes(self._data)

    def copy_from_slice(self, other) -> None:
        """Overwrite the contents with ``other``, which must have the same length."""
        _copy_into(self._data, other)

    def zeroize(self) -> None:
        """Overwrite every byte with zero and empty the buffer."""
        self._data[:] = bytes(len(self._data))
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return _get(self._data, index)

    def __setitem__(self, index, value) -> None:
        _set(self._data, index, value)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"HeapBytes({bytes(self._data)!r})"


class HeapByteArray(_HeapBuffer):
    """A byte array whose length is fixed when it is created."""

    __slots__ = ()

    def __init__(self, length: int, data=None) -> None:
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if data is None:
            self._data = bytearray(length)
            return
        src = bytes(data)
        if len(src) != length:
            raise DryocError(f"Invalid size: expected {length} found {len(src)}")
        self._data = bytearray(src)

    @classmethod
    def gen(cls, length: int) -> HeapByteArray:
        """Return a new array of ``length`` bytes filled with random data."""
        arr = cls(length)
        copy_randombytes(arr._data)
        return arr

    @classmethod
    def try_from(cls, length: int, src) -> HeapByteArray:
        """Return a new array holding a copy of ``src``, which must be ``length`` bytes."""
        return cls(length, src)

    def as_slice(self) -> bytes:
        """Return the contents as bytes."""
        return bytes(self._data)

    def copy_from_slice(self, other) -> None:
        """Overwrite the contents with ``other``, which must have the same length."""
        _copy_into(self._data, other)

    def zeroize(self) -> None:
        """Overwrite every byte with zero; the length is kept."""
        self._data[:] = bytes(len(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return _get(self._data, index)

    def __setitem__(self, index, value) -> None:
        _set(self._data, index, value)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"HeapByteArray({len(self._data)}, {bytes(self._data)!r})"