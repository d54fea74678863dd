"""Fixed-length byte arrays and helpers for viewing buffers as arrays."""

from __future__ import annotations

from .rng import copy_randombytes

__all__ = ["DryocError", "StackByteArray", "as_array", "as_mut_array"]


class DryocError(Exception):
    """Raised when an operation on byte data is given invalid input."""


class StackByteArray:
    """A mutable byte array whose length is fixed when it is created."""

    __slots__ = ("_data",)

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
    def gen(cls, length: int) -> StackByteArray:
        """Return a new array of ``length`` bytes filled with random data."""
        arr = cls(length)
        copy_randombytes(arr._data)
        return arr

    @classmethod
    def try_from(cls, length: int, src) -> StackByteArray:
        """Return a new array holding a copy of ``src``, which must be ``length`` bytes."""
        return cls(length, src)

    def as_slice(self) -> bytes:
        """Return the contents as bytes."""
        return bytes(self._data)

    def copy_from_slice(self, other) -> None:
        """Overwrite the contents with ``other``, which must have the same length."""
        src = bytes(other)
        if len(src) != len(self._data):
            raise ValueError(
                f"source slice length ({len(src)}) does not match "
                f"destination slice length ({len(self._data)})"
            )
        self._data[:] = src

    def zeroize(self) -> None:
        """Overwrite every byte with zero."""
        self._data[:] = bytes(len(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return bytes(self._data[index])
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            new = bytes(value)
            if len(self._data[index]) != len(new):
                raise ValueError("slice assignment cannot change the array's length")
            self._data[index] = new
        else:
            self._data[index] = value

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other) -> bool:
        if isinstance(other, StackByteArray):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StackByteArray({len(self._data)}, {bytes(self._data)!r})"


def _view(data) -> memoryview:
    if isinstance(data, StackByteArray):
        return memoryview(data._data)
    return memoryview(data).cast("B")


def _check_length(view: memoryview, length: int) -> None:
    if view.nbytes < length:
        raise ValueError(
            f"invalid buffer length {view.nbytes}, expecting at least {length}"
        )


def as_array(data, length: int) -> bytes:
    """Return the first ``length`` bytes of ``data``, which must hold at least that many."""
    view = _view(data)
    _check_length(view, length)
    return bytes(view[:length])


def as_mut_array(data, length: int) -> memoryview:
    """Return a writable view of the first ``length`` bytes of ``data``."""
    view = _view(data)
    if view.readonly:
        raise TypeError("buffer is read-only")
    _check_length(view, length)
    return view[:length]