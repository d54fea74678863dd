"""Byte buffers with a tracked lock mode and access protection.

A :class:`Protected` value wraps a heap buffer and records whether it is
locked and what access it permits. Access that the current protection does
not allow raises :class:`ProtectionError`. A state change consumes the value
it is called on and returns a new one; the old value can no longer be used.
Contents are wiped when a value is discarded.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .heap import HeapByteArray, HeapBytes
from .rng import copy_randombytes
from .types import DryocError, StackByteArray

__all__ = [
    "ProtectionError",
    "LockMode",
    "ProtectMode",
    "Protected",
    "mlock",
    "new_locked",
    "new_readonly_locked",
    "gen_locked",
    "gen_readonly_locked",
    "from_slice_into_locked",
    "from_slice_into_readonly_locked",
]


class ProtectionError(DryocError):
    """Raised when a protected buffer is used in a way its state forbids."""


class LockMode(enum.Enum):
    """Whether a region is locked in memory."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"


class ProtectMode(enum.Enum):
    """The access a region permits."""

    READ_ONLY = "read-only"
    READ_WRITE = "read-write"
    NO_ACCESS = "no-access"


@dataclass
class _State:
    data: HeapBytes | HeapByteArray
    lock: LockMode
    protect: ProtectMode


def _to_heap(data) -> HeapBytes | HeapByteArray:
    if isinstance(data, (HeapBytes, HeapByteArray)):
        return data
    if isinstance(data, StackByteArray):
        heap = HeapByteArray(len(data), data.as_slice())
        data.zeroize()
        return heap
    return HeapBytes(bytes(data))


def _copy_heap(data: HeapBytes | HeapByteArray) -> HeapBytes | HeapByteArray:
    if isinstance(data, HeapByteArray):
        return HeapByteArray(len(data), data.as_slice())
    return HeapBytes(data.as_slice())


class Protected:
    """A heap buffer together with its lock mode and protection mode."""

    __slots__ = ("_state",)

    def __init__(self, data) -> None:
        self._state: _State | None = _State(
            _to_heap(data), LockMode.UNLOCKED, ProtectMode.READ_WRITE
        )

    @classmethod
    def _adopt(cls, state: _State) -> Protected:
        obj = cls.__new__(cls)
        obj._state = state
        return obj

    def _live(self) -> _State:
        if self._state is None:
            raise ProtectionError("unexpected empty internal struct")
        return self._state

    def _take(self) -> _State:
        state = self._live()
        self._state = None
        return state

    def _readable(self) -> _State:
        state = self._live()
        if state.protect is ProtectMode.NO_ACCESS:
            raise ProtectionError("region is protected as no-access")
        return state

    def _writable(self) -> _State:
        state = self._live()
        if state.protect is not ProtectMode.READ_WRITE:
            raise ProtectionError(f"region is protected as {state.protect.value}")
        return state

    @property
    def lock_mode(self) -> LockMode:
        """The current lock mode."""
        return self._live().lock

    @property
    def protect_mode(self) -> ProtectMode:
        """The current protection mode."""
        return self._live().protect

    def mlock(self) -> Protected:
        """Consume this unlocked value and return it locked."""
        if self._live().lock is LockMode.LOCKED:
            raise ProtectionError("region is already locked")
        state = self._take()
        state.lock = LockMode.LOCKED
        return self._adopt(state)

    def munlock(self) -> Protected:
        """Consume this value and return it unlocked."""
        state = self._take()
        state.lock = LockMode.UNLOCKED
        return self._adopt(state)

    def mprotect_readonly(self) -> Protected:
        """Consume this value and return it protected as read-only."""
        state = self._take()
        state.protect = ProtectMode.READ_ONLY
        return self._adopt(state)

    def mprotect_readwrite(self) -> Protected:
        """Consume this value and return it protected as read-write."""
        state = self._take()
        state.protect = ProtectMode.READ_WRITE
        return self._adopt(state)

    def mprotect_noaccess(self) -> Protected:
        """Consume this unlocked value and return it protected as no-access."""
        if self._live().lock is LockMode.LOCKED:
            raise ProtectionError("a locked region cannot be protected as no-access")
        state = self._take()
        state.protect = ProtectMode.NO_ACCESS
        return self._adopt(state)

    def as_slice(self) -> bytes:
        """Return the contents as bytes."""
        return self._readable().data.as_slice()

    def resize(self, new_len: int, value: int = 0) -> None:
        """Resize a read-write resizable buffer, filling new bytes with ``value``."""
        state = self._writable()
        if not isinstance(state.data, HeapBytes):
            raise TypeError("a fixed-length buffer cannot be resized")
        if state.lock is LockMode.LOCKED:
            # A locked region is replaced by a fresh one holding the copied prefix.
            fresh = HeapBytes()
            fresh.resize(new_len, value)
            keep = min(new_len, len(state.data))
            fresh[:keep] = state.data[:keep]
            old = state.data
            state.data = fresh
            old.zeroize()
        else:
            state.data.resize(new_len, value)

    def copy_from_slice(self, other) -> None:
        """Overwrite the contents with ``other``, which must have the same length."""
        self._writable().data.copy_from_slice(other)

    def zeroize(self) -> None:
        """Wipe the contents, whatever the protection mode."""
        state = self._state
        if state is not None and len(state.data):
            state.data.zeroize()

    def clone(self) -> Protected:
        """Return an independent copy with the same lock and protection modes."""
        state = self._readable()
        copy = _State(_copy_heap(state.data), state.lock, state.protect)
        return self._adopt(copy)

    def __len__(self) -> int:
        return len(self._live().data)

    def __getitem__(self, index):
        return self._readable().data[index]

    def __setitem__(self, index, value) -> None:
        self._writable().data[index] = value

    def __bytes__(self) -> bytes:
        return self.as_slice()

    def __repr__(self) -> str:
        if self._state is None:
            return "Protected(<consumed>)"
        return (
            f"Protected(len={len(self._state.data)}, "
            f"{self._state.lock.value}, {self._state.protect.value})"
        )

    def __del__(self) -> None:
        if getattr(self, "_state", None) is not None:
            self.zeroize()


def mlock(value) -> Protected:
    """Wrap a heap or stack buffer and return it locked and read-write."""
    return Protected(value).mlock()


def _new_heap(length: int | None) -> HeapBytes | HeapByteArray:
    return HeapBytes() if length is None else HeapByteArray(length)


def new_locked(length: int | None = None) -> Protected:
    """Return a new zeroed, locked buffer; resizable and empty when ``length`` is None."""
    return mlock(_new_heap(length))


def new_readonly_locked(length: int | None = None) -> Protected:
    """Return a new zeroed, locked, read-only buffer."""
    return new_locked(length).mprotect_readonly()


def gen_locked(length: int | None = None) -> Protected:
    """Return a new locked buffer filled with random data."""
    heap = _new_heap(length)
    if isinstance(heap, HeapByteArray):
        heap = HeapByteArray.gen(length)
    else:
        buf = bytearray(len(heap))
        copy_randombytes(buf)
        heap = HeapBytes(buf)
    return mlock(heap)


def gen_readonly_locked(length: int | None = None) -> Protected:
    """Return a new locked, read-only buffer filled with random data."""
    return gen_locked(length).mprotect_readonly()


def from_slice_into_locked(src, length: int | None = None) -> Protected:
    """Return a new locked buffer holding a copy of ``src``.

    With ``length`` given the buffer is fixed-length and ``src`` must match it.
    """
    data = bytes(src)
    if length is None:
        res = new_locked()
        res.resize(len(data), 0)
        res.copy_from_slice(data)
        return res
    if len(data) != length:
        raise DryocError(
            f"slice length {len(data)} doesn't match expected {length}"
        )
    res = new_locked(length)
    res.copy_from_slice(data)
    return res


def from_slice_into_readonly_locked(src, length: int | None = None) -> Protected:
    """Return a new locked, read-only buffer holding a copy of ``src``."""
    return from_slice_into_locked(src, length).mprotect_readonly()