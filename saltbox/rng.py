"""Access to the operating system's random number generator."""

from __future__ import annotations

import os

__all__ = ["randombytes_buf", "copy_randombytes"]


def randombytes_buf(length: int) -> bytes:
    """Return ``length`` bytes of random data from the operating system."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return os.urandom(length)


def copy_randombytes(dest) -> None:
    """Fill the writable buffer ``dest`` in place with random data."""
    view = memoryview(dest)
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    with view.cast("B") as flat:
        flat[:] = os.urandom(flat.nbytes)