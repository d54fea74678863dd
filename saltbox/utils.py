"""Small byte and integer helpers."""

from __future__ import annotations

__all__ = [
    "increment_bytes",
    "sodium_increment",
    "xor_buf",
    "load_u64_le",
    "load_u32_le",
    "rotr64",
    "pad16",
]

_U64_MASK = 0xFFFFFFFFFFFFFFFF


def increment_bytes(data) -> None:
    """Add one, in place, to ``data`` read as a little-endian integer, wrapping on overflow.

    Every byte is visited whatever the carry, so the time taken does not
    depend on the value.
    """
    carry = 1
    for pos, byte in enumerate(data):
        carry += byte
        data[pos] = carry & 0xFF
        carry >>= 8


def sodium_increment(data) -> None:
    """Same as :func:`increment_bytes`."""
    increment_bytes(data)


def xor_buf(out, in_) -> None:
    """XOR ``in_`` into ``out`` in place, over the shorter of the two lengths."""
    for pos, (a, b) in enumerate(zip(bytes(out), bytes(in_))):
        out[pos] = a ^ b


def _load_le(data, width: int) -> int:
    chunk = bytes(data[:width])
    if len(chunk) < width:
        raise ValueError(f"need at least {width} bytes, got {len(chunk)}")
    return int.from_bytes(chunk, "little")


def load_u64_le(data) -> int:
    """Read an unsigned 64-bit little-endian integer from the first 8 bytes."""
    return _load_le(data, 8)


def load_u32_le(data) -> int:
    """Read an unsigned 32-bit little-endian integer from the first 4 bytes."""
    return _load_le(data, 4)


def rotr64(x: int, b: int) -> int:
    """Rotate the 64-bit value ``x`` right by ``b`` bits."""
    x &= _U64_MASK
    b %= 64
    return ((x >> b) | (x << (64 - b))) & _U64_MASK


def pad16(n: int) -> int:
    """Return how many bytes are needed to pad ``n`` up to a multiple of 16."""
    return (0x10 - (n % 16)) & 0xF