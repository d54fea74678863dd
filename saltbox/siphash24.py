"""SipHash-2-4 keyed short hash."""

from __future__ import annotations

__all__ = ["HASH_BYTES", "KEY_BYTES", "siphash24"]

HASH_BYTES = 8
KEY_BYTES = 16

_MASK = 0xFFFFFFFFFFFFFFFF


def _rotl64(x: int, b: int) -> int:
    return ((x << b) | (x >> (64 - b))) & _MASK


def _sipround(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK
    v1 = _rotl64(v1, 13) ^ v0
    v0 = _rotl64(v0, 32)
    v2 = (v2 + v3) & _MASK
    v3 = _rotl64(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK
    v3 = _rotl64(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK
    v1 = _rotl64(v1, 17) ^ v2
    v2 = _rotl64(v2, 32)
    return v0, v1, v2, v3


def siphash24(data, key) -> bytes:
    """Return the 8-byte SipHash-2-4 of ``data`` under the 16-byte ``key``."""
    key = bytes(key)
    if len(key) != KEY_BYTES:
        raise ValueError(f"key must be {KEY_BYTES} bytes, got {len(key)}")
    data = bytes(data)

    k0 = int.from_bytes(key[:8], "little")
    k1 = int.from_bytes(key[8:], "little")

    # "somepseudorandomlygeneratedbytes"
    v0 = 0x736F6D6570736575 ^ k0
    v1 = 0x646F72616E646F6D ^ k1
    v2 = 0x6C7967656E657261 ^ k0
    v3 = 0x7465646279746573 ^ k1

    full = len(data) - len(data) % 8
    for offset in range(0, full, 8):
        m = int.from_bytes(data[offset:offset + 8], "little")
        v3 ^= m
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
        v0 ^= m

    b = ((len(data) << 56) & _MASK) | int.from_bytes(data[full:], "little")

    v3 ^= b
    v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
    v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
    v0 ^= b
    v2 ^= 0xFF
    for _ in range(4):
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)

    return (v0 ^ v1 ^ v2 ^ v3).to_bytes(8, "little")