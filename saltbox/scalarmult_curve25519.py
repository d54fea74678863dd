"""X25519 scalar multiplication on the Montgomery form of Curve25519."""

from __future__ import annotations

__all__ = [
    "BYTES",
    "SCALARBYTES",
    "clamp",
    "crypto_scalarmult_curve25519_base",
    "crypto_scalarmult_curve25519",
]

BYTES = 32
SCALARBYTES = 32

_P = 2**255 - 19
_L = 2**252 + 27742317777372353535851937790883648493
_A24 = 121665
_BASE_U = 9
_U_MASK = (1 << 255) - 1


def _checked(value, name: str) -> bytes:
    data = bytes(value)
    if len(data) != 32:
        raise ValueError(f"{name} must be 32 bytes, got {len(data)}")
    return data


def clamp(n) -> bytes:
    """Return a copy of the 32-byte scalar ``n`` with the X25519 bits cleared and set."""
    s = bytearray(_checked(n, "scalar"))
    s[0] &= 248
    s[31] &= 127
    s[31] |= 64
    return bytes(s)


def _scalar(n) -> int:
    return int.from_bytes(clamp(n), "little") % _L


def _ladder(k: int, u: int) -> int:
    x1 = u
    x2, z2 = 1, 0
    x3, z3 = u, 1
    swap = 0
    for t in reversed(range(255)):
        bit = (k >> t) & 1
        swap ^= bit
        if swap:
            x2, x3 = x3, x2
            z2, z3 = z3, z2
        swap = bit

        a = x2 + z2
        aa = a * a % _P
        b = x2 - z2
        bb = b * b % _P
        e = aa - bb
        c = x3 + z3
        d = x3 - z3
        da = d * a % _P
        cb = c * b % _P
        x3 = (da + cb) ** 2 % _P
        z3 = x1 * (da - cb) ** 2 % _P
        x2 = aa * bb % _P
        z2 = e * (aa + _A24 * e) % _P
    if swap:
        x2, z2 = x3, z3
    return x2 * pow(z2, _P - 2, _P) % _P


def crypto_scalarmult_curve25519_base(n) -> bytes:
    """Return the public point for the secret scalar ``n``."""
    return _ladder(_scalar(n), _BASE_U).to_bytes(BYTES, "little")


def crypto_scalarmult_curve25519(n, p) -> bytes:
    """Return the product of the secret scalar ``n`` and the point ``p``."""
    u = (int.from_bytes(_checked(p, "point"), "little") & _U_MASK) % _P
    return _ladder(_scalar(n), u).to_bytes(BYTES, "little")