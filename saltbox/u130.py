"""130-bit unsigned integers held as five 26-bit limbs, arithmetic modulo 2**130."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import load_u32_le

__all__ = ["U130", "U130Unreduced"]

_LIMBS = 5
_LIMB_BITS = 26
_U32_MAX = 0xFFFFFFFF
_MASK130 = (1 << 130) - 1
_LIMB_MASK = (1 << _LIMB_BITS) - 1


def _product(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[int, ...]:
    # Grid multiplication; terms of weight 2**130 and above are dropped.
    return tuple(
        sum(a[i] * b[k - i] for i in range(k + 1)) for k in range(_LIMBS)
    )


def _le_words(data) -> list[int]:
    raw = bytes(data)
    if len(raw) < 16:
        raise ValueError(f"need at least 16 bytes, got {len(raw)}")
    return [load_u32_le(raw[pos:pos + 4]) for pos in range(0, 16, 4)]


@dataclass(frozen=True)
class U130:
    """A reduced value in the range [0, 2**130)."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MASK130:
            raise ValueError("value out of range for a 130-bit integer")

    @classmethod
    def from_u32_digits(cls, digits) -> U130:
        """Build from five 32-bit digits, most significant first, keeping the low 130 bits."""
        digits = list(digits)
        if len(digits) != _LIMBS:
            raise ValueError(f"expected {_LIMBS} digits, got {len(digits)}")
        value = 0
        for digit in digits:
            if not 0 <= digit <= _U32_MAX:
                raise ValueError(f"digit {digit} does not fit in 32 bits")
            value = (value << 32) | digit
        return cls(value & _MASK130)

    @classmethod
    def from_bytes(cls, data) -> U130:
        """Build from 16 bytes read as four little-endian words, most significant first."""
        return cls.from_u32_digits([0, *_le_words(data)])

    def to_u32_digits(self) -> list[int]:
        """Return five 32-bit digits, most significant first."""
        return [(self.value >> (32 * pos)) & _U32_MAX for pos in reversed(range(_LIMBS))]

    @property
    def limbs(self) -> tuple[int, ...]:
        """The five 26-bit limbs, least significant first."""
        return tuple(
            (self.value >> (_LIMB_BITS * pos)) & _LIMB_MASK for pos in range(_LIMBS)
        )

    def __mul__(self, other):
        if isinstance(other, (U130, U130Unreduced)):
            return U130Unreduced(_product(self.limbs, other.limbs))
        return NotImplemented


@dataclass(frozen=True)
class U130Unreduced:
    """A product or raw load whose limbs may exceed 26 bits."""

    limbs: tuple[int, ...] = (0,) * _LIMBS

    def __post_init__(self) -> None:
        if len(self.limbs) != _LIMBS:
            raise ValueError(f"expected {_LIMBS} limbs, got {len(self.limbs)}")
        if any(limb < 0 for limb in self.limbs):
            raise ValueError("limbs must not be negative")

    @classmethod
    def from_bytes(cls, data, hibit) -> U130Unreduced:
        """Load 16 bytes as four little-endian words into the low limbs, ``hibit`` on top."""
        w0, w1, w2, w3 = _le_words(data)
        return cls((w3, w2, w1, w0, hibit))

    @property
    def value(self) -> int:
        """The integer the limbs add up to."""
        return sum(limb << (_LIMB_BITS * pos) for pos, limb in enumerate(self.limbs))

    def reduce(self) -> U130:
        """Carry the limbs and keep the low 130 bits."""
        return U130(self.value & _MASK130)

    def __mul__(self, other):
        if isinstance(other, (U130, U130Unreduced)):
            return U130Unreduced(_product(self.limbs, other.limbs))
        return NotImplemented