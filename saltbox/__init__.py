"""Pure Python cryptographic primitives and byte buffers that are wiped when discarded."""

__version__ = "0.1.0"

__all__ = [
    "heap",
    "poly1305",
    "protected",
    "rng",
    "scalarmult_curve25519",
    "sha512",
    "siphash24",
    "types",
    "u130",
    "utils",
]