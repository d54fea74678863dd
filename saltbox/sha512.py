"""SHA-512 hashing with one-shot and incremental interfaces."""

from __future__ import annotations

import hashlib

__all__ = ["DIGEST_BYTES", "Sha512"]

DIGEST_BYTES = 64


def _write_digest(output, digest: bytes) -> None:
    if hasattr(output, "copy_from_slice"):
        if len(output) != DIGEST_BYTES:
            raise ValueError(
                f"output must be {DIGEST_BYTES} bytes, got {len(output)}"
            )
        output.copy_from_slice(digest)
        return
    view = memoryview(output).cast("B")
    if view.readonly:
        raise TypeError("output buffer is read-only")
    if view.nbytes != DIGEST_BYTES:
        raise ValueError(f"output must be {DIGEST_BYTES} bytes, got {view.nbytes}")
    view[:] = digest


class Sha512:
    """Incremental SHA-512 hasher. Once finalized it cannot be used again."""

    __slots__ = ("_hasher",)

    def __init__(self) -> None:
        self._hasher = hashlib.sha512()

    @classmethod
    def compute(cls, data) -> bytes:
        """Return the SHA-512 digest of ``data``."""
        hasher = cls()
        hasher.update(data)
        return hasher.finalize()

    @classmethod
    def compute_into_bytes(cls, output, data) -> None:
        """Write the SHA-512 digest of ``data`` into the 64-byte ``output``."""
        hasher = cls()
        hasher.update(data)
        hasher.finalize_into_bytes(output)

    @classmethod
    def compute_to_vec(cls, data) -> bytes:
        """Same as :meth:`compute`."""
        return cls.compute(data)

    def _live(self):
        if self._hasher is None:
            raise RuntimeError("hasher has already been finalized")
        return self._hasher

    def update(self, data) -> None:
        """Feed ``data`` into the hash state."""
        self._live().update(bytes(data))

    def finalize(self) -> bytes:
        """Return the final digest and close the hasher."""
        digest = self._live().digest()
        self._hasher = None
        return digest

    def finalize_into_bytes(self, output) -> None:
        """Write the final digest into the 64-byte ``output`` and close the hasher."""
        digest = self._live().digest()
        _write_digest(output, digest)
        self._hasher = None

    def finalize_to_vec(self) -> bytes:
        """Same as :meth:`finalize`."""
        return self.finalize()