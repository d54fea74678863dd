"""Poly1305 one-time authenticator."""

from __future__ import annotations

__all__ = ["BLOCK_SIZE", "KEY_BYTES", "Poly1305"]

BLOCK_SIZE = 16
KEY_BYTES = 32

_P = (1 << 130) - 5
_R_CLAMP = 0x0FFFFFFC0FFFFFFC0FFFFFFC0FFFFFFF
_MASK128 = (1 << 128) - 1
_HIBIT = 1 << 128


class Poly1305:
    """Incremental Poly1305 MAC computed under a single-use 32-byte key."""

    __slots__ = ("_r", "_h", "_pad", "_buffer")

    def __init__(self, key) -> None:
        key = bytes(key)
        if len(key) != KEY_BYTES:
            raise ValueError(f"key must be {KEY_BYTES} bytes, got {len(key)}")
        self._r = int.from_bytes(key[:16], "little") & _R_CLAMP
        self._h = 0
        self._pad = int.from_bytes(key[16:], "little")
        self._buffer = bytearray()

    def _blocks(self, data: bytes, partial: bool) -> None:
        hibit = 0 if partial else _HIBIT
        h, r = self._h, self._r
        for offset in range(0, len(data), BLOCK_SIZE):
            n = int.from_bytes(data[offset:offset + BLOCK_SIZE], "little") | hibit
            h = ((h + n) * r) % _P
        self._h = h

    def update(self, data) -> None:
        """Feed ``data`` into the authenticator."""
        m = bytes(data)
        if self._buffer:
            take = min(BLOCK_SIZE - len(self._buffer), len(m))
            self._buffer += m[:take]
            if len(self._buffer) < BLOCK_SIZE:
                return
            self._blocks(bytes(self._buffer), partial=False)
            self._buffer.clear()
            m = m[take:]

        full = len(m) - len(m) % BLOCK_SIZE
        self._blocks(m[:full], partial=False)
        self._buffer += m[full:]

    def finalize(self, output) -> None:
        """Write the 16-byte tag into the first bytes of ``output`` and wipe the state."""
        view = memoryview(output).cast("B")
        if view.readonly:
            raise TypeError("output buffer is read-only")
        if view.nbytes < BLOCK_SIZE:
            raise ValueError(
                f"output must hold at least {BLOCK_SIZE} bytes, got {view.nbytes}"
            )

        if self._buffer:
            self._buffer.append(1)
            self._buffer += bytes(-len(self._buffer) % BLOCK_SIZE)
            self._blocks(bytes(self._buffer), partial=True)

        tag = (self._h % _P + self._pad) & _MASK128
        view[:BLOCK_SIZE] = tag.to_bytes(BLOCK_SIZE, "little")
        self._zeroize()

    def finalize_to_array(self) -> bytes:
        """Return the 16-byte tag and wipe the state."""
        mac = bytearray(BLOCK_SIZE)
        self.finalize(mac)
        return bytes(mac)

    def _zeroize(self) -> None:
        self._r = 0
        self._h = 0
        self._pad = 0
        self._buffer[:] = bytes(len(self._buffer))
        self._buffer.clear()