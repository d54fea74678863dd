import hashlib

import pytest

from saltbox.rng import randombytes_buf
from saltbox.sha512 import Sha512
from saltbox.types import StackByteArray


def test_sha512_incremental_matches_reference():
    reference = hashlib.sha512()
    state = Sha512()
    for _ in range(10):
        chunk = randombytes_buf(64)
        reference.update(chunk)
        state.update(chunk)
    assert state.finalize_to_vec() == reference.digest()


def test_compute_matches_reference():
    data = b"bytes"
    assert Sha512.compute(data) == hashlib.sha512(data).digest()
    assert Sha512.compute_to_vec(data) == hashlib.sha512(data).digest()


def test_empty_input_digest_length():
    digest = Sha512.compute(b"")
    assert len(digest) == 64
    assert digest == hashlib.sha512(b"").digest()


def test_compute_into_bytearray():
    out = bytearray(64)
    Sha512.compute_into_bytes(out, b"some data")
    assert bytes(out) == hashlib.sha512(b"some data").digest()


def test_compute_into_stack_byte_array():
    out = StackByteArray(64)
    Sha512.compute_into_bytes(out, b"some data")
    assert bytes(out) == hashlib.sha512(b"some data").digest()


def test_update_accepts_stack_byte_array():
    arr = StackByteArray(4, b"abcd")
    state = Sha512()
    state.update(arr)
    assert state.finalize() == hashlib.sha512(b"abcd").digest()


def test_finalize_into_wrong_size_raises():
    state = Sha512()
    state.update(b"x")
    with pytest.raises(ValueError):
        state.finalize_into_bytes(bytearray(32))


def test_finalize_into_readonly_raises():
    with pytest.raises(TypeError):
        Sha512.compute_into_bytes(bytes(64), b"x")


def test_use_after_finalize_raises():
    state = Sha512()
    state.update(b"x")
    state.finalize()
    with pytest.raises(RuntimeError):
        state.update(b"y")
    with pytest.raises(RuntimeError):
        state.finalize()