import os

import pytest

from saltbox.utils import (
    increment_bytes,
    load_u32_le,
    load_u64_le,
    pad16,
    rotr64,
    sodium_increment,
    xor_buf,
)


def test_increment_bytes():
    b = bytearray([0])
    increment_bytes(b)
    assert b == bytearray([1])
    increment_bytes(b)
    assert b == bytearray([2])

    b = bytearray([0xFF])
    increment_bytes(b)
    assert b == bytearray([0])
    increment_bytes(b)
    assert b == bytearray([1])

    b = bytearray([0xFF, 0])
    increment_bytes(b)
    assert b == bytearray([0, 1])
    increment_bytes(b)
    assert b == bytearray([1, 1])
    increment_bytes(b)
    assert b == bytearray([2, 1])


def test_xor_buf():
    a = bytearray([0])
    xor_buf(a, bytes([0]))
    assert a == bytearray([0])

    a = bytearray([1])
    xor_buf(a, bytes([0]))
    assert a == bytearray([1])

    a = bytearray([1, 1, 1])
    xor_buf(a, bytes([0]))
    assert a == bytearray([1, 1, 1])

    a = bytearray([1, 1, 1])
    xor_buf(a, bytes([0, 1, 1]))
    assert a == bytearray([1, 0, 0])


def test_xor_buf_longer_input_is_truncated():
    a = bytearray([1])
    xor_buf(a, bytes([1, 1, 1]))
    assert a == bytearray([0])


@pytest.mark.parametrize("length", [0, 1, 7, 8, 33, 999])
def test_sodium_increment_matches_integer_increment(length):
    data = bytearray(os.urandom(length))
    before = int.from_bytes(data, "little")
    sodium_increment(data)
    assert len(data) == length
    if length:
        assert int.from_bytes(data, "little") == (before + 1) % (1 << (8 * length))


def test_pad16():
    assert pad16(0) == 0
    assert pad16(1) == 15
    assert pad16(2) == 14
    assert pad16(15) == 1
    assert pad16(16) == 0
    assert pad16(17) == 15
    assert pad16(32) == 0
    assert pad16(33) == 15


def test_load_u64_le():
    assert load_u64_le(bytes(range(8))) == 0x0706050403020100
    assert load_u64_le(b"\xff" * 8) == 0xFFFFFFFFFFFFFFFF


def test_load_u64_le_ignores_trailing_bytes():
    assert load_u64_le(bytes(range(10))) == 0x0706050403020100


def test_load_u64_le_too_short():
    with pytest.raises(ValueError):
        load_u64_le(b"\x00" * 7)


def test_load_u32_le():
    assert load_u32_le(bytes(range(4))) == 0x03020100
    assert load_u32_le(b"\x01\x00\x00\x00\xff") == 1


def test_load_u32_le_too_short():
    with pytest.raises(ValueError):
        load_u32_le(b"\x00\x00\x00")


def test_rotr64():
    assert rotr64(1, 1) == 1 << 63
    assert rotr64(0x0000000000000100, 8) == 1
    assert rotr64(0xFFFFFFFFFFFFFFFF, 17) == 0xFFFFFFFFFFFFFFFF


def test_rotr64_full_rotation_is_identity():
    value = load_u64_le(os.urandom(8))
    assert rotr64(rotr64(value, 13), 51) == value
    assert rotr64(value, 0) == value