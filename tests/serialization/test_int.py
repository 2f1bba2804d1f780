import struct

import pytest

from binser.encoding.int import (
    UINT8_SIZE,
    UINT16_SIZE,
    UINT32_SIZE,
    UINT64_SIZE,
    UINT128_SIZE,
    UINT256_SIZE,
    max_uint,
    pack,
    unpack,
)
from binser.exceptions import OutOfDataError, OutOfRangeError

ALL_SIZES = [UINT8_SIZE, UINT16_SIZE, UINT32_SIZE, UINT64_SIZE, UINT128_SIZE, UINT256_SIZE]


@pytest.mark.parametrize('length', ALL_SIZES)
@pytest.mark.parametrize('big_endian', [False, True])
def test_pack_round_trip(length, big_endian):
    for value in [0, 1, 0x7f, max_uint(8 * length) // 2, max_uint(8 * length)]:
        packed = pack(value, length, big_endian=big_endian)
        assert len(packed) == length
        assert unpack(packed, length, big_endian=big_endian) == value


@pytest.mark.parametrize('fmt, length', [('<H', 2), ('<I', 4), ('<Q', 8), ('>H', 2), ('>I', 4), ('>Q', 8)])
def test_pack_matches_struct(fmt, length):
    value = 0x0102030405060708 & max_uint(8 * length)
    big_endian = fmt.startswith('>')
    assert pack(value, length, big_endian=big_endian) == struct.pack(fmt, value)
    assert unpack(struct.pack(fmt, value), length, big_endian=big_endian) == value


def test_big_endian_is_reversed():
    value = 0x000102030405060708090a0b0c0d0e0f
    little = pack(value, UINT128_SIZE)
    big = pack(value, UINT128_SIZE, big_endian=True)
    assert big == little[::-1]
    assert big.hex() == '000102030405060708090a0b0c0d0e0f'


def test_wide_ints_put_low_half_first():
    value = (0x1111111111111111 << 192) | 0x2222222222222222
    packed = pack(value, UINT256_SIZE)
    assert packed[:8] == struct.pack('<Q', 0x2222222222222222)
    assert packed[24:] == struct.pack('<Q', 0x1111111111111111)


def test_pack_out_of_range():
    with pytest.raises(OutOfRangeError):
        pack(256, UINT8_SIZE)
    with pytest.raises(OutOfRangeError):
        pack(-1, UINT32_SIZE)


def test_unpack_offset_and_bounds():
    data = bytes.fromhex('ff01000000')
    assert unpack(data, UINT32_SIZE, 1) == 1
    with pytest.raises(OutOfDataError):
        unpack(data, UINT32_SIZE, 2)
    with pytest.raises(OutOfDataError):
        unpack(b'', UINT8_SIZE)
