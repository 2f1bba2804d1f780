import unittest

import pytest

from binser import (
    BadHexError,
    InvalidArgumentError,
    OutOfRangeError,
    Reader,
    Serializer,
    SerializablePod,
    Writer,
    pod_type,
)
from binser.conf import CodecSettings


class Hash(SerializablePod):
    SIZE = 32


HASH_HEX = '974506601a60dc465e6e9acddb563889e63471849ec4198656550354b8541fcb'


class WriterTestCase(unittest.TestCase):
    def setUp(self):
        super().setUp()
        self.writer = Writer()

    def test_starts_empty(self):
        self.assertEqual(self.writer.size(), 0)
        self.assertEqual(len(self.writer), 0)
        self.assertEqual(self.writer.to_bytes(), b'')
        self.assertEqual(self.writer.to_hex(), '')

    def test_boolean(self):
        self.writer.write_bool(True)
        self.writer.write_bool(False)
        self.assertEqual(self.writer.to_bytes(), b'\x01\x00')

    def test_fixed_width_ints(self):
        self.writer.write_uint8(0xab)
        self.writer.write_uint16(0x0102)
        self.writer.write_uint32(0x01020304, big_endian=True)
        self.writer.write_uint64(1)
        self.assertEqual(self.writer.to_hex(), 'ab' + '0201' + '01020304' + '0100000000000000')

    def test_wide_ints_take_full_width(self):
        self.writer.write_uint128(1)
        self.writer.write_uint256(1, big_endian=True)
        self.assertEqual(self.writer.size(), 16 + 32)
        self.assertEqual(self.writer[0], 1)
        self.assertEqual(self.writer[16 + 31], 1)

    def test_int_out_of_range(self):
        with self.assertRaises(OutOfRangeError):
            self.writer.write_uint8(256)
        with self.assertRaises(OutOfRangeError):
            self.writer.write_uint16(-1)
        self.assertEqual(self.writer.size(), 0)

    def test_raw_bytes(self):
        self.writer.write_bytes(b'abc')
        self.writer.write_bytes(bytearray(b'def'), 2)
        self.writer.write_bytes(memoryview(b'xyz'))
        self.assertEqual(self.writer.to_bytes(), b'abcdexyz')

    def test_raw_bytes_from_none(self):
        self.writer.write_bytes(None)
        self.writer.write_bytes(None, 0)
        with self.assertRaises(InvalidArgumentError):
            self.writer.write_bytes(None, 4)
        with self.assertRaises(InvalidArgumentError):
            self.writer.write_bytes(b'ab', 3)
        self.assertEqual(self.writer.size(), 0)

    def test_hex(self):
        self.writer.write_hex('00ff')
        self.assertEqual(self.writer.to_bytes(), b'\x00\xff')
        with self.assertRaises(BadHexError):
            self.writer.write_hex('abc')
        with self.assertRaises(BadHexError):
            self.writer.write_hex('zz')

    def test_varint(self):
        self.writer.write_varint(300)
        self.writer.write_varint(5, bits=8)
        self.assertEqual(self.writer.to_hex(), 'ac0205')
        with self.assertRaises(OutOfRangeError):
            self.writer.write_varint(256, bits=8)

    def test_varint_list(self):
        self.writer.write_varint_list([1, 300, 0])
        self.assertEqual(self.writer.to_hex(), '03' + '01' + 'ac02' + '00')

    def test_pod(self):
        value = Hash(HASH_HEX)
        self.writer.write_pod(value)
        self.assertEqual(self.writer.to_hex(), HASH_HEX)

    def test_reset(self):
        self.writer.write_uint32(7)
        self.writer.reset()
        self.assertEqual(self.writer.size(), 0)
        self.writer.write_uint8(1)
        self.assertEqual(self.writer.to_bytes(), b'\x01')

    def test_index_access(self):
        self.writer.write_hex('000102')
        self.assertEqual(self.writer[2], 2)
        self.writer[2] = 0xff
        self.assertEqual(self.writer.to_hex(), '0001ff')
        with self.assertRaises(IndexError):
            self.writer[3]
        with self.assertRaises(OutOfRangeError):
            self.writer[0] = 256

    def test_snapshot_is_a_copy(self):
        self.writer.write_uint8(1)
        snapshot = self.writer.to_bytes()
        self.writer.write_uint8(2)
        self.assertEqual(snapshot, b'\x01')

    def test_construct_from_data(self):
        self.assertEqual(Writer(b'\x01\x02').to_hex(), '0102')
        self.assertEqual(Writer([1, 2, 3]).size(), 3)
        self.assertEqual(Writer([1, 2]), Writer(b'\x01\x02'))
        self.assertEqual(str(Writer(b'\xff')), 'ff')

    def test_build_bytes_serializer(self):
        serializer = Serializer.build_bytes_serializer()
        self.assertIsInstance(serializer, Writer)
        serializer.write_bool(True)
        self.assertEqual(serializer.cur_pos(), 1)


@pytest.mark.parametrize('values, expected_hex', [
    ([], '00'),
    (['aa'], '01aa'),
    (['aa', 'bb'], '02aabb'),
])
def test_pod_list_framing(values, expected_hex):
    Byte = pod_type(1)
    writer = Writer()
    writer.write_pod_list([Byte(v) for v in values])
    assert writer.to_hex() == expected_hex


def test_pod_nested_framing():
    Byte = pod_type(1)
    writer = Writer()
    writer.write_pod_nested([[Byte('aa'), Byte('bb')], [Byte('cc')]])
    assert writer.to_hex() == '02' + '02aabb' + '01cc'
    assert Reader(writer).read_pod_nested(Byte) == [[Byte('aa'), Byte('bb')], [Byte('cc')]]


def test_count_width_from_settings():
    writer = Writer(settings=CodecSettings(COLLECTION_COUNT_BITS=8, DEFAULT_VARINT_BITS=16))
    with pytest.raises(OutOfRangeError):
        writer.write_pod_list([pod_type(1)()] * 256)
    with pytest.raises(OutOfRangeError):
        writer.write_varint(1 << 16)
