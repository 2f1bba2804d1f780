import pytest

from binser import OutOfRangeError, Reader, TooLongError, Writer
from binser.compound_encoding.collection import decode_collection, encode_collection
from binser.conf import CodecSettings


def _write_u8(serializer, value):
    serializer.write_uint8(value)


def _read_u8(deserializer):
    return deserializer.read_uint8()


@pytest.mark.parametrize('values, expected', [
    ([], '00'),
    ([7], '0107'),
    (list(range(128)), '8001' + bytes(range(128)).hex()),
])
def test_count_prefix(values, expected):
    writer = Writer()
    encode_collection(writer, values, _write_u8)
    assert writer.to_hex() == expected
    assert decode_collection(Reader(writer), _read_u8) == values


def test_builder():
    assert decode_collection(Reader('020102'), _read_u8, tuple) == (1, 2)
    assert decode_collection(Reader('03010101'), _read_u8, set) == {1}


def test_explicit_count_bits():
    writer = Writer()
    with pytest.raises(OutOfRangeError):
        encode_collection(writer, list(range(256)), _write_u8, count_bits=8)
    assert len(writer) == 0

    with pytest.raises(OutOfRangeError):
        decode_collection(Reader('8002'), _read_u8, count_bits=8)


def test_max_collection_length():
    settings = CodecSettings(MAX_COLLECTION_LENGTH=2)
    assert decode_collection(Reader('020102', settings=settings), _read_u8) == [1, 2]
    with pytest.raises(TooLongError):
        decode_collection(Reader('03010203', settings=settings), _read_u8)


def test_huge_count_fails_before_allocating():
    reader = Reader('ffffffffffffffff7f', settings=CodecSettings(MAX_COLLECTION_LENGTH=1000))
    with pytest.raises(TooLongError):
        reader.read_varint_list()
