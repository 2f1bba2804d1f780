#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

r"""
This module implements varints for unsigned integers of a fixed bit width.

The format is the common LEB128 (Little Endian Base 128) split of each byte into 1 bit for continuation and 7 bits for
data, least significant group first. It is self-terminating and byte-aligned, values below 0x80 take a single byte.

References:
- https://en.wikipedia.org/wiki/LEB128

Unlike plain LEB128 each value is bound to a bit width (8, 16, 32, 64, 128 or 256), encoding rejects values that do
not fit the width and decoding rejects sequences whose value does not fit it.

>>> encode_varint(0, bits=64).hex()
'00'
>>> encode_varint(127, bits=8).hex()
'7f'
>>> encode_varint(300, bits=16).hex()
'ac02'
>>> encode_varint(624485, bits=32).hex()
'e58e26'

>>> decode_varint(bytes.fromhex('e58e26'), bits=32)
(624485, 3)
>>> decode_varint(bytes.fromhex('ffac02ff'), 1, bits=16)
(300, 2)

>>> try:
...     decode_varint(bytes.fromhex('ac02'), bits=8)
... except OutOfRangeError as e:
...     print(e)
value is out of range for type
>>> try:
...     decode_varint(bytes.fromhex('ac'), bits=16)
... except OutOfDataError as e:
...     print(e)
could not decode varint

A sequence never takes more than `max_varint_size(bits)` bytes, decoding stops there instead of reading on:

>>> try:
...     decode_varint(b'\xff' * 100 + b'\x01', bits=8)
... except OutOfRangeError as e:
...     print(e)
cannot decode more than 3 bytes for a 8-bit varint
"""

from binser.consts import SUPPORTED_BITS
from binser.exceptions import InvalidArgumentError, OutOfDataError, OutOfRangeError
from binser.types import Buffer


def _check_bits(bits: int) -> None:
    if bits not in SUPPORTED_BITS:
        raise InvalidArgumentError(f'unsupported varint width: {bits}')


def max_varint_size(bits: int) -> int:
    """Upper bound of the encoded length of a value with the given bit width."""
    return -(-bits // 7) + 1


def varint_size(value: int) -> int:
    """Number of bytes `value` takes when encoded as a varint."""
    return max(1, -(-value.bit_length() // 7))


def encode_varint(value: int, *, bits: int) -> bytes:
    """ Encodes an unsigned integer that must fit `bits`.

    This module's docstring has more details and examples.
    """
    _check_bits(bits)
    if value < 0 or value >> bits:
        raise OutOfRangeError(f'value is out of range for a {bits}-bit varint')
    max_length = max_varint_size(bits)
    output = bytearray()
    while value >= 0x80:
        if len(output) == max_length - 1:
            raise OutOfRangeError('value is out of range for type')
        output.append((value & 0x7f) | 0x80)
        value >>= 7
    output.append(value)
    return bytes(output)


def decode_varint(data: Buffer, offset: int = 0, *, bits: int) -> tuple[int, int]:
    """ Decodes a varint starting at `offset`, returns the value and how many bytes were consumed.

    This module's docstring has more details and examples.
    """
    _check_bits(bits)
    if offset < 0 or offset > len(data):
        raise OutOfDataError('offset exceeds size of buffer')
    result = 0
    shift = 0
    counter = offset
    max_length = max_varint_size(bits)
    while True:
        if counter >= len(data):
            raise OutOfDataError('could not decode varint')
        byte = data[counter]
        counter += 1
        result += (byte & 0x7f) << shift
        shift += 7
        if byte < 0x80:
            break
        if counter - offset >= max_length:
            raise OutOfRangeError(f'cannot decode more than {max_length} bytes for a {bits}-bit varint')
    if result >> bits:
        raise OutOfRangeError('value is out of range for type')
    return result, counter - offset
