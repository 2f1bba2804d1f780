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

"""
This module implements packing of unsigned integers with a fixed size, the byte-length and endianness are parametrized.

The packed length is always the full byte-length of the type, regardless of the magnitude of the value. The default
byte order is little-endian, `big_endian=True` reverses it. 128 and 256-bit values use the same contiguous layout, so
the low 64-bit half comes first in little-endian order.

>>> pack(1, 2).hex()
'0100'
>>> pack(1, 2, big_endian=True).hex()
'0001'
>>> pack(0xdeadbeef, UINT32_SIZE).hex()
'efbeadde'
>>> pack(1 << 64, UINT128_SIZE).hex()
'00000000000000000100000000000000'

>>> unpack(bytes.fromhex('efbeadde'), UINT32_SIZE) == 0xdeadbeef
True
>>> unpack(bytes.fromhex('ff0001'), UINT16_SIZE, offset=1, big_endian=True)
1
>>> try:
...     unpack(b'\\x01', UINT16_SIZE)
... except OutOfDataError as e:
...     print(e)
not enough data to complete request
"""

from binser.consts import UINT8_SIZE, UINT16_SIZE, UINT32_SIZE, UINT64_SIZE, UINT128_SIZE, UINT256_SIZE
from binser.exceptions import OutOfDataError, OutOfRangeError
from binser.types import Buffer

__all__ = [
    'UINT8_SIZE',
    'UINT16_SIZE',
    'UINT32_SIZE',
    'UINT64_SIZE',
    'UINT128_SIZE',
    'UINT256_SIZE',
    'max_uint',
    'pack',
    'unpack',
]


def max_uint(bits: int) -> int:
    """Largest unsigned value representable with the given bit width."""
    return (1 << bits) - 1


def pack(value: int, length: int, *, big_endian: bool = False) -> bytes:
    """ Pack an unsigned int into exactly `length` bytes.

    This modules's docstring has more details and examples.
    """
    try:
        return int.to_bytes(value, length, byteorder='big' if big_endian else 'little', signed=False)
    except OverflowError:
        raise OutOfRangeError(f'value is out of range for a {length}-byte unsigned int')


def unpack(data: Buffer, length: int, offset: int = 0, *, big_endian: bool = False) -> int:
    """ Unpack an unsigned int of `length` bytes starting at `offset`.

    This modules's docstring has more details and examples.
    """
    if offset < 0 or offset + length > len(data):
        raise OutOfDataError('not enough data to complete request')
    return int.from_bytes(data[offset:offset + length], byteorder='big' if big_endian else 'little', signed=False)
