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
This module implements encoding a boolean value using 1 byte.

The format is trivial:

- `False` maps to `b'\x00'`
- `True` maps to `b'\x01'`
- when decoding only `b'\x01'` is `True`, any other byte value decodes to `False`

>>> from binser import Reader, Writer
>>> w = Writer()
>>> encode_bool(w, False)
>>> encode_bool(w, True)
>>> w.to_bytes()
b'\x00\x01'

>>> r = Reader(b'\x00\x01\x02')
>>> decode_bool(r)
False
>>> decode_bool(r, peek=True)
True
>>> decode_bool(r)
True
>>> decode_bool(r)
False
>>> r.is_empty()
True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from binser.deserializer import Deserializer
    from binser.serializer import Serializer


def encode_bool(serializer: Serializer, value: bool) -> None:
    """ Encodes a boolean value using 1 byte.
    """
    serializer.write_byte(0x01 if value else 0x00)


def decode_bool(deserializer: Deserializer, *, peek: bool = False) -> bool:
    """ Decodes a boolean value from 1 byte.
    """
    return deserializer.read_uint8(peek=peek) == 1
