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
A collection is basically any value that has a known size and is iterable.

Layout: [N: varint][value_0]...[value_N-1]

The width of the count varint comes from `COLLECTION_COUNT_BITS` in the settings unless given explicitly.

>>> from binser import Reader, Writer
>>> w = Writer()
>>> encode_collection(w, [1, 2, 300], lambda se, v: se.write_uint16(v))
>>> w.to_hex()
'03010002002c01'

Breakdown of the result:

    03: 3 as a varint, the total length
    0100: 1 as a little-endian uint16
    0200: 2 as a little-endian uint16
    2c01: 300 as a little-endian uint16

When decoding, the builder can be any compatible collection, it only matters that the collection can be initialized
with an `Iterable[T]`.

>>> r = Reader('03010002002c01')
>>> decode_collection(r, lambda de: de.read_uint16(), tuple)
(1, 2, 300)
>>> r.finalize()

Nested collections are just a collection whose elements are collections:

>>> from functools import partial
>>> inner = partial(encode_collection, encoder=lambda se, v: se.write_uint8(v))
>>> w = Writer()
>>> encode_collection(w, [[1, 2], [3]], inner)
>>> w.to_hex()
'020201020103'
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING, Callable, Optional, TypeVar

from binser.exceptions import TooLongError

from . import Decoder, Encoder

if TYPE_CHECKING:
    from binser.deserializer import Deserializer
    from binser.serializer import Serializer

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(
    serializer: Serializer,
    values: Collection[T],
    encoder: Encoder[T],
    *,
    count_bits: Optional[int] = None,
) -> None:
    if count_bits is None:
        count_bits = serializer.settings.COLLECTION_COUNT_BITS
    serializer.write_varint(len(values), bits=count_bits)
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R] = list,  # type: ignore[assignment]
    *,
    count_bits: Optional[int] = None,
) -> R:
    settings = deserializer.settings
    if count_bits is None:
        count_bits = settings.COLLECTION_COUNT_BITS
    length = deserializer.read_varint(bits=count_bits)
    if settings.MAX_COLLECTION_LENGTH is not None and length > settings.MAX_COLLECTION_LENGTH:
        raise TooLongError(f'collection length {length} exceeds maximum {settings.MAX_COLLECTION_LENGTH}')
    return builder(decoder(deserializer) for _ in range(length))
