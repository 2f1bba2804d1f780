# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Encodings that are parametrized by another encoding.

A compound encoding only knows the shape it frames (a count-prefixed collection, for instance) and receives the
per-element work as a callable:

- an `Encoder[T]` is called as `encoder(serializer, value)` and writes one `T`
- a `Decoder[T]` is called as `decoder(deserializer)` and returns one `T`

Bound methods like `Serializer.write_pod` or lambdas around `read_uint16` both fit, so nesting is just passing a
compound encoder as the element encoder of another one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from binser.deserializer import Deserializer
    from binser.serializer import Serializer

T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class Decoder(Protocol[T_co]):
    def __call__(self, deserializer: Deserializer, /) -> T_co:
        ...


class Encoder(Protocol[T_contra]):
    def __call__(self, serializer: Serializer, value: T_contra, /) -> None:
        ...
