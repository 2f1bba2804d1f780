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

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import TYPE_CHECKING, Optional, final

from .consts import UINT8_SIZE, UINT16_SIZE, UINT32_SIZE, UINT64_SIZE, UINT128_SIZE, UINT256_SIZE
from .exceptions import InvalidArgumentError
from .types import Buffer

if TYPE_CHECKING:
    from .conf.settings import CodecSettings
    from .serializable import Serializable
    from .writer import Writer


class Serializer(ABC):
    """Append-only byte sink with typed write operations.

    Implementors only provide the primitives (`cur_pos`, `write_byte` and `_write_bytes`), every typed operation is
    built on top of them. The matching `Deserializer` reads the values back when driven with the same sequence of
    typed calls.
    """

    @property
    def settings(self) -> CodecSettings:
        from .conf import get_global_settings
        return get_global_settings()

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        """Write a single byte."""
        raise NotImplementedError

    @abstractmethod
    def _write_bytes(self, data: Buffer) -> None:
        # XXX: it is recommended that implementors of Serializer specialize this implementation
        for byte in bytes(data):
            self.write_byte(byte)

    @final
    def write_bytes(self, data: Optional[Buffer], length: Optional[int] = None) -> None:
        """Write a byte sequence verbatim.

        When `length` is given only the first `length` bytes are written. Writing from `None` is only accepted for a
        zero length.
        """
        if data is None:
            if length:
                raise InvalidArgumentError('cannot write from None with a nonzero length')
            return
        view = memoryview(data)
        if length is not None:
            if length < 0 or length > len(view):
                raise InvalidArgumentError(f'invalid length {length} for data of {len(view)} bytes')
            view = view[:length]
        self._write_bytes(view)

    def write_bool(self, value: bool) -> None:
        from .encoding.bool import encode_bool
        encode_bool(self, value)

    def write_uint(self, value: int, length: int, *, big_endian: bool = False) -> None:
        """Write an unsigned int using exactly `length` bytes."""
        from .encoding.int import pack
        self._write_bytes(pack(value, length, big_endian=big_endian))

    def write_uint8(self, value: int) -> None:
        self.write_uint(value, UINT8_SIZE)

    def write_uint16(self, value: int, *, big_endian: bool = False) -> None:
        self.write_uint(value, UINT16_SIZE, big_endian=big_endian)

    def write_uint32(self, value: int, *, big_endian: bool = False) -> None:
        self.write_uint(value, UINT32_SIZE, big_endian=big_endian)

    def write_uint64(self, value: int, *, big_endian: bool = False) -> None:
        self.write_uint(value, UINT64_SIZE, big_endian=big_endian)

    def write_uint128(self, value: int, *, big_endian: bool = False) -> None:
        self.write_uint(value, UINT128_SIZE, big_endian=big_endian)

    def write_uint256(self, value: int, *, big_endian: bool = False) -> None:
        self.write_uint(value, UINT256_SIZE, big_endian=big_endian)

    def write_hex(self, value: str) -> None:
        """Decode hex text and write the resulting bytes, malformed text raises `BadHexError`."""
        from .encoding.hex import from_hex
        self._write_bytes(from_hex(value))

    def write_varint(self, value: int, *, bits: Optional[int] = None) -> None:
        """Write an unsigned int as a varint, `bits` is the width the value must fit in."""
        from .encoding.varint import encode_varint
        if bits is None:
            bits = self.settings.DEFAULT_VARINT_BITS
        self._write_bytes(encode_varint(value, bits=bits))

    def write_varint_list(self, values: Collection[int], *, bits: Optional[int] = None) -> None:
        """Write a count-prefixed list of varints."""
        from .compound_encoding.collection import encode_collection
        encode_collection(self, values, lambda se, value: se.write_varint(value, bits=bits))

    def write_pod(self, value: Serializable) -> None:
        """Write a single serializable value using its own format."""
        value.serialize(self)

    def write_pod_list(self, values: Collection[Serializable]) -> None:
        """Write a count-prefixed list of serializable values."""
        from .compound_encoding.collection import encode_collection
        encode_collection(self, values, Serializer.write_pod)

    def write_pod_nested(self, values: Collection[Collection[Serializable]]) -> None:
        """Write a count-prefixed list of count-prefixed lists of serializable values."""
        from .compound_encoding.collection import encode_collection
        encode_collection(self, values, Serializer.write_pod_list)

    @staticmethod
    def build_bytes_serializer() -> Writer:
        from .writer import Writer
        return Writer()
