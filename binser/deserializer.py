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
from typing import TYPE_CHECKING, Optional, TypeVar

from .consts import UINT8_SIZE, UINT16_SIZE, UINT32_SIZE, UINT64_SIZE, UINT128_SIZE, UINT256_SIZE
from .exceptions import InvalidArgumentError, OutOfDataError, SerializationError

if TYPE_CHECKING:
    from .conf.settings import CodecSettings
    from .reader import Reader
    from .serializable import Serializable
    from .types import Buffer

S = TypeVar('S', bound='Serializable')


class Deserializer(ABC):
    """Byte source with a cursor and typed read operations.

    Values must be read with the same sequence of typed calls that wrote them, the order is a contract of the caller
    and is only checked against the buffer bounds. Every typed read accepts `peek=True` to return the value without
    moving the cursor.
    """

    @property
    def settings(self) -> CodecSettings:
        from .conf import get_global_settings
        return get_global_settings()

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> Reader:
        from .reader import Reader
        return Reader(data)

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        """Total size of the underlying buffer."""
        raise NotImplementedError

    @abstractmethod
    def reset(self, position: int = 0) -> None:
        """Move the cursor to `position`, which can be before the current one."""
        raise NotImplementedError

    @abstractmethod
    def _unread_view(self) -> memoryview:
        """View of the bytes from the cursor to the end, it must not outlive the next mutation."""
        raise NotImplementedError

    def unread_bytes(self) -> int:
        return self.size() - self.cur_pos()

    def unread_data(self) -> bytes:
        return bytes(self._unread_view())

    def is_empty(self) -> bool:
        return self.unread_bytes() == 0

    def finalize(self) -> None:
        """Check that all bytes were consumed."""
        if not self.is_empty():
            raise SerializationError('trailing data')

    def skip(self, count: int = 1) -> None:
        """Advance the cursor without returning data."""
        if count < 0:
            raise InvalidArgumentError('cannot skip a negative count')
        if count > self.unread_bytes():
            raise OutOfDataError('not enough data to skip')
        self.reset(self.cur_pos() + count)

    def read_bytes(self, count: int = 1, *, peek: bool = False) -> bytes:
        """Read the next `count` raw bytes."""
        if count < 0:
            raise InvalidArgumentError('cannot read a negative count')
        view = self._unread_view()
        if count > len(view):
            raise OutOfDataError('not enough data to complete request')
        data = bytes(view[:count])
        if not peek:
            self.skip(count)
        return data

    def read_hex(self, length: int = 1, *, peek: bool = False) -> str:
        """Read `length` bytes and return them as hex text."""
        from .encoding.hex import to_hex
        return to_hex(self.read_bytes(length, peek=peek))

    def read_bool(self, *, peek: bool = False) -> bool:
        from .encoding.bool import decode_bool
        return decode_bool(self, peek=peek)

    def read_uint(self, length: int, *, peek: bool = False, big_endian: bool = False) -> int:
        """Read an unsigned int of exactly `length` bytes."""
        from .encoding.int import unpack
        value = unpack(self._unread_view(), length, big_endian=big_endian)
        if not peek:
            self.skip(length)
        return value

    def read_uint8(self, *, peek: bool = False) -> int:
        return self.read_uint(UINT8_SIZE, peek=peek)

    def read_uint16(self, *, peek: bool = False, big_endian: bool = False) -> int:
        return self.read_uint(UINT16_SIZE, peek=peek, big_endian=big_endian)

    def read_uint32(self, *, peek: bool = False, big_endian: bool = False) -> int:
        return self.read_uint(UINT32_SIZE, peek=peek, big_endian=big_endian)

    def read_uint64(self, *, peek: bool = False, big_endian: bool = False) -> int:
        return self.read_uint(UINT64_SIZE, peek=peek, big_endian=big_endian)

    def read_uint128(self, *, peek: bool = False, big_endian: bool = False) -> int:
        return self.read_uint(UINT128_SIZE, peek=peek, big_endian=big_endian)

    def read_uint256(self, *, peek: bool = False, big_endian: bool = False) -> int:
        return self.read_uint(UINT256_SIZE, peek=peek, big_endian=big_endian)

    def read_varint(self, *, bits: Optional[int] = None, peek: bool = False) -> int:
        """Read a varint whose value must fit `bits`."""
        from .encoding.varint import decode_varint
        if bits is None:
            bits = self.settings.DEFAULT_VARINT_BITS
        value, length = decode_varint(self._unread_view(), bits=bits)
        if not peek:
            self.skip(length)
        return value

    def read_varint_list(self, *, bits: Optional[int] = None, peek: bool = False) -> list[int]:
        """Read a count-prefixed list of varints."""
        from .compound_encoding.collection import decode_collection
        start = self.cur_pos()
        result = decode_collection(self, lambda de: de.read_varint(bits=bits))
        if peek:
            self.reset(start)
        return result

    def read_pod(self, pod_type: type[S], *, peek: bool = False) -> S:
        """Read a single serializable value of the given type."""
        start = self.cur_pos()
        value = pod_type()
        value.deserialize(self)
        if peek:
            self.reset(start)
        return value

    def read_pod_list(self, pod_type: type[S], *, peek: bool = False) -> list[S]:
        """Read a count-prefixed list of serializable values."""
        from .compound_encoding.collection import decode_collection
        start = self.cur_pos()
        result = decode_collection(self, lambda de: de.read_pod(pod_type))
        if peek:
            self.reset(start)
        return result

    def read_pod_nested(self, pod_type: type[S], *, peek: bool = False) -> list[list[S]]:
        """Read a count-prefixed list of count-prefixed lists of serializable values."""
        from .compound_encoding.collection import decode_collection
        start = self.cur_pos()
        result = decode_collection(self, lambda de: de.read_pod_list(pod_type))
        if peek:
            self.reset(start)
        return result
