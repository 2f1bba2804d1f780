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

from collections.abc import Iterable
from typing import Optional, Union

from structlog import get_logger
from typing_extensions import override

from .conf.settings import CodecSettings
from .deserializer import Deserializer
from .exceptions import OutOfDataError
from .types import Buffer
from .writer import Writer

logger = get_logger()


class Reader(Deserializer):
    """Simple implementation of a Deserializer to parse values from a byte sequence held in memory.

    The reader keeps its own copy of the data and a cursor into it. The source can be a `Writer`, any bytes-like
    object, an iterable of ints or a hex string (decoded eagerly).

    >>> r = Reader('0102010102ac02')
    >>> r.read_bool()
    True
    >>> r.read_uint16(peek=True)
    258
    >>> r.read_uint16()
    258
    >>> r.read_uint16(big_endian=True)
    258
    >>> r.unread_bytes()
    2
    >>> r.read_varint()
    300
    >>> r.is_empty()
    True
    >>> r.reset()
    >>> r.read_hex(3)
    '010201'
    """

    def __init__(
        self,
        source: Union[Writer, Buffer, Iterable[int], str],
        *,
        settings: Optional[CodecSettings] = None,
    ) -> None:
        self._data: bytes
        if isinstance(source, Writer):
            self._data = source.to_bytes()
        elif isinstance(source, str):
            from .encoding.hex import from_hex
            self._data = from_hex(source)
        else:
            self._data = bytes(source)
        self._pos = 0
        self._settings = settings
        self.log = logger.new()

    @property
    def settings(self) -> CodecSettings:
        if self._settings is not None:
            return self._settings
        return super().settings

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def size(self) -> int:
        return len(self._data)

    @override
    def reset(self, position: int = 0) -> None:
        if not 0 <= position <= len(self._data):
            raise OutOfDataError(f'position {position} is outside of the buffer')
        self._pos = position

    @override
    def _unread_view(self) -> memoryview:
        return memoryview(self._data)[self._pos:]

    def compact(self) -> None:
        """Drop the bytes that were already read, the cursor moves to the start of what remains."""
        self.log.debug('reader compacted', dropped=self._pos, kept=len(self._data) - self._pos)
        self._data = self._data[self._pos:]
        self._pos = 0

    def to_bytes(self) -> bytes:
        """The whole buffer, regardless of the cursor."""
        return self._data

    def to_hex(self) -> str:
        from .encoding.hex import to_hex
        return to_hex(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f'Reader({self.to_hex()!r}, pos={self._pos})'
