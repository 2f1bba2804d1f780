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
from .exceptions import OutOfRangeError
from .serializer import Serializer
from .types import Buffer

logger = get_logger()


class Writer(Serializer):
    """Simple implementation of Serializer to write to memory.

    The bytes are accumulated in a bytearray that only grows, except for `reset()` which empties it and for index
    assignment which replaces an already written byte.

    >>> w = Writer()
    >>> w.write_bool(True)
    >>> w.write_uint16(0x0102)
    >>> w.write_uint16(0x0102, big_endian=True)
    >>> w.write_varint(300)
    >>> w.to_hex()
    '0102010102ac02'
    >>> len(w)
    7
    >>> w[0] = 0
    >>> w.to_bytes()[:1]
    b'\\x00'
    """

    def __init__(
        self,
        data: Union[Buffer, Iterable[int], None] = None,
        *,
        settings: Optional[CodecSettings] = None,
    ) -> None:
        self._buffer = bytearray(data) if data is not None else bytearray()
        self._settings = settings
        self.log = logger.new()

    @property
    def settings(self) -> CodecSettings:
        if self._settings is not None:
            return self._settings
        return super().settings

    @override
    def cur_pos(self) -> int:
        return len(self._buffer)

    @override
    def write_byte(self, data: int) -> None:
        if not 0 <= data <= 0xff:
            raise OutOfRangeError(f'{data} is not a byte value')
        self._buffer.append(data)

    @override
    def _write_bytes(self, data: Buffer) -> None:
        self._buffer += data

    def reset(self) -> None:
        """Empty the buffer so this writer can be reused."""
        self.log.debug('writer reset', discarded=len(self._buffer))
        self._buffer.clear()

    def size(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Copy of the bytes written so far."""
        return bytes(self._buffer)

    def finalize(self) -> bytes:
        """Get the resulting byte sequence."""
        return self.to_bytes()

    def to_hex(self) -> str:
        from .encoding.hex import to_hex
        return to_hex(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index: int) -> int:
        return self._buffer[index]

    def __setitem__(self, index: int, value: int) -> None:
        if not 0 <= value <= 0xff:
            raise OutOfRangeError(f'{value} is not a byte value')
        self._buffer[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Writer):
            return NotImplemented
        return self._buffer == other._buffer

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f'Writer({self.to_hex()!r})'
