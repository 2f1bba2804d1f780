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
Fixed-size binary values (hashes, keys, ...) that plug into the codec and into JSON.

The wire format is exactly `SIZE` raw bytes with no length prefix, the JSON form is the lowercase hex string. The size
is a class attribute, so a concrete type is either declared as a subclass or obtained from `pod_type()`:

>>> class Hash(SerializablePod):
...     SIZE = 32
>>> h = Hash('974506601a60dc465e6e9acddb563889e63471849ec4198656550354b8541fcb')
>>> str(h)
'974506601a60dc465e6e9acddb563889e63471849ec4198656550354b8541fcb'
>>> Hash().empty()
True
>>> Hash() < h
True
>>> pod_type(4)('00ff00ff').to_json()
'00ff00ff'
>>> try:
...     pod_type(4)('00ff')
... except SizeMismatchError as e:
...     print(e)
value provided is of invalid size: expected 4 bytes, got 2
"""

from __future__ import annotations

from functools import cache, total_ordering
from types import TracebackType
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Union

from typing_extensions import Self

from .consts import DEFAULT_POD_SIZE
from .deserializer import Deserializer
from .exceptions import InvalidArgumentError, OutOfRangeError, SizeMismatchError
from .utils.memory import secure_erase

if TYPE_CHECKING:
    from .serializer import Serializer
    from .types import Buffer


@total_ordering
class SerializablePod:
    """A byte array of a fixed `SIZE`, all zeros when empty.

    Contents change through `deserialize` or single-byte index assignment. The backing bytes are overwritten with
    zeros when the value is released: on leaving a `with` block and when the object is collected.

    Ordering compares byte by byte starting from the highest index, which is the order of the little-endian numbers the
    bytes represent. Hashing follows the contents too, so a value that is a set member or a dict key must not be
    modified until it is removed.
    """

    SIZE: ClassVar[int] = DEFAULT_POD_SIZE

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(cls.SIZE, int) or isinstance(cls.SIZE, bool) or cls.SIZE <= 0:
            raise InvalidArgumentError(f'SIZE must be a positive int, got {cls.SIZE!r}')

    def __init__(self, value: Union[str, Buffer, None] = None) -> None:
        self._data = bytearray(self.SIZE)
        if value is None:
            return
        if isinstance(value, str):
            self._from_string(value)
        else:
            self.deserialize(value)

    @classmethod
    def from_hex(cls, value: str) -> Self:
        return cls(value)

    @classmethod
    def from_bytes(cls, data: Buffer) -> Self:
        return cls(data)

    def _from_string(self, value: str) -> None:
        from .encoding.hex import from_hex
        data = from_hex(value)
        if len(data) != self.SIZE:
            raise SizeMismatchError(f'value provided is of invalid size: expected {self.SIZE} bytes, got {len(data)}')
        self._data[:] = data
        self._load_hook()

    def _load_hook(self) -> None:
        """Called after every load, subclasses can validate or derive state here."""

    def deserialize(self, source: Union[Deserializer, Buffer]) -> None:
        """Replace the contents with exactly `SIZE` bytes, read from a deserializer or taken from a byte sequence."""
        data = source.read_bytes(self.SIZE) if isinstance(source, Deserializer) else bytes(source)
        if len(data) != self.SIZE:
            raise SizeMismatchError(f'data is of the wrong size for this structure: expected {self.SIZE} bytes, '
                                    f'got {len(data)}')
        self._data[:] = data
        self._load_hook()

    def serialize(self, serializer: Serializer) -> None:
        serializer.write_bytes(self._data)

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def size(self) -> int:
        return self.SIZE

    def empty(self) -> bool:
        return not any(self._data)

    def to_hex(self) -> str:
        from .encoding.hex import to_hex
        return to_hex(self._data)

    def to_json(self) -> str:
        return self.to_hex()

    @classmethod
    def from_json(cls, value: Any) -> Self:
        from .json_helper import get_json_string
        return cls(get_json_string(value))

    @classmethod
    def from_json_key(cls, obj: Any, key: str) -> Self:
        from .json_helper import get_json_value
        return cls.from_json(get_json_value(obj, key))

    def erase(self) -> None:
        """Overwrite the backing bytes with zeros."""
        secure_erase(self._data)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.erase()

    def __del__(self) -> None:
        data = getattr(self, '_data', None)
        if data is not None:
            secure_erase(data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __setitem__(self, index: int, value: int) -> None:
        if not 0 <= value <= 0xff:
            raise OutOfRangeError(f'{value} is not a byte value')
        self._data[index] = value

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SerializablePod) or other.SIZE != self.SIZE:
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SerializablePod) or other.SIZE != self.SIZE:
            return NotImplemented
        return self._data[::-1] < other._data[::-1]

    def __hash__(self) -> int:
        """Hash of the current contents, a value must not be modified while it is a set member or a dict key."""
        return hash((self.SIZE, bytes(self._data)))

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.to_hex()!r})'


@cache
def pod_type(size: int = DEFAULT_POD_SIZE) -> type[SerializablePod]:
    """Concrete `SerializablePod` type for a size only known at runtime, the same type is returned for the same size."""
    return type(f'SerializablePod{size}', (SerializablePod,), {'SIZE': size})
