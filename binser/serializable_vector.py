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

r"""
A list of serializable values that is itself serializable.

Layout: [N: varint][element_0]...[element_N-1], each element in its own format. Since the vector conforms to the same
contract as its elements, vectors of vectors work too.

>>> from binser.serializable_pod import pod_type
>>> Key = pod_type(2)
>>> KeyList = SerializableVector.of(Key)
>>> keys = KeyList([Key('0102'), Key('0304')])
>>> keys.to_hex()
'0201020304'
>>> keys.to_json()
['0102', '0304']
>>> KeyList.from_hex('0201020304') == keys
True
>>> KeyList.from_json(['0102']).back()
SerializablePod2('0102')
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import cache
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, Union

from typing_extensions import Self

from .deserializer import Deserializer

if TYPE_CHECKING:
    from .serializer import Serializer
    from .types import Buffer

T = TypeVar('T')


class SerializableVector(Generic[T]):
    element_type: ClassVar[type[Any]]

    @classmethod
    def of(cls, element_type: type[T]) -> type[SerializableVector[T]]:
        """Concrete vector type for the given element type, the same type is returned for the same element type."""
        return _vector_type(element_type)

    def __init__(self, items: Iterable[T] = ()) -> None:
        if not hasattr(type(self), 'element_type'):
            raise TypeError('use SerializableVector.of(element_type) to get a concrete vector type')
        self.container: list[T] = list(items)

    @classmethod
    def from_hex(cls, value: str) -> Self:
        from .reader import Reader
        vector = cls()
        vector.deserialize(Reader(value))
        return vector

    def append(self, value: T) -> None:
        self.container.append(value)

    def extend(self, values: Iterable[T]) -> None:
        self.container.extend(values)

    def back(self) -> T:
        return self.container[-1]

    def clear(self) -> None:
        self.container.clear()

    def deserialize(self, source: Union[Deserializer, Buffer]) -> None:
        """Replace the elements with a count-prefixed list read from a deserializer or a byte sequence."""
        if not isinstance(source, Deserializer):
            from .reader import Reader
            source = Reader(source)
        self.container = source.read_pod_list(self.element_type)

    def serialize(self, serializer: Serializer) -> None:
        serializer.write_pod_list(self.container)  # type: ignore[arg-type]

    def to_bytes(self) -> bytes:
        from .writer import Writer
        writer = Writer()
        self.serialize(writer)
        return writer.finalize()

    def size(self) -> int:
        """Length in bytes of the serialized vector, use `len()` for the number of elements."""
        return len(self.to_bytes())

    def to_hex(self) -> str:
        from .encoding.hex import to_hex
        return to_hex(self.to_bytes())

    def to_json(self) -> list[Any]:
        return [value.to_json() for value in self.container]  # type: ignore[attr-defined]

    @classmethod
    def from_json(cls, value: Any) -> Self:
        from .json_helper import get_json_array
        return cls(cls.element_type.from_json(item) for item in get_json_array(value))

    @classmethod
    def from_json_key(cls, obj: Any, key: str) -> Self:
        from .json_helper import get_json_value
        return cls.from_json(get_json_value(obj, key))

    def __getitem__(self, index: int) -> T:
        return self.container[index]

    def __setitem__(self, index: int, value: T) -> None:
        self.container[index] = value

    def __len__(self) -> int:
        return len(self.container)

    def __iter__(self) -> Iterator[T]:
        return iter(self.container)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SerializableVector) or other.element_type is not self.element_type:
            return NotImplemented
        return self.container == other.container

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.container!r})'


@cache
def _vector_type(element_type: type[T]) -> type[SerializableVector[T]]:
    name = f'SerializableVector[{element_type.__name__}]'
    return type(name, (SerializableVector,), {'element_type': element_type})
