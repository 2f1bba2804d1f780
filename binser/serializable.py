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
The capability set a value needs to take part in the composite operations of `Serializer` and `Deserializer`
(`write_pod`, `write_pod_list`, `read_pod_list`, ...).

It is a structural protocol, conforming types don't inherit from it. `SerializablePod` is the implementation for
fixed-size binary blobs and `SerializableVector` composes any conforming element type into a count-prefixed list.

Types used with `Deserializer.read_pod` must also be constructible without arguments, the reader builds an empty
value and then calls `deserialize` on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Union, runtime_checkable

from typing_extensions import Self

if TYPE_CHECKING:
    from .deserializer import Deserializer
    from .serializer import Serializer
    from .types import Buffer


@runtime_checkable
class Serializable(Protocol):
    def size(self) -> int:
        """Length in bytes of the serialized value."""
        ...

    def serialize(self, serializer: Serializer) -> None:
        ...

    def to_bytes(self) -> bytes:
        ...

    def deserialize(self, source: Union[Deserializer, Buffer]) -> None:
        """Replace the contents of this value with what is read from `source`."""
        ...

    def to_json(self) -> Any:
        ...

    @classmethod
    def from_json(cls, value: Any) -> Self:
        ...
