#  Copyright 2023 Hathor Labs
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

from functools import partial
from typing import TYPE_CHECKING, Annotated, Any, TypeVar

from pydantic import BaseModel as PydanticBaseModel, ConfigDict, Field, StrictInt
from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import BeforeValidator

from binser.exceptions import JsonFormatError

if TYPE_CHECKING:
    from binser.serializable_pod import SerializablePod

PodT = TypeVar('PodT', bound='SerializablePod')

U32 = Annotated[StrictInt, Field(ge=0, le=0xffff_ffff)]
U64 = Annotated[StrictInt, Field(ge=0, le=0xffff_ffff_ffff_ffff)]
I64 = Annotated[StrictInt, Field(ge=-(1 << 63), le=(1 << 63) - 1)]


def _json_to_pod(pod_type: 'type[SerializablePod]', value: Any) -> Any:
    """Convert a hex string to the pod type, or pass through if already an instance."""
    if isinstance(value, pod_type):
        return value
    if isinstance(value, str):
        return pod_type.from_json(value)
    raise JsonFormatError(f'Expected {pod_type.__name__} or hex string, got {type(value).__name__}')


def _pod_to_json(value: 'SerializablePod') -> str:
    return value.to_json()


if TYPE_CHECKING:
    # For type checking: PodJson[T] is just T
    PodJson = Annotated[PodT, ...]
else:
    # At runtime: PodJson[T] returns Annotated[T, validators, serializers]
    #
    # Usage:
    #     class Output(BaseModel):
    #         key: PodJson[PublicKey]
    #         hashes: list[PodJson[Hash]]
    #
    # Behavior:
    #     - Validation: accepts an instance or its hex string
    #     - Serialization: always outputs the hex string

    class _PodJsonMeta(type):
        def __getitem__(cls, pod_type: type[PodT]) -> type[PodT]:
            return Annotated[  # type: ignore[return-value]
                pod_type,
                BeforeValidator(partial(_json_to_pod, pod_type)),
                PlainSerializer(_pod_to_json, return_type=str),
            ]

    class PodJson(metaclass=_PodJsonMeta):
        """PodJson[T] wraps a SerializablePod subclass to enable hex serialization."""
        pass


class BaseModel(PydanticBaseModel):
    """Substitute for pydantic's BaseModel.
    This class defines a project BaseModel to be used instead of pydantic's, setting stricter global configurations.
    Other configurations can be set on a case by case basis.

    Read: https://docs.pydantic.dev/latest/concepts/config/
    """
    model_config = ConfigDict(extra='forbid', frozen=True, arbitrary_types_allowed=True)

    def json_dumpb(self) -> bytes:
        """Utility method for converting a Model into bytes representation of a JSON."""
        return self.model_dump_json().encode('utf-8')
