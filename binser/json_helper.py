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
Helpers to read typed values out of parsed JSON documents.

Every getter takes the JSON value itself, or a JSON object and the key of one of its members. Type mismatches raise
`JsonFormatError` with a message naming the expected type and the JSON type that was found:

>>> doc = parse_json('{"amount": 10, "name": "foo", "flag": true, "items": [1, 2]}')
>>> get_json_uint32(doc, 'amount')
10
>>> get_json_string(doc, 'name')
'foo'
>>> get_json_bool(doc, 'flag')
True
>>> get_json_array(doc, 'items')
[1, 2]
>>> try:
...     get_json_uint64(doc, 'name')
... except JsonFormatError as e:
...     print(e)
JSON parameter is wrong type. Expected uint64, got String
>>> try:
...     get_json_value(doc, 'missing')
... except JsonFormatError as e:
...     print(e)
Missing JSON parameter: 'missing'
"""

from typing import Any, Optional

from pydantic import StrictBool, StrictFloat, StrictStr, TypeAdapter, ValidationError

from .exceptions import JsonFormatError
from .utils.json import json_dumps, json_loads
from .utils.pydantic import I64, U32, U64

_MISSING = object()

_BOOL: TypeAdapter[bool] = TypeAdapter(StrictBool)
_STRING: TypeAdapter[str] = TypeAdapter(StrictStr)
_UINT32: TypeAdapter[int] = TypeAdapter(U32)
_UINT64: TypeAdapter[int] = TypeAdapter(U64)
_INT64: TypeAdapter[int] = TypeAdapter(I64)
_DOUBLE: TypeAdapter[float] = TypeAdapter(StrictFloat)
_ARRAY: TypeAdapter[list[Any]] = TypeAdapter(list[Any])
_OBJECT: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


def json_type_name(value: Any) -> str:
    """Name of the JSON type of a parsed value."""
    if value is None:
        return 'Null'
    if value is True:
        return 'True'
    if value is False:
        return 'False'
    if isinstance(value, dict):
        return 'Object'
    if isinstance(value, list):
        return 'Array'
    if isinstance(value, str):
        return 'String'
    if isinstance(value, (int, float)):
        return 'Number'
    return type(value).__name__


def parse_json(text: str) -> Any:
    return json_loads(text)


def dump_json(value: Any) -> str:
    return json_dumps(value)


def has_member(obj: Any, key: str) -> bool:
    return isinstance(obj, dict) and key in obj


def get_json_value(obj: Any, key: str) -> Any:
    """Get the member `key` of a JSON object, raises if it is missing."""
    if not isinstance(obj, dict):
        raise JsonFormatError(f'JSON value is of the wrong type: {json_type_name(obj)}')
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        raise JsonFormatError(f"Missing JSON parameter: '{key}'")
    return value


def _get_typed(adapter: TypeAdapter, expected: str, obj: Any, key: Optional[str]) -> Any:
    value = obj if key is None else get_json_value(obj, key)
    try:
        return adapter.validate_python(value, strict=True)
    except ValidationError as e:
        raise JsonFormatError(
            f'JSON parameter is wrong type. Expected {expected}, got {json_type_name(value)}'
        ) from e


def get_json_bool(obj: Any, key: Optional[str] = None) -> bool:
    return _get_typed(_BOOL, 'bool', obj, key)


def get_json_string(obj: Any, key: Optional[str] = None) -> str:
    return _get_typed(_STRING, 'string', obj, key)


def get_json_uint32(obj: Any, key: Optional[str] = None) -> int:
    return _get_typed(_UINT32, 'uint32', obj, key)


def get_json_uint64(obj: Any, key: Optional[str] = None) -> int:
    return _get_typed(_UINT64, 'uint64', obj, key)


def get_json_int64(obj: Any, key: Optional[str] = None) -> int:
    return _get_typed(_INT64, 'int64', obj, key)


def get_json_double(obj: Any, key: Optional[str] = None) -> float:
    return _get_typed(_DOUBLE, 'double', obj, key)


def get_json_array(obj: Any, key: Optional[str] = None) -> list[Any]:
    return _get_typed(_ARRAY, 'Array', obj, key)


def get_json_object(obj: Any, key: Optional[str] = None) -> dict[str, Any]:
    return _get_typed(_OBJECT, 'Object', obj, key)
