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

from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

from binser.utils.dict import deep_merge

_EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that must hold a mapping, an empty file reads as `{}`."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")

    contents = yaml.safe_load(path.read_text())
    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def _resolve_extended(base_file: Path, file_to_extend: str, custom_root: Optional[Path]) -> Path:
    candidate = base_file.parent / file_to_extend
    if not candidate.is_file() and custom_root is not None:
        candidate = custom_root / file_to_extend
    return candidate


def dict_from_extended_yaml(*, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> dict[str, Any]:
    """
    Read a yaml file that may extend another one through the 'extends' key.

    The 'extends' value is resolved relative to the file itself first, then relative to `custom_root`. Chains of
    extensions are followed until a file without 'extends', a file extending one already in the chain is an error.
    Keys of the extending file win over the extended one and nested mappings are merged. The 'extends' key itself is
    dropped.
    """
    layers: list[dict[str, Any]] = []
    visited: set[Path] = set()
    current: Optional[Path] = Path(filepath)

    while current is not None:
        resolved = current.resolve()
        if resolved in visited:
            raise ValueError('Cannot parse yaml with recursive extensions.')
        visited.add(resolved)

        contents = dict_from_yaml(filepath=current)
        file_to_extend = contents.pop(_EXTENDS_KEY, None)
        layers.append(contents)
        current = _resolve_extended(current, str(file_to_extend), custom_root) if file_to_extend else None

    result: dict[str, Any] = {}
    for layer in reversed(layers):
        result = deep_merge(result, layer)
    return result


def model_from_extended_yaml(model: type[T], *, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> T:
    """Read an (extended) yaml file and validate it into the given pydantic model."""
    return model.model_validate(dict_from_extended_yaml(filepath=filepath, custom_root=custom_root))
