# Copyright 2021 Hathor Labs
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

import json as _json
from typing import Any, Union

from binser.exceptions import JsonFormatError


def json_dumps(obj: object) -> str:
    """Serialize to compact JSON text, non-ASCII characters are kept as they are."""
    return _json.dumps(obj, separators=(',', ':'), ensure_ascii=False)


def json_loads(data: Union[str, bytes]) -> Any:
    """Parse a JSON document, any parse failure raises `JsonFormatError`."""
    try:
        return _json.loads(data)
    except ValueError as e:
        raise JsonFormatError('Could not parse JSON') from e
