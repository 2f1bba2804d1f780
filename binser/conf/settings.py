#  Copyright 2025 Hathor Labs
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

from typing import Optional

from pydantic import field_validator

from binser.consts import DEFAULT_VARINT_BITS, SUPPORTED_BITS
from binser.utils.pydantic import BaseModel


class CodecSettings(BaseModel):
    # Width used by write_varint/read_varint when no explicit `bits` is given
    DEFAULT_VARINT_BITS: int = DEFAULT_VARINT_BITS

    # Width of the varint count that prefixes every collection
    COLLECTION_COUNT_BITS: int = 64

    # Largest collection count accepted when decoding, None means no limit
    MAX_COLLECTION_LENGTH: Optional[int] = None

    @field_validator('DEFAULT_VARINT_BITS', 'COLLECTION_COUNT_BITS')
    @classmethod
    def _check_bits(cls, bits: int) -> int:
        if bits not in SUPPORTED_BITS:
            raise ValueError(f'bits must be one of {SUPPORTED_BITS}, got {bits}')
        return bits

    @field_validator('MAX_COLLECTION_LENGTH')
    @classmethod
    def _check_max_collection_length(cls, max_length: Optional[int]) -> Optional[int]:
        if max_length is not None and max_length < 0:
            raise ValueError('MAX_COLLECTION_LENGTH cannot be negative')
        return max_length
