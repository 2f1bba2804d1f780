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

from .deserializer import Deserializer
from .exceptions import (
    BadHexError,
    FormatError,
    InvalidArgumentError,
    JsonFormatError,
    OutOfDataError,
    OutOfRangeError,
    SerializationError,
    SizeMismatchError,
    TooLongError,
)
from .reader import Reader
from .serializable import Serializable
from .serializable_pod import SerializablePod, pod_type
from .serializable_vector import SerializableVector
from .serializer import Serializer
from .writer import Writer

__version__ = '0.1.0'

__all__ = [
    'Serializer',
    'Deserializer',
    'Writer',
    'Reader',
    'Serializable',
    'SerializablePod',
    'SerializableVector',
    'pod_type',
    'SerializationError',
    'OutOfDataError',
    'OutOfRangeError',
    'FormatError',
    'BadHexError',
    'JsonFormatError',
    'SizeMismatchError',
    'InvalidArgumentError',
    'TooLongError',
]
