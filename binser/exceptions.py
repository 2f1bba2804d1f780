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


class SerializationError(ValueError):
    """Base class for every error raised while encoding or decoding."""


class OutOfDataError(SerializationError):
    """A read asked for more bytes than remain in the buffer."""


class OutOfRangeError(SerializationError):
    """A value does not fit the requested integer width."""


class FormatError(SerializationError):
    """Input text is not in the expected format."""


class BadHexError(FormatError):
    """Hex text has an odd length or a character that is not a hex digit."""


class JsonFormatError(FormatError):
    """JSON could not be parsed, has the wrong type or misses a required key."""


class SizeMismatchError(SerializationError):
    """A fixed-size value was built from data of the wrong length."""


class InvalidArgumentError(SerializationError):
    """An argument is invalid regardless of the buffer contents, like writing from `None` with a nonzero length."""


class TooLongError(SerializationError):
    """A decoded collection count exceeds the configured maximum."""
