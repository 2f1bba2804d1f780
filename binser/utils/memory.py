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


def secure_erase(buffer: bytearray) -> None:
    """ Overwrite the contents of `buffer` with zeros, in place.

    A same-length slice assignment writes into the existing storage, the bytearray is never reallocated.

    >>> data = bytearray(b'secret')
    >>> secure_erase(data)
    >>> data
    bytearray(b'\\x00\\x00\\x00\\x00\\x00\\x00')
    """
    buffer[:] = bytes(len(buffer))
