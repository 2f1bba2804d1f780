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

r"""
This module implements the conversion between byte sequences and hex text.

Encoding always produces lowercase text with two characters per byte. Decoding accepts both cases but requires an
even length and only hex digits.

>>> to_hex(b'\x00\x7f\xff')
'007fff'
>>> from_hex('007FFF')
b'\x00\x7f\xff'
>>> to_hex(b'')
''
>>> from_hex('')
b''
>>> try:
...     from_hex('abc')
... except BadHexError as e:
...     print(e)
invalid hex string size: 3
>>> try:
...     from_hex('zz')
... except BadHexError as e:
...     print(e)
invalid hexadecimal character: 'z'
"""

from binser.exceptions import BadHexError
from binser.types import Buffer

_INVALID = 0xff

HEX_CHARS = '0123456789abcdef'

# maps every byte value (as a character code) to its hex digit value, or 0xff when it is not a hex digit
HEX_VALUES: tuple[int, ...] = tuple(
    int(chr(code), 16) if chr(code) in '0123456789abcdefABCDEF' else _INVALID
    for code in range(256)
)

# maps every byte to its two-character lowercase representation
_BYTE_TO_HEX: tuple[str, ...] = tuple(HEX_CHARS[b >> 4] + HEX_CHARS[b & 0x0f] for b in range(256))


def _hex_value(char: str) -> int:
    code = ord(char)
    value = HEX_VALUES[code] if code < 256 else _INVALID
    if value > 0x0f:
        raise BadHexError(f'invalid hexadecimal character: {char!r}')
    return value


def to_hex(data: Buffer) -> str:
    """ Convert a byte sequence to lowercase hex text.
    """
    return ''.join(_BYTE_TO_HEX[b] for b in bytes(data))


def from_hex(text: str) -> bytes:
    """ Convert hex text to a byte sequence, raises `BadHexError` on malformed input.
    """
    if len(text) & 1:
        raise BadHexError(f'invalid hex string size: {len(text)}')
    return bytes(_hex_value(text[i]) << 4 | _hex_value(text[i + 1]) for i in range(0, len(text), 2))
