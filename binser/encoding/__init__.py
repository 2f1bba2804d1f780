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
Encodings of single values, each submodule handles one kind of value.

They take plain parameters only: the fixed-width int packer is configured by length and endianness,
never by another encoder. Encodings that delegate part of the work (lists, nested lists, ...) live
in `binser.compound_encoding`.

Most submodules here work on plain byte sequences so they can be used without a writer or reader:

    def encode_x(value: ValueType, ...config params...) -> bytes:
        ...

    def decode_x(data: Buffer, offset: int, ...config params...) -> ValueType:
        ...

The `Serializer` and `Deserializer` classes build their typed operations on top of these functions.
"""
