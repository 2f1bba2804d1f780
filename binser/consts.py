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

# byte sizes of the supported fixed-width unsigned integers
UINT8_SIZE = 1
UINT16_SIZE = 2
UINT32_SIZE = 4
UINT64_SIZE = 8
UINT128_SIZE = 16
UINT256_SIZE = 32

# bit widths accepted by the varint codec
SUPPORTED_BITS = (8, 16, 32, 64, 128, 256)

DEFAULT_POD_SIZE = 32
DEFAULT_VARINT_BITS = 64
