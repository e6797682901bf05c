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

import re
from typing import Any

from xrplcodec.exceptions import InvalidHex

_HEX_REGEX = re.compile('(?:[0-9a-fA-F]{2})*')


def hex_to_bytes(value: Any) -> bytes:
    """Parse a hex string of any case into bytes, whitespace or an odd number of digits is not accepted.

    >>> hex_to_bytes('00aBff')
    b'\\x00\\xab\\xff'
    >>> hex_to_bytes('abc')
    Traceback (most recent call last):
    ...
    xrplcodec.exceptions.InvalidHex: invalid hex string: 'abc'
    """
    if not isinstance(value, str):
        raise InvalidHex(f'expected a hex string, got {type(value).__name__}')
    if not _HEX_REGEX.fullmatch(value):
        raise InvalidHex(f'invalid hex string: {value!r}')
    return bytes.fromhex(value)


def bytes_to_hex(value: bytes) -> str:
    """Uppercase hex, the representation used for every binary value in the JSON form."""
    return value.hex().upper()
