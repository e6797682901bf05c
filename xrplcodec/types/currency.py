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
from typing import Any, Optional

from typing_extensions import Self, override

from xrplcodec.exceptions import InvalidCurrencyCode
from xrplcodec.types.hash import Hash160

_ISO_CODE_CHARS = '[A-Z0-9?!@#$%^&*<>(){}\\[\\]|]'
_ISO_REGEX = re.compile(f'{_ISO_CODE_CHARS}{{3}}')
_HEX_REGEX = re.compile('[0-9a-fA-F]{40}')

NATIVE_CODE = 'XRP'

_ISO_START = 12
_ISO_END = 15


class Currency(Hash160):
    """ A 20-byte currency code.

    - `XRP` is all zeros;
    - a 3-char ISO-like code is stored in bytes 12..14, everything else zero;
    - any other code is given as 40 hex digits.

    >>> Currency.from_value('usd').to_hex()
    '0000000000000000000000005553440000000000'
    >>> Currency.from_value('usd').to_json()
    'USD'
    >>> Currency.from_value('XRP').to_hex()
    '0000000000000000000000000000000000000000'
    """

    __slots__ = ()

    @property
    def is_native(self) -> bool:
        return not any(self._buffer)

    @property
    def iso_code(self) -> Optional[str]:
        """The ISO code in standard format, None for XRP and for non-standard codes."""
        if self.is_native:
            return None
        if any(self._buffer[:_ISO_START]) or any(self._buffer[_ISO_END:]):
            return None
        code = self._buffer[_ISO_START:_ISO_END].decode('ascii', errors='replace')
        if not _ISO_REGEX.fullmatch(code) or code == NATIVE_CODE:
            return None
        return code

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        if not isinstance(value, str):
            raise InvalidCurrencyCode(f'expected a currency string, got {type(value).__name__}')
        if _HEX_REGEX.fullmatch(value):
            return cls(bytes.fromhex(value))
        code = value.upper()
        if code == NATIVE_CODE:
            return cls(bytes(20))
        if _ISO_REGEX.fullmatch(code):
            return cls(bytes(_ISO_START) + code.encode('ascii') + bytes(20 - _ISO_END))
        raise InvalidCurrencyCode(f'invalid currency code: {value!r}')

    @override
    def to_json(self) -> str:
        if self.is_native:
            return NATIVE_CODE
        iso_code = self.iso_code
        if iso_code is not None:
            return iso_code
        return self.to_hex()
