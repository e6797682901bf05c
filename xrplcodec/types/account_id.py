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

from typing_extensions import Self, override

from xrplcodec.addresscodec import (
    decode_classic_address,
    decode_extended_address,
    encode_classic_address,
    is_valid_xaddress,
)
from xrplcodec.exceptions import InvalidAddress
from xrplcodec.types.hash import Hash160

_HEX_REGEX = re.compile('[0-9a-fA-F]{40}')


class AccountID(Hash160):
    """ A 20-byte account identifier.

    The JSON form is the classic address. As input it also accepts an X-address (its tag is ignored here, `STObject`
    moves it to the matching tag field) or the 40 hex digits of the account id.
    """

    __slots__ = ()

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        if not isinstance(value, str):
            raise InvalidAddress(f'expected an address string, got {type(value).__name__}')
        if _HEX_REGEX.fullmatch(value):
            return cls(bytes.fromhex(value))
        if is_valid_xaddress(value):
            account_id, _, _ = decode_extended_address(value)
            return cls(account_id)
        return cls(decode_classic_address(value))

    @override
    def to_json(self) -> str:
        return encode_classic_address(self._buffer)
