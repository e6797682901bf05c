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

from typing import Any, Optional

from typing_extensions import Self, override

from xrplcodec.exceptions import NotSerializable
from xrplcodec.serialization import Deserializer
from xrplcodec.types.account_id import AccountID
from xrplcodec.types.currency import Currency
from xrplcodec.types.serialized_type import SerializedType


class Issue(SerializedType):
    """ A currency and, unless it is XRP, its issuer: `{"currency": "XRP"}` or `{"currency": ..., "issuer": ...}`.

    Bytes: the 20-byte currency, followed by the 20-byte issuer when the currency is not XRP.
    """

    __slots__ = ()

    @override
    @classmethod
    def from_parser(cls, deserializer: Deserializer, length_hint: Optional[int] = None) -> Self:
        currency = Currency.from_parser(deserializer)
        if currency.is_native:
            return cls(currency.to_bytes())
        issuer = AccountID.from_parser(deserializer)
        return cls(currency.to_bytes() + issuer.to_bytes())

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        if not isinstance(value, dict) or 'currency' not in value or not set(value) <= {'currency', 'issuer'}:
            raise NotSerializable(f'Issue cannot be built from {value!r}')
        currency = Currency.from_value(value['currency'])
        if currency.is_native:
            if 'issuer' in value:
                raise NotSerializable('XRP cannot have an issuer')
            return cls(currency.to_bytes())
        if 'issuer' not in value:
            raise NotSerializable(f'{value["currency"]} needs an issuer')
        return cls(currency.to_bytes() + AccountID.from_value(value['issuer']).to_bytes())

    @override
    def to_json(self) -> dict[str, str]:
        currency = Currency(self._buffer[:20])
        if currency.is_native:
            return {'currency': currency.to_json()}
        return {'currency': currency.to_json(), 'issuer': AccountID(self._buffer[20:]).to_json()}
