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
Amounts of XRP (8 bytes) or of issued currencies (48 bytes).

XRP amounts are integers of drops: bit 63 is 0, bit 62 is set for non-negative amounts and the lower 62 bits hold the
magnitude. The JSON form is a string of drops.

Issued currency amounts start with an 8-byte value: bit 63 is 1, bit 62 is the sign, bits 54..61 hold the exponent
biased by 97 and the lower 54 bits the mantissa, normalized to 16 significant digits. The currency and the issuer
follow. The JSON form is `{"currency": ..., "value": ..., "issuer": ...}`.

>>> Amount.from_value('100').to_hex()
'4000000000000064'
>>> Amount.from_value({'currency': 'USD', 'value': '2.1', 'issuer': 'rrrrrrrrrrrrrrrrrrrrrhoLvTp'}).to_hex()[:16]
'D48775F05A074000'
>>> Amount.from_hex('D48775F05A074000' + '00' * 40).to_json()['value']
'2.1'
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from typing_extensions import Self, override

from xrplcodec.exceptions import AmountOutOfRange, NotSerializable
from xrplcodec.serialization import Deserializer
from xrplcodec.types.account_id import AccountID
from xrplcodec.types.currency import Currency
from xrplcodec.types.serialized_type import SerializedType

NATIVE_AMOUNT_BYTE_LENGTH = 8
ISSUED_AMOUNT_BYTE_LENGTH = 48

MAX_DROPS = 10**17

MIN_IOU_EXPONENT = -96
MAX_IOU_EXPONENT = 80
MIN_IOU_MANTISSA = 10**15
MAX_IOU_MANTISSA = 10**16 - 1
MAX_IOU_PRECISION = 16

_NOT_NATIVE_BIT = 0x8000000000000000
_POSITIVE_BIT = 0x4000000000000000
_EXPONENT_BIAS = 97
_MANTISSA_MASK = (1 << 54) - 1
_NATIVE_MAGNITUDE_MASK = _POSITIVE_BIT - 1

ZERO_ISSUED_VALUE = _NOT_NATIVE_BIT

_DROPS_REGEX = re.compile('-?[0-9]+')
_ISSUED_KEYS = frozenset(['currency', 'value', 'issuer'])


class Amount(SerializedType):
    __slots__ = ()

    @property
    def is_native(self) -> bool:
        return not self._buffer[0] & 0x80

    @override
    @classmethod
    def from_parser(cls, deserializer: Deserializer, length_hint: Optional[int] = None) -> Self:
        is_issued = deserializer.peek_byte() & 0x80
        return cls(deserializer.read_bytes(ISSUED_AMOUNT_BYTE_LENGTH if is_issued else NATIVE_AMOUNT_BYTE_LENGTH))

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        if isinstance(value, str):
            return cls(_serialize_drops(value))
        if isinstance(value, dict):
            if set(value.keys()) != _ISSUED_KEYS:
                raise NotSerializable(f'issued amounts need exactly the keys {sorted(_ISSUED_KEYS)}, got {value!r}')
            return cls(b''.join([
                _serialize_issued_value(value['value']),
                Currency.from_value(value['currency']).to_bytes(),
                AccountID.from_value(value['issuer']).to_bytes(),
            ]))
        raise NotSerializable(f'Amount cannot be built from {value!r}')

    @override
    def to_json(self) -> Any:
        raw = int.from_bytes(self._buffer[:8], byteorder='big')
        if self.is_native:
            magnitude = raw & _NATIVE_MAGNITUDE_MASK
            sign = '' if raw & _POSITIVE_BIT or magnitude == 0 else '-'
            return f'{sign}{magnitude}'
        return {
            'currency': Currency(self._buffer[8:28]).to_json(),
            'value': _format_issued_value(raw),
            'issuer': AccountID(self._buffer[28:48]).to_json(),
        }


def _serialize_drops(value: str) -> bytes:
    if not _DROPS_REGEX.fullmatch(value):
        raise AmountOutOfRange(f'XRP amounts must be an integer number of drops, got {value!r}')
    drops = int(value)
    if abs(drops) > MAX_DROPS:
        raise AmountOutOfRange(f'{value} drops is more than the maximum of {MAX_DROPS}')
    raw = abs(drops)
    if drops >= 0:
        raw |= _POSITIVE_BIT
    return raw.to_bytes(NATIVE_AMOUNT_BYTE_LENGTH, byteorder='big')


def _serialize_issued_value(value: Any) -> bytes:
    """Normalize a decimal string into the 8-byte issued value, see this module's docstring."""
    if not isinstance(value, str):
        raise NotSerializable(f'issued amount values must be strings, got {value!r}')
    try:
        decimal = Decimal(value)
    except InvalidOperation:
        raise AmountOutOfRange(f'invalid amount value: {value!r}')
    if not decimal.is_finite():
        raise AmountOutOfRange(f'invalid amount value: {value!r}')
    if decimal.is_zero():
        return ZERO_ISSUED_VALUE.to_bytes(8, byteorder='big')

    sign, digits, exponent = decimal.as_tuple()
    assert isinstance(exponent, int)
    significant = list(digits)
    while significant[-1] == 0:
        significant.pop()
        exponent += 1
    if len(significant) > MAX_IOU_PRECISION:
        raise AmountOutOfRange(f'{value} has more than {MAX_IOU_PRECISION} significant digits')

    mantissa = int(''.join(map(str, significant)))
    while mantissa < MIN_IOU_MANTISSA and exponent > MIN_IOU_EXPONENT:
        mantissa *= 10
        exponent -= 1

    if mantissa < MIN_IOU_MANTISSA or exponent < MIN_IOU_EXPONENT:
        # too small to be represented, rounds to zero
        return ZERO_ISSUED_VALUE.to_bytes(8, byteorder='big')
    if exponent > MAX_IOU_EXPONENT:
        raise AmountOutOfRange(f'{value} is too large to be represented')

    raw = _NOT_NATIVE_BIT | ((exponent + _EXPONENT_BIAS) << 54) | mantissa
    if not sign:
        raw |= _POSITIVE_BIT
    return raw.to_bytes(8, byteorder='big')


def _format_issued_value(raw: int) -> str:
    """Plain decimal notation with no trailing zeros: '2.1', '-1694.768', '1000000'."""
    mantissa = raw & _MANTISSA_MASK
    if mantissa == 0:
        return '0'
    exponent = ((raw >> 54) & 0xff) - _EXPONENT_BIAS
    sign = '' if raw & _POSITIVE_BIT else '-'

    while mantissa % 10 == 0:
        mantissa //= 10
        exponent += 1

    digits = str(mantissa)
    if exponent >= 0:
        return f'{sign}{digits}{"0" * exponent}'
    digits = digits.rjust(1 - exponent, '0')
    return f'{sign}{digits[:exponent]}.{digits[exponent:]}'
