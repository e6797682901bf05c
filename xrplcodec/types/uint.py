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
from typing import Any, ClassVar, Optional

from typing_extensions import Self, override

from xrplcodec.exceptions import InvalidHex, NotSerializable
from xrplcodec.serialization import Deserializer
from xrplcodec.types.serialized_type import SerializedType

_DECIMAL_REGEX = re.compile('[0-9]+')
_UINT64_HEX_REGEX = re.compile('[0-9a-fA-F]{1,16}')


class UInt(SerializedType):
    """ Base class for fixed width big-endian unsigned integers.

    The JSON form is a plain int, a string of decimal digits is also accepted as input.
    """

    __slots__ = ()

    _byte_size: ClassVar[int]

    @property
    def value(self) -> int:
        return int.from_bytes(self._buffer, byteorder='big', signed=False)

    @override
    @classmethod
    def from_parser(cls, deserializer: Deserializer, length_hint: Optional[int] = None) -> Self:
        return cls(deserializer.read_bytes(cls._byte_size))

    @classmethod
    def from_int(cls, value: int) -> Self:
        max_value = (1 << (8 * cls._byte_size)) - 1
        if not 0 <= value <= max_value:
            raise NotSerializable(f'{cls.__name__} must be in range 0..{max_value}, got {value}')
        return cls(value.to_bytes(cls._byte_size, byteorder='big'))

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        if isinstance(value, str) and _DECIMAL_REGEX.fullmatch(value):
            return cls.from_int(int(value))
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_int(value)
        raise NotSerializable(f'{cls.__name__} cannot be built from {value!r}')

    @override
    def to_json(self) -> Any:
        return self.value


class UInt8(UInt):
    __slots__ = ()
    _byte_size = 1


class UInt16(UInt):
    __slots__ = ()
    _byte_size = 2


class UInt32(UInt):
    __slots__ = ()
    _byte_size = 4


class UInt64(UInt):
    """64-bit integers do not fit a JSON number, so the JSON form is a 16-digit uppercase hex string."""

    __slots__ = ()
    _byte_size = 8

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        if isinstance(value, str):
            if not _UINT64_HEX_REGEX.fullmatch(value):
                raise InvalidHex(f'UInt64 expects up to 16 hex digits, got {value!r}')
            return cls.from_int(int(value, 16))
        return super().from_value(value)

    @override
    def to_json(self) -> str:
        return self.to_hex()
