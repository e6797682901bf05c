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

from typing import Any, ClassVar, Optional

from typing_extensions import Self, override

from xrplcodec.exceptions import NotSerializable
from xrplcodec.serialization import Deserializer
from xrplcodec.serialization.types import Buffer
from xrplcodec.types.serialized_type import SerializedType
from xrplcodec.utils.hex import hex_to_bytes


class Hash(SerializedType):
    """Base class for fixed width opaque values, their JSON form is uppercase hex."""

    __slots__ = ()

    _byte_size: ClassVar[int]

    def __init__(self, buffer: Buffer) -> None:
        super().__init__(buffer)
        if len(self._buffer) != self._byte_size:
            raise NotSerializable(f'{type(self).__name__} must have {self._byte_size} bytes, got {len(self._buffer)}')

    @override
    @classmethod
    def from_parser(cls, deserializer: Deserializer, length_hint: Optional[int] = None) -> Self:
        return cls(deserializer.read_bytes(cls._byte_size if length_hint is None else length_hint))

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        return cls(hex_to_bytes(value))

    @override
    def to_json(self) -> str:
        return self.to_hex()


class Hash128(Hash):
    __slots__ = ()
    _byte_size = 16


class Hash160(Hash):
    __slots__ = ()
    _byte_size = 20


class Hash256(Hash):
    __slots__ = ()
    _byte_size = 32
