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
from xrplcodec.types.hash import Hash256
from xrplcodec.types.serialized_type import SerializedType

_HASH_LENGTH = 32


class Vector256(SerializedType):
    """A list of 256-bit hashes, VL encoded as their plain concatenation."""

    __slots__ = ()

    @override
    @classmethod
    def from_parser(cls, deserializer: Deserializer, length_hint: Optional[int] = None) -> Self:
        data = deserializer.read_all() if length_hint is None else deserializer.read_bytes(length_hint)
        if len(data) % _HASH_LENGTH:
            raise NotSerializable(f'Vector256 length must be a multiple of {_HASH_LENGTH}, got {len(data)}')
        return cls(data)

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        if not isinstance(value, list):
            raise NotSerializable(f'Vector256 expects a list of hashes, got {type(value).__name__}')
        return cls(b''.join(Hash256.from_value(item).to_bytes() for item in value))

    @override
    def to_json(self) -> list[str]:
        return [
            Hash256(self._buffer[pos:pos + _HASH_LENGTH]).to_json()
            for pos in range(0, len(self._buffer), _HASH_LENGTH)
        ]
