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

from xrplcodec.serialization import Deserializer
from xrplcodec.types.serialized_type import SerializedType
from xrplcodec.utils.hex import hex_to_bytes


class Blob(SerializedType):
    """Variable length raw bytes; the length lives in the VL prefix of the field, not in the value."""

    __slots__ = ()

    @override
    @classmethod
    def from_parser(cls, deserializer: Deserializer, length_hint: Optional[int] = None) -> Self:
        if length_hint is None:
            return cls(deserializer.read_all())
        return cls(deserializer.read_bytes(length_hint))

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        return cls(hex_to_bytes(value))

    @override
    def to_json(self) -> str:
        return self.to_hex()
