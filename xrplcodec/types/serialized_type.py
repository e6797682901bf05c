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

from abc import ABC, abstractmethod
from typing import Any, Optional

from typing_extensions import Self

from xrplcodec.serialization import Deserializer
from xrplcodec.serialization.types import Buffer
from xrplcodec.utils.hex import bytes_to_hex, hex_to_bytes


class SerializedType(ABC):
    """ Base class of every value of the XRPL binary format.

    A value always owns its canonical bytes. Each concrete type implements the four conversions:

    - `from_parser`: read a value from a deserializer, `length_hint` is set for VL encoded fields;
    - `to_bytes`: the canonical bytes, without header or length prefix;
    - `from_value`: build from the JSON-like representation;
    - `to_json`: the JSON-like representation.
    """

    __slots__ = ('_buffer',)

    def __init__(self, buffer: Buffer) -> None:
        self._buffer = bytes(memoryview(buffer))

    @classmethod
    @abstractmethod
    def from_parser(cls, deserializer: Deserializer, length_hint: Optional[int] = None) -> Self:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_value(cls, value: Any) -> Self:
        raise NotImplementedError

    @abstractmethod
    def to_json(self) -> Any:
        raise NotImplementedError

    def to_bytes(self) -> bytes:
        return self._buffer

    def to_hex(self) -> str:
        return bytes_to_hex(self._buffer)

    @classmethod
    def from_bytes(cls, data: Buffer) -> Self:
        """Parse a value that takes the whole of `data`."""
        data_view = memoryview(data)
        deserializer = Deserializer.build_bytes_deserializer(data_view)
        value = cls.from_parser(deserializer, len(data_view))
        deserializer.finalize()
        return value

    @classmethod
    def from_hex(cls, data: str) -> Self:
        return cls.from_bytes(hex_to_bytes(data))

    def __bytes__(self) -> bytes:
        return self._buffer

    def __len__(self) -> int:
        return len(self._buffer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SerializedType):
            return NotImplemented
        return type(self) is type(other) and self._buffer == other._buffer

    def __hash__(self) -> int:
        return hash((type(self), self._buffer))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.to_hex()})'
