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

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .types import Buffer

if TYPE_CHECKING:
    from .bytes_serializer import BytesSerializer


class Serializer(ABC):
    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        """Write a single byte."""
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        # XXX: it is recommended that implementors of Serializer specialize this implementation
        for byte in bytes(memoryview(data)):
            self.write_byte(byte)

    def write_uint8(self, value: int) -> None:
        from .encoding.int import encode_int
        encode_int(self, value, length=1)

    def write_uint16(self, value: int) -> None:
        from .encoding.int import encode_int
        encode_int(self, value, length=2)

    def write_uint32(self, value: int) -> None:
        from .encoding.int import encode_int
        encode_int(self, value, length=4)

    def write_uint64(self, value: int) -> None:
        from .encoding.int import encode_int
        encode_int(self, value, length=8)

    def write_field_header(self, type_code: int, field_code: int) -> None:
        """Write the compact header of a field, see `encoding.field_header`."""
        from .encoding.field_header import encode_field_header
        encode_field_header(self, type_code, field_code)

    def write_variable_length(self, length: int) -> None:
        """Write a VL length prefix, see `encoding.variable_length`."""
        from .encoding.variable_length import encode_variable_length
        encode_variable_length(self, length)

    def write_length_prefixed(self, data: Buffer) -> None:
        """Write a VL length prefix followed by the data itself."""
        from .encoding.variable_length import encode_length_prefixed
        encode_length_prefixed(self, data)

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()
