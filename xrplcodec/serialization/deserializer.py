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
from typing import TYPE_CHECKING, Iterator

from .types import Buffer

if TYPE_CHECKING:
    from .bytes_deserializer import BytesDeserializer
    from .encoding.field_header import FieldHeader


class Deserializer(ABC):
    """Forward-only reader over a byte sequence.

    Every read either consumes exactly the requested bytes or raises `UnexpectedEndOfStream` without consuming
    anything.
    """

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer cannot be used after this."""
        raise TypeError('this deserializer does not support finalization')

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def remaining(self) -> int:
        """Number of bytes that can still be read."""
        raise NotImplementedError

    @abstractmethod
    def peek_byte(self) -> int:
        """Read a single byte but don't consume from buffer."""
        raise NotImplementedError

    @abstractmethod
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Read n single byte but don't consume from buffer."""
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """Read n bytes, when exact=True it errors if there isn't enough data"""
        # XXX: this is a blanket implementation that is an example of the behavior, this implementation has to be
        #      explicitly used if needed
        def iter_bytes() -> Iterator[int]:
            for _ in range(n):
                if not exact and self.is_empty():
                    break
                yield self.read_byte()
        return bytes(iter_bytes())

    @abstractmethod
    def read_all(self) -> Buffer:
        """Read all bytes until the reader is empty."""
        raise NotImplementedError

    def skip(self, n: int) -> None:
        """Consume n bytes without looking at them."""
        self.read_bytes(n)

    def read_uint8(self) -> int:
        from .encoding.int import decode_int
        return decode_int(self, length=1)

    def read_uint16(self) -> int:
        from .encoding.int import decode_int
        return decode_int(self, length=2)

    def read_uint32(self) -> int:
        from .encoding.int import decode_int
        return decode_int(self, length=4)

    def read_uint64(self) -> int:
        from .encoding.int import decode_int
        return decode_int(self, length=8)

    def read_field_header(self) -> FieldHeader:
        """Read the compact header of a field, see `encoding.field_header`."""
        from .encoding.field_header import decode_field_header
        return decode_field_header(self)

    def read_variable_length(self) -> int:
        """Read a VL length prefix, see `encoding.variable_length`."""
        from .encoding.variable_length import decode_variable_length
        return decode_variable_length(self)

    def read_length_prefixed(self) -> bytes:
        """Read a VL length prefix and then as many bytes as it announces."""
        from .encoding.variable_length import decode_length_prefixed
        return decode_length_prefixed(self)
