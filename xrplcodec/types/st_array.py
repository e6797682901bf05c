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
STArray: an ordered list of objects, each one wrapped by the field that names it.

Every element is written as a single-field object (for instance `{"Memo": {...}}` is the Memo header, the memo fields
and the object end marker), and the array is closed by the array end marker (0xF1). Element order is preserved.
"""

from typing import Any, Optional

from typing_extensions import Self, override

from xrplcodec.definitions import get_definitions
from xrplcodec.exceptions import NotSerializable
from xrplcodec.serialization import Deserializer, InvalidFieldHeader, Serializer
from xrplcodec.types.serialized_type import SerializedType
from xrplcodec.types.st_object import (
    ARRAY_END_MARKER,
    OBJECT_END_MARKER,
    STObject,
    check_depth,
    read_field,
    resolve_strict,
)

ARRAY_END_MARKER_BYTE = 0xF1


class STArray(SerializedType):
    __slots__ = ('_elements',)

    def __init__(self, elements: list[STObject]) -> None:
        serializer = Serializer.build_bytes_serializer()
        for element in elements:
            serializer.write_bytes(element.to_bytes())
        serializer.write_byte(ARRAY_END_MARKER_BYTE)
        super().__init__(serializer.finalize())
        self._elements = list(elements)

    @property
    def elements(self) -> list[STObject]:
        return list(self._elements)

    @override
    @classmethod
    def from_parser(
        cls,
        deserializer: Deserializer,
        length_hint: Optional[int] = None,
        *,
        strict: Optional[bool] = None,
        depth: int = 0,
    ) -> Self:
        check_depth(depth)
        strict = resolve_strict(strict)
        definitions = get_definitions()
        elements: list[STObject] = []
        while True:
            header = deserializer.read_field_header()
            if header == ARRAY_END_MARKER:
                break
            if header == OBJECT_END_MARKER:
                raise InvalidFieldHeader('object end marker inside an array')
            item = read_field(deserializer, header, definitions, strict=strict, depth=depth)
            if item is not None:
                elements.append(STObject([item]))
        return cls(elements)

    @override
    @classmethod
    def from_value(cls, value: Any, *, strict: Optional[bool] = None, depth: int = 0) -> Self:
        """ Build an array from a list of single-key objects, like `[{"Memo": {...}}, {"Memo": {...}}]`."""
        if not isinstance(value, list):
            raise NotSerializable(f'STArray expects a list, got {type(value).__name__}')
        check_depth(depth)
        elements: list[STObject] = []
        for element in value:
            if not isinstance(element, dict) or len(element) != 1:
                raise NotSerializable('STArray elements must be objects with exactly one field')
            elements.append(STObject.from_value(element, strict=strict, depth=depth))
        return cls(elements)

    @override
    def to_json(self) -> list[dict[str, Any]]:
        return [element.to_json() for element in self._elements]
