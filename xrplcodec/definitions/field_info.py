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

from pydantic import ConfigDict, Field

from xrplcodec.serialization.encoding.field_header import FieldHeader
from xrplcodec.utils.pydantic import BaseModel


class FieldDefinition(BaseModel):
    """One entry of the "FIELDS" section of definitions.json, as published by rippled."""
    model_config = ConfigDict(extra='forbid', frozen=True, populate_by_name=True)

    nth: int
    is_vl_encoded: bool = Field(alias='isVLEncoded')
    is_serialized: bool = Field(alias='isSerialized')
    is_signing_field: bool = Field(alias='isSigningField')
    type: str


class DefinitionsFile(BaseModel):
    """The whole definitions.json document."""
    TYPES: dict[str, int]
    LEDGER_ENTRY_TYPES: dict[str, int]
    FIELDS: list[tuple[str, FieldDefinition]]
    TRANSACTION_RESULTS: dict[str, int]
    TRANSACTION_TYPES: dict[str, int]


class FieldInfo(BaseModel):
    """Everything needed to (de)serialize a field, resolved once when the registry is built."""
    name: str
    nth: int
    type: str
    type_code: int
    is_vl_encoded: bool
    is_serialized: bool
    is_signing_field: bool

    @property
    def field_code(self) -> int:
        return self.nth

    @property
    def header(self) -> FieldHeader:
        return FieldHeader(self.type_code, self.nth)

    @property
    def ordinal(self) -> int:
        """Sort key of the canonical field order: by type code, then by field code."""
        return (self.type_code << 16) | self.nth
