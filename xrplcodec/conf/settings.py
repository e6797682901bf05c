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

from typing import Optional

from pydantic import Field

from xrplcodec.utils.pydantic import BaseModel


class CodecSettings(BaseModel):
    # Objects and arrays nested deeper than this are rejected, both when encoding and when decoding.
    MAX_NESTING_DEPTH: int = Field(default=10, ge=1)

    # When True an unknown field name (encode) or field header (decode) raises UnknownField, otherwise the field is
    # logged and skipped.
    STRICT_UNKNOWN_FIELDS: bool = True

    # Path to an alternative definitions.json, the packaged one is used when unset.
    DEFINITIONS_FILEPATH: Optional[str] = None
