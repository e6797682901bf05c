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

from xrplcodec.definitions.field_info import FieldInfo
from xrplcodec.definitions.registry import (
    Definitions,
    compare,
    decode_field_name,
    encode_field_name,
    get_definitions,
    load_definitions,
    lookup_by_header,
    lookup_by_name,
    sort_key,
)
from xrplcodec.serialization.encoding.field_header import FieldHeader

__all__ = [
    'Definitions',
    'FieldHeader',
    'FieldInfo',
    'compare',
    'decode_field_name',
    'encode_field_name',
    'get_definitions',
    'load_definitions',
    'lookup_by_header',
    'lookup_by_name',
    'sort_key',
]
