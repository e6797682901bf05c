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
This module implements the compact field header ("field id") of the XRPL binary format.

A header is the pair (type code, field code), both in the range 1..255, written in 1 to 3 bytes:

- both codes below 16: a single byte, type code in the high nibble and field code in the low nibble;
- type code below 16 only: `type << 4` then the field code;
- field code below 16 only: the field code then the type code;
- both 16 or above: a zero byte, the type code, then the field code.

>>> se = Serializer.build_bytes_serializer()
>>> encode_field_header(se, 2, 4)
>>> encode_field_header(se, 7, 16)
>>> encode_field_header(se, 16, 3)
>>> encode_field_header(se, 18, 19)
>>> bytes(se.finalize()).hex()
'2470100310001213'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('2470100310001213'))
>>> [tuple(decode_field_header(de)) for _ in range(4)]
[(2, 4), (7, 16), (16, 3), (18, 19)]

Non-canonical headers, such as a field code below 16 written in its own byte, are rejected:

>>> decode_field_header(Deserializer.build_bytes_deserializer(bytes.fromhex('2004')))
Traceback (most recent call last):
...
xrplcodec.serialization.exceptions.InvalidFieldHeader: field code 4 should not be encoded in a separate byte
"""

from typing import NamedTuple

from xrplcodec.serialization import Deserializer, Serializer
from xrplcodec.serialization.exceptions import InvalidFieldHeader

CODE_MIN_VALUE = 1
CODE_MAX_VALUE = 255


class FieldHeader(NamedTuple):
    type_code: int
    field_code: int


def encode_field_header(serializer: Serializer, type_code: int, field_code: int) -> None:
    """ Encode a field header, this modules's docstring has more details and examples.

    Raises `InvalidFieldHeader` if any code is out of the 1..255 range.
    """
    if not CODE_MIN_VALUE <= type_code <= CODE_MAX_VALUE:
        raise InvalidFieldHeader(f'type code {type_code} out of range')
    if not CODE_MIN_VALUE <= field_code <= CODE_MAX_VALUE:
        raise InvalidFieldHeader(f'field code {field_code} out of range')

    if type_code < 16:
        if field_code < 16:
            serializer.write_byte((type_code << 4) | field_code)
        else:
            serializer.write_byte(type_code << 4)
            serializer.write_byte(field_code)
    else:
        if field_code < 16:
            serializer.write_byte(field_code)
            serializer.write_byte(type_code)
        else:
            serializer.write_byte(0)
            serializer.write_byte(type_code)
            serializer.write_byte(field_code)


def decode_field_header(deserializer: Deserializer) -> FieldHeader:
    """ Decode a field header, this modules's docstring has more details and examples.

    Raises `InvalidFieldHeader` on non-canonical encodings, and `UnexpectedEndOfStream` when the header is cut short.
    Nothing is consumed when an error is raised.
    """
    first = deserializer.peek_byte()
    type_code = first >> 4
    field_code = first & 0x0f
    size = 1 + (type_code == 0) + (field_code == 0)
    data = deserializer.peek_bytes(size)
    pos = 1

    if type_code == 0:
        type_code = data[pos]
        pos += 1
        if type_code < 16:
            raise InvalidFieldHeader(f'type code {type_code} should not be encoded in a separate byte')

    if field_code == 0:
        field_code = data[pos]
        if field_code < 16:
            raise InvalidFieldHeader(f'field code {field_code} should not be encoded in a separate byte')

    deserializer.skip(size)
    return FieldHeader(type_code, field_code)
