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
This module implements the XRPL variable length prefix ("VL encoding"), used before blobs, account ids and vectors.

The length is written in one, two or three bytes depending on its value:

- up to 192: a single byte with the length itself;
- up to 12480: two bytes, the first one in the range 193..240;
- up to 918744: three bytes, the first one in the range 241..254.

>>> se = Serializer.build_bytes_serializer()
>>> encode_variable_length(se, 0)
>>> encode_variable_length(se, 192)
>>> encode_variable_length(se, 193)
>>> encode_variable_length(se, 12480)
>>> encode_variable_length(se, 12481)
>>> encode_variable_length(se, 918744)
>>> bytes(se.finalize()).hex()
'00c0c100f0fff10000fed417'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00c0c100f0fff10000fed417'))
>>> [decode_variable_length(de) for _ in range(6)]
[0, 192, 193, 12480, 12481, 918744]
>>> de.is_empty()
True

>>> encode_variable_length(Serializer.build_bytes_serializer(), 918745)
Traceback (most recent call last):
...
xrplcodec.serialization.exceptions.InvalidVariableLength: length 918745 cannot be encoded

>>> decode_variable_length(Deserializer.build_bytes_deserializer(b'\\xff'))
Traceback (most recent call last):
...
xrplcodec.serialization.exceptions.InvalidVariableLength: invalid length prefix 255
"""

from xrplcodec.serialization import Deserializer, Serializer
from xrplcodec.serialization.exceptions import InvalidVariableLength
from xrplcodec.serialization.types import Buffer

MAX_SINGLE_BYTE_LENGTH = 192
MAX_DOUBLE_BYTE_LENGTH = 12480
MAX_LENGTH_VALUE = 918744

# first byte ranges
MAX_SECOND_BYTE_VALUE = 240
MAX_THIRD_BYTE_VALUE = 254


def encode_variable_length(serializer: Serializer, length: int) -> None:
    """ Encode a length prefix, this modules's docstring has more details and examples.

    Raises `InvalidVariableLength` when `length` is negative or larger than `MAX_LENGTH_VALUE`.
    """
    if length < 0 or length > MAX_LENGTH_VALUE:
        raise InvalidVariableLength(f'length {length} cannot be encoded')

    if length <= MAX_SINGLE_BYTE_LENGTH:
        serializer.write_byte(length)
    elif length <= MAX_DOUBLE_BYTE_LENGTH:
        length -= MAX_SINGLE_BYTE_LENGTH + 1
        serializer.write_byte(MAX_SINGLE_BYTE_LENGTH + 1 + (length >> 8))
        serializer.write_byte(length & 0xff)
    else:
        length -= MAX_DOUBLE_BYTE_LENGTH + 1
        serializer.write_byte(MAX_SECOND_BYTE_VALUE + 1 + (length >> 16))
        serializer.write_byte((length >> 8) & 0xff)
        serializer.write_byte(length & 0xff)


def decode_variable_length(deserializer: Deserializer) -> int:
    """ Decode a length prefix, this modules's docstring has more details and examples.

    Raises `InvalidVariableLength` on a first byte of 255, and `UnexpectedEndOfStream` when the prefix is cut short.
    """
    b0 = deserializer.peek_byte()
    if b0 <= MAX_SINGLE_BYTE_LENGTH:
        deserializer.skip(1)
        return b0
    if b0 <= MAX_SECOND_BYTE_VALUE:
        b0, b1 = deserializer.read_bytes(2)
        return MAX_SINGLE_BYTE_LENGTH + 1 + ((b0 - MAX_SINGLE_BYTE_LENGTH - 1) << 8) + b1
    if b0 <= MAX_THIRD_BYTE_VALUE:
        b0, b1, b2 = deserializer.read_bytes(3)
        return MAX_DOUBLE_BYTE_LENGTH + 1 + ((b0 - MAX_SECOND_BYTE_VALUE - 1) << 16) + (b1 << 8) + b2
    raise InvalidVariableLength(f'invalid length prefix {b0}')


def encode_length_prefixed(serializer: Serializer, data: Buffer) -> None:
    """Encode the VL prefix for `data` followed by `data` itself."""
    data_view = memoryview(data)
    encode_variable_length(serializer, len(data_view))
    serializer.write_bytes(data_view)


def decode_length_prefixed(deserializer: Deserializer) -> bytes:
    """Decode a VL prefix and read exactly the announced number of bytes."""
    length = decode_variable_length(deserializer)
    return bytes(deserializer.read_bytes(length))
