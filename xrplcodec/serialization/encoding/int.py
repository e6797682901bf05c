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
This module implements encoding of unsigned integers with a fixed size, the size is parametrized.

The encoding format itself is a standard big-endian format, it is used by the UInt types and by every fixed width
field of the composite types.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1)  # writes 00
>>> encode_int(se, 255, length=1)  # writes ff
>>> encode_int(se, 1234, length=2)  # writes 04d2
>>> encode_int(se, 2**32 - 1, length=4)  # writes ffffffff
>>> bytes(se.finalize()).hex()
'00ff04d2ffffffff'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ff04d2ffffffff'))
>>> decode_int(de, length=1)  # reads 00
0
>>> decode_int(de, length=1)  # reads ff
255
>>> decode_int(de, length=2)  # reads 04d2
1234
>>> decode_int(de, length=4)  # reads ffffffff
4294967295

>>> encode_int(se, 256, length=1)
Traceback (most recent call last):
...
xrplcodec.exceptions.NotSerializable: 256 does not fit in 1 unsigned bytes
"""

from xrplcodec.exceptions import NotSerializable
from xrplcodec.serialization import Deserializer, Serializer


def encode_int(serializer: Serializer, number: int, *, length: int) -> None:
    """ Encode an unsigned int using the given byte-length.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='big', signed=False)
    except OverflowError:
        raise NotSerializable(f'{number} does not fit in {length} unsigned bytes')
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int) -> int:
    """ Decode an unsigned int using the given byte-length.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='big', signed=False)
