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
X-addresses: a classic account id packed together with an optional destination tag and a network flag.

The base58check payload is 31 bytes long:

- 2 bytes of network prefix (`0x05 0x44` for the main network, `0x04 0x93` for test networks);
- the 20-byte account id;
- a flag byte, 1 when a tag is present and 0 otherwise;
- the tag, 4 bytes little-endian, zero when absent;
- 4 reserved zero bytes (room for 64-bit tags, which are not supported).
"""

from typing import Optional

from xrplcodec.addresscodec.codec import (
    CLASSIC_ADDRESS_LENGTH,
    decode_base58check,
    decode_classic_address,
    encode_base58check,
    encode_classic_address,
)
from xrplcodec.exceptions import InvalidAddress, InvalidAddressLength, InvalidExtendedAddress

MAIN_NET_PREFIX = bytes([0x05, 0x44])
TEST_NET_PREFIX = bytes([0x04, 0x93])

MAX_TAG = 2**32 - 1

_PAYLOAD_LENGTH = len(MAIN_NET_PREFIX) + CLASSIC_ADDRESS_LENGTH + 1 + 8
_RESERVED = bytes(4)


def encode_extended_address(account_id: bytes, tag: Optional[int], is_test_network: bool) -> str:
    """Encode a 20-byte account id, an optional 32-bit tag and the network flag as an X-address."""
    if len(account_id) != CLASSIC_ADDRESS_LENGTH:
        raise InvalidAddressLength(f'expected {CLASSIC_ADDRESS_LENGTH} bytes, got {len(account_id)}')
    if tag is not None and (isinstance(tag, bool) or not isinstance(tag, int) or not 0 <= tag <= MAX_TAG):
        raise InvalidExtendedAddress(f'invalid tag: {tag!r}')

    payload = b''.join([
        TEST_NET_PREFIX if is_test_network else MAIN_NET_PREFIX,
        bytes(account_id),
        bytes([0 if tag is None else 1]),
        (tag or 0).to_bytes(4, byteorder='little'),
        _RESERVED,
    ])
    return encode_base58check(payload)


def decode_extended_address(xaddress: str) -> tuple[bytes, Optional[int], bool]:
    """Decode an X-address into `(account_id, tag, is_test_network)`, `tag` is None when absent."""
    payload = decode_base58check(xaddress)
    if len(payload) != _PAYLOAD_LENGTH:
        raise InvalidExtendedAddress(f'expected a payload of {_PAYLOAD_LENGTH} bytes, got {len(payload)}')

    prefix = payload[:2]
    if prefix == MAIN_NET_PREFIX:
        is_test_network = False
    elif prefix == TEST_NET_PREFIX:
        is_test_network = True
    else:
        raise InvalidExtendedAddress(f'invalid network prefix {prefix.hex()}')

    account_id = payload[2:22]
    flag = payload[22]
    tag_bytes = payload[23:27]
    if payload[27:] != _RESERVED:
        raise InvalidExtendedAddress('64-bit tags are not supported')

    if flag == 0:
        if any(tag_bytes):
            raise InvalidExtendedAddress('tag is set but the tag flag is not')
        return account_id, None, is_test_network
    if flag == 1:
        return account_id, int.from_bytes(tag_bytes, byteorder='little'), is_test_network
    raise InvalidExtendedAddress(f'unsupported tag flag {flag}')


def classic_address_to_xaddress(classic_address: str, tag: Optional[int], is_test_network: bool) -> str:
    return encode_extended_address(decode_classic_address(classic_address), tag, is_test_network)


def xaddress_to_classic_address(xaddress: str) -> tuple[str, Optional[int], bool]:
    """Return `(classic_address, tag, is_test_network)` for an X-address."""
    account_id, tag, is_test_network = decode_extended_address(xaddress)
    return encode_classic_address(account_id), tag, is_test_network


def is_valid_xaddress(xaddress: str) -> bool:
    try:
        decode_extended_address(xaddress)
    except InvalidAddress:
        return False
    return True
