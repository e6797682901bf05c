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
Base58Check encoding of classic addresses, seeds and public keys.

Every encoded value is `prefix || payload || checksum`, where the checksum is the first 4 bytes of a double sha256
of `prefix || payload`, written with the XRPL base58 alphabet (`base58.XRP_ALPHABET`).
"""

import hashlib
from enum import Enum

import base58

from xrplcodec.exceptions import (
    InvalidAddress,
    InvalidAddressAlphabet,
    InvalidAddressChecksum,
    InvalidAddressLength,
    InvalidSeed,
)

XRPL_ALPHABET: bytes = base58.XRP_ALPHABET
_XRPL_ALPHABET_CHARS = frozenset(XRPL_ALPHABET.decode('ascii'))

CHECKSUM_LENGTH = 4

CLASSIC_ADDRESS_PREFIX = bytes([0x00])
ACCOUNT_PUBLIC_KEY_PREFIX = bytes([0x23])
FAMILY_SEED_PREFIX = bytes([0x21])
NODE_PUBLIC_KEY_PREFIX = bytes([0x1C])
ED25519_SEED_PREFIX = bytes([0x01, 0xE1, 0x4B])

CLASSIC_ADDRESS_LENGTH = 20
NODE_PUBLIC_KEY_LENGTH = 33
ACCOUNT_PUBLIC_KEY_LENGTH = 33
SEED_LENGTH = 16


class CryptoAlgorithm(str, Enum):
    """Key algorithm a seed is meant for, it is encoded in the seed prefix."""
    ED25519 = 'ed25519'
    SECP256K1 = 'secp256k1'


_SEED_PREFIXES = {
    CryptoAlgorithm.ED25519: ED25519_SEED_PREFIX,
    CryptoAlgorithm.SECP256K1: FAMILY_SEED_PREFIX,
}


def get_checksum(payload: bytes) -> bytes:
    """ Calculate double sha256 of the payload and gets first 4 bytes

        :param payload: version prefix followed by the encoded bytes
        :type payload: bytes

        :return: checksum of the payload
        :rtype: bytes
    """
    return hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:CHECKSUM_LENGTH]


def encode_base58check(payload: bytes) -> str:
    """ Append the checksum to the payload and encode it in base58

        :param payload: version prefix followed by the encoded bytes
        :type payload: bytes

        :return: the base58 string
        :rtype: string
    """
    return base58.b58encode(payload + get_checksum(payload), alphabet=XRPL_ALPHABET).decode('ascii')


def decode_base58check(encoded: str) -> bytes:
    """ Decode a base58 string and validate its checksum

    :param encoded: the base58 string
    :type encoded: string

    :raises InvalidAddressAlphabet: if there are characters outside of the XRPL alphabet
    :raises InvalidAddressChecksum: if the checksum does not match
    :raises InvalidAddressLength: if there are not even enough bytes for a checksum

    :return: the payload, without the checksum
    :rtype: bytes
    """
    if not isinstance(encoded, str):
        raise InvalidAddress(f'expected a string, got {type(encoded).__name__}')
    invalid_chars = set(encoded) - _XRPL_ALPHABET_CHARS
    if invalid_chars:
        raise InvalidAddressAlphabet(f'invalid base58 characters: {"".join(sorted(invalid_chars))!r}')
    decoded = base58.b58decode(encoded, alphabet=XRPL_ALPHABET)
    if len(decoded) <= CHECKSUM_LENGTH:
        raise InvalidAddressLength(f'{encoded!r} is too short')
    payload, checksum = decoded[:-CHECKSUM_LENGTH], decoded[-CHECKSUM_LENGTH:]
    if get_checksum(payload) != checksum:
        raise InvalidAddressChecksum(f'invalid checksum for {encoded!r}')
    return payload


def _encode(data: bytes, prefix: bytes, expected_length: int) -> str:
    if len(data) != expected_length:
        raise InvalidAddressLength(f'expected {expected_length} bytes, got {len(data)}')
    return encode_base58check(prefix + data)


def _decode(encoded: str, prefix: bytes, expected_length: int) -> bytes:
    payload = decode_base58check(encoded)
    if len(payload) != len(prefix) + expected_length:
        raise InvalidAddressLength(f'expected a payload of {len(prefix) + expected_length} bytes, got {len(payload)}')
    if not payload.startswith(prefix):
        raise InvalidAddress(f'unexpected version prefix {payload[:len(prefix)].hex()}')
    return payload[len(prefix):]


def encode_classic_address(account_id: bytes) -> str:
    """Encode a 20-byte account id as a classic address (r...)."""
    return _encode(bytes(account_id), CLASSIC_ADDRESS_PREFIX, CLASSIC_ADDRESS_LENGTH)


def decode_classic_address(classic_address: str) -> bytes:
    """Decode a classic address (r...) into its 20-byte account id."""
    return _decode(classic_address, CLASSIC_ADDRESS_PREFIX, CLASSIC_ADDRESS_LENGTH)


def is_valid_classic_address(classic_address: str) -> bool:
    try:
        decode_classic_address(classic_address)
    except InvalidAddress:
        return False
    return True


def encode_node_public_key(public_key: bytes) -> str:
    return _encode(bytes(public_key), NODE_PUBLIC_KEY_PREFIX, NODE_PUBLIC_KEY_LENGTH)


def decode_node_public_key(node_public_key: str) -> bytes:
    return _decode(node_public_key, NODE_PUBLIC_KEY_PREFIX, NODE_PUBLIC_KEY_LENGTH)


def encode_account_public_key(public_key: bytes) -> str:
    return _encode(bytes(public_key), ACCOUNT_PUBLIC_KEY_PREFIX, ACCOUNT_PUBLIC_KEY_LENGTH)


def decode_account_public_key(account_public_key: str) -> bytes:
    return _decode(account_public_key, ACCOUNT_PUBLIC_KEY_PREFIX, ACCOUNT_PUBLIC_KEY_LENGTH)


def encode_seed(entropy: bytes, algorithm: CryptoAlgorithm) -> str:
    """Encode 16 bytes of entropy as a seed (s...) for the given algorithm."""
    if len(entropy) != SEED_LENGTH:
        raise InvalidSeed(f'seed entropy must have {SEED_LENGTH} bytes, got {len(entropy)}')
    return encode_base58check(_SEED_PREFIXES[CryptoAlgorithm(algorithm)] + bytes(entropy))


def decode_seed(seed: str) -> tuple[bytes, CryptoAlgorithm]:
    """Decode a seed (s...) into its 16 bytes of entropy and the algorithm given by its prefix."""
    payload = decode_base58check(seed)
    for algorithm, prefix in _SEED_PREFIXES.items():
        if payload.startswith(prefix) and len(payload) == len(prefix) + SEED_LENGTH:
            return payload[len(prefix):], algorithm
    raise InvalidSeed(f'{seed!r} is not a valid seed')
