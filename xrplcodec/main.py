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
Top-level codec API: JSON-like dicts to canonical hex and back.

>>> encode({'Sequence': 1, 'TransactionType': 'Payment'})
'1200002400000001'
>>> decode('1200002400000001')
{'TransactionType': 'Payment', 'Sequence': 1}
"""

from typing import Any, Optional

from xrplcodec.exceptions import NotSerializable
from xrplcodec.serialization import Deserializer
from xrplcodec.types import AccountID, STObject
from xrplcodec.utils.hex import bytes_to_hex, hex_to_bytes

TRANSACTION_SIGNATURE_PREFIX = bytes.fromhex('53545800')
TRANSACTION_MULTISIG_PREFIX = bytes.fromhex('534D5400')


def encode(value: dict[str, Any], *, strict: Optional[bool] = None) -> str:
    """Serialize a transaction or ledger object, returning uppercase hex."""
    return bytes_to_hex(_serialize_json(value, strict=strict))


def decode(data: str, *, strict: Optional[bool] = None) -> dict[str, Any]:
    """Parse the hex (of any case) of a transaction or ledger object back into its JSON form."""
    deserializer = Deserializer.build_bytes_deserializer(hex_to_bytes(data))
    obj = STObject.from_parser(deserializer, strict=strict)
    deserializer.finalize()
    return obj.to_json()


def encode_for_signing(value: dict[str, Any]) -> str:
    """Serialize only the signing fields, prefixed for single signing."""
    return bytes_to_hex(_serialize_json(value, prefix=TRANSACTION_SIGNATURE_PREFIX, only_signing=True))


def encode_for_multisigning(value: dict[str, Any], signing_account: str) -> str:
    """ Serialize only the signing fields, prefixed for multi-signing and suffixed by the signer's account id.

    The signer may be given as a classic address or as an X-address.
    """
    suffix = AccountID.from_value(signing_account).to_bytes()
    return bytes_to_hex(
        _serialize_json(value, prefix=TRANSACTION_MULTISIG_PREFIX, suffix=suffix, only_signing=True)
    )


def _serialize_json(
    value: Any,
    *,
    prefix: bytes = b'',
    suffix: bytes = b'',
    only_signing: bool = False,
    strict: Optional[bool] = None,
) -> bytes:
    if not isinstance(value, dict):
        raise NotSerializable(f'expected a dict, got {type(value).__name__}')
    obj = STObject.from_value(value, only_signing=only_signing, strict=strict)
    return prefix + obj.to_bytes() + suffix
