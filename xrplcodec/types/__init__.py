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

from xrplcodec.exceptions import NotSerializable
from xrplcodec.types.account_id import AccountID
from xrplcodec.types.amount import Amount
from xrplcodec.types.blob import Blob
from xrplcodec.types.currency import Currency
from xrplcodec.types.hash import Hash, Hash128, Hash160, Hash256
from xrplcodec.types.issue import Issue
from xrplcodec.types.path_set import PathSet
from xrplcodec.types.serialized_type import SerializedType
from xrplcodec.types.st_array import STArray
from xrplcodec.types.st_object import STObject
from xrplcodec.types.uint import UInt, UInt8, UInt16, UInt32, UInt64
from xrplcodec.types.vector256 import Vector256
from xrplcodec.types.xchain_bridge import XChainBridge

_TYPES: dict[str, type[SerializedType]] = {
    'UInt8': UInt8,
    'UInt16': UInt16,
    'UInt32': UInt32,
    'UInt64': UInt64,
    'Hash128': Hash128,
    'Hash160': Hash160,
    'Hash256': Hash256,
    'Blob': Blob,
    'AccountID': AccountID,
    'Currency': Currency,
    'Amount': Amount,
    'PathSet': PathSet,
    'Vector256': Vector256,
    'Issue': Issue,
    'XChainBridge': XChainBridge,
    'STObject': STObject,
    'STArray': STArray,
}


def get_type_by_name(name: str) -> type[SerializedType]:
    """Return the class that implements the named type of the definitions."""
    try:
        return _TYPES[name]
    except KeyError:
        raise NotSerializable(f'type {name} is not supported')


__all__ = [
    'AccountID',
    'Amount',
    'Blob',
    'Currency',
    'Hash',
    'Hash128',
    'Hash160',
    'Hash256',
    'Issue',
    'PathSet',
    'STArray',
    'STObject',
    'SerializedType',
    'UInt',
    'UInt8',
    'UInt16',
    'UInt32',
    'UInt64',
    'Vector256',
    'XChainBridge',
    'get_type_by_name',
]
