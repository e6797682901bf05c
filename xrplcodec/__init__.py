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

from xrplcodec.addresscodec import (
    classic_address_to_xaddress,
    decode_classic_address,
    decode_extended_address,
    encode_classic_address,
    encode_extended_address,
    is_valid_classic_address,
    is_valid_xaddress,
    xaddress_to_classic_address,
)
from xrplcodec.exceptions import XRPLCodecError
from xrplcodec.main import decode, encode, encode_for_multisigning, encode_for_signing
from xrplcodec.version import __version__

__all__ = [
    'XRPLCodecError',
    '__version__',
    'classic_address_to_xaddress',
    'decode',
    'decode_classic_address',
    'decode_extended_address',
    'encode',
    'encode_classic_address',
    'encode_extended_address',
    'encode_for_multisigning',
    'encode_for_signing',
    'is_valid_classic_address',
    'is_valid_xaddress',
    'xaddress_to_classic_address',
]
