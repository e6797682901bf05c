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


class XRPLCodecError(Exception):
    """General error class"""


class UnknownField(XRPLCodecError):
    """Field name or field header is not present in the definitions"""


class UnknownEnumValue(XRPLCodecError):
    """Transaction type, ledger entry type or transaction result is not in the definitions"""


class InvalidAddress(XRPLCodecError):
    """Address is invalid"""


class InvalidAddressAlphabet(InvalidAddress):
    """Address has characters outside of the XRPL base58 alphabet"""


class InvalidAddressChecksum(InvalidAddress):
    """Address checksum does not match its payload"""


class InvalidAddressLength(InvalidAddress):
    """Decoded address payload does not have the expected length"""


class InvalidExtendedAddress(InvalidAddress):
    """X-address has an invalid prefix, flag, tag or reserved bytes"""


class InvalidSeed(InvalidAddress):
    """Encoded seed has an unknown prefix or an invalid entropy length"""


class InvalidCurrencyCode(XRPLCodecError):
    """Currency is neither XRP, a 3-char ISO code nor a 160-bit hex code"""


class AmountOutOfRange(XRPLCodecError):
    """Amount cannot be represented: too large, too precise or malformed"""


class InvalidHex(XRPLCodecError):
    """Input is not a valid hex string"""


class NotSerializable(XRPLCodecError):
    """Value cannot be converted to the serialized type of its field"""


class TagMismatch(NotSerializable):
    """X-address tag conflicts with an explicit tag field, or is used in a field that cannot carry one"""
