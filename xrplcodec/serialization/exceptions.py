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

from xrplcodec.exceptions import XRPLCodecError


class SerializationError(XRPLCodecError):
    """Base class for errors while reading or writing the binary format"""


class UnexpectedEndOfStream(SerializationError):
    """There are fewer bytes left than what had to be read"""


class TrailingData(SerializationError):
    """Bytes were left after the whole input should have been consumed"""


class InvalidFieldHeader(SerializationError):
    """Field header is not canonical, or its codes are out of the encodable range"""


class InvalidVariableLength(SerializationError):
    """Variable length prefix is malformed or the length cannot be represented"""


class MaxDepthExceeded(SerializationError):
    """Nested objects and arrays go deeper than the configured maximum"""
