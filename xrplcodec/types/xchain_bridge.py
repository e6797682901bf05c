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

from typing import Any, Optional

from typing_extensions import Self, override

from xrplcodec.exceptions import NotSerializable
from xrplcodec.serialization import Deserializer, Serializer
from xrplcodec.types.account_id import AccountID
from xrplcodec.types.issue import Issue
from xrplcodec.types.serialized_type import SerializedType

_ACCOUNT_ID_LENGTH = 20

# (key, type) in serialization order, door accounts are VL encoded
_MEMBERS: list[tuple[str, type[SerializedType]]] = [
    ('LockingChainDoor', AccountID),
    ('LockingChainIssue', Issue),
    ('IssuingChainDoor', AccountID),
    ('IssuingChainIssue', Issue),
]


class XChainBridge(SerializedType):
    """The two door accounts and the two issues that identify a cross-chain bridge."""

    __slots__ = ()

    @override
    @classmethod
    def from_parser(cls, deserializer: Deserializer, length_hint: Optional[int] = None) -> Self:
        serializer = Serializer.build_bytes_serializer()
        for _, member_type in _MEMBERS:
            if member_type is AccountID:
                length = deserializer.read_variable_length()
                if length != _ACCOUNT_ID_LENGTH:
                    raise NotSerializable(f'bridge door accounts must have {_ACCOUNT_ID_LENGTH} bytes, got {length}')
                serializer.write_length_prefixed(AccountID.from_parser(deserializer).to_bytes())
            else:
                serializer.write_bytes(member_type.from_parser(deserializer).to_bytes())
        return cls(serializer.finalize())

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        if not isinstance(value, dict) or set(value) != {key for key, _ in _MEMBERS}:
            raise NotSerializable(f'XChainBridge needs exactly the keys {[key for key, _ in _MEMBERS]}')
        serializer = Serializer.build_bytes_serializer()
        for key, member_type in _MEMBERS:
            member = member_type.from_value(value[key])
            if member_type is AccountID:
                serializer.write_length_prefixed(member.to_bytes())
            else:
                serializer.write_bytes(member.to_bytes())
        return cls(serializer.finalize())

    @override
    def to_json(self) -> dict[str, Any]:
        deserializer = Deserializer.build_bytes_deserializer(self._buffer)
        result: dict[str, Any] = {}
        for key, member_type in _MEMBERS:
            if member_type is AccountID:
                deserializer.read_variable_length()
            result[key] = member_type.from_parser(deserializer).to_json()
        deserializer.finalize()
        return result
