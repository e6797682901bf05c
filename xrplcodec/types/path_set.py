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
Payment paths: a list of alternative paths, each one a list of steps.

Each step starts with a type byte whose flags tell which members follow, in this order: account (0x01), currency
(0x10) and issuer (0x20), 20 bytes each. Paths are separated by 0xFF and the whole set ends with 0x00. Unlike other
variable sized values a path set has no length prefix.

>>> path_set = PathSet.from_value([[{'account': 'rrrrrrrrrrrrrrrrrrrrBZbvji'}], [{'currency': 'USD'}]])
>>> path_set.to_hex()
'010000000000000000000000000000000000000001FF10000000000000000000000000555344000000000000'
>>> path_set.to_json()
[[{'account': 'rrrrrrrrrrrrrrrrrrrrBZbvji'}], [{'currency': 'USD'}]]
"""

from typing import Any, Optional

from typing_extensions import Self, override

from xrplcodec.exceptions import NotSerializable
from xrplcodec.serialization import Deserializer, Serializer
from xrplcodec.types.account_id import AccountID
from xrplcodec.types.currency import Currency
from xrplcodec.types.serialized_type import SerializedType

TYPE_ACCOUNT = 0x01
TYPE_CURRENCY = 0x10
TYPE_ISSUER = 0x20

PATH_SEPARATOR_BYTE = 0xFF
PATHSET_END_BYTE = 0x00

# (json key, type flag, type) in serialization order
_STEP_MEMBERS: list[tuple[str, int, type[SerializedType]]] = [
    ('account', TYPE_ACCOUNT, AccountID),
    ('currency', TYPE_CURRENCY, Currency),
    ('issuer', TYPE_ISSUER, AccountID),
]
_STEP_KEYS = frozenset(key for key, _, _ in _STEP_MEMBERS)
_STEP_TYPE_MASK = TYPE_ACCOUNT | TYPE_CURRENCY | TYPE_ISSUER


class PathSet(SerializedType):
    __slots__ = ()

    @override
    @classmethod
    def from_parser(cls, deserializer: Deserializer, length_hint: Optional[int] = None) -> Self:
        serializer = Serializer.build_bytes_serializer()
        steps_in_path = 0
        while True:
            step_type = deserializer.read_byte()
            serializer.write_byte(step_type)
            if step_type == PATHSET_END_BYTE:
                # only a path set without any path may end right away
                if not steps_in_path and serializer.cur_pos() > 1:
                    raise NotSerializable('empty path in path set')
                break
            if step_type == PATH_SEPARATOR_BYTE:
                if not steps_in_path:
                    raise NotSerializable('empty path in path set')
                steps_in_path = 0
                continue
            steps_in_path += 1
            if step_type & ~_STEP_TYPE_MASK:
                raise NotSerializable(f'invalid path step type 0x{step_type:02x}')
            for _, flag, member_type in _STEP_MEMBERS:
                if step_type & flag:
                    serializer.write_bytes(member_type.from_parser(deserializer).to_bytes())
        return cls(serializer.finalize())

    @override
    @classmethod
    def from_value(cls, value: Any) -> Self:
        if not isinstance(value, list) or not all(isinstance(path, list) for path in value):
            raise NotSerializable('PathSet expects a list of paths, each a list of steps')
        serializer = Serializer.build_bytes_serializer()
        for index, path in enumerate(value):
            if not path:
                raise NotSerializable('paths must have at least one step')
            if index:
                serializer.write_byte(PATH_SEPARATOR_BYTE)
            for step in path:
                _write_step(serializer, step)
        serializer.write_byte(PATHSET_END_BYTE)
        return cls(serializer.finalize())

    @override
    def to_json(self) -> list[list[dict[str, str]]]:
        deserializer = Deserializer.build_bytes_deserializer(self._buffer)
        if deserializer.peek_byte() == PATHSET_END_BYTE:
            return []
        paths: list[list[dict[str, str]]] = [[]]
        while True:
            step_type = deserializer.read_byte()
            if step_type == PATHSET_END_BYTE:
                break
            if step_type == PATH_SEPARATOR_BYTE:
                paths.append([])
                continue
            step: dict[str, str] = {}
            for key, flag, member_type in _STEP_MEMBERS:
                if step_type & flag:
                    step[key] = member_type.from_parser(deserializer).to_json()
            paths[-1].append(step)
        return paths


def _write_step(serializer: Serializer, step: Any) -> None:
    if not isinstance(step, dict) or not step or not set(step) <= _STEP_KEYS:
        raise NotSerializable(f'invalid path step: {step!r}')
    step_type = 0
    for key, flag, _ in _STEP_MEMBERS:
        if key in step:
            step_type |= flag
    serializer.write_byte(step_type)
    for key, _, member_type in _STEP_MEMBERS:
        if key in step:
            serializer.write_bytes(member_type.from_value(step[key]).to_bytes())
