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
Field registry: the process-wide, read-only view of definitions.json.

The registry is built on first use from the packaged definitions.json (or the file set in the settings) and never
changes afterwards, so it can be shared freely between threads.
"""

import json
from pathlib import Path
from threading import Lock
from typing import Optional, Union

from xrplcodec.definitions.field_info import DefinitionsFile, FieldInfo
from xrplcodec.exceptions import UnknownEnumValue, UnknownField
from xrplcodec.serialization import Deserializer, Serializer
from xrplcodec.serialization.encoding.field_header import FieldHeader

DEFAULT_DEFINITIONS_FILEPATH = str(Path(__file__).parent / 'definitions.json')


class Definitions:
    """Lookup tables for fields, types, transaction types, ledger entry types and transaction results."""

    def __init__(self, data: DefinitionsFile) -> None:
        self._type_codes: dict[str, int] = dict(data.TYPES)
        self._type_names: dict[int, str] = {code: name for name, code in data.TYPES.items()}

        self._fields_by_name: dict[str, FieldInfo] = {}
        self._fields_by_header: dict[FieldHeader, FieldInfo] = {}
        for name, definition in data.FIELDS:
            if definition.type not in self._type_codes:
                raise ValueError(f'field {name} has unknown type {definition.type}')
            field = FieldInfo(
                name=name,
                nth=definition.nth,
                type=definition.type,
                type_code=self._type_codes[definition.type],
                is_vl_encoded=definition.is_vl_encoded,
                is_serialized=definition.is_serialized,
                is_signing_field=definition.is_signing_field,
            )
            if name in self._fields_by_name:
                raise ValueError(f'duplicate field name {name}')
            if field.header in self._fields_by_header:
                raise ValueError(f'duplicate field header {tuple(field.header)} for {name}')
            self._fields_by_name[name] = field
            self._fields_by_header[field.header] = field

        self._transaction_types = _BiMap('transaction type', data.TRANSACTION_TYPES)
        self._ledger_entry_types = _BiMap('ledger entry type', data.LEDGER_ENTRY_TYPES)
        self._transaction_results = _BiMap('transaction result', data.TRANSACTION_RESULTS)

    @classmethod
    def from_file(cls, filepath: Union[Path, str]) -> 'Definitions':
        with open(filepath, 'r') as fp:
            raw = json.load(fp)
        return cls(DefinitionsFile.model_validate(raw))

    def __len__(self) -> int:
        return len(self._fields_by_name)

    def lookup_by_name(self, name: str) -> FieldInfo:
        try:
            return self._fields_by_name[name]
        except KeyError:
            raise UnknownField(f'unknown field name: {name!r}')

    def lookup_by_header(self, header: FieldHeader) -> FieldInfo:
        try:
            return self._fields_by_header[header]
        except KeyError:
            raise UnknownField(f'unknown field header: type_code={header.type_code} field_code={header.field_code}')

    def has_field(self, name: str) -> bool:
        return name in self._fields_by_name

    def get_type_code(self, type_name: str) -> int:
        return self._type_codes[type_name]

    def get_type_name(self, type_code: int) -> Optional[str]:
        return self._type_names.get(type_code)

    def get_transaction_type_code(self, name: str) -> int:
        return self._transaction_types.code(name)

    def get_transaction_type_name(self, code: int) -> str:
        return self._transaction_types.name(code)

    def get_ledger_entry_type_code(self, name: str) -> int:
        return self._ledger_entry_types.code(name)

    def get_ledger_entry_type_name(self, code: int) -> str:
        return self._ledger_entry_types.name(code)

    def get_transaction_result_code(self, name: str) -> int:
        return self._transaction_results.code(name)

    def get_transaction_result_name(self, code: int) -> str:
        return self._transaction_results.name(code)

    def find_transaction_type_name(self, code: int) -> Optional[str]:
        return self._transaction_types.find_name(code)

    def find_ledger_entry_type_name(self, code: int) -> Optional[str]:
        return self._ledger_entry_types.find_name(code)

    def find_transaction_result_name(self, code: int) -> Optional[str]:
        return self._transaction_results.find_name(code)


class _BiMap:
    def __init__(self, kind: str, codes: dict[str, int]) -> None:
        self._kind = kind
        self._codes = dict(codes)
        self._names = {code: name for name, code in codes.items()}

    def code(self, name: str) -> int:
        try:
            return self._codes[name]
        except KeyError:
            raise UnknownEnumValue(f'unknown {self._kind}: {name!r}')

    def name(self, code: int) -> str:
        try:
            return self._names[code]
        except KeyError:
            raise UnknownEnumValue(f'unknown {self._kind} code: {code}')

    def find_name(self, code: int) -> Optional[str]:
        return self._names.get(code)


def load_definitions(filepath: Union[Path, str]) -> Definitions:
    """Build a new registry from the given file, the process-wide one is not affected."""
    return Definitions.from_file(filepath)


_definitions_singleton: Optional[Definitions] = None
_definitions_lock = Lock()


def get_definitions() -> Definitions:
    """Return the process-wide registry, building it exactly once even when first called from many threads."""
    global _definitions_singleton
    if _definitions_singleton is not None:
        return _definitions_singleton
    from xrplcodec.conf.get_settings import get_global_settings
    settings = get_global_settings()
    with _definitions_lock:
        if _definitions_singleton is None:
            _definitions_singleton = load_definitions(settings.DEFINITIONS_FILEPATH or DEFAULT_DEFINITIONS_FILEPATH)
    assert _definitions_singleton is not None
    return _definitions_singleton


def lookup_by_name(name: str) -> FieldInfo:
    return get_definitions().lookup_by_name(name)


def lookup_by_header(header: FieldHeader) -> FieldInfo:
    return get_definitions().lookup_by_header(header)


def compare(a: FieldInfo, b: FieldInfo) -> int:
    """Canonical order of two fields: negative when `a` goes first, positive when `b` does, 0 for the same slot."""
    return (a.ordinal > b.ordinal) - (a.ordinal < b.ordinal)


def sort_key(field: FieldInfo) -> int:
    return field.ordinal


def encode_field_name(name: str) -> str:
    """Return the uppercase hex of the header of the named field.

    >>> encode_field_name('Sequence')
    '24'
    >>> encode_field_name('Paths')
    '0112'
    """
    field = lookup_by_name(name)
    serializer = Serializer.build_bytes_serializer()
    serializer.write_field_header(field.type_code, field.nth)
    return bytes(serializer.finalize()).hex().upper()


def decode_field_name(field_id: str) -> str:
    """Return the name of the field whose header is the given hex string.

    >>> decode_field_name('24')
    'Sequence'
    """
    from xrplcodec.utils.hex import hex_to_bytes
    deserializer = Deserializer.build_bytes_deserializer(hex_to_bytes(field_id))
    header = deserializer.read_field_header()
    deserializer.finalize()
    return lookup_by_header(header).name
