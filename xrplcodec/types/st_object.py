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
STObject: a set of named fields, always serialized in canonical field order.

Each field is written as its header, then a VL length prefix if the field is VL encoded, then the value bytes.
Nested objects are closed by the object end marker (0xE1), the top level object simply ends with the input.
"""

from typing import TYPE_CHECKING, Any, Optional

from structlog import get_logger
from typing_extensions import Self, override

from xrplcodec.addresscodec import is_valid_xaddress, xaddress_to_classic_address
from xrplcodec.definitions import FieldInfo, get_definitions
from xrplcodec.definitions.registry import Definitions
from xrplcodec.exceptions import NotSerializable, TagMismatch, UnknownField
from xrplcodec.serialization import Deserializer, InvalidFieldHeader, MaxDepthExceeded, Serializer
from xrplcodec.serialization.encoding.field_header import FieldHeader
from xrplcodec.types.account_id import AccountID
from xrplcodec.types.serialized_type import SerializedType

if TYPE_CHECKING:
    from xrplcodec.conf.settings import CodecSettings

logger = get_logger()

OBJECT_END_MARKER_BYTE = 0xE1
OBJECT_END_MARKER = FieldHeader(14, 1)
ARRAY_END_MARKER = FieldHeader(15, 1)

_OBJECT_TYPE = 'STObject'
_ARRAY_TYPE = 'STArray'
_ACCOUNT_ID_TYPE = 'AccountID'
_ACCOUNT_FIELD = 'Account'

# types whose fields are always VL encoded, used to skip fields missing from the definitions
_VL_TYPES = frozenset(['Blob', 'AccountID', 'Vector256'])

_TRANSACTION_TYPE = 'TransactionType'
_LEDGER_ENTRY_TYPE = 'LedgerEntryType'
_TRANSACTION_RESULT = 'TransactionResult'
_UNL_MODIFY = 'UNLModify'

# address field -> field that takes the tag of an X-address
_TAG_FIELDS = {
    'Account': 'SourceTag',
    'Destination': 'DestinationTag',
}


def _get_settings() -> 'CodecSettings':
    from xrplcodec.conf.get_settings import get_global_settings
    return get_global_settings()


def resolve_strict(strict: Optional[bool]) -> bool:
    return _get_settings().STRICT_UNKNOWN_FIELDS if strict is None else strict


def check_depth(depth: int) -> None:
    max_depth = _get_settings().MAX_NESTING_DEPTH
    if depth > max_depth:
        raise MaxDepthExceeded(f'objects nested deeper than {max_depth} levels')


class STObject(SerializedType):
    __slots__ = ('_fields',)

    def __init__(self, fields: list[tuple[FieldInfo, SerializedType]]) -> None:
        super().__init__(_serialize_fields(fields))
        self._fields: dict[str, SerializedType] = {field.name: value for field, value in fields}

    @property
    def fields(self) -> dict[str, SerializedType]:
        """Field values by name, in serialization order."""
        return dict(self._fields)

    def __getitem__(self, name: str) -> SerializedType:
        return self._fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    @override
    @classmethod
    def from_parser(
        cls,
        deserializer: Deserializer,
        length_hint: Optional[int] = None,
        *,
        nested: bool = False,
        strict: Optional[bool] = None,
        depth: int = 0,
    ) -> Self:
        """ Read fields until the object end marker, or until the input is exhausted when not `nested`.

        The object end marker is consumed.
        """
        check_depth(depth)
        strict = resolve_strict(strict)
        definitions = get_definitions()
        fields: list[tuple[FieldInfo, SerializedType]] = []
        seen: set[str] = set()

        while nested or not deserializer.is_empty():
            header = deserializer.read_field_header()
            if header == OBJECT_END_MARKER:
                # at the top level the caller decides whether bytes after the marker are acceptable
                break
            # TransactionType sorts before Account, so it is known by the time Account is read
            item = read_field(
                deserializer, header, definitions, strict=strict, depth=depth, unl_modify=_is_unl_modify(fields),
            )
            if item is None:
                continue
            field, value = item
            if field.name in seen:
                raise InvalidFieldHeader(f'duplicate field {field.name}')
            seen.add(field.name)
            fields.append(item)

        return cls(fields)

    @override
    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        only_signing: bool = False,
        strict: Optional[bool] = None,
        depth: int = 0,
    ) -> Self:
        """ Build an object from its JSON form.

        Fields not meant to be serialized are ignored, and so are non-signing fields when `only_signing` is set.
        Unknown field names raise `UnknownField` in strict mode and are skipped otherwise.
        """
        if not isinstance(value, dict):
            raise NotSerializable(f'STObject expects a dict, got {type(value).__name__}')
        check_depth(depth)
        strict = resolve_strict(strict)
        definitions = get_definitions()

        fields: list[tuple[FieldInfo, Any]] = []
        for name, field_value in _expand_xaddresses(value, definitions).items():
            if not definitions.has_field(name):
                if strict:
                    raise UnknownField(f'unknown field name: {name!r}')
                logger.warn('skipping unknown field', field=name)
                continue
            field = definitions.lookup_by_name(name)
            if not field.is_serialized:
                continue
            if only_signing and not field.is_signing_field:
                continue
            fields.append((field, field_value))
        fields.sort(key=lambda item: item[0].ordinal)

        return cls([
            (field, _value_from_json(field, field_value, definitions, strict=strict, depth=depth))
            for field, field_value in fields
        ])

    @override
    def to_json(self) -> dict[str, Any]:
        definitions = get_definitions()
        result: dict[str, Any] = {}
        for name, value in self._fields.items():
            result[name] = _enum_to_json(name, value.to_json(), definitions)
        return result


def read_field(
    deserializer: Deserializer,
    header: FieldHeader,
    definitions: Definitions,
    *,
    strict: bool,
    depth: int,
    unl_modify: bool = False,
) -> Optional[tuple[FieldInfo, SerializedType]]:
    """ Read the value of the field with the given (already consumed) header.

    Returns None when the field is not in the definitions and `strict` is not set: the value is read according to its
    type and dropped. A field whose type is unknown cannot be skipped and always raises `UnknownField`.
    `unl_modify` is set inside a UNLModify transaction, whose Account may be empty.
    """
    if header == ARRAY_END_MARKER:
        raise InvalidFieldHeader('array end marker outside of an array')
    try:
        field = definitions.lookup_by_header(header)
    except UnknownField:
        if strict:
            raise
        type_name = definitions.get_type_name(header.type_code)
        if type_name is None:
            raise
        _read_value(deserializer, type_name, type_name in _VL_TYPES, strict=strict, depth=depth)
        logger.warn('skipping unknown field', type_code=header.type_code, field_code=header.field_code)
        return None
    empty_account = unl_modify and field.name == _ACCOUNT_FIELD
    return field, _read_value(
        deserializer, field.type, field.is_vl_encoded, strict=strict, depth=depth, empty_account=empty_account,
    )


def _read_value(
    deserializer: Deserializer,
    type_name: str,
    is_vl_encoded: bool,
    *,
    strict: bool,
    depth: int,
    empty_account: bool = False,
) -> SerializedType:
    from xrplcodec.types import STArray, get_type_by_name

    if type_name == _OBJECT_TYPE:
        return STObject.from_parser(deserializer, nested=True, strict=strict, depth=depth + 1)
    if type_name == _ARRAY_TYPE:
        return STArray.from_parser(deserializer, strict=strict, depth=depth + 1)

    type_class = get_type_by_name(type_name)
    if not is_vl_encoded:
        return type_class.from_parser(deserializer)

    length = deserializer.read_variable_length()
    if empty_account and length == 0:
        return AccountID(bytes(20))
    sub_deserializer = Deserializer.build_bytes_deserializer(deserializer.read_bytes(length))
    value = type_class.from_parser(sub_deserializer, length)
    sub_deserializer.finalize()
    return value


def _value_from_json(
    field: FieldInfo,
    value: Any,
    definitions: Definitions,
    *,
    strict: bool,
    depth: int,
) -> SerializedType:
    from xrplcodec.types import STArray, get_type_by_name

    if field.type == _OBJECT_TYPE:
        return STObject.from_value(value, strict=strict, depth=depth + 1)
    if field.type == _ARRAY_TYPE:
        return STArray.from_value(value, strict=strict, depth=depth + 1)
    return get_type_by_name(field.type).from_value(_enum_from_json(field.name, value, definitions))


def _serialize_fields(fields: list[tuple[FieldInfo, SerializedType]]) -> bytes:
    serializer = Serializer.build_bytes_serializer()
    is_unl_modify = _is_unl_modify(fields)
    for field, value in fields:
        serializer.write_field_header(field.type_code, field.nth)
        if field.is_vl_encoded:
            if is_unl_modify and field.name == _ACCOUNT_FIELD:
                serializer.write_variable_length(0)
            else:
                serializer.write_length_prefixed(value.to_bytes())
        else:
            serializer.write_bytes(value.to_bytes())
        if field.type == _OBJECT_TYPE:
            serializer.write_byte(OBJECT_END_MARKER_BYTE)
    return bytes(serializer.finalize())


def _is_unl_modify(fields: list[tuple[FieldInfo, SerializedType]]) -> bool:
    for field, value in fields:
        if field.name == _TRANSACTION_TYPE:
            return value.to_json() == get_definitions().get_transaction_type_code(_UNL_MODIFY)
    return False


def _enum_from_json(name: str, value: Any, definitions: Definitions) -> Any:
    if not isinstance(value, str):
        return value
    if name == _TRANSACTION_TYPE:
        return definitions.get_transaction_type_code(value)
    if name == _LEDGER_ENTRY_TYPE:
        return definitions.get_ledger_entry_type_code(value)
    if name == _TRANSACTION_RESULT:
        return definitions.get_transaction_result_code(value)
    return value


def _enum_to_json(name: str, value: Any, definitions: Definitions) -> Any:
    enum_name: Optional[str] = None
    if name == _TRANSACTION_TYPE:
        enum_name = definitions.find_transaction_type_name(value)
    elif name == _LEDGER_ENTRY_TYPE:
        enum_name = definitions.find_ledger_entry_type_name(value)
    elif name == _TRANSACTION_RESULT:
        enum_name = definitions.find_transaction_result_name(value)
    # unknown codes are kept as plain numbers
    return value if enum_name is None else enum_name


def _expand_xaddresses(value: dict[str, Any], definitions: Definitions) -> dict[str, Any]:
    """ Replace X-addresses by classic addresses, moving their tags to SourceTag/DestinationTag.

    Raises `TagMismatch` when the tag conflicts with an explicit tag field, or when an X-address with a tag is used in
    a field that has no tag field.
    """
    result = dict(value)
    for name, field_value in value.items():
        if not isinstance(field_value, str) or not definitions.has_field(name):
            continue
        if definitions.lookup_by_name(name).type != _ACCOUNT_ID_TYPE or not is_valid_xaddress(field_value):
            continue
        classic_address, tag, _ = xaddress_to_classic_address(field_value)
        result[name] = classic_address
        if tag is None:
            continue
        tag_name = _TAG_FIELDS.get(name)
        if tag_name is None:
            raise TagMismatch(f'{name} cannot be an X-address with a tag')
        if tag_name in value and value[tag_name] != tag:
            raise TagMismatch(f'{name} X-address tag {tag} does not match {tag_name} {value[tag_name]}')
        result[tag_name] = tag
    return result
