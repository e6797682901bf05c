import json
import os
import tempfile
import threading
import unittest
from unittest.mock import patch

import pytest

from xrplcodec.definitions import (
    FieldHeader,
    compare,
    decode_field_name,
    encode_field_name,
    get_definitions,
    load_definitions,
    lookup_by_header,
    lookup_by_name,
    sort_key,
)
from xrplcodec.definitions.registry import DEFAULT_DEFINITIONS_FILEPATH
from xrplcodec.exceptions import InvalidHex, UnknownEnumValue, UnknownField
from xrplcodec.serialization import InvalidFieldHeader, TrailingData


@pytest.mark.parametrize('name, field_id', [
    ('LedgerEntryType', '11'),
    ('TransactionType', '12'),
    ('Flags', '22'),
    ('Sequence', '24'),
    ('DestinationTag', '2E'),
    ('FirstLedgerSequence', '201A'),
    ('Account', '81'),
    ('Destination', '83'),
    ('Memo', 'EA'),
    ('Memos', 'F9'),
    ('Signers', 'F3'),
    ('TickSize', '001010'),
    ('Paths', '0112'),
    ('Indexes', '0113'),
    ('BaseAsset', '011A'),
    ('XChainBridge', '0119'),
    ('AssetPrice', '3017'),
])
def test_field_id(name, field_id):
    assert encode_field_name(name) == field_id
    assert decode_field_name(field_id) == name
    assert decode_field_name(field_id.lower()) == name


def test_field_id_errors():
    with pytest.raises(UnknownField):
        encode_field_name('NotAField')
    with pytest.raises(UnknownField):
        decode_field_name('00FFFF')
    with pytest.raises(InvalidHex):
        decode_field_name('2')
    with pytest.raises(TrailingData):
        decode_field_name('2424')
    with pytest.raises(InvalidFieldHeader):
        decode_field_name('2004')
    # not serialized fields have codes that cannot be written in a header
    with pytest.raises(InvalidFieldHeader):
        encode_field_name('hash')


class FieldRegistryTest(unittest.TestCase):
    def test_lookup(self) -> None:
        field = lookup_by_name('Account')
        self.assertEqual(field.name, 'Account')
        self.assertEqual(field.type, 'AccountID')
        self.assertEqual(field.type_code, 8)
        self.assertEqual(field.nth, 1)
        self.assertEqual(field.field_code, 1)
        self.assertEqual(field.header, FieldHeader(8, 1))
        self.assertTrue(field.is_vl_encoded)
        self.assertTrue(field.is_serialized)
        self.assertTrue(field.is_signing_field)
        self.assertIs(lookup_by_header(FieldHeader(8, 1)), field)

        signature = lookup_by_name('TxnSignature')
        self.assertFalse(signature.is_signing_field)
        self.assertFalse(lookup_by_name('hash').is_serialized)

    def test_unknown(self) -> None:
        with self.assertRaises(UnknownField):
            lookup_by_name('Acount')
        with self.assertRaises(UnknownField):
            lookup_by_header(FieldHeader(2, 255))
        self.assertFalse(get_definitions().has_field('Acount'))

    def test_headers_are_unique(self) -> None:
        definitions = get_definitions()
        self.assertGreater(len(definitions), 200)

    def test_canonical_order(self) -> None:
        sequence = lookup_by_name('Sequence')
        flags = lookup_by_name('Flags')
        account = lookup_by_name('Account')
        transaction_type = lookup_by_name('TransactionType')
        self.assertLess(compare(flags, sequence), 0)
        self.assertGreater(compare(account, sequence), 0)
        self.assertEqual(compare(account, lookup_by_name('Account')), 0)
        # type code first, then field code
        self.assertLess(compare(transaction_type, flags), 0)

        names = ['Account', 'Sequence', 'TransactionType', 'Fee', 'Flags', 'Memos', 'SigningPubKey']
        ordered = [field.name for field in sorted(map(lookup_by_name, names), key=sort_key)]
        self.assertEqual(ordered, ['TransactionType', 'Flags', 'Sequence', 'Fee', 'SigningPubKey', 'Account', 'Memos'])

    def test_types(self) -> None:
        definitions = get_definitions()
        self.assertEqual(definitions.get_type_code('Amount'), 6)
        self.assertEqual(definitions.get_type_name(6), 'Amount')
        self.assertEqual(definitions.get_type_name(26), 'Currency')
        self.assertIsNone(definitions.get_type_name(200))

    def test_enums(self) -> None:
        definitions = get_definitions()
        self.assertEqual(definitions.get_transaction_type_code('Payment'), 0)
        self.assertEqual(definitions.get_transaction_type_name(7), 'OfferCreate')
        self.assertEqual(definitions.get_ledger_entry_type_code('AccountRoot'), 97)
        self.assertEqual(definitions.get_ledger_entry_type_name(111), 'Offer')
        self.assertEqual(definitions.get_transaction_result_code('tecPATH_DRY'), 128)
        self.assertEqual(definitions.get_transaction_result_name(0), 'tesSUCCESS')
        self.assertIsNone(definitions.find_transaction_type_name(9999))

        with self.assertRaises(UnknownEnumValue):
            definitions.get_transaction_type_code('Paymnt')
        with self.assertRaises(UnknownEnumValue):
            definitions.get_ledger_entry_type_name(1)
        with self.assertRaises(UnknownEnumValue):
            definitions.get_transaction_result_name(-12345)


class LoadDefinitionsTest(unittest.TestCase):
    def _write(self, data: dict) -> str:
        fd, path = tempfile.mkstemp(suffix='.json')
        with os.fdopen(fd, 'w') as fp:
            json.dump(data, fp)
        self.addCleanup(os.remove, path)
        return path

    def _load_default(self) -> dict:
        with open(DEFAULT_DEFINITIONS_FILEPATH) as fp:
            return json.load(fp)

    def test_load_custom_file(self) -> None:
        data = self._load_default()
        data['FIELDS'].append(['MyNewField', {
            'nth': 200,
            'isVLEncoded': False,
            'isSerialized': True,
            'isSigningField': True,
            'type': 'UInt32',
        }])
        definitions = load_definitions(self._write(data))
        self.assertEqual(definitions.lookup_by_header(FieldHeader(2, 200)).name, 'MyNewField')
        # the process-wide registry is not affected
        self.assertFalse(get_definitions().has_field('MyNewField'))

    def test_duplicate_header(self) -> None:
        data = self._load_default()
        data['FIELDS'].append(['OtherSequence', {
            'nth': 4,
            'isVLEncoded': False,
            'isSerialized': True,
            'isSigningField': True,
            'type': 'UInt32',
        }])
        with self.assertRaises(ValueError):
            load_definitions(self._write(data))

    def test_unknown_type(self) -> None:
        data = self._load_default()
        data['FIELDS'].append(['Weird', {
            'nth': 1,
            'isVLEncoded': False,
            'isSerialized': True,
            'isSigningField': True,
            'type': 'UInt128',
        }])
        with self.assertRaises(ValueError):
            load_definitions(self._write(data))


class RegistrySingletonTest(unittest.TestCase):
    def test_built_once_across_threads(self) -> None:
        from xrplcodec.definitions import registry

        threads_count = 8
        barrier = threading.Barrier(threads_count)
        results: list = []

        def run() -> None:
            barrier.wait()
            results.append(get_definitions())

        with patch.object(registry, '_definitions_singleton', None), \
                patch.object(registry, 'load_definitions', wraps=registry.load_definitions) as loader:
            threads = [threading.Thread(target=run) for _ in range(threads_count)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        self.assertEqual(loader.call_count, 1)
        self.assertEqual(len(results), threads_count)
        self.assertTrue(all(definitions is results[0] for definitions in results))
