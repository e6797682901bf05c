from contextlib import redirect_stdout
from io import StringIO
from unittest.mock import patch

from tests.unittest import OFFER_CREATE_HEX, OFFER_CREATE_JSON, TestCase
from xrplcodec import decode, decode_classic_address, encode, encode_for_multisigning, encode_for_signing
from xrplcodec.exceptions import InvalidAddress, InvalidHex, NotSerializable
from xrplcodec.serialization import TrailingData

# OfferCreate without its TxnSignature field, which is not a signing field
OFFER_CREATE_SIGNING_HEX = OFFER_CREATE_HEX.replace('7447' + OFFER_CREATE_JSON['TxnSignature'], '')

SIGNERS = [{
    'Signer': {
        'Account': 'rrrrrrrrrrrrrrrrrrrrBZbvji',
        'SigningPubKey': OFFER_CREATE_JSON['SigningPubKey'],
        'TxnSignature': OFFER_CREATE_JSON['TxnSignature'],
    },
}]


class EncodeDecodeTest(TestCase):
    def test_encode(self) -> None:
        self.assertEqual(encode(OFFER_CREATE_JSON), OFFER_CREATE_HEX)

    def test_decode(self) -> None:
        self.assertEqual(decode(OFFER_CREATE_HEX), OFFER_CREATE_JSON)

    def test_decode_lowercase(self) -> None:
        self.assertEqual(decode(OFFER_CREATE_HEX.lower()), OFFER_CREATE_JSON)

    def test_decode_empty(self) -> None:
        self.assertEqual(decode(''), {})
        self.assertEqual(encode({}), '')

    def test_invalid_hex(self) -> None:
        for data in ['1', '12000G', ' 1200', b'1200']:
            with self.assertRaises(InvalidHex):
                decode(data)  # type: ignore[arg-type]

    def test_trailing_data(self) -> None:
        with self.assertRaises(TrailingData):
            decode(OFFER_CREATE_HEX + 'E1' + '00')

    def test_not_a_dict(self) -> None:
        with self.assertRaises(NotSerializable):
            encode(None)  # type: ignore[arg-type]
        with self.assertRaises(NotSerializable):
            encode_for_signing([])  # type: ignore[arg-type]


class SigningTest(TestCase):
    def test_encode_for_signing(self) -> None:
        self.assertEqual(encode_for_signing(OFFER_CREATE_JSON), '53545800' + OFFER_CREATE_SIGNING_HEX)

    def test_signers_are_not_signed(self) -> None:
        value = dict(OFFER_CREATE_JSON, Signers=SIGNERS)
        self.assertEqual(encode_for_signing(value), '53545800' + OFFER_CREATE_SIGNING_HEX)
        # but they are part of the full serialization
        self.assertNotEqual(encode(value), OFFER_CREATE_HEX)
        self.assertEqual(decode(encode(value)), value)

    def test_encode_for_multisigning(self) -> None:
        signer = 'rrrrrrrrrrrrrrrrrrrrBZbvji'
        self.assertEqual(
            encode_for_multisigning(OFFER_CREATE_JSON, signer),
            '534D5400' + OFFER_CREATE_SIGNING_HEX + '00' * 19 + '01',
        )

    def test_multisigning_with_xaddress_signer(self) -> None:
        classic = 'r9cZA1mLK5R5Am25ArfXFmqgNwjZgnfk59'
        xaddress = 'X7AcgcsBL6XDcUb289X4mJ8djcdyKaB5hJDWMArnXr61cqZ'
        expected = encode_for_multisigning(OFFER_CREATE_JSON, classic)
        self.assertTrue(expected.endswith(decode_classic_address(classic).hex().upper()))
        self.assertEqual(encode_for_multisigning(OFFER_CREATE_JSON, xaddress), expected)

    def test_multisigning_invalid_signer(self) -> None:
        with self.assertRaises(InvalidAddress):
            encode_for_multisigning(OFFER_CREATE_JSON, 'not an address')


class QuietLibraryTest(TestCase):
    def test_first_use_writes_nothing(self) -> None:
        stdout = StringIO()
        # start from nothing loaded, so settings and definitions are read from their files
        with patch('xrplcodec.conf.get_settings._settings_singleton', None), \
                patch('xrplcodec.definitions.registry._definitions_singleton', None), \
                redirect_stdout(stdout):
            self.assertEqual(encode({'Sequence': 1}), '2400000001')
            self.assertEqual(decode('2400000001'), {'Sequence': 1})
        self.assertEqual(stdout.getvalue(), '')
