import json
import unittest

from structlog.testing import capture_logs

from tests.cli.utils import run_command
from tests.unittest import OFFER_CREATE_HEX, OFFER_CREATE_JSON
from xrplcodec_cli import decode, encode, encode_for_multisigning, encode_for_signing, field_id

OFFER_CREATE_SIGNING_HEX = OFFER_CREATE_HEX.replace('7447' + OFFER_CREATE_JSON['TxnSignature'], '')


class EncodeCommandTest(unittest.TestCase):
    def test_encode(self):
        result = run_command(encode, [json.dumps(OFFER_CREATE_JSON)])
        self.assertEqual(result.code, 0)
        self.assertEqual(result.stdout.strip(), OFFER_CREATE_HEX)

    def test_encode_from_stdin(self):
        result = run_command(encode, [], stdin=json.dumps(OFFER_CREATE_JSON) + '\n')
        self.assertEqual(result.code, 0)
        self.assertEqual(result.stdout.strip(), OFFER_CREATE_HEX)
        result = run_command(encode, ['-'], stdin=json.dumps(OFFER_CREATE_JSON))
        self.assertEqual(result.stdout.strip(), OFFER_CREATE_HEX)

    def test_unknown_field(self):
        value = json.dumps({'Sequence': 1, 'Sequense': 2})
        result = run_command(encode, [value])
        self.assertEqual(result.code, 1)
        self.assertEqual(result.stdout, '')
        self.assertTrue(result.stderr.startswith('Error: '))

        with capture_logs() as logs:
            result = run_command(encode, [value, '--lenient'])
        self.assertEqual(result.code, 0)
        self.assertEqual(result.stdout.strip(), '2400000001')
        self.assertEqual([log['event'] for log in logs], ['skipping unknown field'])

    def test_invalid_json(self):
        with self.assertRaises(SystemExit) as cm:
            run_command(encode, ['{"Sequence": '])
        self.assertEqual(cm.exception.code, 2)


class DecodeCommandTest(unittest.TestCase):
    def test_decode(self):
        result = run_command(decode, [OFFER_CREATE_HEX.lower()])
        self.assertEqual(result.code, 0)
        self.assertEqual(json.loads(result.stdout), OFFER_CREATE_JSON)

    def test_decode_from_stdin(self):
        result = run_command(decode, [], stdin=OFFER_CREATE_HEX + '\n')
        self.assertEqual(result.code, 0)
        self.assertEqual(json.loads(result.stdout), OFFER_CREATE_JSON)

    def test_decode_errors(self):
        for data in ['XYZ', '24000000', '2400000001E100']:
            result = run_command(decode, [data])
            self.assertEqual(result.code, 1)
            self.assertEqual(result.stdout, '')
            self.assertIn('Error: ', result.stderr)

    def test_decode_lenient(self):
        with capture_logs():
            result = run_command(decode, ['240000000120C800000005', '--lenient'])
        self.assertEqual(result.code, 0)
        self.assertEqual(json.loads(result.stdout), {'Sequence': 1})


class SigningCommandsTest(unittest.TestCase):
    def test_encode_for_signing(self):
        result = run_command(encode_for_signing, [json.dumps(OFFER_CREATE_JSON)])
        self.assertEqual(result.code, 0)
        self.assertEqual(result.stdout.strip(), '53545800' + OFFER_CREATE_SIGNING_HEX)

    def test_encode_for_multisigning(self):
        argv = [json.dumps(OFFER_CREATE_JSON), '--signer', 'rrrrrrrrrrrrrrrrrrrrBZbvji']
        result = run_command(encode_for_multisigning, argv)
        self.assertEqual(result.code, 0)
        self.assertEqual(result.stdout.strip(), '534D5400' + OFFER_CREATE_SIGNING_HEX + '00' * 19 + '01')

    def test_encode_for_multisigning_bad_signer(self):
        result = run_command(encode_for_multisigning, [json.dumps(OFFER_CREATE_JSON), '--signer', 'rBAD'])
        self.assertEqual(result.code, 1)
        self.assertIn('Error: ', result.stderr)


class FieldIdCommandTest(unittest.TestCase):
    def test_field_id(self):
        self.assertEqual(run_command(field_id, ['TickSize']).stdout.strip(), '001010')
        self.assertEqual(run_command(field_id, ['Sequence']).stdout.strip(), '24')

    def test_decode_field_id(self):
        self.assertEqual(run_command(field_id, ['001010', '--decode']).stdout.strip(), 'TickSize')
        self.assertEqual(run_command(field_id, ['24', '--decode']).stdout.strip(), 'Sequence')

    def test_errors(self):
        for argv in [['NotAField'], ['2004', '--decode'], ['24FF', '--decode']]:
            result = run_command(field_id, argv)
            self.assertEqual(result.code, 1)
            self.assertIn('Error: ', result.stderr)
