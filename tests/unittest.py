import unittest
from contextlib import contextmanager
from typing import Iterator
from unittest.mock import patch

from structlog import get_logger

from xrplcodec.conf.settings import CodecSettings

logger = get_logger()
main = unittest.main

# A real transaction from the ledger and its canonical serialization.
OFFER_CREATE_JSON = {
    'Account': 'raD5qJMAShLeHZXf9wjUmo6vRK4arj9cF3',
    'Fee': '10',
    'Flags': 0,
    'Sequence': 103929,
    'SigningPubKey': '028472865AF4CB32AA285834B57576B7290AA8C31B459047DB27E16F418D6A7166',
    'TakerGets': {
        'value': '1694.768',
        'currency': 'ILS',
        'issuer': 'rNPRNzBB92BVpAhhZr4iXDTveCgV5Pofm9',
    },
    'TakerPays': '98957503520',
    'TransactionType': 'OfferCreate',
    'TxnSignature': '304502202ABE08D5E78D1E74A4C18F2714F64E87B8BD57444AFA5733109EB3C077077520022100DB335EE97386E4C0591C'
                    'AC024D50E9230D8F171EEB901B5E5E4BD6D1E0AEF98C',
}

OFFER_CREATE_HEX = (
    '120007220000000024000195F964400000170A53AC2065D5460561EC9DE000000000000000000000000000494C53000000000092D70596'
    '8936C419CE614BF264B5EEB1CEA47FF468400000000000000A7321028472865AF4CB32AA285834B57576B7290AA8C31B459047DB27E16F'
    '418D6A71667447304502202ABE08D5E78D1E74A4C18F2714F64E87B8BD57444AFA5733109EB3C077077520022100DB335EE97386E4C059'
    '1CAC024D50E9230D8F171EEB901B5E5E4BD6D1E0AEF98C811439408A69F0895E62149CFCC006FB89FA7D1E6E5D'
)

MEMO_JSON = {
    'Memo': {
        'MemoType': '687474703A2F2F6578616D706C652E636F6D2F6D656D6F2F67656E65726963',
        'MemoData': '72656E74',
    },
}

MEMO_HEX = 'EA7C1F687474703A2F2F6578616D706C652E636F6D2F6D656D6F2F67656E657269637D0472656E74E1'


class TestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.log = logger.new()

    @contextmanager
    def override_settings(self, **kwargs) -> Iterator[CodecSettings]:
        """Replace the settings seen by the object serializer, the global singleton is left untouched."""
        settings = CodecSettings(**kwargs)
        with patch('xrplcodec.types.st_object._get_settings', return_value=settings):
            yield settings
