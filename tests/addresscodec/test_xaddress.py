import unittest

import pytest

from xrplcodec.addresscodec import (
    classic_address_to_xaddress,
    decode_classic_address,
    decode_extended_address,
    encode_extended_address,
    is_valid_classic_address,
    is_valid_xaddress,
    xaddress_to_classic_address,
)
from xrplcodec.addresscodec.codec import encode_base58check
from xrplcodec.exceptions import InvalidAddress, InvalidExtendedAddress

VECTORS = [
    ('r9cZA1mLK5R5Am25ArfXFmqgNwjZgnfk59', None, 'X7AcgcsBL6XDcUb289X4mJ8djcdyKaB5hJDWMArnXr61cqZ',
     'T719a5UwUCnEs54UsxG9CJYYDhwmFCqkr7wxCcNcfZ6p5GZ'),
    ('r9cZA1mLK5R5Am25ArfXFmqgNwjZgnfk59', 1, 'X7AcgcsBL6XDcUb289X4mJ8djcdyKaGZMhc9YTE92ehJ2Fu',
     'T719a5UwUCnEs54UsxG9CJYYDhwmFCvbJNZbi37gBGkRkbE'),
    ('rGWrZyQqhTp9Xu7G5Pkayo7bXjH4k4QYpf', 4294967295, 'XVLhHMPHU98es4dbozjVtdWzVrDjtV18pX8yuPT7y4xaEHi',
     'TVE26TYGhfLC7tQDno7G8dGtxSkYQnXoy6kSDh6rZzApc69'),
    ('rPEPPER7kfTD9w2To4CQk6UCfuHM9c6GDY', 13371337, 'XV5sbjUmgPpvXv4ixFWZ5ptAYZ6PD2qwGkhgc48zzcx6Gkr',
     'TVd2rqMkYL2AyS97NdELcpeiprNBjwVUDvp3vhpXbNhLwJi'),
]


@pytest.mark.parametrize('classic_address, tag, main_xaddress, test_xaddress', VECTORS)
def test_xaddress(classic_address, tag, main_xaddress, test_xaddress):
    assert classic_address_to_xaddress(classic_address, tag, False) == main_xaddress
    assert classic_address_to_xaddress(classic_address, tag, True) == test_xaddress
    assert xaddress_to_classic_address(main_xaddress) == (classic_address, tag, False)
    assert xaddress_to_classic_address(test_xaddress) == (classic_address, tag, True)

    account_id = decode_classic_address(classic_address)
    assert encode_extended_address(account_id, tag, False) == main_xaddress
    assert decode_extended_address(test_xaddress) == (account_id, tag, True)

    assert is_valid_xaddress(main_xaddress)
    assert not is_valid_classic_address(main_xaddress)
    assert not is_valid_xaddress(classic_address)


def _payload(prefix: bytes = b'\x05\x44', flag: int = 0, tag: bytes = bytes(4), reserved: bytes = bytes(4)) -> str:
    return encode_base58check(prefix + bytes(20) + bytes([flag]) + tag + reserved)


class ExtendedAddressErrorsTest(unittest.TestCase):
    def test_valid_payload(self) -> None:
        self.assertEqual(decode_extended_address(_payload()), (bytes(20), None, False))
        self.assertEqual(decode_extended_address(_payload(flag=1, tag=b'\x02\x01\x00\x00')), (bytes(20), 258, False))

    def test_invalid_prefix(self) -> None:
        with self.assertRaises(InvalidExtendedAddress):
            decode_extended_address(_payload(prefix=b'\x05\x45'))

    def test_invalid_flag(self) -> None:
        with self.assertRaises(InvalidExtendedAddress):
            decode_extended_address(_payload(flag=2))

    def test_tag_without_flag(self) -> None:
        with self.assertRaises(InvalidExtendedAddress):
            decode_extended_address(_payload(flag=0, tag=b'\x01\x00\x00\x00'))

    def test_reserved_bytes(self) -> None:
        with self.assertRaises(InvalidExtendedAddress):
            decode_extended_address(_payload(flag=1, reserved=b'\x00\x00\x00\x01'))

    def test_invalid_length(self) -> None:
        with self.assertRaises(InvalidExtendedAddress):
            decode_extended_address('rrrrrrrrrrrrrrrrrrrrrhoLvTp')

    def test_invalid_tag(self) -> None:
        for tag in [-1, 2**32, True, '1']:
            with self.assertRaises(InvalidExtendedAddress):
                encode_extended_address(bytes(20), tag, False)  # type: ignore[arg-type]

    def test_checksum(self) -> None:
        xaddress = 'X7AcgcsBL6XDcUb289X4mJ8djcdyKaB5hJDWMArnXr61cqZ'
        with self.assertRaises(InvalidAddress):
            decode_extended_address(xaddress[:-1] + 'Y')
        self.assertFalse(is_valid_xaddress(xaddress[:-1] + 'Y'))
