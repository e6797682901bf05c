import pytest

from xrplcodec.serialization import Deserializer, InvalidVariableLength, Serializer, UnexpectedEndOfStream
from xrplcodec.serialization.encoding.variable_length import (
    decode_length_prefixed,
    decode_variable_length,
    encode_length_prefixed,
    encode_variable_length,
)


@pytest.mark.parametrize('length, encoded', [
    (0, '00'),
    (1, '01'),
    (192, 'c0'),
    (193, 'c100'),
    (194, 'c101'),
    (449, 'c200'),
    (12480, 'f0ff'),
    (12481, 'f10000'),
    (12482, 'f10001'),
    (918744, 'fed417'),
])
def test_variable_length(length, encoded):
    se = Serializer.build_bytes_serializer()
    encode_variable_length(se, length)
    assert bytes(se.finalize()).hex() == encoded

    de = Deserializer.build_bytes_deserializer(bytes.fromhex(encoded))
    assert decode_variable_length(de) == length
    assert de.is_empty()


@pytest.mark.parametrize('length', [-1, 918745, 10**9])
def test_encode_out_of_range(length):
    with pytest.raises(InvalidVariableLength):
        encode_variable_length(Serializer.build_bytes_serializer(), length)


def test_decode_invalid_first_byte():
    de = Deserializer.build_bytes_deserializer(b'\xff\x00\x00')
    with pytest.raises(InvalidVariableLength):
        decode_variable_length(de)


@pytest.mark.parametrize('encoded', ['', 'c1', 'f100', 'fe'])
def test_decode_truncated_consumes_nothing(encoded):
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(encoded))
    with pytest.raises(UnexpectedEndOfStream):
        decode_variable_length(de)
    assert de.remaining() == len(encoded) // 2


def test_length_prefixed():
    data = bytes(range(200))
    se = Serializer.build_bytes_serializer()
    encode_length_prefixed(se, data)
    encoded = bytes(se.finalize())
    assert encoded[:2] == bytes.fromhex('c107')
    assert encoded[2:] == data

    de = Deserializer.build_bytes_deserializer(encoded + b'\x01')
    assert decode_length_prefixed(de) == data
    assert de.read_byte() == 1


def test_length_prefixed_short_data():
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('05aabb'))
    with pytest.raises(UnexpectedEndOfStream):
        decode_length_prefixed(de)
