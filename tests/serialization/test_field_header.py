import pytest

from xrplcodec.serialization import Deserializer, InvalidFieldHeader, Serializer, UnexpectedEndOfStream
from xrplcodec.serialization.encoding.field_header import FieldHeader, decode_field_header, encode_field_header


@pytest.mark.parametrize('type_code, field_code, encoded', [
    (1, 1, '11'),
    (2, 4, '24'),
    (15, 15, 'ff'),
    (14, 1, 'e1'),
    (15, 1, 'f1'),
    (1, 16, '1010'),
    (8, 18, '8012'),
    (16, 3, '0310'),
    (19, 1, '0113'),
    (16, 16, '001010'),
    (255, 255, '00ffff'),
])
def test_field_header(type_code, field_code, encoded):
    se = Serializer.build_bytes_serializer()
    encode_field_header(se, type_code, field_code)
    assert bytes(se.finalize()).hex() == encoded

    de = Deserializer.build_bytes_deserializer(bytes.fromhex(encoded))
    assert decode_field_header(de) == FieldHeader(type_code, field_code)
    assert de.is_empty()


@pytest.mark.parametrize('type_code, field_code', [(0, 1), (1, 0), (256, 1), (1, 256), (-1, 1)])
def test_encode_out_of_range(type_code, field_code):
    with pytest.raises(InvalidFieldHeader):
        encode_field_header(Serializer.build_bytes_serializer(), type_code, field_code)


@pytest.mark.parametrize('encoded', [
    '2004',  # field code 4 in its own byte
    '0f02',  # type code 15 in its own byte
    '000101',  # both codes in their own bytes
    '000f20',  # type code below 16 with the long form
    '2000',  # field code 0
])
def test_decode_non_canonical(encoded):
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(encoded))
    with pytest.raises(InvalidFieldHeader):
        decode_field_header(de)
    # nothing is consumed on error
    assert de.remaining() == len(encoded) // 2


@pytest.mark.parametrize('encoded', ['', '20', '00', '0010'])
def test_decode_truncated(encoded):
    de = Deserializer.build_bytes_deserializer(bytes.fromhex(encoded))
    with pytest.raises(UnexpectedEndOfStream):
        decode_field_header(de)
