import pytest

from pngchunk.common.crc import crc32, CRCField
from pngchunk.exceptions import UnpackException
from pngchunk.fields import Dependency, Endianess, StructField, StringField
from pngchunk.streams import Stream


def test_bytes_stream_read():
    data = b'\x01\x02\x03\x04\x05'

    stream = Stream(data)

    assert len(stream) == 5
    assert stream.read(1) == b'\x01'
    assert stream.read(1) == b'\x02'
    assert stream.remaining() == 3
    assert stream.read(3) == b'\x03\x04\x05'
    assert stream.tell() == 5
    assert stream.remaining() == 0


def test_bytearray_stream():
    stream = Stream(bytearray(b'\x01\x02\x03'))

    assert len(stream) == 3
    assert stream.read(2) == b'\x01\x02'
    assert stream.remaining() == 1


def test_stream_wrong_object():
    with pytest.raises(ValueError):
        Stream(42)


def test_structfield_endianess():
    little = StructField('I')
    big = StructField('I', endianess=Endianess.BIG_ENDIAN)
    network = StructField('I', endianess=Endianess.NETWORK)

    assert little.size == 4
    assert little.pack(0xcafe) == b'\xfe\xca\x00\x00'
    assert big.pack(0xcafe) == b'\x00\x00\xca\xfe'
    assert network.pack(0xcafe) == big.pack(0xcafe)

    assert big.unpack(Stream(b'\x00\x00\xca\xfe')) == 0xcafe


def test_structfield_value_out_of_range():
    field = StructField('I', name='length')

    with pytest.raises(ValueError):
        field.pack(1 << 32)

    with pytest.raises(ValueError):
        field.pack(-1)


def test_structfield_short_read():
    field = StructField('I', name='length')

    with pytest.raises(UnpackException) as excinfo:
        field.unpack(Stream(b'\x01\x02'))

    assert excinfo.value.chain == ['length']


def test_stringfield():
    field = StringField(0x4, name='type')

    assert field.get_size() == 4
    assert field.pack(b'IHDR') == b'IHDR'
    assert field.unpack(Stream(b'IHDRmiao')) == b'IHDR'

    with pytest.raises(ValueError):
        field.pack(b'IHDRX')

    with pytest.raises(ValueError):
        StringField('4')


def test_stringfield_dependency():
    field = StringField(Dependency('sz'), name='data')
    stream = Stream(b'kebab')

    assert field.get_size({'sz': 3}) == 3
    assert field.pack(b'whatever size') == b'whatever size'
    assert field.unpack(stream, {'sz': 5}) == b'kebab'

    with pytest.raises(AttributeError):
        field.get_size({})

    with pytest.raises(UnpackException):
        field.unpack(Stream(b'keb'), {'sz': 5})


def test_crc32():
    assert crc32(b'') == 0
    # check value of the CRC-32/ISO-HDLC variant
    assert crc32(b'123456789') == 0xcbf43926
    assert crc32(bytearray(b'123456789')) == 0xcbf43926


def test_crcfield():
    field = CRCField(['type', 'data'], endianess=Endianess.BIG_ENDIAN)

    value = field.calculate({'type': b'IEND', 'data': b'', 'length': b'\x00' * 4})

    assert value == 0xae426082
    assert field.pack(value) == b'\xae\x42\x60\x82'
    assert value == crc32(b'IEND')
