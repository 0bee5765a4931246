'''
# PNG chunk

This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each field is intended big-endian.

      .--------.------.------------------.-------.
      | length | type | data             | crc   |
      | 4      | 4    | length bytes     | 4     |
      '--------'------'------------------'-------'

The crc field is network-byte-order CRC-32 computed over the chunk type and chunk data, but not the length.
'''
import logging
from typing import Dict, Tuple

from . import fields
from .chunk_type import ChunkType
from .common import crc
from .enum import Compliant, DEFAULT_COMPLIANT
from .exceptions import (
    BufferTooShort,
    ChecksumMismatch,
    EncodingError,
    InvalidChunkType,
    LengthMismatch,
)
from .streams import Stream


logger = logging.getLogger(__name__)


LENGTH = fields.StructField('I', name='length', endianess=fields.Endianess.BIG_ENDIAN)
TYPE   = fields.StringField(ChunkType.SIZE, name='type')
DATA   = fields.StringField(fields.Dependency('length'), name='data')
CRC    = crc.CRCField(['type', 'data'], name='crc', endianess=fields.Endianess.BIG_ENDIAN)  # network byte order

LAYOUT = (LENGTH, TYPE, DATA, CRC)

# length + type + crc, i.e. a chunk without data
MINIMUM_SIZE = LENGTH.get_size() + TYPE.get_size() + CRC.get_size()


class Chunk(object):
    '''A chunk built from a type and its data: the crc is always computed, never trusted.'''

    __slots__ = ('_chunk_type', '_data', '_crc')

    def __init__(self, chunk_type: ChunkType, data: bytes):
        if isinstance(data, int):
            raise TypeError(f'{self.__class__.__name__} needs the data as bytes, not an integer')

        self._chunk_type = chunk_type
        self._data = bytes(data)
        self._crc = CRC.calculate({
            'type': chunk_type.bytes(),
            'data': self._data,
        })

    @classmethod
    def from_bytes(cls, raw: bytes, compliant: Compliant = DEFAULT_COMPLIANT) -> 'Chunk':
        '''Decode exactly one chunk from raw.

        The buffer must contain the chunk and nothing more; the tag is checked
        against the naming rules only if compliant includes Compliant.TYPE.'''
        stream = Stream(raw)

        if len(stream) < MINIMUM_SIZE:
            raise BufferTooShort(len(stream), minimum=MINIMUM_SIZE)

        unpacked = {}

        for field in (LENGTH, TYPE):
            logger.debug('unpacking %s.%s at offset %d' % (cls.__name__, field.name, stream.tell()))
            unpacked[field.name] = field.unpack(stream, unpacked)

        declared_length = unpacked['length']
        available = stream.remaining() - CRC.size

        if available != declared_length:
            raise LengthMismatch(declared_length, available)

        chunk_type = ChunkType(unpacked['type'])

        for field in (DATA, CRC):
            logger.debug('unpacking %s.%s at offset %d' % (cls.__name__, field.name, stream.tell()))
            unpacked[field.name] = field.unpack(stream, unpacked)

        chunk = cls(chunk_type, unpacked['data'])

        if chunk.crc() != unpacked['crc']:
            raise ChecksumMismatch(unpacked['crc'], chunk.crc())

        if compliant & Compliant.TYPE and not chunk_type.is_valid():
            raise InvalidChunkType(chunk_type)

        return chunk

    def length(self) -> int:
        return len(self._data)

    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    def data(self) -> bytes:
        return self._data

    def crc(self) -> int:
        return self._crc

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingError(f'data of chunk {self._chunk_type!r} is not valid UTF-8') from e

    def get_values(self) -> Dict[str, object]:
        return {
            'length': self.length(),
            'type': self._chunk_type.bytes(),
            'data': self._data,
            'crc': self._crc,
        }

    def as_bytes(self) -> bytes:
        '''Pack length, type, data and crc.

        The length field is an unsigned 32 bit integer: data of 2**32 bytes or more
        can be held by the chunk but not packed, and ValueError is raised.'''
        values = self.get_values()
        value = b''
        for field in LAYOUT:
            field_raw = field.pack(values[field.name])
            logger.debug("field '{}' raw={}".format(field.name, field_raw))
            value += field_raw

        return value

    def __bytes__(self):
        return self.as_bytes()

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        '''Offset and size of each field once the chunk is packed.'''
        values = self.get_values()
        result = {}
        offset = 0
        for field in LAYOUT:
            size = field.get_size(values)
            result[field.name] = (offset, size)
            offset += size

        return result

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return self.get_values() == other.get_values()

    def __hash__(self):
        return hash((self._chunk_type, self._data, self._crc))

    def __repr__(self):
        msg = []
        for field_name, value in self.get_values().items():
            msg.append('%s=%s' % (field_name, hex(value) if isinstance(value, int) else repr(value)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        return f'Type:{self._chunk_type} Length:{self.length()}'
