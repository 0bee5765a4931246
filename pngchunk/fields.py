"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable without need for relayouting.

Fields here are stateless codecs: a chunk describes its layout as an ordered sequence
of fields and the fields only know how to turn values into bytes and back.
"""
import logging
import struct
from enum import Enum, auto
from typing import Any, Dict, Optional

from .exceptions import UnpackException
from .streams import Stream


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()
    NETWORK       = auto()
    NATIVE        = auto()


_ENDIANESS_PREFIX = {
    Endianess.LITTLE_ENDIAN: '<',
    Endianess.BIG_ENDIAN:    '>',
    Endianess.NETWORK:       '!',
    Endianess.NATIVE:        '=',
}


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        length = fields.StructField('I', name='length')
        data = fields.StringField(Dependency('length'), name='data')

    and have the length of the string contained in the field named 'data'
    taken from the value already unpacked for the field named 'length'.
    '''
    def __init__(self, expression: str):
        self.expression = expression

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def resolve(self, context: Dict[str, Any]):
        try:
            return context[self.expression]
        except KeyError:
            raise AttributeError(f"dependency '{self.expression}' is not resolvable in {list(context)}") from None


class Field(object):
    """Base class to subclass from"""

    def __init__(self, name=None, endianess=Endianess.LITTLE_ENDIAN):
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.endianess = endianess

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def get_size(self, context: Optional[Dict[str, Any]] = None) -> int:
        raise NotImplementedError(f"method {self.__class__.__name__}.get_size() not implemented")

    def pack(self, value) -> bytes:
        raise NotImplementedError(f"method {self.__class__.__name__}.pack() not implemented")

    def unpack(self, stream: Stream, context: Optional[Dict[str, Any]] = None):
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")

    def _read(self, stream: Stream, size: int) -> bytes:
        raw = stream.read(size)

        if len(raw) != size:
            raise UnpackException(
                f"field '{self.name}' needs {size} bytes but only {len(raw)} are available",
                chain=[self.name],
            )

        return raw


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, **kw):
        self.format = format
        super().__init__(**kw)

    def get_format(self):
        return '%s%s' % (_ENDIANESS_PREFIX[self.endianess], self.format)

    def get_size(self, context=None):
        return struct.calcsize(self.get_format())

    size = property(fget=lambda self: self.get_size())

    def pack(self, value) -> bytes:
        try:
            return struct.pack(self.get_format(), value)
        except struct.error as e:
            raise ValueError(f"value {value!r} doesn't fit field '{self.name}': {e}") from e

    def unpack(self, stream, context=None):
        raw = self._read(stream, self.size)
        value = struct.unpack(self.get_format(), raw)[0]

        self.logger.debug(f"unpacked field '{self.name}' value=0x{value:x}")

        return value


class StringField(Field):
    """Represent a contiguous chunk of bytes.

    The length can be fixed or a Dependency on a field unpacked before this one."""

    def __init__(self, n, **kw):
        if not isinstance(n, (int, Dependency)):
            raise ValueError('n is \'%s\' must be of the right type' % n.__class__.__name__)

        self.length = n

        super().__init__(**kw)

    def get_size(self, context=None):
        if isinstance(self.length, Dependency):
            return self.length.resolve(context or {})

        return self.length

    def pack(self, value) -> bytes:
        value = bytes(value)

        if not isinstance(self.length, Dependency) and len(value) != self.length:
            raise ValueError(f"field '{self.name}' can only accept binary strings of length {self.length}")

        return value

    def unpack(self, stream, context=None):
        raw = self._read(stream, self.get_size(context))

        self.logger.debug(f"unpacked field '{self.name}' of {len(raw)} bytes")

        return raw
