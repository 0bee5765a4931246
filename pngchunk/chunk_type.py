'''
# Chunk type

Four bytes restricted to the ASCII letters. Bit 5 (value 0x20, the lowercase bit)
of each byte carries a property of the chunk:

 1. ancillary bit (first byte): 0 (uppercase) means critical
 2. private bit (second byte): 0 (uppercase) means public
 3. reserved bit (third byte): must be 0 (uppercase) for the type to be valid
 4. safe-to-copy bit (fourth byte): 1 (lowercase) means safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from bitstring import Bits

from .exceptions import (
    ByteLengthError,
    InvalidCharacter,
    EncodingError,
)


class ChunkType(object):
    '''Immutable four bytes tag.

    Building it from raw bytes doesn't check the characters, so that tags captured
    from the wire survive a round trip; use from_str() to parse tags supplied by
    humans.'''

    SIZE = 4
    PROPERTY_BIT = 2  # 0x20 counting from the most significant bit

    __slots__ = ('_bytes', '_bits')

    def __init__(self, raw):
        if isinstance(raw, int):
            raise TypeError(f'{self.__class__.__name__} needs the four bytes of the tag, not an integer')

        raw = bytes(raw)

        if len(raw) != self.SIZE:
            raise ByteLengthError(len(raw))

        self._bytes = raw
        self._bits = Bits(raw)

    @classmethod
    def from_str(cls, text: str) -> 'ChunkType':
        raw = text.encode('utf-8')

        if len(raw) != cls.SIZE:
            raise ByteLengthError(len(raw))

        # bytes.isalpha() only accepts ASCII letters
        if not raw.isalpha():
            raise InvalidCharacter(text)

        return cls(raw)

    def bytes(self) -> bytes:
        return self._bytes

    def _property_bit(self, index: int) -> bool:
        return self._bits[index * 8 + self.PROPERTY_BIT]

    def is_critical(self) -> bool:
        return not self._property_bit(0)

    def is_public(self) -> bool:
        return not self._property_bit(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._property_bit(2)

    def is_safe_to_copy(self) -> bool:
        return self._property_bit(3)

    def is_valid(self) -> bool:
        return self._bytes.isalpha() and self.is_reserved_bit_valid()

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._bytes == other._bytes

    def __hash__(self):
        return hash(self._bytes)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._bytes!r})>'

    def __str__(self):
        try:
            return self._bytes.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingError(f'chunk type {self._bytes!r} is not valid UTF-8') from e
