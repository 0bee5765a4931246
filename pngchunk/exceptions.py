class PNGChunkException(Exception):
    '''Base class to extend in order to throw exception in pngchunk.

    The hierarchy is closed: every failure the codec can produce is one of
    the subclasses below, each carrying only what is needed for its message.
    '''
    pass


class ChunkTypeException(PNGChunkException):
    pass


class ByteLengthError(ChunkTypeException):
    def __init__(self, actual):
        self.actual = actual
        super().__init__(f'Expected 4 bytes but received {actual}')


class InvalidCharacter(ChunkTypeException):
    def __init__(self, value):
        self.value = value
        super().__init__(f'Input {value!r} contains one or more invalid characters')


class InvalidChunkType(ChunkTypeException):
    '''Only raised when the decoding is asked to be compliant with the tag rules.'''

    def __init__(self, chunk_type):
        self.chunk_type = chunk_type
        super().__init__(f'chunk type {chunk_type!r} is not valid')


class UnpackException(PNGChunkException):
    '''Raised when raw bytes cannot be turned into a chunk.

    It takes as argument the chain of the layout fields involved in the failure.
    '''

    def __init__(self, message, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(message)


class BufferTooShort(UnpackException):
    def __init__(self, actual, minimum=12):
        self.actual = actual
        self.minimum = minimum
        super().__init__(f'buffer of {actual} bytes is shorter than the minimum of {minimum}')


class LengthMismatch(UnpackException):
    def __init__(self, declared, actual):
        self.declared = declared
        self.actual = actual
        super().__init__(
            f'declared length {declared} does not match the {actual} bytes of data available',
            chain=['length', 'data'],
        )


class ChecksumMismatch(UnpackException):
    def __init__(self, declared, computed):
        self.declared = declared
        self.computed = computed
        super().__init__(
            f'declared crc 0x{declared:08x} differs from computed 0x{computed:08x}',
            chain=['crc'],
        )


class EncodingError(PNGChunkException):
    '''The bytes are not valid UTF-8; the original UnicodeDecodeError is the __cause__.'''
    pass
