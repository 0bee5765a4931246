"""
# pngchunk: the PNG chunk codec.

A chunk is the record the PNG container is made of: a length, a four letters
type, the data and a CRC-32 over type and data.

Two basic main operations are defined for a chunk:

 1. unpack: Chunk.from_bytes() takes the raw bytes of exactly one chunk,
    checks length and crc and builds the high-level representation.

 2. pack: Chunk.as_bytes() encodes the high-level representation into
    binary data, byte for byte the inverse of unpacking.

The type of the chunk (ChunkType) exposes the properties encoded in the case
of its letters (critical, public, reserved bit, safe to copy).
"""
from .chunk import Chunk
from .chunk_type import ChunkType
from .common.crc import crc32
from .enum import Compliant
from .exceptions import (
    PNGChunkException,
    ChunkTypeException,
    ByteLengthError,
    InvalidCharacter,
    InvalidChunkType,
    UnpackException,
    BufferTooShort,
    LengthMismatch,
    ChecksumMismatch,
    EncodingError,
)
