import logging
import os
import struct

import pytest


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


def build_raw_chunk(length, chunk_type, data, crc):
    return struct.pack('>I', length) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def message():
    return MESSAGE


@pytest.fixture
def raw_chunk():
    """The bytes of a well formed "RuSt" chunk carrying the secret message."""
    return build_raw_chunk(len(MESSAGE), b'RuSt', MESSAGE, MESSAGE_CRC)
