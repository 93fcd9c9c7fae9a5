import io

import pytest
from PIL import Image
from PIL.PngImagePlugin import PngInfo

from pngc import Chunk, ChunkType


MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


def build_raw_chunk(length, chunk_type, data, crc):
    return length.to_bytes(4, 'big') + chunk_type + data + crc.to_bytes(4, 'big')


@pytest.fixture
def rust_chunk():
    return Chunk(ChunkType.from_str('RuSt'), MESSAGE)


@pytest.fixture
def rust_chunk_raw():
    return build_raw_chunk(len(MESSAGE), b'RuSt', MESSAGE, MESSAGE_CRC)


@pytest.fixture
def red_png():
    '''The equivalent of

        $ convert -size 5x5 xc:red red.png
    '''
    buffer = io.BytesIO()
    Image.new('RGB', (5, 5), 'red').save(buffer, 'PNG')
    return buffer.getvalue()


@pytest.fixture
def commented_png():
    info = PngInfo()
    info.add_text('Comment', 'kebab')

    buffer = io.BytesIO()
    Image.new('RGB', (5, 10), 'green').save(buffer, 'PNG', pnginfo=info)
    return buffer.getvalue()


@pytest.fixture
def red_png_path(tmp_path, red_png):
    path = tmp_path / 'red.png'
    path.write_bytes(red_png)
    return path
