'''
Operations working on files: each one loads the whole file in memory,
operates on the chunks and writes everything back.
'''
import logging

from .chunk import Chunk
from .chunk_type import ChunkType
from .png import Png
from .exceptions import ChunkNotFoundException


logger = logging.getLogger(__name__)


def _write(path, png: Png):
    with open(path, 'wb') as f:
        f.write(png.serialize())


def encode(path, chunk_type: str, message: str, output=None):
    '''Append a chunk containing the message and return the path written.'''
    png = Png.from_file(path)
    chunk = Chunk(ChunkType.from_str(chunk_type), message.encode('utf-8'))

    png.append_chunk(chunk)

    output = output if output is not None else path
    logger.debug('writing %d chunks to \'%s\'' % (len(png), output))
    _write(output, png)

    return output


def decode(path, chunk_type: str) -> str:
    png = Png.from_file(path)
    chunk = png.chunk_by_type(chunk_type)

    if chunk is None:
        raise ChunkNotFoundException(chunk_type)

    return chunk.data_as_string()


def remove(path, chunk_type: str) -> Chunk:
    png = Png.from_file(path)
    chunk = png.remove_chunk(chunk_type)

    _write(path, png)

    return chunk


def print_png(path) -> str:
    return str(Png.from_file(path))
