'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

A file is a signature followed by a sequence of chunks; here the chunks are
not interpreted (no pixel is ever decoded) so it's possible to add and remove
ancillary chunks leaving the image untouched.
'''
import logging
from typing import List, Optional, Tuple

from .chunk import Chunk
from .chunk_type import ChunkType
from .streams import Stream
from .exceptions import (
    ChunkException,
    MagicException,
    ChunkNotFoundException,
)


logger = logging.getLogger(__name__)


class Png(object):
    SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'

    def __init__(self, chunks=None):
        self._chunks: List[Chunk] = list(chunks) if chunks else []

    @classmethod
    def from_chunks(cls, chunks) -> "Png":
        '''The chunks are not validated.'''
        return cls(chunks)

    @classmethod
    def parse(cls, raw: bytes) -> "Png":
        '''raw must be bytes-like, to read from a path use from_file().'''
        return cls.unpack(Stream(raw))

    @classmethod
    def from_file(cls, path) -> "Png":
        logger.debug('loading PNG from \'%s\'' % (path,))
        with open(path, 'rb') as f:
            raw = f.read()

        return cls.parse(raw)

    @classmethod
    def unpack(cls, stream: Stream) -> "Png":
        signature = stream.read(len(cls.SIGNATURE))
        if signature != cls.SIGNATURE:
            raise MagicException(signature, chain=['header'])

        chunks = []
        while not stream.is_exhausted():
            try:
                chunk = Chunk.unpack(stream)
            except ChunkException as e:
                e.chain.append(f'chunks[{len(chunks)}]')
                raise

            chunks.append(chunk)

        logger.debug('unpacked %d chunks' % len(chunks))

        return cls(chunks)

    @property
    def header(self) -> bytes:
        return self.SIGNATURE

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk):
        self._chunks.append(chunk)

    def remove_chunk(self, chunk_type: str) -> Chunk:
        '''Remove the first chunk with the given type.'''
        _type = ChunkType.from_str(chunk_type)

        for idx, chunk in enumerate(self._chunks):
            if chunk.chunk_type == _type:
                logger.debug('removing chunk \'%s\' at index %d' % (chunk_type, idx))
                return self._chunks.pop(idx)

        raise ChunkNotFoundException(chunk_type)

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        for chunk in self._chunks:
            if str(chunk.chunk_type) == chunk_type:
                return chunk

        return None

    def serialize(self) -> bytes:
        return self.SIGNATURE + b''.join(_.serialize() for _ in self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self._chunks))

    def __str__(self):
        msg = 'Png {\n'
        msg += '  Signature: %s\n' % self.SIGNATURE.hex()
        for idx, chunk in enumerate(self._chunks):
            msg += '  [%02d] %s\n' % (idx, str(chunk).replace('\n', '\n  '))
        msg += '}'
        return msg
