'''
# Chunk

This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each field is intended big-endian.

    .--------.------.------------------.-------.
    | length | type | data             | crc   |
    '--------'------'------------------'-------'
      4 bytes 4 bytes   length bytes     4 bytes

The length counts only the data, the crc is network-byte-order CRC-32
computed over the chunk type and chunk data, but not the length.
'''
import logging

from . import fields
from .meta import Endianess
from .chunk_type import ChunkType, CHUNK_TYPE_SIZE
from .common.crc import crc32
from .streams import Stream
from .exceptions import (
    UnpackException,
    InvalidChunkLengthException,
    InvalidChunkTypeException,
    CrcMismatchException,
    DecodeException,
    UnrecoverableException,
)


logger = logging.getLogger(__name__)

MAX_CHUNK_LEN = 2 ** 31

length_field = fields.StructField('I', name='length', endianess=Endianess.BIG_ENDIAN)
type_field   = fields.StringField(CHUNK_TYPE_SIZE, name='type')
crc_field    = fields.StructField('I', name='crc', endianess=Endianess.NETWORK)

# length + type + crc, i.e. a chunk without data
CHUNK_ENVELOPE_SIZE = length_field.size + type_field.size + crc_field.size


class Chunk(object):

    def __init__(self, chunk_type: ChunkType, data: bytes):
        if len(data) > MAX_CHUNK_LEN:
            raise UnrecoverableException(
                f'max chunk length exceeded: {len(data)} (max is {MAX_CHUNK_LEN})')

        self._chunk_type = chunk_type
        self._data = bytes(data)

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def size(self) -> int:
        '''Size of the whole record on disk.'''
        return CHUNK_ENVELOPE_SIZE + self.length

    def crc(self) -> int:
        '''It's calculated each time so that it can't go out of sync with the content.'''
        return crc32(self._chunk_type.bytes(), self._data)

    def data_as_string(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeException(e.reason) from e

    def serialize(self) -> bytes:
        return (
            length_field.pack(self.length) +
            type_field.pack(self._chunk_type.bytes()) +
            self._data +
            crc_field.pack(self.crc())
        )

    @classmethod
    def parse(cls, raw: bytes) -> "Chunk":
        '''Build a chunk from the record at the start of raw, any data
        following the crc is ignored.'''
        if len(raw) < CHUNK_ENVELOPE_SIZE:
            raise InvalidChunkLengthException(len(raw))

        return cls.unpack(Stream(raw))

    @classmethod
    def unpack(cls, stream: Stream) -> "Chunk":
        '''Read exactly one chunk from the stream, leaving the cursor
        just after its crc.'''
        offset = stream.tell()

        if stream.remaining() < CHUNK_ENVELOPE_SIZE:
            raise InvalidChunkLengthException(stream.remaining())

        length = length_field.unpack(stream)

        chunk_type = ChunkType.from_bytes(type_field.unpack(stream))
        if not chunk_type.is_valid():
            raise InvalidChunkTypeException(chunk_type.bytes())

        logger.debug('unpacking chunk \'%s\' of length %d at offset %d' % (chunk_type, length, offset))

        try:
            data = stream.read_exactly(length)
        except UnpackException as e:
            raise InvalidChunkLengthException(length, chain=e.chain + ['data']) from e

        chunk = cls(chunk_type, data)

        try:
            crc = crc_field.unpack(stream)
        except UnpackException as e:
            raise InvalidChunkLengthException(length, chain=e.chain) from e

        calculated_crc = chunk.crc()

        if crc != calculated_crc:
            logger.warning('crc for chunk \'%s\' at offset %d doesn\'t correspond' % (chunk_type, offset))
            raise CrcMismatchException(crc, calculated_crc)

        return chunk

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return self._chunk_type == other._chunk_type and self._data == other._data

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=%08x)>' % (
            self.__class__.__name__,
            self._chunk_type,
            self.length,
            self.crc(),
        )

    def __str__(self):
        return (
            'Chunk {\n'
            f'  Length: {self.length}\n'
            f'  Type: {self._chunk_type}\n'
            f'  Data: {len(self._data)} bytes\n'
            f'  Crc: {self.crc()}\n'
            '}'
        )
