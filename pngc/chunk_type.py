'''
# Chunk type

Four bytes restricted to the ASCII letters; the case of each letter
(i.e. the bit 5 of the byte) encodes a property of the chunk

 1. ancillary bit (first byte): uppercase means critical
 2. private bit (second byte): uppercase means public
 3. reserved bit (third byte): must be uppercase
 4. safe-to-copy bit (fourth byte): lowercase means safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
import logging
import string

from bitstring import Bits

from .exceptions import InvalidLengthException, InvalidCharacterException


logger = logging.getLogger(__name__)

CHUNK_TYPE_SIZE = 4
# it's the bit 5 counting from the least significant one
CASE_BIT_OFFSET = 2

ASCII_LETTERS = string.ascii_letters.encode('ascii')


class ChunkType(object):
    '''The bytes are stored as they are: a chunk type with bytes outside the allowed
    range can be built (so that unknown chunks survive a round trip) and
    is_valid() tells if it's acceptable.'''

    def __init__(self, raw: bytes):
        if len(raw) != CHUNK_TYPE_SIZE:
            raise InvalidLengthException(len(raw))

        self._raw = bytes(raw)
        self._bits = Bits(self._raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "ChunkType":
        return cls(raw)

    @classmethod
    def from_str(cls, value: str) -> "ChunkType":
        length = len(value.encode('utf-8'))
        if length != CHUNK_TYPE_SIZE:
            raise InvalidLengthException(length)

        if not all(_ in string.ascii_letters for _ in value):
            raise InvalidCharacterException(value)

        return cls.from_bytes(value.encode('ascii'))

    def bytes(self) -> bytes:
        return self._raw

    def _is_letter(self, index: int) -> bool:
        return self._raw[index] in ASCII_LETTERS

    def _is_uppercase(self, index: int) -> bool:
        return self._is_letter(index) and not self._bits[index * 8 + CASE_BIT_OFFSET]

    def _is_lowercase(self, index: int) -> bool:
        return self._is_letter(index) and self._bits[index * 8 + CASE_BIT_OFFSET]

    def is_critical(self) -> bool:
        return self._is_uppercase(0)

    def is_public(self) -> bool:
        return self._is_uppercase(1)

    def is_reserved_bit_valid(self) -> bool:
        return self._is_uppercase(2)

    def is_safe_to_copy(self) -> bool:
        return self._is_lowercase(3)

    def is_valid(self) -> bool:
        return all(self._is_letter(_) for _ in range(CHUNK_TYPE_SIZE)) and self.is_reserved_bit_valid()

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __str__(self):
        return self._raw.decode('latin1')

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._raw)
