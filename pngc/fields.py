"""
A Field is a "fundamental" datatype from the format point of view, something directly
packable/unpackable from a stream without knowledge of its surroundings.
"""
import logging
import struct

from .meta import Endianess
from .exceptions import UnpackException


class Field(object):
    """Base class to subclass from"""

    def __init__(self, name=None, endianess=Endianess.BIG_ENDIAN):
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.endianess = endianess

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def pack(self, value) -> bytes:
        raise NotImplementedError('you need to implement this in the subclass')

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')

    def _read(self, stream) -> bytes:
        try:
            return stream.read_exactly(self.size)
        except UnpackException as e:
            e.chain.append(self.name or self.__class__.__name__)
            raise


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, **kw):
        self.format = format
        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.get_format())

    def get_format(self):
        return '%s%s' % (self.endianess.prefix, self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def pack(self, value) -> bytes:
        return struct.pack(self.get_format(), value)

    def unpack(self, stream) -> int:
        raw = self._read(stream)
        value = struct.unpack(self.get_format(), raw)[0]
        self.logger.debug('unpacked %s=%s' % (self.name, value))
        return value


class StringField(Field):
    """Represent a contiguous chunk of bytes of fixed length."""

    def __init__(self, n, **kw):
        self.length = n
        super().__init__(**kw)

    def __len__(self):
        return self.length

    def _get_size(self):
        return self.length

    def pack(self, value) -> bytes:
        if len(value) != self.length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self.length} bytes)')

        return bytes(value)

    def unpack(self, stream) -> bytes:
        return self._read(stream)
