import io
import logging

from .exceptions import UnpackException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around raw data to access it
    via a cursor that never reads past the end.'''
    def __init__(self, obj):
        if not isinstance(obj, (bytes, bytearray, memoryview)):
            raise ValueError('\'%s\' is the wrong kind of object to stream' % obj.__class__.__name__)

        self.obj = io.BytesIO(bytes(obj))
        self._size = len(self.obj.getbuffer())

    def __len__(self):
        return self._size

    def tell(self):
        return self.obj.tell()

    def remaining(self):
        return self._size - self.obj.tell()

    def is_exhausted(self):
        return self.remaining() <= 0

    def read(self, n):
        '''Read at most n bytes.'''
        return self.obj.read(n)

    def read_exactly(self, n):
        '''Read n bytes or raise UnpackException leaving the cursor untouched.'''
        available = self.remaining()
        if n > available:
            raise UnpackException(n, available)

        return self.obj.read(n)
