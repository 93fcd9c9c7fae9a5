class PngcException(Exception):
    '''Base class to extend in order to throw exception in pngc.

    It takes as optional argument the chain of the layers that
    caused the exception, the innermost first.
    '''

    def __init__(self, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(str(self))

    def __str__(self):
        msg = self.message()
        if self.chain:
            msg += ' (at %s)' % ' <- '.join(self.chain)
        return msg

    def message(self):
        return self.__class__.__name__


class UnpackException(PngcException):
    '''The stream has not enough data to unpack the requested field.'''

    def __init__(self, requested, available, chain=None):
        self.requested = requested
        self.available = available
        super().__init__(chain=chain)

    def message(self):
        return f'needed {self.requested} bytes but only {self.available} available'


class ChunkTypeException(PngcException):
    pass


class InvalidLengthException(ChunkTypeException):

    def __init__(self, length, chain=None):
        self.length = length
        super().__init__(chain=chain)

    def message(self):
        return f'invalid chunk type length: {self.length}, expected 4'


class InvalidCharacterException(ChunkTypeException):

    def __init__(self, value, chain=None):
        self.value = value
        super().__init__(chain=chain)

    def message(self):
        return f'invalid character in chunk type {self.value!r}'


class ChunkException(PngcException):
    pass


class InvalidChunkLengthException(ChunkException):
    '''The buffer is shorter than the chunk envelope (12 bytes) or than
    the length the chunk declares.'''

    def __init__(self, length, chain=None):
        self.length = length
        super().__init__(chain=chain)

    def message(self):
        return f'invalid chunk length: {self.length}'


class InvalidChunkTypeException(ChunkException):

    def __init__(self, chunk_type, chain=None):
        self.chunk_type = chunk_type
        super().__init__(chain=chain)

    def message(self):
        return f'invalid chunk type {self.chunk_type!r}'


class CrcMismatchException(ChunkException):

    def __init__(self, expected, actual, chain=None):
        self.expected = expected
        self.actual = actual
        super().__init__(chain=chain)

    def message(self):
        return f'invalid CRC: expected {self.expected}, actual {self.actual}'


class DecodeException(ChunkException):
    '''The chunk's data is not valid UTF-8.'''

    def __init__(self, reason, chain=None):
        self.reason = reason
        super().__init__(chain=chain)

    def message(self):
        return f'chunk data is not valid UTF-8: {self.reason}'


class PngException(PngcException):
    pass


class MagicException(PngException):
    '''The signature at the start of the file doesn't correspond.'''

    def __init__(self, signature, chain=None):
        self.signature = signature
        super().__init__(chain=chain)

    def message(self):
        return f'invalid signature {self.signature!r}'


class ChunkNotFoundException(PngException):

    def __init__(self, chunk_type, chain=None):
        self.chunk_type = chunk_type
        super().__init__(chain=chain)

    def message(self):
        return f'chunk of type \'{self.chunk_type}\' was not found'


class UnrecoverableException(Exception):
    '''This is raised when the caller violates a contract of the API
    (like building a chunk larger than the format allows): it's not
    a PngcException since it's not meant to be handled.'''
    pass
