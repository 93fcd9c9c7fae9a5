from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()
    NETWORK       = auto()
    NATIVE        = auto()

    @property
    def prefix(self):
        '''The character to use in a struct format for this byte order.'''
        return {
            Endianess.LITTLE_ENDIAN: '<',
            Endianess.BIG_ENDIAN: '>',
            Endianess.NETWORK: '!',
            Endianess.NATIVE: '=',
        }[self]
