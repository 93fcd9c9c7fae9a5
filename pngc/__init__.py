"""
# PNG chunks codec

A PNG file is a fixed signature followed by a list of chunks, each one
with a type telling what it contains and a CRC protecting its content.

Since a decoder must skip the chunks it doesn't know (if they are ancillary)
we can hide arbitrary data inside a PNG without touching the image.

The main operations are

 1. parse(): take the raw data and build the list of chunks checking
    the signature and the CRC of each one

 2. serialize(): encode the chunks back into binary data; a parsed
    and untouched file gives back exactly the same bytes.

and in between a chunk can be appended or removed.
"""
from .chunk_type import ChunkType
from .chunk import Chunk, MAX_CHUNK_LEN
from .png import Png
