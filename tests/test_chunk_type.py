import pytest

from pngc import ChunkType
from pngc.exceptions import InvalidLengthException, InvalidCharacterException


def test_chunk_type_from_bytes():
    chunk_type = ChunkType.from_bytes(bytes([82, 117, 83, 116]))

    assert chunk_type.bytes() == b'RuSt'


def test_chunk_type_from_str():
    assert ChunkType.from_str('RuSt') == ChunkType.from_bytes(bytes([82, 117, 83, 116]))


@pytest.mark.parametrize('value', ['RuSt', 'IHDR', 'tEXt', 'abcd', 'ZZZZ', 'Rust'])
def test_chunk_type_to_string(value):
    assert str(ChunkType.from_str(value)) == value


def test_flags():
    chunk_type = ChunkType.from_str('RuSt')

    assert chunk_type.is_critical()
    assert not chunk_type.is_public()
    assert chunk_type.is_reserved_bit_valid()
    assert chunk_type.is_safe_to_copy()

    assert not ChunkType.from_str('ruSt').is_critical()
    assert ChunkType.from_str('RUSt').is_public()
    assert not ChunkType.from_str('RuST').is_safe_to_copy()


def test_reserved_bit():
    chunk_type = ChunkType.from_str('Rust')

    assert not chunk_type.is_reserved_bit_valid()
    assert not chunk_type.is_valid()


def test_valid():
    assert ChunkType.from_str('RuSt').is_valid()
    assert ChunkType.from_str('IEND').is_valid()


def test_invalid_character():
    with pytest.raises(InvalidCharacterException):
        ChunkType.from_str('Ru1t')


@pytest.mark.parametrize('value', ['', 'Rus', 'RuStt'])
def test_invalid_length(value):
    with pytest.raises(InvalidLengthException) as e:
        ChunkType.from_str(value)

    assert e.value.length == len(value)


def test_not_letters_are_constructible():
    '''From raw bytes there is no check on the content.'''
    chunk_type = ChunkType.from_bytes(b'\x00\x01A\xff')

    assert chunk_type.bytes() == b'\x00\x01A\xff'
    assert not chunk_type.is_valid()


def test_hashable():
    types = {ChunkType.from_str('RuSt'), ChunkType.from_bytes(b'RuSt'), ChunkType.from_str('IDAT')}

    assert len(types) == 2


def test_flags_of_not_letters():
    '''Bytes outside the letters have no case, so no flag is set.'''
    chunk_type = ChunkType.from_bytes(b'@\x00A1')

    assert not chunk_type.is_critical()
    assert not chunk_type.is_public()
    assert chunk_type.is_reserved_bit_valid()
    assert not chunk_type.is_safe_to_copy()
    assert not chunk_type.is_valid()

    chunk_type = ChunkType.from_bytes(b'`{[~')

    assert not chunk_type.is_critical()
    assert not chunk_type.is_public()
    assert not chunk_type.is_reserved_bit_valid()
    assert not chunk_type.is_safe_to_copy()


def test_length_counts_utf8_bytes():
    with pytest.raises(InvalidLengthException) as e:
        ChunkType.from_str('Ruét')

    assert e.value.length == 5

    # three characters but four bytes
    with pytest.raises(InvalidCharacterException):
        ChunkType.from_str('Ré1')
