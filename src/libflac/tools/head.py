from dataclasses import dataclass
from types import MappingProxyType
from .cursor import ByteCursor
import struct

STREAMINFO     = 0
PADDING        = 1
APPLICATION    = 2
SEEKTABLE      = 3
VORBIS_COMMENT = 4
CUESHEET       = 5
PICTURE        = 6
INVALID        = 127

UNKNOWN = 'UNKNOWN'

BLOCK_TYPES = MappingProxyType({
    STREAMINFO:     'STREAMINFO',
    PADDING:        'PADDING',
    APPLICATION:    'APPLICATION',
    SEEKTABLE:      'SEEKTABLE',
    VORBIS_COMMENT: 'VORBIS_COMMENT',
    CUESHEET:       'CUESHEET',
    PICTURE:        'PICTURE',
    INVALID:        'INVALID',
})

LAST_BLOCK = 0x80000000
BLOCK_TYPE = 0x7F000000
BLOCK_LEN  = 0x00FFFFFF

def name_of(code: int) -> str: return BLOCK_TYPES.get(code, UNKNOWN)

@dataclass(frozen=True)
class BlockHeader:
    type: int
    length: int
    last: bool

    @property
    def name(self) -> str: return name_of(self.type)

    def encode(self) -> bytes:
        word = (self.last and LAST_BLOCK or 0) | (self.type << 24 & BLOCK_TYPE) | (self.length & BLOCK_LEN)
        return struct.pack('>I', word)

def decode_word(word: int) -> BlockHeader:
    last = word & LAST_BLOCK != 0           # bit 31:     Last-metadata-block flag
    block_type = (word & BLOCK_TYPE) >> 24  # bits 30-24: Block type
    length = word & BLOCK_LEN               # bits 23-0:  Body length in bytes
    return BlockHeader(block_type, length, last)

def decode(cursor: ByteCursor) -> BlockHeader: return decode_word(cursor.u32be())
