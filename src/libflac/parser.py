from dataclasses import dataclass
from . import streaminfo, vorbis
from .common import HEADER_SIZE, SIGNATURE, FormatError
from .tools import head
from .tools.cursor import ByteCursor
from typing import Iterator

@dataclass(frozen=True)
class MetadataBlock:
    header: head.BlockHeader
    offset: int
    data: streaminfo.StreamInfo | vorbis.VorbisComment | None = None

def check_signature(cursor: ByteCursor):
    if cursor.remaining() < len(SIGNATURE) or cursor.read(len(SIGNATURE)) != SIGNATURE:
        raise FormatError('Stream marker fLaC not found')

def iter_blocks(buffer: bytes) -> Iterator[MetadataBlock]:
    cursor = ByteCursor(buffer)
    check_signature(cursor)

    while True:
        offset = cursor.tell()
        header = head.decode(cursor)
        body = cursor.sub(header.length)

        match header.type:
            case head.STREAMINFO:     data = streaminfo.decode(body)
            case head.VORBIS_COMMENT: data = vorbis.decode(body)
            case _:                   data = None

        yield MetadataBlock(header, offset, data)
        if header.last: break

def parse(buffer: bytes) -> list[MetadataBlock]: return list(iter_blocks(buffer))

def end_of_metadata(blocks: list[MetadataBlock]) -> int:
    if not blocks: return len(SIGNATURE)
    last = blocks[-1]
    return last.offset + HEADER_SIZE + last.header.length
