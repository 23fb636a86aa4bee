from dataclasses import dataclass
from .tools.cursor import ByteCursor

# Vorbis comment header, all lengths little-endian:
#   [vendor_length] u32, [vendor_string] vendor_length octets
#   [user_comment_list_length] u32
#   repeated: [length] u32, [comment] length octets

@dataclass(frozen=True)
class VorbisComment:
    vendor: str
    total_comments: int
    comments: tuple[str, ...]

    def tags(self) -> list[tuple[str, str]]:
        ret = []
        for comment in self.comments:
            field, sep, value = comment.partition('=')
            ret.append((field, value) if sep else ('', comment))
        return ret

def read_string(cursor: ByteCursor) -> str:
    return cursor.read(cursor.u32le()).decode('utf-8', errors='surrogateescape')

def decode(cursor: ByteCursor) -> VorbisComment:
    vendor = read_string(cursor)
    total = cursor.u32le()
    comments = tuple(read_string(cursor) for _ in range(total))
    return VorbisComment(vendor, total, comments)

def parse(body: bytes) -> VorbisComment: return decode(ByteCursor(body))
