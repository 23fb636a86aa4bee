from ..common import BoundsError
import struct

class ByteCursor:
    def __init__(self, buffer: bytes | bytearray, start: int = 0, end: int | None = None):
        self.buffer = buffer
        self.end = len(buffer) if end is None else end
        self.position = start

    def remaining(self) -> int: return self.end - self.position
    def tell(self) -> int: return self.position

    def advance(self, n: int) -> int:
        if n < 0 or n > self.remaining(): raise BoundsError(self.position, n, self.remaining())
        pos = self.position
        self.position += n
        return pos

    def read(self, n: int) -> bytes:
        pos = self.advance(n)
        return bytes(self.buffer[pos:pos + n])

    def sub(self, n: int) -> 'ByteCursor':
        pos = self.advance(n)
        return ByteCursor(self.buffer, pos, pos + n)

    def unpack(self, fmt: str) -> tuple:
        pos = self.advance(struct.calcsize(fmt))
        return struct.unpack_from(fmt, self.buffer, pos)

    def u16be(self) -> int: return self.unpack('>H')[0]
    def u32be(self) -> int: return self.unpack('>I')[0]
    def u64be(self) -> int: return self.unpack('>Q')[0]
    def u32le(self) -> int: return self.unpack('<I')[0]
