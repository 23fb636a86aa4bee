from dataclasses import dataclass
from .common import STREAMINFO_SIZE
from .tools.cursor import ByteCursor

# STREAMINFO body, 34 bytes:
#   <16>  Minimum block size (samples)
#   <16>  Maximum block size (samples)
#   <24>  Minimum frame size (bytes), 0 if unknown
#   <24>  Maximum frame size (bytes), 0 if unknown
#   <20>  Sample rate (Hz)
#   <3>   Channels - 1
#   <5>   Bits per sample - 1
#   <36>  Total samples, 0 if unknown
#   <128> MD5 of the unencoded audio
# The middle fields are read as two 64-bit big-endian windows and split by mask.

MAX_BLOCK_MASK  = 0xFFFF000000000000
MIN_FRAME_MASK  = 0x0000FFFFFF000000
MAX_FRAME_MASK  = 0x0000000000FFFFFF

SAMPLE_RATE_MASK = 0xFFFFF00000000000
CHANNELS_MASK    = 0x00000E0000000000
BITS_MASK        = 0x000001F000000000
TOTAL_MASK       = 0x0000000FFFFFFFFF

@dataclass(frozen=True)
class StreamInfo:
    min_block_size: int
    max_block_size: int
    min_frame_size: int
    max_frame_size: int
    sample_rate: int
    channels: int
    bits_per_sample: int
    total_samples: int
    md5_signature: str

    @property
    def duration(self) -> float:
        if self.sample_rate == 0: return 0.0
        return self.total_samples / self.sample_rate

def decode(cursor: ByteCursor) -> StreamInfo:
    block = cursor.sub(STREAMINFO_SIZE)

    min_block_size = block.u16be()

    window = block.u64be()
    max_block_size = (window & MAX_BLOCK_MASK) >> 48
    min_frame_size = (window & MIN_FRAME_MASK) >> 24
    max_frame_size =  window & MAX_FRAME_MASK

    window = block.u64be()
    sample_rate     = (window & SAMPLE_RATE_MASK) >> 44
    channels        = ((window & CHANNELS_MASK) >> 41) + 1
    bits_per_sample = ((window & BITS_MASK) >> 36) + 1
    total_samples   =  window & TOTAL_MASK

    md5_signature = block.read(16).hex()

    return StreamInfo(min_block_size, max_block_size, min_frame_size, max_frame_size,
                      sample_rate, channels, bits_per_sample, total_samples, md5_signature)

def parse(body: bytes) -> StreamInfo: return decode(ByteCursor(body))
