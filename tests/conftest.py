import struct
import pytest


def pack_streaminfo(min_block=4096, max_block=4096, min_frame=0, max_frame=0,
                    sample_rate=44100, channel_bits=1, bps_bits=15, total=0,
                    md5=bytes(16)):
    """Pack raw STREAMINFO field bits; channel_bits and bps_bits are the stored (biased) values."""
    body = struct.pack('>H', min_block)
    body += struct.pack('>Q', max_block << 48 | min_frame << 24 | max_frame)
    body += struct.pack('>Q', sample_rate << 44 | channel_bits << 41 | bps_bits << 36 | total)
    return body + md5


def pack_vorbis(vendor=b'', comments=(), count=None):
    body = struct.pack('<I', len(vendor)) + vendor
    body += struct.pack('<I', len(comments) if count is None else count)
    for comment in comments:
        body += struct.pack('<I', len(comment)) + comment
    return body


def pack_header(block_type, length, last=False):
    return struct.pack('>I', (0x80000000 if last else 0) | block_type << 24 | length)


def pack_flac(*blocks):
    """blocks: (type, body) pairs; the last one gets the last-block flag."""
    out = b'fLaC'
    for i, (block_type, body) in enumerate(blocks):
        out += pack_header(block_type, len(body), i == len(blocks) - 1) + body
    return out


@pytest.fixture
def streaminfo_body():
    return pack_streaminfo


@pytest.fixture
def vorbis_body():
    return pack_vorbis


@pytest.fixture
def flac_bytes():
    return pack_flac


@pytest.fixture
def header_bytes():
    return pack_header
