from libflac import BoundsError, FormatError, MetadataBlock, StreamInfo, VorbisComment, parser
try:
    from .common import PIPEIN, fatal, format_si, format_time
    from .tools.cli import CliParams
except ImportError:
    from common import PIPEIN, fatal, format_si, format_time
    from tools.cli import CliParams
import filetype, os, sys

def read_input(rfile: str, bufsize: int) -> bytes:
    if rfile == '': fatal('Input file must be given')
    if rfile in PIPEIN: return sys.stdin.buffer.read(bufsize)
    if not os.path.exists(rfile): fatal("Input file doesn't exist")
    with open(rfile, 'rb') as f: return f.read(bufsize)

def describe(buffer: bytes) -> str:
    kind = filetype.guess(buffer[:8192])
    if kind is None: return 'It seems this is not a valid FLAC file.'
    return f'It seems this is not a valid FLAC file (detected {kind.mime}).'

def load(rfile: str, params: CliParams) -> list[MetadataBlock]:
    buffer = read_input(rfile, params.bufsize)
    try: blocks = parser.parse(buffer)
    except FormatError: fatal(describe(buffer))
    except BoundsError as e: fatal(f'Truncated metadata: {e}')

    logging_info(params.loglevel, blocks, len(buffer))
    return blocks

def logging_info(loglevel: int, blocks: list[MetadataBlock], size: int):
    if loglevel == 0: return

    duration = next((b.data.duration for b in blocks if isinstance(b.data, StreamInfo)), 0.0)
    print(f'blocks={len(blocks)} size={format_si(parser.end_of_metadata(blocks))}B read={format_si(size)}B duration={format_time(duration)}', file=sys.stderr)
    if loglevel > 1:
        for i, block in enumerate(blocks):
            print(f'  #{i} @0x{block.offset:06x} {block.header.name} ({block.header.length} bytes)', file=sys.stderr)

def render_streaminfo(sib: StreamInfo) -> list[str]:
    return [
        f'  minimum blocksize: {sib.min_block_size} samples',
        f'  maximum blocksize: {sib.max_block_size} samples',
        f'  minimum framesize: {sib.min_frame_size} bytes',
        f'  maximum framesize: {sib.max_frame_size} bytes',
        f'  sample_rate: {sib.sample_rate} Hz',
        f'  channels: {sib.channels}',
        f'  bits-per-sample: {sib.bits_per_sample}',
        f'  total samples: {sib.total_samples}',
        f'  MD5 signature: {sib.md5_signature}',
    ]

def render_vorbis(vcb: VorbisComment) -> list[str]:
    out = [f'  vendor string: {vcb.vendor}', f'  comments: {vcb.total_comments}']
    out.extend(f'    comment[{i}]: {c}' for i, c in enumerate(vcb.comments))
    return out

def render(blocks: list[MetadataBlock]) -> str:
    out = []
    for i, block in enumerate(blocks):
        mbh = block.header
        out.append(f'METADATA block #{i}')
        out.append(f'  type: {mbh.type} ({mbh.name})')
        out.append(f'  is last: {str(mbh.last).lower()}')
        out.append(f'  length: {mbh.length}')
        match block.data:
            case StreamInfo():    out.extend(render_streaminfo(block.data))
            case VorbisComment(): out.extend(render_vorbis(block.data))
    return '\n'.join(out)

def info(rfile: str, params: CliParams):
    blocks = load(rfile, params)
    print(render(blocks).encode('utf-8', errors='surrogateescape').decode('utf-8', errors='replace'))
