from libflac import VorbisComment
try:
    from .common import PIPEOUT, check_overwrite, fatal, get_file_stem
    from .info import load
    from .tools.cli import CliParams, META_PARSE
except ImportError:
    from common import PIPEOUT, check_overwrite, fatal, get_file_stem
    from info import load
    from tools.cli import CliParams, META_PARSE
import base64, json, sys

def find_comment(file: str, params: CliParams) -> VorbisComment:
    vcb = next((b.data for b in load(file, params) if isinstance(b.data, VorbisComment)), None)
    if vcb is None: fatal('No VORBIS_COMMENT block found.')
    return vcb

def to_json(vcb: VorbisComment) -> list[dict[str, str]]:
    json_list = []
    for key, value in vcb.tags():
        data = value.encode('utf-8', errors='surrogateescape')
        try: data_str, itype = data.decode('utf-8'), 'string'
        except UnicodeDecodeError: data_str, itype = base64.b64encode(data).decode('utf-8'), 'base64'
        key = key.encode('utf-8', errors='surrogateescape').decode('utf-8', errors='replace')
        json_list.append({'key': key, 'type': itype, 'value': data_str})
    return json_list

def to_vorbis(vcb: VorbisComment) -> bytes:
    return b''.join(c.encode('utf-8', errors='surrogateescape') + b'\n' for c in vcb.comments)

def write_out(file: str, ext: str, data: bytes, params: CliParams):
    wfile = params.output or f'{get_file_stem(file)}.{ext}'
    if wfile in PIPEOUT: sys.stdout.buffer.write(data); return
    check_overwrite(wfile, params.overwrite)
    with open(wfile, 'wb') as f: f.write(data)

def modify(file: str, modtype: str, params: CliParams):
    if modtype == META_PARSE:
        vcb = find_comment(file, params)
        write_out(file, 'json', json.dumps(to_json(vcb), ensure_ascii=False, indent=2).encode('utf-8'), params)
    else: fatal('Invalid metadata action.')

def vorbismeta(file: str, params: CliParams):
    vcb = find_comment(file, params)
    write_out(file, 'txt', to_vorbis(vcb), params)
