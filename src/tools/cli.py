INFO_OPT = ['info', 'i']
METADATA_OPT = ['meta', 'metadata']
VORBISMETA_OPT = ['vorbismeta', 'vm']
HELP_OPT = ['help', 'h', '?']

META_PARSE = 'parse'

READ_SIZE = 65536

class CliParams:
    def __init__(self):
        self.output = ''
        self.bufsize = READ_SIZE
        self.overwrite = False
        self.loglevel = 0

    def set_loglevel(self, value: str): self.loglevel = int(value)

def parse(args: list[str]):
    params = CliParams()
    executable = args.pop(0)
    if not args: return ('', '', '', params)

    action = args.pop(0).lower()
    metaaction = ''
    if action in METADATA_OPT:
        metaaction = args.pop(0).lower() if args else exit(f'Metadata action not specified, type `{executable} help meta` for available options.')

    input_file = ''
    if args and not args[0].startswith('-') or args[:1] == ['-']: input_file = args.pop(0)

    while args:
        key = args.pop(0).lower()

        if key.startswith('-'):
            key = key.lstrip('-')

            if key in ('file', 'input', 'in', 'f'):
                input_file = args.pop(0)
            elif key in ('output', 'out', 'o'):
                params.output = args.pop(0)
            elif key in ('y', 'force'):
                params.overwrite = True
            elif key in ('bufsize', 'buffer', 'bs'):
                params.bufsize = int(args.pop(0))
            elif key in ('log', 'v'):
                if args and args[0].isnumeric():
                    params.set_loglevel(args.pop(0))
                else: params.set_loglevel('1')

    return (action, metaaction, input_file, params)
