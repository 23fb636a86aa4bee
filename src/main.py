import signal
def ctrlc(signum, frame): exit(1)
signal.signal(signal.SIGINT, ctrlc)

try: from .tools import cli
except ImportError: from tools import cli
import os, sys

PATH_ABSOLUTE = os.path.dirname(os.path.abspath(__file__))
BANNER = 'FLAC metadata inspector\n'

def main():
    executable = os.path.basename(sys.argv[0])
    ACTION, METAACTION, INPUT, PARAMS = cli.parse(sys.argv)

    if ACTION in cli.INFO_OPT:
        try: from . import info
        except ImportError: import info
        info.info(INPUT, PARAMS)
    elif ACTION in cli.METADATA_OPT:
        try: from . import header
        except ImportError: import header
        header.modify(INPUT, METAACTION, PARAMS)
    elif ACTION in cli.VORBISMETA_OPT:
        try: from . import header
        except ImportError: import header
        header.vorbismeta(INPUT, PARAMS)
    elif ACTION in cli.HELP_OPT:
        print(BANNER)
        helpname = 'general'
        if INPUT in cli.INFO_OPT:         helpname = 'info'
        elif INPUT in cli.METADATA_OPT:   helpname = 'metadata'
        elif INPUT in cli.VORBISMETA_OPT: helpname = 'vorbismeta'
        with open(f'{PATH_ABSOLUTE}/help/{helpname}.txt', 'r') as f: print(f.read().replace('{flac}', executable))
    else:
        print('FLAC metadata inspector', file=sys.stderr)
        print(f'Abstract syntax: {executable} [info|meta|vorbismeta] <input> [kwargs...]', file=sys.stderr)
        print(f'Type `{executable} help` to get help.', file=sys.stderr)

if __name__ == '__main__': main()
