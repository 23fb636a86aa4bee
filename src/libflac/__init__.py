from .common     import SIGNATURE, FormatError, BoundsError
from .tools      import head
from .tools.head import BlockHeader, name_of
from .tools.cursor import ByteCursor

from .streaminfo import StreamInfo
from .vorbis     import VorbisComment
from .parser     import MetadataBlock, parse, iter_blocks
