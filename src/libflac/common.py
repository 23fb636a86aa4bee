SIGNATURE = b'fLaC'
HEADER_SIZE = 4
STREAMINFO_SIZE = 34

class FormatError(ValueError):
    pass

class BoundsError(ValueError):
    def __init__(self, position: int, requested: int, remaining: int):
        self.position = position
        self.requested = requested
        self.remaining = remaining
        super().__init__(f'Read of {requested} bytes at offset {position} exceeds buffer ({remaining} bytes remaining)')
