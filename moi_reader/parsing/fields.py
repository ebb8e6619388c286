import struct

from ..exceptions import FieldBoundsError

# Explicit '>' so the host byte order never leaks into decoded values
_U16_BE = struct.Struct('>H')
_U32_BE = struct.Struct('>I')


class FieldReader:
    """
    Bounds-checked primitive reads from a byte buffer.

    Every read raises FieldBoundsError instead of silently returning a
    short slice, so a truncated file can never produce a partial value.
    """

    def __init__(self, buffer: bytes):
        self.buffer = bytes(buffer)

    def __len__(self) -> int:
        return len(self.buffer)

    def byte(self, pos: int) -> int:
        self._check(pos, 1)
        return self.buffer[pos]

    def ascii_string(self, pos: int, length: int) -> str:
        self._check(pos, length)
        # Non-ASCII bytes become '?' rather than failing the whole record
        return self.buffer[pos:pos + length].decode('ascii', errors='replace').replace('\ufffd', '?')

    def u16_be(self, pos: int) -> int:
        self._check(pos, _U16_BE.size)
        return _U16_BE.unpack_from(self.buffer, pos)[0]

    def u32_be(self, pos: int) -> int:
        self._check(pos, _U32_BE.size)
        return _U32_BE.unpack_from(self.buffer, pos)[0]

    def _check(self, pos: int, width: int):
        if pos < 0 or pos + width > len(self.buffer):
            raise FieldBoundsError(pos, width, len(self.buffer))
