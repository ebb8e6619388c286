"""
Custom exception hierarchy for the MOI reader.

Field- and file-level failures never escape a batch: they are turned into
DecodeError values. Only run-level failures (a bad root path) are raised to
the caller.
"""


class MoiReaderError(Exception):
    """Base exception for all MOI reader errors."""
    pass


class FieldBoundsError(MoiReaderError):
    """Raised when a buffer is too short to hold a requested field."""

    def __init__(self, pos: int, width: int, length: int):
        self.pos = pos
        self.width = width
        self.length = length
        super().__init__(
            f"File does not contain enough data: {width} byte(s) at 0x{pos:02X} "
            f"requested, buffer holds {length} byte(s)."
        )


class PathError(MoiReaderError):
    """Raised when the input path cannot be turned into a list of MOI files."""
    pass


class PathNotFoundError(PathError):
    """Raised when the input path is neither an existing file nor directory."""

    def __init__(self, path):
        self.path = path
        super().__init__(f'Cannot find file or path "{path}"')


class InvalidExtensionError(PathError):
    """Raised when a file path passed directly is not a .MOI file."""

    def __init__(self, path):
        self.path = path
        super().__init__(f'The file "{path}" does not have an .MOI extension.')
