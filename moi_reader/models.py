from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union


class AspectRatio(Enum):
    UNKNOWN = 'Unknown'
    RATIO_4_3 = '4:3'
    RATIO_16_9 = '16:9'


class TVSystem(Enum):
    UNKNOWN = 'Unknown'
    NTSC = 'NTSC'
    PAL = 'PAL'


class ErrorKind(Enum):
    BOUNDS_ERROR = 'BoundsError'
    DATE_ERROR = 'DateError'
    DURATION_ERROR = 'DurationError'
    UNKNOWN_ERROR = 'UnknownError'


@dataclass(frozen=True)
class FileRecord:
    """
    Metadata decoded from a single .MOI file.
    """
    version: str
    file_size_bytes: int
    creation_date: datetime        # naive, the camcorder stores local time
    video_length: timedelta
    aspect_ratio: AspectRatio
    tv_system: TVSystem

    # Set by the batch decoder, never by the record decoder
    file_name: Optional[str] = None


@dataclass(frozen=True)
class DecodeError:
    """
    Why a single .MOI file could not be decoded.
    """
    kind: ErrorKind
    message: str
    cause: Optional[BaseException] = field(default=None, compare=False)  # only for UNKNOWN_ERROR
    file_path: Optional[Path] = None

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}\n{self.cause!r}"
        return self.message


DecodeResult = Union[FileRecord, DecodeError]


@dataclass
class BatchResult:
    """
    Outcome of decoding every file under an input path.
    Each resolved path is in exactly one of the two lists. `entries` keeps
    every outcome next to its source path, in resolved path order.
    """
    records: List[FileRecord] = field(default_factory=list)
    errors: List[DecodeError] = field(default_factory=list)
    entries: List[Tuple[Path, DecodeResult]] = field(default_factory=list)

    def add(self, path: Path, outcome: DecodeResult):
        self.entries.append((path, outcome))
        if isinstance(outcome, FileRecord):
            self.records.append(outcome)
        else:
            self.errors.append(outcome)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def is_empty(self) -> bool:
        """True when no MOI files were found at all."""
        return not self.records and not self.errors

    def __len__(self) -> int:
        return len(self.records) + len(self.errors)
