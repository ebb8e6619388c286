import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from .. import config
from ..exceptions import FieldBoundsError
from ..models import (
    AspectRatio,
    DecodeError,
    DecodeResult,
    ErrorKind,
    FileRecord,
    TVSystem,
)
from .fields import FieldReader


@dataclass
class RawFields:
    """Field values exactly as stored, before any validation."""
    version: str
    file_size: int
    year: int
    month: int
    day: int
    hour: int
    minute: int
    video_length_ms: int
    video_format: int


class _DecodeFailure(Exception):
    """Carries a finished DecodeError out of a validation step."""

    def __init__(self, error: DecodeError):
        super().__init__(error.message)
        self.error = error


def aspect_ratio_from_format(video_format: int) -> AspectRatio:
    """
    Low nibble of the video format byte: 0 and 1 for 4:3, 4 and 5 for 16:9.
    """
    value = config.ASPECT_RATIO_NIBBLES.get(video_format & 0x0F)
    return AspectRatio(value) if value else AspectRatio.UNKNOWN


def tv_system_from_format(video_format: int) -> TVSystem:
    """
    High nibble of the video format byte: 4 for NTSC, 5 for PAL.
    """
    value = config.TV_SYSTEM_NIBBLES.get((video_format >> 4) & 0x0F)
    return TVSystem(value) if value else TVSystem.UNKNOWN


class RecordDecoder:
    """
    Turns the raw bytes of one .MOI file into a FileRecord.

    decode() never raises: it returns either a FileRecord or a DecodeError.
    Error precedence follows read order. A short buffer is reported before
    anything is validated, and an invalid date is reported before the video
    length is looked at.
    """

    def decode(self, buffer: bytes) -> DecodeResult:
        try:
            raw = self.read_fields(FieldReader(buffer))
            creation_date = self._build_creation_date(raw)
            video_length = self._build_video_length(raw.video_length_ms)

            return FileRecord(
                version=raw.version,
                file_size_bytes=raw.file_size,
                creation_date=creation_date,
                video_length=video_length,
                aspect_ratio=aspect_ratio_from_format(raw.video_format),
                tv_system=tv_system_from_format(raw.video_format),
            )

        except FieldBoundsError as e:
            error = DecodeError(ErrorKind.BOUNDS_ERROR, str(e))
        except _DecodeFailure as e:
            error = e.error
        except Exception as e:
            error = DecodeError(
                ErrorKind.UNKNOWN_ERROR,
                "Unexpected error occurred during parsing.",
                cause=e,
            )

        logging.debug(f"Decode failed ({error.kind.value}): {error.message}")
        return error

    def read_fields(self, reader: FieldReader) -> RawFields:
        """Reads every field in offset order. Raises FieldBoundsError."""
        return RawFields(
            version=reader.ascii_string(config.VERSION_POS, config.VERSION_LEN),
            file_size=reader.u32_be(config.FILE_SIZE_POS),
            year=reader.u16_be(config.YEAR_POS),
            month=reader.byte(config.MONTH_POS),
            day=reader.byte(config.DAY_POS),
            hour=reader.byte(config.HOUR_POS),
            minute=reader.byte(config.MIN_POS),
            video_length_ms=reader.u32_be(config.VIDEO_LENGTH_POS),
            video_format=reader.byte(config.VIDEO_FMT_POS),
        )

    def _build_creation_date(self, raw: RawFields) -> datetime:
        try:
            return datetime(raw.year, raw.month, raw.day, raw.hour, raw.minute, 0)
        except ValueError:
            message = (
                "Could not parse the creation date. "
                f"{raw.year}/{raw.month}/{raw.day} {raw.hour}:{raw.minute} "
                "is not a valid date and time."
            )
            raise _DecodeFailure(DecodeError(ErrorKind.DATE_ERROR, message))

    def _build_video_length(self, video_length_ms: int) -> timedelta:
        try:
            return timedelta(milliseconds=video_length_ms)
        except (OverflowError, ValueError):
            message = (
                "Could not parse the video length. "
                f"{video_length_ms} could not be converted to a length of time."
            )
            raise _DecodeFailure(DecodeError(ErrorKind.DURATION_ERROR, message))


_default_decoder = RecordDecoder()


def decode(buffer: bytes) -> DecodeResult:
    """Decodes one buffer with a shared RecordDecoder."""
    return _default_decoder.decode(buffer)
