import struct
import pytest


def build_moi(version=b"V6",
              file_size=278,
              year=2009,
              month=7,
              day=17,
              hour=14,
              minute=18,
              video_length_ms=564480,
              video_format=0x55,
              length=0x81) -> bytes:
    """Builds an MOI buffer with every field at its documented offset."""
    buf = bytearray(max(length, 0x81))
    buf[0x00:0x02] = version
    struct.pack_into(">I", buf, 0x02, file_size)
    struct.pack_into(">H", buf, 0x06, year)
    buf[0x08] = month
    buf[0x09] = day
    buf[0x0A] = hour
    buf[0x0B] = minute
    struct.pack_into(">I", buf, 0x0E, video_length_ms)
    buf[0x80] = video_format
    return bytes(buf[:length])


@pytest.fixture
def make_moi():
    """Returns the MOI buffer builder; keyword arguments override fields."""
    return build_moi


@pytest.fixture
def moi_dir(tmp_path):
    """A directory holding two valid MOI files, one truncated, one with a bad date."""
    root = tmp_path / "SD_VIDEO"
    root.mkdir()
    (root / "MOV001.MOI").write_bytes(build_moi())
    (root / "MOV002.moi").write_bytes(build_moi(video_format=0x40, day=18))
    (root / "MOV003.MOI").write_bytes(build_moi(length=0x20))
    (root / "MOV004.MOI").write_bytes(build_moi(month=13))
    (root / "MOV001.MOD").write_bytes(b"not metadata")
    return root
