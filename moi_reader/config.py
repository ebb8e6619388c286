"""
Configuration constants for the MOI reader.
"""

# --- File Type Definitions ---
MOI_EXT = '.moi'

# --- MOI Layout ---
# Every multi-byte field is stored big-endian. Layout as documented on the
# Wikipedia MOI article (there is no official documentation):
#   00-01  Version            56 36 (V6)
#   02-05  MOI filesize       00 00 01 C3 (451 bytes)
#   06-07  Year               07 D8 (2008)
#   08     Month              07
#   09     Day                04
#   0A     Hour               0B
#   0B     Minutes            16
#   0E-11  Video length (ms)  00 08 9D 00 (564480 ms)
#   80     Video format       low nibble: aspect ratio, high nibble: TV system
VERSION_POS = 0x00
VERSION_LEN = 2
FILE_SIZE_POS = 0x02
YEAR_POS = 0x06
MONTH_POS = 0x08
DAY_POS = 0x09
HOUR_POS = 0x0A
MIN_POS = 0x0B
VIDEO_LENGTH_POS = 0x0E
VIDEO_FMT_POS = 0x80

# Smallest buffer that satisfies every offset above
MIN_BUFFER_LENGTH = VIDEO_FMT_POS + 1  # 129 bytes

# Video format nibble lookups. Anything missing maps to "Unknown".
ASPECT_RATIO_NIBBLES = {0: '4:3', 1: '4:3', 4: '16:9', 5: '16:9'}
TV_SYSTEM_NIBBLES = {4: 'NTSC', 5: 'PAL'}

# --- Performance ---
# MOI files are tiny; threads only help on slow or network storage.
DEFAULT_MAX_WORKERS = 1
MAX_WORKERS_CAP = 8

# --- Reporting ---
RECORD_HEADERS = [
    "File Name",
    "Version",
    "File Size",
    "Creation Date",
    "Video Length",
    "Aspect Ratio",
    "TV System",
]
ERROR_HEADERS = ["File Path", "Error", "Message"]
CSV_HEADERS = ["Source Path", "Status"] + RECORD_HEADERS[1:] + ["Message"]
