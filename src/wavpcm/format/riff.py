"""RIFF/WAVE header utilities.

This module reads the fixed-offset fields of a canonical PCM WAVE header
and locates the 'data' chunk within a fully buffered file.

WAV core layout (PCM only):

    Offset | Size | Field
    -------|------|---------------------------------------
    0      | 4    | ChunkID = "RIFF"
    4      | 4    | ChunkSize (not validated)
    8      | 4    | Format = "WAVE"
    12     | 4    | Subchunk1ID = "fmt "
    16     | 4    | Subchunk1Size (not validated)
    20     | 2    | AudioFormat = 1 (PCM)
    22     | 2    | NumChannels
    24     | 4    | SampleRate
    28     | 4    | ByteRate (not validated)
    32     | 2    | BlockAlign (not validated)
    34     | 2    | BitsPerSample
    ??     | 4    | Subchunk2ID = "data"
    ??+4   | 4    | Subchunk2Size
    ??+8   | *    | PCM sample data
"""

import struct

from wavpcm.format.types import ConvertResult, DataChunkLocation

# FourCC identifiers
RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
DATA_ID = b"data"

# Audio format codes
WAVE_FORMAT_PCM = 1

# Files must be larger than this, and the 'data' scan starts here
EXPECTED_DATA_POS_START = 12

# Fixed field offsets
AUDIO_FORMAT_OFFSET = 20
CHANNELS_OFFSET = 22
SAMPLE_RATE_OFFSET = 24
BITS_PER_SAMPLE_OFFSET = 34

# FourCC + 4-byte size
CHUNK_HEADER_SIZE = 8


class RiffError(Exception):
    """Error reading RIFF files."""


def read_field(data: bytes, offset: int, fmt: str) -> int | None:
    """Read a little-endian unsigned integer at a fixed offset.

    Args:
        data: The buffered file contents.
        offset: Byte offset of the field.
        fmt: struct format string, "<H" or "<I".

    Returns:
        The decoded value, or None if the buffer ends before the field does.
    """
    if offset + struct.calcsize(fmt) > len(data):
        return None
    return struct.unpack_from(fmt, data, offset)[0]


def check_riff_header(data: bytes) -> ConvertResult:
    """Validate the magic sequences and the audio format tag.

    Checks run in a fixed order so the first violated field determines
    the result.

    Args:
        data: The buffered file contents, longer than EXPECTED_DATA_POS_START.

    Returns:
        SUCCESS, or the status of the first failed check.
    """
    if data[0:4] != RIFF_ID:
        return ConvertResult.INVALID_RIFF_MAGIC
    if data[8:12] != WAVE_ID:
        return ConvertResult.INVALID_WAVE_MAGIC
    if data[12:16] != FMT_ID:
        return ConvertResult.INVALID_FMT_CHUNK

    audio_format = read_field(data, AUDIO_FORMAT_OFFSET, "<H")
    if audio_format is None:
        return ConvertResult.UNSUPPORTED_FILE_SIZE

    # Integer PCM only
    if audio_format != WAVE_FORMAT_PCM:
        return ConvertResult.INVALID_FORMAT_TYPE

    return ConvertResult.SUCCESS


def find_data_chunk(
    data: bytes,
    start: int = EXPECTED_DATA_POS_START,
) -> DataChunkLocation | None:
    """Find the first 'data' chunk by scanning forward from start.

    Any occurrence of the bytes 'data' counts, including one that sits
    inside the payload of an earlier chunk; chunks are not walked by size.

    Args:
        data: The buffered file contents.
        start: Position to start scanning from.

    Returns:
        The payload location if a marker with a complete size field was
        found, None otherwise.
    """
    position = data.find(DATA_ID, start)

    # Any later match has even fewer bytes after it
    if position < 0 or position + CHUNK_HEADER_SIZE > len(data):
        return None

    declared_size = struct.unpack_from("<I", data, position + 4)[0]
    return DataChunkLocation(offset=position + CHUNK_HEADER_SIZE, declared_size=declared_size)
