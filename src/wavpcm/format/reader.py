"""WAVE to PCM conversion.

This module runs the full extraction pipeline: pre-read checks against a
byte source, header validation, format constraint checks, the 'data' chunk
scan, and assembly of the extracted samples.
"""

import errno
import logging
from pathlib import Path

from wavpcm.format.riff import (
    EXPECTED_DATA_POS_START,
    RiffError,
    check_riff_header,
    find_data_chunk,
)
from wavpcm.format.types import ConvertResult, PcmData, WavConversion
from wavpcm.format.validation import check_format_constraints, read_format_fields
from wavpcm.source import ByteSource, FileByteSource

logger = logging.getLogger(__name__)

# errno values reported when another process holds the file
_LOCKED_ERRNOS = frozenset({errno.EBUSY, errno.ETXTBSY})

# ERROR_SHARING_VIOLATION, ERROR_LOCK_VIOLATION; raised as PermissionError on Windows
_LOCKED_WINERRORS = frozenset({32, 33})


def _is_locked(error: OSError) -> bool:
    return error.errno in _LOCKED_ERRNOS or getattr(error, "winerror", None) in _LOCKED_WINERRORS


class WavConversionError(RiffError):
    """A WAVE file could not be converted to PCM."""

    def __init__(self, result: ConvertResult, source: object = None) -> None:
        self.result = result
        self.source = source
        message = f"{result.display_name} ({result.name})"
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)


def parse_wav_bytes(data: bytes | bytearray | memoryview) -> WavConversion:
    """Extract PCM samples from a fully buffered WAVE file.

    Args:
        data: The complete file contents. Never modified.

    Returns:
        WavConversion with SUCCESS and the extracted PcmData, or the status
        of the first failed stage and no data.
    """
    data = bytes(data)

    if not data:
        return _fail(ConvertResult.FILE_EMPTY)
    if len(data) <= EXPECTED_DATA_POS_START:
        return _fail(ConvertResult.UNSUPPORTED_FILE_SIZE)

    header_result = check_riff_header(data)
    if not header_result.is_success:
        return _fail(header_result)

    fields = read_format_fields(data)
    if fields is None:
        return _fail(ConvertResult.UNSUPPORTED_FILE_SIZE)

    constraint_result = check_format_constraints(fields)
    if not constraint_result.is_success:
        return _fail(constraint_result)

    location = find_data_chunk(data, EXPECTED_DATA_POS_START)
    if location is None:
        return _fail(ConvertResult.MISSING_DATA_CHUNK)

    data_end = location.end(len(data))

    if location.offset == 0 or location.offset >= len(data):
        return _fail(ConvertResult.MISSING_DATA_CHUNK)

    if location.offset + location.declared_size > len(data):
        logger.debug(
            "data chunk declares %d bytes, only %d available",
            location.declared_size,
            data_end - location.offset,
        )

    pcm = PcmData(
        samples=data[location.offset : data_end],
        sample_rate=fields.sample_rate,
        bits_per_sample=fields.bits_per_sample,
        channels=fields.channels,
    )
    logger.debug(
        "extracted %d bytes of PCM (%d Hz, %d ch, %d-bit)",
        len(pcm.samples),
        pcm.sample_rate,
        pcm.channels,
        pcm.bits_per_sample,
    )
    return WavConversion.success(pcm)


def convert_wav(source: ByteSource | Path | str) -> WavConversion:
    """Read a WAVE file and extract its PCM samples.

    Pre-read failures (missing file, wrong extension, permissions, locks,
    I/O errors, empty file) are reported as statuses; no exception escapes.

    Args:
        source: A ByteSource, or a path wrapped in a FileByteSource.

    Returns:
        WavConversion describing the outcome.
    """
    if not isinstance(source, ByteSource):
        source = FileByteSource(source)

    try:
        if not source.exists():
            return _fail(ConvertResult.FILE_NOT_FOUND, source)
        if not source.is_regular_file() or not source.has_expected_extension():
            return _fail(ConvertResult.INVALID_EXTENSION, source)
        if not source.can_read():
            return _fail(ConvertResult.UNAUTHORIZED_READ, source)

        data = source.read_all()
    except OSError as e:
        if _is_locked(e):
            return _fail(ConvertResult.FILE_LOCKED, source)
        if isinstance(e, PermissionError):
            return _fail(ConvertResult.UNAUTHORIZED_READ, source)
        logger.debug("read of %s failed: %s", source, e)
        return _fail(ConvertResult.UNKNOWN_READ_ERROR, source)
    except Exception:
        logger.debug("unexpected failure reading %s", source, exc_info=True)
        return _fail(ConvertResult.UNKNOWN_READ_ERROR, source)

    return parse_wav_bytes(data)


def load_pcm_wav(source: ByteSource | Path | str) -> PcmData:
    """Read a WAVE file and return its PCM samples.

    Args:
        source: A ByteSource or a path to a .wav file.

    Returns:
        The extracted PcmData.

    Raises:
        WavConversionError: If conversion fails; .result holds the status.
    """
    conversion = convert_wav(source)
    if conversion.data is None:
        raise WavConversionError(conversion.result, source)
    return conversion.data


def _fail(result: ConvertResult, source: object = None) -> WavConversion:
    if source is None:
        logger.debug("conversion failed: %s", result.name)
    else:
        logger.debug("conversion of %s failed: %s", source, result.name)
    return WavConversion.failure(result)
