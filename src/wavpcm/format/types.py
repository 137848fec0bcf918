"""Python types for PCM extraction results.

These types describe the outcome of a WAVE to PCM conversion: a closed
status enumeration, the extracted payload with its format metadata, and the
location of the data chunk inside the source buffer.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from numpy.typing import NDArray

from wavpcm.format.samples import decode_pcm_samples


class ConvertResult(IntEnum):
    """Outcome of a WAVE to PCM conversion.

    Exactly one member accompanies every conversion attempt. Only SUCCESS
    is paired with extracted data.
    """

    SUCCESS = 0
    """No errors, samples were extracted."""

    # File operations

    FILE_NOT_FOUND = 1
    """File does not exist."""

    INVALID_EXTENSION = 2
    """Not a regular file, or the extension is not '.wav'."""

    UNAUTHORIZED_READ = 3
    """Not authorized to read this file."""

    FILE_LOCKED = 4
    """File is in use by another process."""

    UNKNOWN_READ_ERROR = 5
    """Unclassified failure while reading the file."""

    FILE_EMPTY = 6
    """There is no content inside this file."""

    # Container structure

    UNSUPPORTED_FILE_SIZE = 7
    """Too small to hold the RIFF header or a fixed-offset field."""

    INVALID_RIFF_MAGIC = 8
    """Bytes 0-4 must be 'RIFF'."""

    INVALID_WAVE_MAGIC = 9
    """Bytes 8-12 must be 'WAVE'."""

    INVALID_FMT_CHUNK = 10
    """Bytes 12-16 must be 'fmt '."""

    INVALID_FORMAT_TYPE = 11
    """Audio format tag at byte 20 must be 1 (integer PCM)."""

    # Format constraints

    UNSUPPORTED_SAMPLE_RATE = 12
    """Sample rate is not in ALLOWED_SAMPLE_RATES."""

    UNSUPPORTED_CHANNELS = 13
    """Channel count is not in ALLOWED_CHANNELS."""

    UNSUPPORTED_BITS_PER_SAMPLE = 14
    """Bit depth is not in ALLOWED_BITS_PER_SAMPLE."""

    MISSING_DATA_CHUNK = 15
    """No usable 'data' chunk was found."""

    @property
    def is_success(self) -> bool:
        return self is ConvertResult.SUCCESS

    @property
    def display_name(self) -> str:
        """Human-readable description of this result."""
        names = {
            ConvertResult.SUCCESS: "Success",
            ConvertResult.FILE_NOT_FOUND: "File not found",
            ConvertResult.INVALID_EXTENSION: "Not a regular .wav file",
            ConvertResult.UNAUTHORIZED_READ: "Not authorized to read file",
            ConvertResult.FILE_LOCKED: "File is locked",
            ConvertResult.UNKNOWN_READ_ERROR: "Unknown read error",
            ConvertResult.FILE_EMPTY: "File is empty",
            ConvertResult.UNSUPPORTED_FILE_SIZE: "File too small",
            ConvertResult.INVALID_RIFF_MAGIC: "Missing RIFF header",
            ConvertResult.INVALID_WAVE_MAGIC: "Missing WAVE format id",
            ConvertResult.INVALID_FMT_CHUNK: "Missing fmt chunk",
            ConvertResult.INVALID_FORMAT_TYPE: "Not integer PCM",
            ConvertResult.UNSUPPORTED_SAMPLE_RATE: "Unsupported sample rate",
            ConvertResult.UNSUPPORTED_CHANNELS: "Unsupported channel count",
            ConvertResult.UNSUPPORTED_BITS_PER_SAMPLE: "Unsupported bits per sample",
            ConvertResult.MISSING_DATA_CHUNK: "Missing data chunk",
        }
        return names.get(self, "Unknown")


@dataclass(frozen=True)
class DataChunkLocation:
    """Where the payload of the first 'data' chunk starts, and its claimed size."""

    offset: int
    """Byte offset immediately after the chunk's size field."""

    declared_size: int
    """Payload size the chunk header claims."""

    def end(self, buffer_length: int) -> int:
        """Payload end position, clamped to the buffer length."""
        return min(buffer_length, self.offset + self.declared_size)


@dataclass(frozen=True)
class PcmData:
    """Raw PCM samples extracted from a WAVE file."""

    samples: bytes
    """Interleaved little-endian integer samples."""

    sample_rate: int
    """Sample rate in Hz."""

    bits_per_sample: int
    """Bit depth of each sample (16, 24 or 32)."""

    channels: int
    """Number of interleaved channels (1 = mono, 2 = stereo)."""

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8

    @property
    def block_align(self) -> int:
        """Bytes per frame across all channels."""
        return self.bytes_per_sample * self.channels

    @property
    def num_frames(self) -> int:
        """Number of complete frames in the payload."""
        return len(self.samples) // self.block_align

    @property
    def duration_seconds(self) -> float:
        return self.num_frames / self.sample_rate

    def to_array(self, normalize: bool = False) -> NDArray[Any]:
        """Decode samples into a (num_frames, channels) array.

        See wavpcm.format.samples.decode_pcm_samples.
        """
        return decode_pcm_samples(
            self.samples,
            self.bits_per_sample,
            self.channels,
            normalize=normalize,
        )


@dataclass(frozen=True)
class WavConversion:
    """Result of a conversion: a status plus data on success."""

    result: ConvertResult
    data: PcmData | None = None

    @classmethod
    def success(cls, data: PcmData) -> "WavConversion":
        """Create a successful conversion."""
        return cls(result=ConvertResult.SUCCESS, data=data)

    @classmethod
    def failure(cls, result: ConvertResult) -> "WavConversion":
        """Create a failed conversion carrying no data."""
        if result.is_success:
            raise ValueError("failure() requires a non-success result")
        return cls(result=result)

    @property
    def ok(self) -> bool:
        return self.result.is_success
