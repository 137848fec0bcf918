"""Validation of decoded WAVE format fields.

The fmt chunk fields are checked against fixed allow-lists. Values outside
a field's representable range need no separate check; they simply fail
membership.
"""

from dataclasses import dataclass

from wavpcm.format.riff import (
    BITS_PER_SAMPLE_OFFSET,
    CHANNELS_OFFSET,
    SAMPLE_RATE_OFFSET,
    read_field,
)
from wavpcm.format.types import ConvertResult

ALLOWED_SAMPLE_RATES = (
    44100,  # music, CD
    48000,  # film, games, default
    96000,  # high-res
    192000,  # mastering-grade
)

ALLOWED_CHANNELS = (
    1,  # mono
    2,  # stereo
)

ALLOWED_BITS_PER_SAMPLE = (16, 24, 32)


@dataclass(frozen=True)
class FormatFields:
    """Numeric fmt chunk fields decoded from their fixed offsets."""

    channels: int
    sample_rate: int
    bits_per_sample: int


def read_format_fields(data: bytes) -> FormatFields | None:
    """Decode channels, sample rate and bits per sample.

    Returns:
        The decoded fields, or None if the buffer is too short to hold them.
    """
    channels = read_field(data, CHANNELS_OFFSET, "<H")
    sample_rate = read_field(data, SAMPLE_RATE_OFFSET, "<I")
    bits_per_sample = read_field(data, BITS_PER_SAMPLE_OFFSET, "<H")

    if channels is None or sample_rate is None or bits_per_sample is None:
        return None

    return FormatFields(
        channels=channels,
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
    )


def check_format_constraints(fields: FormatFields) -> ConvertResult:
    """Check decoded fields against the allow-lists.

    The order is sample rate, channels, bits per sample; the first failure
    wins.
    """
    if fields.sample_rate not in ALLOWED_SAMPLE_RATES:
        return ConvertResult.UNSUPPORTED_SAMPLE_RATE
    if fields.channels not in ALLOWED_CHANNELS:
        return ConvertResult.UNSUPPORTED_CHANNELS
    if fields.bits_per_sample not in ALLOWED_BITS_PER_SAMPLE:
        return ConvertResult.UNSUPPORTED_BITS_PER_SAMPLE
    return ConvertResult.SUCCESS
