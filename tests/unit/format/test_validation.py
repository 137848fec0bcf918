"""Unit tests for fmt field decoding and allow-list checks."""

import pytest

from wavpcm.format.types import ConvertResult
from wavpcm.format.validation import (
    ALLOWED_BITS_PER_SAMPLE,
    ALLOWED_CHANNELS,
    ALLOWED_SAMPLE_RATES,
    FormatFields,
    check_format_constraints,
    read_format_fields,
)


class TestReadFormatFields:
    """Tests for decoding the fixed-offset fmt fields."""

    def test_decodes_fields(self, make_wav) -> None:
        data = make_wav(b"", sample_rate=96000, channels=1, bits_per_sample=24)
        fields = read_format_fields(data)
        assert fields == FormatFields(channels=1, sample_rate=96000, bits_per_sample=24)

    def test_decodes_out_of_range_values_verbatim(self, make_wav) -> None:
        """Large values are decoded whole, not truncated to a byte."""
        data = make_wav(b"", channels=258, bits_per_sample=272)
        fields = read_format_fields(data)
        assert fields is not None
        assert fields.channels == 258
        assert fields.bits_per_sample == 272

    @pytest.mark.parametrize("length", [22, 24, 28, 35])
    def test_truncated_header(self, make_wav, length: int) -> None:
        data = make_wav(b"")[:length]
        assert read_format_fields(data) is None


class TestCheckFormatConstraints:
    """Tests for the sample rate, channel and bit depth allow-lists."""

    @pytest.mark.parametrize("sample_rate", ALLOWED_SAMPLE_RATES)
    @pytest.mark.parametrize("channels", ALLOWED_CHANNELS)
    @pytest.mark.parametrize("bits_per_sample", ALLOWED_BITS_PER_SAMPLE)
    def test_accepts_allowed_combinations(
        self, sample_rate: int, channels: int, bits_per_sample: int
    ) -> None:
        fields = FormatFields(
            channels=channels, sample_rate=sample_rate, bits_per_sample=bits_per_sample
        )
        assert check_format_constraints(fields) == ConvertResult.SUCCESS

    @pytest.mark.parametrize("sample_rate", [0, 8000, 22050, 32000, 88200, 44101])
    def test_rejects_sample_rate(self, sample_rate: int) -> None:
        fields = FormatFields(channels=2, sample_rate=sample_rate, bits_per_sample=16)
        assert check_format_constraints(fields) == ConvertResult.UNSUPPORTED_SAMPLE_RATE

    @pytest.mark.parametrize("channels", [0, 3, 6, 258])
    def test_rejects_channels(self, channels: int) -> None:
        fields = FormatFields(channels=channels, sample_rate=48000, bits_per_sample=16)
        assert check_format_constraints(fields) == ConvertResult.UNSUPPORTED_CHANNELS

    @pytest.mark.parametrize("bits_per_sample", [0, 8, 12, 20, 64, 272])
    def test_rejects_bits_per_sample(self, bits_per_sample: int) -> None:
        fields = FormatFields(channels=1, sample_rate=48000, bits_per_sample=bits_per_sample)
        assert check_format_constraints(fields) == ConvertResult.UNSUPPORTED_BITS_PER_SAMPLE

    def test_sample_rate_checked_before_channels(self) -> None:
        fields = FormatFields(channels=5, sample_rate=22050, bits_per_sample=8)
        assert check_format_constraints(fields) == ConvertResult.UNSUPPORTED_SAMPLE_RATE

    def test_channels_checked_before_bits_per_sample(self) -> None:
        fields = FormatFields(channels=5, sample_rate=44100, bits_per_sample=8)
        assert check_format_constraints(fields) == ConvertResult.UNSUPPORTED_CHANNELS
