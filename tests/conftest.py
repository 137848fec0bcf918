"""Shared fixtures for building WAVE buffers in tests."""

import struct
from collections.abc import Callable, Sequence

import pytest

WavBuilder = Callable[..., bytes]


def build_wav(
    samples: bytes = b"",
    sample_rate: int = 44100,
    channels: int = 2,
    bits_per_sample: int = 16,
    audio_format: int = 1,
    declared_size: int | None = None,
    chunks_before_data: Sequence[tuple[bytes, bytes]] = (),
) -> bytes:
    """Build a canonical PCM WAVE file.

    Args:
        samples: Payload for the data chunk.
        sample_rate: Sample rate in Hz.
        channels: Channel count.
        bits_per_sample: Bit depth.
        audio_format: Format tag written at offset 20.
        declared_size: Size written in the data chunk header (default: len(samples)).
        chunks_before_data: (FourCC, payload) chunks inserted between fmt and data.

    Returns:
        The complete WAV file as bytes.
    """
    bytes_per_sample = bits_per_sample // 8
    block_align = channels * bytes_per_sample
    byte_rate = sample_rate * block_align

    fmt_chunk = struct.pack(
        "<HHIIHH",
        audio_format,
        channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
    )

    body = bytearray()
    body.extend(b"WAVE")
    body.extend(b"fmt ")
    body.extend(struct.pack("<I", len(fmt_chunk)))
    body.extend(fmt_chunk)

    for chunk_id, payload in chunks_before_data:
        body.extend(chunk_id)
        body.extend(struct.pack("<I", len(payload)))
        body.extend(payload)
        if len(payload) % 2:
            body.extend(b"\x00")

    body.extend(b"data")
    body.extend(struct.pack("<I", len(samples) if declared_size is None else declared_size))
    body.extend(samples)

    wav = bytearray()
    wav.extend(b"RIFF")
    wav.extend(struct.pack("<I", len(body)))
    wav.extend(body)
    return bytes(wav)


@pytest.fixture
def make_wav() -> WavBuilder:
    """Builder for in-memory WAVE buffers."""
    return build_wav


@pytest.fixture
def stereo_payload() -> bytes:
    """Four 16-bit stereo frames."""
    return struct.pack("<8h", 0, 0, 1000, -1000, 32767, -32768, -1, 1)
