"""Decoding of extracted PCM payloads into NumPy arrays.

Payloads are interleaved little-endian signed integers. 24-bit samples are
unpacked and sign-extended into int32.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

# Full-scale magnitude per bit depth, for normalization
_FULL_SCALE = {
    16: 32768.0,
    24: 8388608.0,  # 2^23
    32: 2147483648.0,  # 2^31
}


def decode_pcm_samples(
    samples: bytes,
    bits_per_sample: int,
    channels: int,
    normalize: bool = False,
) -> NDArray[Any]:
    """Decode an interleaved PCM payload.

    Trailing bytes that do not make up a whole frame are dropped, which can
    happen when the payload was clamped to a truncated file.

    Args:
        samples: Raw interleaved sample bytes.
        bits_per_sample: 16, 24 or 32.
        channels: Number of interleaved channels.
        normalize: Scale to float32 in [-1, 1) instead of returning integers.

    Returns:
        Array of shape (num_frames, channels). int16 for 16-bit input,
        int32 for 24- and 32-bit input, float32 when normalized.

    Raises:
        ValueError: If the bit depth or channel count is not supported.
    """
    if bits_per_sample not in _FULL_SCALE:
        raise ValueError(f"Unsupported bit depth: {bits_per_sample}")
    if channels < 1:
        raise ValueError(f"Channel count must be positive, got {channels}")

    bytes_per_sample = bits_per_sample // 8
    block_align = bytes_per_sample * channels
    usable = len(samples) - len(samples) % block_align
    data = samples[:usable]

    if bits_per_sample == 16:
        decoded = np.frombuffer(data, dtype="<i2")
    elif bits_per_sample == 24:
        decoded = _decode_24bit(data)
    else:
        decoded = np.frombuffer(data, dtype="<i4")

    decoded = decoded.reshape(-1, channels)

    if normalize:
        return (decoded.astype(np.float64) / _FULL_SCALE[bits_per_sample]).astype(np.float32)

    # frombuffer views are read-only
    return decoded.copy()


def _decode_24bit(data: bytes) -> NDArray[np.int32]:
    """Unpack little-endian 24-bit samples into int32."""
    raw = np.frombuffer(data, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
    values = raw[:, 0] | (raw[:, 1] << 8) | (raw[:, 2] << 16)
    # Sign extend
    return np.where(values >= 0x800000, values - 0x1000000, values).astype(np.int32)
