"""wavpcm - WAVE to raw PCM extraction.

This package reads uncompressed integer PCM audio out of WAVE files,
checking the container and format fields before handing samples back.

Example Usage
-------------
>>> from wavpcm import convert_wav, ConvertResult
>>>
>>> conversion = convert_wav("drums.wav")
>>> if conversion.ok:
...     pcm = conversion.data
...     print(f"{pcm.sample_rate} Hz, {pcm.channels} ch, {pcm.bits_per_sample}-bit")
...     frames = pcm.to_array()  # shape (num_frames, channels)
... else:
...     print(conversion.result.display_name)
"""

# Re-export format module for convenience
from wavpcm.format import (
    ConvertResult,
    PcmData,
    RiffError,
    WavConversion,
    WavConversionError,
    convert_wav,
    decode_pcm_samples,
    load_pcm_wav,
    parse_wav_bytes,
)
from wavpcm.source import ByteSource, FileByteSource

__all__ = [
    # Types
    "ConvertResult",
    "PcmData",
    "WavConversion",
    # Reader
    "convert_wav",
    "load_pcm_wav",
    "parse_wav_bytes",
    "decode_pcm_samples",
    # Sources
    "ByteSource",
    "FileByteSource",
    # Errors
    "RiffError",
    "WavConversionError",
]
