"""WAVE container parsing module.

This module extracts raw PCM samples and their format metadata from WAVE
files, validating the container before the payload is exposed.

Format Overview
---------------
Only canonical integer PCM WAVE files are accepted:

    +----------------------------------------+
    | RIFF Header ("WAVE")                   |
    +----------------------------------------+
    | fmt  chunk at byte 12                  |
    |   - format tag 1 (integer PCM)         |
    |   - 1 or 2 channels                    |
    |   - 44.1, 48, 96 or 192 kHz            |
    |   - 16, 24 or 32 bits per sample       |
    +----------------------------------------+
    | ... other chunks ...                   |
    +----------------------------------------+
    | data chunk (found by scanning)         |
    +----------------------------------------+

Example Usage
-------------
>>> from wavpcm.format import convert_wav, ConvertResult
>>> conversion = convert_wav("voice.wav")
>>> if conversion.result == ConvertResult.SUCCESS:
...     print(conversion.data.sample_rate, len(conversion.data.samples))
"""

from wavpcm.format.reader import (
    WavConversionError,
    convert_wav,
    load_pcm_wav,
    parse_wav_bytes,
)
from wavpcm.format.riff import RiffError
from wavpcm.format.samples import decode_pcm_samples
from wavpcm.format.types import (
    ConvertResult,
    DataChunkLocation,
    PcmData,
    WavConversion,
)
from wavpcm.format.validation import (
    ALLOWED_BITS_PER_SAMPLE,
    ALLOWED_CHANNELS,
    ALLOWED_SAMPLE_RATES,
)

__all__ = [
    # Types
    "ConvertResult",
    "DataChunkLocation",
    "PcmData",
    "WavConversion",
    # Reader
    "convert_wav",
    "load_pcm_wav",
    "parse_wav_bytes",
    "decode_pcm_samples",
    # Errors
    "RiffError",
    "WavConversionError",
    # Constraints
    "ALLOWED_SAMPLE_RATES",
    "ALLOWED_CHANNELS",
    "ALLOWED_BITS_PER_SAMPLE",
]
