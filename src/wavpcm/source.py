"""Byte sources for WAVE conversion.

The converter only needs a handful of capabilities from wherever the bytes
come from, so it depends on the ByteSource protocol rather than on the
filesystem directly.
"""

import stat
from pathlib import Path
from typing import Protocol, runtime_checkable

WAV_EXTENSION = ".wav"


@runtime_checkable
class ByteSource(Protocol):
    """Capabilities needed to obtain a complete file buffer."""

    def exists(self) -> bool: ...

    def is_regular_file(self) -> bool: ...

    def has_expected_extension(self) -> bool: ...

    def can_read(self) -> bool: ...

    def read_all(self) -> bytes: ...


class FileByteSource:
    """ByteSource backed by a file on disk."""

    def __init__(self, path: Path | str, expected_extension: str = WAV_EXTENSION) -> None:
        self.path = Path(path)
        self.expected_extension = expected_extension

    def __repr__(self) -> str:
        return f"FileByteSource({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    def is_regular_file(self) -> bool:
        return self.path.is_file()

    def has_expected_extension(self) -> bool:
        return self.path.suffix == self.expected_extension

    def can_read(self) -> bool:
        """Whether any of the owner, group or other read bits is set."""
        mode = self.path.stat().st_mode
        return bool(mode & (stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH))

    def read_all(self) -> bytes:
        return self.path.read_bytes()
