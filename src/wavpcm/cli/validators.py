from pathlib import Path


def validate_pcm_output(type_: object, output: Path | None) -> None:
    """Refuse to write raw PCM over a .wav file."""
    if output is None:
        return

    if output.suffix.lower() == ".wav":
        raise ValueError("Output must not be a .wav file; raw PCM has no header")


def validate_files_given(type_: object, files: list[Path] | tuple[Path, ...]) -> None:
    if not files:
        raise ValueError("At least one file is required")
