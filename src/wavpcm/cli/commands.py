import json
import logging
import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from wavpcm.cli.validators import validate_files_given, validate_pcm_output
from wavpcm.format import ConvertResult, PcmData, WavConversion, convert_wav

app = App(name="wavpcm", help="Extract raw PCM samples from WAVE files")
console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(message, style="bold red")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(message, style="bold green")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(message, style="bold yellow")


def print_json(payload: object) -> None:
    """Print JSON verbatim, without markup or highlighting."""
    console.print(json.dumps(payload, indent=2), markup=False, highlight=False, soft_wrap=True)


def configure_logging(verbose: bool) -> None:
    """Route library debug logging through rich when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def conversion_summary(file: Path, conversion: WavConversion) -> dict[str, object]:
    """Build a JSON-serializable summary of a conversion."""
    summary: dict[str, object] = {
        "file": str(file),
        "valid": conversion.ok,
        "result": conversion.result.name,
        "message": conversion.result.display_name,
    }
    pcm = conversion.data
    if pcm is not None:
        summary.update(
            {
                "sample_rate": pcm.sample_rate,
                "channels": pcm.channels,
                "bits_per_sample": pcm.bits_per_sample,
                "data_bytes": len(pcm.samples),
                "num_frames": pcm.num_frames,
                "duration_seconds": round(pcm.duration_seconds, 6),
            }
        )
    return summary


def _print_pcm_details(pcm: PcmData) -> None:
    console.print(f"  Sample rate: {pcm.sample_rate} Hz")
    console.print(f"  Channels: {pcm.channels}")
    console.print(f"  Bit depth: {pcm.bits_per_sample}-bit")
    console.print(f"  Data size: {len(pcm.samples):,} bytes")
    console.print(f"  Frames: {pcm.num_frames:,}")
    console.print(f"  Duration: {pcm.duration_seconds:.3f}s")

    if len(pcm.samples) % pcm.block_align:
        print_warning(
            f"  [WARN] {len(pcm.samples) % pcm.block_align} trailing bytes "
            "do not form a complete frame"
        )


@app.command
def info(
    file: Path,
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
    verbose: bool = False,
) -> int:
    """
    Display the PCM format of a WAVE file.

    Parameters
    ----------
    file: Path
        The path to the .wav file
    output_json: bool
        Output results as JSON (default: False)
    verbose: bool
        Show debug logging from the parser (default: False)
    """
    configure_logging(verbose)
    conversion = convert_wav(file)

    if output_json:
        print_json(conversion_summary(file, conversion))
        return 0 if conversion.ok else 1

    if conversion.data is None:
        print_error(f"[FAIL] {escape(str(file))}: {conversion.result.display_name}")
        console.print(f"  Result: {conversion.result.name}")
        return 1

    console.print(f"[bold]WAVE file: {escape(str(file))}[/bold]")
    _print_pcm_details(conversion.data)
    return 0


@app.command
def extract(
    file: Path,
    output: Annotated[Path | None, Parameter(validator=validate_pcm_output)] = None,
    verbose: bool = False,
) -> int:
    """
    Write the raw PCM payload of a WAVE file to disk.

    Parameters
    ----------
    file: Path
        The path to the .wav file
    output: Path | None
        Destination for the raw samples (default: FILE with a .pcm suffix)
    verbose: bool
        Show debug logging from the parser (default: False)
    """
    configure_logging(verbose)
    conversion = convert_wav(file)

    if conversion.data is None:
        print_error(f"[FAIL] {escape(str(file))}: {conversion.result.display_name}")
        return 1

    if output is None:
        output = file.with_suffix(".pcm")

    try:
        output.write_bytes(conversion.data.samples)
    except OSError as e:
        print_error(f"Error writing output: {escape(str(e))}")
        return 1

    pcm = conversion.data
    print_success(f"Extracted {escape(str(file))} -> {escape(str(output))}")
    console.print(
        f"  {len(pcm.samples):,} bytes, {pcm.sample_rate} Hz, "
        f"{pcm.channels} ch, {pcm.bits_per_sample}-bit"
    )
    return 0


@app.command
def check(
    files: Annotated[list[Path], Parameter(validator=validate_files_given)],
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
    verbose: bool = False,
) -> int:
    """
    Check that one or more WAVE files can be converted to PCM.

    Parameters
    ----------
    files: list[Path]
        The .wav files to check
    output_json: bool
        Output results as JSON (default: False)
    verbose: bool
        Show debug logging from the parser (default: False)
    """
    configure_logging(verbose)
    conversions = [(file, convert_wav(file)) for file in files]
    all_ok = all(conversion.ok for _, conversion in conversions)

    if output_json:
        summaries = [conversion_summary(file, conversion) for file, conversion in conversions]
        print_json(summaries)
        return 0 if all_ok else 1

    table = Table(show_header=True, header_style="bold")
    table.add_column("File", justify="left")
    table.add_column("Result", justify="left")
    table.add_column("Rate", justify="right")
    table.add_column("Ch", justify="right")
    table.add_column("Bits", justify="right")

    for file, conversion in conversions:
        pcm = conversion.data
        if pcm is None:
            status = f"[red]{conversion.result.name}[/red]"
            table.add_row(escape(file.name), status, "-", "-", "-")
        else:
            status = f"[green]{ConvertResult.SUCCESS.name}[/green]"
            table.add_row(
                escape(file.name),
                status,
                str(pcm.sample_rate),
                str(pcm.channels),
                str(pcm.bits_per_sample),
            )

    console.print(table)

    failed = sum(1 for _, conversion in conversions if not conversion.ok)
    if failed:
        print_error(f"{failed} of {len(conversions)} files failed")
    else:
        print_success(f"All {len(conversions)} files passed")

    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(app())
