"""Convert binary level files to JSON files."""

import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from .models import ConversionResult, ConvertOptions
from .projection import project_world
from .schema import DecodeError, decode_world
from .writer import JSONWriter


class ConversionError(Exception):
    """Error converting one file.

    ``str(error)`` is the one-line diagnostic shown to the user.
    """

    reason = "could not convert file"

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f'error: {self.reason} "{path}"')


class InputOpenError(ConversionError):
    """Input file could not be read."""

    reason = "could not open file"


class RecordParseError(ConversionError):
    """Input bytes are not a valid world record."""

    reason = "could not parse file"


class OutputOpenError(ConversionError):
    """Output file could not be created."""

    reason = "could not open file"


class OutputWriteError(ConversionError):
    """Output file could not be written or moved into place."""

    reason = "could not write file"


def _current_umask() -> int:
    # os.umask can only be read by setting it
    mask = os.umask(0)
    os.umask(mask)
    return mask


def output_path_for(
    input_path: str | Path, options: Optional[ConvertOptions] = None
) -> Path:
    """Derive the output path for an input file.

    A trailing input suffix is stripped before the output suffix is added:
    ``maps/one.lvl`` becomes ``maps/one.json`` while ``notes.dat`` becomes
    ``notes.dat.json``.
    """
    options = options or ConvertOptions()
    name = str(input_path)
    if name.endswith(options.input_suffix):
        name = name[: -len(options.input_suffix)]
    return Path(name + options.output_suffix)


def convert_file(
    input_path: str | Path, output_path: str | Path, pack: bool = False
) -> None:
    """Convert one binary level file to JSON.

    The JSON is written to a temporary file beside ``output_path`` and moved
    into place only once complete, so a failure never leaves a truncated
    output behind.

    Args:
        input_path: Binary FileWorld record to read
        output_path: Destination JSON file
        pack: Emit packed JSON instead of pretty JSON

    Raises:
        InputOpenError: If the input cannot be read
        RecordParseError: If the input is not a valid record
        OutputOpenError: If the output cannot be created
        OutputWriteError: If writing or renaming the output fails
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        data = input_path.read_bytes()
    except OSError as exc:
        raise InputOpenError(input_path) from exc

    try:
        world = decode_world(data)
    except DecodeError as exc:
        raise RecordParseError(input_path) from exc

    try:
        sink = tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        )
    except OSError as exc:
        raise OutputOpenError(output_path) from exc

    temp_path = Path(sink.name)
    try:
        with sink:
            with JSONWriter(sink, pack=pack) as json:
                project_world(world, json)
        os.chmod(temp_path, 0o666 & ~_current_umask())
        os.replace(temp_path, output_path)
    except OSError as exc:
        temp_path.unlink(missing_ok=True)
        raise OutputWriteError(output_path) from exc
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def convert_all(
    paths: Iterable[str | Path], options: Optional[ConvertOptions] = None
) -> List[ConversionResult]:
    """Convert every input file independently.

    A failing file is recorded in its result and does not stop the batch.

    Returns:
        One ConversionResult per input, in input order
    """
    options = options or ConvertOptions()
    results: List[ConversionResult] = []
    for path in paths:
        output = output_path_for(path, options)
        try:
            convert_file(path, output, pack=options.pack)
        except ConversionError as exc:
            results.append(
                ConversionResult(input=Path(path), output=output, error=str(exc))
            )
        else:
            results.append(ConversionResult(input=Path(path), output=output))
    return results


__all__ = [
    "ConversionError",
    "InputOpenError",
    "OutputOpenError",
    "OutputWriteError",
    "RecordParseError",
    "convert_all",
    "convert_file",
    "output_path_for",
]
