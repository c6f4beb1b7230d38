"""lvljson: binary level records -> streamed JSON."""

from .converter import ConversionError, convert_all, convert_file, output_path_for
from .writer import Frame, JSONWriter, JSONWriterError, WriterStateError

__all__ = [
    "__version__",
    "ConversionError",
    "Frame",
    "JSONWriter",
    "JSONWriterError",
    "WriterStateError",
    "convert_all",
    "convert_file",
    "output_path_for",
]

__version__ = "0.1.0"
