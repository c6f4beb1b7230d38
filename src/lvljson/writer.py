"""Streaming JSON writer.

Emits JSON text straight to a sink as the caller describes the document,
without building an intermediate tree. The document is always rooted in an
implicit object that is opened on construction and closed by ``close()``.

Example:
    with JSONWriter(sys.stdout) as json:
        json.key("size").value(4, 2)
        json.key("items").begin_array()
        json.value(1).value(2)
        json.end()

Two layouts are supported, fixed for the writer's lifetime:

    packed  ``,`` separators, no whitespace at all
    pretty  newline before every structural token, two spaces per depth
"""

from enum import Enum
from typing import List, TextIO

from .scalars import Scalar, quote, render_scalar


class JSONWriterError(Exception):
    """Base error raised by the JSON writer."""

    pass


class WriterStateError(JSONWriterError):
    """Call sequence would produce malformed JSON."""

    pass


class Frame(Enum):
    """Kind of an open container."""

    OBJECT = "object"
    ARRAY = "array"


_CLOSERS = {Frame.OBJECT: "}", Frame.ARRAY: "]"}


class JSONWriter:
    """Append-only JSON emitter with a nesting stack.

    Every mutating call returns ``self`` so calls can be chained:
    ``writer.key("pos").value(3, -2)``.

    The stack holds the containers opened by ``begin_object`` and
    ``begin_array``; the implicit root object is not on it.
    """

    def __init__(self, sink: TextIO, pack: bool = False):
        """Bind the writer to ``sink`` and open the root object.

        Args:
            sink: Text stream that receives the output
            pack: Emit packed output instead of pretty output
        """
        self._sink = sink
        self._pack = pack
        self._stack: List[Frame] = []
        self._first = True
        self._pending_key = False
        self._closed = False
        self._sink.write("{")

    @property
    def pack(self) -> bool:
        return self._pack

    @property
    def depth(self) -> int:
        """Number of open containers, not counting the root object."""
        return len(self._stack)

    @property
    def closed(self) -> bool:
        return self._closed

    def _indent(self) -> str:
        return "" if self._pack else "  " * (len(self._stack) + 1)

    def _in_array(self) -> bool:
        return bool(self._stack) and self._stack[-1] is Frame.ARRAY

    def _newline_indent(self) -> None:
        if self._pack:
            self._sink.write("" if self._first else ",")
        else:
            self._sink.write("\n" if self._first else ",\n")
            self._sink.write(self._indent())
        self._first = False

    def _check_open(self) -> None:
        if self._closed:
            raise WriterStateError("Writer is already closed")

    def _before_value(self) -> None:
        """Emit what precedes a value or container at the current level."""
        self._check_open()
        if self._in_array():
            self._newline_indent()
        elif self._pending_key:
            self._pending_key = False
        else:
            raise WriterStateError("Value inside an object must follow key()")

    def key(self, name: str) -> "JSONWriter":
        """Write an object key; the next call must produce its value."""
        if not isinstance(name, str):
            raise TypeError(f"Object keys must be str, not {type(name).__name__}")
        self._check_open()
        if self._in_array():
            raise WriterStateError(f"key({name!r}) called inside an array")
        if self._pending_key:
            raise WriterStateError(
                f"key({name!r}) called while the previous key has no value"
            )
        self._newline_indent()
        self._sink.write(quote(name) + (":" if self._pack else ": "))
        self._pending_key = True
        return self

    def value(self, *values: Scalar) -> "JSONWriter":
        """Write a scalar, or an inline ``[x, y]`` pair when given two.

        A pair is a single value, not a container: it pushes no frame.
        """
        if len(values) not in (1, 2):
            raise TypeError(
                f"value() takes one scalar or a pair, got {len(values)} arguments"
            )
        text = [render_scalar(v) for v in values]
        self._before_value()
        if len(text) == 1:
            self._sink.write(text[0])
        else:
            separator = "," if self._pack else ", "
            self._sink.write("[" + separator.join(text) + "]")
        return self

    def _begin(self, frame: Frame, opener: str) -> "JSONWriter":
        self._before_value()
        self._sink.write(opener)
        self._first = True
        self._stack.append(frame)
        return self

    def begin_array(self) -> "JSONWriter":
        return self._begin(Frame.ARRAY, "[")

    def begin_object(self) -> "JSONWriter":
        return self._begin(Frame.OBJECT, "{")

    def end(self) -> "JSONWriter":
        """Close the innermost open container."""
        self._check_open()
        if not self._stack:
            raise WriterStateError("end() called with no open container")
        if self._pending_key:
            raise WriterStateError("end() called while a key has no value")
        frame = self._stack.pop()
        self._first = False
        if not self._pack:
            self._sink.write("\n" + self._indent())
        self._sink.write(_CLOSERS[frame])
        return self

    def close(self) -> None:
        """Close the root object.

        Raises:
            WriterStateError: If containers are still open or a key has no
                value; nothing is written in that case
        """
        if self._closed:
            return
        if self._stack:
            kinds = ", ".join(frame.value for frame in self._stack)
            raise WriterStateError(f"close() with unterminated containers: {kinds}")
        if self._pending_key:
            raise WriterStateError("close() called while a key has no value")
        self._closed = True
        self._sink.write("}" if self._pack else "\n}\n")

    def __enter__(self) -> "JSONWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.close()
        else:
            self._closed = True


__all__ = ["Frame", "JSONWriter", "JSONWriterError", "WriterStateError"]
