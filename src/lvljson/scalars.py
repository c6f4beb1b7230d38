"""Scalar rendering for the streaming JSON writer.

Scalars form a closed set of variants:

    Text     str
    Boolean  bool
    Integer  int (not bool)
    Float    float (finite only)

Anything else is rejected rather than printed through a generic path.
"""

import math
from typing import Union

Scalar = Union[str, bool, int, float]


def quote(text: str) -> str:
    """Return ``text`` as a JSON string literal.

    Backslashes are escaped before quotes so the backslash inserted for a
    quote is never escaped a second time. Control characters are passed
    through untouched.

    Examples:
        >>> quote('a"b')
        '"a\\\\"b"'
    """
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def render_scalar(value: Scalar) -> str:
    """Render one scalar variant as JSON text.

    Args:
        value: A str, bool, int or float

    Returns:
        The JSON text for the value

    Raises:
        TypeError: If value is not one of the scalar variants
        ValueError: If value is a non-finite float
    """
    # bool must come first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot render non-finite float {value!r} as JSON")
        return repr(value)
    raise TypeError(
        f"Unsupported scalar type {type(value).__name__}: "
        "expected str, bool, int or float"
    )


__all__ = ["Scalar", "quote", "render_scalar"]
