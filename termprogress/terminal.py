"""Terminal width queries.

A width oracle is any zero-argument callable returning the current column
count, or ``None`` when it cannot be known (output redirected to a file or
pipe, no controlling terminal, detection disabled).
"""

import io
import os
from typing import Callable, Optional, TextIO

WidthOracle = Callable[[], Optional[int]]


def terminal_width(stream: Optional[TextIO]) -> Optional[int]:
    """Get the column count of the terminal behind ``stream``."""
    if stream is None:
        return None

    try:
        fd = stream.fileno()
        if not os.isatty(fd):
            return None
        columns = os.get_terminal_size(fd).columns
    except (AttributeError, ValueError, OSError, io.UnsupportedOperation):
        return None

    return columns if columns > 0 else None


def stream_width(stream: Optional[TextIO]) -> WidthOracle:
    """Get an oracle that re-queries the terminal behind ``stream`` each call."""
    return lambda: terminal_width(stream)


def fixed_width(columns: int) -> WidthOracle:
    """Get an oracle that always reports ``columns``."""
    return lambda: columns


def no_width() -> Optional[int]:
    """Width oracle for when detection is disabled."""
    return None
