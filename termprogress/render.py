"""Single-row redraw protocol and title truncation."""

import logging
import sys
from typing import Optional, TextIO

from .errors import OutputError
from .terminal import WidthOracle, stream_width

logger = logging.getLogger(__name__)

CARRIAGE_RETURN = "\r"
ERASE_TO_EOL = "\x1b[K"
ELLIPSIS = "..."


def truncate(text: str, limit: int) -> str:
    """Shorten ``text`` to at most ``limit`` characters, marking the cut with ``...``."""
    if len(text) <= limit:
        return text
    if limit <= len(ELLIPSIS):
        return ELLIPSIS[: max(limit, 0)]
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def fit_title(title: str, width: Optional[int], head: str = "", tail: str = "") -> str:
    """Compose ``head + title + tail`` within ``width``, shrinking only the title.

    ``head`` and ``tail`` are never cut. If they alone overflow, the title is
    dropped along with the separating blanks around it. An unknown width
    means no truncation at all.
    """
    line = head + title + tail
    if width is None or len(line) <= width:
        return line

    room = width - len(head) - len(tail)
    if room <= 0:
        return (head + tail).strip(" ")
    return head + truncate(title, room) + tail


class LineRenderer:
    """Redraws one terminal row in place.

    Output for the drawing stream is composed in full before it is written,
    so a line is either fully drawn or the call fails with
    :class:`OutputError`.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        width_oracle: Optional[WidthOracle] = None,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.err_stream = err_stream if err_stream is not None else sys.stderr
        self.width_oracle = (
            width_oracle if width_oracle is not None else stream_width(self.stream)
        )

    def width(self) -> Optional[int]:
        """Ask the oracle for the current width. Never cached."""
        return self.width_oracle()

    def redraw(self, text: str) -> None:
        """Overwrite the current row with ``text``."""
        self._emit(self.stream, self._line(text))

    def clear(self) -> None:
        """Erase the current row and leave the cursor at column 0."""
        self._emit(self.stream, CARRIAGE_RETURN + ERASE_TO_EOL)

    def print_above(self, message: str, text: str) -> None:
        """Commit ``message`` to scroll-back and redraw ``text`` below it."""
        self._emit(
            self.stream,
            CARRIAGE_RETURN + ERASE_TO_EOL + message + "\n" + self._line(text),
        )

    def eprint_above(self, message: str, text: str) -> None:
        """Like :meth:`print_above`, with ``message`` going to the error stream."""
        self.clear()
        self._emit(self.err_stream, message + "\n")
        self.redraw(text)

    def finish(self, text: str, message: Optional[str] = None) -> None:
        """Draw ``text`` one last time and move to a fresh line.

        A ``message``, if given, is written on the line below.
        """
        data = self._line(text) + "\n"
        if message is not None:
            data += message + "\n"
        self._emit(self.stream, data)

    def replace(self, message: str) -> None:
        """Replace the current row with ``message`` and move to a fresh line."""
        self._emit(self.stream, self._line(message) + "\n")

    def write_line(self, message: str) -> None:
        """Write a plain line with no redraw."""
        self._emit(self.stream, message + "\n")

    def ewrite_line(self, message: str) -> None:
        """Write a plain line to the error stream."""
        self._emit(self.err_stream, message + "\n")

    @staticmethod
    def _line(text: str) -> str:
        return CARRIAGE_RETURN + text + ERASE_TO_EOL

    @staticmethod
    def _emit(stream: TextIO, data: str) -> None:
        try:
            stream.write(data)
            stream.flush()
        except (OSError, ValueError) as e:
            logger.error("Terminal write failed: %s", e)
            raise OutputError(f"Failed to write to terminal: {e}") from e
