"""Indicator interface and the shared single-line redraw behaviour."""

import logging
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from .render import LineRenderer
from .terminal import WidthOracle

logger = logging.getLogger(__name__)


class Indicator(ABC):
    """Abstract base class for everything that can show progress on a line.

    Calling code should be written against this class (or :class:`ProgressBar`
    / :class:`Spinner`) so that :class:`~termprogress.silent.Silent` can be
    swapped in without branching.
    """

    @property
    @abstractmethod
    def title(self) -> str:
        """Get the current title."""
        pass

    @abstractmethod
    def set_title(self, text: str) -> None:
        """Replace the title and redraw."""
        pass

    @abstractmethod
    def refresh(self) -> None:
        """Redraw the current state."""
        pass

    @abstractmethod
    def blank(self) -> None:
        """Erase the indicator's line."""
        pass

    @abstractmethod
    def println(self, text: str) -> None:
        """Print a permanent line above the indicator, then redraw it.

        Args:
            text: Message to commit to scroll-back. Never truncated.
        """
        pass

    @abstractmethod
    def eprintln(self, text: str) -> None:
        """Like :meth:`println`, but the message goes to the error stream."""
        pass

    @abstractmethod
    def complete(self) -> None:
        """Draw the final state, move to a new line and stop updating."""
        pass

    @abstractmethod
    def complete_with(self, text: str) -> None:
        """Finish like :meth:`complete`, ending with ``text`` on its own line."""
        pass

    @property
    def done(self) -> bool:
        """Whether the indicator has been completed. Override as needed."""
        return False


class ProgressBar(Indicator):
    """An indicator with a known fraction of completion."""

    @property
    @abstractmethod
    def progress(self) -> float:
        """Get the progress as last set."""
        pass

    @abstractmethod
    def set_progress(self, value: float) -> None:
        """Set absolute progress in ``[0.0, 1.0]`` and redraw.

        Out-of-range values are accepted and clamped for display.
        """
        pass


class Spinner(Indicator):
    """An indicator with no known size that advances on demand."""

    @abstractmethod
    def bump(self) -> None:
        """Advance to the next glyph and redraw."""
        pass


class LineIndicator(Indicator):
    """Common machinery for indicators drawn through a :class:`LineRenderer`.

    Subclasses provide :meth:`render_line`. Once completed, every mutating
    call becomes a no-op.
    """

    def __init__(
        self,
        title: str = "",
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        width_oracle: Optional[WidthOracle] = None,
    ):
        self._title = title
        self._done = False
        self._renderer = LineRenderer(stream, err_stream, width_oracle)

    @abstractmethod
    def render_line(self, width: Optional[int]) -> str:
        """Build the display string for a terminal ``width`` columns wide.

        Args:
            width: Column count, or None when unknown (no truncation)

        Returns:
            The text of the line, without control characters
        """
        pass

    @property
    def title(self) -> str:
        return self._title

    @property
    def done(self) -> bool:
        return self._done

    def set_title(self, text: str) -> None:
        if self._done:
            return
        self._title = text
        self.refresh()

    def refresh(self) -> None:
        if self._done:
            return
        self._renderer.redraw(self._current_line())

    def blank(self) -> None:
        if self._done:
            return
        self._renderer.clear()

    def println(self, text: str) -> None:
        if self._done:
            self._renderer.write_line(text)
            return
        self._renderer.print_above(text, self._current_line())

    def eprintln(self, text: str) -> None:
        if self._done:
            self._renderer.ewrite_line(text)
            return
        self._renderer.eprint_above(text, self._current_line())

    def complete(self) -> None:
        if self._done:
            return
        self._before_complete()
        self._done = True
        logger.debug("%s completed", type(self).__name__)
        self._renderer.finish(self._current_line())

    def complete_with(self, text: str) -> None:
        if self._done:
            return
        self._before_complete()
        self._done = True
        logger.debug("%s completed with message", type(self).__name__)
        self._finish_with(text)

    def _before_complete(self) -> None:
        """Adjust state for the final redraw. Override as needed."""

    def _finish_with(self, text: str) -> None:
        """Emit the final output for :meth:`complete_with`. Override as needed."""
        self._renderer.finish(self._current_line(), text)

    def _current_line(self) -> str:
        return self.render_line(self._renderer.width())
