"""Percentage progress bar.

Renders as::

    [=========================                         ]: 50.00% some title

The bar keeps the width it was built with; only the title is shortened to
stop the line running past the edge of the terminal.
"""

import math
from typing import Optional, TextIO

from .base import LineIndicator, ProgressBar
from .render import fit_title
from .terminal import WidthOracle, fixed_width

DEFAULT_BAR_WIDTH = 50


def clamp_progress(value: float) -> float:
    """Clamp ``value`` into ``[0.0, 1.0]``. NaN counts as no progress."""
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def filled_cells(progress: float, bar_width: int) -> int:
    """Get the number of ``=`` cells for ``progress`` on a bar ``bar_width`` wide."""
    return round_half_up(clamp_progress(progress) * bar_width)


def percentage_text(progress: float) -> str:
    """Format ``progress`` as a percentage with two decimals, e.g. ``50.00%``."""
    return f"{round_half_up(clamp_progress(progress) * 10000) / 100:.2f}%"


class Bar(LineIndicator, ProgressBar):
    """A progress bar with a fixed number of cells and an optional title."""

    def __init__(
        self,
        bar_width: int = DEFAULT_BAR_WIDTH,
        title: str = "",
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        width_oracle: Optional[WidthOracle] = None,
    ):
        super().__init__(title, stream, err_stream, width_oracle)
        self.bar_width = max(bar_width, 0)
        self._progress = 0.0

    @classmethod
    def with_max(
        cls,
        bar_width: int,
        max_width: int,
        title: str = "",
        stream: Optional[TextIO] = None,
    ) -> "Bar":
        """Create a bar whose line never exceeds ``max_width``, whatever the terminal."""
        return cls(bar_width, title, stream=stream, width_oracle=fixed_width(max_width))

    @property
    def progress(self) -> float:
        return self._progress

    def set_progress(self, value: float) -> None:
        if self.done:
            return
        self._progress = value
        self.refresh()

    def render_line(self, width: Optional[int]) -> str:
        filled = filled_cells(self._progress, self.bar_width)
        cells = "=" * filled + " " * (self.bar_width - filled)
        head = f"[{cells}]: {percentage_text(self._progress)} "
        return fit_title(self.title, width, head=head)

    def _before_complete(self) -> None:
        self._progress = 1.0

    def __repr__(self) -> str:
        return (
            f"Bar(bar_width={self.bar_width}, progress={self._progress!r}, "
            f"title={self.title!r}, done={self.done})"
        )
