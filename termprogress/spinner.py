"""Single-character spinner for work of unknown size.

Renders the glyph after the title, e.g. ``Loading files /``, and advances
only when :meth:`Spin.bump` is called.
"""

from typing import Optional, TextIO

from .base import LineIndicator, Spinner
from .render import fit_title
from .terminal import WidthOracle
from .wheel import DEFAULT_WHEEL, Wheel


class Spin(LineIndicator, Spinner):
    """A spinner with an optional title and a configurable glyph cycle."""

    def __init__(
        self,
        title: str = "",
        wheel: Optional[Wheel] = None,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        width_oracle: Optional[WidthOracle] = None,
    ):
        super().__init__(title, stream, err_stream, width_oracle)
        self.wheel = wheel if wheel is not None else DEFAULT_WHEEL
        self._frame = 0

    @property
    def frame(self) -> int:
        """Number of bumps so far, modulo the wheel length."""
        return self._frame

    @property
    def glyph(self) -> str:
        # Before the first bump the wheel rests on its last glyph.
        return self.wheel[self._frame - 1]

    def bump(self) -> None:
        if self.done:
            return
        self._frame = (self._frame + 1) % len(self.wheel)
        self.refresh()

    def render_line(self, width: Optional[int]) -> str:
        return fit_title(self.title, width, tail=f" {self.glyph}")

    def _finish_with(self, text: str) -> None:
        self._renderer.replace(text)

    def __repr__(self) -> str:
        return f"Spin(title={self.title!r}, frame={self._frame}, done={self.done})"
