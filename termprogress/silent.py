"""An indicator that does nothing.

Useful when progress output is optional: hand out a ``Silent`` instead of a
``Bar`` or ``Spin`` and keep a single code path.
"""

from .base import ProgressBar, Spinner


class Silent(ProgressBar, Spinner):
    """Satisfies every indicator interface without touching the terminal."""

    @property
    def title(self) -> str:
        return ""

    @property
    def progress(self) -> float:
        return 0.0

    def set_title(self, text: str) -> None:
        pass

    def set_progress(self, value: float) -> None:
        pass

    def bump(self) -> None:
        pass

    def refresh(self) -> None:
        pass

    def blank(self) -> None:
        pass

    def println(self, text: str) -> None:
        pass

    def eprintln(self, text: str) -> None:
        pass

    def complete(self) -> None:
        pass

    def complete_with(self, text: str) -> None:
        pass

    def __repr__(self) -> str:
        return "Silent()"
