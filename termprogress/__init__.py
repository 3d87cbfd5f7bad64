"""termprogress - in-place terminal progress bars and spinners.

Each indicator owns a single terminal line and redraws it on every update:

- ``Bar``: a percentage bar with a title that is shortened, never the bar,
  when the terminal is too narrow
- ``Spin``: a title followed by a glyph that advances on ``bump()``
- ``Silent``: a stand-in that draws nothing, for quiet modes

Write calling code against ``ProgressBar``/``Spinner`` and any of them can be
passed in.
"""

import logging

from .base import Indicator, LineIndicator, ProgressBar, Spinner
from .config import ProgressConfig, load_configuration
from .errors import ConfigurationError, OutputError, TermProgressError
from .factory import create_bar, create_spinner
from .progress import DEFAULT_BAR_WIDTH, Bar
from .silent import Silent
from .spinner import Spin
from .wheel import DEFAULT_WHEEL, Wheel

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Indicator",
    "LineIndicator",
    "ProgressBar",
    "Spinner",
    "Bar",
    "Spin",
    "Silent",
    "Wheel",
    "DEFAULT_WHEEL",
    "DEFAULT_BAR_WIDTH",
    "ProgressConfig",
    "load_configuration",
    "create_bar",
    "create_spinner",
    "TermProgressError",
    "OutputError",
    "ConfigurationError",
]
