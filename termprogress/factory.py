"""Build indicators from configuration.

Call sites ask for "a bar" or "a spinner" and get a :class:`Silent` when
display is disabled, so quiet mode needs no branching.
"""

import sys
from typing import Optional, TextIO, Union

from .config import OutputStream, ProgressConfig
from .progress import Bar
from .silent import Silent
from .spinner import Spin
from .terminal import WidthOracle, fixed_width, no_width, stream_width
from .wheel import Wheel


def resolve_stream(config: ProgressConfig) -> TextIO:
    """Get the stream named by ``config``."""
    if config.stream == OutputStream.STDERR:
        return sys.stderr
    return sys.stdout


def resolve_width_oracle(config: ProgressConfig, stream: TextIO) -> WidthOracle:
    """Pick the width oracle described by ``config``.

    A fixed ``max_width`` wins over detection.
    """
    if config.max_width is not None:
        return fixed_width(config.max_width)
    if not config.detect_width:
        return no_width
    return stream_width(stream)


def create_bar(
    config: Optional[ProgressConfig] = None, title: str = ""
) -> Union[Bar, Silent]:
    """Create a progress bar, or a silent stand-in when display is disabled."""
    config = config or ProgressConfig()
    if not config.enabled:
        return Silent()

    stream = resolve_stream(config)
    return Bar(
        config.bar_width,
        title,
        stream=stream,
        width_oracle=resolve_width_oracle(config, stream),
    )


def create_spinner(
    config: Optional[ProgressConfig] = None, title: str = ""
) -> Union[Spin, Silent]:
    """Create a spinner, or a silent stand-in when display is disabled."""
    config = config or ProgressConfig()
    if not config.enabled:
        return Silent()

    stream = resolve_stream(config)
    return Spin(
        title,
        Wheel(config.wheel),
        stream=stream,
        width_oracle=resolve_width_oracle(config, stream),
    )
