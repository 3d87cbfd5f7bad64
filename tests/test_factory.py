"""Unit tests for config-driven indicator construction."""

import sys

from termprogress.config import OutputStream, ProgressConfig
from termprogress.factory import (
    create_bar,
    create_spinner,
    resolve_stream,
    resolve_width_oracle,
)
from termprogress.progress import Bar
from termprogress.silent import Silent
from termprogress.spinner import Spin
from termprogress.wheel import Wheel


class TestFactory:
    """Test create_bar and create_spinner."""

    def test_disabled_gives_silent(self):
        config = ProgressConfig(enabled=False)

        assert isinstance(create_bar(config), Silent)
        assert isinstance(create_spinner(config), Silent)

    def test_bar_from_config(self):
        bar = create_bar(ProgressConfig(bar_width=12), "Copying")

        assert isinstance(bar, Bar)
        assert bar.bar_width == 12
        assert bar.title == "Copying"

    def test_spinner_from_config(self):
        spin = create_spinner(ProgressConfig(wheel="ab"), "Waiting")

        assert isinstance(spin, Spin)
        assert spin.wheel == Wheel("ab")
        assert spin.title == "Waiting"

    def test_defaults(self):
        assert create_bar().bar_width == 50
        assert isinstance(create_spinner(), Spin)

    def test_resolve_stream(self):
        assert resolve_stream(ProgressConfig()) is sys.stdout
        assert resolve_stream(ProgressConfig(stream=OutputStream.STDERR)) is sys.stderr

    def test_resolve_width_oracle(self, stream):
        fixed = resolve_width_oracle(ProgressConfig(max_width=40, detect_width=False), stream)
        disabled = resolve_width_oracle(ProgressConfig(detect_width=False), stream)
        detected = resolve_width_oracle(ProgressConfig(), stream)

        assert fixed() == 40
        assert disabled() is None
        assert detected() is None

    def test_max_width_applies_to_bar(self, stream, mocker):
        mocker.patch("termprogress.factory.sys.stdout", stream)
        bar = create_bar(ProgressConfig(bar_width=10, max_width=25), "a long title here")

        bar.refresh()

        assert stream.getvalue() == "\r[          ]: 0.00% a ...\x1b[K"
