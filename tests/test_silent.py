"""Unit tests for the silent indicator."""

from termprogress.base import Indicator, ProgressBar, Spinner
from termprogress.progress import Bar
from termprogress.silent import Silent
from termprogress.spinner import Spin


def drive(indicator: Indicator):
    """Exercise every operation available on ``indicator``."""
    indicator.set_title("title")
    if isinstance(indicator, ProgressBar):
        indicator.set_progress(0.5)
        indicator.set_progress(4.0)
    if isinstance(indicator, Spinner):
        for _ in range(6):
            indicator.bump()
    indicator.refresh()
    indicator.println("message")
    indicator.eprintln("error message")
    indicator.blank()
    indicator.complete_with("Done!")
    indicator.complete()


class TestSilent:
    """Test the no-op stand-in."""

    def test_satisfies_every_interface(self):
        silent = Silent()

        assert isinstance(silent, Indicator)
        assert isinstance(silent, ProgressBar)
        assert isinstance(silent, Spinner)

    def test_writes_nothing(self, capsys):
        drive(Silent())

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_fixed_state(self):
        silent = Silent()
        silent.set_title("ignored")
        silent.set_progress(0.8)

        assert silent.title == ""
        assert silent.progress == 0.0
        assert silent.done is False


class TestGenericCallers:
    """Test that calling code can treat indicators interchangeably."""

    def test_same_code_path_for_all(self, stream, err_stream, unknown_width):
        indicators = [
            Bar(10, stream=stream, err_stream=err_stream, width_oracle=unknown_width),
            Spin(stream=stream, err_stream=err_stream, width_oracle=unknown_width),
            Silent(),
        ]

        for indicator in indicators:
            drive(indicator)

        assert stream.getvalue().count("Done!") == 2
        assert err_stream.getvalue() == "error message\n" * 2
