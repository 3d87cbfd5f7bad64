"""Unit tests for the demo CLI."""

from typer.testing import CliRunner

from termprogress.errors import ConfigurationError, OutputError
from termprogress.main import app, exit_code_for, handle_error, run_bar, run_spin
from termprogress.progress import Bar
from termprogress.silent import Silent
from termprogress.spinner import Spin
from termprogress.terminal import no_width

runner = CliRunner()


def test_version_callback():
    """Test the --version flag."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "termprogress version" in result.stdout


def test_show_config_callback():
    """Test the --show-config flag."""
    result = runner.invoke(app, ["--show-config"])
    assert result.exit_code == 0
    assert "termprogress Configuration" in result.stdout
    assert "Bar width: 50" in result.stdout


def test_bar_command():
    result = runner.invoke(app, ["bar", "--steps", "4", "--delay", "0", "-t", "Copying"])
    assert result.exit_code == 0
    assert "Reached step 2 of 4" in result.stdout
    assert "100.00% Copying" in result.stdout
    assert result.stdout.endswith("Done!\n")


def test_bar_command_quiet():
    result = runner.invoke(app, ["bar", "--steps", "4", "--delay", "0", "--quiet"])
    assert result.exit_code == 0
    assert result.stdout == ""


def test_spin_command():
    result = runner.invoke(app, ["spin", "--steps", "3", "--delay", "0", "-t", "Loading"])
    assert result.exit_code == 0
    assert "Loading /" in result.stdout
    assert "Done!" in result.stdout


def test_bad_config_file():
    result = runner.invoke(
        app, ["bar", "--delay", "0", "--config-file", "/nonexistent/termprogress.toml"]
    )
    assert result.exit_code == 2
    assert "Error:" in result.stdout


def test_save_config_command(tmp_path, monkeypatch):
    monkeypatch.setenv("TERMPROGRESS_BAR_WIDTH", "30")
    target = tmp_path / "out" / "config.toml"

    result = runner.invoke(app, ["save-config", str(target), "--quiet"])

    assert result.exit_code == 0
    assert "Configuration saved" in result.stdout
    content = target.read_text(encoding="utf-8")
    assert "bar_width = 30" in content
    assert "enabled = false" in content


def test_save_config_default_location(tmp_path):
    result = runner.invoke(app, ["save-config"])

    assert result.exit_code == 0
    assert (tmp_path / ".termprogress" / "config.toml").exists()


def test_save_config_bad_source():
    result = runner.invoke(
        app, ["save-config", "--config-file", "/nonexistent/termprogress.toml"]
    )
    assert result.exit_code == 2


def test_exit_codes_follow_error_category():
    assert exit_code_for(ConfigurationError("bad")) == 2
    assert exit_code_for(OutputError("broken pipe")) == 1


def test_run_bar_with_any_indicator(stream, mocker):
    mocker.patch("termprogress.main.time.sleep")
    bar = Bar(10, "t", stream=stream, width_oracle=no_width)

    run_bar(bar, 2, 0)
    run_bar(Silent(), 2, 0)

    assert bar.done is True
    assert "Reached step 1 of 2\n" in stream.getvalue()


def test_run_spin(stream, mocker):
    sleep = mocker.patch("termprogress.main.time.sleep")
    spin = Spin("s", stream=stream, width_oracle=no_width)

    run_spin(spin, 4, 0.5)

    assert sleep.call_count == 4
    assert stream.getvalue().endswith("\rDone!\x1b[K\n")


def test_handle_error(capsys):
    """Test error handling."""
    handle_error(ValueError("test error"), debug=False)
    captured = capsys.readouterr()
    assert "Error:" in captured.out
    assert "test error" in captured.out
