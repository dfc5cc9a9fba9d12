"""Unit tests for chromerunner.runner."""

import io
import os
import shutil
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from chromerunner.exceptions import BrowserNotFoundError, ScriptNotFoundError
from chromerunner.models import LaunchConfig, MonitorOutcome
from chromerunner.runner import run, run_with_script


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "app.js"
    path.write_text('console.log("hello world"); window.close()\n')
    return path


@pytest.fixture
def browser(tmp_path):
    path = tmp_path / "bin" / "google-chrome"
    path.parent.mkdir()
    path.write_text("")
    return str(path)


def _make_process(lines, running=True):
    process = MagicMock()
    process.pid = 4321
    process.stdout = io.StringIO("".join(lines))
    process.poll.return_value = None if running else 0
    return process


class TestRunAttached:
    @patch("chromerunner.runner.start_browser")
    def test_forwards_output_until_sentinel(self, mock_start, script, browser):
        mock_start.return_value = _make_process(
            [
                "DevTools listening on ws://127.0.0.1\n",
                '[12345:6:789] "hello world", source: foo.js (1)\n',
                '[1:2:3] "CHROMERUNNER:WINDOWCLOSE", source: x\n',
            ]
        )
        out = io.StringIO()

        result = run_with_script(script, locations=[browser], out=out)

        assert out.getvalue() == "hello world\n"
        assert result.outcome is MonitorOutcome.WINDOW_CLOSED
        assert result.browser == browser
        assert result.detached is False

    @patch("chromerunner.runner.start_browser")
    def test_passes_launch_settings_to_browser(self, mock_start, script, browser):
        mock_start.return_value = _make_process([])

        run_with_script(
            script, headless=False, window_size="1024x768", locations=[browser], out=io.StringIO()
        )

        args = mock_start.call_args[0]
        assert args[0] == browser
        assert args[2] is False
        assert args[3] == "1024,768"

    @patch("chromerunner.runner.start_browser")
    def test_staging_dir_exists_during_run_and_is_removed_after(
        self, mock_start, script, browser
    ):
        seen = {}

        def fake_start(binary, staging_dir, headless, window_size, detached=False):
            seen["dir"] = staging_dir
            seen["files"] = sorted(os.listdir(staging_dir))
            return _make_process([])

        mock_start.side_effect = fake_start

        result = run_with_script(script, locations=[browser], out=io.StringIO())

        assert seen["files"] == ["index.html", "main.js"]
        assert result.staging_dir == seen["dir"]
        assert not os.path.exists(seen["dir"])

    @patch("chromerunner.runner.start_browser")
    def test_terminates_browser_still_running_after_sentinel(self, mock_start, script, browser):
        process = _make_process(['[1:2:3] "CHROMERUNNER:WINDOWCLOSE", source: x\n'])
        mock_start.return_value = process

        run_with_script(script, locations=[browser], out=io.StringIO())

        process.terminate.assert_called_once_with()

    @patch("chromerunner.runner.start_browser")
    def test_exited_browser_is_not_terminated(self, mock_start, script, browser):
        process = _make_process([], running=False)
        mock_start.return_value = process

        result = run_with_script(script, locations=[browser], out=io.StringIO())

        process.terminate.assert_not_called()
        assert result.outcome is MonitorOutcome.STREAM_ENDED

    @patch("chromerunner.runner.start_browser")
    def test_staging_removed_even_when_terminate_fails(self, mock_start, script, browser):
        process = _make_process([])
        process.terminate.side_effect = PermissionError("denied")
        mock_start.return_value = process

        result = run_with_script(script, locations=[browser], out=io.StringIO())

        assert not os.path.exists(result.staging_dir)

    @patch("chromerunner.runner.monitor_output", side_effect=KeyboardInterrupt)
    @patch("chromerunner.runner.start_browser")
    def test_cleanup_runs_when_monitoring_is_interrupted(
        self, mock_start, _monitor, script, browser
    ):
        process = _make_process([])
        staged = []

        def fake_start(binary, staging_dir, *args, **kwargs):
            staged.append(staging_dir)
            return process

        mock_start.side_effect = fake_start

        with pytest.raises(KeyboardInterrupt):
            run_with_script(script, locations=[browser], out=io.StringIO())

        process.terminate.assert_called_once_with()
        assert not os.path.exists(staged[0])


class TestRunDetached:
    @patch("chromerunner.runner.monitor_output")
    @patch("chromerunner.runner.start_browser")
    def test_returns_without_monitoring_and_keeps_staging(
        self, mock_start, mock_monitor, script, browser
    ):
        process = _make_process(['[1:2:3] "ignored", source: x\n'])
        mock_start.return_value = process

        result = run_with_script(script, detached=True, locations=[browser])
        try:
            mock_monitor.assert_not_called()
            process.terminate.assert_not_called()
            assert result.detached is True
            assert result.outcome is None
            assert result.pid == 4321
            assert sorted(os.listdir(result.staging_dir)) == ["index.html", "main.js"]
            assert mock_start.call_args[1]["detached"] is True
        finally:
            shutil.rmtree(result.staging_dir)

    @patch("chromerunner.runner.start_browser", side_effect=FileNotFoundError("chrome"))
    def test_spawn_failure_removes_staging(self, _start, script, browser, monkeypatch, tmp_path):
        staging_root = tmp_path / "tmp"
        staging_root.mkdir()
        monkeypatch.setattr("tempfile.tempdir", str(staging_root))

        with pytest.raises(FileNotFoundError):
            run_with_script(script, detached=True, locations=[browser])

        assert os.listdir(staging_root) == []


class TestRunErrors:
    def test_missing_script(self, tmp_path, browser):
        with patch("chromerunner.runner.staging_directory") as mock_staging:
            with pytest.raises(ScriptNotFoundError):
                run_with_script(tmp_path / "missing.js", locations=[browser])

        mock_staging.assert_not_called()

    def test_missing_browser(self, script, tmp_path):
        with patch("chromerunner.runner.start_browser") as mock_start:
            with pytest.raises(BrowserNotFoundError) as exc_info:
                run_with_script(script, locations=[str(tmp_path / "no-chrome")])

        mock_start.assert_not_called()
        assert exc_info.value.locations == [str(tmp_path / "no-chrome")]

    @patch("chromerunner.runner.get_binary_locations")
    def test_default_locations_used_when_none_given(self, mock_locations, script, browser):
        mock_locations.return_value = [browser]
        with patch("chromerunner.runner.start_browser", return_value=_make_process([])):
            result = run(LaunchConfig(script_path=script), out=io.StringIO())

        mock_locations.assert_called_once_with()
        assert result.browser == browser

    def test_bad_window_size(self, script, browser):
        with pytest.raises(ValidationError):
            run_with_script(script, window_size="huge", locations=[browser])


class TestRunMarkerTimeout:
    @patch("chromerunner.runner.MarkerWatchdog")
    @patch("chromerunner.runner.start_browser")
    def test_watchdog_armed_with_timeout_and_terminates_browser(
        self, mock_start, mock_watchdog, script, browser
    ):
        process = _make_process([])
        mock_start.return_value = process
        mock_watchdog.return_value.expired = False

        run_with_script(script, marker_timeout=3, locations=[browser], out=io.StringIO())

        timeout, on_expire = mock_watchdog.call_args[0]
        assert timeout == 3
        process.terminate.reset_mock()
        on_expire()
        process.terminate.assert_called_once_with()

    @patch("chromerunner.runner.MarkerWatchdog")
    @patch("chromerunner.runner.start_browser")
    def test_no_watchdog_by_default(self, mock_start, mock_watchdog, script, browser):
        mock_start.return_value = _make_process([])

        run_with_script(script, locations=[browser], out=io.StringIO())

        mock_watchdog.assert_not_called()
