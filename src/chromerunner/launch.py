"""Build Chrome's command line and start the browser process."""

import logging
import os
import subprocess
from pathlib import Path

from chromerunner.constants import INDEX_FILENAME, PROFILE_DIRNAME

log = logging.getLogger(__name__)


def build_browser_args(staging_dir: str, headless: bool, window_size: str) -> list[str]:
    """Return the Chrome switches for running the staged app.

    See https://peter.sh/experiments/chromium-command-line-switches/
    """
    index_url = Path(staging_dir, INDEX_FILENAME).absolute().as_uri()
    args = [
        index_url if headless else f"--app={index_url}",
        "--allow-file-access",
        "--allow-file-access-from-files",
        f"--window-size={window_size}",
        f"--user-data-dir={os.path.join(staging_dir, PROFILE_DIRNAME)}",
        "--enable-logging=stderr",
        "--disable-breakpad",
        "--no-first-run",
    ]
    if headless:
        args.append("--headless")
    return args


def start_browser(
    binary: str,
    staging_dir: str,
    headless: bool,
    window_size: str,
    detached: bool = False,
) -> subprocess.Popen:
    """Start Chrome on the staged app.

    Attached launches merge stderr into a text stdout pipe for the monitor.
    Detached launches discard output and run in their own session.
    """
    argv = [binary, *build_browser_args(staging_dir, headless, window_size)]
    log.debug("launching %s", argv)
    if detached:
        return subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    return subprocess.Popen(
        argv,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        encoding="utf-8",
        errors="replace",
        bufsize=1,
    )


def terminate_browser(process: subprocess.Popen, grace: float = 5.0) -> None:
    """Terminate the browser if it is still running. Failures are ignored."""
    if process.poll() is not None:
        return
    log.debug("terminating browser pid %s", process.pid)
    try:
        process.terminate()
        process.wait(timeout=grace)
    except (OSError, subprocess.TimeoutExpired) as e:
        log.debug("browser pid %s did not terminate cleanly: %s", process.pid, e)
