"""Core logic for chromerunner: discover, stage, launch, monitor, clean up."""

import logging
import os
from collections.abc import Iterable
from typing import TextIO

from chromerunner.config import get_binary_locations
from chromerunner.constants import DEFAULT_WINDOW_SIZE
from chromerunner.discovery import find_browser_binary
from chromerunner.exceptions import BrowserNotFoundError, ScriptNotFoundError
from chromerunner.launch import start_browser, terminate_browser
from chromerunner.models import LaunchConfig, LaunchResult
from chromerunner.monitor import MarkerWatchdog, monitor_output
from chromerunner.staging import remove_staging_dir, staging_directory

log = logging.getLogger("chromerunner")


def run(
    config: LaunchConfig,
    locations: Iterable[str] | None = None,
    out: TextIO | None = None,
) -> LaunchResult:
    """Run the configured script in Chrome.

    Attached launches block until the page logs the window-close sentinel or
    the browser exits, then terminate the browser and delete the staging
    directory. Detached launches return right after the browser starts and
    leave the staging directory behind.
    """
    if not config.script_path.is_file():
        raise ScriptNotFoundError(config.script_path)

    candidates = list(locations) if locations is not None else get_binary_locations()
    browser = find_browser_binary(candidates)
    if not browser:
        raise BrowserNotFoundError(candidates)

    with staging_directory(
        config.script_path, config.html_template, keep=config.detached
    ) as staging_dir:
        if config.detached:
            try:
                process = start_browser(
                    browser, staging_dir, config.headless, config.window_size, detached=True
                )
            except OSError:
                remove_staging_dir(staging_dir)
                raise
            log.debug("detached browser pid %s using %s", process.pid, staging_dir)
            return LaunchResult(
                browser=browser, staging_dir=staging_dir, pid=process.pid, detached=True
            )

        process = start_browser(browser, staging_dir, config.headless, config.window_size)
        watchdog = None
        if config.marker_timeout is not None:
            watchdog = MarkerWatchdog(config.marker_timeout, lambda: terminate_browser(process))
        try:
            outcome = monitor_output(process.stdout, out=out, watchdog=watchdog)
        finally:
            terminate_browser(process)
            if process.stdout is not None:
                process.stdout.close()

    return LaunchResult(
        browser=browser,
        staging_dir=staging_dir,
        pid=process.pid,
        detached=False,
        outcome=outcome,
    )


def run_with_script(
    script_path: str | os.PathLike,
    headless: bool = True,
    detached: bool = False,
    html_template: str | None = None,
    window_size: str = DEFAULT_WINDOW_SIZE,
    marker_timeout: float | None = None,
    locations: Iterable[str] | None = None,
    out: TextIO | None = None,
) -> LaunchResult:
    """Convenience wrapper around run() taking plain arguments."""
    config = LaunchConfig(
        script_path=script_path,
        headless=headless,
        detached=detached,
        html_template=html_template,
        window_size=window_size,
        marker_timeout=marker_timeout,
    )
    return run(config, locations=locations, out=out)
