"""Relay console.log() output from Chrome's log stream until the window closes."""

import logging
import sys
import threading
from collections.abc import Callable, Iterable
from typing import TextIO

from chromerunner.constants import LOG_END_MARKER, LOG_START_MARKER, WINDOW_CLOSE_SENTINEL
from chromerunner.exceptions import MarkerTimeoutError
from chromerunner.models import MonitorOutcome

log = logging.getLogger(__name__)


def extract_log_line(line: str) -> str | None:
    """Return the console message carried by a Chrome log line, or None."""
    line = line.rstrip("\r\n")
    start = line.find(LOG_START_MARKER)
    if start == -1:
        return None
    start += len(LOG_START_MARKER)
    end = line.find(LOG_END_MARKER, start)
    if end == -1:
        return None
    return line[start:end]


class MarkerWatchdog:
    """Fire a callback if no console line is seen within `timeout` seconds."""

    def __init__(self, timeout: float, on_expire: Callable[[], None]) -> None:
        self.timeout = timeout
        self._on_expire = on_expire
        self._expired = threading.Event()
        self._timer = threading.Timer(timeout, self._expire)
        self._timer.daemon = True

    @property
    def expired(self) -> bool:
        return self._expired.is_set()

    def start(self) -> None:
        self._timer.start()

    def disarm(self) -> None:
        self._timer.cancel()

    def _expire(self) -> None:
        self._expired.set()
        log.debug("no console output after %.1fs", self.timeout)
        self._on_expire()


def monitor_output(
    lines: Iterable[str],
    out: TextIO | None = None,
    watchdog: MarkerWatchdog | None = None,
) -> MonitorOutcome:
    """Forward console messages from `lines` to `out` until the window closes.

    Lines without both log markers are dropped. The sentinel stops monitoring
    without being forwarded. Raises MarkerTimeoutError if the watchdog fired
    before any console message arrived.
    """
    out = out if out is not None else sys.stdout
    seen_marker = False
    if watchdog is not None:
        watchdog.start()
    try:
        for line in lines:
            message = extract_log_line(line)
            if message is None:
                log.debug("browser: %s", line.rstrip())
                continue
            if not seen_marker and watchdog is not None:
                watchdog.disarm()
            seen_marker = True
            if message == WINDOW_CLOSE_SENTINEL:
                log.debug("window closed")
                return MonitorOutcome.WINDOW_CLOSED
            print(message, file=out, flush=True)
    finally:
        if watchdog is not None:
            watchdog.disarm()

    if not seen_marker and watchdog is not None and watchdog.expired:
        raise MarkerTimeoutError(watchdog.timeout)
    log.debug("browser output ended")
    return MonitorOutcome.STREAM_ENDED
