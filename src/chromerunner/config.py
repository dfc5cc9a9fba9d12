"""Configuration for chromerunner."""

import os
from collections.abc import Iterable

from chromerunner.constants import DEFAULT_WINDOW_SIZE

BROWSER_ENV_VAR = "CHROMERUNNER_BROWSER"
WINDOW_SIZE_ENV_VAR = "CHROMERUNNER_WINDOW_SIZE"

DEFAULT_BINARY_LOCATIONS: tuple[str, ...] = (
    # Windows
    "C:/Program Files (x86)/Google/Chrome/Application/chrome.exe",
    "C:/Program Files (x86)/Google/Application/chrome.exe",
    "~/AppDataLocal/Google/Chrome/chrome.exe",
    # Linux and other *nix
    "/usr/bin/google-chrome",
    "/usr/local/sbin/google-chrome",
    "/usr/local/bin/google-chrome",
    "/usr/sbin/google-chrome",
    "/usr/bin/chrome",
    "/sbin/google-chrome",
    "/bin/google-chrome",
    # macOS
    "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
    "~/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
)


def get_binary_locations(extra: Iterable[str] | None = None) -> list[str]:
    """Return browser candidates in search order.

    Caller-supplied paths come first, then the CHROMERUNNER_BROWSER override,
    then the built-in defaults. Duplicates keep their first position.
    """
    candidates: list[str] = list(extra or [])
    override = os.environ.get(BROWSER_ENV_VAR, "").strip()
    if override:
        candidates.append(override)
    candidates.extend(DEFAULT_BINARY_LOCATIONS)

    deduped: list[str] = []
    seen: set[str] = set()
    for item in candidates:
        if item in seen:
            continue
        seen.add(item)
        deduped.append(item)
    return deduped


def get_window_size() -> str:
    """Return the default window size from env or the built-in default."""
    return os.environ.get(WINDOW_SIZE_ENV_VAR, "").strip() or DEFAULT_WINDOW_SIZE
