"""Locate the Chrome binary on disk."""

import logging
import os
from collections.abc import Iterable

log = logging.getLogger(__name__)


def find_browser_binary(locations: Iterable[str]) -> str:
    """Return the first candidate that exists as a regular file, or "" if none do.

    `~` is expanded before probing and the expanded path is returned. No PATH
    lookup and no executable-bit check are performed.
    """
    for candidate in locations:
        path = os.path.expanduser(candidate)
        if os.path.isfile(path):
            log.debug("found browser at %s", path)
            return path
        log.debug("no browser at %s", path)
    return ""
