"""Temporary app directory holding the HTML entry page and the user script."""

import logging
import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from chromerunner.constants import (
    DEFAULT_HTML_TEMPLATE,
    INDEX_FILENAME,
    SCRIPT_FILENAME,
    STAGING_PREFIX,
    STAGING_SUFFIX,
)
from chromerunner.exceptions import ScriptNotFoundError

log = logging.getLogger(__name__)


def stage_app(script_path: str | os.PathLike, html_template: str | None = None) -> str:
    """Create a fresh staging directory with index.html and a copy of the script.

    Raises ScriptNotFoundError before touching the filesystem if the script is
    missing.
    """
    script = Path(script_path)
    if not script.is_file():
        raise ScriptNotFoundError(script)

    staging_dir = tempfile.mkdtemp(prefix=STAGING_PREFIX, suffix=STAGING_SUFFIX)
    try:
        html = html_template or DEFAULT_HTML_TEMPLATE
        with open(os.path.join(staging_dir, INDEX_FILENAME), "w", encoding="utf-8") as f:
            f.write(html)
        shutil.copyfile(script, os.path.join(staging_dir, SCRIPT_FILENAME))
    except OSError:
        remove_staging_dir(staging_dir)
        raise
    log.debug("staged %s into %s", script, staging_dir)
    return staging_dir


def remove_staging_dir(staging_dir: str) -> None:
    """Delete a staging directory, ignoring any failure."""
    shutil.rmtree(staging_dir, ignore_errors=True)
    log.debug("removed %s", staging_dir)


@contextmanager
def staging_directory(
    script_path: str | os.PathLike,
    html_template: str | None = None,
    keep: bool = False,
) -> Iterator[str]:
    """Stage the app for the duration of the block.

    The directory is removed on exit however the block ends, unless `keep` is
    set (detached launches hand the files over to the browser).
    """
    staging_dir = stage_app(script_path, html_template)
    try:
        yield staging_dir
    finally:
        if keep:
            log.debug("leaving %s in place for detached browser", staging_dir)
        else:
            remove_staging_dir(staging_dir)
