"""Errors raised by chromerunner and reported by the CLI."""


class ChromeRunnerError(RuntimeError):
    """Base class for launcher failures."""


class ScriptNotFoundError(ChromeRunnerError):
    def __init__(self, path) -> None:
        super().__init__(f"The script file does not exist: {path}")
        self.path = path


class BrowserNotFoundError(ChromeRunnerError):
    def __init__(self, locations: list[str]) -> None:
        super().__init__(
            "Unable to find the Chrome binary. Please ensure that Chrome is installed, "
            "or pass --browser / set CHROMERUNNER_BROWSER to its path "
            f"(searched {len(locations)} locations)."
        )
        self.locations = locations


class MarkerTimeoutError(ChromeRunnerError):
    def __init__(self, timeout: float) -> None:
        super().__init__(
            f"No console output was seen from the browser within {timeout:g} seconds. "
            "The browser may not support --enable-logging=stderr or its log format changed."
        )
        self.timeout = timeout
