"""Result model for a finished (or detached) launch."""

from dataclasses import dataclass

from chromerunner.models.monitor_outcome import MonitorOutcome


@dataclass
class LaunchResult:
    """What a launch left behind."""

    browser: str
    staging_dir: str
    pid: int
    detached: bool
    outcome: MonitorOutcome | None = None
