"""Model package for chromerunner."""

from chromerunner.models.launch_config import LaunchConfig
from chromerunner.models.launch_result import LaunchResult
from chromerunner.models.monitor_outcome import MonitorOutcome

__all__ = [
    "LaunchConfig",
    "LaunchResult",
    "MonitorOutcome",
]
