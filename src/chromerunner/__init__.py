"""Run a JavaScript file as a desktop app inside a locally installed Chrome."""

__version__ = "0.1.0"
