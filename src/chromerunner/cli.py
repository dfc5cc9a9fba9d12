"""Command-line interface for chromerunner."""

import argparse
import logging
import sys

from pydantic import ValidationError

from chromerunner import __version__
from chromerunner.config import get_binary_locations, get_window_size
from chromerunner.exceptions import ChromeRunnerError
from chromerunner.models import LaunchConfig
from chromerunner.runner import run

log = logging.getLogger("chromerunner")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromerunner",
        description="ChromeRunner - Run a JS script as if it was an application.",
        epilog="Example: chromerunner myfile.js",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--detached",
        action="store_true",
        help="Do not wait for the app to exit via window.close()",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Prevent any UI from being shown",
    )
    parser.add_argument(
        "--window-size",
        default=None,
        metavar="W,H",
        help="App window size (default: %s)" % get_window_size(),
    )
    parser.add_argument(
        "--html-template",
        metavar="FILE",
        help="HTML page to load instead of the built-in one (must include main.js)",
    )
    parser.add_argument(
        "--browser",
        action="append",
        default=[],
        metavar="PATH",
        help="Extra Chrome binary location to try first (repeatable)",
    )
    parser.add_argument(
        "--marker-timeout",
        type=float,
        metavar="SECONDS",
        help="Fail if the browser logs nothing within this many seconds",
    )
    parser.add_argument("script", nargs="?", help="JavaScript file to run")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if args.script is None:
        parser.print_help()
        return 0

    try:
        html_template = None
        if args.html_template:
            with open(args.html_template, encoding="utf-8") as f:
                html_template = f.read()
        config = LaunchConfig(
            script_path=args.script,
            headless=args.headless,
            detached=args.detached,
            html_template=html_template,
            window_size=args.window_size or get_window_size(),
            marker_timeout=args.marker_timeout,
        )
        result = run(config, locations=get_binary_locations(args.browser))
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        print(f"Error: {errors}", file=sys.stderr)
        return 1
    except (ChromeRunnerError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.debug("finished: %s", result)
    return 0


def entrypoint() -> None:
    raise SystemExit(main())
