"""Command-line entry point for cvscope.

Each filter is a subcommand that opens a live exploration session. The ``info``
subcommand prints the installed version, location, and interpreter/runtime
details to stderr, then exits.
"""

from __future__ import annotations

import argparse
import logging
import platform
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final

from . import _about  # pyright: ignore[reportPrivateUsage]
from . import constants
from .filters import FILTERS, get_filter
from .models import FilterKind, VideoSourceError
from .session import FilterSession

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ("build_parser", "main")

logger = logging.getLogger(__name__)

LOG_FORMAT: Final[str] = "%(asctime)s.%(msecs)03d %(levelname)s %(module)s - %(funcName)s: %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

_CYCLE_HELP: Final[str] = "  Use 'z' and 'x' keys to page through {options}.\n"
_KEY_HELP: Final[str] = """\
Key commands:
{cycle}  Press 'space' to pause/resume filtering.
  Press 'p' to generate Python code based on the current filter.
  Press 'g' to generate Go code (not implemented).
  Press 'esc' or 'q' to exit."""

_OPTION_NAMES: Final[dict[FilterKind, str]] = {
    FilterKind.ERODE: "structuring element shapes",
    FilterKind.GAUSSIAN_BLUR: "border calculation types",
    FilterKind.SCHARR: "border calculation types",
}


def print_info() -> None:
    """Print package info to stderr and return."""
    about_file = _about.__file__
    path = Path(about_file).resolve().parent if about_file else Path.cwd()
    sha1 = _about.__git_sha1__[:8]
    version = _about.__version__
    python_summary = f"{platform.python_implementation()} {platform.python_version()} {platform.python_compiler()}"
    uname_summary = " ".join(part.strip() for part in platform.uname() if part and part.strip())

    sys.stderr.write(f"cvscope ({version}) [{sha1}]\n")
    sys.stderr.write(f"located at {path}\n")
    sys.stderr.write(f"{python_summary}\n")
    sys.stderr.write(f"{uname_summary}\n")


def _key_help(kind: FilterKind) -> str:
    options = _OPTION_NAMES.get(kind)
    cycle = _CYCLE_HELP.format(options=options) if options else ""
    return _KEY_HELP.format(cycle=cycle)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per filter."""
    parser = argparse.ArgumentParser(
        prog="cvscope", description="Explore OpenCV filter parameters on live video."
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser("info", help="Print version and runtime details")

    for kind, filter_cls in FILTERS.items():
        sub = subparsers.add_parser(
            kind.value,
            help=f"Apply {filter_cls.title} to video images",
            description=_key_help(kind),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        sub.add_argument(
            "-s",
            "--source",
            default=constants.DEFAULT_SOURCE,
            help="Camera device index or video file path (default: %(default)s)",
        )
        sub.add_argument(
            "--wait-ms",
            type=int,
            default=constants.WAIT_KEY_DELAY_MS,
            help="Key poll timeout per frame in milliseconds (default: %(default)s)",
        )
        sub.add_argument(
            "--log-level",
            default="INFO",
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            help="Logging level",
        )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the selected command.

    Returns:
        int: Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in (None, "info"):
        print_info()
        return 0

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    session = FilterSession(get_filter(args.command), args.source, wait_ms=max(args.wait_ms, 1))
    try:
        session.run()
    except VideoSourceError as exc:
        logger.error("%s", exc)  # noqa: TRY400
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
