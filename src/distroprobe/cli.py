"""Command-line interface for distroprobe."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from distroprobe import __version__
from distroprobe.commands import SubprocessRunner
from distroprobe.constants import DEFAULT_DETECT_TIMEOUT
from distroprobe.context import DetectContext
from distroprobe.detector import Detector
from distroprobe.distribution import Distribution
from distroprobe.errors import DetectionError

log = logging.getLogger(__name__)


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    if lines:
        print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def format_distribution(dist: Distribution) -> str:
    """Render a distribution as a short human-readable block."""
    rows = [
        ("Distribution", str(dist)),
        ("ID", dist.id or "-"),
        ("Version", dist.version_id or "-"),
        ("Codename", dist.version_codename or "-"),
        ("Family", str(dist.family)),
        ("Rolling", "yes" if dist.is_rolling else "no"),
    ]
    if dist.id_like:
        rows.insert(2, ("Like", " ".join(dist.id_like)))
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label:<{width}}  {value}" for label, value in rows)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the distroprobe CLI."""
    parser = argparse.ArgumentParser(
        prog="distroprobe",
        description="Detect the Linux distribution and its package-management family.",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="print the result as JSON")
    output.add_argument("--tui", action="store_true", help="show the result in a terminal UI")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_DETECT_TIMEOUT,
        metavar="SECONDS",
        help=f"give up after this many seconds (default: {DEFAULT_DETECT_TIMEOUT:g})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log each probe to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None, detector: Detector | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv[1:])
        detector: Detector to use (defaults to one running real commands)

    Returns:
        Process exit code
    """
    args = create_parser().parse_args(argv)
    if detector is None:
        detector = Detector(runner=SubprocessRunner())

    if args.tui:
        from distroprobe.app import DistroProbeApp

        app = DistroProbeApp(detector=detector, timeout=args.timeout)
        app.run()
        return 1 if app.last_error is not None else 0

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with DetectContext.with_timeout(args.timeout) as ctx:
        try:
            dist = detector.detect(ctx)
        except DetectionError as e:
            log.debug("Detection failed", exc_info=True)
            print_error_box("Could not detect the Linux distribution", str(e))
            return 1

    if args.json:
        print(json.dumps(dist.to_dict(), indent=2))
    else:
        print(format_distribution(dist))
    return 0


if __name__ == "__main__":
    sys.exit(main())
