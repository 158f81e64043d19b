"""Command-line entry point for the stack deployment profiler."""

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from .analysis import calculate_deployment_times, filter_events_for_latest_update
from .config import settings
from .events import get_stack_events
from .report import render_report

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(level_name: str, fmt: str) -> None:
    """
    Configure the root logger.

    Log records go to stderr so the report on stdout can be piped.

    Args:
        level_name: Logging level name, e.g. "INFO"
        fmt: logging.Formatter format string
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="stack-profiler",
        description="Show how long each resource took in the latest "
        "CloudFormation stack create/update",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Latest deployment of a stack in the default region
  stack-profiler TelemetryStack my-profile

  # Another region
  stack-profiler TelemetryStack my-profile eu-west-1
        """,
    )
    parser.add_argument("stack_name", help="CloudFormation stack name or ID")
    parser.add_argument("profile", help="AWS credential profile name")
    parser.add_argument(
        "region",
        nargs="?",
        default=settings.aws_region,
        help=f"AWS region (default: {settings.aws_region})",
    )
    parser.add_argument(
        "--clear-start-on-complete",
        action=argparse.BooleanOptionalAction,
        default=settings.clear_start_on_complete,
        help="Time each IN_PROGRESS/COMPLETE cycle of a resource separately",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the profiler and return the process exit code."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level, settings.log_format)

    print(f"Analyzing stack: {args.stack_name}")

    stack_events = get_stack_events(args.stack_name, args.profile, args.region)
    latest_update_events = filter_events_for_latest_update(
        stack_events, args.stack_name
    )

    if not latest_update_events:
        print("No events found for analysis", file=sys.stderr)
        return 1

    deployment_times = calculate_deployment_times(
        latest_update_events,
        clear_start_on_complete=args.clear_start_on_complete,
    )

    if not deployment_times:
        print("No completed resource updates found in the latest deployment")
        return 0

    print(render_report(deployment_times), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
