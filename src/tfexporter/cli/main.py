"""
Command line entry point.

Usage:
    tfexporter collect [--plan PATH] [--apply-log PATH] [--refresh-log PATH]
                       [--start-time UNIX] [--pushgateway-url URL] [--job NAME]
                       [--dry-run] [--output table|json] [--strict-plan]
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from tfexporter import __version__
from tfexporter.cli.collect import collect_command
from tfexporter.config.settings import load_settings
from tfexporter.core.errors import ConfigurationError
from tfexporter.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfexporter",
        description="Export Terraform run metrics to a Prometheus Pushgateway",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", help="Log level (default: LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command")

    collect_parser = subparsers.add_parser(
        "collect", help="Collect metrics from plan/apply/refresh artifacts and push them"
    )
    collect_parser.add_argument("--plan", help="JSON plan path (TERRAFORM_PLAN_PATH)")
    collect_parser.add_argument("--apply-log", help="Apply log path (TERRAFORM_APPLY_LOG_PATH)")
    collect_parser.add_argument(
        "--refresh-log", help="Refresh log path (TERRAFORM_REFRESH_LOG_PATH)"
    )
    collect_parser.add_argument(
        "--start-time", help="Run start in Unix seconds (TERRAFORM_START_TIME)"
    )
    collect_parser.add_argument("--pushgateway-url", help="Pushgateway host or URL (PUSHGATEWAY_URL)")
    collect_parser.add_argument("--job", help="Pushgateway job name (PUSHGATEWAY_JOB)")
    collect_parser.add_argument("--dry-run", action="store_true",
                                help="Collect and print metrics without pushing")
    collect_parser.add_argument("--output", choices=["table", "json"], default="table",
                                help="Output format")
    collect_parser.add_argument("--strict-plan", action="store_true",
                                help="Fail if the plan exists but cannot be decoded")

    return parser


def _settings_log_level() -> str:
    # Invalid settings are reported by the command itself
    try:
        return load_settings().log_level
    except ConfigurationError:
        return "INFO"


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    configure_logging(args.log_level or _settings_log_level())

    if args.command == "collect":
        sys.exit(
            collect_command(
                plan_path=args.plan,
                apply_log_path=args.apply_log,
                refresh_log_path=args.refresh_log,
                start_time=args.start_time,
                pushgateway_url=args.pushgateway_url,
                job=args.job,
                dry_run=args.dry_run,
                output_format=args.output,
                strict_plan=args.strict_plan,
            )
        )


if __name__ == "__main__":
    main()
