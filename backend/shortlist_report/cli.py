"""
Command line entry - generate the summary report of one vacancy

Usage:
    shortlist-report --item IT-001 --data export.json --output-dir reports
    shortlist-report --item IT-001 --api-url http://localhost:5001/api --token ...
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import get_config, reload_config
from .interfaces import IReportDataSource, ShortlistReportError
from .pipeline import ReportExecutor
from .sources import ApiReportDataSource, FileReportDataSource


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortlist-report",
        description="Generate the summary of the deliberation of candidates for one vacancy.",
    )
    parser.add_argument("--item", required=True, help="vacancy item number")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", default="", help="JSON/YAML export with vacancies, candidates, raters")
    source.add_argument("--api-url", default="", help="dashboard REST API base URL")
    parser.add_argument("--token", default=None, help="bearer token for the API")
    parser.add_argument("--output-dir", default="", help="output directory (default: from config)")
    parser.add_argument("--config", default="", help="runtime config YAML")
    parser.add_argument("--log-level", default="", help="logging level (default: from config)")
    return parser


def _make_source(args: argparse.Namespace) -> IReportDataSource:
    if args.data:
        return FileReportDataSource(Path(args.data))
    return ApiReportDataSource(base_url=args.api_url, token=args.token)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    config = reload_config(args.config) if args.config else get_config()
    logging.basicConfig(
        level=(args.log_level or config.logging.log_level).upper(),
        format=config.logging.log_format,
    )

    executor = ReportExecutor(
        _make_source(args),
        output_dir=Path(args.output_dir) if args.output_dir else None,
    )
    job = executor.create_job(args.item)
    try:
        pdf_path = executor.execute(job)
    except ShortlistReportError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"{pdf_path} ({job.page_count} pages)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
