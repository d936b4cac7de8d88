import argparse
import dataclasses
import sys
from typing import List, Optional

from climate_stats.config import Settings
from climate_stats.errors import InputUnavailable, UsageError
from climate_stats.utils.logging import get_logger, setup_logging

from climate_stats.ingestion.parser import RecordParser
from climate_stats.ingestion.ingest_job import IngestJob, IngestSummary

from climate_stats.aggregation.store import AggregationStore

from climate_stats.report.formatter import ReportFormatter, resolve_timezone

logger = get_logger(__name__)

USAGE = "Usage: {prog} tdv_file1 tdv_file2 ... tdv_fileN"

def build_arg_parser(prog: str = "climate-stats") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Summarize NOAA tab-delimited climate observations per region.",
    )
    parser.add_argument("files", nargs="*", help="TDV files to analyze, in order")
    policy = parser.add_mutually_exclusive_group()
    policy.add_argument(
        "--fail-fast",
        dest="missing_file_policy",
        action="store_const",
        const="abort",
        help="Stop the whole run at the first file that cannot be opened",
    )
    policy.add_argument(
        "--keep-going",
        dest="missing_file_policy",
        action="store_const",
        const="skip",
        help="Log files that cannot be opened and continue with the rest",
    )
    parser.add_argument("--tz", dest="report_timezone", help="Time zone for report timestamps")
    parser.add_argument("--banner", dest="show_banner", action="store_true", default=None,
                        help="Print the welcome banner before the report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser

def ingest(settings: Settings, paths: List[str]) -> tuple[AggregationStore, IngestSummary]:
    store = AggregationStore()
    job = IngestJob(RecordParser(encoding=settings.input_encoding), store, settings)
    summary = job.run(paths)
    return store, summary

def build_formatter(settings: Settings) -> ReportFormatter:
    return ReportFormatter(
        zone=resolve_timezone(settings.report_timezone),
        show_banner=settings.show_banner,
    )

def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    overrides = {
        k: v
        for k, v in (
            ("missing_file_policy", args.missing_file_policy),
            ("report_timezone", args.report_timezone),
            ("show_banner", args.show_banner),
        )
        if v is not None
    }
    if args.verbose:
        overrides["log_level"] = "DEBUG"

    try:
        if not args.files:
            raise UsageError("no input files given")
    except UsageError:
        print(USAGE.format(prog=parser.prog))
        return 1

    # bad env values and unknown zones are reported like any other bad argument
    try:
        s = dataclasses.replace(settings or Settings(), **overrides)
        formatter = build_formatter(s)
    except ValueError as e:
        parser.error(str(e))
    setup_logging(s.log_level)

    try:
        store, summary = ingest(s, args.files)
    except InputUnavailable as e:
        logger.error(f"{e}. Aborting run.")
        return 1

    sys.stdout.write(formatter.render(store.snapshot()))
    return 1 if summary.files_missing else 0

def run():
    sys.exit(main())

if __name__ == "__main__":
    run()
