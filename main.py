import argparse
import logging
import sys
from typing import List, Optional

from quakelog.causes import CauseOfDeath
from quakelog.errors import LogError
from quakelog.metrics import Metrics
from quakelog.parser import read_log
from scoreboard.config import OUTPUT_FORMATS, ReportSettings
from scoreboard.report import render
from scoreboard.session import MatchTracker, iter_matches


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Per-match scoreboards from Quake 3 Arena server logs")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for diagnostics on stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_parser = subparsers.add_parser("report", help="Print a scoreboard for every match in a log")
    report_parser.add_argument("path", help="Path to the server log, usually games.log")
    report_parser.add_argument("--format", choices=OUTPUT_FORMATS, default="text", help="Report output format")
    report_parser.add_argument("--no-causes", action="store_true", help="Omit the deaths-by-cause summary")
    report_parser.add_argument(
        "--flush-partial", action="store_true", help="Also report the open match when processing fails"
    )
    report_parser.add_argument("--encoding", default="utf-8", help="Text encoding of the log file")

    subparsers.add_parser("causes", help="List the recognised causes of death")

    return parser.parse_args(argv)


def run_report(path: str, settings: ReportSettings) -> int:
    metrics = Metrics()
    tracker = MatchTracker()
    printed = 0

    def emit(scoreboard, match_number):
        nonlocal printed
        if printed and settings.output_format == "text":
            print()
        print(render(scoreboard, match_number, settings))
        printed += 1

    try:
        for match_number, scoreboard in iter_matches(read_log(path, settings.encoding, metrics), tracker):
            emit(scoreboard, match_number)
    except LogError as exc:
        logging.error("error while processing log: %s", exc)
        if settings.flush_partial and tracker.current is not None:
            emit(tracker.current, tracker.match_number)
        return 1
    finally:
        logging.info("metrics snapshot: %s", metrics.snapshot())
    return 0


def list_causes() -> int:
    for cause in CauseOfDeath:
        print(cause.token)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(asctime)s] %(levelname)s %(message)s")
    if args.command == "causes":
        return list_causes()

    settings = ReportSettings(
        output_format=args.format,
        show_causes=not args.no_causes,
        flush_partial=args.flush_partial,
        encoding=args.encoding,
    )
    try:
        settings.validate()
    except ValueError as exc:
        logging.error("invalid settings: %s", exc)
        return 2
    return run_report(args.path, settings)


if __name__ == "__main__":
    sys.exit(main())
