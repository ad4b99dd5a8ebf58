"""Command-line entry point: evaluate flight batches and write reports."""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from .config import Config
from .logger import configure_logging
from .services.planning_service import PlanningService
from .report import render_report

logger = logging.getLogger(__name__)


def _parse_batches(values: List[str]) -> Dict[str, str]:
    batches = {}
    for value in values:
        name, sep, path = value.partition("=")
        if not sep or not name or not path:
            raise argparse.ArgumentTypeError(f"Batch must look like NAME=PATH, got {value!r}")
        batches[name] = path
    return batches


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flight-planner",
        description="Validate candidate flights and report profit/loss per flight",
    )
    parser.add_argument("--airports", help="Airports file (code,name,distance hub 1,distance hub 2)")
    parser.add_argument("--aeroplanes", help="Aeroplanes file (model,cost per seat per 100km,range,economy,business,first-class)")
    parser.add_argument("--output-dir", help="Directory for <batch>_flights_output.txt reports")
    parser.add_argument(
        "--batch",
        action="append",
        default=[],
        metavar="NAME=PATH",
        help="Flights file to evaluate; repeatable (defaults to the configured batches)",
    )
    parser.add_argument("--delimiter", help="Field separator (default ',')")
    parser.add_argument("--workers", type=int, help="Threads per batch")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        batches = _parse_batches(args.batch)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    overrides = {
        "AIRPORTS_CSV": args.airports,
        "AEROPLANES_CSV": args.aeroplanes,
        "OUTPUT_DIR": args.output_dir,
        "CSV_DELIMITER": args.delimiter,
        "MAX_WORKERS": args.workers,
        "LOG_LEVEL": args.log_level,
    }
    config = Config(**{key: value for key, value in overrides.items() if value is not None})
    configure_logging(config.LOG_LEVEL, config.LOG_FILE)

    service = PlanningService(config)
    reports = service.run_batches(batches or None)

    failed = False
    for name, report in reports.items():
        if not report.is_loaded():
            logger.error(f"Error: {report.error} ({name} flights)")
            failed = True
            continue
        logger.info(f"{name.capitalize()} Flight Results:\n{render_report(report.results, config.CURRENCY_SYMBOL)}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
