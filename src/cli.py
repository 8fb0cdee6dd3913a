"""Console entry point: print a one-shot hardware sensor report."""
import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as package_version
from typing import List, Optional

from core.config_loader import config_loader
from core.errors import HwmonError
from core.hwmon_scanner import HwmonScanner
from core.models.sensor_enum import SensorCategory
from core.report_renderer import render_report
from schemas import HwmonReportResponse

logger = logging.getLogger(__name__)


def get_version() -> str:
    try:
        return package_version("tempchk")
    except PackageNotFoundError:
        return "0.0"


def create_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tempchk",
        description="Print hardware temperature (and related) sensor values from the Linux hwmon interface.")

    parser.add_argument(
        "--version", action="version", version=f"tempchk v{get_version()}",
        help="print the current version of this program and exit")
    parser.add_argument(
        "--debug", action="store_true", default=None,
        help="print every file opened and every device skipped")
    parser.add_argument(
        "--hwmon-dir", metavar="DIR", default=None,
        help="read devices from DIR instead of the kernel hwmon directory")
    parser.add_argument(
        "--cpuinfo", metavar="FILE", default=None,
        help="read CPU identification data from FILE instead of /proc/cpuinfo")
    parser.add_argument(
        "-c", "--category", dest="categories", metavar="CATEGORY", action="append",
        choices=[c.value for c in SensorCategory],
        help="sensor category to scan (may be repeated; default: temp)")
    parser.add_argument(
        "--json", action="store_true",
        help="print the report as JSON")
    return parser


def configure_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(levelname)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = create_argparser().parse_args(argv)
    settings = config_loader.override(
        hwmon_directory=args.hwmon_dir,
        cpuinfo_path=args.cpuinfo,
        debug=args.debug,
    )
    configure_logging(settings.debug)

    categories = [SensorCategory(c) for c in (args.categories or ["temp"])]

    try:
        report = HwmonScanner(settings).scan(categories)
    except HwmonError as e:
        logger.error(str(e))
        return 1

    if args.json:
        print(json.dumps(HwmonReportResponse.from_report(report).model_dump(), indent=2))
    else:
        print(render_report(report, settings.spacer_size), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
