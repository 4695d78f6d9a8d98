"""Command-line interface for travel point lookups.

Usage:
    travel-point address 浄南町 ４番１５号
    travel-point facility 天草市役所
    travel-point facilities
    travel-point --json address 本渡町広瀬 1470番地

Exit status is 0 for definite or ambiguous results, 1 for error
results and 2 when the reference data cannot be loaded.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import AppConfig, ReferenceDataConfig, get_config
from .container import Container
from .domain.errors import ReferenceDataError
from .domain.models import LookupResult
from .logging_setup import configure_logging
from .presentation import format_result
from .services import TravelPointService


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="travel-point",
        description="Resolve an address or facility to its travel point.",
    )
    parser.add_argument("--json", action="store_true", help="print JSON output")
    parser.add_argument("--log-level", help="override TPR_LOG_LEVEL")
    parser.add_argument(
        "--data-dir", type=Path, help="directory holding the reference CSV files"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    address = sub.add_parser("address", help="look up a town name and house number")
    address.add_argument("town", help="town name, e.g. 浄南町")
    address.add_argument("house_number", help="house number, e.g. ４番１５号")

    facility = sub.add_parser("facility", help="look up a facility by name")
    facility.add_argument("name", help="facility name")

    sub.add_parser("facilities", help="list known facilities")
    return parser


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = get_config()
    if args.data_dir is None and args.log_level is None:
        return config

    update = {}
    if args.data_dir is not None:
        update["data"] = ReferenceDataConfig(data_dir=args.data_dir)
    if args.log_level is not None:
        update["observability"] = config.observability.model_copy(
            update={"level": args.log_level}
        )
    return config.model_copy(update=update)


def _print_result(
    result: LookupResult, service: TravelPointService, as_json: bool
) -> int:
    if as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(
            format_result(
                result,
                municipality_prefix=service.matching_config.municipality_prefix,
                error_marker=service.config.error_marker,
            )
        )
    return 1 if result.is_error else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``travel-point`` command."""
    args = _build_parser().parse_args(argv)
    config = _load_config(args)
    configure_logging(config.observability)

    try:
        service: TravelPointService = Container.create_default(config).resolve(
            TravelPointService
        )
        if args.command == "facilities":
            facilities = service.list_facilities()
    except ReferenceDataError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.file_path:
            print(f"  file: {exc.file_path}", file=sys.stderr)
        return 2

    if args.command == "address":
        result = service.resolve_address(args.town, args.house_number)
        return _print_result(result, service, args.json)
    if args.command == "facility":
        return _print_result(service.resolve_facility(args.name), service, args.json)

    if args.json:
        rows: List[dict] = [{"name": f.name, "address": f.address} for f in facilities]
        print(json.dumps(rows, ensure_ascii=False, indent=2))
    else:
        for facility in facilities:
            print(f"{facility.name}\t{facility.address}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
