# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import TypeAdapter, ValidationError

from distform.adapters.form import ImportRequestPayload, ProjectFormPayload, to_project_form
from distform.config import ConfigurationError, configure_logging, get_form_limits
from distform.domain.content_import import ImportFailure, parse_import_content, reconcile_import
from distform.domain.project_form import validate_project_form

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger(__name__)

_ITEM_LIST = TypeAdapter(list[str])


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prepare content-distribution project forms")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing and deduplication details",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Split pasted content into items")
    parse.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Text file to read, '-' for stdin (default: %(default)s)",
    )

    bulk = subparsers.add_parser("import", help="Merge pasted content into existing items")
    bulk.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Text file to read, '-' for stdin (default: %(default)s)",
    )
    bulk.add_argument(
        "--existing",
        type=str,
        help="JSON file holding the current item list",
    )
    bulk.add_argument(
        "--request",
        type=str,
        help="JSON import request (content/currentItems/allowDuplicates); overrides the rest",
    )
    bulk.add_argument(
        "--allow-duplicates",
        action="store_true",
        help="Append every parsed item without deduplication",
    )

    validate = subparsers.add_parser("validate", help="Check project name and time window")
    validate.add_argument("--name", type=str, default="", help="Project name")
    validate.add_argument(
        "--start",
        type=str,
        help="ISO-8601 timestamp (UTC if no offset) when distribution starts",
    )
    validate.add_argument(
        "--end",
        type=str,
        help="ISO-8601 timestamp (UTC if no offset) when distribution ends",
    )
    validate.add_argument(
        "--payload",
        type=str,
        help="JSON form payload (name/startTime/endTime); overrides the flags",
    )

    return parser.parse_args(list(argv))


def _read_file(path: str) -> str:
    # utf-8-sig drops the byte-order mark editors such as Notepad prepend.
    return Path(path).read_text(encoding="utf-8-sig")


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return _read_file(source)


def _run_parse(args: argparse.Namespace) -> int:
    limits = get_form_limits()
    items = parse_import_content(
        _read_text(args.source), max_length=limits.content_item_max_length
    )
    log.info("Parsed %s items", len(items))
    print(json.dumps(items, ensure_ascii=False))
    return 0


def _run_import(args: argparse.Namespace) -> int:
    limits = get_form_limits()
    if args.request:
        request = ImportRequestPayload.model_validate_json(_read_file(args.request))
    else:
        current: list[str] = []
        if args.existing:
            current = _ITEM_LIST.validate_json(_read_file(args.existing))
        request = ImportRequestPayload(
            content=_read_text(args.source),
            current_items=current,
            allow_duplicates=args.allow_duplicates,
        )

    outcome = reconcile_import(
        request.content,
        request.current_items,
        allow_duplicates=request.allow_duplicates,
        max_length=limits.content_item_max_length,
    )
    if isinstance(outcome, ImportFailure):
        log.error("Import rejected: %s", outcome.message)
        return 1

    log.info("Imported %s items (skipped %s)", outcome.imported_count, outcome.skipped)
    print(
        json.dumps(
            {
                "items": list(outcome.items),
                "imported": outcome.imported_count,
                "skipped": outcome.skipped_info,
            },
            ensure_ascii=False,
        )
    )
    return 0


def _run_validate(args: argparse.Namespace) -> int:
    if args.payload:
        payload = ProjectFormPayload.model_validate_json(_read_file(args.payload))
    else:
        payload = ProjectFormPayload.model_validate(
            {"name": args.name, "startTime": args.start, "endTime": args.end}
        )

    result = validate_project_form(to_project_form(payload))
    print(
        json.dumps(
            {"isValid": result.is_valid, "errorMessage": result.error_message},
            ensure_ascii=False,
        )
    )
    if not result.is_valid:
        log.warning("Project form rejected: %s", result.error_message)
        return 1
    return 0


_COMMANDS = {
    "parse": _run_parse,
    "import": _run_import,
    "validate": _run_validate,
}


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        configure_logging(verbose=parsed_args.verbose, quiet=parsed_args.quiet)
        exit_code = _COMMANDS[parsed_args.command](parsed_args)
    except (ValueError, ValidationError, ConfigurationError, OSError):
        log.exception("Invalid input")
        sys.exit(2)

    if exit_code:
        sys.exit(exit_code)


def run() -> None:
    """Console-script entry point: load ``.env`` and exit quietly on Ctrl+C."""
    load_dotenv()
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
