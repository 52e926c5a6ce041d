"""Command-line interface for the loyalty event contracts.

Usage:
    event-contracts types
    event-contracts show <event_type>
    event-contracts sample <event_type> [--scenario valid|drifted]
    event-contracts validate <event_type> [--scenario S | --file PATH] [--json]

`validate` reads the payload from stdin when neither --scenario nor --file is
given. Exit codes: 0 valid, 1 contract violations, 2 unknown type or
malformed input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, TextIO

from apps.event_contracts.services.contracts.errors import ContractError, MalformedInput
from apps.event_contracts.services.contracts.parsing import parse_payload
from apps.event_contracts.services.contracts.registry import default_registry
from apps.event_contracts.services.contracts.report import render_error, render_report
from apps.event_contracts.services.contracts.samples import Scenario, sample_payload, sample_text
from apps.event_contracts.services.contracts.validator import validate_event
from apps.event_contracts.utils.settings import settings

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

SCENARIOS = [s.value for s in Scenario]


def cmd_types(args: argparse.Namespace, out: TextIO) -> int:
    for event_type in default_registry().event_types():
        print(event_type, file=out)
    return EXIT_VALID


def cmd_show(args: argparse.Namespace, out: TextIO) -> int:
    contract = default_registry().get_contract(args.event_type)
    print(json.dumps(contract.to_dict(), indent=2), file=out)
    return EXIT_VALID


def cmd_sample(args: argparse.Namespace, out: TextIO) -> int:
    print(sample_text(args.event_type, args.scenario), file=out)
    return EXIT_VALID


def _read_payload(args: argparse.Namespace, stdin: TextIO) -> dict:
    if args.scenario:
        return sample_payload(args.event_type, args.scenario)
    if args.file:
        try:
            with open(args.file, "rb") as fh:
                return parse_payload(fh.read())
        except OSError as e:
            raise MalformedInput(f"Cannot read {args.file}: {e.strerror}")
    # Raw bytes when the stream has them; parse_payload does the decoding.
    source = getattr(stdin, "buffer", stdin)
    return parse_payload(source.read())


def cmd_validate(args: argparse.Namespace, out: TextIO, stdin: TextIO) -> int:
    # Unknown type is reported before the payload is looked at.
    default_registry().get_contract(args.event_type)
    payload = _read_payload(args, stdin)
    result = validate_event(args.event_type, payload)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2), file=out)
    else:
        print(render_report(result), file=out)
    return EXIT_VALID if result.is_valid else EXIT_INVALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="event-contracts",
        description="Check loyalty event payloads against their contracts.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("types", help="List known event types")

    p_show = sub.add_parser("show", help="Print the contract for an event type")
    p_show.add_argument("event_type")

    p_sample = sub.add_parser("sample", help="Print an example payload")
    p_sample.add_argument("event_type")
    p_sample.add_argument("--scenario", choices=SCENARIOS, default=Scenario.VALID.value)

    p_validate = sub.add_parser("validate", help="Validate a payload")
    p_validate.add_argument("event_type")
    source = p_validate.add_mutually_exclusive_group()
    source.add_argument("--scenario", choices=SCENARIOS, default=None)
    source.add_argument("--file", default=None, help="Path to a JSON payload")
    p_validate.add_argument("--json", action="store_true", help="Print the result as JSON")

    return parser


def main(
    argv: Optional[list[str]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    stdin: Optional[TextIO] = None,
) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    stdin = stdin or sys.stdin

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)

    try:
        if args.command == "types":
            return cmd_types(args, out)
        if args.command == "show":
            return cmd_show(args, out)
        if args.command == "sample":
            return cmd_sample(args, out)
        return cmd_validate(args, out, stdin)
    except ContractError as e:
        logging.getLogger("event_contracts.cli").debug("%s: %s", e.code, e.message)
        print(render_error(e), file=err)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
