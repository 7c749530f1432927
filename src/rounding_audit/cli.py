"""Command line entry point for rounding-audit.

Detects rounding discrepancies of format(value, ".{depth}f") for a range of
floating-point values, compared with a naive string-based rounding.

Usage: rounding-audit [-v] [-n] [-a | -e] [--digits exact|shortest] [depth]

    depth : max number of digits in the fractional part (0..15, default 6)
    -v    : verbose output, one line per discrepancy
    -n    : negative values
    -a/-e : reference tie policy, half-up (default) or half-even

Exit status is 0 whether or not discrepancies were found; 1 on an internal
error of the audit itself.
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional, Sequence

from jsonschema import ValidationError

from rounding_audit.audit.comparator import NormalizationMismatch
from rounding_audit.audit.driver import run_audit
from rounding_audit.core.contracts import validate_audit_report
from rounding_audit.core.domain.candidates import MAX_DEPTH_LIMIT, MAX_INTEGER_PART
from rounding_audit.core.domain.report import (
    DEFAULT_MAX_DEPTH,
    AuditConfig,
    AuditReport,
    Discrepancy,
)
from rounding_audit.core.math.decimal_expansion import DigitSource, UnsupportedValue
from rounding_audit.core.math.rounding import ReferenceRounder, RoundingPolicy

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "ROUNDING_AUDIT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Процент в итоговой строке округляется тем же эталоном (half-up по repr)
_PERCENT_ROUNDER = ReferenceRounder(RoundingPolicy.HALF_UP, DigitSource.SHORTEST)


def _bounded_int(low: int, high: int):
    def parse(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"must be in [{low}, {high}], got {value}")
        return value

    return parse


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="rounding-audit",
        description="Compare format(value, '.Nf') with a naive decimal rounding reference.",
    )
    ap.add_argument(
        "depth",
        nargs="?",
        type=_bounded_int(0, MAX_DEPTH_LIMIT),
        default=DEFAULT_MAX_DEPTH,
        help=f"max number of fractional digits to test (default {DEFAULT_MAX_DEPTH})",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="print every discrepancy")
    ap.add_argument("-n", "--negative", action="store_true", help="test negative values")
    policy = ap.add_mutually_exclusive_group()
    policy.add_argument(
        "-a",
        "--half-up",
        dest="policy",
        action="store_const",
        const=RoundingPolicy.HALF_UP,
        help="reference rounds ties away from zero (default)",
    )
    policy.add_argument(
        "-e",
        "--half-even",
        dest="policy",
        action="store_const",
        const=RoundingPolicy.HALF_EVEN,
        help="reference rounds ties to even",
    )
    ap.add_argument(
        "--digits",
        choices=[s.value for s in DigitSource],
        default=DigitSource.EXACT.value,
        help="digits the reference rounds from: exact binary value or shortest repr",
    )
    ap.add_argument(
        "--integer-part",
        type=_bounded_int(0, MAX_INTEGER_PART),
        default=0,
        help="integer part of the generated values (default 0)",
    )
    ap.add_argument(
        "--workers",
        type=_bounded_int(1, 64),
        default=1,
        help="worker processes, one depth per task (default 1)",
    )
    ap.add_argument("--json", action="store_true", help="print the report as JSON")
    ap.add_argument(
        "--log-level",
        default=None,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help=f"logging level on stderr (default ${LOG_LEVEL_ENV} or WARNING)",
    )
    ap.set_defaults(policy=RoundingPolicy.HALF_UP)
    return ap


def configure_logging(level: Optional[str] = None) -> None:
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def config_from_args(args: argparse.Namespace) -> AuditConfig:
    return AuditConfig(
        max_depth=args.depth,
        verbose=args.verbose,
        negate=args.negative,
        policy=args.policy,
        digit_source=DigitSource(args.digits),
        integer_part=args.integer_part,
        workers=args.workers,
    )


def format_summary(report: AuditReport) -> str:
    """Итоговая строка: '=> E / T error(s) for depth 0-D, so P %'."""
    percent = _PERCENT_ROUNDER.round(report.percentage, 1)
    return (
        f"=> {report.total_discrepancies} / {report.total_comparisons} error(s) "
        f"for depth 0-{report.config.max_depth}, so {percent} %"
    )


def _print_discrepancy(discrepancy: Discrepancy) -> None:
    print(discrepancy.format_line())


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    config = config_from_args(args)
    logger.debug("config: %s", config)

    try:
        if args.json:
            report = run_audit(config)
            data = report.to_contract()
            validate_audit_report(data)
            print(json.dumps(data, indent=2))
            return 0

        if config.verbose:
            print("'original value' :'depth': 'display-rounded' <> 'expected'")
        report = run_audit(config, on_discrepancy=_print_discrepancy)
    except (UnsupportedValue, NormalizationMismatch, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print()
    print(format_summary(report))
    print(f"elapsed time: {report.elapsed_s:.3f} s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
