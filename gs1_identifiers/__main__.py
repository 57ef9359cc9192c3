"""
CLI interface for GS1 identifier validation.

Usage:
    python -m gs1_identifiers "<identifier>" [options]
    python -m gs1_identifiers --batch values.txt [options]

Options:
    --type TYPE       Identifier type (gtin13, gdti, gln, ...; default: auto-detect)
    --json            Output as JSON
    --batch FILE      Validate one identifier per line from FILE
    --csv OUT         Write the batch report to OUT as CSV
    --verbose         Debug logging on stderr
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.barcode import IdentifierResult
from .core.registry import IDENTIFIER_TYPES, detect_identifier, validate_identifier
from .formatters.json_formatter import result_to_dict, result_to_json, results_to_json
from .logging_config import setup_logging
from .reports import export_csv, read_values, summarize, to_dataframe, validate_many


def format_result(result: IdentifierResult) -> str:
    """Format one result for display."""
    data = result_to_dict(result)
    lines = [
        f"Input: {result.raw!r}",
        f"Type: {result.kind}",
        f"Valid: {result.valid}",
    ]

    if result.valid:
        for key in ("gtin", "asset_type", "document_reference", "serial", "separator", "digits"):
            if key in data:
                lines.append(f"  {key}: {data[key]!r}")
    else:
        lines.append(f"  [{result.code.value}] {result.message}")

    return '\n'.join(lines)


def _validate(value: str, kind: Optional[str]) -> IdentifierResult:
    if kind is None:
        return detect_identifier(value)
    return validate_identifier(value, kind)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_identifiers',
        description='Validate GS1 barcodes (GTIN, GLN, SSCC, GSRN) and GDTI identifiers'
    )

    parser.add_argument(
        'value',
        nargs='?',
        help='Identifier to validate'
    )

    parser.add_argument(
        '--type',
        dest='kind',
        choices=sorted(IDENTIFIER_TYPES),
        default=None,
        help='Identifier type (default: detect)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--batch',
        default=None,
        help='File with one identifier per line'
    )

    parser.add_argument(
        '--csv',
        default=None,
        help='Write the batch report as CSV to this path'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.batch is None and args.value is None:
        parser.error('either an identifier or --batch FILE is required')

    if args.batch is not None:
        values = read_values(Path(args.batch))
        if args.kind is None:
            results = [detect_identifier(v) for v in values]
        else:
            results = validate_many(values, args.kind)

        df = to_dataframe(results)
        if args.csv:
            export_csv(df, Path(args.csv))

        if args.json:
            print(results_to_json(results))
        else:
            print(df.to_string(index=False))
            print()
            print(summarize(df).to_string(index=False))
    else:
        results = [_validate(args.value, args.kind)]
        if args.json:
            print(result_to_json(results[0]))
        else:
            print(format_result(results[0]))

    return 0 if all(r.valid for r in results) else 1


if __name__ == '__main__':
    sys.exit(main())
