"""Command-line interface for parsing WORDS reports."""

import argparse
import dataclasses
import json
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Any

from latin_words.definitions import ParseResult, ReportFormatError, parse_definitions
from latin_words.enums import CATEGORIES, Category
from latin_words.models import Definition, Expansion, Possibility

TRUNCATION_NOTE = "(more results omitted)"


def _read_input(source: str) -> str | None:
    """Read the report from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        print(f"Error: Input file not found: {path}", file=sys.stderr)
        return None
    return path.read_text(encoding="utf-8")


# =============================================================================
# JSON output
# =============================================================================


def _to_json(value: Any) -> Any:
    if isinstance(value, Category):
        return {"code": value.value, "display": value.display}
    return value


def _record_to_dict(record: Possibility | Expansion) -> dict[str, Any]:
    result: dict[str, Any] = {"pos": record.pos.value}
    for f in dataclasses.fields(record):
        result[f.name] = _to_json(getattr(record, f.name))
    return result


def _definition_to_dict(definition: Definition) -> dict[str, Any]:
    return {
        "id": definition.identifier,
        "expansion": _record_to_dict(definition.expansion),
        "possibilities": [
            {**_record_to_dict(p), "display": p.display} for p in definition.possibilities
        ],
        "meaning": definition.meaning,
        "truncated": definition.truncated,
    }


def format_json(result: ParseResult) -> str:
    """Format a parse result as a JSON document."""
    data = {
        "definitions": [_definition_to_dict(d) for d in result.definitions],
        "truncated": result.truncated,
    }
    return json.dumps(data, ensure_ascii=False, indent=2)


# =============================================================================
# Text output
# =============================================================================


def format_text(result: ParseResult) -> str:
    """Format a parse result as plain text, one block per definition."""
    lines: list[str] = []

    for definition in result.definitions:
        expansion = definition.expansion
        lines.append(f"{expansion.principal_parts} ({expansion.pos.display})")
        width = max((len(p.text) for p in definition.possibilities), default=0)
        lines.extend(f"  {p.text:<{width}}  {p.display}" for p in definition.possibilities)
        lines.extend(f"  {line}" for line in definition.meaning.split("\n"))
        if definition.truncated:
            lines.append(f"  {TRUNCATION_NOTE}")
        lines.append("")

    counts = Counter(d.expansion.pos for d in result.definitions)
    summary = ", ".join(f"{count} {pos.plural}" for pos, count in counts.items())
    total = len(result.definitions)
    lines.append(f"{total} definition(s)" + (f": {summary}" if summary else ""))
    if result.truncated:
        lines.append(TRUNCATION_NOTE)

    return "\n".join(lines)


# =============================================================================
# Commands
# =============================================================================


def cmd_parse(args: argparse.Namespace) -> int:
    """Run the parse command."""
    text = _read_input(args.input)
    if text is None:
        return 1

    try:
        result = parse_definitions(text)
    except ReportFormatError as e:
        if args.raw_on_error:
            print(text, end="" if text.endswith("\n") else "\n")
            return 0
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(format_json(result))
    else:
        print(format_text(result))
    return 0


def cmd_codes(args: argparse.Namespace) -> int:
    """Print the code -> display table of one or all categories."""
    names = [args.category] if args.category else list(CATEGORIES)

    for name in names:
        category = CATEGORIES[name]
        print(f"{name} (width {category.width()}):")
        for code, display in category.table():
            print(f"  {code:<{category.width()}}  {display}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="latin-words",
        description="Parse Whitaker's WORDS reports into structured definitions",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a report block and print its definitions",
    )
    parse_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Path to report block (default: read stdin)",
    )
    parse_parser.add_argument(
        "-f",
        "--format",
        type=str,
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    parse_parser.add_argument(
        "--raw-on-error",
        action="store_true",
        help="Print the report unchanged if it cannot be parsed",
    )
    parse_parser.set_defaults(func=cmd_parse)

    # codes subcommand
    codes_parser = subparsers.add_parser(
        "codes",
        help="Show the engine codes of each grammatical category",
    )
    codes_parser.add_argument(
        "category",
        nargs="?",
        default=None,
        choices=list(CATEGORIES),
        help="Category to show (default: all)",
    )
    codes_parser.set_defaults(func=cmd_codes)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s - %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
