"""Command line interface for parsing pasted Bible text."""

import argparse
import json
import os
import sys

from .parser import PARSE_ERROR_MESSAGE, SUPPORTED_FORMATS, parse_custom_bible_text
from .validator import validate_passage_match

OUTPUT_FORMATS = ("json", "html", "text")


def default_output_format() -> str:
    """Output format from SCRIPTURE_PASTE_FORMAT, falling back to json."""
    value = os.getenv("SCRIPTURE_PASTE_FORMAT", "json").strip().lower()
    return value if value in OUTPUT_FORMATS else "json"


def read_input(path: str | None) -> str:
    """Read pasted text from a file, or from stdin when path is None or "-"."""
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read()


def print_parse_error():
    print(PARSE_ERROR_MESSAGE, file=sys.stderr)
    print("Supported formats:", file=sys.stderr)
    for example in SUPPORTED_FORMATS:
        print(f"  {example}", file=sys.stderr)


def cmd_parse(args):
    """Handle the parse command."""
    try:
        text = read_input(args.file)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    passage = parse_custom_bible_text(text)
    if passage is None:
        print_parse_error()
        return 1

    output_format = args.format or default_output_format()

    if output_format == "html":
        print(passage.html_content)
    elif output_format == "text":
        print(passage.reference)
        if passage.book_name is None:
            print(f"  (unrecognized book abbreviation: {passage.book_abbreviation})")
        for verse in passage.verses:
            print(f"  {verse.number} {verse.text}")
    else:
        data = passage.to_dict()
        data["reference"] = passage.reference
        data["passage_id"] = passage.passage_id
        print(json.dumps(data, indent=2, ensure_ascii=False))

    return 0


def cmd_validate(args):
    """Handle the validate command."""
    try:
        text = read_input(args.file)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    passage = parse_custom_bible_text(text)
    if passage is None:
        print_parse_error()
        return 1

    end_chapter = args.end_chapter if args.end_chapter is not None else args.chapter
    end_verse = args.end_verse if args.end_verse is not None else args.verse

    result = validate_passage_match(
        passage, args.book, args.chapter, args.verse, end_chapter, end_verse
    )
    if not result.valid:
        print(result.message, file=sys.stderr)
        return 2

    print(f"✓ Passage matches: {passage.reference}")
    return 0


def cmd_formats(args):
    """Handle the formats command."""
    print("Supported formats:")
    for example in SUPPORTED_FORMATS:
        print(f"  {example}")
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Scripture Paste - Parse Bible passages pasted from external sources"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse pasted Bible text")
    parse_parser.add_argument(
        "file", nargs="?", help="File containing the pasted text (default: stdin)"
    )
    parse_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: $SCRIPTURE_PASTE_FORMAT or json)",
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate", help="Check pasted text against an expected passage"
    )
    validate_parser.add_argument(
        "file", nargs="?", help="File containing the pasted text (default: stdin)"
    )
    validate_parser.add_argument(
        "--book", type=str, required=True, help="Expected book abbreviation, e.g. Phil"
    )
    validate_parser.add_argument(
        "--chapter", type=int, required=True, help="Expected starting chapter"
    )
    validate_parser.add_argument(
        "--verse", type=int, default=1, help="Expected starting verse (default: 1)"
    )
    validate_parser.add_argument(
        "--end-chapter", type=int, help="Expected ending chapter (default: --chapter)"
    )
    validate_parser.add_argument(
        "--end-verse", type=int, help="Expected ending verse (default: --verse)"
    )

    # Formats command
    subparsers.add_parser("formats", help="Show the supported header formats")

    args = parser.parse_args()

    if args.command == "parse":
        return cmd_parse(args)
    elif args.command == "validate":
        return cmd_validate(args)
    elif args.command == "formats":
        return cmd_formats(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
