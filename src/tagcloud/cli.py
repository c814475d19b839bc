#!/usr/bin/env python3
"""Tag cloud generator CLI."""

import argparse
import logging
import sys
from pathlib import Path

from .cloud import build_cloud
from .config import CloudConfig, parse_key_value_args
from .frequency import FrequencyTable
from .render import RENDERERS, render, write_output
from .selection import prompt_for_count, validate_count
from .source import SourceError, read_lines

INPUT_PROMPT = "Input name of text file to count words from: "
OUTPUT_PROMPT = "Input name for the HTML output file: "


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a tag cloud of the most frequent words in a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s book.txt -o book.html -n 50     # Top 50 words as HTML
  %(prog)s book.txt -o book.html           # Ask for the number of words
  %(prog)s book.txt -n 20 --stdout         # Print instead of writing a file
  %(prog)s book.txt -n 20 --format json -o top.json
  %(prog)s --config cloud.yml              # Read settings from YAML
  %(prog)s --config cloud.yml --set count=10 title="My cloud"
  %(prog)s                                 # Ask for everything
        """,
    )

    parser.add_argument("input", nargs="?", help="Text file to count words from")
    parser.add_argument("-o", "--output", help="Output file path")
    parser.add_argument(
        "-n", "--top", type=int, metavar="N", help="Number of words to include in the cloud"
    )
    parser.add_argument("--config", type=Path, metavar="FILE", help="Path to YAML run config")
    parser.add_argument("--format", choices=sorted(RENDERERS), help="Output format")
    parser.add_argument("--title", help="Page title (default: 'Top N words in INPUT')")
    parser.add_argument(
        "--set",
        nargs="+",
        metavar="KEY=VALUE",
        help="Override config values (e.g., --set count=25 format=json)",
    )
    parser.add_argument(
        "--stdout", action="store_true", help="Write the document to stdout instead of a file"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main() -> int:
    """Generate the tag cloud."""
    args = _build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load config
    if args.config is not None:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 1
        try:
            config = CloudConfig.from_yaml(args.config)
        except (ValueError, TypeError) as e:
            print(f"Error: Invalid config file {args.config}: {e}", file=sys.stderr)
            return 1
    else:
        config = CloudConfig()

    # Apply overrides, command line flags win over --set
    try:
        if args.set:
            config.override(parse_key_value_args(args.set))
        flags = {
            "input": args.input,
            "output": args.output,
            "count": args.top,
            "format": args.format,
            "title": args.title,
        }
        config.override({key: value for key, value in flags.items() if value is not None})
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        return _run(config, to_stdout=args.stdout)
    except EOFError:
        print("\nCancelled.", file=sys.stderr)
        return 1


def _run(config: CloudConfig, to_stdout: bool) -> int:
    """Read, count, select and render according to ``config``.

    Missing input/output names and word count are asked for interactively.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    # Names typed at a prompt are relative to the working directory
    if config.input is None:
        config.override({"input": input(INPUT_PROMPT).strip()})
    source = str(config.input)
    input_path = config.path_for("input")

    output: Path | None = None
    if not to_stdout:
        if config.output is None:
            config.override({"output": input(OUTPUT_PROMPT).strip()})
        output = config.path_for("output")

    try:
        lines = read_lines(input_path, encoding=config.encoding)
    except SourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    table = FrequencyTable.from_lines(lines)

    if config.count is None:
        n = prompt_for_count(len(table))
    else:
        result = validate_count(config.count, len(table))
        if not result.ok:
            print(
                f"Error: Invalid number of words {config.count}: {result.message} "
                f"(the input has {len(table)} unique words)",
                file=sys.stderr,
            )
            return 1
        n = result.unwrap()

    cloud = build_cloud(table, n, source, title=config.title)
    text = render(cloud, config.format, stylesheets=config.stylesheets)

    if output is None:
        sys.stdout.write(text)
        return 0

    try:
        write_output(text, output)
    except OSError as e:
        print(f"Error: Cannot write {output}: {e}", file=sys.stderr)
        return 1
    print(f"{cloud.title}: {len(cloud.records)} tags -> {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
