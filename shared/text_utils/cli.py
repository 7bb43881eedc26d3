"""
Command line front end for text_utils.

Usage:
    textkit substitute "Hello %1, you are %2" Bob 30
    textkit trim "  padded  "
    textkit escape "<a href='x'>" --no-attr --info
    textkit chunk abcdefg --size 3 --begin
    textkit chunk abcdefg --size 1 2 --json
    textkit pad 42 5 --char 0 --begin
    textkit case fooBarABC --to dashed
    textkit find 'a\\"b"c' '"'
    textkit config show
    textkit config validate -v

A text argument of "-" is read from stdin (one trailing newline removed).
Defaults for escape, chunk, pad and crop come from TextkitConfig.
"""

import argparse
import json
import sys
from collections.abc import Callable

from textkit_config import ConfigStatus, TextkitConfig, ValidationResult
from textkit_logging import configure_logging, get_logger

from .case import camel_to_dashed, dashed_to_camel
from .chunking import chunk
from .escaping import EscapeOptions, escape_for_html_with_info, index_of_not_escaped, stringify
from .formatting import capitalize, crop, pad, strip_accents, wrap
from .substitution import substitute
from .whitespace import next_white_space, trim


logger = get_logger("textkit.cli", component="cli")


def _read_text(value: str) -> str:
    """Return value, or stdin contents when value is "-"."""
    if value != "-":
        return value
    return sys.stdin.read().removesuffix("\n")


def cmd_substitute(args: argparse.Namespace, config: TextkitConfig) -> int:
    print(substitute(_read_text(args.template), args.values))
    return 0


def cmd_trim(args: argparse.Namespace, config: TextkitConfig) -> int:
    print(trim(_read_text(args.text)))
    return 0


def cmd_escape(args: argparse.Namespace, config: TextkitConfig) -> int:
    """Escape for HTML; unset --text/--attr flags fall back to config."""
    options = EscapeOptions(
        text=config.escape_text if args.text is None else args.text,
        attr=config.escape_attr if args.attr is None else args.attr,
    )
    escaped, info = escape_for_html_with_info(_read_text(args.input), options)

    if args.info:
        print(
            json.dumps(
                {"result": escaped, "escaped": info.escaped, "text": info.text, "attr": info.attr},
                ensure_ascii=False,
            )
        )
    else:
        print(escaped)
    return 0


def cmd_stringify(args: argparse.Namespace, config: TextkitConfig) -> int:
    print(stringify(_read_text(args.text)))
    return 0


def cmd_strip_accents(args: argparse.Namespace, config: TextkitConfig) -> int:
    print(strip_accents(_read_text(args.text)))
    return 0


def cmd_capitalize(args: argparse.Namespace, config: TextkitConfig) -> int:
    print(capitalize(_read_text(args.text)))
    return 0


def cmd_pad(args: argparse.Namespace, config: TextkitConfig) -> int:
    character = args.char if args.char is not None else config.pad_character
    print(pad(_read_text(args.text), args.size, character, args.begin))
    return 0


def cmd_crop(args: argparse.Namespace, config: TextkitConfig) -> int:
    character = args.char if args.char is not None else config.pad_character
    if len(character) != 1:
        raise ValueError(f"crop needs a single character, got {character!r}")
    print(crop(_read_text(args.text), args.size, character, args.begin))
    return 0


def cmd_chunk(args: argparse.Namespace, config: TextkitConfig) -> int:
    """Print chunks one per line, or as a JSON array."""
    if not args.size:
        size: int | list[int] = config.chunk_size
    elif len(args.size) == 1:
        size = args.size[0]
    else:
        size = args.size
    at_beginning = config.chunk_from_beginning if args.begin is None else args.begin

    chunks = chunk(_read_text(args.text), size, at_beginning)
    logger.debug("Chunked input", chunk_count=len(chunks), size=size, at_beginning=at_beginning)

    if args.json:
        print(json.dumps(chunks, ensure_ascii=False))
    else:
        for piece in chunks:
            print(piece)
    return 0


def cmd_case(args: argparse.Namespace, config: TextkitConfig) -> int:
    convert = camel_to_dashed if args.to == "dashed" else dashed_to_camel
    print(convert(_read_text(args.text)))
    return 0


def cmd_wrap(args: argparse.Namespace, config: TextkitConfig) -> int:
    print(wrap(_read_text(args.text), args.wrapper))
    return 0


def cmd_find(args: argparse.Namespace, config: TextkitConfig) -> int:
    """Print the index of the next unescaped character (or whitespace)."""
    text = _read_text(args.text)
    if args.whitespace:
        end = len(text) if args.end is None else args.end
        print(next_white_space(text, args.start, end))
        return 0

    if not args.char:
        raise ValueError("find needs a character to search for, or --whitespace")
    print(index_of_not_escaped(text, args.char, args.start))
    return 0


def _print_validation_result(name: str, result: ValidationResult, *, verbose: bool = False) -> None:
    """Print a single validation result."""
    status_icons = {
        ConfigStatus.VALID: "[OK]",
        ConfigStatus.INVALID: "[FAIL]",
        ConfigStatus.DEGRADED: "[WARN]",
    }
    icon = status_icons.get(result.status, "[?]")
    print(f"{icon} {name}: {result.status.value}")

    for error in result.errors:
        print(f"      ERROR: {error}")

    if verbose:
        for warning in result.warnings:
            print(f"      WARNING: {warning}")


def cmd_config(args: argparse.Namespace, config: TextkitConfig) -> int:
    """Show or validate the resolved configuration."""
    if args.config_command == "show":
        print(json.dumps(config.to_dict(), indent=2))
        return 0

    result = config.validate()
    _print_validation_result(config.config_name, result, verbose=args.verbose)
    return 0 if result.is_usable else 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="textkit",
        description="String helpers: substitution, escaping, padding, chunking and case conversion.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    substitute_parser = subparsers.add_parser("substitute", help="Replace %%n tokens with values")
    substitute_parser.add_argument("template", help="Template containing %%1, %%2, ...")
    substitute_parser.add_argument("values", nargs="*", help="Replacement values")

    for name, help_text in (
        ("trim", "Strip leading and trailing whitespace"),
        ("stringify", "Print as a double-quoted literal"),
        ("strip-accents", "Remove accents from vowels"),
        ("capitalize", "Uppercase the first character"),
    ):
        simple_parser = subparsers.add_parser(name, help=help_text)
        simple_parser.add_argument("text", help='Input text ("-" for stdin)')

    escape_parser = subparsers.add_parser("escape", help="Escape for HTML text and attributes")
    escape_parser.add_argument("input", help='Input text ("-" for stdin)')
    escape_parser.add_argument(
        "--text", action=argparse.BooleanOptionalAction, default=None, help="Escape for text nodes"
    )
    escape_parser.add_argument(
        "--attr", action=argparse.BooleanOptionalAction, default=None, help="Escape for attributes"
    )
    escape_parser.add_argument("--info", "-i", action="store_true", help="Print JSON with escape flags")

    for name, help_text in (
        ("pad", "Pad to a minimum length"),
        ("crop", "Remove a repeated character from one end"),
    ):
        sized_parser = subparsers.add_parser(name, help=help_text)
        sized_parser.add_argument("text", help='Input text ("-" for stdin)')
        sized_parser.add_argument("size", type=int, help="Minimum length of the result")
        sized_parser.add_argument("--char", "-c", help="Character to add or remove")
        sized_parser.add_argument("--begin", "-b", action="store_true", help="Work on the start of the text")

    chunk_parser = subparsers.add_parser("chunk", help="Split text into chunks")
    chunk_parser.add_argument("text", help='Input text ("-" for stdin)')
    chunk_parser.add_argument(
        "--size", "-s", type=int, nargs="+", help="Chunk length, or one length per chunk"
    )
    chunk_parser.add_argument(
        "--begin",
        "-b",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Cut from the start of the text",
    )
    chunk_parser.add_argument("--json", "-j", action="store_true", help="Print a JSON array")

    case_parser = subparsers.add_parser("case", help="Convert between camelCase and dashed-case")
    case_parser.add_argument("text", help='Input text ("-" for stdin)')
    case_parser.add_argument("--to", choices=("dashed", "camel"), required=True, help="Target style")

    wrap_parser = subparsers.add_parser("wrap", help="Surround text with a wrapper")
    wrap_parser.add_argument("text", help='Input text ("-" for stdin)')
    wrap_parser.add_argument("wrapper", help="String put before and after the text")

    find_parser = subparsers.add_parser("find", help="Find an unescaped character or whitespace")
    find_parser.add_argument("text", help='Input text ("-" for stdin)')
    find_parser.add_argument("char", nargs="?", help="Character to find")
    find_parser.add_argument("--start", type=int, default=0, help="Start position")
    find_parser.add_argument("--end", type=int, help="End position (with --whitespace)")
    find_parser.add_argument("--whitespace", "-w", action="store_true", help="Find next whitespace")

    config_parser = subparsers.add_parser("config", help="Show or validate configuration")
    config_subparsers = config_parser.add_subparsers(dest="config_command", required=True)
    config_subparsers.add_parser("show", help="Print the resolved configuration")
    validate_parser = config_subparsers.add_parser("validate", help="Validate the configuration")
    validate_parser.add_argument("--verbose", "-v", action="store_true", help="Show warnings")

    return parser


COMMANDS: dict[str, Callable[[argparse.Namespace, TextkitConfig], int]] = {
    "substitute": cmd_substitute,
    "trim": cmd_trim,
    "escape": cmd_escape,
    "stringify": cmd_stringify,
    "strip-accents": cmd_strip_accents,
    "capitalize": cmd_capitalize,
    "pad": cmd_pad,
    "crop": cmd_crop,
    "chunk": cmd_chunk,
    "case": cmd_case,
    "wrap": cmd_wrap,
    "find": cmd_find,
    "config": cmd_config,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = TextkitConfig.from_env()
    configure_logging(config.log_level_number, json_format=config.log_json, log_file=config.log_file)

    if args.command != "config":
        result = config.validate()
        if not result.is_usable:
            for error in result.errors:
                print(f"ERROR: {error}", file=sys.stderr)
            logger.error("Invalid configuration", error_count=len(result.errors))
            return 1

    bound = logger.with_context(command=args.command)
    try:
        return COMMANDS[args.command](args, config)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        bound.error("Command failed", error=str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
