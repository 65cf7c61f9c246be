# Copyright 2026 MemoML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the MemoML command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from memoml.config import ConfigError, ProjectConfig, find_config, load_config
from memoml.document import parse_file, to_json
from memoml.parser.errors import MemoSyntaxError
from memoml.parser.parser import Parser
from memoml.parser.scanner import Scanner, tokenize

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the MemoML CLI."""
    parser = argparse.ArgumentParser(
        prog="memoml",
        description="MemoML: check and inspect MemoML documents",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help=f"Configuration file to use instead of the nearest {_CONFIG_HINT}",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check MemoML files for syntax errors",
        description="Parse a file, or every MemoML file below a directory, and report syntax errors.",
    )
    check_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="File or directory to check (default: current directory)",
    )

    # dump subcommand
    dump_parser = subparsers.add_parser(
        "dump",
        help="Print the parsed tree as JSON",
        description="Parse a MemoML file and print its tree as JSON.",
    )
    dump_parser.add_argument("file", help="MemoML file to parse")
    dump_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (default: json-indent from the configuration, or 2)",
    )
    dump_parser.add_argument(
        "--trace",
        action="store_true",
        help="Print every parser step to stderr",
    )

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the token stream of a file",
        description="Scan a MemoML file and print one token per line.",
    )
    tokens_parser.add_argument("file", help="MemoML file to scan")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_CONFIG_HINT = ".memoml.yaml"


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "dump":
        return _cmd_dump(args)
    if args.command == "tokens":
        return _cmd_tokens(args)
    return 0


def _load_config(args: argparse.Namespace, directory: Path) -> ProjectConfig:
    """Load the configuration given on the command line, or the nearest one to *directory*."""
    if args.config is not None:
        return load_config(Path(args.config))
    config_file = find_config(directory)
    if config_file is None:
        return ProjectConfig()
    return load_config(config_file)


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    target = Path(args.path).resolve()

    if not target.exists():
        print(f"Error: path '{target}' does not exist.", file=sys.stderr)
        return 1

    directory = target if target.is_dir() else target.parent
    try:
        config = _load_config(args, directory)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    files = _discover_files(target, config) if target.is_dir() else [target]
    if not files:
        print("No MemoML files found.")
        return 0

    has_errors = False
    for path in files:
        try:
            parse_file(path)
        except MemoSyntaxError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            has_errors = True
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
            has_errors = True

    if has_errors:
        return 1

    print(f"Checked {len(files)} file(s). No issues found.")
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    """Handle the dump subcommand."""
    path = Path(args.file)

    try:
        config = _load_config(args, path.resolve().parent)
        text = path.read_text(encoding="utf-8")
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1

    parser = Parser(trace=args.trace)
    try:
        Scanner(parser.feed).scan(text)
        root = parser.document_root
    except MemoSyntaxError as exc:
        exc.path = path
        _print_trace(parser)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_trace(parser)
    indent = args.indent if args.indent is not None else config.json_indent
    print(to_json(root, indent=indent))
    return 0


def _cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens subcommand."""
    path = Path(args.file)

    try:
        tokens = tokenize(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1
    except MemoSyntaxError as exc:
        exc.path = path
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for token in tokens:
        print(token)
    return 0


def _discover_files(directory: Path, config: ProjectConfig) -> list[Path]:
    """Return the MemoML files below *directory*, skipping excluded directory names."""
    excluded = set(config.exclude)
    return sorted(
        path
        for path in directory.rglob("*")
        if path.is_file()
        and path.suffix in config.extensions
        and excluded.isdisjoint(path.relative_to(directory).parts[:-1])
    )


def _print_trace(parser: Parser) -> None:
    """Print the recorded parser steps to stderr, if tracing was enabled."""
    for step in parser.trace or ():
        print(f"{step.state.name:<5} {step.token}", file=sys.stderr)
