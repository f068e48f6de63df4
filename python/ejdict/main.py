"""ejdict CLI - English-Japanese dictionary lookup.

Usage:
    python -m ejdict.main look apple
    python -m ejdict.main look Apple --mode exact --json
    python -m ejdict.main candidates appl --number 10
    python -m ejdict.main build --download
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import config as cfg
from . import __version__, candidates, look
from .builder import DictionaryBuilder
from .errors import EjdictError, InvalidSearchModeName
from .ingest import ejdict_text
from .logging_config import get_logger, setup_logging
from .schema import Dictionary, Entry
from .search import SearchMode, parse_mode
from .store import DictionaryStore, default_store

logger = get_logger(__name__)


def mode_or_default(name: Optional[str], default: SearchMode) -> SearchMode:
    """Parse a mode name, falling back to default when it is invalid."""
    if name is None:
        return default
    try:
        return parse_mode(name)
    except InvalidSearchModeName as e:
        logger.warning("Unknown mode %r, using %s", e.given, default)
        return default


def parse_number(value: Optional[str], default: int) -> int:
    """Parse the candidate count, falling back to default."""
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        logger.warning("Invalid number %r, using %d", value, default)
        return default
    if number < 0:
        logger.warning("Negative number %d, using %d", number, default)
        return default
    return number


def render_table(console: Console, entries: Iterable[Entry]) -> None:
    """Print entries as a word/mean table, one sub-definition per line."""
    table = Table(show_lines=True)
    table.add_column("word")
    table.add_column("mean")
    for entry in entries:
        table.add_row(
            Text(",".join(entry.headwords)),
            Text("\n".join(entry.meanings())),
        )
    console.print(table)


def render_json(console: Console, data) -> None:
    console.print_json(data=data, ensure_ascii=False)


def load_dictionary(args: argparse.Namespace) -> Dictionary:
    if args.dictionary:
        return DictionaryStore(path=args.dictionary).get()
    return default_store().get()


def cmd_look(args: argparse.Namespace, console: Console) -> int:
    mode = mode_or_default(args.mode, parse_mode(cfg.default_look_mode()))
    entry = look(args.word, mode, dictionary=load_dictionary(args))
    if args.json:
        render_json(console, entry.to_dict())
    else:
        render_table(console, [entry])
    return 0


def cmd_candidates(args: argparse.Namespace, console: Console) -> int:
    mode = mode_or_default(args.mode, parse_mode(cfg.default_candidates_mode()))
    number = parse_number(args.number, cfg.default_candidates_number())
    found = candidates(args.word, mode, dictionary=load_dictionary(args)).take(number)
    if args.json:
        render_json(console, [e.to_dict() for e in found])
    else:
        render_table(console, found)
    return 0


def cmd_build(args: argparse.Namespace, console: Console) -> int:
    output = Path(args.output) if args.output else cfg.default_dictionary_path()
    force = args.force or cfg.get_default("force", False)
    builder = DictionaryBuilder()
    result = None

    if builder.needs_build(output, force):
        try:
            if args.download:
                result = ejdict_text.download_and_ingest(
                    cache_dir=cfg.default_cache_dir(),
                    url=args.url,
                    force=force,
                )
            else:
                source = Path(args.source) if args.source else cfg.default_source_path()
                result = ejdict_text.ingest(source)
        except (OSError, UnicodeDecodeError) as e:
            print(f"ERROR - {e}", file=sys.stderr)
            return 1
        builder.add_entries(result)

    stats = builder.build(output, force=force)
    if stats.skipped:
        console.print(f"Output already exists: {output} (use --force to rebuild)")
        return 0

    console.print(f"Source: {result.source_path}")
    console.print(f"  Entries: {stats.total_entries:,}")
    console.print(f"  Headwords: {stats.total_headwords:,}")
    if result.total_skipped:
        console.print(f"  Skipped lines: {result.total_skipped:,}")
    for path in stats.files_written:
        console.print(f"  Wrote: {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ejdict",
        description="ejdict - English-Japanese dictionary lookup",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--dictionary",
        "-d",
        type=Path,
        help="JSON dictionary file (default: from config.json)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=cfg.get_default("verbose", False),
        help="Log progress to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    look_parser = subparsers.add_parser(
        "look", help="Look it up the English-Japanese Dictionary."
    )
    look_parser.add_argument("word")
    look_parser.add_argument(
        "--mode",
        "-m",
        help=f"Select search mode (default: {cfg.default_look_mode()})",
    )
    look_parser.add_argument(
        "--json", action="store_true", help="Prints output format json"
    )
    look_parser.set_defaults(func=cmd_look)

    cand_parser = subparsers.add_parser(
        "candidates",
        help="Search result candidates for the English-Japanese Dictionary.",
    )
    cand_parser.add_argument("word")
    cand_parser.add_argument(
        "--mode",
        "-m",
        help=f"Select search mode (default: {cfg.default_candidates_mode()})",
    )
    cand_parser.add_argument(
        "--number",
        "-n",
        help=(
            "Maximum number of hits in search results "
            f"(default: {cfg.default_candidates_number()})"
        ),
    )
    cand_parser.add_argument(
        "--json", action="store_true", help="Prints output format json"
    )
    cand_parser.set_defaults(func=cmd_candidates)

    build_cmd = subparsers.add_parser(
        "build", help="Convert the raw EJDict text file into the JSON dictionary."
    )
    source = build_cmd.add_mutually_exclusive_group()
    source.add_argument("--source", "-s", type=Path, help="Local EJDict text file")
    source.add_argument(
        "--download", action="store_true", help="Download the EJDict release"
    )
    build_cmd.add_argument("--url", help="Download URL (default: from config.json)")
    build_cmd.add_argument(
        "--output", "-o", type=Path, help="Output JSON file (default: from config.json)"
    )
    build_cmd.add_argument(
        "--force", "-f", action="store_true", help="Rebuild even if output exists"
    )
    build_cmd.set_defaults(func=cmd_build)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    console = Console()
    try:
        return args.func(args, console)
    except EjdictError as e:
        print(e, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
