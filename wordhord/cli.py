# cli.py - wordhord command line
# Usage: wordhord (-f FILE | -u URL) search TERM [--limit N]
#        wordhord (-f FILE | -u URL) define TERM

import argparse
import logging

from rich.console import Console
from rich.text import Text

from wordhord import config
from wordhord.dictionary import Dictionary
from wordhord.errors import WordhordError
from wordhord.source import load_source

log = logging.getLogger("wordhord")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordhord", description="Search a digitized dictionary")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--file", help="The HTML file to parse")
    source.add_argument("-u", "--url", help="The URL of the HTML page to parse")
    parser.add_argument("--lenient", action="store_true",
                        help="Skip malformed entries instead of failing")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More logging (-vv for debug)")

    commands = parser.add_subparsers(dest="command", required=True)
    search = commands.add_parser("search", help="Find words by English translation")
    search.add_argument("term")
    search.add_argument("--limit", type=int, default=config.DEFAULT_LIMIT,
                        help="Max results to show")
    define = commands.add_parser("define", help="Show the definition for the given term")
    define.add_argument("term")
    return parser


def configure_logging(verbose: int):
    level = config.LOG_LEVEL
    if verbose == 1:
        level = "INFO"
    elif verbose > 1:
        level = "DEBUG"
    logging.basicConfig(level=level, format=config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)


def print_results(console: Console, title: str, term: str, entries):
    console.print(Text.assemble((title, "bold underline blue"), ": ", (term, "bold")))
    for entry in entries:
        console.print(Text.assemble((entry.word, "bold blue"), " - ", entry.definition))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    console = Console(soft_wrap=True, highlight=False)
    status = Console(stderr=True)

    try:
        with status.status("Loading dictionary..."):
            html = load_source(path=args.file, url=args.url)
            dictionary = Dictionary.from_html(html, strict=not args.lenient)
    except WordhordError as e:
        log.error(f"Failed to load dictionary: {e}")
        return 1

    with dictionary:
        try:
            if args.command == "search":
                if args.limit < 1:
                    log.error("--limit must be at least 1")
                    return 1
                print_results(console, "Search", args.term, dictionary.search(args.term, args.limit))
            else:
                print_results(console, "Define", args.term, dictionary.define(args.term))
        except WordhordError as e:
            log.error(str(e))
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
