# dictionary.py - wordhord lookup index
# In-memory Whoosh index over extracted entries, with "search" and "define" queries

import logging

from whoosh import analysis
from whoosh.fields import Schema, TEXT
from whoosh.filedb.filestore import RamStorage
from whoosh.qparser import FieldsPlugin, MultifieldParser, OrGroup, QueryParser
from whoosh.qparser.common import QueryParserError

from wordhord import config
from wordhord.errors import IndexConstructionFailure, InvalidQuery
from wordhord.extract import Entry, extract_entries
from wordhord.source import fetch_url, read_file

log = logging.getLogger("wordhord.dictionary")

# No stop words and no minimum length: "a" and "b" are headwords too
ANALYZER = analysis.RegexTokenizer() | analysis.LowercaseFilter()


def build_schema() -> Schema:
    return Schema(
        word=TEXT(analyzer=ANALYZER, stored=True),
        definition=TEXT(analyzer=ANALYZER, stored=True),
    )


def check_syntax(query: str):
    """Reject unbalanced quotes and parentheses, which Whoosh would silently accept."""
    depth, quoted = 0, False
    for ch in query:
        if ch == '"':
            quoted = not quoted
        elif quoted:
            continue
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise InvalidQuery(f"Unexpected ')' in query: {query}", query)
    if quoted:
        raise InvalidQuery(f"Unbalanced quotation mark in query: {query}", query)
    if depth:
        raise InvalidQuery(f"Unclosed '(' in query: {query}", query)


class Dictionary:
    """A container for indexed words and their definitions.

    Built once from the full list of entries and read-only afterwards.
    """

    def __init__(self, entries):
        schema = build_schema()
        self._index = RamStorage().create_index(schema)
        count = 0
        try:
            writer = self._index.writer()
        except Exception as e:
            raise IndexConstructionFailure(f"Couldn't create writer: {e}") from e
        try:
            for entry in entries:
                writer.add_document(word=entry.word, definition=entry.definition)
                count += 1
            writer.commit()
        except Exception as e:
            writer.cancel()
            raise IndexConstructionFailure(f"Couldn't index entry {count}: {e}") from e

        self._size = count
        self._searcher = self._index.searcher()

        self._search_parser = MultifieldParser(["word", "definition"], schema, group=OrGroup)
        self._define_parser = QueryParser("word", schema, group=OrGroup)
        self._define_parser.remove_plugin_class(FieldsPlugin)
        log.info(f"Indexed {count} entries")

    @classmethod
    def from_html(cls, html: str, strict: bool = True) -> "Dictionary":
        return cls(extract_entries(html, strict=strict))

    def __len__(self):
        return self._size

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self._searcher.close()

    # ─── QUERIES ──────────────────────────────────────────────────────────────
    def _parse(self, parser, query: str):
        check_syntax(query)
        try:
            return parser.parse(query)
        except QueryParserError as e:
            raise InvalidQuery(f"Invalid query {query!r}: {e}", query) from e

    def _run(self, parsed, limit: int) -> list[Entry]:
        results = self._searcher.search(parsed, limit=limit)
        log.debug(f"{parsed!r} -> {len(results)} of {results.estimated_length()} hits")
        return [Entry(word=hit["word"], definition=hit.get("definition", "")) for hit in results]

    def search(self, query: str, limit: int = None) -> list[Entry]:
        """Match `query` against words and definitions, best first."""
        if limit is None:
            limit = config.DEFAULT_LIMIT
        if not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        return self._run(self._parse(self._search_parser, query), limit)

    def define(self, query: str) -> list[Entry]:
        """Match `query` against headwords only."""
        return self._run(self._parse(self._define_parser, query), config.DEFINE_LIMIT)


# ─── LOADERS ──────────────────────────────────────────────────────────────────
def parse(path, strict: bool = True) -> Dictionary:
    """Build a Dictionary from a local HTML file."""
    return Dictionary.from_html(read_file(path), strict=strict)


def parse_url(url: str, strict: bool = True) -> Dictionary:
    """Build a Dictionary from an HTML page on the web."""
    return Dictionary.from_html(fetch_url(url), strict=strict)
