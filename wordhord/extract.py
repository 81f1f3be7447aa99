# extract.py - wordhord entry extractor
# Recovers (word, definition) pairs from the paragraphs of a digitized dictionary

import logging
import re
from dataclasses import dataclass

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from wordhord import config
from wordhord.errors import MalformedDocument

log = logging.getLogger("wordhord.extract")

_NEWLINES = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Entry:
    word: str
    definition: str


# ─── TREE WALKING ─────────────────────────────────────────────────────────────
def first_child(node):
    """First child node of an element (text included), or None."""
    if not isinstance(node, Tag) or not node.contents:
        return None
    return node.contents[0]


def is_element(node) -> bool:
    return isinstance(node, Tag)


def is_text(node) -> bool:
    # Comments, CDATA and doctypes are strings in bs4 but not text nodes
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def marker_of(paragraph) -> str:
    anchor = first_child(paragraph)
    if not is_element(anchor):
        return ""
    return anchor.get("id") or ""


def is_entry_paragraph(paragraph, marker_prefix: str = config.MARKER_PREFIX) -> bool:
    """A paragraph is an entry when its first child carries a headword anchor id."""
    return marker_of(paragraph).startswith(marker_prefix)


# ─── ENTRY CONVERSION ─────────────────────────────────────────────────────────
def extract_word(paragraph) -> str:
    marker = marker_of(paragraph)
    bold = paragraph.find("b")
    if bold is None:
        raise MalformedDocument(f"Entry {marker!r} has no bold headword", marker)
    text = first_child(bold)
    if not is_text(text):
        raise MalformedDocument(f"Headword of entry {marker!r} does not start with text", marker)
    word = str(text).strip()
    if not word:
        raise MalformedDocument(f"Headword of entry {marker!r} is blank", marker)
    return word


def extract_definition(paragraph) -> str:
    """Join the leading text of every inline child, in document order.

    Text sitting directly under the paragraph has no children of its own and
    is not part of the definition.
    """
    parts = []
    for child in paragraph.children:
        text = first_child(child)
        if is_text(text):
            parts.append(_NEWLINES.sub(" ", str(text)) + " ")
    return "".join(parts).strip()


def entry_from_paragraph(paragraph) -> Entry:
    log.debug("Children %s", [c.name for c in paragraph.children if is_element(c)])
    word = extract_word(paragraph)
    definition = extract_definition(paragraph)
    log.debug("ID: %s | Word: %s | Definition: %s", marker_of(paragraph), word, definition)
    return Entry(word=word, definition=definition)


# ─── DOCUMENT ─────────────────────────────────────────────────────────────────
def extract_entries(html: str, *, strict: bool = True,
                    marker_prefix: str = config.MARKER_PREFIX) -> list[Entry]:
    """Parse every headword paragraph of `html` into an Entry.

    In strict mode the first malformed headword paragraph aborts the whole
    pass with MalformedDocument. Otherwise it is logged and skipped.
    """
    soup = BeautifulSoup(html, config.HTML_PARSER)
    entries = []
    skipped = 0

    for paragraph in soup.find_all("p"):
        if not is_entry_paragraph(paragraph, marker_prefix):
            continue
        try:
            entries.append(entry_from_paragraph(paragraph))
        except MalformedDocument as e:
            if strict:
                raise
            skipped += 1
            log.warning(f"Skipping malformed entry: {e}")

    log.info(f"Extracted {len(entries)} entries ({skipped} skipped)")
    return entries
