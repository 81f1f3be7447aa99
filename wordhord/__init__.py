# wordhord - search a digitized dictionary from the command line

from wordhord.dictionary import Dictionary, parse, parse_url
from wordhord.extract import Entry, extract_entries

__all__ = ["Dictionary", "Entry", "extract_entries", "parse", "parse_url"]
