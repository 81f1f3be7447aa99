"""Exceptions raised while loading, indexing and querying a dictionary."""


class WordhordError(Exception):
    """Base class for every wordhord failure."""


class SourceUnavailable(WordhordError):
    """The HTML file or URL could not be read."""


class MalformedDocument(WordhordError):
    """A headword paragraph did not have the expected structure."""

    def __init__(self, message: str, marker: str = ""):
        super().__init__(message)
        self.marker = marker


class IndexConstructionFailure(WordhordError):
    """The search backend rejected an entry or failed to commit."""


class InvalidQuery(WordhordError):
    """A search or define term does not parse."""

    def __init__(self, message: str, query: str = ""):
        super().__init__(message)
        self.query = query
