# ABOUTME: Exception hierarchy for the scrape pipeline
# ABOUTME: Fatal errors (fetch, persist, dataset) propagate; row/field errors are recovered inside the extractor


class NewsMirrorError(Exception):
    """Base exception for all newsmirror errors."""

    pass


class FetchError(NewsMirrorError):
    """Raised when a listing page cannot be retrieved. Fatal to the run."""

    def __init__(self, message: str, page: int | None = None, url: str | None = None):
        super().__init__(message)
        self.page = page
        self.url = url


class MalformedRowSkipped(NewsMirrorError):
    """Raised when a story row lacks the structure needed to build a record."""

    pass


class FieldParseFallback(NewsMirrorError):
    """Raised when an optional field cannot be parsed and its default should be used."""

    pass


class PersistError(NewsMirrorError):
    """Raised when the dataset cannot be serialized or written."""

    pass


class DatasetError(NewsMirrorError):
    """Raised when a persisted dataset cannot be loaded."""

    pass
