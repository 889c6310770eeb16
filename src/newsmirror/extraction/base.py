# ABOUTME: Protocol interfaces for the pluggable extraction collaborators
# ABOUTME: Lets the orchestrator take any page source and the extractor take any time parser

from datetime import datetime
from typing import Protocol


class PageSource(Protocol):
    """Protocol for retrieving the raw markup of one listing page."""

    async def fetch(self, page: int) -> str:
        """Fetch the listing page with the given 1-based index.

        Args:
            page: Page index, 1 being the default front page

        Returns:
            Raw HTML of the page

        Raises:
            FetchError: If the page cannot be retrieved
        """
        ...


class TimeParser(Protocol):
    """Protocol for turning a human time phrase into an absolute instant."""

    def parse(self, phrase: str, reference: datetime) -> datetime | None:
        """Resolve ``phrase`` against ``reference``, returning None when it cannot be understood."""
        ...
