# ABOUTME: BeautifulSoup extraction of story records from one listing page
# ABOUTME: Malformed rows are skipped and unparsable optional fields fall back to defaults

import re
from collections.abc import Callable
from datetime import UTC, datetime

from bs4 import BeautifulSoup, Tag

from newsmirror.errors import FieldParseFallback, MalformedRowSkipped
from newsmirror.extraction.base import TimeParser
from newsmirror.extraction.relative_time import RelativeTimeParser
from newsmirror.models import PageResult, Record
from newsmirror.utils.logging import get_logger

_LEADING_INT = re.compile(r"^(\d+)")
_COMMENT_COUNT = re.compile(r"^(\d+).*comment")


class RecordExtractor:
    """Extract normalized records and the load-more signal from listing markup.

    Extraction is synchronous and a pure function of the markup once ``now`` is fixed.
    """

    def __init__(self, time_parser: TimeParser | None = None, now: Callable[[], datetime] | None = None):
        """Initialize the extractor.

        Args:
            time_parser: Resolves age labels, defaults to RelativeTimeParser
            now: Returns the reference instant for age labels, defaults to the current UTC time
        """
        self.time_parser = time_parser or RelativeTimeParser()
        self.now = now or (lambda: datetime.now(UTC))
        self.logger = get_logger(__name__)

    def extract(self, markup: str, page: int = 1) -> PageResult:
        """Parse one listing page into records plus whether another page follows."""
        soup = BeautifulSoup(markup, "html.parser")
        reference = self.now()

        # Spacer rows only separate stories visually
        for spacer in soup.select("tr.spacer"):
            spacer.decompose()

        rows = soup.select("tr.athing")
        records: list[Record] = []
        skipped = 0

        for position, row in enumerate(rows):
            try:
                records.append(self._parse_row(soup, row, reference))
            except MalformedRowSkipped as e:
                skipped += 1
                self.logger.warning("Skipping malformed story row", page=page, row_position=position, reason=str(e))

        has_next_page = bool(rows) and soup.select_one("a.morelink") is not None

        self.logger.info(
            "Extracted listing page",
            page=page,
            row_count=len(rows),
            record_count=len(records),
            skipped_rows=skipped,
            has_next_page=has_next_page,
        )

        return PageResult(page=page, records=records, has_next_page=has_next_page)

    def _parse_row(self, soup: BeautifulSoup, row: Tag, reference: datetime) -> Record:
        raw_id = row.get("id")
        if not raw_id or not str(raw_id).isdigit():
            raise MalformedRowSkipped(f"row id {raw_id!r} is not numeric")
        story_id = int(raw_id)

        title_cell = _find_title_cell(row)
        if title_cell is None:
            raise MalformedRowSkipped(f"row {story_id} has no title cell")

        anchor = title_cell.select_one("span.titleline > a") or title_cell.select_one("a.storylink")
        title = anchor.get_text() if anchor else ""
        link = anchor.get("href") if anchor else None

        score = soup.find(id=f"score_{story_id}")
        subtext = score.parent if score is not None else _find_subtext(row)

        return Record(
            id=story_id,
            title=title,
            link=link,
            points=self._with_default(_parse_points, score, 0, story_id, "points"),
            author=_parse_author(subtext),
            comments=self._with_default(_parse_comments, subtext, 0, story_id, "comments"),
            time=self._parse_time(subtext, reference, story_id),
        )

    def _parse_time(self, subtext: Tag | None, reference: datetime, story_id: int) -> str | None:
        if subtext is None:
            return None
        age = subtext.find(class_="age", recursive=False)
        label = age.find("a") if age is not None else None
        if label is None:
            return None

        phrase = label.get_text(strip=True)
        instant = self.time_parser.parse(phrase, reference)
        if instant is None:
            self.logger.debug("Unparsable age label", story_id=story_id, phrase=phrase)
            return None
        return instant.isoformat(timespec="seconds")

    def _with_default(
        self, parse: Callable[[Tag | None], int], element: Tag | None, default: int, story_id: int, field: str
    ) -> int:
        try:
            return parse(element)
        except FieldParseFallback as e:
            self.logger.debug("Falling back to default", story_id=story_id, field=field, default=default, reason=str(e))
            return default


def _find_title_cell(row: Tag) -> Tag | None:
    """Return the title cell holding the story anchor, ignoring the rank cell that shares its class."""
    for cell in row.find_all("td", class_="title"):
        if cell.find(class_="rank") is None:
            return cell
    return None


def _find_subtext(row: Tag) -> Tag | None:
    """Locate the metadata line for stories without a score element, such as job posts."""
    sibling = row.find_next_sibling("tr")
    if sibling is None or "athing" in (sibling.get("class") or []):
        return None
    cell = sibling.find("td", class_="subtext")
    if cell is None:
        return None
    return cell.find("span", class_="subline") or cell


def _normalize(text: str) -> str:
    return " ".join(text.replace("\xa0", " ").split())


def _parse_points(score: Tag | None) -> int:
    if score is None:
        return 0
    text = _normalize(score.get_text())
    match = _LEADING_INT.match(text)
    if not match:
        raise FieldParseFallback(f"score label {text!r} has no leading number")
    return int(match.group(1))


def _parse_author(subtext: Tag | None) -> str | None:
    if subtext is None:
        return None
    user = subtext.find("a", class_="hnuser", recursive=False)
    if user is None:
        return None
    return user.get_text(strip=True) or None


def _parse_comments(subtext: Tag | None) -> int:
    if subtext is None:
        return 0
    links = [
        a for a in subtext.find_all("a", recursive=False) if str(a.get("href", "")).startswith("item?")
    ]
    if not links:
        return 0
    # "discuss" is what the link reads before the first comment
    text = _normalize(links[-1].get_text())
    match = _COMMENT_COUNT.match(text)
    if not match:
        raise FieldParseFallback(f"comments label {text!r} has no count")
    return int(match.group(1))
