# ABOUTME: Parses human-relative time phrases ("3 hours ago") into absolute UTC instants
# ABOUTME: Uses dateutil relativedelta for calendar-aware offsets and dateutil parser for absolute dates

import re
from datetime import UTC, datetime

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_RELATIVE_PATTERN = re.compile(
    r"^(?P<amount>\d+|an?|one)\s+(?P<unit>second|minute|hour|day|week|month|year)s?\s+ago$",
    re.IGNORECASE,
)

_WORD_AMOUNTS = {"a": 1, "an": 1, "one": 1}

# A phrase naming a unit but not matching the relative pattern is not an absolute date
_UNIT_WORD = re.compile(r"\b(?:second|minute|hour|day|week|month|year)s?\b", re.IGNORECASE)


class RelativeTimeParser:
    """Resolve listing age labels against a reference instant."""

    def parse(self, phrase: str, reference: datetime) -> datetime | None:
        """Return the absolute instant ``phrase`` refers to, or None if it cannot be parsed.

        Args:
            phrase: Text such as "3 hours ago", "an hour ago", "yesterday" or an absolute date
            reference: The moment the phrase is relative to, naive values are treated as UTC

        Returns:
            Timezone-aware UTC datetime, or None
        """
        if not phrase:
            return None

        reference = _as_utc(reference)
        text = " ".join(phrase.split()).lower()

        if text in ("just now", "now"):
            return reference
        if text == "yesterday":
            return _shift(reference, relativedelta(days=1))

        match = _RELATIVE_PATTERN.match(text)
        if match:
            raw_amount = match.group("amount")
            amount = _WORD_AMOUNTS.get(raw_amount) or int(raw_amount)
            unit = match.group("unit") + "s"
            return _shift(reference, relativedelta(**{unit: amount}))

        if _UNIT_WORD.search(text):
            return None

        return self._parse_absolute(phrase, reference)

    @staticmethod
    def _parse_absolute(phrase: str, reference: datetime) -> datetime | None:
        try:
            parsed = date_parser.parse(phrase, default=reference.replace(tzinfo=None))
        except (ValueError, OverflowError):
            return None
        return _as_utc(parsed)


def _shift(reference: datetime, offset: relativedelta) -> datetime | None:
    try:
        return reference - offset
    except (ValueError, OverflowError):
        return None


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
