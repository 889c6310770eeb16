# ABOUTME: Pydantic models for normalized story records and per-page extraction results
# ABOUTME: Records are frozen once built; the dataset is a JSON array of Record objects

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class Record(BaseModel):
    """One story entry from a listing page.

    ``time`` holds an absolute ISO-8601 timestamp, never the relative phrase shown on the page.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Native story identifier from the listing markup")
    title: str = Field(default="", description="Story title, empty when the title anchor is missing")
    link: str | None = Field(default=None, description="Destination URL of the title anchor")
    points: int = Field(default=0, ge=0, description="Score, 0 for unscored posts")
    author: str | None = Field(default=None, description="Submitter, absent for job posts")
    comments: int = Field(default=0, ge=0, description="Comment count, 0 when none or unparsable")
    time: str | None = Field(default=None, description="ISO-8601 submission time")

    @field_validator("time")
    @classmethod
    def _must_be_absolute(cls, value: str | None) -> str | None:
        if value is None:
            return None
        datetime.fromisoformat(value)
        return value


class PageResult(BaseModel):
    """Records extracted from one listing page plus the continuation signal."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(ge=1)
    records: list[Record] = Field(default_factory=list)
    has_next_page: bool = False

    @property
    def record_count(self) -> int:
        return len(self.records)


class RunSummary(BaseModel):
    """Outcome of one scrape run, used for reporting."""

    strategy: str
    pages_fetched: int
    record_count: int
    duplicates_dropped: int = 0
    output_path: Path
    duration_seconds: float


RecordList = TypeAdapter(list[Record])
