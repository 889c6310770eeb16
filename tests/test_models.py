# ABOUTME: Model-level tests for the story record schema
# ABOUTME: Ensures defaults, immutability and the non-negative / absolute-time invariants

import pytest
from pydantic import ValidationError

from newsmirror.models import PageResult, Record


def test_record_defaults():
    record = Record(id=1)

    assert record.title == ""
    assert record.link is None
    assert record.points == 0
    assert record.author is None
    assert record.comments == 0
    assert record.time is None


def test_record_is_frozen():
    record = Record(id=1, points=3)

    with pytest.raises(ValidationError):
        record.points = 4


@pytest.mark.parametrize("field", ["points", "comments"])
def test_counts_cannot_be_negative(field):
    with pytest.raises(ValidationError):
        Record(id=1, **{field: -1})


def test_time_must_be_absolute():
    with pytest.raises(ValidationError):
        Record(id=1, time="3 hours ago")


def test_time_accepts_iso_timestamp():
    assert Record(id=1, time="2024-05-01T09:00:00+00:00").time == "2024-05-01T09:00:00+00:00"


def test_page_result():
    result = PageResult(page=2, records=[Record(id=1), Record(id=2)], has_next_page=True)

    assert result.record_count == 2
    assert result.has_next_page is True


def test_page_index_is_one_based():
    with pytest.raises(ValidationError):
        PageResult(page=0)
