# ABOUTME: Read side of the dataset: load, sort by points or comments, and slice for infinite scroll
# ABOUTME: Mirrors the count + slice answers the downstream query service gives its clients

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ValidationError

from newsmirror.errors import DatasetError
from newsmirror.models import Record, RecordList

OrderBy = Literal["points", "comments"]
Order = Literal["asc", "desc"]


class QueryResult(BaseModel):
    """One page of sorted records. ``count`` is the size of this slice."""

    count: int
    records: list[Record]


def load_dataset(path: Path | str) -> list[Record]:
    """Load every record from a dataset file written by JsonDatasetSink."""
    path = Path(path)
    try:
        return RecordList.validate_json(path.read_bytes())
    except FileNotFoundError as e:
        raise DatasetError(f"No dataset at {path}; run a scrape first") from e
    except (OSError, ValidationError) as e:
        raise DatasetError(f"Could not load dataset {path}: {e}") from e


def query_records(
    records: list[Record],
    order_by: OrderBy = "comments",
    order: Order = "desc",
    limit: int = 10,
    offset: int = 0,
) -> QueryResult:
    """Sort ``records`` by ``order_by`` and return the slice ``[offset, offset + limit)``.

    The sort is stable, so records with equal values keep their dataset order.
    """
    if order_by not in ("points", "comments"):
        raise ValueError(f"Cannot order by {order_by!r}")
    if order not in ("asc", "desc"):
        raise ValueError(f"Unknown order {order!r}")
    if limit < 0 or offset < 0:
        raise ValueError("limit and offset must not be negative")

    if order == "desc":
        ranked = sorted(records, key=lambda record: -getattr(record, order_by))
    else:
        ranked = sorted(records, key=lambda record: getattr(record, order_by))

    page = ranked[offset : offset + limit]
    return QueryResult(count=len(page), records=page)
