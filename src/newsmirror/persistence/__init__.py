# ABOUTME: Dataset persistence and the read-side query helper
# ABOUTME: Pipeline Stage 3: merged records → JSON file → sorted slices

"""
Persistence Layer: Write and read the flat dataset

This layer handles:
- Atomic full-refresh writes of the merged record collection
- Loading the dataset back and answering sort + offset/limit queries

Data Flow: core/ merged records → JSON dataset → query clients
"""

from .query import QueryResult, load_dataset, query_records
from .sink import JsonDatasetSink

__all__ = [
    "JsonDatasetSink",
    "QueryResult",
    "load_dataset",
    "query_records",
]
