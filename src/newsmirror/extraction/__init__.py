# ABOUTME: Listing page retrieval and story record extraction
# ABOUTME: Pipeline Stage 1: raw listing HTML → normalized Record batches

"""
Extraction Layer: Get story records from listing pages

This layer handles:
- Fetching one listing page by index over HTTP
- Locating story rows in the markup and parsing their optional fields
- Turning relative "3 hours ago" phrases into absolute timestamps
- Detecting whether another page follows

Data Flow: Listing site → raw HTML → PageResult → core/ orchestration
"""

from .base import PageSource, TimeParser
from .extractor import RecordExtractor
from .fetcher import PageFetcher
from .relative_time import RelativeTimeParser

__all__ = [
    "PageFetcher",
    "PageSource",
    "RecordExtractor",
    "RelativeTimeParser",
    "TimeParser",
]
