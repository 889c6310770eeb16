# ABOUTME: Core orchestration for scrape runs
# ABOUTME: Exports the pipeline that drives fetch → extract → merge → persist

from .pipeline import PARALLEL, SEQUENTIAL, ScrapePipeline

__all__ = [
    "PARALLEL",
    "SEQUENTIAL",
    "ScrapePipeline",
]
