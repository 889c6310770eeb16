"""Mirror a news aggregator's front page into a flat, queryable JSON dataset."""

__version__ = "0.1.0"
