# ABOUTME: Scrape pipeline that walks listing pages, merges records in page order, and writes the dataset
# ABOUTME: Supports sequential load-more following and a bounded-parallel fixed batch of pages

import asyncio
import time

from newsmirror.config import UPSTREAM_CONCURRENCY_CEILING, get_config
from newsmirror.extraction.base import PageSource
from newsmirror.extraction.extractor import RecordExtractor
from newsmirror.extraction.fetcher import PageFetcher
from newsmirror.models import PageResult, Record, RunSummary
from newsmirror.persistence.sink import JsonDatasetSink
from newsmirror.utils.logging import get_logger, log_pipeline_step

SEQUENTIAL = "sequential"
PARALLEL = "parallel"


class ScrapePipeline:
    """Coordinates fetching, extraction, merging and persistence for one full refresh.

    The pipeline manages:
    1. Page retrieval, following load-more controls or fetching pages 1..K concurrently
    2. Per-page extraction into PageResult batches
    3. Merging batches in ascending page order, dropping repeated story ids
    4. Handing the merged collection to the dataset sink

    Any FetchError aborts the run before the sink is touched.
    """

    def __init__(
        self,
        fetcher: PageSource | None = None,
        extractor: RecordExtractor | None = None,
        sink: JsonDatasetSink | None = None,
        strategy: str | None = None,
        parallel_pages: int | None = None,
        max_concurrency: int | None = None,
        max_pages: int | None = None,
    ):
        config = get_config()
        self.strategy = strategy or config.strategy
        self.parallel_pages = parallel_pages if parallel_pages is not None else config.parallel_pages
        self.max_concurrency = max_concurrency if max_concurrency is not None else config.max_concurrency
        self.max_pages = max_pages if max_pages is not None else config.max_pages

        if self.strategy not in (SEQUENTIAL, PARALLEL):
            raise ValueError(f"Unknown strategy {self.strategy!r}, expected {SEQUENTIAL!r} or {PARALLEL!r}")
        if not 1 <= self.max_concurrency <= UPSTREAM_CONCURRENCY_CEILING:
            raise ValueError(
                f"max_concurrency must be between 1 and {UPSTREAM_CONCURRENCY_CEILING}, got {self.max_concurrency}"
            )

        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or PageFetcher()
        self.extractor = extractor or RecordExtractor()
        self.sink = sink or JsonDatasetSink(config.dataset_path)
        self.logger = get_logger(__name__)

    async def run(self) -> RunSummary:
        """Scrape all pages, merge them, and persist the dataset."""
        start_time = time.time()
        self.logger.info("Starting scrape", strategy=self.strategy)

        results = await self.collect_pages()
        records, duplicates = self.merge(results)
        output_path = await self.sink.persist(records)

        summary = RunSummary(
            strategy=self.strategy,
            pages_fetched=len(results),
            record_count=len(records),
            duplicates_dropped=duplicates,
            output_path=output_path,
            duration_seconds=round(time.time() - start_time, 3),
        )
        self.logger.info("Scrape complete", **summary.model_dump(mode="json"))
        return summary

    @log_pipeline_step("collect_pages")
    async def collect_pages(self) -> list[PageResult]:
        """Fetch and extract pages with the configured strategy, in ascending page order."""
        if self.strategy == PARALLEL:
            return await self._collect_parallel()
        return await self._collect_sequential()

    async def _collect_sequential(self) -> list[PageResult]:
        results: list[PageResult] = []
        page = 1
        while True:
            result = await self._fetch_page(page)
            results.append(result)
            if not result.has_next_page:
                break
            if page >= self.max_pages:
                self.logger.warning("Stopping at page limit with more pages available", max_pages=self.max_pages)
                break
            page += 1
        return results

    async def _collect_parallel(self) -> list[PageResult]:
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def bounded_fetch(page: int) -> PageResult:
            async with semaphore:
                return await self._fetch_page(page)

        pages = range(1, self.parallel_pages + 1)
        outcomes = await asyncio.gather(*(bounded_fetch(page) for page in pages), return_exceptions=True)

        # Siblings have all finished; fail on the lowest failing page
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome

        results: list[PageResult] = []
        for result in sorted(outcomes, key=lambda r: r.page):
            results.append(result)
            if not result.has_next_page:
                break
        else:
            self.logger.warning("Parallel batch ended with more pages available", parallel_pages=self.parallel_pages)

        return results

    async def _fetch_page(self, page: int) -> PageResult:
        markup = await self.fetcher.fetch(page)
        return self.extractor.extract(markup, page=page)

    def merge(self, results: list[PageResult]) -> tuple[list[Record], int]:
        """Concatenate page batches in page order, keeping the first occurrence of each story id."""
        merged: list[Record] = []
        seen: set[int] = set()
        duplicates = 0

        for result in sorted(results, key=lambda r: r.page):
            for record in result.records:
                if record.id in seen:
                    duplicates += 1
                    self.logger.warning("Dropping repeated story", story_id=record.id, page=result.page)
                    continue
                seen.add(record.id)
                merged.append(record)

        return merged, duplicates

    async def close(self) -> None:
        """Release the fetcher if this pipeline created it."""
        if self._owns_fetcher and isinstance(self.fetcher, PageFetcher):
            await self.fetcher.close()
