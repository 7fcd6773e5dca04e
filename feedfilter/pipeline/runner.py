"""Pipeline orchestration for filtering candidate items."""

import contextvars
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Iterable, List, Tuple
from uuid import uuid4

from feedfilter.domain.models import FeedItem
from feedfilter.logging import get_logger
from feedfilter.logging.context import log_context
from feedfilter.matching.engine import KeywordFilter
from feedfilter.matching.models import MatchResult

from .models import PipelineRunResult

logger = get_logger(__name__, component="pipeline")


class FilterPipeline:
    """
    Runs one keyword filter over a batch of candidate items.

    The filter is compiled before the pipeline is built and shared by every
    evaluation; with ``max_workers > 1`` items are evaluated on a thread pool.
    Output order always follows input order.
    """

    def __init__(self, keyword_filter: KeywordFilter, max_workers: int = 1):
        """
        Initialize the filter pipeline.

        Args:
            keyword_filter: Compiled filter to evaluate items against
            max_workers: Number of worker threads (1 evaluates in the calling thread)

        Raises:
            ValueError: If max_workers is less than 1
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")

        self.keyword_filter = keyword_filter
        self.max_workers = max_workers

    def run(self, items: Iterable[FeedItem]) -> PipelineRunResult:
        """
        Evaluate every item and collect the results.

        Args:
            items: Candidate items

        Returns:
            PipelineRunResult with per-item results and aggregate counts
        """
        run_id = uuid4().hex
        run_started_at = datetime.now(timezone.utc)
        items = list(items)

        with log_context(run_id=run_id):
            logger.info(
                "Pipeline run started",
                extra={
                    "event": "pipeline.run.started",
                    "item_count": len(items),
                    "max_workers": self.max_workers,
                },
            )

            evaluations = self._evaluate_all(items)

            result = PipelineRunResult(
                run_id=run_id,
                run_started_at=run_started_at,
                run_finished_at=datetime.now(timezone.utc),
                evaluations=evaluations,
            )

            logger.info(
                f"Pipeline run completed: {result.kept_count} of {result.total_items} items kept",
                extra={
                    "event": "pipeline.run.completed",
                    "duration_seconds": round(result.total_duration_seconds, 3),
                    "total_items": result.total_items,
                    "kept_count": result.kept_count,
                    "excluded_count": result.excluded_count,
                    "overridden_count": result.overridden_count,
                    "unmatched_count": result.unmatched_count,
                },
            )

        return result

    def _evaluate_all(self, items: List[FeedItem]) -> List[Tuple[FeedItem, MatchResult]]:
        if self.max_workers == 1 or len(items) < 2:
            return [(item, self._evaluate(item)) for item in items]

        # Each task gets a copy of the current context so worker logs carry the run id
        context = contextvars.copy_context()
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results = list(
                executor.map(lambda item: context.copy().run(self._evaluate, item), items)
            )
        return list(zip(items, results))

    def _evaluate(self, item: FeedItem) -> MatchResult:
        return self.keyword_filter.evaluate(item.to_match_input())
