"""Data models for filter pipeline runs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Tuple

from feedfilter.domain.models import FeedItem
from feedfilter.matching.models import MatchDecision, MatchResult


@dataclass
class PipelineRunResult:
    """
    Aggregate results from one filter pipeline run.

    Attributes:
        run_id: Identifier attached to every log record of the run
        run_started_at: UTC timestamp when the run began
        run_finished_at: UTC timestamp when the run completed
        evaluations: Every item with its MatchResult, in input order
        total_duration_seconds: Time taken by the run
        total_items: Number of items evaluated
        kept_count: Items kept
        excluded_count: Items dropped by an exclude term
        overridden_count: Items kept because an override group cancelled their exclusion
        unmatched_count: Items dropped because no include term was present
    """

    run_id: str
    run_started_at: datetime
    run_finished_at: datetime
    evaluations: List[Tuple[FeedItem, MatchResult]] = field(default_factory=list)
    total_duration_seconds: float = 0.0
    total_items: int = 0
    kept_count: int = 0
    excluded_count: int = 0
    overridden_count: int = 0
    unmatched_count: int = 0

    def __post_init__(self):
        """Compute counts and duration from the evaluations."""
        results = [result for _, result in self.evaluations]
        self.total_items = len(results)
        self.kept_count = sum(1 for r in results if r.is_match)
        self.excluded_count = sum(1 for r in results if r.decision is MatchDecision.EXCLUDED)
        self.overridden_count = sum(1 for r in results if r.is_match and r.was_overridden)
        self.unmatched_count = sum(
            1 for r in results if r.decision is MatchDecision.NO_INCLUDE_MATCH
        )

        if self.total_duration_seconds == 0.0:
            delta = self.run_finished_at - self.run_started_at
            self.total_duration_seconds = delta.total_seconds()

    @property
    def kept_items(self) -> List[FeedItem]:
        """Items that passed the filter, in input order."""
        return [item for item, result in self.evaluations if result.is_match]

    @property
    def dropped_count(self) -> int:
        return self.total_items - self.kept_count
