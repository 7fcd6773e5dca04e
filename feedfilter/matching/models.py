"""Data models for the match evaluator."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class MatchDecision(str, Enum):
    """Final decision for an evaluated item."""

    KEPT = "kept"
    EXCLUDED = "excluded"
    NO_INCLUDE_MATCH = "no_include_match"


@dataclass(frozen=True)
class MatchResult:
    """Result of evaluating one item against a CompiledFilter.

    Attributes:
        decision: Why the item was kept or dropped
        matched_exclude_terms: Exclude terms found in the item text
        override_group_index: Index of the override group that reinstated the
            item, None if no override applied
        matched_include_terms: Include terms found in the item text (only
            computed when the item was not excluded)
    """

    decision: MatchDecision
    matched_exclude_terms: Tuple[str, ...] = ()
    override_group_index: Optional[int] = None
    matched_include_terms: Tuple[str, ...] = ()

    @property
    def is_match(self) -> bool:
        """True if the item should be kept."""
        return self.decision is MatchDecision.KEPT

    @property
    def was_overridden(self) -> bool:
        """True if an exclusion was cancelled by an override group."""
        return self.override_group_index is not None

    @property
    def reason(self) -> str:
        """Short human-readable explanation of the decision."""
        if self.decision is MatchDecision.EXCLUDED:
            return f"matched_exclude_terms: {list(self.matched_exclude_terms)}"
        if self.decision is MatchDecision.NO_INCLUDE_MATCH:
            return "no include term found"
        if self.was_overridden:
            return f"exclusion overridden by group {self.override_group_index}"
        if self.matched_include_terms:
            return f"matched_include_terms: {list(self.matched_include_terms)}"
        return "no include terms configured"
