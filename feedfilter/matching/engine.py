"""Match evaluator for deciding whether an item passes a keyword filter.

Evaluation order:
1. Fold title and summary into one lower-cased search text
2. Any exclude term present makes the item provisionally excluded
3. The first override group with all of its terms present cancels the exclusion
4. An item still excluded is dropped
5. Otherwise the item is kept if there are no include terms or any is present
"""

import logging
from typing import Optional

from feedfilter.domain.models import MatchInput
from feedfilter.query.compiler import compile_query
from feedfilter.query.models import CompiledFilter
from feedfilter.utils.terms import build_search_text, contains_term

from .models import MatchDecision, MatchResult

logger = logging.getLogger(__name__)


def evaluate(compiled: CompiledFilter, item: MatchInput) -> MatchResult:
    """Evaluate an item against a compiled filter.

    Pure: no I/O and no mutation of the filter, so one filter can be shared
    across threads.

    Args:
        compiled: Filter built by compile_query
        item: Title and summary of the candidate item

    Returns:
        MatchResult with the decision and the terms that drove it
    """
    search_text = build_search_text(item.title, item.summary)

    matched_exclude = tuple(
        term for term in compiled.exclude if contains_term(search_text, term)
    )

    override_index = None
    if matched_exclude:
        for index, group in enumerate(compiled.override_groups):
            if all(contains_term(search_text, term) for term in group):
                override_index = index
                break

        if override_index is None:
            return MatchResult(
                decision=MatchDecision.EXCLUDED,
                matched_exclude_terms=matched_exclude,
            )

    matched_include = tuple(
        term for term in compiled.include if contains_term(search_text, term)
    )

    if compiled.include and not matched_include:
        decision = MatchDecision.NO_INCLUDE_MATCH
    else:
        decision = MatchDecision.KEPT

    return MatchResult(
        decision=decision,
        matched_exclude_terms=matched_exclude,
        override_group_index=override_index,
        matched_include_terms=matched_include,
    )


def matches(compiled: CompiledFilter, item: MatchInput) -> bool:
    """Return True if the item should be kept."""
    return evaluate(compiled, item).is_match


class KeywordFilter:
    """A compiled keyword filter bundled with decision logging.

    Holds one immutable CompiledFilter for the length of a collection run.
    Safe to call from several threads at once.
    """

    def __init__(
        self, compiled: CompiledFilter, logger_instance: Optional[logging.Logger] = None
    ):
        """Initialize KeywordFilter.

        Args:
            compiled: Filter to evaluate items against
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.compiled = compiled
        self.logger = logger_instance or logger

    @classmethod
    def from_query(
        cls, raw: Optional[str], logger_instance: Optional[logging.Logger] = None
    ) -> "KeywordFilter":
        """Compile a raw query and wrap the result."""
        compiled = compile_query(raw)
        (logger_instance or logger).info(
            "Keyword filter compiled",
            extra={"event": "filter.compiled", **compiled.describe()},
        )
        return cls(compiled, logger_instance)

    def evaluate(self, item: MatchInput) -> MatchResult:
        """Evaluate an item and log the decision at DEBUG level."""
        result = evaluate(self.compiled, item)

        self.logger.debug(
            f"Item {result.decision.value}: {item.title}",
            extra={
                "event": "filter.item.evaluated",
                "decision": result.decision.value,
                "reason": result.reason,
                "overridden": result.was_overridden,
            },
        )
        return result

    def matches(self, item: MatchInput) -> bool:
        """Return True if the item should be kept."""
        return self.evaluate(item).is_match
