"""Data models for compiled keyword filters."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CompiledFilter:
    """Immutable, parsed representation of a keyword filter query.

    A filter is built once per collection run and shared read-only by every
    evaluation in that run. An empty ``include`` means every item that is not
    excluded is kept.

    Attributes:
        include: Terms of which at least one must appear for an item to be kept
        exclude: Terms whose presence drops an item unless an override applies
        override_groups: Term groups that reinstate an excluded item when every
            term of the group is present
    """

    include: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()
    override_groups: Tuple[Tuple[str, ...], ...] = ()

    @property
    def is_empty(self) -> bool:
        """True if the filter has no terms at all and accepts everything."""
        return not (self.include or self.exclude or self.override_groups)

    def describe(self) -> dict:
        """Return term counts, for structured logging."""
        return {
            "include_count": len(self.include),
            "exclude_count": len(self.exclude),
            "override_group_count": len(self.override_groups),
        }
