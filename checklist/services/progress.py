"""
Progress aggregation over checklist items.

Nothing here is stored; figures are recomputed from the items on every render.
"""

from typing import Iterable

from checklist.schemas.entity import Entity, Item
from checklist.schemas.view import OverallProgress, Progress


def percentage(completed: int, total: int) -> int:
    """
    Integer percentage, rounding halves up (1/8 -> 13, 1/3 -> 33, 2/3 -> 67).

    An empty list counts as 0%.
    """
    if total <= 0:
        return 0
    return (200 * completed + total) // (2 * total)


def _count(items: Iterable[Item]) -> tuple[int, int]:
    items = list(items)
    return sum(1 for item in items if item.checked), len(items)


def category_progress(items: Iterable[Item]) -> Progress:
    completed, total = _count(items)
    return Progress(completed=completed, total=total, percentage=percentage(completed, total))


def overall_progress(entity: Entity) -> OverallProgress:
    """Progress over the union of all three categories."""
    completed, total = _count(entity.categories.all_items())
    return OverallProgress(
        completed=completed,
        total=total,
        percentage=percentage(completed, total),
    )
