"""
Helper Functions

Contains utility functions used throughout the application.
"""

import random
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Sequence, TypeVar

T = TypeVar('T')


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """Parse a stored ISO-8601 timestamp; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Coerce a query/body value to int, returning `default` when it isn't one."""
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def weighted_choice(items: Sequence[T],
                    weight_fn: Callable[[T], float],
                    rng: Optional[random.Random] = None) -> T:
    """
    Pick one item with probability proportional to its weight.

    Weights are relative and need not sum to any particular total. A point
    is drawn uniformly from [0, total) and each item's weight is subtracted
    in order; the first item that brings the remainder to zero or below is
    selected. If rounding leaves the walk without a winner the last item is
    returned.

    Args:
        items: Candidates in their configured order
        weight_fn: Returns the weight of an item
        rng: Random source (module-level generator when omitted)

    Returns:
        The selected item

    Raises:
        ValueError: If there are no items or the total weight is not positive
    """
    if not items:
        raise ValueError("Cannot choose from an empty sequence")

    total = sum(weight_fn(item) for item in items)
    if total <= 0:
        raise ValueError("Total weight must be positive")

    remainder = (rng or random).random() * total
    for item in items:
        remainder -= weight_fn(item)
        if remainder <= 0:
            return item

    return items[-1]
