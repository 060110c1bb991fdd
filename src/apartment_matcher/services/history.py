"""Recently-viewed and saved listing bookkeeping.

Both helpers take the current list and return a new one; storing the
result is up to the caller.
"""

from typing import Any, List, Sequence

MAX_RECENT_ITEMS = 20


def add_to_recently_viewed(
    listing_id: Any, current: Sequence[Any], max_items: int = MAX_RECENT_ITEMS
) -> List[Any]:
    """Move listing_id to the front of the history, dropping duplicates and the oldest overflow."""
    updated = [listing_id] + [i for i in current if i != listing_id]
    return updated[:max_items]


def toggle_saved(saved_ids: Sequence[Any], listing_id: Any) -> List[Any]:
    """Remove listing_id if saved, otherwise append it."""
    if listing_id in saved_ids:
        return [i for i in saved_ids if i != listing_id]
    return list(saved_ids) + [listing_id]
