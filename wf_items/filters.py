"""
Item filters.

Both filters return a new list and keep the input order. They compose
conjunctively: relic filtering runs first, then the search term.
"""

import logging
from typing import Iterable, Optional

from wf_items.data_models import Item, RelicType

logger = logging.getLogger(__name__)

RELIC_CATEGORY = "Relic"


def is_relic_of_type(text: str, relic_type: RelicType) -> bool:
    """Check whether text (usually a uniqueName) starts with the relic era."""
    return text.lower().startswith(relic_type.value)


def filter_items_by_relic_type(
    items: Iterable[Item],
    relic_type: Optional[RelicType] = None,
) -> list[Item]:
    """
    Keep relics, optionally of a single era.

    Args:
        items: Items to filter
        relic_type: Era to match against uniqueName; None matches any relic

    Returns:
        Items whose category is "Relic" (and whose uniqueName matches the era)
    """
    filtered = [
        item for item in items
        if item.category == RELIC_CATEGORY
        and (relic_type is None or is_relic_of_type(item.unique_name, relic_type))
    ]
    logger.debug(
        "Relic filter (%s) kept %d items",
        relic_type.value if relic_type else "any",
        len(filtered),
    )
    return filtered


def filter_items_by_search_term(
    items: Iterable[Item],
    search_term: Optional[str] = None,
) -> list[Item]:
    """Keep items whose name or uniqueName starts with the term, ignoring case."""
    if search_term is None:
        return list(items)

    term = search_term.lower()
    filtered = [
        item for item in items
        if item.name.lower().startswith(term)
        or item.unique_name.lower().startswith(term)
    ]
    logger.debug("Search filter %r kept %d items", search_term, len(filtered))
    return filtered
