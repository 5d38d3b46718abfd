"""
Item loader for the JSON item export.

The export is expected as a single line of text holding a JSON array of item
objects (the way `cat data.json` feeds it in). Parsing is all-or-nothing: the
first bad element aborts the load with MalformedInputError.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TextIO

from wf_items.data_models import Item, MalformedInputError

logger = logging.getLogger(__name__)


def read_input_line(stream: TextIO) -> str:
    """
    Read the single input line from a text stream.

    Raises:
        MalformedInputError: If the bytes on the stream do not decode as text
    """
    try:
        return stream.readline()
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Input is not valid UTF-8: {e}") from e


def load_items(text: str) -> list[Item]:
    """
    Parse a JSON array of item objects.

    Args:
        text: JSON document text

    Returns:
        Items in source order

    Raises:
        MalformedInputError: If the text is not valid JSON or an element does
            not match the item shape
    """
    try:
        raw: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON: {e}") from e

    if not isinstance(raw, list):
        raise MalformedInputError(
            f"Expected a JSON array of items, got {type(raw).__name__}"
        )

    items: list[Item] = []
    for index, record in enumerate(raw):
        try:
            items.append(Item.from_dict(record))
        except MalformedInputError as e:
            raise MalformedInputError(e.message, index=index) from e

    logger.debug("Parsed %d item records", len(items))
    return items


def load_items_from_stream(stream: TextIO) -> list[Item]:
    """Read one line from the stream and parse it into items."""
    items = load_items(read_input_line(stream))
    logger.info("Loaded %d items", len(items))
    return items
