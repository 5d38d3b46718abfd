"""
Item rendering for the terminal.

Two output formats:
- DEFAULT: a bordered detail block per item, description word-wrapped to the
  border width
- SEARCH: one line per item, suited to piping into fzf; in relic mode the
  relic short names are deduplicated

Terminal width is passed in rather than read here, so rendering is a pure
function of the items and the width.
"""

from __future__ import annotations

import logging
import os
import unicodedata
from enum import Enum
from typing import Iterable, Optional, TextIO

from wf_items.data_models import Item

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_WIDTH = 80
BORDER_MARGIN = 2
CONTINUATION_INDENT = 4
NOT_PRESENT = "NOT PRESENT"
DESCRIPTION_LABEL = "Description: "


class OutputFormat(str, Enum):
    """How filtered items are written out."""

    DEFAULT = "default"
    SEARCH = "search"


def detect_terminal_width(stream: Optional[TextIO] = None) -> int:
    """
    Columns of the terminal attached to a stream.

    Falls back to DEFAULT_TERMINAL_WIDTH when the stream is not a terminal
    (pipes, files, StringIO) or reports zero columns.
    """
    try:
        columns = os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return DEFAULT_TERMINAL_WIDTH
    return columns or DEFAULT_TERMINAL_WIDTH


def border_width(terminal_width: int) -> int:
    return max(terminal_width - BORDER_MARGIN, 1)


def _or_sentinel(value: Optional[str]) -> str:
    return NOT_PRESENT if value is None else value


def display_width(text: str) -> int:
    """Terminal columns taken by text: wide East Asian characters count 2, combining marks 0."""
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def _split_at_columns(word: str, room: int) -> tuple[str, str]:
    """Split off the longest head of `word` that fits in `room` columns (at least one character)."""
    used = 0
    for i, ch in enumerate(word):
        used += display_width(ch)
        if used > room:
            cut = max(i, 1)
            return word[:cut], word[cut:]
    return word, ""


def wrap_text(
    text: str,
    label: str,
    width: int,
    indent: int = CONTINUATION_INDENT,
) -> list[str]:
    """
    Greedily pack words into lines no wider than `width` display columns.

    The first line starts with `label`; continuation lines start with
    `indent` spaces. A word too long for the room left on an empty line is
    split across lines.

    Args:
        text: Text to wrap; any run of whitespace separates words
        label: Prefix of the first line
        width: Maximum line width in terminal columns
        indent: Number of spaces starting each continuation line

    Returns:
        The wrapped lines, at least one
    """
    pad = " " * indent
    lines: list[str] = []
    prefix = label
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if display_width(prefix + candidate) <= width:
            current = candidate
            continue

        if current:
            lines.append((prefix + current).rstrip())
            prefix, current = pad, ""

        room = max(width - display_width(prefix), 1)
        while display_width(word) > room:
            head, word = _split_at_columns(word, room)
            lines.append(prefix + head)
            prefix = pad
            room = max(width - display_width(prefix), 1)
        current = word

    lines.append((prefix + current).rstrip())
    return lines


def render_item_detail(item: Item, width: int) -> list[str]:
    """Render one item as a bordered block of `width` columns."""
    border = "-" * width
    lines = [
        border,
        f"Name: {item.name}",
        f"UniqueName: {item.unique_name}",
        f"Type: {_or_sentinel(item.type)}",
        f"Tradable: {'true' if item.tradable else 'false'}",
        f"Category: {_or_sentinel(item.category)}",
        f"Product Category: {_or_sentinel(item.product_category)}",
        f"Introduced Date: {_or_sentinel(item.introduced_date)}",
        f"Estimated Vault Date: {_or_sentinel(item.estimated_vault_date)}",
    ]
    lines.extend(wrap_text(_or_sentinel(item.description), DESCRIPTION_LABEL, width))

    if item.rewards:
        lines.append("Rewards:")
        lines.extend(f"  - {reward.item.name}" for reward in item.rewards)

    lines.append(border)
    return lines


def render_search_lines(items: Iterable[Item], relic_mode: bool) -> list[str]:
    """
    Render the compact search listing.

    In relic mode only the first occurrence of each relic short name is kept,
    so "Meso A1 Relic (Intact)" and "Meso A1 Relic (Radiant)" give one
    "Meso A1" line. Otherwise every item is listed as "name (uniqueName)".
    """
    if not relic_mode:
        return [f"{item.name} ({item.unique_name})" for item in items]

    seen: set[str] = set()
    lines: list[str] = []
    for item in items:
        short_name = item.relic_short_name
        if short_name in seen:
            continue
        seen.add(short_name)
        lines.append(short_name)
    return lines


def log_items(
    items: list[Item],
    output_format: OutputFormat,
    relic_mode: bool,
    terminal_width: int,
    out: TextIO,
) -> int:
    """
    Write items to `out` in the requested format.

    Returns:
        Number of lines written
    """
    if output_format == OutputFormat.SEARCH:
        lines = render_search_lines(items, relic_mode)
    else:
        width = border_width(terminal_width)
        lines = [line for item in items for line in render_item_detail(item, width)]

    for line in lines:
        print(line, file=out)

    logger.debug("Wrote %d lines for %d items (%s)", len(lines), len(items), output_format.value)
    return len(lines)
