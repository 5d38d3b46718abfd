"""Filter and print Warframe item exports from the command line."""

from wf_items.data_models import (
    Component,
    Introduced,
    Item,
    MalformedInputError,
    Patchlog,
    RelicType,
    Reward,
    RewardItem,
    WarframeMarket,
)
from wf_items.filters import (
    filter_items_by_relic_type,
    filter_items_by_search_term,
    is_relic_of_type,
)
from wf_items.item_loader import load_items, load_items_from_stream, read_input_line
from wf_items.renderer import (
    OutputFormat,
    detect_terminal_width,
    display_width,
    log_items,
    render_item_detail,
    render_search_lines,
    wrap_text,
)

__all__ = [
    # Records
    "Item",
    "Component",
    "Introduced",
    "Patchlog",
    "Reward",
    "RewardItem",
    "WarframeMarket",
    "RelicType",
    "MalformedInputError",
    # Loader
    "load_items",
    "load_items_from_stream",
    "read_input_line",
    # Filters
    "filter_items_by_relic_type",
    "filter_items_by_search_term",
    "is_relic_of_type",
    # Rendering
    "OutputFormat",
    "detect_terminal_width",
    "display_width",
    "log_items",
    "render_item_detail",
    "render_search_lines",
    "wrap_text",
]
