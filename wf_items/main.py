"""
wf-items - Main Entry Point

Reads the Warframe item export from stdin, filters it and prints it.

    cat data.json | wf-items --log-items --fmt:search --relic | fzf
    cat data.json | wf-items --log-items --search "Meso A1"

The pipeline runs in four steps: load, relic filter, search filter, render.
Nothing is written to stdout unless --log-items is given.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO, Union

from wf_items.data_models import Item, MalformedInputError, RelicType
from wf_items.filters import filter_items_by_relic_type, filter_items_by_search_term
from wf_items.item_loader import load_items_from_stream
from wf_items.renderer import OutputFormat, detect_terminal_width, log_items


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class ToolConfig:
    """Configuration for a single run."""

    # Filters
    relic_requested: bool = False
    relic_type: Optional[Union[RelicType, str]] = None
    search_term: Optional[str] = None

    # Output
    output_format: OutputFormat = OutputFormat.DEFAULT
    log_items: bool = False
    terminal_width: Optional[int] = None  # None means detect from stdout

    # Runtime options
    verbose: bool = False

    def __post_init__(self):
        """Ensure the relic tag is a RelicType (or None)."""
        if isinstance(self.relic_type, str) and not isinstance(self.relic_type, RelicType):
            self.relic_type = RelicType.from_str(self.relic_type)


# =============================================================================
# PIPELINE
# =============================================================================

def filter_items(items: list[Item], config: ToolConfig) -> list[Item]:
    """Apply the relic and search filters selected by the config."""
    if config.relic_requested:
        items = filter_items_by_relic_type(items, config.relic_type)
    if config.search_term is not None:
        items = filter_items_by_search_term(items, config.search_term)
    return items


def run(config: ToolConfig, stdin: TextIO, stdout: TextIO) -> int:
    """
    Run the load/filter/render pipeline.

    Returns:
        Process exit status: 0 on success, 1 on malformed input
    """
    try:
        items = load_items_from_stream(stdin)
    except MalformedInputError as e:
        logger.error("Malformed input: %s", e)
        return 1

    items = filter_items(items, config)

    if not config.log_items:
        logger.debug("--log-items not given; %d items not printed", len(items))
        return 0

    terminal_width = config.terminal_width or detect_terminal_width(stdout)
    log_items(
        items,
        config.output_format,
        relic_mode=config.relic_requested,
        terminal_width=terminal_width,
        out=stdout,
    )
    return 0


# =============================================================================
# ARGUMENTS
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="wf-items",
        description="Filter and print Warframe items read as JSON from stdin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
  cat data.json | wf-items --log-items --relic meso
  cat data.json | wf-items --log-items --fmt:search --relic | fzf
  cat data.json | wf-items --log-items --search "Meso A1"
        """,
    )

    filter_group = parser.add_argument_group("Filter Options")
    filter_group.add_argument(
        "--relic",
        nargs="?",
        const="",
        default=None,
        metavar="TAG",
        help="Only show relics, optionally of one era (lith, meso, neo, axi)",
    )
    filter_group.add_argument(
        "--search",
        default=None,
        metavar="TERM",
        help="Only show items whose name or uniqueName starts with TERM",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--fmt:search",
        dest="fmt_search",
        action="store_true",
        help="Compact one-line-per-item output",
    )
    output_group.add_argument(
        "--log-items",
        action="store_true",
        help="Print the filtered items (nothing is printed without it)",
    )
    output_group.add_argument(
        "--width",
        type=int,
        default=None,
        help="Terminal width in columns (default: detect, or 80)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


VALUE_FLAGS = ("--relic", "--search")


def bind_value_flags(
    argv: Sequence[str],
    option_strings: set[str],
) -> tuple[list[str], dict[str, Optional[str]]]:
    """
    Take the values of --relic and --search from the argument after each.

    The next argument is the value even when it starts with "-", so terms
    like "-Axi" are accepted. If that argument is itself one of the tool's
    options it is also left in place to act as that option, and --relic
    treats it as no tag. A value flag with nothing after it gets no value
    (None for --search, "" for --relic). The first occurrence of a flag wins.

    Returns:
        The remaining arguments and a flag -> value mapping
    """
    remaining: list[str] = []
    bound: dict[str, Optional[str]] = {}
    i = 0
    while i < len(argv):
        flag = argv[i]
        if flag not in VALUE_FLAGS:
            remaining.append(flag)
            i += 1
            continue

        following = argv[i + 1] if i + 1 < len(argv) else None
        is_option = following is not None and following in option_strings
        if flag == "--relic":
            value = "" if following is None or is_option else following
        else:
            value = following
        bound.setdefault(flag, value)
        i += 1 if following is None or is_option else 2
    return remaining, bound


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, ignoring ones the tool does not know."""
    parser = create_parser()
    option_strings = {
        option for action in parser._actions for option in action.option_strings
    }
    remaining, bound = bind_value_flags(
        sys.argv[1:] if argv is None else argv, option_strings
    )

    args, unknown = parser.parse_known_args(remaining)
    args.relic = bound.get("--relic")
    args.search = bound.get("--search")
    args.unknown = unknown
    return args


def create_config_from_args(args: argparse.Namespace) -> ToolConfig:
    """Create ToolConfig from parsed arguments."""
    relic_requested = args.relic is not None
    relic_type = RelicType.from_str(args.relic) if relic_requested else None
    if relic_requested and args.relic and relic_type is None:
        logger.warning(
            "Unknown relic type %r (expected lith, meso, neo or axi); matching any relic",
            args.relic,
        )

    return ToolConfig(
        relic_requested=relic_requested,
        relic_type=relic_type,
        search_term=args.search,
        output_format=OutputFormat.SEARCH if args.fmt_search else OutputFormat.DEFAULT,
        log_items=args.log_items,
        terminal_width=args.width,
        verbose=args.verbose,
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)
    if args.unknown:
        logger.debug("Ignoring unknown arguments: %s", args.unknown)

    config = create_config_from_args(args)
    return run(
        config,
        sys.stdin if stdin is None else stdin,
        sys.stdout if stdout is None else stdout,
    )


def cli() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
