"""Handler for running the demo app."""

import logging
import sys

from typeahead.config import AutocompleteConfig, load_config
from typeahead.errors import ConfigError

logger = logging.getLogger(__name__)


def resolve_config(args) -> AutocompleteConfig:
    """Config file first, then command line overrides."""
    config = load_config(args.config) if args.config else AutocompleteConfig()
    return config.merged(
        url=args.url,
        min_length=args.min_length,
        delay=args.delay,
        query_param=args.query_param,
        require_match=args.require_match,
        reveal_on_click=args.reveal_on_click,
        reveal_on_focus=args.reveal_on_focus,
        reveal_on_keydown=args.reveal_on_keydown,
        submit_on_enter=args.submit_on_enter,
    )


def setup_logging(path: str | None) -> None:
    # The TUI owns the terminal, so only log to a file.
    if path:
        logging.basicConfig(
            filename=path,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            level=logging.DEBUG,
        )


def run(args) -> int:
    setup_logging(args.log)
    try:
        config = resolve_config(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    from typeahead.ui import TypeaheadApp

    logger.info("starting with endpoint %s", config.url)
    TypeaheadApp(config).run()
    return 0
