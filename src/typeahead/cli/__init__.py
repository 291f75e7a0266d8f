"""CLI argument parser and dispatch for typeahead."""

import argparse

from typeahead.cli.run import run
from typeahead.cli.web import web


def _add_settings(parser: argparse.ArgumentParser) -> None:
    """Options that override the config file."""
    parser.add_argument("url", nargs="?", help="Suggestion endpoint URL")
    parser.add_argument("-c", "--config", help="YAML settings file")
    parser.add_argument("--min-length", type=int, help="Minimum query length (default: 1)")
    parser.add_argument("--delay", type=int, help="Debounce delay in ms (default: 300)")
    parser.add_argument("--query-param", help="Query parameter name (default: q)")
    parser.add_argument(
        "--require-match",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only accept values picked from the list",
    )
    parser.add_argument("--reveal-on-click", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--reveal-on-focus", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--reveal-on-keydown", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--submit-on-enter", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--log", help="Write debug log to this file")


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="typeahead",
        description="Try a remote autocomplete endpoint in the terminal",
    )
    _add_settings(parser)
    parser.set_defaults(func=run)
    return parser


def build_web_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="typeahead web", description="Serve the demo in a browser")
    _add_settings(parser)
    parser.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    parser.add_argument("--port", type=int, default=8618, help="Port (default: 8618)")
    parser.set_defaults(func=web)
    return parser
