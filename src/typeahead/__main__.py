"""Entry point for typeahead CLI."""

import sys


def main():
    if len(sys.argv) > 1 and sys.argv[1] == "web":
        from typeahead.cli import build_web_parser

        args = build_web_parser().parse_args(sys.argv[2:])
    else:
        from typeahead.cli import build_parser

        args = build_parser().parse_args()

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
