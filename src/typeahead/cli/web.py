"""Handler for 'typeahead web'."""

import shlex
import shutil
import sys

from textual_serve.server import Server

_FLAGS = ("require_match", "reveal_on_click", "reveal_on_focus", "reveal_on_keydown", "submit_on_enter")
_VALUES = ("config", "min_length", "delay", "query_param", "log")


def app_command(executable: str, args) -> str:
    """Rebuild the command line that runs the demo app with the same settings."""
    parts = [executable]
    if args.url:
        parts.append(args.url)
    for name in _VALUES:
        value = getattr(args, name)
        if value is not None:
            parts += [f"--{name.replace('_', '-')}", str(value)]
    for name in _FLAGS:
        value = getattr(args, name)
        if value is not None:
            prefix = "--" if value else "--no-"
            parts.append(f"{prefix}{name.replace('_', '-')}")
    return shlex.join(parts)


def web(args) -> int:
    typeahead = shutil.which("typeahead")
    if typeahead is None:
        print("error: typeahead not found on PATH", file=sys.stderr)
        return 1

    server = Server(app_command(typeahead, args), host=args.host, port=args.port, title="typeahead")
    print(f"serving at http://{args.host}:{args.port}")
    server.serve()
    return 0
