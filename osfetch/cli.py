# osfetch/cli.py
#!/usr/bin/env python3
import sys
import argparse

from rich.console import Console

from osfetch.commands import FIELDS, show, get, as_json
from osfetch.fetch import OsFetch, OS_RELEASE, LSB_RELEASE
from osfetch.utils.errors import set_verbose

console = Console()


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        console.print(f"[bold red]Error:[/] {message}\n")
        self.print_help()
        sys.exit(2)


def parse_args(argv=None):
    parser = RichParser(
        prog="osfetch",
        description="osfetch: which OS, kernel, architecture and release this is",
        allow_abbrev=False,
    )

    parser.add_argument(
        "action",
        nargs="?",
        default="show",
        choices=["show", "get", "json"],
        help="Action to perform (default: show)",
    )
    parser.add_argument(
        "field", nargs="?", choices=list(FIELDS), help="Field to print for 'get'"
    )

    parser.add_argument(
        "--os-release", default=OS_RELEASE, help="Path of the os-release file"
    )
    parser.add_argument(
        "--lsb-release", default=LSB_RELEASE, help="Path of the lsb-release file"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    if args.action == "get" and args.field is None:
        parser.error("get requires a field")
    return args


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        set_verbose()

    fetch = OsFetch(os_release_path=args.os_release, lsb_release_path=args.lsb_release)

    act = args.action
    if act == "show":
        show(fetch)
    elif act == "get":
        get(fetch, args.field)
    elif act == "json":
        as_json(fetch)
    else:
        console.print(f"[bold red]Unknown action:[/] {act}")
        sys.exit(1)


if __name__ == "__main__":
    main()
