# propreport/cli/main.py
import argparse
import sys

from propreport import __version__
from propreport.cli import properties_cmd
from propreport.infra.diagnostics import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "propreport",
        description="propreport - sorted, fault-tolerant property reports"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    # properties - the report itself
    properties_cmd.register_command(sub)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(verbose=getattr(args, "verbose", False))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
