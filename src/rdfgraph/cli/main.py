#!/usr/bin/env python3
"""
rdfgraph command line entry point.

Usage:
    rdfgraph convert <file.rdf> [--to turtle|rdfxml|json|html] [--output <file>]
"""

import sys
from typing import List, Optional

from ..constants import ExitCode
from .commands import cmd_convert
from .parsers import create_argument_parser

COMMANDS = {
    'convert': cmd_convert,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return ExitCode.USAGE_ERROR
    return int(command(args))


if __name__ == '__main__':
    sys.exit(main())
