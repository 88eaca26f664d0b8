"""
CLI argument parser configuration.

Command structure:
    - convert INPUT --to {turtle,rdfxml,json,html} [--output FILE] [--base URI]
"""

import argparse

from ..formats import FORMATS


def add_config_flags(parser: argparse.ArgumentParser) -> None:
    """Add configuration and logging flags."""
    parser.add_argument(
        '--config', '-c',
        help='Path to a JSON graph configuration file'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override the configured log level'
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser with all subcommands.
    """
    parser = argparse.ArgumentParser(
        prog='rdfgraph',
        description="Import RDF/XML into an in-memory graph and serialize it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s convert people.rdf --to turtle
    %(prog)s convert people.rdf --to json --output people.json
    %(prog)s convert people.rdf --to html --base http://example.org/people.rdf
        """,
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    _add_convert_parser(subparsers)
    return parser


def _add_convert_parser(subparsers: argparse._SubParsersAction) -> None:
    """Add the convert command parser."""
    parser = subparsers.add_parser(
        'convert',
        help='Convert an RDF/XML file to another representation'
    )
    parser.add_argument('input', help='Path to the RDF/XML file')
    parser.add_argument(
        '--to', '-t',
        dest='to_format',
        choices=sorted(FORMATS),
        default='turtle',
        help='Output representation (default: turtle)'
    )
    parser.add_argument(
        '--output', '-o',
        help='Output file path (default: stdout)'
    )
    parser.add_argument(
        '--base', '-b',
        help='Base URI for relative references (default: the file URI)'
    )
    parser.add_argument(
        '--summary', '-s',
        action='store_true',
        help='Print a count of subjects per type to stderr'
    )
    add_config_flags(parser)
