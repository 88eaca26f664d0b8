"""
CLI command implementations.
"""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from ..config import GraphConfig, load_graph_config
from ..constants import ExitCode
from ..core.document import Document
from ..exceptions import ConfigError
from ..formats import FORMATS
from ..loaders import document_from_file
from .helpers import format_count_summary, print_header, setup_logging, write_output

logger = logging.getLogger(__name__)


def _type_counts(doc: Document) -> Counter:
    counts: Counter = Counter()
    for node in doc:
        names = [doc.namespaced_name(t, generate=False) for t in node.types()] or ["(untyped)"]
        counts.update(names)
    return counts


def cmd_convert(args: argparse.Namespace) -> int:
    """Load an RDF/XML file and write it in the requested representation."""
    config = GraphConfig.default()
    if args.config:
        try:
            config = load_graph_config(args.config)
        except FileNotFoundError as e:
            setup_logging(args.log_level)
            logger.error(str(e))
            return ExitCode.CONFIG_ERROR
        except ConfigError as e:
            setup_logging(args.log_level)
            logger.error(f"Invalid configuration: {e}")
            return ExitCode.CONFIG_ERROR
    setup_logging(args.log_level, config=dict(config.logging_options))

    path = Path(args.input)
    if not path.is_file():
        logger.error(f"Input file not found: {path}")
        return ExitCode.FILE_NOT_FOUND

    doc = document_from_file(path, location=args.base, config=config)
    if doc is None or not len(doc):
        logger.error(f"Nothing could be imported from {path}")
        return ExitCode.IMPORT_FAILED

    output = FORMATS[args.to_format](doc)
    try:
        write_output(output, args.output)
    except OSError as e:
        logger.error(f"Cannot write output: {e}")
        return ExitCode.ERROR
    logger.info(f"Wrote {len(doc.top_level_nodes())} top-level subjects as {args.to_format}")

    if args.summary:
        print_header(f"{path.name}: {len(doc)} subjects")
        print(format_count_summary(_type_counts(doc)), file=sys.stderr)
    return ExitCode.SUCCESS
