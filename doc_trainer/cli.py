"""Command-line interface for doc-trainer."""

import argparse
import logging
import sys
from pathlib import Path

from .config import ProcessorConfig, load_config
from .errors import DocTrainerError
from .pipeline import DocumentProcessor, parse_path
from .post_processing import format_outline


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def cmd_process(args: argparse.Namespace) -> int:
    """Handle the process command."""
    try:
        # --pdf works without a config file
        if args.pdf and not Path(args.config).exists():
            config = ProcessorConfig()
        else:
            config = load_config(args.config)

        if args.pdf:
            config.input_type = "pdf"
            config.pdf.path = args.pdf
        if args.output:
            config.output.directory = args.output

        doc = DocumentProcessor(config).process()
    except DocTrainerError as e:
        logger.error(f"Error: {e}")
        return 1

    logger.info(f"[OK] {len(doc.sections)} sections written to {config.output.directory}")
    return 0


def cmd_outline(args: argparse.Namespace) -> int:
    """Handle the outline command to show the section structure."""
    input_path = Path(args.input)

    if not input_path.exists():
        logger.error(f"Error: File not found: {input_path}")
        return 1

    try:
        doc = parse_path(input_path)
    except DocTrainerError as e:
        logger.error(f"Error: {e}")
        return 1

    logger.info(f"\n[DOC] {doc.title}")
    logger.info("=" * 50)
    if not doc.sections:
        logger.info("[!] No sections found")
        return 0
    for line in format_outline(doc.sections):
        logger.info(line)
    return 0


def main() -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog='doc-trainer',
        description='Split PDF or Markdown documents into sections for documentation sites'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Process command
    process_parser = subparsers.add_parser(
        'process',
        help='Process the configured input and write data files'
    )
    process_parser.add_argument(
        '-c', '--config',
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    process_parser.add_argument(
        '--pdf',
        help='Path to PDF file to process (overrides config)'
    )
    process_parser.add_argument(
        '-o', '--output',
        help='Output directory (overrides config)'
    )
    process_parser.set_defaults(func=cmd_process)

    # Outline command
    outline_parser = subparsers.add_parser(
        'outline',
        help='Show the sections of a PDF, Markdown file or Markdown directory'
    )
    outline_parser.add_argument(
        'input',
        help='Path to input file or directory'
    )
    outline_parser.set_defaults(func=cmd_outline)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
