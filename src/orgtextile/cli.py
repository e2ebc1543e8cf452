"""
Command-line interface for the org-mode to Textile converter.
"""

import argparse
import logging
from logging.handlers import RotatingFileHandler
import sys
from typing import List

from .org_textile_converter import OrgTextileConverter
from .org_textile_settings import OrgTextileSettings
from .orgtextile_exceptions import OrgTextileError


def setup_logging(verbose: bool, log_file: str | None) -> None:
    """Configure logging to stderr, or to a rotating file if one is given."""
    handler: logging.Handler
    if log_file:
        # Keep up to 5 log files, max 1MB each
        handler = RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,  # 1MB
            backupCount=4,
            encoding='utf-8'
        )

    else:
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler],
        force=True
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='orgtextile',
        description="Convert org-mode text to Textile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s notes.org                       # Convert to stdout
  %(prog)s notes.org -o notes.textile      # Convert to a file
  %(prog)s -c settings.yaml < notes.org    # Read stdin, custom settings
  %(prog)s --write-config settings.yaml    # Save default settings
        """
    )

    parser.add_argument('input', nargs='?', help='Input org-mode file (default: stdin)')
    parser.add_argument('--output', '-o', help='Output file path (default: stdout)')
    parser.add_argument('--config', '-c', help='YAML settings file')
    parser.add_argument('--write-config', metavar='PATH',
                        help='Write the effective settings to PATH and exit')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose logging')
    parser.add_argument('--log-file', help='Write logs to a rotating file instead of stderr')
    return parser


def main(argv: List[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)
    logger = logging.getLogger("OrgTextileCLI")

    try:
        settings = OrgTextileSettings.load_from_file(args.config) if args.config else OrgTextileSettings()

        if args.write_config:
            settings.save_to_file(args.write_config)
            print(f"Settings saved to: {args.write_config}")
            return 0

        if args.input:
            with open(args.input, 'r', encoding='utf-8') as f:
                text = f.read()

        else:
            text = sys.stdin.read()

        output = OrgTextileConverter(settings).convert(text)

        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(output)

            logger.info("wrote %s", args.output)

        else:
            sys.stdout.write(output)

    except (OrgTextileError, OSError, UnicodeDecodeError) as e:
        logger.error("conversion failed: %s", e)
        print(f"Error: {e}")
        return 1

    return 0
