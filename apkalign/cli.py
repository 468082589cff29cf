#!/usr/bin/env python3
"""
Command-line entry point for apkalign.

Prints, for each native library in an APK, the React Native package it
most likely comes from and whether it is 16KB page aligned.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .commands.analyze import add_analyze_arguments, run_analyze


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog='apkalign',
        description=(
            'Show library name, React Native package name and 16KB alignment\n'
            'status for every native library bundled in an APK.'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  # Table on stdout
  apkalign app-release.apk

  # Use a specific zipalign and also check ELF LOAD segments
  apkalign app-release.apk --zipalign ~/Android/Sdk/build-tools/35.0.0/zipalign --check-elf

  # Markdown for a PR comment, failing the job on unaligned libraries
  apkalign app-release.apk --format markdown --fail-on-unaligned
        """
    )
    return add_analyze_arguments(parser)


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        return run_analyze(args, parser)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
