"""Analyze command - report 16KB alignment of native libraries in an APK."""

import argparse
import logging
import sys

from jinja2 import TemplateError as Jinja2TemplateError

from ..core.analyzer import analyze_apk
from ..exceptions import ApkAlignError
from ..utils.formatter import (
    format_json,
    format_table,
    render_template,
)

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ('table', 'json', 'markdown')


def add_analyze_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """
    Add analyze arguments to a parser.

    Args:
        parser: Parser to extend

    Returns:
        The same parser
    """
    # A missing APK path exits with 1, not argparse's 2
    parser.add_argument(
        'apk_path',
        nargs='?',
        metavar='path_to_apk',
        help='Path to the APK to inspect'
    )

    output_group = parser.add_argument_group('output options')
    output_group.add_argument(
        '--format',
        choices=OUTPUT_FORMATS,
        default='table',
        help='Output format (default: %(default)s)'
    )
    output_group.add_argument(
        '--template',
        type=str,
        metavar='PATH',
        help='Path to custom Jinja2 template (implies --format markdown)'
    )

    check_group = parser.add_argument_group('check options')
    check_group.add_argument(
        '--zipalign',
        metavar='PATH',
        help='zipalign binary to use (default: PATH, then $ANDROID_HOME, '
             '$ANDROID_SDK_ROOT and the default SDK locations)'
    )
    check_group.add_argument(
        '--check-elf',
        action='store_true',
        help='Also check that every ELF LOAD segment is 16KB aligned'
    )
    check_group.add_argument(
        '--fail-on-unaligned',
        action='store_true',
        help='Exit with status 1 if any library is not aligned'
    )
    check_group.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    return parser


def _render(analysis, output_format: str, template: str = None) -> str:
    """Render an analysis in the requested output format."""
    if template or output_format == 'markdown':
        return render_template(analysis, template)
    if output_format == 'json':
        return format_json(analysis)
    return format_table(analysis)


def run_analyze(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> int:
    """
    Execute the analyze command.

    Args:
        args: Parsed command-line arguments
        parser: Parser used to print usage when the APK path is missing

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if not args.apk_path:
        if parser is not None:
            parser.print_usage(sys.stderr)
        logger.error("An APK path is required")
        return 1

    try:
        analysis = analyze_apk(
            args.apk_path,
            zipalign=getattr(args, 'zipalign', None),
            check_elf=getattr(args, 'check_elf', False)
        )
    except ApkAlignError as e:
        logger.error("%s", e)
        return 1
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Analysis failed: %s", e)
        return 1

    try:
        output = _render(
            analysis,
            getattr(args, 'format', 'table'),
            getattr(args, 'template', None)
        )
    except (FileNotFoundError, Jinja2TemplateError) as e:
        logger.error("Template error: %s", e)
        return 1

    print(output)

    if getattr(args, 'fail_on_unaligned', False) and analysis.unaligned:
        logger.error("%d native libraries are not 16KB aligned", len(analysis.unaligned))
        return 1

    return 0
