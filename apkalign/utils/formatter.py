"""Render APK alignment analyses as a text table, JSON or a Jinja2 template."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader

from ..analysis.packages import package_display
from ..analysis.zipalign import PAGE_SIZE_KB

DEFAULT_TEMPLATE = Path(__file__).parent / 'templates' / 'report.md.j2'

NAME_WIDTH = 40
PACKAGE_WIDTH = 35
SEPARATOR = '-' * 60


def _elf_display(elf_aligned) -> str:
    if elf_aligned is None:
        return '?'
    return 'YES' if elf_aligned else 'NO'


def format_table(analysis) -> str:
    """
    Fixed-width table: library, inferred package, alignment.

    An "ELF LOAD Align" column is appended when the ELF check ran.
    """
    header = f"Library Name | React Native Package | {PAGE_SIZE_KB}KB Aligned"
    if analysis.elf_checked:
        header += " | ELF LOAD Align"
    lines = [header, SEPARATOR]

    for lib in analysis.libraries:
        line = (f"{lib.library_name:<{NAME_WIDTH}} | "
                f"{package_display(lib.package):<{PACKAGE_WIDTH}} | ")
        if analysis.elf_checked:
            line += f"{lib.alignment.display:<3} | {_elf_display(lib.elf_aligned)}"
        else:
            line += lib.alignment.display
        lines.append(line)

    return '\n'.join(lines)


def format_json(analysis) -> str:
    """Analysis as an indented JSON document."""
    return json.dumps(analysis.to_dict(), indent=2)


def build_template_context(analysis) -> Dict[str, Any]:
    """
    Build template context from an analysis.

    Returns:
        Dictionary with template variables:
        - apk: APK path
        - page_size_kb: checked page size
        - zipalign_available: False when every row was degraded to NO
        - elf_checked: True when the ELF column is present
        - libraries: rows with display strings
        - total / not_aligned: counts
    """
    libraries = []
    for lib in analysis.libraries:
        libraries.append({
            **lib.to_dict(),
            'package_display': package_display(lib.package),
            'aligned_display': lib.alignment.display,
            'elf_display': _elf_display(lib.elf_aligned),
        })

    return {
        'apk': analysis.apk_path,
        'page_size_kb': PAGE_SIZE_KB,
        'zipalign_available': analysis.zipalign.available,
        'elf_checked': analysis.elf_checked,
        'libraries': libraries,
        'total': len(libraries),
        'not_aligned': len(analysis.unaligned),
    }


def render_template(analysis, template_path: Optional[str] = None) -> str:
    """
    Render an analysis through a Jinja2 template.

    Without template_path the built-in markdown report (a table suited to
    pull request comments) is used. Custom templates receive the variables
    from build_template_context() and are loaded relative to their own
    directory, so they may ``{% include %}`` siblings.

    Raises:
        FileNotFoundError: If a custom template does not exist
        jinja2.TemplateError: If the template fails to parse or render
    """
    template_file = Path(template_path) if template_path else DEFAULT_TEMPLATE
    if not template_file.is_file():
        raise FileNotFoundError(f"Template file not found: {template_file}")

    env = Environment(
        loader=FileSystemLoader(str(template_file.parent)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return env.get_template(template_file.name).render(**build_template_context(analysis))
