#!/usr/bin/env python3
"""
APK alignment analysis.

Ties together tool discovery, zipalign verification, extraction and the
package name table into one list of report rows.
"""

import logging
import os
import tempfile
from dataclasses import dataclass, field
from typing import List, Optional

from ..analysis.elf import check_elf_alignment
from ..analysis.libraries import extract_archive, iter_native_libraries
from ..analysis.models import LibraryReport, ZipalignReport
from ..analysis.packages import lookup_package
from ..analysis.zipalign import check_alignment
from ..exceptions import ApkNotFoundError, ToolNotFoundError
from ..utils.tools import find_unzip, find_zipalign

logger = logging.getLogger(__name__)


@dataclass
class ApkAnalysis:
    """Result of analyzing one APK"""
    apk_path: str
    zipalign: ZipalignReport
    libraries: List[LibraryReport] = field(default_factory=list)
    elf_checked: bool = False

    @property
    def unaligned(self) -> List[LibraryReport]:
        """Rows that are not confirmed as aligned"""
        return [lib for lib in self.libraries if not lib.aligned]

    def to_dict(self) -> dict:
        """JSON-serializable representation"""
        return {
            'apk': self.apk_path,
            'zipalign': {
                'available': self.zipalign.available,
                'path': self.zipalign.tool,
            },
            'elf_checked': self.elf_checked,
            'libraries': [lib.to_dict() for lib in self.libraries],
            'summary': {
                'total': len(self.libraries),
                'aligned': len(self.libraries) - len(self.unaligned),
                'not_aligned': len(self.unaligned),
            },
        }


def _validate_apk_path(apk_path: str) -> None:
    """Raise ApkNotFoundError unless apk_path is an existing file."""
    if not os.path.isfile(apk_path):
        raise ApkNotFoundError(f"APK file not found: {apk_path}")


def analyze_apk(
    apk_path: str,
    zipalign: Optional[str] = None,
    check_elf: bool = False
) -> ApkAnalysis:
    """
    Analyze the native libraries of an APK.

    Args:
        apk_path: APK to inspect
        zipalign: Explicit zipalign binary (default: discover it)
        check_elf: Also check ELF LOAD segment alignment of each library

    Returns:
        ApkAnalysis with one row per distinct library base name

    Raises:
        ApkNotFoundError: If apk_path is not a file
        ToolNotFoundError: If unzip is not installed
        ExtractionError: If the APK cannot be extracted
    """
    _validate_apk_path(apk_path)

    unzip = find_unzip()
    if not unzip:
        raise ToolNotFoundError("unzip command not found")

    zipalign_tool = find_zipalign(zipalign)
    zipalign_report = check_alignment(zipalign_tool, apk_path)

    analysis = ApkAnalysis(
        apk_path=apk_path,
        zipalign=zipalign_report,
        elf_checked=check_elf,
    )

    with tempfile.TemporaryDirectory(prefix='apkalign-') as temp_dir:
        extract_archive(apk_path, temp_dir, unzip)
        native_libraries = list(iter_native_libraries(temp_dir))

        for library in native_libraries:
            row = LibraryReport(
                library_name=library.file_name,
                package=lookup_package(library.name),
                alignment=zipalign_report.alignment_for(library.path),
                path=library.path,
                duplicates=library.duplicates,
            )
            if check_elf:
                row.elf_aligned = check_elf_alignment(library.local_path)
            analysis.libraries.append(row)

    logger.info("Analyzed %d native libraries, %d not aligned",
                len(analysis.libraries), len(analysis.unaligned))
    return analysis
