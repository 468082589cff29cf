#!/usr/bin/env python3
"""
zipalign verification and output parsing.

``zipalign -c -P 16 -v 4 app.apk`` prints one line per archive entry:

     905256 lib/arm64-v8a/libhermes.so (OK)
    1234567 lib/x86/libyoga.so (BAD - 1234)
         49 AndroidManifest.xml (OK - compressed)

The offset comes first, then the archive path, then the status in
parentheses. Only a bare ``(OK)`` counts as aligned.
"""

import logging
import re
import subprocess
from typing import Dict, Optional

from .models import AlignmentStatus, ZipalignEntry, ZipalignReport

logger = logging.getLogger(__name__)

# Page size in KB checked for uncompressed .so entries (-P)
PAGE_SIZE_KB = 16
# Byte alignment checked for all other entries
DEFAULT_ALIGNMENT = 4
ZIPALIGN_TIMEOUT = 120

ENTRY_PATTERN = re.compile(r'^\s*(\d+)\s+(.+?)\s+\(([^()]*)\)\s*$')
FAILURE_MARKERS = ('FAILED', 'BAD')
BANNER_PREFIX = 'Verifying alignment of '
UNUSABLE_PATTERN = re.compile(r'error|not found|cannot', re.IGNORECASE)


def classify_status(status: str) -> AlignmentStatus:
    """
    Classify the status text zipalign printed for one entry.

    Accepts either the text inside the parentheses or the whole line.

    Returns:
        ALIGNED for "(OK)", MISALIGNED for "(FAILED ..." / "(BAD ...",
        UNKNOWN for anything else (e.g. "(OK - compressed)")
    """
    text = status.strip()
    if text.startswith('(') or ' (' in text:
        text = text[text.rfind('(') + 1:].rstrip(')').strip()

    if text == 'OK':
        return AlignmentStatus.ALIGNED
    if text.startswith(FAILURE_MARKERS):
        return AlignmentStatus.MISALIGNED
    return AlignmentStatus.UNKNOWN


def parse_zipalign_output(output: str) -> Dict[str, ZipalignEntry]:
    """
    Parse per-entry lines of zipalign verbose output.

    Banner and summary lines are skipped. If an archive path appears more
    than once, the first line wins.

    Returns:
        Mapping of archive path to ZipalignEntry
    """
    entries: Dict[str, ZipalignEntry] = {}
    for line in output.splitlines():
        match = ENTRY_PATTERN.match(line)
        if not match:
            continue
        offset, path, status = match.groups()
        if path in entries:
            continue
        entries[path] = ZipalignEntry(
            offset=int(offset),
            path=path,
            status=status.strip(),
            alignment=classify_status(status),
        )
    return entries


def is_unusable_output(output: str) -> bool:
    """
    Detect a zipalign run that did not produce a verification report.

    Empty output, or an error message outside the per-entry lines and the
    "Verifying alignment of <apk>" banner, means the tool could not check
    the archive.
    """
    if not output.strip():
        return True
    for line in output.splitlines():
        if ENTRY_PATTERN.match(line) or line.lstrip().startswith(BANNER_PREFIX):
            continue
        if UNUSABLE_PATTERN.search(line):
            return True
    return False


def run_zipalign(tool: str, apk_path: str) -> str:
    """
    Run zipalign in verification mode and return stdout and stderr combined.

    zipalign exits non-zero when verification fails; that is a normal
    outcome here and is not raised.

    Raises:
        OSError: If the binary cannot be executed
        subprocess.TimeoutExpired: If verification does not finish in time
    """
    command = [tool, '-c', '-P', str(PAGE_SIZE_KB), '-v', str(DEFAULT_ALIGNMENT), apk_path]
    logger.debug("Running: %s", ' '.join(command))
    result = subprocess.run(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors='replace',
        check=False,
        timeout=ZIPALIGN_TIMEOUT
    )
    logger.debug("zipalign exited with %d", result.returncode)
    return result.stdout or ''


def check_alignment(tool: Optional[str], apk_path: str) -> ZipalignReport:
    """
    Verify APK alignment with zipalign.

    Args:
        tool: Path to zipalign, or None when it was not found
        apk_path: APK to verify

    Returns:
        ZipalignReport; ``available`` is False when the tool is missing or
        its output is unusable, in which case every entry reads misaligned
    """
    if not tool:
        logger.warning("zipalign not found - all libraries will be reported as not aligned")
        return ZipalignReport(available=False)

    try:
        output = run_zipalign(tool, apk_path)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("Failed to run zipalign (%s): %s", tool, e)
        return ZipalignReport(available=False, tool=tool)

    if is_unusable_output(output):
        logger.warning("zipalign could not verify %s - all libraries will be "
                       "reported as not aligned", apk_path)
        logger.debug("zipalign output:\n%s", output)
        return ZipalignReport(available=False, tool=tool, raw_output=output)

    entries = parse_zipalign_output(output)
    logger.info("zipalign reported %d entries", len(entries))
    return ZipalignReport(available=True, tool=tool, entries=entries, raw_output=output)
