"""ELF program header check for 16KB page compatible LOAD segments."""

import logging
from typing import List, Optional

from elftools.common.exceptions import ELFError
from elftools.elf.elffile import ELFFile

logger = logging.getLogger(__name__)

PAGE_SIZE = 16384


def misaligned_load_segments(elffile) -> List[dict]:
    """
    PT_LOAD segments whose alignment is below the 16KB page size.

    Args:
        elffile: Opened ELFFile (anything with iter_segments())

    Returns:
        List of {'p_align', 'p_offset', 'p_vaddr'} for offending segments
    """
    issues = []
    for segment in elffile.iter_segments():
        header = segment.header
        if header['p_type'] != 'PT_LOAD':
            continue
        if header['p_align'] < PAGE_SIZE:
            issues.append({
                'p_align': header['p_align'],
                'p_offset': header['p_offset'],
                'p_vaddr': header['p_vaddr'],
            })
    return issues


def check_elf_alignment(so_path: str) -> Optional[bool]:
    """
    Check that every LOAD segment of a shared object is 16KB aligned.

    Returns:
        True/False, or None when the file is not a readable ELF
    """
    try:
        with open(so_path, 'rb') as f:
            issues = misaligned_load_segments(ELFFile(f))
    except (OSError, ELFError) as e:
        logger.warning("Cannot read ELF headers of %s: %s", so_path, e)
        return None

    for issue in issues:
        logger.debug("%s: LOAD segment at 0x%x has p_align 0x%x",
                     so_path, issue['p_vaddr'], issue['p_align'])
    return not issues
