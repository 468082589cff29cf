#!/usr/bin/env python3
"""
Data models for native library alignment analysis.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class AlignmentStatus(Enum):
    """Alignment of a single archive entry as reported by zipalign"""
    ALIGNED = "aligned"
    MISALIGNED = "misaligned"
    UNKNOWN = "unknown"

    @property
    def display(self) -> str:
        """YES only for entries zipalign confirmed; everything else is NO."""
        return "YES" if self is AlignmentStatus.ALIGNED else "NO"


@dataclass
class ZipalignEntry:
    """One per-file line of ``zipalign -c -v`` output"""
    offset: int
    path: str
    status: str
    alignment: AlignmentStatus


@dataclass
class ZipalignReport:
    """Parsed result of a zipalign verification run"""
    available: bool
    tool: Optional[str] = None
    entries: Dict[str, ZipalignEntry] = field(default_factory=dict)
    raw_output: str = ""

    def alignment_for(self, path: str) -> AlignmentStatus:
        """Alignment of an archive path; unavailable tool means misaligned."""
        if not self.available:
            return AlignmentStatus.MISALIGNED
        entry = self.entries.get(path)
        if entry is None:
            return AlignmentStatus.UNKNOWN
        return entry.alignment


@dataclass
class NativeLibrary:
    """A distinct native library found in the extracted archive"""
    name: str
    path: str
    local_path: str
    duplicates: List[str] = field(default_factory=list)

    @property
    def file_name(self) -> str:
        """Display name, e.g. ``hermes.so`` for ``lib/arm64-v8a/libhermes.so``"""
        return f"{self.name}.so"


@dataclass
class LibraryReport:
    """One row of the alignment report"""
    library_name: str
    package: Optional[str]
    alignment: AlignmentStatus
    path: str
    duplicates: List[str] = field(default_factory=list)
    elf_aligned: Optional[bool] = None

    @property
    def aligned(self) -> bool:
        """True when zipalign confirmed the library as aligned"""
        return self.alignment is AlignmentStatus.ALIGNED

    def to_dict(self) -> dict:
        """JSON-serializable representation"""
        return {
            'library': self.library_name,
            'package': self.package,
            'aligned': self.aligned,
            'status': self.alignment.value,
            'path': self.path,
            'duplicates': list(self.duplicates),
            'elf_load_aligned': self.elf_aligned,
        }
