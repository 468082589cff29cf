#!/usr/bin/env python3
"""
APK extraction and native library discovery.

The APK is unpacked with ``unzip`` into a scratch directory; every ``*.so``
below it is then listed once per base name, so ``libhermes.so`` shipped for
arm64-v8a, armeabi-v7a, x86 and x86_64 is reported a single time.
"""

import logging
import subprocess
from pathlib import Path, PurePosixPath
from typing import Dict, Iterator, List

from ..exceptions import ExtractionError
from .models import NativeLibrary

logger = logging.getLogger(__name__)

NATIVE_LIBRARY_SUFFIX = '.so'
UNZIP_TIMEOUT = 300


def extract_archive(apk_path: str, dest: str, unzip: str = 'unzip') -> None:
    """
    Extract an APK into a directory with unzip.

    Args:
        apk_path: APK to extract
        dest: Destination directory (must exist)
        unzip: unzip binary to use

    Raises:
        ExtractionError: If unzip fails or cannot be run
    """
    logger.info("Extracting %s", apk_path)
    try:
        result = subprocess.run(
            [unzip, '-q', '-o', apk_path, '-d', dest],
            capture_output=True,
            text=True,
            errors='replace',
            check=False,
            timeout=UNZIP_TIMEOUT
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ExtractionError(f"Failed to extract APK: {e}") from e

    if result.returncode != 0:
        logger.debug("unzip stderr: %s", result.stderr.strip())
        raise ExtractionError("Failed to extract APK")


def extract_lib_name(path: str) -> str:
    """
    Base name of a native library: strip one leading "lib" and the ".so".

    >>> extract_lib_name('lib/arm64-v8a/libhermes.so')
    'hermes'
    """
    name = PurePosixPath(path).name
    if name.startswith('lib'):
        name = name[len('lib'):]
    if name.endswith(NATIVE_LIBRARY_SUFFIX):
        name = name[:-len(NATIVE_LIBRARY_SUFFIX)]
    return name


def find_native_files(root: Path) -> List[str]:
    """All .so files below root as sorted archive-relative POSIX paths."""
    return sorted(
        path.relative_to(root).as_posix()
        for path in root.rglob(f'*{NATIVE_LIBRARY_SUFFIX}')
        if path.is_file()
    )


def iter_native_libraries(root: str) -> Iterator[NativeLibrary]:
    """
    Yield each distinct native library found under an extracted APK.

    Files are visited in sorted path order; the first file with a given
    base name is yielded and later copies are attached as duplicates.
    Duplicates are only complete once iteration has finished.

    Args:
        root: Directory the APK was extracted into

    Yields:
        NativeLibrary for every distinct base name
    """
    root_path = Path(root)
    seen: Dict[str, NativeLibrary] = {}

    for rel_path in find_native_files(root_path):
        name = extract_lib_name(rel_path)
        if name in seen:
            seen[name].duplicates.append(rel_path)
            continue

        library = NativeLibrary(
            name=name,
            path=rel_path,
            local_path=str(root_path / rel_path),
        )
        seen[name] = library
        yield library

    logger.debug("Found %d distinct native libraries", len(seen))
