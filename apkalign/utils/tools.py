"""External tool discovery (unzip, zipalign from the Android SDK)."""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Mapping, Optional

logger = logging.getLogger(__name__)

ZIPALIGN_NAMES = ('zipalign', 'zipalign.exe')


def find_unzip() -> Optional[str]:
    """Return the path of the unzip binary, or None if it is not installed."""
    return shutil.which('unzip')


def sdk_search_paths(
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None
) -> List[Path]:
    """
    Candidate Android SDK roots, in search order.

    ANDROID_HOME and ANDROID_SDK_ROOT are used whenever they are set; the
    macOS and Linux default install locations only when they exist.

    Args:
        environ: Environment to read (default: os.environ)
        home: Home directory (default: Path.home())

    Returns:
        List of SDK root paths
    """
    if environ is None:
        environ = os.environ
    if home is None:
        home = Path.home()

    paths = []
    for var in ('ANDROID_HOME', 'ANDROID_SDK_ROOT'):
        value = environ.get(var)
        if value:
            paths.append(Path(value))

    for default in (home / 'Library' / 'Android' / 'sdk',
                    home / 'Android' / 'Sdk'):
        if default.is_dir():
            paths.append(default)

    return paths


def _version_key(build_tools_dir: Path) -> tuple:
    """
    Sort key for build-tools version directories like '35.0.0' or '35.0.0-rc1'.

    A pre-release ranks below the final release of the same version.
    """
    release, _, prerelease = build_tools_dir.name.partition('-')
    numbers = tuple(
        (1, int(part), '') if part.isdigit() else (0, 0, part)
        for part in release.split('.')
    )
    # final release (1, '') outranks any pre-release (0, 'rc1')
    return numbers, (0, prerelease) if prerelease else (1, '')


def find_in_build_tools(sdk_path: Path) -> Optional[Path]:
    """Find zipalign inside an SDK's build-tools, newest version first."""
    build_tools = sdk_path / 'build-tools'
    if not build_tools.is_dir():
        return None

    candidates = [
        candidate
        for name in ZIPALIGN_NAMES
        for candidate in build_tools.rglob(name)
        if candidate.is_file()
    ]
    if not candidates:
        return None

    candidates.sort(key=lambda c: _version_key(c.parent), reverse=True)
    return candidates[0]


def find_zipalign(
    explicit: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None
) -> Optional[str]:
    """
    Locate the zipalign binary.

    Search order: an explicitly configured path, PATH, then the
    build-tools directory of every SDK root from sdk_search_paths().

    Returns:
        Path to zipalign, or None if it could not be found
    """
    if explicit:
        if Path(explicit).is_file():
            return explicit
        logger.warning("Configured zipalign not found: %s", explicit)

    on_path = shutil.which('zipalign')
    if on_path:
        logger.debug("Using zipalign from PATH: %s", on_path)
        return on_path

    for sdk_path in sdk_search_paths(environ, home):
        found = find_in_build_tools(sdk_path)
        if found:
            logger.debug("Using zipalign from SDK: %s", found)
            return str(found)
        logger.debug("No zipalign under %s", sdk_path)

    return None
