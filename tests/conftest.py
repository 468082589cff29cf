"""Shared pytest fixtures and helpers for apkalign tests."""

import os
import zipfile
from contextlib import contextmanager
from pathlib import Path
from unittest.mock import patch

import pytest

# Native libraries of a typical React Native release build
DEFAULT_LIBRARIES = (
    'lib/arm64-v8a/libhermes.so',
    'lib/arm64-v8a/libreactnativescreens.so',
    'lib/arm64-v8a/libc++_shared.so',
    'lib/armeabi-v7a/libhermes.so',
    'lib/armeabi-v7a/libreactnativescreens.so',
    'lib/armeabi-v7a/libc++_shared.so',
    'lib/x86_64/libhermes.so',
)


def write_tree(root, paths, content=b'\x7fELF'):
    """
    Create files below root, mimicking an extracted APK.

    Args:
        root: Directory to populate
        paths: Archive-relative POSIX paths
        content: Bytes written to every file

    Returns:
        The root as a Path
    """
    root = Path(root)
    for rel_path in paths:
        target = root / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
    return root


def make_apk(path, paths=DEFAULT_LIBRARIES):
    """Write a minimal APK (a zip with a manifest and the given entries)."""
    with zipfile.ZipFile(path, 'w') as apk:
        apk.writestr('AndroidManifest.xml', b'<manifest/>')
        for rel_path in paths:
            apk.writestr(rel_path, b'\x7fELF')
    return str(path)


def fake_extract(paths=DEFAULT_LIBRARIES):
    """Side effect for extract_archive that populates dest without unzip."""
    def _extract(apk_path, dest, unzip='unzip'):  # pylint: disable=unused-argument
        write_tree(dest, paths)
    return _extract


def zipalign_output(statuses, apk='app.apk'):
    """
    Build zipalign -c -v output.

    Args:
        statuses: Iterable of (archive path, status text) pairs
        apk: APK name used in the banner
    """
    lines = [f"Verifying alignment of {apk} (4)..."]
    offset = 49
    for rel_path, status in statuses:
        lines.append(f"{offset:>8} {rel_path} ({status})")
        offset += 16384
    lines.append("Verification succesful")
    return '\n'.join(lines) + '\n'


@contextmanager
def sdk_environment(**variables):
    """Run with only the given Android SDK variables set."""
    cleared = {
        key: value for key, value in os.environ.items()
        if key not in ('ANDROID_HOME', 'ANDROID_SDK_ROOT')
    }
    cleared.update(variables)
    with patch.dict(os.environ, cleared, clear=True):
        yield


@pytest.fixture
def apk_file(tmp_path):
    """A minimal APK on disk with the default libraries."""
    return make_apk(tmp_path / 'app-release.apk')
