"""Known native library names and the React Native packages that ship them."""

from typing import Dict, Optional

PLACEHOLDER = '-'

# Lowercase library base name (no "lib" prefix, no ".so") -> package
_PACKAGE_ALIASES = {
    'react-native-screens': ('rnscreens', 'reactnativescreens'),
    'react-native-reanimated': ('reactnativereanimated', 'reanimated'),
    'react-native-webview': ('reactnativewebview', 'webview'),
    'react-native-blob-util': ('reactnativeblob', 'blob'),
    'react-native-permissions': ('reactnativepermissions', 'permissions'),
    'react-native-biometrics': ('reactnativebiometrics', 'biometrics'),
    'react-native-svg': ('reactnativesvg', 'svg'),
    'react-native-pdf': ('reactnativepdf', 'pdf', 'jnipdfium', 'modpdfium'),
    'react-native-push-notification': ('reactnativepushnotification', 'pushnotification'),
    'react-native-calendars': ('reactnativecalendars', 'calendars'),
    'react-native-date-picker': ('reactnativedatepicker', 'datepicker'),
    'react-native-dropdown-picker': ('reactnativedropdownpicker', 'dropdownpicker'),
    'react-native-gifted-charts': ('reactnativegiftedcharts', 'giftedcharts'),
    'react-native-share': ('reactnativeshare', 'share'),
    'react-native-skeleton-placeholder': ('reactnativeskeleton', 'skeleton'),
    'react-native-queue-it': ('reactnativequeueit', 'queueit'),
    'react-native-quantum-metric-library': ('reactnativequantum', 'quantum'),
    'hermes-engine': ('hermes', 'hermes_executor', 'hermesinstancejni'),
    'react-native (fbjni)': ('fbjni',),
    'react-native (folly)': ('folly', 'folly_runtime'),
    'react-native (yoga)': ('yoga',),
    'react-native (jsc)': ('jsc', 'jscinstance'),
}

KNOWN_PACKAGES: Dict[str, str] = {
    alias: package
    for package, aliases in _PACKAGE_ALIASES.items()
    for alias in aliases
}


def lookup_package(lib_name: str) -> Optional[str]:
    """
    Return the package that most likely ships a native library.

    Matching is case-insensitive on the whole base name.

    Args:
        lib_name: Library base name, e.g. "hermes" for libhermes.so

    Returns:
        Package display name, or None if the library is not known
    """
    return KNOWN_PACKAGES.get(lib_name.lower())


def package_display(package: Optional[str]) -> str:
    """Package name for table output, with a placeholder for unknown libraries."""
    return package or PLACEHOLDER
