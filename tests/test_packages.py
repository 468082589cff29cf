"""
Unit tests for the native library to package name table
"""

import unittest

from apkalign.analysis.packages import (
    KNOWN_PACKAGES,
    PLACEHOLDER,
    lookup_package,
    package_display,
)


class TestLookupPackage(unittest.TestCase):
    """Test package lookup by library base name"""

    def test_known_libraries(self):
        """Common React Native libraries map to their packages"""
        self.assertEqual(lookup_package('rnscreens'), 'react-native-screens')
        self.assertEqual(lookup_package('reanimated'), 'react-native-reanimated')
        self.assertEqual(lookup_package('hermes_executor'), 'hermes-engine')
        self.assertEqual(lookup_package('folly_runtime'), 'react-native (folly)')
        self.assertEqual(lookup_package('jscinstance'), 'react-native (jsc)')

    def test_case_insensitive(self):
        """Lookup ignores case"""
        self.assertEqual(lookup_package('jniPdfium'), 'react-native-pdf')
        self.assertEqual(lookup_package('ReactNativeSVG'), 'react-native-svg')
        self.assertEqual(lookup_package('FBJNI'), 'react-native (fbjni)')

    def test_unknown_library(self):
        """Unknown libraries have no package and display the placeholder"""
        self.assertIsNone(lookup_package('c++_shared'))
        self.assertEqual(package_display(lookup_package('c++_shared')), PLACEHOLDER)

    def test_whole_name_match(self):
        """A known name inside a longer name is not a match"""
        self.assertIsNone(lookup_package('sharedutils'))
        self.assertIsNone(lookup_package('hermestooling'))

    def test_table_keys_are_lowercase(self):
        """Every key is stored lowercase so lookups can lowercase the input"""
        for key in KNOWN_PACKAGES:
            self.assertEqual(key, key.lower())

    def test_display_known_package(self):
        """Known packages display unchanged"""
        self.assertEqual(package_display('hermes-engine'), 'hermes-engine')


if __name__ == '__main__':
    unittest.main()
