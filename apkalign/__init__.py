#!/usr/bin/env python3
"""
apkalign - 16KB page alignment report for Android APK native libraries.

Lists every bundled ``*.so`` once, guesses which React Native package
ships it, and reports whether ``zipalign`` considers it 16KB aligned.
"""

from .core.analyzer import analyze_apk
from .analysis.models import AlignmentStatus, LibraryReport

__all__ = ['analyze_apk', 'AlignmentStatus', 'LibraryReport']
