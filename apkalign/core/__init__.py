"""Core APK analysis."""

from .analyzer import ApkAnalysis, analyze_apk

__all__ = ['ApkAnalysis', 'analyze_apk']
