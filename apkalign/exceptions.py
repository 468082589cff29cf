"""Exceptions raised while analyzing an APK."""


class ApkAlignError(Exception):
    """Base exception for APK alignment analysis"""


class ApkNotFoundError(ApkAlignError):
    """Raised when the APK path does not point at a file"""


class ToolNotFoundError(ApkAlignError):
    """Raised when a required external tool is not installed"""


class ExtractionError(ApkAlignError):
    """Raised when the APK cannot be extracted"""
