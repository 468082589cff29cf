#!/usr/bin/env python3
"""
Native library analysis components.

Discovery and dedup of .so files, package name lookup, zipalign output
classification and the optional ELF LOAD segment check.
"""
