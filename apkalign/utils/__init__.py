"""Utility modules for the apkalign CLI."""

from . import tools
from . import formatter

__all__ = ['tools', 'formatter']
