"""
Command-line interface components.

This package contains CLI tools and entry points for backup and restore.
"""

from .main import main

__all__ = ["main"]
