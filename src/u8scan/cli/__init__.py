"""Command-line interface module for u8scan.

This module provides the ``u8scan`` tool for inspecting, filtering and
sanitizing UTF-8 input from files or standard input.
"""

from .main import main

__all__ = ["main"]
