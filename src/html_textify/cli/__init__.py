"""
CLI module for HTML to text conversion.

Provides command-line tools for single-file and batch conversion.
"""

from html_textify.cli.convert import main as convert_main

__all__ = ["convert_main"]
