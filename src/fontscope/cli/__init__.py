"""Command-line interface for fontscope.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- render: text to SVG, horizontal or vertical
- info: font format and vertical metric support
- fonts: list fonts found in the font directories
"""

from fontscope.cli.app import cli, main

__all__ = ["cli", "main"]
