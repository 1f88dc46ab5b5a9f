"""Font I/O layer for fontscope.

This module handles locating, reading and parsing font files using
fonttools. It provides a clean abstraction layer between fonttools and
the layout engines.

Key responsibilities:
- Resolve font names to font bytes
- Parse TTF/OTF/TTC fonts
- Expose cmap, outline and metric table lookups

Key classes:
- FontFace: Parsed read-only font face
- FontResolver: Name-to-bytes resolution over font directories
- ResolvedFont: Bytes and origin of a resolved font
"""

from fontscope.io.face import FontFace
from fontscope.io.resolver import FontResolver, ResolvedFont

__all__ = [
    "FontFace",
    "FontResolver",
    "ResolvedFont",
]
