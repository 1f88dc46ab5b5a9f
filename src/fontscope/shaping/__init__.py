"""Text shaping for fontscope.

This subpackage provides:
- HarfBuzz text shaping wrapper
- ShapedGlyph results carrying glyph ids and advance vectors
"""

from fontscope.shaping.harfbuzz import HarfBuzzShaper, ShapedGlyph

__all__ = [
    "HarfBuzzShaper",
    "ShapedGlyph",
]
