"""fontscope - Typeset text as SVG glyph outlines.

fontscope lays text out with a chosen font and writes every glyph as an
SVG path: horizontally as centered lines, or vertically as right-to-left
columns shaped with HarfBuzz. Glyphs can be exported bare, filled, or
filled with any number of stroke outlines beneath.

Example:
    $ fontscope render "Noto Sans JP" --text "縦書き" --vertical -o out.svg
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
