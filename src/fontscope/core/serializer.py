"""SVG document serialization.

Markup is assembled as text rather than through an XML tree so the output
is byte-for-byte deterministic and escapes exactly the four markup
characters.
"""

from fontscope.domain.glyph import Canvas, GlyphGroup, PathLayer
from fontscope.domain.path import format_number

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


def escape_xml(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"``; everything else passes through."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


class DocumentSerializer:
    """Renders a Canvas as an SVG document.

    Example:
        serializer = DocumentSerializer(precision=2)
        svg = serializer.serialize(canvas)
    """

    def __init__(self, precision: int = 2) -> None:
        self.precision = precision

    def serialize(self, canvas: Canvas) -> str:
        width = format_number(canvas.width, self.precision)
        height = format_number(canvas.height, self.precision)
        lines = [
            XML_DECLARATION,
            f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{height}" '
            f'viewBox="0 0 {width} {height}">',
        ]
        lines.extend(self.serialize_group(group) for group in canvas.groups)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def serialize_group(self, group: GlyphGroup) -> str:
        header = (
            f'  <g id="glyph-{group.index}" data-index="{group.index}" '
            f'data-char="{escape_xml(group.char)}">'
        )
        paths = [f"    {self.serialize_layer(layer)}" for layer in group.layers]
        return "\n".join([header, *paths, "  </g>"])

    def serialize_layer(self, layer: PathLayer) -> str:
        attrs = [f'd="{layer.d}"']
        if layer.fill is not None:
            attrs.append(f'fill="{escape_xml(layer.fill)}"')
        if layer.is_stroke:
            attrs.append(f'stroke="{escape_xml(layer.stroke)}"')
            attrs.append(f'stroke-width="{format_number(layer.stroke_width, self.precision)}"')
            attrs.append('stroke-linejoin="round"')
            attrs.append('stroke-linecap="round"')
        return f"<path {' '.join(attrs)}/>"
