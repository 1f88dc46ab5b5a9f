"""SVG generation orchestration.

This module ties the layout stages together for one request:
- SvgGenerator: face + request to SVG, choosing the layout engine by
  writing direction
- generate_svg: functional shortcut around SvgGenerator
- render_request: full pipeline from a font name, returning failures as
  values instead of raising
"""

from dataclasses import dataclass

import structlog

from fontscope.config import LayoutConfig
from fontscope.core.compositor import StrokeCompositor
from fontscope.core.horizontal import HorizontalLayoutEngine
from fontscope.core.metrics import MetricsResolver
from fontscope.core.serializer import DocumentSerializer
from fontscope.core.vertical import VerticalLayoutEngine
from fontscope.domain.glyph import Canvas
from fontscope.domain.request import LayoutRequest, RenderRequest, WritingDirection
from fontscope.exceptions import FontScopeError
from fontscope.io.face import FontFace
from fontscope.io.resolver import FontResolver
from fontscope.shaping.harfbuzz import HarfBuzzShaper
from fontscope.utils.logging import GenerationLogger, GenerationStats, get_logger


class SvgGenerator:
    """Generates an SVG document for one face.

    Holds no state between requests apart from the face and config; every
    call builds its own resolver, compositor and engine.

    Example:
        face = FontFace.from_path(Path("font.ttf"))
        generator = SvgGenerator(face)
        svg = generator.generate(LayoutRequest(text="Hello", font_size=72))
    """

    def __init__(
        self,
        face: FontFace,
        config: LayoutConfig | None = None,
        shaper: HarfBuzzShaper | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            face: Parsed font face
            config: Layout configuration (defaults if None)
            shaper: Shaper for vertical layout (built from the face bytes if None)
            logger: Structured logger (module logger if None)
        """
        self.face = face
        self.config = config or LayoutConfig()
        self._shaper = shaper
        self.logger = logger if logger is not None else get_logger("fontscope.generator")
        self.last_stats: GenerationStats | None = None

    def layout(self, request: LayoutRequest) -> Canvas:
        """Lay out a request into a canvas without serializing it.

        Raises:
            ShapingInitError: If vertical layout needs a shaper and none can be built
        """
        resolver = MetricsResolver(self.face, request.font_size)
        compositor = StrokeCompositor(
            export_mode=request.export_mode,
            fill_color=request.text_color,
            stroke_layers=request.stroke_layers,
        )

        generation_logger = GenerationLogger(self.logger)
        generation_logger.log_start(
            text_length=len(request.text),
            font_size=request.font_size,
            direction=request.direction.value,
            mode=request.export_mode.value,
            layers_per_glyph=compositor.layers_per_glyph,
        )

        if request.direction is WritingDirection.VERTICAL:
            engine = VerticalLayoutEngine(
                face=self.face,
                shaper=self._get_shaper(),
                resolver=resolver,
                compositor=compositor,
                config=self.config,
                generation_logger=generation_logger,
            )
            canvas = engine.layout(request.text)
        else:
            canvas = HorizontalLayoutEngine(
                face=self.face,
                resolver=resolver,
                compositor=compositor,
                config=self.config,
                generation_logger=generation_logger,
            ).layout(request.text)

        generation_logger.log_complete(canvas.width, canvas.height)
        self.last_stats = generation_logger.stats
        return canvas

    def generate(self, request: LayoutRequest) -> str:
        """Generate the SVG document for a request."""
        canvas = self.layout(request)
        return DocumentSerializer(self.config.coordinate_precision).serialize(canvas)

    def _get_shaper(self) -> HarfBuzzShaper:
        if self._shaper is None:
            self._shaper = HarfBuzzShaper(self.face.data, self.face.face_index)
        return self._shaper


def generate_svg(
    face: FontFace,
    request: LayoutRequest,
    shaper: HarfBuzzShaper | None = None,
    config: LayoutConfig | None = None,
) -> str:
    """Generate an SVG document from a parsed face and a request.

    Raises:
        ShapingInitError: If vertical layout is requested and shaping cannot start
    """
    return SvgGenerator(face, config=config, shaper=shaper).generate(request)


@dataclass
class RenderOutcome:
    """Result of a full render request.

    Exactly one of ``svg`` and ``error`` is set.
    """

    svg: str | None = None
    error: FontScopeError | None = None
    stats: GenerationStats | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, str | None]:
        """Serialize for a UI bridge or JSON response."""
        if self.error is None:
            return {"svg": self.svg, "error": None, "error_type": None}
        return {
            "svg": None,
            "error": str(self.error),
            "error_type": type(self.error).__name__,
        }


def render_request(
    request: RenderRequest,
    resolver: FontResolver,
    config: LayoutConfig | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> RenderOutcome:
    """Resolve the font, parse it and generate the SVG.

    Font and shaping failures are returned in the outcome, never raised.
    """
    log = logger if logger is not None else get_logger("fontscope.generator")
    try:
        resolved = resolver.resolve(request.font_name)
        face = resolved.load_face()
        with face:
            generator = SvgGenerator(face, config=config, logger=log)
            svg = generator.generate(request)
            return RenderOutcome(svg=svg, stats=generator.last_stats)
    except FontScopeError as e:
        log.warning(
            "Render failed",
            font=request.font_name,
            error=str(e),
            error_type=type(e).__name__,
        )
        return RenderOutcome(error=e)
