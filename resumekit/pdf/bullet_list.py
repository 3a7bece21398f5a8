"""Bullet list layout shared by all resume templates.

Each bullet is ONE ``Paragraph``: the glyph is drawn at ``bulletIndent``
inside the paragraph's own text flow and the wrapped lines hang at
``leftIndent``. A glyph cell next to a text cell would wrap and paginate
independently of the text; a single paragraph cannot. Every paragraph is
wrapped in ``KeepTogether`` so a bullet moves to the next page as a whole
instead of splitting.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.colors import HexColor
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Flowable, KeepTogether, Paragraph, Spacer


@dataclass(frozen=True)
class BulletListStyle:
    symbol: str = "•"
    symbol_color: str = "#4a6fa5"
    text_color: str = "#374151"
    font_size: float = 8
    line_height: float = 1.4
    indent_width: float = 10


class BulletBlock:
    """Turns an ordered list of bullet strings into atomic layout units."""

    LIST_MARGIN_TOP = 4
    ITEM_SPACING = 3

    def __init__(
        self,
        style: BulletListStyle | None = None,
        font_name: str = "Helvetica",
    ) -> None:
        self._style = style or BulletListStyle()
        self._paragraph_style = self._build_paragraph_style(self._style, font_name)

    @property
    def style(self) -> BulletListStyle:
        return self._style

    def flowables(self, bullets: Sequence[str]) -> list[Flowable]:
        items = [bullet.strip() for bullet in bullets if bullet and bullet.strip()]
        if not items:
            return []
        flowables: list[Flowable] = [Spacer(1, self.LIST_MARGIN_TOP)]
        for item in items:
            paragraph = Paragraph(
                escape(item),
                self._paragraph_style,
                bulletText=self._style.symbol,
            )
            flowables.append(KeepTogether([paragraph]))
        return flowables

    def _build_paragraph_style(self, style: BulletListStyle, font_name: str) -> ParagraphStyle:
        return ParagraphStyle(
            name=f"bullet-{font_name}-{style.font_size}",
            fontName=font_name,
            fontSize=style.font_size,
            leading=style.font_size * style.line_height,
            textColor=HexColor(style.text_color),
            leftIndent=style.indent_width,
            bulletIndent=0,
            bulletFontName=font_name,
            bulletFontSize=max(style.font_size - 1, 1),
            bulletColor=HexColor(style.symbol_color),
            spaceAfter=self.ITEM_SPACING,
        )
