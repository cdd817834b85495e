import logging
import re
from typing import List, Optional

from reportlab.pdfgen import canvas
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.lib.colors import Color, HexColor, black, white
from reportlab.lib.units import inch

from kdp_cover.cover.geometry import CoverLayout, CoverSpec, Rect, SpineGeometryCalculator

logger = logging.getLogger(__name__)

TITLE_FONT = "Helvetica-Bold"
BODY_FONT = "Helvetica"
# Helvetica cap height per point of font size
CAP_HEIGHT = 0.718

_HEX_RE = re.compile(r"^#?([0-9a-f]{6})$", re.IGNORECASE)


def title_font_size(title: str) -> float:
    """Shorter titles get bigger type."""
    n = len(title)
    if n < 20:
        return 48.0
    if n < 30:
        return 42.0
    if n < 40:
        return 36.0
    if n < 50:
        return 30.0
    return 24.0


def wrap_text(text: str, font_name: str, font_size: float, max_width_pt: float) -> List[str]:
    """Greedy word wrap. A single word wider than max_width_pt stays on its own line."""
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and stringWidth(candidate, font_name, font_size) > max_width_pt:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def parse_hex_color(value: Optional[str], default: Color = white) -> Color:
    # Unparseable colors fall back to the default rather than failing the render
    if not value:
        return default
    m = _HEX_RE.match(value.strip())
    if not m:
        return default
    return HexColor("#" + m.group(1))


def sanitize_filename(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def _draw_guides(c: canvas.Canvas, layout: CoverLayout):
    g = layout.geometry
    height_pt = g.total_height * inch

    # Trim line
    c.setStrokeColorRGB(1, 0, 0)
    c.setLineWidth(0.5)
    x, y, w, h = g.trim_rect.to_points()
    c.rect(x, y, w, h, fill=0, stroke=1)

    # Spine folds
    c.setStrokeColorRGB(0, 0, 1)
    spine_left = g.spine_start_x * inch
    spine_right = (g.spine_start_x + g.spine_width) * inch
    c.line(spine_left, 0, spine_left, height_pt)
    c.line(spine_right, 0, spine_right, height_pt)

    # Safe zones
    c.setStrokeColorRGB(0, 0.6, 0)
    c.setDash(3, 3)
    for _, zone in layout.safe_zones.items():
        if zone.is_degenerate:
            continue
        x, y, w, h = zone.to_points()
        c.rect(x, y, w, h, fill=0, stroke=1)
    c.setDash()


def _draw_front(c: canvas.Canvas, zone: Rect, title: str, subtitle: str, author: str, text_color: Color):
    x, y, w, h = zone.to_points()
    cx = x + w / 2.0
    cy = y + h / 2.0
    max_w = w * 0.8

    c.setFillColor(text_color)
    title_size = title_font_size(title)
    line_height = title_size * 1.3
    title_lines = wrap_text(title, TITLE_FONT, title_size, max_w) if title else []

    current_y = cy + (len(title_lines) * line_height) / 2.0
    c.setFont(TITLE_FONT, title_size)
    for line in title_lines:
        c.drawCentredString(cx, current_y, line)
        current_y -= line_height

    if subtitle:
        sub_size = title_size * 0.5
        current_y -= 20
        c.setFont(BODY_FONT, sub_size)
        for line in wrap_text(subtitle, BODY_FONT, sub_size, max_w):
            c.drawCentredString(cx, current_y, line)
            current_y -= sub_size * 1.3

    if author:
        author_size = title_size * 0.6
        c.setFont(TITLE_FONT, author_size)
        # Baseline 0.75in above the bottom of the safe zone
        c.drawCentredString(cx, y + 0.75 * inch, author)


def spine_font_size(layout: CoverLayout) -> float:
    """Largest spine font whose rotated cap height fits across the spine safe zone."""
    spine_pt = layout.geometry.spine_width * inch
    zone_w = layout.safe_zones.spine.width * inch
    return min(12.0, spine_pt * 0.6, zone_w / CAP_HEIGHT)


def _draw_spine(c: canvas.Canvas, layout: CoverLayout, title: str, text_color: Color):
    g = layout.geometry
    size = spine_font_size(layout)
    zone_h = layout.safe_zones.spine.height * inch

    text = title.upper()
    # Trim to what fits along the spine safe zone
    while text and stringWidth(text, BODY_FONT, size) > zone_h:
        text = text[:-1]
    if not text:
        return
    if text != title.upper():
        logger.debug("Spine title shortened to %r (%d of %d chars) at %.2f pt", text, len(text), len(title), size)

    c.saveState()
    c.setFillColor(text_color)
    c.setFont(BODY_FONT, size)
    c.translate((g.spine_start_x + g.spine_width / 2.0) * inch, (g.bleed + g.height / 2.0) * inch)
    c.rotate(90)
    # Caps centered across the spine
    c.drawCentredString(0, -size * CAP_HEIGHT / 2.0, text)
    c.restoreState()


def _draw_back(c: canvas.Canvas, layout: CoverLayout, back_text: str, author_bio: str, text_color: Color):
    x, y, w, h = layout.safe_zones.back.to_points()
    c.setFillColor(text_color)

    if back_text:
        size = 11.0
        current_y = y + h - size
        c.setFont(BODY_FONT, size)
        for line in wrap_text(back_text, BODY_FONT, size, w)[:25]:
            c.drawString(x, current_y, line)
            current_y -= size * 1.4

    if author_bio:
        size = 9.0
        current_y = y + 2 * inch
        c.setFont(BODY_FONT, 10)
        c.drawString(x, current_y, "About the Author")
        current_y -= 20
        c.setFont(BODY_FONT, size)
        for line in wrap_text(author_bio, BODY_FONT, size, w)[:5]:
            c.drawString(x, current_y, line)
            current_y -= size * 1.4

    # Barcode placeholder
    bx, by, bw, bh = layout.barcode_area.to_points()
    c.setStrokeColorRGB(0.8, 0.8, 0.8)
    c.setLineWidth(1)
    c.rect(bx, by, bw, bh, fill=0, stroke=1)
    c.setFillColorRGB(0.6, 0.6, 0.6)
    c.setFont(BODY_FONT, 8)
    c.drawCentredString(bx + bw / 2.0, by + bh / 2.0, "ISBN BARCODE")


def generate_cover(
    spec: CoverSpec,
    out_path: str,
    title: str = "",
    subtitle: str = "",
    author: str = "",
    back_text: str = "",
    author_bio: str = "",
    bg_color: Optional[str] = None,
    text_color: Optional[str] = None,
    draw_guides: bool = False,
    calculator: Optional[SpineGeometryCalculator] = None,
) -> CoverLayout:
    calculator = calculator or SpineGeometryCalculator()
    layout = calculator.layout(spec)
    g = layout.geometry
    width_pt = g.total_width * inch
    height_pt = g.total_height * inch
    logger.debug("Cover %s: %.2f x %.2f pt, spine %.4f in", spec.trim_size.value, width_pt, height_pt, g.spine_width)

    c = canvas.Canvas(out_path, pagesize=(width_pt, height_pt))
    c.setTitle(title or "Cover")

    # Background
    c.setFillColor(parse_hex_color(bg_color, white))
    c.rect(0, 0, width_pt, height_pt, fill=1, stroke=0)

    fg = parse_hex_color(text_color, black)
    _draw_front(c, layout.safe_zones.front, title, subtitle, author, fg)
    if title and layout.spine_text_allowed:
        _draw_spine(c, layout, title, fg)
    elif title:
        logger.info("Spine %.4f in is too narrow for text; spine left blank", g.spine_width)
    _draw_back(c, layout, back_text, author_bio, fg)

    if draw_guides:
        _draw_guides(c, layout)

    c.showPage()
    c.save()
    logger.info("Wrote cover %s", out_path)
    return layout
