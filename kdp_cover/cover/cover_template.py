"""
Guide template PNG for cover artists.

Draws the bleed, panel folds, safe zones and barcode area on a blank canvas at
print resolution so artwork can be laid out on top of it. Pixel y runs top
down, so rectangles are flipped from the bottom-left cover coordinates.
"""

import logging
from typing import Tuple

from PIL import Image, ImageDraw

from kdp_cover.cover.geometry import CoverLayout, Rect

logger = logging.getLogger(__name__)

BLEED_FILL = (255, 228, 228)
FOLD_COLOR = (0, 0, 255)
SAFE_COLOR = (0, 153, 0)
BARCODE_COLOR = (160, 160, 160)


def _box(rect: Rect, total_height: float, dpi: int) -> Tuple[int, int, int, int]:
    left = round(rect.x * dpi)
    right = round(rect.right * dpi)
    top = round((total_height - rect.top) * dpi)
    bottom = round((total_height - rect.y) * dpi)
    return left, top, right, bottom


def render_template_png(layout: CoverLayout, out_path: str, dpi: int = 300) -> Tuple[int, int]:
    """Write the template and return its pixel size."""
    if dpi <= 0:
        raise ValueError(f"dpi must be positive, got {dpi}")

    g = layout.geometry
    size = (round(g.total_width * dpi), round(g.total_height * dpi))
    img = Image.new("RGB", size, BLEED_FILL)
    draw = ImageDraw.Draw(img)

    # Everything inside the trim line is white; the pink border is bleed
    draw.rectangle(_box(g.trim_rect, g.total_height, dpi), fill=(255, 255, 255))

    line_w = max(1, dpi // 100)
    left, _, right, _ = _box(g.spine_panel, g.total_height, dpi)
    draw.line([(left, 0), (left, size[1])], fill=FOLD_COLOR, width=line_w)
    draw.line([(right, 0), (right, size[1])], fill=FOLD_COLOR, width=line_w)

    for _, zone in layout.safe_zones.items():
        if zone.is_degenerate:
            continue
        draw.rectangle(_box(zone, g.total_height, dpi), outline=SAFE_COLOR, width=line_w)

    draw.rectangle(_box(layout.barcode_area, g.total_height, dpi), outline=BARCODE_COLOR, width=line_w)

    img.save(out_path, format="PNG", dpi=(dpi, dpi))
    logger.info("Wrote cover template %s (%dx%d px)", out_path, size[0], size[1])
    return size
