import logging
from dataclasses import dataclass
from typing import List, Optional

from pypdf import PdfReader
from reportlab.lib.units import inch

from kdp_cover.cover.geometry import CoverLayout, CoverSpec, SpineGeometryCalculator

logger = logging.getLogger(__name__)


@dataclass
class CoverIssue:
    level: str  # "error" | "warning" | "info"
    message: str


@dataclass
class CoverReport:
    ok: bool
    width_pt: float
    height_pt: float
    expected_width_pt: float
    expected_height_pt: float
    expected_spine_pt: float
    layout: CoverLayout
    issues: List[CoverIssue]


def validate_cover(
    pdf_path: str,
    spec: CoverSpec,
    calculator: Optional[SpineGeometryCalculator] = None,
    tol: float = 0.5,
) -> CoverReport:
    issues: List[CoverIssue] = []
    calculator = calculator or SpineGeometryCalculator()
    layout = calculator.layout(spec)
    g = layout.geometry
    expected_w = g.total_width * inch
    expected_h = g.total_height * inch

    reader = PdfReader(pdf_path)
    if reader.is_encrypted:
        issues.append(CoverIssue("error", "PDF is encrypted. Covers must be unencrypted."))

    num_pages = len(reader.pages)
    if num_pages != 1:
        issues.append(CoverIssue("error", f"Cover must be a single-page PDF. Found {num_pages} page(s)."))

    w = h = 0.0
    if num_pages > 0:
        media = reader.pages[0].mediabox
        w = float(media.width)
        h = float(media.height)
        logger.debug("Cover %s: %.2f x %.2f pt, expected %.2f x %.2f pt", pdf_path, w, h, expected_w, expected_h)

        if abs(w - expected_w) > tol or abs(h - expected_h) > tol:
            issues.append(CoverIssue(
                "error",
                f"Page size {w:.2f}x{h:.2f} pt does not match expected cover {expected_w:.2f}x{expected_h:.2f} pt."
            ))

    if not layout.spine_text_allowed:
        issues.append(CoverIssue(
            "info",
            f"Spine {g.spine_width:.4f} in is below {calculator.print_spec.spine_text_min_width} in; keep the spine free of text."
        ))

    ok = not any(i.level == "error" for i in issues)
    return CoverReport(
        ok=ok,
        width_pt=w,
        height_pt=h,
        expected_width_pt=expected_w,
        expected_height_pt=expected_h,
        expected_spine_pt=g.spine_width * inch,
        layout=layout,
        issues=issues,
    )
