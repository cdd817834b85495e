"""KDP print-cover geometry, rendering and validation"""

from kdp_cover.errors import CoverError, InvalidArgument, DegenerateGeometry
from kdp_cover.config.sizes import TrimSize, PaperColor, BindingType
from kdp_cover.config.print_spec import PrintSpec, KDP_PRINT_SPEC, load_print_spec
from kdp_cover.cover.geometry import (
    CoverSpec,
    CoverGeometry,
    CoverLayout,
    Rect,
    SafeZones,
    SpineGeometryCalculator,
)

__all__ = [
    "CoverError",
    "InvalidArgument",
    "DegenerateGeometry",
    "TrimSize",
    "PaperColor",
    "BindingType",
    "PrintSpec",
    "KDP_PRINT_SPEC",
    "load_print_spec",
    "CoverSpec",
    "CoverGeometry",
    "CoverLayout",
    "Rect",
    "SafeZones",
    "SpineGeometryCalculator",
]
