"""
Spine and full-cover geometry for KDP print covers.

The printed sheet is laid out left to right as back cover, spine, front
cover, with bleed on every outer edge. All values are in inches; use
Rect.to_points() or INCH when drawing.
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from kdp_cover.config.print_spec import KDP_PRINT_SPEC, PrintSpec
from kdp_cover.config.sizes import INCH, BindingType, PaperColor, TrimSize, coerce_enum
from kdp_cover.errors import DegenerateGeometry, InvalidArgument

DEFAULT_CHART_PAGE_COUNTS = (24, 50, 100, 150, 200, 250, 300, 400, 500, 600, 700, 800)

_EPS = 1e-9


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, other: "Rect", tol: float = _EPS) -> bool:
        return (
            other.x >= self.x - tol
            and other.y >= self.y - tol
            and other.right <= self.right + tol
            and other.top <= self.top + tol
        )

    def to_points(self) -> Tuple[float, float, float, float]:
        return (self.x * INCH, self.y * INCH, self.width * INCH, self.height * INCH)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class CoverSpec:
    """One cover request. Strings are accepted for the enum fields."""
    page_count: int
    trim_size: TrimSize
    paper_color: PaperColor = PaperColor.WHITE
    binding_type: BindingType = BindingType.PAPERBACK

    def __post_init__(self):
        _check_page_count(self.page_count)
        object.__setattr__(self, "trim_size", coerce_enum(TrimSize, self.trim_size, "trim size"))
        object.__setattr__(self, "paper_color", coerce_enum(PaperColor, self.paper_color, "paper color"))
        object.__setattr__(self, "binding_type", coerce_enum(BindingType, self.binding_type, "binding type"))


@dataclass(frozen=True)
class CoverGeometry:
    spine_width: float
    total_width: float
    total_height: float
    front_width: float
    back_width: float
    height: float
    bleed: float
    front_start_x: float
    spine_start_x: float
    back_start_x: float

    # Trim rectangles of each panel (bleed excluded)
    @property
    def back_panel(self) -> Rect:
        return Rect(self.back_start_x, self.bleed, self.back_width, self.height)

    @property
    def spine_panel(self) -> Rect:
        return Rect(self.spine_start_x, self.bleed, self.spine_width, self.height)

    @property
    def front_panel(self) -> Rect:
        return Rect(self.front_start_x, self.bleed, self.front_width, self.height)

    @property
    def trim_rect(self) -> Rect:
        return Rect(self.bleed, self.bleed, self.total_width - 2 * self.bleed, self.height)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class SafeZones:
    front: Rect
    spine: Rect
    back: Rect

    def degenerate_panels(self) -> Tuple[str, ...]:
        return tuple(name for name, rect in self.items() if rect.is_degenerate)

    def items(self) -> Tuple[Tuple[str, Rect], ...]:
        return (("front", self.front), ("spine", self.spine), ("back", self.back))

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {name: rect.to_dict() for name, rect in self.items()}


@dataclass(frozen=True)
class CoverLayout:
    spec: CoverSpec
    geometry: CoverGeometry
    safe_zones: SafeZones
    spine_text_allowed: bool
    barcode_area: Rect

    def to_dict(self) -> Dict[str, Any]:
        g = self.geometry
        return {
            "trim_size": self.spec.trim_size.value,
            "page_count": self.spec.page_count,
            "paper_color": self.spec.paper_color.value,
            "binding_type": self.spec.binding_type.value,
            "spine_width": g.spine_width,
            "total_width": g.total_width,
            "total_height": g.total_height,
            "front_width": g.front_width,
            "back_width": g.back_width,
            "height": g.height,
            "bleed": g.bleed,
            "front_start_x": g.front_start_x,
            "spine_start_x": g.spine_start_x,
            "back_start_x": g.back_start_x,
            "safe_zones": self.safe_zones.to_dict(),
            "spine_text_allowed": self.spine_text_allowed,
            "barcode_area": self.barcode_area.to_dict(),
        }


def _check_page_count(page_count: Any) -> None:
    # bool is an int subclass; True pages is not a page count
    if isinstance(page_count, bool) or not isinstance(page_count, int):
        raise InvalidArgument("page count", page_count, "must be an integer")
    if page_count <= 0:
        raise InvalidArgument("page count", page_count, "must be positive")


class SpineGeometryCalculator:
    """Turns book metadata into print-ready cover geometry.

    Stateless apart from the injected PrintSpec, so one instance can be
    shared freely between threads.
    """

    def __init__(self, print_spec: Optional[PrintSpec] = None):
        self.print_spec = print_spec or KDP_PRINT_SPEC

    def calculate_spine_width(
        self,
        page_count: int,
        paper_color: Union[PaperColor, str],
        binding_type: Union[BindingType, str] = BindingType.PAPERBACK,
    ) -> float:
        _check_page_count(page_count)
        paper_color = coerce_enum(PaperColor, paper_color, "paper color")
        binding_type = coerce_enum(BindingType, binding_type, "binding type")

        spine_width = page_count * self.print_spec.thickness(paper_color, binding_type)
        return max(spine_width, self.print_spec.min_spine_width)

    def calculate_cover_dimensions(self, trim_size: Union[TrimSize, str], spine_width: float) -> CoverGeometry:
        trim_size = coerce_enum(TrimSize, trim_size, "trim size")
        if isinstance(spine_width, bool) or not isinstance(spine_width, (int, float)):
            raise InvalidArgument("spine width", spine_width, "must be a number")
        if not math.isfinite(spine_width):
            raise InvalidArgument("spine width", spine_width, "must be finite")
        if spine_width < 0:
            raise InvalidArgument("spine width", spine_width, "must not be negative")

        bleed = self.print_spec.bleed
        front_width = trim_size.width
        back_width = trim_size.width
        height = trim_size.height

        return CoverGeometry(
            spine_width=spine_width,
            total_width=back_width + spine_width + front_width + 2 * bleed,
            total_height=height + 2 * bleed,
            front_width=front_width,
            back_width=back_width,
            height=height,
            bleed=bleed,
            front_start_x=bleed + back_width + spine_width,
            spine_start_x=bleed + back_width,
            back_start_x=bleed,
        )

    def calculate_safe_zones(
        self,
        geometry: CoverGeometry,
        spine_width: float,
        allow_degenerate_spine: bool = False,
    ) -> SafeZones:
        """Inset each panel by its safe margin.

        Raises DegenerateGeometry when a zone ends up with no area. With
        allow_degenerate_spine the spine zone is returned as computed and the
        caller decides what to do with it.
        """
        margin = self.print_spec.cover_safe_margin
        spine_margin = self.print_spec.spine_safe_margin
        y = geometry.bleed + margin
        height = geometry.height - margin * 2

        zones = SafeZones(
            front=Rect(
                x=geometry.front_start_x + margin,
                y=y,
                width=geometry.front_width - margin * 2,
                height=height,
            ),
            spine=Rect(
                x=geometry.spine_start_x + spine_margin,
                y=y,
                width=spine_width - spine_margin * 2,
                height=height,
            ),
            # Trailing edge gives up room for the barcode
            back=Rect(
                x=geometry.back_start_x + margin,
                y=y,
                width=geometry.back_width - margin * 2 - self.print_spec.barcode_reserve_width,
                height=height,
            ),
        )

        for panel, rect in zones.items():
            if panel == "spine" and allow_degenerate_spine:
                continue
            if rect.is_degenerate:
                raise DegenerateGeometry(panel, rect)
        return zones

    def barcode_area(self, geometry: CoverGeometry) -> Rect:
        """Area kept clear for the ISBN barcode, bottom of the back cover beside the spine."""
        margin = self.print_spec.cover_safe_margin
        reserve = self.print_spec.barcode_reserve_width
        return Rect(
            x=geometry.spine_start_x - margin - reserve,
            y=geometry.bleed + margin,
            width=reserve,
            height=min(reserve * 0.6, geometry.height - margin * 2),
        )

    def spine_width_chart(
        self,
        page_counts: Iterable[int] = DEFAULT_CHART_PAGE_COUNTS,
        binding_type: Union[BindingType, str] = BindingType.PAPERBACK,
    ) -> Dict[int, Dict[str, float]]:
        return {
            page_count: {
                color.value: self.calculate_spine_width(page_count, color, binding_type)
                for color in PaperColor
            }
            for page_count in page_counts
        }

    def layout(self, spec: CoverSpec) -> CoverLayout:
        spine_width = self.calculate_spine_width(spec.page_count, spec.paper_color, spec.binding_type)
        geometry = self.calculate_cover_dimensions(spec.trim_size, spine_width)
        zones = self.calculate_safe_zones(geometry, spine_width, allow_degenerate_spine=True)
        spine_text_allowed = (
            not zones.spine.is_degenerate
            and spine_width >= self.print_spec.spine_text_min_width
        )
        return CoverLayout(
            spec=spec,
            geometry=geometry,
            safe_zones=zones,
            spine_text_allowed=spine_text_allowed,
            barcode_area=self.barcode_area(geometry),
        )
