"""
Cover API endpoints

Geometry lookups for the editor: full cover layout and the spine width chart.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from kdp_cover.config.sizes import BindingType
from kdp_cover.cover.geometry import CoverSpec, SpineGeometryCalculator
from web.backend.config import get_calculator
from web.backend.models.cover import (
    CoverGeometryRequest,
    CoverGeometryResponse,
    SpineChartResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/geometry", response_model=CoverGeometryResponse)
async def cover_geometry(
    request: CoverGeometryRequest,
    calculator: SpineGeometryCalculator = Depends(get_calculator),
):
    """Compute spine width, full cover size and safe zones"""
    spec = CoverSpec(
        page_count=request.page_count,
        trim_size=request.trim_size,
        paper_color=request.paper_color,
        binding_type=request.binding_type,
    )
    layout = calculator.layout(spec)
    logger.info(
        "Cover geometry %s/%d pages: %.4f x %.4f in",
        spec.trim_size.value, spec.page_count, layout.geometry.total_width, layout.geometry.total_height,
    )
    return CoverGeometryResponse(**layout.to_dict())


@router.get("/spine-chart", response_model=SpineChartResponse)
async def spine_chart(
    binding_type: BindingType = Query(BindingType.PAPERBACK),
    pages: Optional[List[int]] = Query(None, description="Page counts; defaults to the standard chart"),
    calculator: SpineGeometryCalculator = Depends(get_calculator),
):
    """Spine width reference chart for white and cream paper"""
    if pages:
        chart = calculator.spine_width_chart(pages, binding_type)
    else:
        chart = calculator.spine_width_chart(binding_type=binding_type)
    return SpineChartResponse(binding_type=binding_type, chart=chart)
