"""
Cover geometry API models

Request and response bodies for the cover endpoints. All lengths in inches.
"""

from pydantic import BaseModel, Field
from typing import Dict

from kdp_cover.config.sizes import BindingType, PaperColor, TrimSize


class CoverGeometryRequest(BaseModel):
    """Book metadata to compute a cover for"""
    page_count: int = Field(..., description="Interior page count")
    trim_size: TrimSize = Field(..., description="Trim size key")
    paper_color: PaperColor = Field(default=PaperColor.WHITE, description="Interior paper color")
    binding_type: BindingType = Field(default=BindingType.PAPERBACK, description="Binding type")

    class Config:
        json_schema_extra = {
            "example": {
                "page_count": 200,
                "trim_size": "6x9",
                "paper_color": "white",
                "binding_type": "paperback"
            }
        }


class RectModel(BaseModel):
    x: float
    y: float
    width: float
    height: float


class SafeZonesModel(BaseModel):
    front: RectModel
    spine: RectModel
    back: RectModel


class CoverGeometryResponse(BaseModel):
    """Full cover geometry"""
    success: bool = True
    trim_size: TrimSize
    page_count: int
    paper_color: PaperColor
    binding_type: BindingType
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
    safe_zones: SafeZonesModel
    spine_text_allowed: bool = Field(..., description="False when the spine is too narrow for text")
    barcode_area: RectModel


class SpineChartResponse(BaseModel):
    """Spine width by page count for each paper color"""
    success: bool = True
    binding_type: BindingType
    chart: Dict[int, Dict[str, float]]
