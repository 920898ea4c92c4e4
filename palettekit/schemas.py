"""
palettekit Schemas
Pydantic models for palette extraction results.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class ColorEntry(BaseModel):
    """Single color in a palette with dominance ratio."""
    hex: str = Field(
        ...,
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Hex color code in format #RRGGBB"
    )
    rgb: List[int] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Cluster center as [R, G, B], each 0-255"
    )
    ratio: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Share (0.0-1.0) of sampled points assigned to this color"
    )


class PaletteResult(BaseModel):
    """Palette extraction result."""
    colors: List[ColorEntry] = Field(
        ...,
        description="Cluster centers ordered by the selected metric"
    )
    k: int = Field(..., ge=1, description="Number of clusters requested")
    sampled_points: int = Field(..., ge=1, description="Points used for clustering after subsampling")
    iterations: int = Field(..., ge=0, description="K-means passes executed")
    converged: bool = Field(..., description="Whether every center settled within tolerance")
    sort_by: str = Field(..., description="Metric the palette is ordered by")
    ascending: bool = Field(..., description="Whether the palette is ordered smallest first")
    monochromatic: Optional[List[str]] = Field(
        None,
        description="Hex gradient expanded from the palette entry at expand_index"
    )
    processing_ms: float = Field(..., ge=0.0, description="Total processing time in milliseconds")
