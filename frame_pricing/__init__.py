"""
Frame and glass pricing engine.

    from frame_pricing import calculate_frame_price, FrameOrderLine, InMemoryCatalog
"""

from .catalog import CatalogResolver, InMemoryCatalog
from .errors import (
    PricingError,
    InvalidDimensions,
    InvalidQuantity,
    UnsupportedFrameKind,
    MissingGlassBasePrice,
    MissingInnerMoldingPrice,
    MissingCatalogEntry,
)
from .models import FrameKind, FrameQuality, GlassFamily
from .pricing_engine import PricingEngine, calculate_frame_price, price_lines
from .schemas import AccessoryRequest, CostBreakdown, FrameOrderLine, PriceResult

__all__ = [
    "AccessoryRequest",
    "CatalogResolver",
    "CostBreakdown",
    "FrameKind",
    "FrameOrderLine",
    "FrameQuality",
    "GlassFamily",
    "InMemoryCatalog",
    "InvalidDimensions",
    "InvalidQuantity",
    "MissingCatalogEntry",
    "MissingGlassBasePrice",
    "MissingInnerMoldingPrice",
    "PriceResult",
    "PricingEngine",
    "PricingError",
    "UnsupportedFrameKind",
    "calculate_frame_price",
    "price_lines",
]
