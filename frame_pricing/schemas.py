from decimal import Decimal
from pydantic import BaseModel
from typing import Optional, Tuple, Dict
from .models import FrameKind, FrameQuality


class AccessoryRequest(BaseModel):
    ref: int
    quantity: int = 1

    class Config:
        frozen = True


class FrameOrderLine(BaseModel):
    """One framed item on a quote. Range checks happen in the engine, not here."""
    company_id: int
    molding_ref: Optional[int] = None
    molding_thickness_ref: Optional[int] = None
    matboard_ref: Optional[int] = None
    backing_ref: Optional[int] = None
    accessories: Tuple[AccessoryRequest, ...] = ()
    width_cm: Decimal
    height_cm: Decimal
    quantity: int = 1
    kind: FrameKind
    quality: FrameQuality = FrameQuality.SIMPLE
    custom_molding_price_per_m: Optional[Decimal] = None
    inner_molding_enabled: bool = False
    inner_molding_custom_price_per_m: Optional[Decimal] = None

    class Config:
        frozen = True


class MatboardPrice(BaseModel):
    """An active matboard. The name is kept even when the price is missing (MDF_ check)."""
    name: str
    price_per_sq_ft: Optional[Decimal] = None

    class Config:
        frozen = True


class CatalogSnapshot(BaseModel):
    """Every catalog price one order line needs, resolved once before pricing."""
    molding_price_per_m: Optional[Decimal] = None
    molding_thickness_price_per_m: Optional[Decimal] = None
    inner_molding_price_per_m: Optional[Decimal] = None
    glass_base_price_per_sq_ft: Optional[Decimal] = None
    matboard: Optional[MatboardPrice] = None
    backing_price_per_sq_ft: Optional[Decimal] = None
    accessory_prices: Dict[int, Decimal] = {}

    class Config:
        frozen = True


class CostBreakdown(BaseModel):
    molding_cost: Decimal
    glass_cost: Decimal
    matboard_cost: Decimal
    backing_cost: Decimal
    accessories_cost: Decimal

    class Config:
        frozen = True


class PriceResult(BaseModel):
    unit_price: Decimal
    total: Decimal
    breakdown: CostBreakdown

    class Config:
        frozen = True
