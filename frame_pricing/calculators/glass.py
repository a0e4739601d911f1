"""
Glass cost. Frames always use the PLANO 2mm base price plus a fixed 50%
for cutting and fitting; the glass type is not selectable here.
"""

from decimal import Decimal

from ..errors import MissingGlassBasePrice
from ..models import GlassFamily
from .base import round2

GLASS_FAMILY = GlassFamily.PLANO
GLASS_THICKNESS_MM = 2
GLASS_MARKUP = Decimal("1.5")


def glass_price_per_sq_ft(line, snapshot) -> Decimal:
    base = snapshot.glass_base_price_per_sq_ft
    if base is None:
        raise MissingGlassBasePrice(GLASS_FAMILY, GLASS_THICKNESS_MM, line.company_id)
    return base * GLASS_MARKUP


def glass_cost(line, geometry, snapshot) -> Decimal:
    price = glass_price_per_sq_ft(line, snapshot)
    return round2(geometry.glass_pieces * geometry.glass_area_sq_ft * price)
