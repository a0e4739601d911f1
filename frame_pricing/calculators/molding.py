"""
Molding cost: outer molding plus the optional inner molding, then the
quality adjustment. Quality touches the molding subtotal and nothing else.

Outer price per linear meter, first match wins:
1. manual price on the order line
2. thickness-specific catalog price
3. the molding's own catalog price
4. zero
"""

import logging
from decimal import Decimal
from ..errors import MissingInnerMoldingPrice
from ..models import FrameKind, FrameQuality
from .base import ZERO, round2, round_to_half

logger = logging.getLogger(__name__)

INNER_MOLDING_NAME = "INTERNA"
MDF_MATBOARD_PREFIX = "MDF_"
FINA_MULTIPLIER = Decimal("1.8")   # +80% on the molding subtotal


def resolve_molding_price(line, snapshot) -> Decimal:
    if line.custom_molding_price_per_m is not None:
        return line.custom_molding_price_per_m
    if snapshot.molding_thickness_price_per_m is not None:
        return snapshot.molding_thickness_price_per_m
    if snapshot.molding_price_per_m is not None:
        return snapshot.molding_price_per_m
    return ZERO


def is_inner_molding_eligible(line, matboard) -> bool:
    """Inner molding only goes inside CON_FONDO frames on an MDF_ matboard, and only when asked for."""
    if line.kind != FrameKind.CON_FONDO or not line.inner_molding_enabled:
        return False
    name = matboard.name if matboard is not None else ""
    return name.startswith(MDF_MATBOARD_PREFIX)


def resolve_inner_molding_price(line, snapshot) -> Decimal:
    if line.inner_molding_custom_price_per_m is not None:
        return line.inner_molding_custom_price_per_m
    if snapshot.inner_molding_price_per_m is not None:
        return snapshot.inner_molding_price_per_m
    raise MissingInnerMoldingPrice(line.company_id, INNER_MOLDING_NAME)


def apply_quality(subtotal: Decimal, quality: FrameQuality) -> Decimal:
    if FrameQuality(quality) == FrameQuality.FINA:
        return round_to_half(subtotal * FINA_MULTIPLIER)
    return round2(subtotal)


def molding_subtotal(line, geometry, snapshot) -> Decimal:
    """Outer + inner molding before the quality adjustment. Not rounded."""
    outer_cost = geometry.perimeter_outer_m * resolve_molding_price(line, snapshot)

    inner_cost = ZERO
    if is_inner_molding_eligible(line, snapshot.matboard):
        # Always the base perimeter, even when the outer molding is extended
        inner_cost = geometry.perimeter_base_m * resolve_inner_molding_price(line, snapshot)
        logger.debug("Inner molding %.2f m -> %s", geometry.perimeter_base_m, inner_cost)

    return outer_cost + inner_cost


def molding_cost(line, geometry, snapshot) -> Decimal:
    return apply_quality(molding_subtotal(line, geometry, snapshot), line.quality)
