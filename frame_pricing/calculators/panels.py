"""
Matboard and backing: both priced per square foot of the panel.
"""

from decimal import Decimal

from .base import ZERO_CENTS, round2


def matboard_cost(line, geometry, snapshot) -> Decimal:
    """Only CON_FONDO carries a matboard; its size is the extended size."""
    matboard = snapshot.matboard
    if not geometry.matboard_applies or matboard is None or matboard.price_per_sq_ft is None:
        return ZERO_CENTS
    return round2(geometry.extended_area_sq_ft * matboard.price_per_sq_ft)


def backing_cost(line, geometry, snapshot) -> Decimal:
    """Never billed for FONDO_TRANSPARENTE. Extended size only under CON_FONDO."""
    if not geometry.backing_applies or snapshot.backing_price_per_sq_ft is None:
        return ZERO_CENTS
    return round2(geometry.backing_area_sq_ft * snapshot.backing_price_per_sq_ft)
