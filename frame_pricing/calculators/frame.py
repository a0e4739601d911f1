"""
Molded frame calculator: SIN_FONDO, CON_FONDO, FONDO_TRANSPARENTE, ESPECIAL.

Geometry → component costs → quality (molding only) → unit price → total.
Each component is rounded to cents on its own before the sum is rounded
again, so the breakdown always adds up to the unit price.
"""

import logging

from ..schemas import CostBreakdown, PriceResult
from .accessories import accessories_cost
from .base import BaseCalculator
from .geometry import resolve_geometry
from .glass import glass_cost
from .molding import molding_cost
from .panels import backing_cost, matboard_cost

logger = logging.getLogger(__name__)


class FrameCalculator(BaseCalculator):

    def calculate(self, line, snapshot) -> PriceResult:
        geometry = resolve_geometry(line.width_cm, line.height_cm, line.kind)

        breakdown = CostBreakdown(
            molding_cost=molding_cost(line, geometry, snapshot),
            glass_cost=glass_cost(line, geometry, snapshot),
            matboard_cost=matboard_cost(line, geometry, snapshot),
            backing_cost=backing_cost(line, geometry, snapshot),
            accessories_cost=accessories_cost(line, snapshot),
        )

        unit_price = self.round2(
            breakdown.molding_cost + breakdown.glass_cost + breakdown.matboard_cost
            + breakdown.backing_cost + breakdown.accessories_cost
        )
        total = self.round2(unit_price * line.quantity)

        logger.debug(
            "%s %sx%s cm x%d: molding=%s glass=%s matboard=%s backing=%s accessories=%s unit=%s total=%s",
            line.kind.value, line.width_cm, line.height_cm, line.quantity,
            breakdown.molding_cost, breakdown.glass_cost, breakdown.matboard_cost,
            breakdown.backing_cost, breakdown.accessories_cost, unit_price, total,
        )

        return PriceResult(unit_price=unit_price, total=total, breakdown=breakdown)
