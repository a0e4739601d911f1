"""
Pricing engine: entry point for frame order lines.

pick calculator by frame kind → validate → resolve catalog snapshot → calculate.

Validation errors are raised before the catalog is touched. A missing glass
base price or a missing inner molding price aborts the line; nothing partial
is returned.

Input: FrameOrderLine + CatalogResolver
Output: PriceResult
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from .calculators.registry import get_calculator
from .catalog import CatalogResolver, resolve_snapshot
from .config import settings
from .errors import InvalidDimensions, InvalidQuantity
from .schemas import FrameOrderLine, PriceResult

logger = logging.getLogger(__name__)


def validate_line(line: FrameOrderLine) -> None:
    """Range checks. Kind is checked by the registry, first, so CON_BASTIDOR always wins."""
    if line.width_cm <= 0 or line.height_cm <= 0:
        raise InvalidDimensions(line.width_cm, line.height_cm)
    if line.quantity < 1:
        raise InvalidQuantity(line.quantity)
    for item in line.accessories:
        if item.quantity < 1:
            raise InvalidQuantity(item.quantity)


class PricingEngine:
    """
    Prices frame order lines against one catalog.

    Stateless apart from its configuration: the same engine can price lines
    from many threads at once.
    """

    def __init__(self, catalog: CatalogResolver, strict: Optional[bool] = None,
                 max_workers: Optional[int] = None):
        self.catalog = catalog
        self.strict = settings.STRICT_CATALOG if strict is None else strict
        self.max_workers = max_workers or settings.BATCH_MAX_WORKERS

    def price(self, line: FrameOrderLine) -> PriceResult:
        calculator = get_calculator(line.kind)
        validate_line(line)
        snapshot = resolve_snapshot(line, self.catalog, strict=self.strict)
        return calculator.calculate(line, snapshot)

    def price_lines(self, lines: Iterable[FrameOrderLine]) -> List[PriceResult]:
        """
        Price independent lines concurrently. Results keep the input order;
        the first failing line's error propagates. A catalog that is not
        thread_safe is priced on the calling thread.
        """
        lines = list(lines)
        if not lines:
            return []
        if not getattr(self.catalog, "thread_safe", True):
            logger.info("Catalog %s is not thread-safe, pricing %d lines sequentially",
                        type(self.catalog).__name__, len(lines))
            return [self.price(line) for line in lines]
        if len(lines) == 1 or self.max_workers <= 1:
            return [self.price(line) for line in lines]

        workers = min(self.max_workers, len(lines))
        logger.info("Pricing %d lines on %d workers", len(lines), workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="frame-pricing") as pool:
            return list(pool.map(self.price, lines))


def calculate_frame_price(line: FrameOrderLine, catalog: CatalogResolver, *,
                          strict: Optional[bool] = None) -> PriceResult:
    """Price one order line. Raises a PricingError subclass on failure."""
    return PricingEngine(catalog, strict=strict).price(line)


def price_lines(lines: Iterable[FrameOrderLine], catalog: CatalogResolver, *,
                strict: Optional[bool] = None,
                max_workers: Optional[int] = None) -> List[PriceResult]:
    return PricingEngine(catalog, strict=strict, max_workers=max_workers).price_lines(lines)
