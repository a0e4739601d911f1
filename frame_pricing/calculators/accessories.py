from decimal import Decimal

from .base import ZERO, round2


def accessories_cost(line, snapshot) -> Decimal:
    """Σ unit price × quantity. Accessories with no price add nothing."""
    total = ZERO
    for item in line.accessories:
        unit_price = snapshot.accessory_prices.get(item.ref, ZERO)
        total += unit_price * item.quantity
    return round2(total)
