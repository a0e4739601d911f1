"""
Cost components: molding (outer, inner, quality), glass, matboard, backing, accessories.

Components work on a CatalogSnapshot directly; no catalog lookups here.
"""

from decimal import Decimal

import pytest

from frame_pricing.calculators.accessories import accessories_cost
from frame_pricing.calculators.geometry import resolve_geometry
from frame_pricing.calculators.glass import glass_cost, glass_price_per_sq_ft
from frame_pricing.calculators.molding import (
    apply_quality,
    is_inner_molding_eligible,
    molding_cost,
    resolve_molding_price,
)
from frame_pricing.calculators.panels import backing_cost, matboard_cost
from frame_pricing.errors import MissingGlassBasePrice, MissingInnerMoldingPrice
from frame_pricing.models import FrameKind, FrameQuality
from frame_pricing.schemas import CatalogSnapshot, FrameOrderLine, MatboardPrice


def _line(**overrides):
    fields = {
        "company_id": 1,
        "molding_ref": 1,
        "width_cm": 40,
        "height_cm": 60,
        "quantity": 1,
        "kind": FrameKind.SIN_FONDO,
    }
    fields.update(overrides)
    return FrameOrderLine(**fields)


def _snapshot(**overrides):
    fields = {
        "molding_price_per_m": Decimal("10"),
        "glass_base_price_per_sq_ft": Decimal("8"),
    }
    fields.update(overrides)
    return CatalogSnapshot(**fields)


def _geometry(line):
    return resolve_geometry(line.width_cm, line.height_cm, line.kind)


MDF = MatboardPrice(name="MDF_BLANCO", price_per_sq_ft=Decimal("2"))
CARTON = MatboardPrice(name="CARTON_NEGRO", price_per_sq_ft=Decimal("1.25"))


# ============================================================
# Molding price priority
# ============================================================

def test_manual_molding_price_wins():
    line = _line(custom_molding_price_per_m=Decimal("12"))
    snap = _snapshot(molding_thickness_price_per_m=Decimal("11"))
    assert resolve_molding_price(line, snap) == Decimal("12")
    assert molding_cost(line, _geometry(line), snap) == Decimal("24.48")


def test_thickness_price_beats_molding_price():
    line = _line()
    snap = _snapshot(molding_thickness_price_per_m=Decimal("11"))
    assert resolve_molding_price(line, snap) == Decimal("11")
    assert molding_cost(line, _geometry(line), snap) == Decimal("22.44")


def test_molding_catalog_price_is_the_fallback():
    line = _line()
    assert molding_cost(line, _geometry(line), _snapshot()) == Decimal("20.40")


def test_unpriced_molding_costs_zero():
    line = _line()
    snap = _snapshot(molding_price_per_m=None)
    assert resolve_molding_price(line, snap) == Decimal("0")
    assert str(molding_cost(line, _geometry(line), snap)) == "0.00"


# ============================================================
# Inner molding
# ============================================================

def test_inner_molding_eligibility_needs_all_three_conditions():
    eligible = _line(kind=FrameKind.CON_FONDO, inner_molding_enabled=True)
    assert is_inner_molding_eligible(eligible, MDF) is True
    assert is_inner_molding_eligible(eligible, CARTON) is False
    assert is_inner_molding_eligible(eligible, None) is False
    assert is_inner_molding_eligible(_line(kind=FrameKind.CON_FONDO), MDF) is False
    assert is_inner_molding_eligible(
        _line(kind=FrameKind.FONDO_TRANSPARENTE, inner_molding_enabled=True), MDF) is False


def test_inner_molding_uses_base_perimeter():
    """30x40 CON_FONDO: outer 1.84 m × 10 + inner 1.44 m × 5."""
    line = _line(kind=FrameKind.CON_FONDO, width_cm=30, height_cm=40, inner_molding_enabled=True)
    snap = _snapshot(matboard=MDF, inner_molding_price_per_m=Decimal("5"))
    assert molding_cost(line, _geometry(line), snap) == Decimal("25.60")


def test_manual_inner_molding_price_wins():
    line = _line(kind=FrameKind.CON_FONDO, width_cm=30, height_cm=40, inner_molding_enabled=True,
                 inner_molding_custom_price_per_m=Decimal("6"))
    snap = _snapshot(matboard=MDF, inner_molding_price_per_m=Decimal("5"))
    assert molding_cost(line, _geometry(line), snap) == Decimal("27.04")


def test_missing_inner_molding_price_is_fatal():
    line = _line(kind=FrameKind.CON_FONDO, width_cm=30, height_cm=40, inner_molding_enabled=True)
    snap = _snapshot(matboard=MDF)
    with pytest.raises(MissingInnerMoldingPrice):
        molding_cost(line, _geometry(line), snap)


def test_missing_inner_price_is_ignored_when_not_eligible():
    line = _line(kind=FrameKind.CON_FONDO, width_cm=30, height_cm=40, inner_molding_enabled=True)
    snap = _snapshot(matboard=CARTON)
    assert molding_cost(line, _geometry(line), snap) == Decimal("18.40")


# ============================================================
# Quality
# ============================================================

def test_simple_quality_rounds_to_cents():
    assert apply_quality(Decimal("21.604"), FrameQuality.SIMPLE) == Decimal("21.60")


def test_fina_quality_adds_80_percent_and_rounds_to_half():
    assert apply_quality(Decimal("21.6"), FrameQuality.FINA) == Decimal("39.00")   # 38.88
    assert apply_quality(Decimal("25.6"), FrameQuality.FINA) == Decimal("46.00")   # 46.08
    assert apply_quality(Decimal("20.4"), FrameQuality.FINA) == Decimal("36.50")   # 36.72


@pytest.mark.parametrize("price", ["3.33", "7.77", "10", "12.49", "15.05", "23.9"])
def test_fina_molding_cost_is_a_multiple_of_fifty_cents(price):
    line = _line(quality=FrameQuality.FINA, width_cm=37, height_cm=51)
    snap = _snapshot(molding_price_per_m=Decimal(price))
    cost = molding_cost(line, _geometry(line), snap)
    assert (cost * 100) % 50 == 0


# ============================================================
# Glass
# ============================================================

def test_glass_price_carries_fifty_percent_markup():
    assert glass_price_per_sq_ft(_line(), _snapshot()) == Decimal("12.0")


def test_glass_single_piece_original_dimensions():
    line = _line()
    assert glass_cost(line, _geometry(line), _snapshot()) == Decimal("31.00")


def test_glass_con_fondo_uses_extended_dimensions():
    line = _line(kind=FrameKind.CON_FONDO, width_cm=30, height_cm=40)
    assert glass_cost(line, _geometry(line), _snapshot()) == Decimal("25.83")


def test_glass_fondo_transparente_two_extended_pieces():
    line = _line(kind=FrameKind.FONDO_TRANSPARENTE, width_cm=30, height_cm=40)
    assert glass_cost(line, _geometry(line), _snapshot()) == Decimal("51.67")


def test_missing_glass_base_price_is_fatal():
    line = _line()
    with pytest.raises(MissingGlassBasePrice):
        glass_cost(line, _geometry(line), _snapshot(glass_base_price_per_sq_ft=None))


# ============================================================
# Matboard / backing
# ============================================================

def test_matboard_only_under_con_fondo():
    con_fondo = _line(kind=FrameKind.CON_FONDO, width_cm=30, height_cm=40)
    assert matboard_cost(con_fondo, _geometry(con_fondo), _snapshot(matboard=MDF)) == Decimal("4.31")

    for kind in (FrameKind.SIN_FONDO, FrameKind.FONDO_TRANSPARENTE, FrameKind.ESPECIAL):
        line = _line(kind=kind, width_cm=30, height_cm=40)
        assert matboard_cost(line, _geometry(line), _snapshot(matboard=MDF)) == Decimal("0")


def test_matboard_without_price_costs_zero():
    line = _line(kind=FrameKind.CON_FONDO)
    assert str(matboard_cost(line, _geometry(line), _snapshot())) == "0.00"
    unpriced = MatboardPrice(name="MDF_BLANCO")
    assert str(matboard_cost(line, _geometry(line), _snapshot(matboard=unpriced))) == "0.00"


def test_backing_dimensions_by_kind():
    snap = _snapshot(backing_price_per_sq_ft=Decimal("1.5"))
    con_fondo = _line(kind=FrameKind.CON_FONDO, width_cm=30, height_cm=40)
    assert backing_cost(con_fondo, _geometry(con_fondo), snap) == Decimal("3.23")

    sin_fondo = _line(kind=FrameKind.SIN_FONDO, width_cm=30, height_cm=40)
    assert backing_cost(sin_fondo, _geometry(sin_fondo), snap) == Decimal("1.94")


def test_backing_never_billed_for_fondo_transparente():
    line = _line(kind=FrameKind.FONDO_TRANSPARENTE, width_cm=30, height_cm=40)
    snap = _snapshot(backing_price_per_sq_ft=Decimal("1.5"))
    assert backing_cost(line, _geometry(line), snap) == Decimal("0")


# ============================================================
# Accessories
# ============================================================

def test_accessories_sum_unit_price_times_quantity():
    line = _line(accessories=[{"ref": 1, "quantity": 2}, {"ref": 2, "quantity": 4}])
    snap = _snapshot(accessory_prices={1: Decimal("0.75"), 2: Decimal("0.1")})
    assert accessories_cost(line, snap) == Decimal("1.90")


def test_unpriced_accessory_adds_nothing():
    line = _line(accessories=[{"ref": 1, "quantity": 2}, {"ref": 9, "quantity": 3}])
    snap = _snapshot(accessory_prices={1: Decimal("0.75")})
    assert accessories_cost(line, snap) == Decimal("1.50")


def test_no_accessories():
    assert str(accessories_cost(_line(), _snapshot())) == "0.00"
