"""
Geometry resolver: per-kind working dimensions for every cost component.

CON_FONDO and FONDO_TRANSPARENTE add 5 cm per side for the glass. Only
CON_FONDO uses that extended size for the outer molding; FONDO_TRANSPARENTE
keeps the base perimeter for molding even though its two glass pieces are
extended.
"""

from dataclasses import dataclass
from decimal import Decimal

from ..models import FrameKind
from .base import ZERO, area_sq_ft, as_decimal, perimeter_m

MOLDING_WASTE_CM = Decimal("4")   # per-cut allowance, every kind
EXTENSION_CM = Decimal("10")      # 5 cm per side


@dataclass(frozen=True)
class KindRules:
    extended: bool            # +5 cm per side for glass / matboard
    outer_uses_extended: bool
    glass_pieces: int
    matboard_applies: bool
    backing_applies: bool
    backing_extended: bool


KIND_RULES = {
    FrameKind.SIN_FONDO: KindRules(
        extended=False, outer_uses_extended=False, glass_pieces=1,
        matboard_applies=False, backing_applies=True,
        backing_extended=False),
    FrameKind.CON_FONDO: KindRules(
        extended=True, outer_uses_extended=True, glass_pieces=1,
        matboard_applies=True, backing_applies=True,
        backing_extended=True),
    FrameKind.FONDO_TRANSPARENTE: KindRules(
        extended=True, outer_uses_extended=False, glass_pieces=2,
        matboard_applies=False, backing_applies=False,
        backing_extended=False),
    FrameKind.ESPECIAL: KindRules(
        extended=False, outer_uses_extended=False, glass_pieces=1,
        matboard_applies=False, backing_applies=True,
        backing_extended=False),
}

# Kinds priced by a different calculator never reach the geometry resolver.
EXTERNAL_KINDS = frozenset({FrameKind.CON_BASTIDOR})

_unmapped = set(FrameKind) - set(KIND_RULES) - EXTERNAL_KINDS
if _unmapped:
    raise RuntimeError(f"Frame kinds without geometry rules: {sorted(k.value for k in _unmapped)}")


@dataclass(frozen=True)
class FrameGeometry:
    kind: FrameKind
    width_cm: Decimal
    height_cm: Decimal
    extended_width_cm: Decimal
    extended_height_cm: Decimal
    perimeter_base_m: Decimal
    perimeter_extended_m: Decimal
    perimeter_outer_m: Decimal
    glass_pieces: int
    glass_width_cm: Decimal
    glass_height_cm: Decimal
    matboard_applies: bool
    backing_applies: bool
    backing_width_cm: Decimal
    backing_height_cm: Decimal

    @property
    def glass_area_sq_ft(self) -> Decimal:
        """Area of one glass piece."""
        return area_sq_ft(self.glass_width_cm, self.glass_height_cm)

    @property
    def extended_area_sq_ft(self) -> Decimal:
        return area_sq_ft(self.extended_width_cm, self.extended_height_cm)

    @property
    def backing_area_sq_ft(self) -> Decimal:
        return area_sq_ft(self.backing_width_cm, self.backing_height_cm)


def rules_for(kind: FrameKind) -> KindRules:
    try:
        return KIND_RULES[FrameKind(kind)]
    except KeyError:
        raise ValueError(f"Frame kind {FrameKind(kind).value} has no geometry rules") from None


def resolve_geometry(width_cm, height_cm, kind: FrameKind) -> FrameGeometry:
    rules = rules_for(kind)
    width = as_decimal(width_cm)
    height = as_decimal(height_cm)
    extension = EXTENSION_CM if rules.extended else ZERO
    ext_width = width + extension
    ext_height = height + extension

    perimeter_base = perimeter_m(width, height, MOLDING_WASTE_CM)
    perimeter_ext = perimeter_m(ext_width, ext_height, MOLDING_WASTE_CM)

    return FrameGeometry(
        kind=FrameKind(kind),
        width_cm=width,
        height_cm=height,
        extended_width_cm=ext_width,
        extended_height_cm=ext_height,
        perimeter_base_m=perimeter_base,
        perimeter_extended_m=perimeter_ext,
        perimeter_outer_m=perimeter_ext if rules.outer_uses_extended else perimeter_base,
        glass_pieces=rules.glass_pieces,
        glass_width_cm=ext_width if rules.extended else width,
        glass_height_cm=ext_height if rules.extended else height,
        matboard_applies=rules.matboard_applies,
        backing_applies=rules.backing_applies,
        backing_width_cm=ext_width if rules.backing_extended else width,
        backing_height_cm=ext_height if rules.backing_extended else height,
    )
