"""
Calculator registry: maps frame kinds to calculator classes.

CON_BASTIDOR (stretched canvas) is priced by its own calculator and is not
registered here; asking for it raises UnsupportedFrameKind.
"""

from typing import Dict, List

from ..errors import UnsupportedFrameKind
from ..models import FrameKind
from .base import BaseCalculator
from .frame import FrameCalculator

CALCULATOR_REGISTRY: Dict[FrameKind, type] = {
    FrameKind.SIN_FONDO: FrameCalculator,
    FrameKind.CON_FONDO: FrameCalculator,
    FrameKind.FONDO_TRANSPARENTE: FrameCalculator,
    FrameKind.ESPECIAL: FrameCalculator,
}


def _coerce(kind):
    try:
        return FrameKind(kind)
    except ValueError:
        return kind


def get_calculator(kind) -> BaseCalculator:
    """Returns an instance of the calculator for a frame kind, or raises UnsupportedFrameKind."""
    kind = _coerce(kind)
    if kind not in CALCULATOR_REGISTRY:
        raise UnsupportedFrameKind(kind, available=list_calculators())
    return CALCULATOR_REGISTRY[kind]()


def has_calculator(kind) -> bool:
    """Check if a calculator exists for a frame kind."""
    return _coerce(kind) in CALCULATOR_REGISTRY


def list_calculators() -> List[str]:
    """List all registered frame kinds."""
    return [kind.value for kind in CALCULATOR_REGISTRY]
