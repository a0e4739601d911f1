"""
Catalog access for the pricing engine.

The engine never talks to the database directly. It receives a CatalogResolver
and resolves every price one order line needs into a CatalogSnapshot before
any cost is computed, so a single calculation sees one point-in-time view of
the catalog.

Two resolvers ship with the package:
- InMemoryCatalog: dict-backed; used by tests, scripts and batch pricing
- SqlCatalogResolver (sql_catalog.py): read-only lookups over the pricing tables

All prices are Decimal. Molding prices are per linear meter, glass/matboard/
backing per square foot, accessories per unit.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, Iterable, Optional

from .errors import MissingCatalogEntry
from .models import GlassFamily
from .schemas import CatalogSnapshot, FrameOrderLine, MatboardPrice
from .calculators.glass import GLASS_FAMILY, GLASS_THICKNESS_MM
from .calculators.molding import INNER_MOLDING_NAME, is_inner_molding_eligible

logger = logging.getLogger(__name__)


def to_decimal(value) -> Optional[Decimal]:
    """Coerce a catalog value to Decimal. None stays None; floats go through str()."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class CatalogResolver(ABC):
    """
    Read-only price lookups, scoped by company. Missing or inactive entries return None.

    Set thread_safe = False on resolvers that must not be called from several
    threads at once; batch pricing then runs their lines one after another.
    """

    thread_safe = True

    @abstractmethod
    def resolve_molding_price(self, ref: int, company_id: int) -> Optional[Decimal]:
        pass

    @abstractmethod
    def resolve_molding_thickness_price(self, ref: int, company_id: int) -> Optional[Decimal]:
        pass

    @abstractmethod
    def resolve_molding_by_name(self, name: str, company_id: int) -> Optional[Decimal]:
        pass

    @abstractmethod
    def resolve_glass_base_price(self, family: GlassFamily, thickness_mm,
                                 company_id: int) -> Optional[Decimal]:
        pass

    @abstractmethod
    def resolve_matboard_price(self, ref: int, company_id: int) -> Optional[MatboardPrice]:
        """Active matboard with its name; price_per_sq_ft may be None."""
        pass

    @abstractmethod
    def resolve_backing_price(self, ref: int, company_id: int) -> Optional[Decimal]:
        pass

    @abstractmethod
    def resolve_accessory_prices(self, refs: Iterable[int], company_id: int) -> Dict[int, Decimal]:
        """Returns prices for the refs that resolve; unknown refs are simply absent."""
        pass


class InMemoryCatalog(CatalogResolver):
    """
    Dict-backed catalog keyed by (company_id, ref).

    Entries are stored as dicts so inactive rows can be kept around the same
    way the pricing tables keep them.
    """

    def __init__(self):
        self.moldings: Dict[tuple, dict] = {}
        self.molding_thicknesses: Dict[tuple, dict] = {}
        self.glass: Dict[tuple, dict] = {}
        self.matboards: Dict[tuple, dict] = {}
        self.backings: Dict[tuple, dict] = {}
        self.accessories: Dict[tuple, dict] = {}

    # --- Loading ---

    def add_molding(self, ref: int, price_per_m, name: str = "", company_id: int = 1,
                    is_active: bool = True) -> "InMemoryCatalog":
        self.moldings[(company_id, ref)] = {
            "name": name, "price": to_decimal(price_per_m), "is_active": is_active,
        }
        return self

    def add_molding_thickness(self, ref: int, price_per_m, name: str = "", company_id: int = 1,
                              is_active: bool = True) -> "InMemoryCatalog":
        self.molding_thicknesses[(company_id, ref)] = {
            "name": name, "price": to_decimal(price_per_m), "is_active": is_active,
        }
        return self

    def add_glass(self, price_per_sq_ft, family: GlassFamily = GlassFamily.PLANO,
                  thickness_mm=2, company_id: int = 1, is_active: bool = True) -> "InMemoryCatalog":
        key = (company_id, GlassFamily(family), to_decimal(thickness_mm))
        self.glass[key] = {"price": to_decimal(price_per_sq_ft), "is_active": is_active}
        return self

    def add_matboard(self, ref: int, price_per_sq_ft, name: str = "", company_id: int = 1,
                     is_active: bool = True) -> "InMemoryCatalog":
        self.matboards[(company_id, ref)] = {
            "name": name, "price": to_decimal(price_per_sq_ft), "is_active": is_active,
        }
        return self

    def add_backing(self, ref: int, price_per_sq_ft, name: str = "", company_id: int = 1,
                    is_active: bool = True) -> "InMemoryCatalog":
        self.backings[(company_id, ref)] = {
            "name": name, "price": to_decimal(price_per_sq_ft), "is_active": is_active,
        }
        return self

    def add_accessory(self, ref: int, price, name: str = "", company_id: int = 1,
                      is_active: bool = True) -> "InMemoryCatalog":
        self.accessories[(company_id, ref)] = {
            "name": name, "price": to_decimal(price), "is_active": is_active,
        }
        return self

    # --- CatalogResolver ---

    def _active(self, table: dict, key) -> Optional[dict]:
        row = table.get(key)
        if row is None or not row["is_active"]:
            return None
        return row

    def _price(self, table: dict, key) -> Optional[Decimal]:
        row = self._active(table, key)
        return row["price"] if row else None

    def resolve_molding_price(self, ref, company_id):
        return self._price(self.moldings, (company_id, ref))

    def resolve_molding_thickness_price(self, ref, company_id):
        return self._price(self.molding_thicknesses, (company_id, ref))

    def resolve_molding_by_name(self, name, company_id):
        for (row_company, _ref), row in sorted(self.moldings.items()):
            if row_company == company_id and row["is_active"] and row["name"] == name:
                if row["price"] is not None:
                    return row["price"]
        return None

    def resolve_glass_base_price(self, family, thickness_mm, company_id):
        key = (company_id, GlassFamily(family), to_decimal(thickness_mm))
        return self._price(self.glass, key)

    def resolve_matboard_price(self, ref, company_id):
        row = self._active(self.matboards, (company_id, ref))
        if row is None:
            return None
        return MatboardPrice(name=row["name"], price_per_sq_ft=row["price"])

    def resolve_backing_price(self, ref, company_id):
        return self._price(self.backings, (company_id, ref))

    def resolve_accessory_prices(self, refs, company_id):
        prices = {}
        for ref in refs:
            price = self._price(self.accessories, (company_id, ref))
            if price is not None:
                prices[ref] = price
        return prices


def resolve_snapshot(line: FrameOrderLine, catalog: CatalogResolver,
                     strict: bool = False) -> CatalogSnapshot:
    """
    Resolve every price `line` references, once.

    Lookups whose result could never be used are skipped (no molding lookups
    when a manual molding price is given, no INTERNA lookup unless the inner
    molding applies and has no manual price). In strict mode a supplied ref
    that does not resolve raises MissingCatalogEntry instead of costing zero.
    """
    company_id = line.company_id

    molding_price = None
    thickness_price = None
    if line.custom_molding_price_per_m is None:
        if line.molding_thickness_ref is not None:
            thickness_price = catalog.resolve_molding_thickness_price(
                line.molding_thickness_ref, company_id)
        if line.molding_ref is not None:
            molding_price = catalog.resolve_molding_price(line.molding_ref, company_id)

        if molding_price is None and thickness_price is None:
            if line.molding_ref is not None:
                entity, ref = "Molding", line.molding_ref
            else:
                entity, ref = "Molding thickness", line.molding_thickness_ref
            if ref is not None:
                if strict:
                    raise MissingCatalogEntry(entity, ref, company_id)
                logger.warning("%s %s has no active price (company %s), molding priced at 0",
                               entity, ref, company_id)

    glass_base = catalog.resolve_glass_base_price(GLASS_FAMILY, GLASS_THICKNESS_MM, company_id)

    matboard = None
    if line.matboard_ref is not None:
        matboard = catalog.resolve_matboard_price(line.matboard_ref, company_id)
        if matboard is None or matboard.price_per_sq_ft is None:
            if strict:
                raise MissingCatalogEntry("Matboard", line.matboard_ref, company_id)
            logger.warning("Matboard %s has no active price (company %s)",
                           line.matboard_ref, company_id)

    backing = None
    if line.backing_ref is not None:
        backing = catalog.resolve_backing_price(line.backing_ref, company_id)
        if backing is None:
            if strict:
                raise MissingCatalogEntry("Backing", line.backing_ref, company_id)
            logger.warning("Backing %s has no active price (company %s)",
                           line.backing_ref, company_id)

    accessory_prices = {}
    if line.accessories:
        refs = sorted({item.ref for item in line.accessories})
        accessory_prices = dict(catalog.resolve_accessory_prices(refs, company_id))
        for ref in refs:
            if ref not in accessory_prices:
                if strict:
                    raise MissingCatalogEntry("Accessory", ref, company_id)
                logger.warning("Accessory %s has no active price (company %s)", ref, company_id)

    inner_price = None
    if (is_inner_molding_eligible(line, matboard)
            and line.inner_molding_custom_price_per_m is None):
        inner_price = catalog.resolve_molding_by_name(INNER_MOLDING_NAME, company_id)

    return CatalogSnapshot(
        molding_price_per_m=to_decimal(molding_price),
        molding_thickness_price_per_m=to_decimal(thickness_price),
        inner_molding_price_per_m=to_decimal(inner_price),
        glass_base_price_per_sq_ft=to_decimal(glass_base),
        matboard=matboard,
        backing_price_per_sq_ft=to_decimal(backing),
        accessory_prices={ref: to_decimal(price) for ref, price in accessory_prices.items()},
    )

