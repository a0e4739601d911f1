"""
CatalogResolver over the pricing tables.

Read-only: every method is a single SELECT through the session the caller
hands in, so all lookups for one order line share the caller's transaction.
Sessions are not thread-safe, so batch pricing over this resolver runs
sequentially; for concurrent pricing load the company's catalog once with
load_company_catalog() and share the InMemoryCatalog.
"""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from . import models
from .catalog import CatalogResolver, InMemoryCatalog, to_decimal
from .schemas import MatboardPrice

logger = logging.getLogger(__name__)


class SqlCatalogResolver(CatalogResolver):

    thread_safe = False

    def __init__(self, db: Session):
        self.db = db

    def _active(self, model, company_id):
        return self.db.query(model).filter(
            model.company_id == company_id,
            model.is_active == True,  # noqa: E712
        )

    def resolve_molding_price(self, ref, company_id):
        row = self._active(models.PricingMolding, company_id).filter(
            models.PricingMolding.id == ref).first()
        return to_decimal(row.price_per_m) if row else None

    def resolve_molding_thickness_price(self, ref, company_id):
        row = self._active(models.PricingMoldingThickness, company_id).filter(
            models.PricingMoldingThickness.id == ref).first()
        return to_decimal(row.price_per_m) if row else None

    def resolve_molding_by_name(self, name, company_id):
        row = (
            self._active(models.PricingMolding, company_id)
            .filter(models.PricingMolding.name == name,
                    models.PricingMolding.price_per_m.isnot(None))
            .order_by(models.PricingMolding.id)
            .first()
        )
        return to_decimal(row.price_per_m) if row else None

    def resolve_glass_base_price(self, family, thickness_mm, company_id):
        row = (
            self._active(models.PricingGlass, company_id)
            .filter(models.PricingGlass.family == models.GlassFamily(family),
                    models.PricingGlass.thickness_mm == Decimal(str(thickness_mm)))
            .order_by(models.PricingGlass.id)
            .first()
        )
        return to_decimal(row.price_per_sq_ft) if row else None

    def resolve_matboard_price(self, ref, company_id):
        row = self._active(models.PricingMatboard, company_id).filter(
            models.PricingMatboard.id == ref).first()
        if row is None:
            return None
        return MatboardPrice(name=row.name, price_per_sq_ft=to_decimal(row.price_per_sq_ft))

    def resolve_backing_price(self, ref, company_id):
        row = self._active(models.PricingBacking, company_id).filter(
            models.PricingBacking.id == ref).first()
        return to_decimal(row.price_per_sq_ft) if row else None

    def resolve_accessory_prices(self, refs, company_id):
        refs = list(refs)
        if not refs:
            return {}
        rows = self._active(models.PricingAccessory, company_id).filter(
            models.PricingAccessory.id.in_(refs)).all()
        return {row.id: to_decimal(row.price) for row in rows if row.price is not None}


def load_company_catalog(db: Session, company_id: int) -> InMemoryCatalog:
    """
    Copy one company's active pricing rows into an InMemoryCatalog.

    Gives batch pricing a single point-in-time view that worker threads can
    share without touching the session.
    """
    catalog = InMemoryCatalog()

    resolver = SqlCatalogResolver(db)

    def active(model):
        # Highest id first, so the lowest id wins on duplicate keys (same as the SQL lookups)
        return resolver._active(model, company_id).order_by(model.id.desc()).all()

    for row in active(models.PricingMolding):
        catalog.add_molding(row.id, row.price_per_m, name=row.name, company_id=company_id)
    for row in active(models.PricingMoldingThickness):
        catalog.add_molding_thickness(row.id, row.price_per_m, name=row.name, company_id=company_id)
    for row in active(models.PricingGlass):
        catalog.add_glass(row.price_per_sq_ft, family=row.family, thickness_mm=row.thickness_mm,
                          company_id=company_id)
    for row in active(models.PricingMatboard):
        catalog.add_matboard(row.id, row.price_per_sq_ft, name=row.name, company_id=company_id)
    for row in active(models.PricingBacking):
        catalog.add_backing(row.id, row.price_per_sq_ft, name=row.name, company_id=company_id)
    for row in active(models.PricingAccessory):
        catalog.add_accessory(row.id, row.price, name=row.name, company_id=company_id)

    logger.info(
        "Loaded catalog for company %s: %d moldings, %d thicknesses, %d glass, "
        "%d matboards, %d backings, %d accessories",
        company_id, len(catalog.moldings), len(catalog.molding_thicknesses), len(catalog.glass),
        len(catalog.matboards), len(catalog.backings), len(catalog.accessories),
    )
    return catalog
