"""
Shared test fixtures: in-memory SQLite catalog, in-memory catalog, sample prices.
"""

import os
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Point settings at a throwaway database before importing package modules
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STRICT_CATALOG"] = "false"

from frame_pricing import models
from frame_pricing.catalog import InMemoryCatalog
from frame_pricing.database import Base
from frame_pricing.models import GlassFamily


# Use in-memory SQLite for tests, one connection shared by every session
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

COMPANY = 1
OTHER_COMPANY = 2


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db):
    """
    Pricing tables for COMPANY, plus a few rows that must never resolve:
    inactive rows and rows that belong to OTHER_COMPANY.
    """
    db.add_all([
        models.PricingMolding(id=1, company_id=COMPANY, name="PINO_NATURAL", price_per_m=Decimal("10")),
        models.PricingMolding(id=2, company_id=COMPANY, name="INTERNA", price_per_m=Decimal("5")),
        models.PricingMolding(id=3, company_id=COMPANY, name="ROBLE_OLD", price_per_m=Decimal("9"),
                              is_active=False),
        models.PricingMolding(id=4, company_id=OTHER_COMPANY, name="INTERNA", price_per_m=Decimal("99")),
        models.PricingMoldingThickness(id=1, company_id=COMPANY, name="UNA_PULGADA",
                                       price_per_m=Decimal("11")),
        models.PricingGlass(id=1, company_id=COMPANY, family=GlassFamily.PLANO,
                            thickness_mm=Decimal("2"), price_per_sq_ft=Decimal("8")),
        models.PricingGlass(id=2, company_id=COMPANY, family=GlassFamily.PLANO,
                            thickness_mm=Decimal("4"), price_per_sq_ft=Decimal("14")),
        models.PricingGlass(id=3, company_id=COMPANY, family=GlassFamily.CATEDRAL,
                            thickness_mm=Decimal("2"), price_per_sq_ft=Decimal("20")),
        models.PricingMatboard(id=1, company_id=COMPANY, name="MDF_BLANCO", price_per_sq_ft=Decimal("2")),
        models.PricingMatboard(id=2, company_id=COMPANY, name="CARTON_NEGRO", price_per_sq_ft=Decimal("1.25")),
        models.PricingBacking(id=1, company_id=COMPANY, name="CARTON_GRIS", price_per_sq_ft=Decimal("1.5")),
        models.PricingAccessory(id=1, company_id=COMPANY, name="GANCHO", price=Decimal("0.75")),
        models.PricingAccessory(id=2, company_id=COMPANY, name="TOPE_GOMA", price=Decimal("0.1")),
        models.PricingAccessory(id=3, company_id=COMPANY, name="ARGOLLA", price=Decimal("0.4"),
                                is_active=False),
    ])
    db.commit()
    return db


@pytest.fixture
def catalog():
    """The same prices as seeded_db, in memory."""
    return (
        InMemoryCatalog()
        .add_molding(1, "10", name="PINO_NATURAL")
        .add_molding(2, "5", name="INTERNA")
        .add_molding(3, "9", name="ROBLE_OLD", is_active=False)
        .add_molding(4, "99", name="INTERNA", company_id=OTHER_COMPANY)
        .add_molding_thickness(1, "11", name="UNA_PULGADA")
        .add_glass("8", family=GlassFamily.PLANO, thickness_mm=2)
        .add_glass("14", family=GlassFamily.PLANO, thickness_mm=4)
        .add_glass("20", family=GlassFamily.CATEDRAL, thickness_mm=2)
        .add_matboard(1, "2", name="MDF_BLANCO")
        .add_matboard(2, "1.25", name="CARTON_NEGRO")
        .add_backing(1, "1.5", name="CARTON_GRIS")
        .add_accessory(1, "0.75", name="GANCHO")
        .add_accessory(2, "0.1", name="TOPE_GOMA")
        .add_accessory(3, "0.4", name="ARGOLLA", is_active=False)
    )
