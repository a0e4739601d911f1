from sqlalchemy import Column, Integer, String, Numeric, DateTime, Boolean, Enum, Index
from datetime import datetime
from .database import Base
import enum


# --- Enums ---

class FrameKind(str, enum.Enum):
    SIN_FONDO = "SIN_FONDO"
    CON_FONDO = "CON_FONDO"
    FONDO_TRANSPARENTE = "FONDO_TRANSPARENTE"
    CON_BASTIDOR = "CON_BASTIDOR"   # stretched canvas, priced by a separate calculator
    ESPECIAL = "ESPECIAL"


class FrameQuality(str, enum.Enum):
    SIMPLE = "SIMPLE"
    FINA = "FINA"


class GlassFamily(str, enum.Enum):
    PLANO = "PLANO"
    CATEDRAL = "CATEDRAL"
    TEMPLADO = "TEMPLADO"
    REFLEJANTE = "REFLEJANTE"


# --- Pricing catalog tables ---
# Read-only from the engine's point of view. Every row is scoped to a company
# and only active rows resolve.

MONEY = Numeric(12, 4, asdecimal=True)


class PricingMolding(Base):
    """Molding profiles priced per linear meter. The inner molding is the row named INTERNA."""
    __tablename__ = "pricing_moldings"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)
    price_per_m = Column(MONEY, nullable=True)
    is_active = Column(Boolean, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (Index("ix_pricing_moldings_company_name", "company_id", "name"),)


class PricingMoldingThickness(Base):
    """Thickness-specific molding prices; override the molding's own price."""
    __tablename__ = "pricing_molding_thicknesses"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)  # MEDIA, TRES_CUARTOS, UNA_PULGADA, ...
    price_per_m = Column(MONEY, nullable=True)
    is_active = Column(Boolean, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class PricingGlass(Base):
    """Glass base price per ft², keyed by family + thickness."""
    __tablename__ = "pricing_glass"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    family = Column(Enum(GlassFamily), nullable=False)
    thickness_mm = Column(Numeric(5, 2), nullable=False)
    price_per_sq_ft = Column(MONEY, nullable=True)
    is_active = Column(Boolean, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class PricingMatboard(Base):
    """Matboards (fondos). Names starting with MDF_ enable the inner molding."""
    __tablename__ = "pricing_matboards"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)
    price_per_sq_ft = Column(MONEY, nullable=True)
    is_active = Column(Boolean, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class PricingBacking(Base):
    __tablename__ = "pricing_backings"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)
    price_per_sq_ft = Column(MONEY, nullable=True)
    is_active = Column(Boolean, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class PricingAccessory(Base):
    """Per-unit extras (hangers, bumpers, hooks)."""
    __tablename__ = "pricing_accessories"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)
    price = Column(MONEY, nullable=True)
    is_active = Column(Boolean, default=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
