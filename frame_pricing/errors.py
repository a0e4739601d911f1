"""
Pricing errors.

Validation errors (InvalidDimensions, InvalidQuantity, UnsupportedFrameKind)
are raised before any catalog lookup. Missing glass base price and missing
inner molding price abort the whole calculation.
"""


class PricingError(Exception):
    """Base class for everything the pricing engine raises on purpose."""


class InvalidDimensions(PricingError, ValueError):
    def __init__(self, width_cm, height_cm):
        self.width_cm = width_cm
        self.height_cm = height_cm
        super().__init__(
            f"Width and height must be greater than zero (got {width_cm} x {height_cm} cm)"
        )


class InvalidQuantity(PricingError, ValueError):
    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__(f"Quantity must be at least 1 (got {quantity})")


class UnsupportedFrameKind(PricingError, ValueError):
    def __init__(self, kind, available=None):
        self.kind = kind
        message = f"No calculator registered for frame kind: {getattr(kind, 'value', kind)}."
        if available is not None:
            message += f" Available: {available}"
        super().__init__(message)


class MissingGlassBasePrice(PricingError):
    def __init__(self, family, thickness_mm, company_id):
        self.family = family
        self.thickness_mm = thickness_mm
        self.company_id = company_id
        super().__init__(
            f"No active glass base price for {getattr(family, 'value', family)} "
            f"{thickness_mm}mm (company {company_id})"
        )


class MissingInnerMoldingPrice(PricingError):
    def __init__(self, company_id, molding_name="INTERNA"):
        self.company_id = company_id
        self.molding_name = molding_name
        super().__init__(
            f'No "{molding_name}" molding in the catalog (company {company_id}) '
            f"and no manual inner molding price was given"
        )


class MissingCatalogEntry(PricingError):
    """Strict mode only: a supplied reference did not resolve to a price."""

    def __init__(self, entity, ref, company_id):
        self.entity = entity
        self.ref = ref
        self.company_id = company_id
        super().__init__(f"{entity} {ref} has no active price (company {company_id})")
