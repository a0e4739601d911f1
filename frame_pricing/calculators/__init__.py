"""
Frame pricing calculators.

Pure Decimal math. No database, no I/O.
Given a FrameOrderLine and the CatalogSnapshot resolved for it,
produce an itemized PriceResult.
"""
