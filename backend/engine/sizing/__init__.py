"""
Residential solar sizing engine.

Parametric estimator: monthly usage plus site selectors in, system size,
production profile and itemised cost out.  Stateless and side-effect free.
"""

from .calculator import (
    DEFAULT_PANEL_TIER,
    InvalidUsageError,
    SizingEstimate,
    SizingInput,
    assemble_estimate,
    calculate_system_size,
    derive_size,
    price_equipment,
    resolve_factors,
    select_inverter,
)
from .tables import Location, RoofDirection, RoofType, Shading

__all__ = [
    # calculator
    "DEFAULT_PANEL_TIER",
    "InvalidUsageError",
    "SizingEstimate",
    "SizingInput",
    "assemble_estimate",
    "calculate_system_size",
    "derive_size",
    "price_equipment",
    "resolve_factors",
    "select_inverter",
    # tables
    "Location",
    "RoofDirection",
    "RoofType",
    "Shading",
]
