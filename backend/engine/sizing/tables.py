"""
Reference tables for the residential sizing estimator.

Irradiance, orientation, roof-pitch and shading factors are modelled as
closed enumerations so that an unrecognised selector falls back to a
documented default instead of a silent dictionary miss.  Everything in
this module is loaded once at import time and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any


class _Selector(str, Enum):
    """Base for the site selectors: exact-match lookup with a default."""

    @classmethod
    def default(cls) -> _Selector:
        """Member used when a value is missing or unrecognised.

        Every selector overrides this.
        """
        raise NotImplementedError

    @classmethod
    def resolve(cls, value: Any) -> _Selector:
        """Return the member whose value equals *value*, else the default.

        No case folding and no partial matching.
        """
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        return cls.default()

    @property
    def factor(self) -> float:
        """Multiplier looked up from the selector's table; overridden per selector."""
        raise NotImplementedError


class Location(_Selector):
    NORTHERN_PAKISTAN = "Northern Pakistan"
    CENTRAL_PAKISTAN = "Central Pakistan"
    SOUTHERN_PAKISTAN = "Southern Pakistan"
    ISLAMABAD = "Islamabad"
    LAHORE = "Lahore"
    KARACHI = "Karachi"
    PESHAWAR = "Peshawar"
    QUETTA = "Quetta"

    @classmethod
    def default(cls) -> Location:
        return cls.CENTRAL_PAKISTAN

    @property
    def factor(self) -> float:
        """Peak sun hours per day."""
        return LOCATION_IRRADIANCE[self]


class RoofDirection(_Selector):
    SOUTH = "south"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"
    EAST = "east"
    WEST = "west"
    NORTH = "north"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"

    @classmethod
    def default(cls) -> RoofDirection:
        return cls.SOUTH

    @property
    def factor(self) -> float:
        return DIRECTION_EFFICIENCY[self]


class RoofType(_Selector):
    FLAT = "flat"          # 0-10° pitch
    STANDARD = "standard"  # 10-30° pitch
    STEEP = "steep"        # 30-45° pitch
    OPTIMAL = "optimal"    # 25-30° pitch

    @classmethod
    def default(cls) -> RoofType:
        return cls.STANDARD

    @property
    def factor(self) -> float:
        return ROOF_TYPE_EFFICIENCY[self]


class Shading(_Selector):
    NONE = "none"                # no shading
    MINIMAL = "minimal"          # <10% during peak hours
    MODERATE = "moderate"        # 10-25%
    SIGNIFICANT = "significant"  # >25%

    @classmethod
    def default(cls) -> Shading:
        return cls.MINIMAL

    @property
    def factor(self) -> float:
        return SHADING_FACTOR[self]


# ---------------------------------------------------------------------------
# Factor tables
# ---------------------------------------------------------------------------
LOCATION_IRRADIANCE = MappingProxyType({
    Location.NORTHERN_PAKISTAN: 4.8,
    Location.CENTRAL_PAKISTAN: 5.3,
    Location.SOUTHERN_PAKISTAN: 5.7,
    Location.ISLAMABAD: 5.3,
    Location.LAHORE: 5.2,
    Location.KARACHI: 5.6,
    Location.PESHAWAR: 5.4,
    Location.QUETTA: 5.8,
})

DIRECTION_EFFICIENCY = MappingProxyType({
    RoofDirection.SOUTH: 1.00,
    RoofDirection.SOUTHEAST: 0.96,
    RoofDirection.SOUTHWEST: 0.96,
    RoofDirection.EAST: 0.88,
    RoofDirection.WEST: 0.88,
    RoofDirection.NORTH: 0.75,
    RoofDirection.NORTHEAST: 0.78,
    RoofDirection.NORTHWEST: 0.78,
})

ROOF_TYPE_EFFICIENCY = MappingProxyType({
    RoofType.FLAT: 0.90,
    RoofType.STANDARD: 0.96,
    RoofType.STEEP: 0.93,
    RoofType.OPTIMAL: 1.00,
})

SHADING_FACTOR = MappingProxyType({
    Shading.NONE: 1.00,
    Shading.MINIMAL: 0.95,
    Shading.MODERATE: 0.85,
    Shading.SIGNIFICANT: 0.70,
})

# Seasonal production relative to the annual average, January first
MONTHLY_VARIATION: tuple[float, ...] = (
    0.85, 0.90,        # Jan-Feb  winter
    1.00, 1.10,        # Mar-Apr  spring
    1.15, 1.15,        # May-Jun  summer
    1.05, 0.95,        # Jul-Aug  monsoon
    1.05,              # Sep      post-monsoon
    1.00, 0.90,        # Oct-Nov  autumn
    0.85,              # Dec
)


@dataclass(frozen=True)
class SystemLosses:
    inverter: float = 0.96
    wiring: float = 0.98
    soiling: float = 0.95
    temperature: float = 0.91
    mismatch: float = 0.97

    @property
    def combined(self) -> float:
        return self.inverter * self.wiring * self.soiling * self.temperature * self.mismatch


SYSTEM_LOSSES = SystemLosses()


# ---------------------------------------------------------------------------
# Costs (PKR)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class EquipmentTier:
    rating: int          # W for panels, kW for inverters
    unit_cost: int


@dataclass(frozen=True)
class BaseCosts:
    panels: tuple[EquipmentTier, ...] = (
        EquipmentTier(450, 45_000),
        EquipmentTier(545, 58_000),
        EquipmentTier(800, 85_000),
    )
    inverters: tuple[EquipmentTier, ...] = (
        EquipmentTier(5, 120_000),
        EquipmentTier(10, 180_000),
        EquipmentTier(15, 250_000),
    )
    dc_cable_per_meter: int = 300
    ac_cable_per_meter: int = 400
    mounting_per_panel: int = 8_000
    net_metering: int = 50_000
    installation: int = 25_000
    transport: int = 15_000


BASE_COSTS = BaseCosts()

# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------
GRID_RELIABILITY_FACTOR = 1.05
AREA_PER_PANEL = 1.8          # m²
DAYS_PER_MONTH = 30.5
DAYS_PER_YEAR = 365

RANGE_LOWER_RATIO = 0.8
RANGE_UPPER_RATIO = 1.2
MINIMUM_SYSTEM_KW = 1.0

# Input ceilings; well past any residential or commercial rooftop
MAX_MONTHLY_USAGE_KWH = 10_000_000
MAX_FORCE_SIZE_KW = 100_000

PEAK_USAGE_PERCENT = 42       # typical evening peak share
PEAK_USAGE_WINDOW = "6:00 PM - 9:00 PM"

# Battery placeholder heuristic, not a storage sizing model
BATTERY_CAPACITY_RATIO = 0.3  # kWh per kWh of monthly usage
BATTERY_AUTONOMY_DAYS = 1
BATTERY_COST_PER_KWH = 200    # applied to monthly usage
BATTERY_EFFICIENCY = 0.95
BATTERY_LIFESPAN_YEARS = 10

CALCULATION_VERSION = "1.0"
