"""
Residential solar sizing-and-costing estimator.

Turns a customer's monthly usage plus a handful of site selectors into a
system size, production profile and itemised cost.  Pure arithmetic with
fixed multiplicative factors -- no irradiance simulation, no I/O.  The
four stages run strictly in order:

1. resolve efficiency factors from the reference tables
2. derive per-kW production and the required system size
3. price the equipment for every panel tier
4. assemble the production curve, consumption split and metadata
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from engine.sizing.tables import (
    AREA_PER_PANEL,
    BASE_COSTS,
    BATTERY_AUTONOMY_DAYS,
    BATTERY_CAPACITY_RATIO,
    BATTERY_COST_PER_KWH,
    BATTERY_EFFICIENCY,
    BATTERY_LIFESPAN_YEARS,
    CALCULATION_VERSION,
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    GRID_RELIABILITY_FACTOR,
    MAX_FORCE_SIZE_KW,
    MAX_MONTHLY_USAGE_KWH,
    MINIMUM_SYSTEM_KW,
    MONTHLY_VARIATION,
    PEAK_USAGE_PERCENT,
    PEAK_USAGE_WINDOW,
    RANGE_LOWER_RATIO,
    RANGE_UPPER_RATIO,
    SYSTEM_LOSSES,
    BaseCosts,
    EquipmentTier,
    Location,
    RoofDirection,
    RoofType,
    Shading,
    SystemLosses,
)

logger = logging.getLogger(__name__)

# Panel tier whose cost feeds the headline total and roof area
DEFAULT_PANEL_TIER = 0

INVALID_USAGE_MESSAGE = "Valid monthly usage in kWh is required"


class InvalidUsageError(ValueError):
    """Monthly usage missing, non-numeric, out of range or not positive."""

    def __init__(self, message: str = INVALID_USAGE_MESSAGE):
        super().__init__(message)


# ---------------------------------------------------------------------------
# Rounding helpers
# ---------------------------------------------------------------------------

def round_half_up(value: float) -> int:
    """Nearest integer, ties toward +inf (not banker's rounding)."""
    return math.floor(value + 0.5)


def ceil_half(value: float) -> float:
    """Round up to the next 0.5 kW."""
    return math.ceil(value * 2) / 2


def floor_half(value: float) -> float:
    """Round down to the previous 0.5 kW."""
    return math.floor(value * 2) / 2


def _to_number(value: Any) -> float | None:
    """Coerce a JSON scalar to float; ``None`` when it is not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SizingInput:
    monthly_usage: float
    location: Location = Location.CENTRAL_PAKISTAN
    roof_direction: RoofDirection = RoofDirection.SOUTH
    roof_type: RoofType = RoofType.STANDARD
    shading: Shading = Shading.MINIMAL
    force_size: float | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> SizingInput:
        """Validate usage and resolve selectors from a camelCase request dict.

        Usage is the only field that can fail; it must lie in
        ``(0, MAX_MONTHLY_USAGE_KWH]``.  Unknown selectors fall back to their
        defaults.  A ``forceSize`` outside ``(0, MAX_FORCE_SIZE_KW]`` is
        ignored and the size is derived from usage instead.
        """
        usage = _to_number(payload.get("monthlyUsage"))
        if usage is None or not 0 < usage <= MAX_MONTHLY_USAGE_KWH:
            raise InvalidUsageError()

        force_size = _to_number(payload.get("forceSize"))
        if force_size is not None and not 0 < force_size <= MAX_FORCE_SIZE_KW:
            force_size = None

        return cls(
            monthly_usage=usage,
            location=Location.resolve(payload.get("location")),
            roof_direction=RoofDirection.resolve(payload.get("roofDirection")),
            roof_type=RoofType.resolve(payload.get("roofType")),
            shading=Shading.resolve(payload.get("shading")),
            force_size=force_size,
        )


# ---------------------------------------------------------------------------
# Stage results
# ---------------------------------------------------------------------------

@dataclass
class EfficiencyFactors:
    irradiance: float          # peak sun hours
    direction: float
    roof_type: float
    shading: float
    losses: SystemLosses

    @property
    def system_efficiency(self) -> float:
        return self.losses.combined * self.direction * self.roof_type * self.shading


@dataclass
class SizeResult:
    daily_per_kw: float
    monthly_per_kw: float
    annual_per_kw: float
    base_size: float           # pre-margin (or forced) size
    system_size: float         # headline size, margin applied unless forced
    minimum: float
    maximum: float


@dataclass
class PanelOption:
    power: int
    count: int
    roof_area: int
    total_cost: int


@dataclass
class InverterChoice:
    size: int
    count: int
    total_cost: int


@dataclass
class CostBreakdown:
    panels: int
    inverter: int
    dc_cable: int
    ac_cable: int
    mounting: int
    installation: int
    net_metering: int
    transport: int

    @property
    def total(self) -> int:
        return (
            self.panels + self.inverter + self.dc_cable + self.ac_cable
            + self.mounting + self.installation + self.net_metering + self.transport
        )


@dataclass
class EquipmentResult:
    panel_options: list[PanelOption]
    inverter: InverterChoice
    costs: CostBreakdown
    cable_length_m: int

    @property
    def default_option(self) -> PanelOption:
        return self.panel_options[DEFAULT_PANEL_TIER]


@dataclass
class SizingEstimate:
    """Complete estimate; ``to_dict()`` gives the wire representation."""

    inputs: SizingInput
    factors: EfficiencyFactors
    size: SizeResult
    equipment: EquipmentResult
    by_month: list[int]
    peak_kwh: int
    off_peak_kwh: float
    calculated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        f = self.factors
        s = self.size
        eq = self.equipment
        usage = self.inputs.monthly_usage
        system_size = s.system_size
        annual = round_half_up(system_size * s.annual_per_kw)
        efficiency_pct = round_half_up(f.system_efficiency * 100)

        return {
            "systemSize": _json_number(system_size),
            "recommendedRange": {
                "minimum": _json_number(s.minimum),
                "recommended": _json_number(system_size),
                "maximum": _json_number(s.maximum),
            },
            "efficiencyFactors": {
                "systemEfficiency": efficiency_pct,
                "irradiance": _json_number(f.irradiance),
                "direction": round_half_up(f.direction * 100),
                "roofType": round_half_up(f.roof_type * 100),
                "shading": round_half_up(f.shading * 100),
                "temperature": round_half_up(f.losses.temperature * 100),
                "inverter": round_half_up(f.losses.inverter * 100),
            },
            "equipment": {
                "panelOptions": [
                    {
                        "power": opt.power,
                        "count": opt.count,
                        "roofArea": opt.roof_area,
                        "totalCost": opt.total_cost,
                    }
                    for opt in eq.panel_options
                ],
                "inverter": {
                    "size": eq.inverter.size,
                    "count": eq.inverter.count,
                    "totalCost": eq.inverter.total_cost,
                },
            },
            "costs": {
                "panels": eq.costs.panels,
                "inverter": eq.costs.inverter,
                "dcCable": eq.costs.dc_cable,
                "acCable": eq.costs.ac_cable,
                "mounting": eq.costs.mounting,
                "installation": eq.costs.installation,
                "netMetering": eq.costs.net_metering,
                "transport": eq.costs.transport,
                "total": eq.costs.total,
            },
            # Unrounded fractions x 100 here, unlike efficiencyFactors
            "roof": {
                "required_area": eq.default_option.roof_area,
                "layout_efficiency": _json_number(f.roof_type * 100),
                "optimal_orientation": self.inputs.roof_direction.value,
                "shading_impact": _json_number((1 - f.shading) * 100),
            },
            "battery": {
                "recommended_capacity": _json_number(usage * BATTERY_CAPACITY_RATIO),
                "autonomy_days": BATTERY_AUTONOMY_DAYS,
                "estimated_cost": _json_number(usage * BATTERY_COST_PER_KWH),
                "efficiency_rating": BATTERY_EFFICIENCY,
                "lifespan_years": BATTERY_LIFESPAN_YEARS,
            },
            "production": {
                "daily": round_half_up(system_size * s.daily_per_kw),
                "monthly": round_half_up(system_size * s.monthly_per_kw),
                "annual": annual,
                "byMonth": list(self.by_month),
                "peakSunHours": _json_number(f.irradiance),
            },
            "consumption": {
                "monthly": _json_number(usage),
                "peak": {
                    "percentage": PEAK_USAGE_PERCENT,
                    "kWh": self.peak_kwh,
                    "time": PEAK_USAGE_WINDOW,
                },
                "offPeak": _json_number(self.off_peak_kwh),
            },
            "weather": {
                "sunHours": _json_number(f.irradiance),
                "efficiency": efficiency_pct,
                "temperatureImpact": round_half_up((1 - f.losses.temperature) * 100),
                "annualProduction": annual,
            },
            "metadata": {
                "calculationVersion": CALCULATION_VERSION,
                "calculationDate": _iso_timestamp(self.calculated_at),
                "location": self.inputs.location.value,
                "roofDirection": self.inputs.roof_direction.value,
                "roofType": self.inputs.roof_type.value,
                "shading": self.inputs.shading.value,
            },
        }


def _json_number(value: float) -> int | float:
    """Whole values as ``int`` so they serialise as ``8``, not ``8.0``."""
    return int(value) if float(value).is_integer() else value


def _iso_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


# ---------------------------------------------------------------------------
# Stage 1: factors
# ---------------------------------------------------------------------------

def resolve_factors(inputs: SizingInput, losses: SystemLosses = SYSTEM_LOSSES) -> EfficiencyFactors:
    return EfficiencyFactors(
        irradiance=inputs.location.factor,
        direction=inputs.roof_direction.factor,
        roof_type=inputs.roof_type.factor,
        shading=inputs.shading.factor,
        losses=losses,
    )


# ---------------------------------------------------------------------------
# Stage 2: size
# ---------------------------------------------------------------------------

def derive_size(
    monthly_usage: float,
    factors: EfficiencyFactors,
    force_size: float | None = None,
) -> SizeResult:
    """Per-kW yield and the system size.

    A forced size is reported exactly as given; callers pass ``None`` for
    a zero, negative or out-of-range value.  Otherwise usage / monthly
    yield is rounded up to 0.5 kW, the reliability margin applied and the
    result rounded up again.  The range is anchored on the pre-margin
    size and is never clamped against ``system_size``.
    """
    daily_per_kw = factors.irradiance * factors.system_efficiency
    monthly_per_kw = daily_per_kw * DAYS_PER_MONTH
    annual_per_kw = daily_per_kw * DAYS_PER_YEAR

    if force_size is not None:
        base_size = force_size
        system_size = force_size
    else:
        base_size = ceil_half(monthly_usage / monthly_per_kw)
        system_size = ceil_half(base_size * GRID_RELIABILITY_FACTOR)

    return SizeResult(
        daily_per_kw=daily_per_kw,
        monthly_per_kw=monthly_per_kw,
        annual_per_kw=annual_per_kw,
        base_size=base_size,
        system_size=system_size,
        minimum=max(MINIMUM_SYSTEM_KW, floor_half(base_size * RANGE_LOWER_RATIO)),
        maximum=ceil_half(base_size * RANGE_UPPER_RATIO),
    )


# ---------------------------------------------------------------------------
# Stage 3: equipment & costs
# ---------------------------------------------------------------------------

def _panel_option(tier: EquipmentTier, system_size_kw: float) -> PanelOption:
    count = math.ceil(system_size_kw * 1000 / tier.rating)
    return PanelOption(
        power=tier.rating,
        count=count,
        roof_area=round_half_up(count * AREA_PER_PANEL),
        total_cost=count * tier.unit_cost,
    )


def select_inverter(system_size_kw: float, costs: BaseCosts = BASE_COSTS) -> InverterChoice:
    """Smallest tier rated >= size; above the largest, several of the largest."""
    tiers = sorted(costs.inverters, key=lambda t: t.rating)
    tier = next((t for t in tiers if t.rating >= system_size_kw), tiers[-1])
    count = math.ceil(system_size_kw / tier.rating)
    return InverterChoice(size=tier.rating, count=count, total_cost=count * tier.unit_cost)


def price_equipment(system_size_kw: float, costs: BaseCosts = BASE_COSTS) -> EquipmentResult:
    options = [_panel_option(tier, system_size_kw) for tier in costs.panels]
    default = options[DEFAULT_PANEL_TIER]
    inverter = select_inverter(system_size_kw, costs)

    cable_length = math.ceil(math.sqrt(default.roof_area) * 4)

    breakdown = CostBreakdown(
        panels=default.total_cost,
        inverter=inverter.total_cost,
        dc_cable=cable_length * costs.dc_cable_per_meter,
        ac_cable=cable_length * costs.ac_cable_per_meter,
        mounting=default.count * costs.mounting_per_panel,
        installation=costs.installation,
        net_metering=costs.net_metering,
        transport=costs.transport,
    )
    return EquipmentResult(
        panel_options=options,
        inverter=inverter,
        costs=breakdown,
        cable_length_m=cable_length,
    )


# ---------------------------------------------------------------------------
# Stage 4: assembly
# ---------------------------------------------------------------------------

def monthly_profile(system_size_kw: float, monthly_per_kw: float) -> list[int]:
    return [
        round_half_up(system_size_kw * monthly_per_kw * factor)
        for factor in MONTHLY_VARIATION
    ]


def split_consumption(monthly_usage: float) -> tuple[int, float]:
    """(peak, off-peak); off-peak is the remainder so the two always sum to usage."""
    peak = round_half_up(monthly_usage * (PEAK_USAGE_PERCENT / 100))
    return peak, monthly_usage - peak


def assemble_estimate(
    inputs: SizingInput,
    factors: EfficiencyFactors,
    size: SizeResult,
    equipment: EquipmentResult,
    now: datetime | None = None,
) -> SizingEstimate:
    """Add the monthly curve, consumption split and timestamp to the stage results."""
    peak, off_peak = split_consumption(inputs.monthly_usage)
    return SizingEstimate(
        inputs=inputs,
        factors=factors,
        size=size,
        equipment=equipment,
        by_month=monthly_profile(size.system_size, size.monthly_per_kw),
        peak_kwh=peak,
        off_peak_kwh=off_peak,
        calculated_at=now or datetime.now(timezone.utc),
    )


def calculate_system_size(
    payload: dict[str, Any] | SizingInput,
    now: datetime | None = None,
) -> SizingEstimate:
    """Run the full estimate for a request payload or a prepared input.

    Raises:
        InvalidUsageError: when monthly usage fails validation.  Nothing
            is computed in that case.
    """
    inputs = payload if isinstance(payload, SizingInput) else SizingInput.from_payload(payload)

    factors = resolve_factors(inputs)
    size = derive_size(inputs.monthly_usage, factors, inputs.force_size)
    equipment = price_equipment(size.system_size)

    logger.debug(
        "Sized %.1f kWh/month at %s: %.1f kW, %d x %dW, total %d",
        inputs.monthly_usage,
        inputs.location.value,
        size.system_size,
        equipment.default_option.count,
        equipment.default_option.power,
        equipment.costs.total,
    )

    return assemble_estimate(inputs, factors, size, equipment, now)
