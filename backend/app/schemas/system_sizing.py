from typing import Any

from pydantic import BaseModel

# Whole numbers stay ints on the wire (8, not 8.0)
Number = int | float


class SystemSizingRequest(BaseModel):
    """Sizing request.

    Fields are untyped: the engine validates ``monthlyUsage`` itself and
    resolves anything unrecognised in the selectors to its default.
    """

    model_config = {"extra": "ignore"}

    monthlyUsage: Any = None
    location: Any = None
    roofDirection: Any = None
    roofType: Any = None
    shading: Any = None
    forceSize: Any = None


class RecommendedRange(BaseModel):
    minimum: Number
    recommended: Number
    maximum: Number


class EfficiencyFactorsResponse(BaseModel):
    systemEfficiency: int
    irradiance: Number
    direction: int
    roofType: int
    shading: int
    temperature: int
    inverter: int


class PanelOptionResponse(BaseModel):
    power: int
    count: int
    roofArea: int
    totalCost: int


class InverterResponse(BaseModel):
    size: int
    count: int
    totalCost: int


class EquipmentResponse(BaseModel):
    panelOptions: list[PanelOptionResponse]
    inverter: InverterResponse


class CostsResponse(BaseModel):
    panels: int
    inverter: int
    dcCable: int
    acCable: int
    mounting: int
    installation: int
    netMetering: int
    transport: int
    total: int


class RoofResponse(BaseModel):
    required_area: int
    layout_efficiency: Number
    optimal_orientation: str
    shading_impact: Number


class BatteryResponse(BaseModel):
    recommended_capacity: Number
    autonomy_days: int
    estimated_cost: Number
    efficiency_rating: float
    lifespan_years: int


class ProductionResponse(BaseModel):
    daily: int
    monthly: int
    annual: int
    byMonth: list[int]
    peakSunHours: Number


class PeakUsageResponse(BaseModel):
    percentage: int
    kWh: int
    time: str


class ConsumptionResponse(BaseModel):
    monthly: Number
    peak: PeakUsageResponse
    offPeak: Number


class WeatherResponse(BaseModel):
    sunHours: Number
    efficiency: int
    temperatureImpact: int
    annualProduction: int


class MetadataResponse(BaseModel):
    calculationVersion: str
    calculationDate: str
    location: str
    roofDirection: str
    roofType: str
    shading: str


class SystemSizingResponse(BaseModel):
    systemSize: Number
    recommendedRange: RecommendedRange
    efficiencyFactors: EfficiencyFactorsResponse
    equipment: EquipmentResponse
    costs: CostsResponse
    roof: RoofResponse
    battery: BatteryResponse
    production: ProductionResponse
    consumption: ConsumptionResponse
    weather: WeatherResponse
    metadata: MetadataResponse


class ErrorResponse(BaseModel):
    error: str
