from pydantic import BaseModel


class PanelItem(BaseModel):
    id: str
    brand: str
    power: int
    price: float
    default_choice: bool = False


class InverterItem(BaseModel):
    id: str
    brand: str
    power: float
    price: float


class StructureTypeItem(BaseModel):
    id: str
    l2: bool
    custom_cost: float
    abs_cost: float


class BracketCostItem(BaseModel):
    id: str
    min_size: float
    max_size: float
    dc_cable: float
    ac_cable: float
    accessories: float


class VariableCostItem(BaseModel):
    id: str
    cost_name: str
    cost: float


class EquipmentCatalogResponse(BaseModel):
    panels: list[PanelItem]
    inverters: list[InverterItem]
    structure_types: list[StructureTypeItem]
    bracket_costs: list[BracketCostItem]
    variable_costs: list[VariableCostItem]
    fallbacks: list[str]
