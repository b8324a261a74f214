"""Equipment catalog access with per-category fallback to built-in defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.equipment import BracketCost, Inverter, Panel, StructureType, VariableCost

logger = logging.getLogger(__name__)

# Used when the catalog tables are unreachable or empty
DEFAULT_EQUIPMENT: dict[str, list[dict[str, Any]]] = {
    "panels": [
        {"id": "1", "brand": "JinkoSolar", "power": 450, "price": 45_000, "default_choice": True},
        {"id": "2", "brand": "LONGi", "power": 545, "price": 58_000, "default_choice": False},
        {"id": "3", "brand": "JA Solar", "power": 800, "price": 85_000, "default_choice": False},
    ],
    "inverters": [
        {"id": "1", "brand": "Sungrow", "power": 5, "price": 120_000},
        {"id": "2", "brand": "Huawei", "power": 10, "price": 180_000},
        {"id": "3", "brand": "SMA", "power": 15, "price": 250_000},
    ],
    "structure_types": [
        {"id": "1", "l2": True, "custom_cost": 8_000, "abs_cost": 5_000},
    ],
    "bracket_costs": [
        {"id": "1", "min_size": 1, "max_size": 5, "dc_cable": 300, "ac_cable": 400, "accessories": 8_000},
    ],
    "variable_costs": [
        {"id": "1", "cost_name": "installation", "cost": 25_000},
        {"id": "2", "cost_name": "transport", "cost": 15_000},
    ],
}


@dataclass
class EquipmentCatalog:
    panels: list[dict[str, Any]]
    inverters: list[dict[str, Any]]
    structure_types: list[dict[str, Any]]
    bracket_costs: list[dict[str, Any]]
    variable_costs: list[dict[str, Any]]
    fallbacks: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "panels": self.panels,
            "inverters": self.inverters,
            "structure_types": self.structure_types,
            "bracket_costs": self.bracket_costs,
            "variable_costs": self.variable_costs,
            "fallbacks": self.fallbacks,
        }


def _panel_row(p: Panel) -> dict[str, Any]:
    return {
        "id": str(p.id),
        "brand": p.brand,
        "power": p.power,
        "price": p.price,
        "default_choice": p.default_choice,
    }


def _inverter_row(i: Inverter) -> dict[str, Any]:
    return {"id": str(i.id), "brand": i.brand, "power": i.power, "price": i.price}


def _structure_row(s: StructureType) -> dict[str, Any]:
    return {"id": str(s.id), "l2": s.l2, "custom_cost": s.custom_cost, "abs_cost": s.abs_cost}


def _bracket_row(b: BracketCost) -> dict[str, Any]:
    return {
        "id": str(b.id),
        "min_size": b.min_size,
        "max_size": b.max_size,
        "dc_cable": b.dc_cable,
        "ac_cable": b.ac_cable,
        "accessories": b.accessories,
    }


def _variable_cost_row(v: VariableCost) -> dict[str, Any]:
    return {"id": str(v.id), "cost_name": v.cost_name, "cost": v.cost}


async def _fetch_category(
    db: AsyncSession,
    category: str,
    stmt: Select,
    to_row: Callable[[Any], dict[str, Any]],
    fallbacks: list[str],
) -> list[dict[str, Any]]:
    """Run *stmt*; on error or no rows, use the category's defaults."""
    try:
        result = await db.execute(stmt)
        rows = [to_row(obj) for obj in result.scalars().all()]
    except SQLAlchemyError as exc:
        logger.warning("Catalog query for %s failed, using defaults: %s", category, exc)
        await db.rollback()
        rows = []

    if not rows:
        logger.info("No %s in catalog, using built-in defaults", category)
        fallbacks.append(category)
        return [dict(item) for item in DEFAULT_EQUIPMENT[category]]
    return rows


async def fetch_all_equipment(db: AsyncSession) -> EquipmentCatalog:
    fallbacks: list[str] = []

    panels = await _fetch_category(
        db,
        "panels",
        select(Panel).where(Panel.availability.is_(True)).order_by(Panel.power),
        _panel_row,
        fallbacks,
    )
    inverters = await _fetch_category(
        db,
        "inverters",
        select(Inverter).where(Inverter.availability.is_(True)).order_by(Inverter.power),
        _inverter_row,
        fallbacks,
    )
    structure_types = await _fetch_category(
        db,
        "structure_types",
        select(StructureType).order_by(StructureType.custom_cost),
        _structure_row,
        fallbacks,
    )
    bracket_costs = await _fetch_category(
        db,
        "bracket_costs",
        select(BracketCost).order_by(BracketCost.min_size),
        _bracket_row,
        fallbacks,
    )
    variable_costs = await _fetch_category(
        db,
        "variable_costs",
        select(VariableCost).order_by(VariableCost.cost_name),
        _variable_cost_row,
        fallbacks,
    )

    return EquipmentCatalog(
        panels=panels,
        inverters=inverters,
        structure_types=structure_types,
        bracket_costs=bracket_costs,
        variable_costs=variable_costs,
        fallbacks=fallbacks,
    )


def find_bracket_cost(bracket_costs: list[dict[str, Any]], size_kw: float) -> dict[str, Any] | None:
    """First tier with ``min_size <= size_kw <= max_size``."""
    for tier in bracket_costs:
        if tier["min_size"] <= size_kw <= tier["max_size"]:
            return tier
    return None
