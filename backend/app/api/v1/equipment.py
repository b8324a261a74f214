from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database import get_db
from app.schemas.equipment import BracketCostItem, EquipmentCatalogResponse
from app.services.equipment_service import fetch_all_equipment, find_bracket_cost

router = APIRouter()


@router.get(
    "/equipment",
    response_model=EquipmentCatalogResponse,
    summary="List equipment catalog",
    description="Panels, inverters, structure types, bracket cost tiers and flat costs. Categories that fail to load or have no rows fall back to built-in defaults and are listed in `fallbacks`.",
)
async def list_equipment(db: AsyncSession = Depends(get_db)):
    catalog = await fetch_all_equipment(db)
    return catalog.to_dict()


@router.get(
    "/equipment/bracket-costs",
    response_model=BracketCostItem,
    summary="Bracket cost tier for a system size",
)
async def get_bracket_cost(
    size: float = Query(..., gt=0, description="System size in kW"),
    db: AsyncSession = Depends(get_db),
):
    catalog = await fetch_all_equipment(db)
    tier = find_bracket_cost(catalog.bracket_costs, size)
    if tier is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No bracket cost tier covers {size} kW",
        )
    return tier
