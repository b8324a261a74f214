import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.rate_limit import quote_limiter
from app.models.database import get_db
from app.models.quote import Quote
from app.schemas.quote import QuoteCreate, QuoteResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
async def create_quote(
    body: QuoteCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    quote_limiter.check(request)

    quote = Quote(**body.model_dump())
    db.add(quote)
    await db.commit()
    await db.refresh(quote)

    logger.info(
        "Saved quote %s: %.1f kW, total %.0f",
        quote.id,
        quote.system_size,
        quote.total_cost,
        extra={
            "quote_id": str(quote.id),
            "system_size": quote.system_size,
            "total_cost": quote.total_cost,
        },
    )
    return quote


@router.get("/", response_model=list[QuoteResponse])
async def list_quotes(
    bill_reference: str | None = Query(default=None, max_length=100),
    limit: int = Query(default=50, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
):
    stmt = select(Quote).order_by(Quote.created_at.desc(), Quote.id).limit(limit)
    if bill_reference is not None:
        stmt = stmt.where(Quote.bill_reference == bill_reference)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.get("/{quote_id}", response_model=QuoteResponse)
async def get_quote(quote_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    quote = await db.get(Quote, quote_id)
    if not quote:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quote not found")
    return quote
