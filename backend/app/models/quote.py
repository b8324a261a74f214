import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.database import Base


class Quote(Base):
    __tablename__ = "quotes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    bill_reference: Mapped[str | None] = mapped_column(String(100), index=True)
    monthly_usage: Mapped[float | None] = mapped_column(Float)  # kWh
    system_size: Mapped[float] = mapped_column(Float, nullable=False)  # kW
    total_cost: Mapped[float] = mapped_column(Float, nullable=False)
    panel_power: Mapped[int | None] = mapped_column(Integer)  # W
    inverter_size: Mapped[float | None] = mapped_column(Float)  # kW
    breakdown: Mapped[dict] = mapped_column(JSON, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
