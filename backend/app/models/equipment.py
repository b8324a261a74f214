"""Equipment catalog tables: panels, inverters, structures, bracket tiers, flat costs."""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.database import Base


class Panel(Base):
    __tablename__ = "panels"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    brand: Mapped[str] = mapped_column(String(255), nullable=False)
    power: Mapped[int] = mapped_column(Integer, nullable=False)  # W
    price: Mapped[float] = mapped_column(Float, nullable=False)
    default_choice: Mapped[bool] = mapped_column(Boolean, default=False)
    availability: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


class Inverter(Base):
    __tablename__ = "inverters"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    brand: Mapped[str] = mapped_column(String(255), nullable=False)
    power: Mapped[float] = mapped_column(Float, nullable=False)  # kW
    price: Mapped[float] = mapped_column(Float, nullable=False)
    availability: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


class BracketCost(Base):
    """Cable and accessory rates for a system-size tier."""

    __tablename__ = "bracket_costs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    min_size: Mapped[float] = mapped_column(Float, nullable=False)  # kW
    max_size: Mapped[float] = mapped_column(Float, nullable=False)
    dc_cable: Mapped[float] = mapped_column(Float, nullable=False)  # per metre
    ac_cable: Mapped[float] = mapped_column(Float, nullable=False)
    accessories: Mapped[float] = mapped_column(Float, nullable=False)


class VariableCost(Base):
    __tablename__ = "variable_costs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    cost_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    cost: Mapped[float] = mapped_column(Float, nullable=False)


class StructureType(Base):
    """Mounting structure option: custom and absolute per-panel costs."""

    __tablename__ = "structure_types"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    l2: Mapped[bool] = mapped_column(Boolean, default=False)  # elevated frame
    custom_cost: Mapped[float] = mapped_column(Float, nullable=False)
    abs_cost: Mapped[float] = mapped_column(Float, nullable=False)
