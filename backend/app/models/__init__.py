# Import all models so SQLAlchemy metadata is complete
from app.models.database import Base  # noqa: F401
from app.models.equipment import Panel, Inverter, StructureType, BracketCost, VariableCost  # noqa: F401
from app.models.quote import Quote  # noqa: F401
