from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1 import equipment, quotes, system_sizing
from app.core.errors import register_exception_handlers
from app.core.logging import RequestLoggingMiddleware, setup_logging
from app.models.database import get_db, get_engine


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    yield
    await get_engine().dispose()


def create_app() -> FastAPI:
    setup_logging(json_format=settings.log_json, debug=settings.debug)

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
    )

    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(system_sizing.router, prefix="/api/v1", tags=["system-sizing"])
    application.include_router(equipment.router, prefix="/api/v1", tags=["equipment"])
    application.include_router(quotes.router, prefix="/api/v1/quotes", tags=["quotes"])

    @application.get("/health")
    async def health_check(db: AsyncSession = Depends(get_db)) -> dict:
        result: dict = {"status": "ok", "services": {}}

        try:
            await db.execute(text("SELECT 1"))
            result["services"]["database"] = "ok"
        except Exception as e:
            result["services"]["database"] = f"error: {e}"
            result["status"] = "degraded"

        return result

    return application


app = create_app()
