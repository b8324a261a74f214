import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.schemas.system_sizing import ErrorResponse, SystemSizingRequest, SystemSizingResponse
from engine.sizing import InvalidUsageError, calculate_system_size

logger = logging.getLogger(__name__)

router = APIRouter()

SIZING_FAILURE_MESSAGE = "Failed to calculate system size"


@router.post(
    "/system-sizing",
    response_model=SystemSizingResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid monthly usage"},
        500: {"model": ErrorResponse, "description": "Calculation failure"},
    },
    summary="Estimate system size and cost",
)
async def size_system(body: SystemSizingRequest):
    """Size a residential system from monthly usage and site selectors.

    Pass ``forceSize`` to price an exact system size instead of the derived one.
    """
    try:
        estimate = calculate_system_size(body.model_dump())
    except InvalidUsageError:
        raise
    except Exception:
        logger.exception("System sizing calculation error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SIZING_FAILURE_MESSAGE},
        )

    result = estimate.to_dict()
    logger.info(
        "Sized %.1f kW for %.1f kWh/month",
        result["systemSize"],
        result["consumption"]["monthly"],
        extra={
            "monthly_usage": result["consumption"]["monthly"],
            "system_size": result["systemSize"],
            "total_cost": result["costs"]["total"],
        },
    )
    return result
