"""rv_revenue REST endpoints.

GET  /revenue          — current committed snapshot (never partial)
POST /revenue/refresh  — run one refresh; errors map to the AppError envelope
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.rv_common.response import ApiResponse, success_response
from src.rv_revenue.application.orchestrator import RevenueOrchestrator
from src.rv_revenue.application.schemas import RevenueSnapshotOut
from src.rv_revenue.application.service import get_orchestrator

router = APIRouter(prefix="/revenue", tags=["revenue"])


@router.get("")
async def get_revenue(
    request: Request,
    orchestrator: Annotated[RevenueOrchestrator, Depends(get_orchestrator)],
) -> ApiResponse:
    result = RevenueSnapshotOut.from_domain(
        orchestrator.snapshot,
        failure=orchestrator.last_failure,
        refreshing=orchestrator.is_refreshing,
    )
    return success_response(result.model_dump(), getattr(request.state, "request_id", None))


@router.post("/refresh")
async def refresh_revenue(
    request: Request,
    orchestrator: Annotated[RevenueOrchestrator, Depends(get_orchestrator)],
) -> ApiResponse:
    snapshot = await orchestrator.refresh()
    result = RevenueSnapshotOut.from_domain(snapshot)
    return success_response(result.model_dump(), getattr(request.state, "request_id", None))
