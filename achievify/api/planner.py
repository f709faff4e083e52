"""Weekly planner API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from achievify.api.dependencies import get_planner_service
from achievify.schemas.planner import PlannerResponse, PlannerSave, PlannerSaveResponse
from achievify.services.planner import PlannerService

router = APIRouter(prefix="/api/planner", tags=["planner"])


@router.get("", response_model=PlannerResponse)
def get_planner_week(
    service: Annotated[PlannerService, Depends(get_planner_service)],
    user_id: int | None = Query(default=None, alias="userId"),
    week: str | None = Query(default=None, description="Week key, e.g. 2025-W07"),
):
    """Get a week's grid. Unsaved weeks return an empty grid."""
    return service.load(user_id, week)


@router.post("", response_model=PlannerSaveResponse)
def save_planner_week(
    planner_data: PlannerSave,
    service: Annotated[PlannerService, Depends(get_planner_service)],
):
    """Save a week's grid, replacing any previous version."""
    saved = service.save(
        planner_data.user_id,
        planner_data.week,
        planner_data.model_dump()["data"],
    )
    return {"message": "Saved", **saved}
