from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from api.rendering import templates
from data.diagrams import GRID_CHECKS, GRID_POINTS, STAGE_COUNT, ErrorGridState, MetricPreset, StageFrame

router = APIRouter()


@router.get("/error-grid")
def error_grid(
    request: Request,
    errors: list[int] = Query(default=[]),
    toggle: Optional[int] = None,
):
    try:
        grid = ErrorGridState.from_points(errors)
        if toggle is not None:
            grid = grid.toggle(toggle)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return templates.TemplateResponse(
        request,
        "partials/error_grid.html",
        {"grid": grid, "grid_checks": GRID_CHECKS, "grid_points": GRID_POINTS},
    )


@router.get("/stages")
def stages(request: Request, step: int = Query(default=0, ge=0, lt=STAGE_COUNT)):
    return templates.TemplateResponse(request, "partials/stage_frame.html", {"stage": StageFrame(step=step)})


@router.get("/metric-chart")
def metric_chart(request: Request, distance: Optional[int] = None):
    try:
        metric = MetricPreset(distance=distance) if distance is not None else MetricPreset()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return templates.TemplateResponse(request, "partials/metric_chart.html", {"metric": metric})
