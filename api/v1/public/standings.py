from fastapi import APIRouter, HTTPException, Path, Request, Response

from api.v1.public.downloads import csv_response
from core.rate_limit import limiter, PUBLIC_RATE_LIMIT
from schemas.standings import StandingsResp
from services.standings_service import StandingsService

router = APIRouter(prefix="/tournaments", tags=["Standings"])


@router.get(
    "/{ref}/standings",
    response_model=StandingsResp,
    summary="Get live standings",
    description=(
        "Standings recomputed from every entered result. Ordered by points, "
        "then spread, then rating."
    ),
    responses={
        200: {"description": "Standings retrieved successfully"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_standings(
    request: Request,
    ref: str = Path(..., description="Tournament id (UUID) or slug"),
) -> StandingsResp:
    return await StandingsService.get_standings(ref)


@router.get(
    "/{ref}/standings/export",
    summary="Download standings as CSV",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}, 404: {"description": "Tournament not found"}},
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def export_standings(
    request: Request,
    ref: str = Path(..., description="Tournament id (UUID) or slug"),
) -> Response:
    export = StandingsService.export_standings(ref)
    if export is None:
        raise HTTPException(status_code=404, detail="Tournament not found")
    return csv_response(export)
