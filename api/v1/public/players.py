from fastapi import APIRouter, HTTPException, Path, Request, Response

from api.v1.public.downloads import csv_response
from core.rate_limit import limiter, PUBLIC_RATE_LIMIT
from schemas.player import PlayerSummaryResp
from services.player_service import PlayerService

router = APIRouter(prefix="/tournaments", tags=["Players"])


@router.get(
    "/{ref}/players/{player_id}/summary",
    response_model=PlayerSummaryResp,
    summary="Get a player's games and statistics",
    description="Game-by-game history with record, spread, averages and current rank.",
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_player_summary(
    request: Request,
    ref: str = Path(..., description="Tournament id (UUID) or slug"),
    player_id: str = Path(..., description="Player id"),
) -> PlayerSummaryResp:
    return await PlayerService.get_player_summary(ref, player_id)


@router.get(
    "/{ref}/players/{player_id}/summary/export",
    summary="Download a player's summary as CSV",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}, 404: {"description": "Tournament or player not found"}},
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def export_player_summary(
    request: Request,
    ref: str = Path(..., description="Tournament id (UUID) or slug"),
    player_id: str = Path(..., description="Player id"),
) -> Response:
    export = PlayerService.export_player_summary(ref, player_id)
    if export is None:
        raise HTTPException(status_code=404, detail="Tournament or player not found")
    return csv_response(export)
