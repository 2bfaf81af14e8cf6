from fastapi import APIRouter, Path, Request

from core.rate_limit import limiter, PUBLIC_RATE_LIMIT
from schemas.statistics import StatisticsResp
from services.statistics_service import StatisticsService

router = APIRouter(prefix="/tournaments", tags=["Statistics"])


@router.get(
    "/{ref}/statistics",
    response_model=StatisticsResp,
    summary="Get tournament highlights",
    description="Top scores, blowouts, close games, upsets and fewest defeats (top 5 each).",
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_statistics(
    request: Request,
    ref: str = Path(..., description="Tournament id (UUID) or slug"),
) -> StatisticsResp:
    return await StatisticsService.get_statistics(ref)
