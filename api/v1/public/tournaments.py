"""
Public tournament endpoints: tournament info, divisions, roster and pairings.

{ref} is either the tournament UUID or its slug.
"""

from fastapi import APIRouter, Path, Request

from core.rate_limit import limiter, PUBLIC_RATE_LIMIT
from schemas.tournaments import DivisionsResp, PairingsResp, PlayersResp, TournamentResp
from services.tournament_service import TournamentService

router = APIRouter(prefix="/tournaments", tags=["Tournaments"])


@router.get(
    "/{ref}",
    response_model=TournamentResp,
    summary="Get a tournament",
    responses={
        200: {"description": "Tournament retrieved (check status for not_found)"},
        429: {"description": "Rate limit exceeded"},
    },
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_tournament(
    request: Request,
    ref: str = Path(..., description="Tournament id (UUID) or slug"),
) -> TournamentResp:
    return await TournamentService.get_tournament(ref)


@router.get("/{ref}/divisions", response_model=DivisionsResp, summary="List divisions")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_divisions(
    request: Request,
    ref: str = Path(..., description="Tournament id (UUID) or slug"),
) -> DivisionsResp:
    return await TournamentService.get_divisions(ref)


@router.get("/{ref}/players", response_model=PlayersResp, summary="List players by rating")
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_players(
    request: Request,
    ref: str = Path(..., description="Tournament id (UUID) or slug"),
) -> PlayersResp:
    return await TournamentService.get_players(ref)


@router.get(
    "/{ref}/pairings",
    response_model=PairingsResp,
    summary="Get pairings by round",
    description="Pairings grouped by round and ordered by table, each with its result once entered.",
)
@limiter.limit(PUBLIC_RATE_LIMIT)
async def get_pairings(
    request: Request,
    ref: str = Path(..., description="Tournament id (UUID) or slug"),
) -> PairingsResp:
    return await TournamentService.get_pairings(ref)
