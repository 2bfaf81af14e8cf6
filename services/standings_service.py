from typing import Optional

from fastapi import HTTPException
from peewee import PeeweeException

from core.logging import get_logger
from schemas.common import ApiStatus
from schemas.standings import StandingsData, StandingsResp
from services.export_service import CsvExport, standings_csv, standings_filename
from services.standings_calculator import compute_standings
from services.tournament_service import load_tournament_data

log = get_logger("standings")


class StandingsService:

    @staticmethod
    async def get_standings(ref: str) -> StandingsResp:
        try:
            loaded = load_tournament_data(ref)
            if loaded is None:
                return StandingsResp(status=ApiStatus.NOT_FOUND, message="Tournament not found", data=None)

            standings = compute_standings(loaded.players, loaded.pairings, loaded.results)
            log.info(
                "standings_computed",
                tournament_id=str(loaded.tournament.id),
                players=len(standings),
                results=len(loaded.results),
            )

            return StandingsResp(
                status=ApiStatus.SUCCESS,
                message="Standings fetched successfully",
                data=StandingsData(
                    tournament_id=str(loaded.tournament.id),
                    tournament_name=loaded.tournament.name,
                    players=standings,
                ),
            )

        except PeeweeException as e:
            log.error("get_standings_error", ref=ref, error=str(e))
            return StandingsResp(status=ApiStatus.ERROR, message="Failed to load standings", data=None)

    @staticmethod
    def export_standings(ref: str) -> Optional[CsvExport]:
        """Standings as CSV, or None when the tournament does not exist."""
        try:
            loaded = load_tournament_data(ref)
        except PeeweeException as e:
            log.error("export_standings_error", ref=ref, error=str(e))
            raise HTTPException(status_code=503, detail="Failed to load standings")

        if loaded is None:
            return None

        standings = compute_standings(loaded.players, loaded.pairings, loaded.results)
        return CsvExport(
            filename=standings_filename(loaded.tournament.name),
            content=standings_csv(standings),
        )
