import uuid
from typing import Optional

from fastapi import HTTPException
from peewee import PeeweeException

from core.logging import get_logger
from schemas.common import ApiStatus
from schemas.player import PlayerSummaryResp
from services.export_service import CsvExport, player_summary_csv, summary_filename
from services.player_summary import build_player_summary
from services.tournament_service import TournamentData, load_tournament_data

log = get_logger("players")


def _normalise_id(value) -> str:
    # Accept any UUID spelling (upper case, no hyphens) for the same player
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        return str(value)


def _find_player(loaded: TournamentData, player_id: str):
    wanted = _normalise_id(player_id)
    for player in loaded.players:
        if _normalise_id(player.id) == wanted:
            return player
    return None


class PlayerService:

    @staticmethod
    async def get_player_summary(ref: str, player_id: str) -> PlayerSummaryResp:
        try:
            loaded = load_tournament_data(ref)
            if loaded is None:
                return PlayerSummaryResp(status=ApiStatus.NOT_FOUND, message="Tournament not found", data=None)

            player = _find_player(loaded, player_id)
            if player is None:
                return PlayerSummaryResp(status=ApiStatus.NOT_FOUND, message="Player not found", data=None)

            summary = build_player_summary(player, loaded.players, loaded.pairings, loaded.results)

            return PlayerSummaryResp(
                status=ApiStatus.SUCCESS,
                message="Player stats fetched successfully",
                data=summary,
            )

        except PeeweeException as e:
            log.error("get_player_summary_error", ref=ref, player_id=player_id, error=str(e))
            return PlayerSummaryResp(status=ApiStatus.ERROR, message="Failed to load player statistics", data=None)

    @staticmethod
    def export_player_summary(ref: str, player_id: str) -> Optional[CsvExport]:
        """Player summary as CSV, or None when the tournament or player is unknown."""
        try:
            loaded = load_tournament_data(ref)
        except PeeweeException as e:
            log.error("export_player_summary_error", ref=ref, player_id=player_id, error=str(e))
            raise HTTPException(status_code=503, detail="Failed to load player statistics")

        if loaded is None:
            return None

        player = _find_player(loaded, player_id)
        if player is None:
            return None

        summary = build_player_summary(player, loaded.players, loaded.pairings, loaded.results)
        return CsvExport(
            filename=summary_filename(summary.name),
            content=player_summary_csv(summary),
        )
