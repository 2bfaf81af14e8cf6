from peewee import PeeweeException

from core.logging import get_logger
from schemas.common import ApiStatus
from schemas.statistics import StatisticsResp
from services.statistics_calculator import compute_statistics
from services.tournament_service import load_tournament_data

log = get_logger("statistics")


class StatisticsService:

    @staticmethod
    async def get_statistics(ref: str) -> StatisticsResp:
        try:
            loaded = load_tournament_data(ref)
            if loaded is None:
                return StatisticsResp(status=ApiStatus.NOT_FOUND, message="Tournament not found", data=None)

            return StatisticsResp(
                status=ApiStatus.SUCCESS,
                message="Tournament statistics fetched successfully",
                data=compute_statistics(loaded.players, loaded.pairings, loaded.results),
            )

        except PeeweeException as e:
            log.error("get_statistics_error", ref=ref, error=str(e))
            return StatisticsResp(status=ApiStatus.ERROR, message="Failed to load tournament statistics", data=None)
