"""
Service for tournament, roster and pairing lookups.

Also owns load_tournament_data, which every derived view (standings, player
summaries, statistics, exports) uses to materialise its inputs.
"""

from typing import NamedTuple, Optional

from peewee import PeeweeException

from core.logging import get_logger
from core.settings import settings
from db.models import Division, Pairing, Player, Result, Tournament
from schemas.common import ApiStatus
from schemas.tournaments import (
    DivisionInfo,
    DivisionsResp,
    PairingInfo,
    PairingResult,
    PairingsData,
    PairingsResp,
    PlayerInfo,
    PlayersResp,
    TournamentInfo,
    TournamentResp,
)
from services.standings_calculator import UNKNOWN_PLAYER_NAME

log = get_logger("tournaments")

DEFAULT_DIVISION = DivisionInfo(id="default", name="Main Division", division_number=1)


class TournamentData(NamedTuple):
    tournament: Tournament
    players: list
    pairings: list
    results: list


def load_tournament_data(ref: str) -> Optional[TournamentData]:
    """
    Load a tournament with its roster, pairings and results.

    Returns None when the tournament does not exist. Database errors
    propagate to the caller.
    """
    tournament = Tournament.get_by_ref(ref)
    if tournament is None:
        return None

    players = Player.for_tournament(tournament.id)
    pairings = Pairing.for_tournament(tournament.id)
    results = Result.for_pairings(p.id for p in pairings)

    log.debug(
        "tournament_data_loaded",
        tournament_id=str(tournament.id),
        players=len(players),
        pairings=len(pairings),
        results=len(results),
    )
    return TournamentData(tournament, players, pairings, results)


def max_rounds_for(tournament: Tournament) -> int:
    return tournament.rounds or settings.default_max_rounds


def to_tournament_info(tournament: Tournament) -> TournamentInfo:
    return TournamentInfo(
        id=str(tournament.id),
        name=tournament.name,
        slug=tournament.slug,
        date=tournament.date.isoformat() if tournament.date else None,
        venue=tournament.venue,
        rounds=tournament.rounds,
        current_round=tournament.current_round,
        status=tournament.status,
        max_rounds=max_rounds_for(tournament),
    )


def to_player_info(player: Player) -> PlayerInfo:
    return PlayerInfo(
        id=str(player.id),
        name=player.name,
        rating=player.rating,
        team_name=player.team_name,
    )


def group_pairings_by_round(players: list, pairings: list, results: list) -> dict[int, list[PairingInfo]]:
    """Pairings keyed by round, each with its result attached when one exists."""
    players_by_id = {player.id: player for player in players}

    results_by_pairing = {}
    for result in results:
        results_by_pairing.setdefault(result.pairing_id, result)

    def player_info(player_id) -> PlayerInfo:
        player = players_by_id.get(player_id)
        if player is None:
            return PlayerInfo(id=str(player_id), name=UNKNOWN_PLAYER_NAME, rating=0)
        return to_player_info(player)

    rounds: dict[int, list[PairingInfo]] = {}
    for pairing in sorted(pairings, key=lambda p: (p.round_number, p.table_number)):
        result = results_by_pairing.get(pairing.id)
        rounds.setdefault(pairing.round_number, []).append(
            PairingInfo(
                id=str(pairing.id),
                round_number=pairing.round_number,
                table_number=pairing.table_number,
                player1=player_info(pairing.player1_id),
                player2=player_info(pairing.player2_id),
                player1_rank=pairing.player1_rank or 0,
                player2_rank=pairing.player2_rank or 0,
                first_move_player_id=(
                    str(pairing.first_move_player_id) if pairing.first_move_player_id else None
                ),
                result=(
                    PairingResult(
                        id=str(result.id),
                        player1_score=result.player1_score,
                        player2_score=result.player2_score,
                        winner_id=str(result.winner_id) if result.winner_id else None,
                    )
                    if result is not None
                    else None
                ),
            )
        )
    return rounds


class TournamentService:

    @staticmethod
    async def get_tournament(ref: str) -> TournamentResp:
        try:
            tournament = Tournament.get_by_ref(ref)
            if tournament is None:
                return TournamentResp(status=ApiStatus.NOT_FOUND, message="Tournament not found", data=None)

            return TournamentResp(
                status=ApiStatus.SUCCESS,
                message="Tournament fetched successfully",
                data=to_tournament_info(tournament),
            )

        except PeeweeException as e:
            log.error("get_tournament_error", ref=ref, error=str(e))
            return TournamentResp(status=ApiStatus.ERROR, message="Failed to load tournament data", data=None)

    @staticmethod
    async def get_divisions(ref: str) -> DivisionsResp:
        """Divisions in display order; a tournament without any gets the single default division."""
        try:
            tournament = Tournament.get_by_ref(ref)
            if tournament is None:
                return DivisionsResp(status=ApiStatus.NOT_FOUND, message="Tournament not found", data=[])

            divisions = [
                DivisionInfo(id=str(d.id), name=d.name, division_number=d.division_number)
                for d in Division.for_tournament(tournament.id)
            ]

            return DivisionsResp(
                status=ApiStatus.SUCCESS,
                message="Divisions fetched successfully",
                data=divisions or [DEFAULT_DIVISION],
            )

        except PeeweeException as e:
            log.error("get_divisions_error", ref=ref, error=str(e))
            return DivisionsResp(status=ApiStatus.ERROR, message="Failed to load tournament data", data=[])

    @staticmethod
    async def get_players(ref: str) -> PlayersResp:
        try:
            tournament = Tournament.get_by_ref(ref)
            if tournament is None:
                return PlayersResp(status=ApiStatus.NOT_FOUND, message="Tournament not found", data=[])

            players = [to_player_info(p) for p in Player.for_tournament(tournament.id)]

            return PlayersResp(
                status=ApiStatus.SUCCESS,
                message=f"{len(players)} players fetched successfully",
                data=players,
            )

        except PeeweeException as e:
            log.error("get_players_error", ref=ref, error=str(e))
            return PlayersResp(status=ApiStatus.ERROR, message="Failed to load tournament data", data=[])

    @staticmethod
    async def get_pairings(ref: str) -> PairingsResp:
        try:
            loaded = load_tournament_data(ref)
            if loaded is None:
                return PairingsResp(status=ApiStatus.NOT_FOUND, message="Tournament not found", data=None)

            rounds = group_pairings_by_round(loaded.players, loaded.pairings, loaded.results)

            return PairingsResp(
                status=ApiStatus.SUCCESS,
                message="Pairings fetched successfully",
                data=PairingsData(max_rounds=max_rounds_for(loaded.tournament), rounds=rounds),
            )

        except PeeweeException as e:
            log.error("get_pairings_error", ref=ref, error=str(e))
            return PairingsResp(status=ApiStatus.ERROR, message="Failed to load tournament data", data=None)
