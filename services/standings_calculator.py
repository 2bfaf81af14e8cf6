"""
Standings computation.

compute_standings is the only ranking function in the service. The standings
table, the player summary's current rank and the standings CSV all go through
it, so the numbers shown in different places always agree.

Inputs are plain sequences of Player, Pairing and Result rows (peewee model
instances, saved or not). Only these attributes are read:

    player:  id, name, rating
    pairing: id, round_number, player1_id, player2_id, player1_rank,
             player2_rank, first_move_player_id
    result:  pairing_id, player1_score, player2_score

Nothing is mutated and no state is kept between calls.
"""

from typing import Iterable, Optional, Sequence

from schemas.standings import GameOutcome, LastGame, StandingsPlayer

UNKNOWN_PLAYER_NAME = "Unknown"


def classify_game(own_score, opponent_score) -> GameOutcome:
    """Win, loss or draw from the scores alone. Result.winner is never consulted."""
    if own_score > opponent_score:
        return "won"
    if own_score < opponent_score:
        return "lost"
    return "drew"


def player_side(pairing, player_id) -> Optional[int]:
    """Return 1 or 2 for the pairing side the player sits on, None if neither."""
    if pairing.player1_id == player_id:
        return 1
    if pairing.player2_id == player_id:
        return 2
    return None


def side_view(pairing, result, side: int) -> tuple:
    """(own score, opponent score, opponent id, opponent rank) from one side."""
    if side == 1:
        return (
            result.player1_score,
            result.player2_score,
            pairing.player2_id,
            pairing.player2_rank,
        )
    return (
        result.player2_score,
        result.player1_score,
        pairing.player1_id,
        pairing.player1_rank,
    )


def index_pairings(pairings: Iterable) -> dict:
    return {pairing.id: pairing for pairing in pairings}


def compute_standings(
    players: Sequence,
    pairings: Iterable,
    results: Iterable,
) -> list[StandingsPlayer]:
    """
    Build one standings row per player and rank them.

    Ordering is points, then spread, then rating, all descending. Rows that
    tie on all three keep their order from ``players``. Ranks are positional
    (1..n) and never shared.

    Results whose pairing is missing, or whose pairing does not include the
    player, contribute nothing to that player's row.
    """
    pairings = list(pairings)
    results = list(results)
    pairings_by_id = index_pairings(pairings)
    players_by_id = {player.id: player for player in players}

    rows = []
    for player in players:
        wins = losses = draws = games_played = 0
        points_for = points_against = 0
        last_game = None
        last_round = 0

        starts = sum(
            1
            for pairing in pairings
            if pairing.first_move_player_id is not None
            and pairing.first_move_player_id == player.id
        )

        for result in results:
            pairing = pairings_by_id.get(result.pairing_id)
            if pairing is None:
                continue

            side = player_side(pairing, player.id)
            if side is None:
                continue

            own, opp, opponent_id, opponent_rank = side_view(pairing, result, side)
            points_for += own
            points_against += opp
            games_played += 1

            outcome = classify_game(own, opp)
            if outcome == "won":
                wins += 1
            elif outcome == "lost":
                losses += 1
            else:
                draws += 1

            if pairing.round_number > last_round:
                last_round = pairing.round_number
                opponent = players_by_id.get(opponent_id)
                last_game = LastGame(
                    result=outcome,
                    player_score=own,
                    opponent_score=opp,
                    opponent_name=opponent.name if opponent is not None else UNKNOWN_PLAYER_NAME,
                    opponent_rank=opponent_rank or 0,
                )

        rows.append(
            StandingsPlayer(
                id=str(player.id),
                rank=0,
                player_name=player.name,
                rating=player.rating,
                wins=wins,
                losses=losses,
                draws=draws,
                games_played=games_played,
                points=wins + 0.5 * draws,
                spread=points_for - points_against,
                starts=starts,
                last_game=last_game,
            )
        )

    # sorted() is stable with reverse=True, so full ties keep input order
    ranked = sorted(rows, key=lambda row: (row.points, row.spread, row.rating), reverse=True)
    for index, row in enumerate(ranked):
        row.rank = index + 1

    return ranked


def find_rank(standings: Iterable[StandingsPlayer], player_id) -> int:
    """1-based rank of a player in computed standings, 0 when absent."""
    player_id = str(player_id)
    for row in standings:
        if row.id == player_id:
            return row.rank
    return 0
