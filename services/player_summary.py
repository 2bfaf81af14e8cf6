"""
Per-player game history and aggregate statistics.
"""

from typing import Iterable, Sequence

from schemas.player import PlayerGame, PlayerSummary
from services.standings_calculator import (
    UNKNOWN_PLAYER_NAME,
    classify_game,
    compute_standings,
    find_rank,
    index_pairings,
    player_side,
    side_view,
)


def build_player_games(player_id, players: Sequence, pairings: Iterable, results: Iterable) -> list[PlayerGame]:
    """Every completed game of one player, ordered by round."""
    pairings_by_id = index_pairings(pairings)
    players_by_id = {player.id: player for player in players}

    games = []
    for result in results:
        pairing = pairings_by_id.get(result.pairing_id)
        if pairing is None:
            continue

        side = player_side(pairing, player_id)
        if side is None:
            continue

        own, opp, opponent_id, opponent_rank = side_view(pairing, result, side)
        opponent = players_by_id.get(opponent_id)

        games.append(
            PlayerGame(
                round=pairing.round_number,
                table_number=pairing.table_number,
                opponent_id=str(opponent_id),
                opponent_name=opponent.name if opponent is not None else UNKNOWN_PLAYER_NAME,
                opponent_rank=opponent_rank or 0,
                opponent_rating=opponent.rating if opponent is not None else 0,
                player_score=own,
                opponent_score=opp,
                result=classify_game(own, opp),
                spread=own - opp,
                was_first_move=(
                    pairing.first_move_player_id is not None
                    and pairing.first_move_player_id == player_id
                ),
            )
        )

    games.sort(key=lambda game: game.round)
    return games


def build_player_summary(player, players: Sequence, pairings: Iterable, results: Iterable) -> PlayerSummary:
    """
    Summarise one player's tournament.

    ``players`` is the full roster; it supplies opponent names and ratings and
    is what the current rank is computed against. The rank comes from
    compute_standings so it always matches the standings table.
    """
    pairings = list(pairings)
    results = list(results)

    games = build_player_games(player.id, players, pairings, results)

    wins = sum(1 for game in games if game.result == "won")
    losses = sum(1 for game in games if game.result == "lost")
    draws = sum(1 for game in games if game.result == "drew")
    total_score = sum(game.player_score for game in games)
    total_opponent_score = sum(game.opponent_score for game in games)
    total_games = len(games)

    standings = compute_standings(players, pairings, results)

    return PlayerSummary(
        id=str(player.id),
        name=player.name,
        rating=player.rating,
        total_games=total_games,
        wins=wins,
        losses=losses,
        draws=draws,
        points=wins + 0.5 * draws,
        total_spread=total_score - total_opponent_score,
        average_score=total_score / total_games if total_games else 0,
        average_opponent_score=total_opponent_score / total_games if total_games else 0,
        first_move_games=sum(1 for game in games if game.was_first_move),
        win_percentage=wins / total_games * 100 if total_games else 0,
        current_rank=find_rank(standings, player.id),
        games=games,
    )
