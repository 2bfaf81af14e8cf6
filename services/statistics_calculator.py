"""
Tournament highlight tables (blowouts, upsets, close games...).

Every game is decided by its scores, the same way standings are. Drawn games
show up in the score-based tables but never in the winner/loser ones.
"""

from typing import Iterable, Sequence

from schemas.statistics import DefeatRecord, GameHighlight, TournamentStatistics
from services.standings_calculator import (
    UNKNOWN_PLAYER_NAME,
    classify_game,
    index_pairings,
    player_side,
    side_view,
)

HIGHLIGHT_LIMIT = 5
NARROW_MARGIN = 5
CLOSE_DEFEAT_MIN_SCORE = 400
UPSET_RATING_GAP = 200
MIN_GAMES_FOR_DEFEATS = 3


def _name_and_rating(players_by_id: dict, player_id) -> tuple:
    player = players_by_id.get(player_id)
    if player is None:
        return UNKNOWN_PLAYER_NAME, 0
    return player.name, player.rating


def _highlight(result, pairing, players_by_id: dict) -> GameHighlight:
    p1_name, p1_rating = _name_and_rating(players_by_id, pairing.player1_id)
    p2_name, p2_rating = _name_and_rating(players_by_id, pairing.player2_id)
    p1_score, p2_score = result.player1_score, result.player2_score

    highlight = GameHighlight(
        result_id=str(result.id),
        round_number=pairing.round_number,
        table_number=pairing.table_number,
        player1_name=p1_name,
        player2_name=p2_name,
        player1_score=p1_score,
        player2_score=p2_score,
        player1_rating=p1_rating,
        player2_rating=p2_rating,
        total_score=p1_score + p2_score,
        spread=abs(p1_score - p2_score),
        highest_score=max(p1_score, p2_score),
        highest_scorer=p1_name if p1_score >= p2_score else p2_name,
    )

    if p1_score == p2_score:
        return highlight

    if p1_score > p2_score:
        winner = (p1_name, p1_score, p1_rating)
        loser = (p2_name, p2_score, p2_rating)
    else:
        winner = (p2_name, p2_score, p2_rating)
        loser = (p1_name, p1_score, p1_rating)

    highlight.winner_name, highlight.winner_score, winner_rating = winner
    highlight.loser_name, highlight.loser_score, loser_rating = loser
    highlight.rating_diff = loser_rating - winner_rating
    return highlight


def _top(games: Iterable[GameHighlight], key, reverse: bool = False) -> list[GameHighlight]:
    return sorted(games, key=key, reverse=reverse)[:HIGHLIGHT_LIMIT]


def fewest_defeats(players: Sequence, pairings_by_id: dict, results: Sequence) -> list[DefeatRecord]:
    records = []
    for player in players:
        losses = games_played = 0
        for result in results:
            pairing = pairings_by_id.get(result.pairing_id)
            if pairing is None:
                continue
            side = player_side(pairing, player.id)
            if side is None:
                continue
            own, opp, _, _ = side_view(pairing, result, side)
            games_played += 1
            if classify_game(own, opp) == "lost":
                losses += 1

        if games_played < MIN_GAMES_FOR_DEFEATS:
            continue

        records.append(
            DefeatRecord(
                id=str(player.id),
                name=player.name,
                rating=player.rating,
                losses=losses,
                games_played=games_played,
                loss_percentage=losses / games_played * 100,
            )
        )

    records.sort(key=lambda record: (record.losses, record.loss_percentage))
    return records[:HIGHLIGHT_LIMIT]


def compute_statistics(players: Sequence, pairings: Iterable, results: Iterable) -> TournamentStatistics:
    pairings_by_id = index_pairings(pairings)
    players_by_id = {player.id: player for player in players}
    results = list(results)

    games = [
        _highlight(result, pairings_by_id[result.pairing_id], players_by_id)
        for result in results
        if result.pairing_id in pairings_by_id
    ]
    games.sort(key=lambda game: (game.round_number, game.table_number))
    decided = [game for game in games if game.winner_name is not None]

    return TournamentStatistics(
        top_combined_scores=_top(games, key=lambda g: g.total_score, reverse=True),
        biggest_blowouts=_top(decided, key=lambda g: g.loser_score),
        largest_spreads=_top(decided, key=lambda g: g.spread, reverse=True),
        most_dominant_wins=_top(decided, key=lambda g: g.winner_score, reverse=True),
        tightest_games=_top(decided, key=lambda g: g.spread),
        narrow_escapes=_top(
            (g for g in decided if g.spread <= NARROW_MARGIN),
            key=lambda g: g.spread,
        ),
        highest_scoring_games=_top(games, key=lambda g: g.highest_score, reverse=True),
        close_defeats=_top(
            (g for g in decided if g.spread <= NARROW_MARGIN and g.loser_score > CLOSE_DEFEAT_MIN_SCORE),
            key=lambda g: g.loser_score,
            reverse=True,
        ),
        biggest_upsets=_top(
            (g for g in decided if g.rating_diff >= UPSET_RATING_GAP),
            key=lambda g: g.rating_diff,
            reverse=True,
        ),
        fewest_defeats=fewest_defeats(players, pairings_by_id, results),
    )
