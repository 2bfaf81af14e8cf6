"""
CSV exports for standings and player summaries.

Every field is wrapped in double quotes and rows are joined with a bare
newline. Quote characters inside a field are written as-is (not doubled), so
a name containing '"' produces a malformed cell.
"""

from typing import Iterable, NamedTuple, Sequence

from schemas.player import PlayerSummary
from schemas.standings import StandingsPlayer

STANDINGS_HEADERS = ["Rank", "Name", "Rating", "W-L-D", "Points", "Spread", "Games"]
PLAYER_GAME_HEADERS = [
    "Round",
    "Table",
    "Opponent",
    "Opp Rating",
    "Player Score",
    "Opp Score",
    "Result",
    "Spread",
    "First Move",
]
DEFAULT_EXPORT_NAME = "Tournament"


def format_cell(value) -> str:
    # 1.0 -> "1", 1.5 -> "1.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_csv(rows: Iterable[Sequence]) -> str:
    return "\n".join(
        ",".join(f'"{format_cell(cell)}"' for cell in row)
        for row in rows
    )


def standings_csv(standings: Iterable[StandingsPlayer]) -> str:
    rows = [
        [
            s.rank,
            s.player_name,
            s.rating,
            f"{s.wins}-{s.losses}-{s.draws}",
            s.points,
            s.spread,
            s.games_played,
        ]
        for s in standings
    ]
    return to_csv([STANDINGS_HEADERS, *rows])


def player_summary_csv(summary: PlayerSummary) -> str:
    preamble = [
        [f"Player Summary: {summary.name}"],
        [f"Rating: {format_cell(summary.rating)}"],
        [f"Record: {summary.wins}-{summary.losses}-{summary.draws}"],
        [f"Total Spread: {format_cell(summary.total_spread)}"],
        [f"Win Percentage: {summary.win_percentage:.1f}%"],
        [],
    ]
    rows = [
        [
            game.round,
            game.table_number,
            game.opponent_name,
            game.opponent_rating,
            game.player_score,
            game.opponent_score,
            game.result.upper(),
            game.spread,
            "Yes" if game.was_first_move else "No",
        ]
        for game in summary.games
    ]
    return to_csv([*preamble, PLAYER_GAME_HEADERS, *rows])


def standings_filename(tournament_name: str | None) -> str:
    return f"{tournament_name or DEFAULT_EXPORT_NAME}_Standings.csv"


def summary_filename(player_name: str) -> str:
    return f"{player_name}_Summary.csv"


class CsvExport(NamedTuple):
    filename: str
    content: str
