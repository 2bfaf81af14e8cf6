from typing import List, Optional

from pydantic import BaseModel

from .common import BaseResponse
from .standings import GameOutcome


class PlayerGame(BaseModel):
    round: int
    table_number: int
    opponent_id: str
    opponent_name: str
    opponent_rank: int
    opponent_rating: float
    player_score: float
    opponent_score: float
    result: GameOutcome
    spread: float
    was_first_move: bool


class PlayerSummary(BaseModel):
    id: str
    name: str
    rating: float
    total_games: int
    wins: int
    losses: int
    draws: int
    points: float
    total_spread: float
    average_score: float
    average_opponent_score: float
    first_move_games: int
    win_percentage: float
    current_rank: int
    games: List[PlayerGame]


class PlayerSummaryResp(BaseResponse):
    data: Optional[PlayerSummary] = None
