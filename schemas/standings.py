from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .common import BaseResponse

GameOutcome = Literal["won", "lost", "drew"]


class LastGame(BaseModel):
    result: GameOutcome
    player_score: float
    opponent_score: float
    opponent_name: str
    opponent_rank: int


class StandingsPlayer(BaseModel):
    id: str
    rank: int
    player_name: str
    rating: float
    wins: int = 0
    losses: int = 0
    draws: int = 0
    games_played: int = 0
    points: float = 0
    spread: float = 0
    starts: int = Field(0, description="Pairings in which the player had first move")
    last_game: Optional[LastGame] = None


class StandingsData(BaseModel):
    tournament_id: str
    tournament_name: str
    players: List[StandingsPlayer]


class StandingsResp(BaseResponse):
    data: Optional[StandingsData] = None
