"""
Schemas for tournament highlight statistics.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import BaseResponse


class GameHighlight(BaseModel):
    result_id: str
    round_number: int
    table_number: int
    player1_name: str
    player2_name: str
    player1_score: float
    player2_score: float
    player1_rating: float
    player2_rating: float
    total_score: float
    spread: float = Field(..., description="Absolute score difference")
    winner_name: Optional[str] = Field(None, description="Null for drawn games")
    loser_name: Optional[str] = None
    winner_score: Optional[float] = None
    loser_score: Optional[float] = None
    rating_diff: Optional[float] = Field(None, description="Loser rating minus winner rating")
    highest_score: Optional[float] = None
    highest_scorer: Optional[str] = None


class DefeatRecord(BaseModel):
    id: str
    name: str
    rating: float
    losses: int
    games_played: int
    loss_percentage: float


class TournamentStatistics(BaseModel):
    top_combined_scores: List[GameHighlight] = Field(default_factory=list)
    biggest_blowouts: List[GameHighlight] = Field(default_factory=list)
    largest_spreads: List[GameHighlight] = Field(default_factory=list)
    most_dominant_wins: List[GameHighlight] = Field(default_factory=list)
    tightest_games: List[GameHighlight] = Field(default_factory=list)
    narrow_escapes: List[GameHighlight] = Field(default_factory=list)
    highest_scoring_games: List[GameHighlight] = Field(default_factory=list)
    close_defeats: List[GameHighlight] = Field(default_factory=list)
    biggest_upsets: List[GameHighlight] = Field(default_factory=list)
    fewest_defeats: List[DefeatRecord] = Field(default_factory=list)


class StatisticsResp(BaseResponse):
    data: Optional[TournamentStatistics] = None
