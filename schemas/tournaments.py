"""
Schemas for tournament, roster and pairing responses.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .common import BaseResponse


class TournamentInfo(BaseModel):
    id: str
    name: str
    slug: Optional[str] = None
    date: Optional[str] = Field(None, description="Tournament date (YYYY-MM-DD)")
    venue: Optional[str] = None
    rounds: Optional[int] = None
    current_round: Optional[int] = None
    status: Optional[str] = None
    max_rounds: int = Field(..., description="Rounds to display, falls back to the configured default")


class TournamentResp(BaseResponse):
    data: Optional[TournamentInfo] = None


class DivisionInfo(BaseModel):
    id: str
    name: str
    division_number: int


class DivisionsResp(BaseResponse):
    data: List[DivisionInfo] = Field(default_factory=list)


class PlayerInfo(BaseModel):
    id: str
    name: str
    rating: float
    team_name: Optional[str] = None


class PlayersResp(BaseResponse):
    data: List[PlayerInfo] = Field(default_factory=list)


class PairingResult(BaseModel):
    id: str
    player1_score: float
    player2_score: float
    winner_id: Optional[str] = None


class PairingInfo(BaseModel):
    id: str
    round_number: int
    table_number: int
    player1: PlayerInfo
    player2: PlayerInfo
    player1_rank: int
    player2_rank: int
    first_move_player_id: Optional[str] = None
    result: Optional[PairingResult] = None


class PairingsData(BaseModel):
    max_rounds: int
    rounds: Dict[int, List[PairingInfo]] = Field(
        default_factory=dict, description="Pairings keyed by round number, ordered by table"
    )


class PairingsResp(BaseResponse):
    data: Optional[PairingsData] = None
