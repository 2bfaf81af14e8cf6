import uuid
from datetime import datetime

from peewee import (
    BooleanField,
    DateTimeField,
    ForeignKeyField,
    IntegerField,
    UUIDField,
)

from db.base import BaseModel
from db.models.players import Player
from db.models.tournaments import Tournament


class Pairing(BaseModel):
    id = UUIDField(primary_key=True, default=uuid.uuid4)
    round_number = IntegerField()
    tournament = ForeignKeyField(Tournament, backref="pairings", on_delete="CASCADE")
    table_number = IntegerField()
    player1 = ForeignKeyField(Player, backref="pairings_as_player1", on_delete="CASCADE")
    player2 = ForeignKeyField(Player, backref="pairings_as_player2", on_delete="CASCADE")
    # Rank of each player at the moment the round was paired
    player1_rank = IntegerField(default=0)
    player2_rank = IntegerField(default=0)
    first_move_player = ForeignKeyField(
        Player, backref="first_move_pairings", null=True, on_delete="CASCADE"
    )
    player1_gibsonized = BooleanField(null=True, default=False)
    player2_gibsonized = BooleanField(null=True, default=False)
    created_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = "pairings"
        indexes = ((("tournament", "round_number"), False),)

    @classmethod
    def for_tournament(cls, tournament_id) -> list["Pairing"]:
        return list(
            cls.select()
            .where(cls.tournament == tournament_id)
            .order_by(cls.round_number, cls.table_number)
        )

    def __repr__(self):
        return (
            f"<Pairing(round={self.round_number}, table={self.table_number}, "
            f"player1={self.player1_id}, player2={self.player2_id})>"
        )
