import uuid
from datetime import datetime

from peewee import DateTimeField, ForeignKeyField, IntegerField, UUIDField

from db.base import BaseModel
from db.models.pairings import Pairing
from db.models.players import Player
from db.models.tournaments import Tournament


class Result(BaseModel):
    id = UUIDField(primary_key=True, default=uuid.uuid4)
    pairing = ForeignKeyField(Pairing, backref="results", on_delete="CASCADE")
    tournament = ForeignKeyField(Tournament, backref="results", null=True, on_delete="CASCADE")
    round_number = IntegerField()
    player1_score = IntegerField(default=0)
    player2_score = IntegerField(default=0)
    # Set by score entry; standings never read it
    winner = ForeignKeyField(Player, backref="won_results", null=True, on_delete="SET NULL")
    submitted_by = UUIDField(null=True)
    created_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = "results"

    @classmethod
    def for_pairings(cls, pairing_ids) -> list["Result"]:
        pairing_ids = list(pairing_ids)
        if not pairing_ids:
            return []
        return list(cls.select().where(cls.pairing.in_(pairing_ids)))
