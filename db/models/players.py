import uuid
from datetime import datetime

from peewee import DateTimeField, ForeignKeyField, IntegerField, TextField, UUIDField

from db.base import BaseModel
from db.models.tournaments import Tournament


class Player(BaseModel):
    id = UUIDField(primary_key=True, default=uuid.uuid4)
    name = TextField()
    rating = IntegerField(default=1500)
    tournament = ForeignKeyField(Tournament, backref="players", on_delete="CASCADE")
    team_name = TextField(null=True)
    created_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = "players"

    @classmethod
    def for_tournament(cls, tournament_id) -> list["Player"]:
        """Roster ordered by rating, highest first."""
        return list(
            cls.select()
            .where(cls.tournament == tournament_id)
            .order_by(cls.rating.desc())
        )

    def __repr__(self):
        return f"<Player(id={self.id}, name='{self.name}', rating={self.rating})>"
