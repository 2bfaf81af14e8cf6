"""
Tournament and division tables.
"""

import uuid
from datetime import datetime

from peewee import (
    BooleanField,
    CharField,
    DateField,
    DateTimeField,
    DoesNotExist,
    ForeignKeyField,
    IntegerField,
    TextField,
    UUIDField,
)

from db.base import BaseModel
from utils.slugify import generate_tournament_slug, slugify


class Tournament(BaseModel):
    id = UUIDField(primary_key=True, default=uuid.uuid4)
    name = TextField()
    slug = CharField(unique=True, null=True)
    date = DateField(null=True)
    venue = TextField(null=True)
    rounds = IntegerField(null=True, default=6)
    division_count = IntegerField(column_name="divisions", null=True, default=1)
    director_id = UUIDField(null=True)
    current_round = IntegerField(null=True, default=1)
    status = CharField(null=True, default="setup")
    team_mode = BooleanField(null=True, default=False)
    last_activity = DateTimeField(null=True, default=datetime.now)
    created_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = "tournaments"

    @classmethod
    def get_by_ref(cls, ref: str) -> "Tournament | None":
        """
        Look a tournament up by id or slug.

        A reference that parses as a UUID is treated as an id; anything else
        is normalised with slugify and matched against the slug column.
        """
        try:
            tournament_id = uuid.UUID(str(ref))
        except ValueError:
            slug = slugify(ref)
            if not slug:
                return None
            query = cls.slug == slug
        else:
            query = cls.id == tournament_id

        try:
            return cls.get(query)
        except DoesNotExist:
            return None

    def save(self, *args, **kwargs):
        if not self.slug and self.name:
            self.slug = generate_tournament_slug(self.name, self.id)
        return super().save(*args, **kwargs)

    def __repr__(self):
        return f"<Tournament(id={self.id}, name='{self.name}')>"


class Division(BaseModel):
    id = UUIDField(primary_key=True, default=uuid.uuid4)
    tournament = ForeignKeyField(Tournament, backref="division_rows", on_delete="CASCADE")
    name = TextField()
    division_number = IntegerField()
    created_at = DateTimeField(default=datetime.now)

    class Meta:
        table_name = "divisions"

    @classmethod
    def for_tournament(cls, tournament_id) -> list["Division"]:
        return list(
            cls.select()
            .where(cls.tournament == tournament_id)
            .order_by(cls.division_number)
        )
