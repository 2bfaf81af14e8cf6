import os
import tempfile

# Point the app at a throwaway SQLite file before anything imports settings
_DB_DIR = tempfile.mkdtemp(prefix="tournament-view-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import uuid

import pytest
from fastapi.testclient import TestClient

from db.base import db
from db.models import MODELS, Division, Pairing, Player, Result, Tournament
from main import app


@pytest.fixture
def database():
    db.connect(reuse_if_open=True)
    db.create_tables(MODELS)
    yield db
    db.drop_tables(list(reversed(MODELS)))
    db.close()


@pytest.fixture
def client(database):
    return TestClient(app)


@pytest.fixture
def spring_open(database):
    """
    Four players, two completed rounds and one unplayed round.

        R1  T1 Alice 400 - 350 Dave     (Alice first)
            T2 Bob   380 - 380 Carol    (Carol first)
        R2  T1 Alice 300 - 420 Bob      (Bob first)
            T2 Carol 450 - 300 Dave     (Dave first)
        R3  T1 Alice  vs  Carol         (Alice first, no result)
    """
    tournament = Tournament.create(name="Spring Open", slug="spring-open", rounds=3, current_round=3)

    alice = Player.create(name="Alice", rating=1800, tournament=tournament)
    bob = Player.create(name="Bob", rating=1600, tournament=tournament)
    carol = Player.create(name="Carol", rating=1500, tournament=tournament)
    dave = Player.create(name="Dave", rating=1400, tournament=tournament)

    def pair(round_number, table_number, p1, p2, first, p1_rank, p2_rank):
        return Pairing.create(
            tournament=tournament,
            round_number=round_number,
            table_number=table_number,
            player1=p1,
            player2=p2,
            player1_rank=p1_rank,
            player2_rank=p2_rank,
            first_move_player=first,
        )

    r1t1 = pair(1, 1, alice, dave, alice, 1, 4)
    r1t2 = pair(1, 2, bob, carol, carol, 2, 3)
    r2t1 = pair(2, 1, alice, bob, bob, 1, 2)
    r2t2 = pair(2, 2, carol, dave, dave, 3, 4)
    pair(3, 1, alice, carol, alice, 3, 1)

    def score(p, s1, s2, winner):
        return Result.create(
            pairing=p,
            tournament=tournament,
            round_number=p.round_number,
            player1_score=s1,
            player2_score=s2,
            winner=winner,
        )

    score(r1t1, 400, 350, alice)
    score(r1t2, 380, 380, None)
    score(r2t1, 300, 420, bob)
    score(r2t2, 450, 300, carol)

    return {
        "tournament": tournament,
        "alice": alice,
        "bob": bob,
        "carol": carol,
        "dave": dave,
    }


@pytest.fixture
def divisions(spring_open):
    tournament = spring_open["tournament"]
    return [
        Division.create(tournament=tournament, name="Open", division_number=1),
        Division.create(tournament=tournament, name="Lite", division_number=2),
    ]


@pytest.fixture
def unknown_ref():
    return str(uuid.uuid4())
