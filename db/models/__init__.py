# Import all models to ensure they are registered with the database
from db.models.tournaments import Tournament, Division
from db.models.players import Player
from db.models.pairings import Pairing
from db.models.results import Result

# Creation order respects foreign keys
MODELS = [Tournament, Division, Player, Pairing, Result]

__all__ = [
    "Tournament",
    "Division",
    "Player",
    "Pairing",
    "Result",
    "MODELS",
]
