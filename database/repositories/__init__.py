from database.repositories.base import BaseRepository
from database.repositories.embedding import EmbeddingRepository
from database.repositories.weights import WeightRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'EmbeddingRepository',
    'WeightRepository',
    'MatchRepository',
]
