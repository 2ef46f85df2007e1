import logging

from sqlalchemy.orm import Session

from database.repositories import EmbeddingRepository, WeightRepository, MatchRepository

logger = logging.getLogger(__name__)


class MatchingRepository:
    """All repositories the matcher needs, bound to one Session."""

    def __init__(self, db: Session):
        self.db = db
        self.embeddings = EmbeddingRepository(db)
        self.weights = WeightRepository(db)
        self.matches = MatchRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
