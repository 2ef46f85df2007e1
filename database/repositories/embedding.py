import logging
from typing import Optional
from sqlalchemy import select

from core.matcher.models import EmbeddingRecord
from database.models import SkillEmbedding
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class EmbeddingRepository(BaseRepository):
    """SQL-backed EmbeddingStore: one row per (entity_type, entity_id)."""

    def _get_row(self, entity_type: str, entity_id: str) -> Optional[SkillEmbedding]:
        stmt = select(SkillEmbedding).where(
            SkillEmbedding.entity_type == entity_type,
            SkillEmbedding.entity_id == str(entity_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def find(self, entity_type: str, entity_id: str) -> Optional[EmbeddingRecord]:
        row = self._get_row(entity_type, entity_id)
        if row is None:
            return None
        return EmbeddingRecord(
            entity_type=row.entity_type,
            entity_id=row.entity_id,
            source_text=row.source_text,
            vector=[float(x) for x in row.embedding],
            model_name=row.model
        )

    def upsert(self, record: EmbeddingRecord) -> SkillEmbedding:
        existing = self._get_row(record.entity_type, record.entity_id)

        if existing:
            existing.source_text = record.source_text
            existing.embedding = record.vector
            existing.model = record.model_name
            row = existing
        else:
            row = SkillEmbedding(
                entity_type=record.entity_type,
                entity_id=str(record.entity_id),
                source_text=record.source_text,
                embedding=record.vector,
                model=record.model_name
            )
            self.db.add(row)

        self.db.flush()
        return row
