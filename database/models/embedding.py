import uuid

from sqlalchemy import Column, Text, TIMESTAMP, UniqueConstraint, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID
from pgvector.sqlalchemy import Vector

from .base import Base


class SkillEmbedding(Base):
    """
    Cached embedding of a candidate's or job's derived text.

    One live row per (entity_type, entity_id). The row is overwritten in place
    when the entity's text changes; source_text is what the vector was built from.
    """
    __tablename__ = 'skill_embedding'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    entity_type = Column(Text, nullable=False)  # job_seeker|job
    entity_id = Column(Text, nullable=False)

    source_text = Column(Text, nullable=False)
    # Dimension-agnostic: the model decides the length
    embedding = Column(Vector(), nullable=False)
    model = Column(Text, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=sql_text("timezone('UTC', now())"))

    __table_args__ = (
        UniqueConstraint('entity_type', 'entity_id', name='uq_skill_embedding_entity'),
        Index('idx_skill_embedding_model', 'model'),
    )
