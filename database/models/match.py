import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Boolean, Integer, UniqueConstraint, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB, ARRAY

from .base import Base


class CandidateMatch(Base):
    """
    Durable match record between a candidate and a job post.

    Written by the batch matcher for scores at or above its threshold.
    Re-scoring the same pair overwrites the row.
    """
    __tablename__ = 'candidate_match'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    job_id = Column(Text, nullable=False)
    candidate_id = Column(Text, nullable=False)

    match_score = Column(Integer, nullable=False)
    semantic_score = Column(Integer)
    keyword_score = Column(Integer)
    experience_score = Column(Integer)

    matching_skills = Column(ARRAY(Text), default=list)
    gap_skills = Column(ARRAY(Text), default=list)
    explanation = Column(Text, nullable=False)
    ai_metadata = Column(JSONB, default={})  # {"strengths": [...], "concerns": [...]}
    breakdown = Column(JSONB, default=[])

    weight_scheme = Column(Text)
    weight_version = Column(Integer)

    viewed = Column(Boolean, default=False)
    bookmarked = Column(Boolean, default=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=sql_text("timezone('UTC', now())"))

    __table_args__ = (
        UniqueConstraint('job_id', 'candidate_id', name='uq_candidate_match_pair'),
        Index('idx_candidate_match_candidate', 'candidate_id'),
        Index('idx_candidate_match_job', 'job_id'),
        Index('idx_candidate_match_score', 'match_score'),
    )
