import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Integer, Boolean, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID

from .base import Base


class MatchingWeight(Base):
    """
    One factor weight (semantic|keyword|experience) of a weighting scheme.

    revision starts at 1 and is bumped on every adjustment; the sum over a
    scheme is that scheme's version.
    """
    __tablename__ = 'matching_weight'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    weight_type = Column(Text, nullable=False)  # scheme id, e.g. match_algorithm
    factor = Column(Text, nullable=False)
    weight = Column(Integer, nullable=False)  # 0-100
    description = Column(Text)
    is_active = Column(Boolean, nullable=False, default=True)
    revision = Column(Integer, nullable=False, default=1)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=sql_text("timezone('UTC', now())"))

    # No unique constraint on (weight_type, factor): a bootstrap race may
    # leave duplicate defaults, readers take the last one.
    __table_args__ = (
        Index('idx_matching_weight_type', 'weight_type'),
    )
