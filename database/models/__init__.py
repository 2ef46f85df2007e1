from .base import Base
from .embedding import SkillEmbedding
from .weights import MatchingWeight
from .match import CandidateMatch

__all__ = [
    'Base',
    'SkillEmbedding',
    'MatchingWeight',
    'CandidateMatch',
]
