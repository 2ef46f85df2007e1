import logging
from dataclasses import asdict
from typing import List, Optional
from sqlalchemy import select

from core.matcher.models import MatchResult
from core.matcher.weights import WeightSet
from database.models import CandidateMatch
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_existing_match(self, candidate_id: str, job_id: str) -> Optional[CandidateMatch]:
        stmt = select(CandidateMatch).where(
            CandidateMatch.candidate_id == str(candidate_id),
            CandidateMatch.job_id == str(job_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def save_match(
        self,
        candidate_id: str,
        job_id: str,
        result: MatchResult,
        weights: Optional[WeightSet] = None
    ) -> CandidateMatch:
        """Create or overwrite the match record for a (candidate, job) pair."""
        values = dict(
            match_score=result.match_score,
            semantic_score=result.semantic_score,
            keyword_score=result.keyword_score,
            experience_score=result.experience_score,
            matching_skills=list(result.matching_skills),
            gap_skills=list(result.gap_skills),
            explanation=result.explanation,
            ai_metadata=asdict(result.metadata),
            breakdown=[asdict(b) for b in result.breakdown],
            weight_scheme=weights.scheme_id if weights else None,
            weight_version=weights.version if weights else None,
        )

        existing = self.get_existing_match(candidate_id, job_id)
        if existing:
            for key, value in values.items():
                setattr(existing, key, value)
            record = existing
        else:
            record = CandidateMatch(candidate_id=str(candidate_id), job_id=str(job_id), **values)
            self.db.add(record)

        self.db.flush()
        logger.debug(f"Saved match {candidate_id}/{job_id}: {result.match_score}")
        return record

    def get_matches_for_candidate(
        self,
        candidate_id: str,
        min_score: Optional[int] = None
    ) -> List[CandidateMatch]:
        stmt = select(CandidateMatch).where(CandidateMatch.candidate_id == str(candidate_id))

        if min_score is not None:
            stmt = stmt.where(CandidateMatch.match_score >= min_score)

        stmt = stmt.order_by(CandidateMatch.match_score.desc())
        return self.db.execute(stmt).scalars().all()

    def get_matches_for_job(
        self,
        job_id: str,
        min_score: Optional[int] = None
    ) -> List[CandidateMatch]:
        stmt = select(CandidateMatch).where(CandidateMatch.job_id == str(job_id))

        if min_score is not None:
            stmt = stmt.where(CandidateMatch.match_score >= min_score)

        stmt = stmt.order_by(CandidateMatch.match_score.desc())
        return self.db.execute(stmt).scalars().all()
