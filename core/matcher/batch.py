#!/usr/bin/env python3
"""
Batch Matching - Score one candidate against many jobs, or one job against
many candidates, and persist the good matches.

One weight snapshot is taken per batch so every pair in it is blended with
the same weights. A failing pair is logged and skipped; the batch goes on. Saved matches are
committed through the sink after every slice, so a crash part-way through
loses at most the slice in flight.
"""

from dataclasses import dataclass, field
from typing import Protocol, List, Optional, Sequence, Tuple
import logging

from core.config_loader import BatchConfig
from core.matcher.exceptions import MatchingError
from core.matcher.models import CandidateProfile, JobProfile, MatchResult
from core.matcher.service import MatchScorer
from core.matcher.weights import WeightSet

logger = logging.getLogger(__name__)


class MatchSink(Protocol):
    """Where accepted match results go (normally MatchRepository)."""

    def save_match(
        self,
        candidate_id: str,
        job_id: str,
        result: MatchResult,
        weights: Optional[WeightSet] = None
    ):
        ...

    def commit(self) -> None:
        ...


@dataclass
class BatchMatchSummary:
    scored: int = 0
    saved: int = 0
    failed: int = 0
    matches: List[Tuple[str, str, int]] = field(default_factory=list)  # (candidate_id, job_id, score)


class BatchMatcher:
    """Drive MatchScorer over many pairs, slice by slice."""

    def __init__(
        self,
        scorer: MatchScorer,
        sink: Optional[MatchSink] = None,
        config: Optional[BatchConfig] = None
    ):
        self.scorer = scorer
        self.sink = sink
        self.config = config or BatchConfig()

    def match_candidate_against_jobs(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobProfile]
    ) -> BatchMatchSummary:
        logger.info(f"Batch matching candidate {candidate.id} against {len(jobs)} jobs")
        return self._run([(candidate, job) for job in jobs])

    def match_job_against_candidates(
        self,
        job: JobProfile,
        candidates: Sequence[CandidateProfile]
    ) -> BatchMatchSummary:
        logger.info(f"Batch matching job {job.id} against {len(candidates)} candidates")
        return self._run([(candidate, job) for candidate in candidates])

    def _run(self, pairs: List[Tuple[CandidateProfile, JobProfile]]) -> BatchMatchSummary:
        summary = BatchMatchSummary()
        weights = self.scorer.current_weights()
        slice_size = max(1, self.config.slice_size)

        for start in range(0, len(pairs), slice_size):
            saved_in_slice = 0
            for candidate, job in pairs[start:start + slice_size]:
                try:
                    result = self.scorer.score_match(candidate, job, weights=weights)
                except MatchingError as e:
                    summary.failed += 1
                    logger.warning(f"Skipping candidate {candidate.id} / job {job.id}: {e}")
                    continue

                summary.scored += 1
                if result.match_score < self.config.min_score:
                    continue

                summary.matches.append((str(candidate.id), str(job.id), result.match_score))
                if self.sink is not None:
                    self.sink.save_match(str(candidate.id), str(job.id), result, weights)
                    summary.saved += 1
                    saved_in_slice += 1

            if saved_in_slice:
                self.sink.commit()
            logger.debug(f"Processed {min(start + slice_size, len(pairs))}/{len(pairs)} pairs")

        logger.info(
            f"Batch complete: scored={summary.scored}, saved={summary.saved}, "
            f"failed={summary.failed}, matches={len(summary.matches)}"
        )
        return summary
