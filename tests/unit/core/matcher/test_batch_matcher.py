#!/usr/bin/env python3
"""
Test BatchMatcher over many candidate/job pairs.
"""
import unittest
from unittest.mock import MagicMock, patch

from core.config_loader import BatchConfig
from core.matcher.batch import BatchMatcher
from core.matcher.embedding_store import EmbeddingProvider, InMemoryEmbeddingStore
from core.matcher.exceptions import ProviderError
from core.matcher.models import CandidateProfile, JobProfile, FACTOR_SEMANTIC
from core.matcher.service import MatchScorer
from core.matcher.weights import WeightStore, InMemoryWeightEntryStore, ACCEPT
from tests.mocks.matcher_mocks import MockEmbeddingService


class TestBatchMatcher(unittest.TestCase):

    def setUp(self):
        self.service = MockEmbeddingService()
        self.weight_store = WeightStore(InMemoryWeightEntryStore())
        self.scorer = MatchScorer(
            EmbeddingProvider(self.service, InMemoryEmbeddingStore()),
            weight_store=self.weight_store
        )
        self.sink = MagicMock()
        self.candidate = CandidateProfile(id="c1", skills=["Python", "SQL"], experience_text="4 years")
        self.good_job = JobProfile(id="j1", required_skills=["Python"], experience_level="mid")
        self.poor_job = JobProfile(id="j2", required_skills=["Haskell", "OCaml"], experience_level="principal")

        # Keep the semantic factor out of threshold decisions
        patcher = patch('core.matcher.service.cosine_similarity', return_value=0.5)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_persists_only_matches_above_threshold(self):
        matcher = BatchMatcher(self.scorer, sink=self.sink, config=BatchConfig(min_score=50))

        summary = matcher.match_candidate_against_jobs(self.candidate, [self.good_job, self.poor_job])

        self.assertEqual(summary.scored, 2)
        self.assertEqual(summary.saved, 1)
        self.assertEqual(summary.failed, 0)
        self.assertEqual([m[1] for m in summary.matches], ["j1"])
        self.sink.save_match.assert_called_once()
        candidate_id, job_id, result, weights = self.sink.save_match.call_args[0]
        self.assertEqual((candidate_id, job_id), ("c1", "j1"))
        self.assertGreaterEqual(result.match_score, 50)
        self.assertEqual(weights.scheme_id, "match_algorithm")

    def test_threshold_zero_keeps_everything(self):
        matcher = BatchMatcher(self.scorer, sink=self.sink, config=BatchConfig(min_score=0))

        summary = matcher.match_candidate_against_jobs(self.candidate, [self.good_job, self.poor_job])

        self.assertEqual(summary.saved, 2)

    def test_without_sink_only_collects(self):
        matcher = BatchMatcher(self.scorer)

        summary = matcher.match_candidate_against_jobs(self.candidate, [self.good_job])

        self.assertEqual(summary.saved, 0)
        self.assertEqual(len(summary.matches), 1)

    def test_job_against_candidates(self):
        other = CandidateProfile(id="c2", skills=["Python"], experience_text="3 years")
        matcher = BatchMatcher(self.scorer, sink=self.sink, config=BatchConfig(slice_size=1))

        summary = matcher.match_job_against_candidates(self.good_job, [self.candidate, other])

        self.assertEqual(summary.scored, 2)
        self.assertEqual(sorted(m[0] for m in summary.matches), ["c1", "c2"])

    def test_candidate_embedding_generated_once(self):
        jobs = [JobProfile(id=f"j{i}", title=f"Job {i}") for i in range(5)]
        matcher = BatchMatcher(self.scorer, config=BatchConfig(slice_size=2))

        matcher.match_candidate_against_jobs(self.candidate, jobs)

        # One candidate call plus one per job
        self.assertEqual(self.service.call_count, 6)

    def test_single_weight_snapshot_per_batch(self):
        scorer = MagicMock(wraps=self.scorer)
        matcher = BatchMatcher(scorer)

        matcher.match_candidate_against_jobs(self.candidate, [self.good_job, self.poor_job])

        scorer.current_weights.assert_called_once()
        snapshots = [c.kwargs['weights'] for c in scorer.score_match.call_args_list]
        self.assertIs(snapshots[0], snapshots[1])

    def test_feedback_during_batch_does_not_change_weights(self):
        seen = []
        original = self.scorer.score_match

        def score_and_adjust(candidate, job, weights=None):
            seen.append(weights.weight_for(FACTOR_SEMANTIC))
            self.weight_store.adjust("match_algorithm", FACTOR_SEMANTIC, ACCEPT)
            return original(candidate, job, weights=weights)

        self.scorer.score_match = score_and_adjust
        BatchMatcher(self.scorer).match_candidate_against_jobs(self.candidate, [self.good_job, self.poor_job])

        self.assertEqual(seen, [35, 35])

    def test_failed_pair_is_skipped(self):
        scorer = MagicMock(wraps=self.scorer)
        real = self.scorer.score_match

        def flaky(candidate, job, weights=None):
            if job.id == "j1":
                raise ProviderError("quota exceeded")
            return real(candidate, job, weights=weights)

        scorer.score_match.side_effect = flaky
        matcher = BatchMatcher(scorer, sink=self.sink, config=BatchConfig(min_score=0))

        summary = matcher.match_candidate_against_jobs(self.candidate, [self.good_job, self.poor_job])

        self.assertEqual(summary.failed, 1)
        self.assertEqual(summary.scored, 1)
        self.assertEqual(summary.saved, 1)

    def test_commits_once_per_slice(self):
        jobs = [JobProfile(id=f"j{i}", required_skills=["Python"]) for i in range(5)]
        matcher = BatchMatcher(self.scorer, sink=self.sink, config=BatchConfig(min_score=0, slice_size=2))

        matcher.match_candidate_against_jobs(self.candidate, jobs)

        self.assertEqual(self.sink.save_match.call_count, 5)
        self.assertEqual(self.sink.commit.call_count, 3)

    def test_slice_without_saves_is_not_committed(self):
        matcher = BatchMatcher(self.scorer, sink=self.sink, config=BatchConfig(min_score=50, slice_size=1))

        matcher.match_candidate_against_jobs(self.candidate, [self.good_job, self.poor_job])

        self.sink.commit.assert_called_once()

    def test_crash_keeps_earlier_slices_committed(self):
        scorer = MagicMock(wraps=self.scorer)
        real = self.scorer.score_match

        def crash_on_third(candidate, job, weights=None):
            if job.id == "j2":
                raise RuntimeError("connection lost")
            return real(candidate, job, weights=weights)

        scorer.score_match.side_effect = crash_on_third
        jobs = [JobProfile(id=f"j{i}", required_skills=["Python"]) for i in range(4)]
        matcher = BatchMatcher(scorer, sink=self.sink, config=BatchConfig(min_score=0, slice_size=2))

        with self.assertRaises(RuntimeError):
            matcher.match_candidate_against_jobs(self.candidate, jobs)

        # First slice (j0, j1) committed before the failure in the second
        self.assertEqual(self.sink.save_match.call_count, 2)
        self.sink.commit.assert_called_once()

    def test_empty_batch(self):
        summary = BatchMatcher(self.scorer).match_candidate_against_jobs(self.candidate, [])

        self.assertEqual(summary.scored, 0)
        self.assertEqual(summary.matches, [])


if __name__ == '__main__':
    unittest.main()
