#!/usr/bin/env python3
"""
Test cosine similarity.
"""
import unittest

import numpy as np

from core.matcher.exceptions import DimensionMismatch, MatchingError
from core.matcher.similarity import cosine_similarity


class TestCosineSimilarity(unittest.TestCase):

    def test_identical_vectors(self):
        self.assertAlmostEqual(cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]), 1.0)

    def test_scaled_vector_is_parallel(self):
        self.assertAlmostEqual(cosine_similarity([1.0, 2.0], [10.0, 20.0]), 1.0)

    def test_orthogonal_vectors(self):
        self.assertAlmostEqual(cosine_similarity([1.0, 0.0], [0.0, 1.0]), 0.0)

    def test_opposite_vectors_are_not_clipped(self):
        """Negative similarity is returned as is."""
        self.assertAlmostEqual(cosine_similarity([1.0, 0.0], [-1.0, 0.0]), -1.0)

    def test_known_angle(self):
        self.assertAlmostEqual(cosine_similarity([1.0, 0.0], [1.0, 1.0]), 1 / np.sqrt(2))

    def test_zero_vector_returns_zero(self):
        self.assertEqual(cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]), 0.0)
        self.assertEqual(cosine_similarity([1.0, 2.0, 3.0], [0.0, 0.0, 0.0]), 0.0)

    def test_accepts_numpy_arrays(self):
        self.assertAlmostEqual(cosine_similarity(np.array([0.6, 0.8]), np.array([0.6, 0.8])), 1.0)

    def test_result_stays_in_range(self):
        vec = [0.1] * 1536
        result = cosine_similarity(vec, vec)
        self.assertLessEqual(result, 1.0)
        self.assertGreaterEqual(result, -1.0)

    def test_dimension_mismatch_raises(self):
        with self.assertRaises(DimensionMismatch) as ctx:
            cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0])

        self.assertEqual(ctx.exception.left, 3)
        self.assertEqual(ctx.exception.right, 2)
        self.assertIsInstance(ctx.exception, MatchingError)


if __name__ == '__main__':
    unittest.main()
