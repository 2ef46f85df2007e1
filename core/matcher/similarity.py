#!/usr/bin/env python3
"""
Similarity Calculator - Cosine similarity between vectors.
"""
from typing import Sequence

import numpy as np

from core.matcher.exceptions import DimensionMismatch


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """
    Calculate raw cosine similarity between two vectors.

    The value is NOT rescaled or clipped: it lies in [-1.0, 1.0] and callers
    decide how to map it onto a score.

    Args:
        vec1: First vector
        vec2: Second vector

    Returns:
        Cosine similarity, or 0.0 if either vector has zero norm

    Raises:
        DimensionMismatch: If the vectors have different lengths
    """
    a = np.asarray(vec1, dtype=float)
    b = np.asarray(vec2, dtype=float)

    if a.shape != b.shape:
        raise DimensionMismatch(len(a), len(b))

    norm1 = np.linalg.norm(a)
    norm2 = np.linalg.norm(b)

    if norm1 == 0 or norm2 == 0:
        return 0.0

    similarity = float(np.dot(a, b) / (norm1 * norm2))
    # Floating point can overshoot by an ulp for parallel vectors
    return max(-1.0, min(1.0, similarity))

