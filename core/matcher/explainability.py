#!/usr/bin/env python3
"""
Explainability Module - Human-readable summary of a match score.

The explanation is picked by score band and names a few matching and gap
skills:

- >= 80: Excellent match
- >= 60: Good match
- >= 40: Moderate match
- otherwise: Limited match
"""

from typing import List

EXCELLENT_THRESHOLD = 80
GOOD_THRESHOLD = 60
MODERATE_THRESHOLD = 40


def generate_explanation(score: int, matching: List[str], gaps: List[str]) -> str:
    """
    Build the explanation sentence for a match.

    Args:
        score: Final match score (0-100)
        matching: Candidate skills that matched the job
        gaps: Job skills the candidate lacks

    Returns:
        Explanation text
    """
    if score >= EXCELLENT_THRESHOLD:
        minor_gaps = f"Minor gaps in {', '.join(gaps[:2])}." if gaps else ""
        return f"Excellent match ({score}%). Strong alignment across {len(matching)} key skills. {minor_gaps}"
    if score >= GOOD_THRESHOLD:
        return (
            f"Good match ({score}%). Solid foundation with {len(matching)} matching skills. "
            f"Consider developing {', '.join(gaps[:3])} to strengthen fit."
        )
    if score >= MODERATE_THRESHOLD:
        return (
            f"Moderate match ({score}%). Some relevant skills ({', '.join(matching[:3])}), "
            f"but significant gaps in {', '.join(gaps[:3])}."
        )
    return f"Limited match ({score}%). Considerable skill development needed in {', '.join(gaps[:4])}."
