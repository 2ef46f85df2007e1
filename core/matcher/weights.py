#!/usr/bin/env python3
"""
Matching Weights - Per-scheme factor weights tuned by accept/reject feedback.

Weights do not have to sum to 100: the scorer always normalizes by the sum of
the weights it actually uses. Feedback nudges one factor by 2 points, clamped
to [10, 100] so that no factor can be silenced or saturate.

Scoring never reads the store directly during a blend. Callers take a
WeightSet snapshot and pass it to the scorer, so a score is a pure function of
its explicit inputs; adjustments are separate, explicit mutations.
"""
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable, Dict, List, Optional, Sequence
import logging

from core.matcher.models import (
    WeightEntry, FACTORS, FACTOR_SEMANTIC, FACTOR_KEYWORD, FACTOR_EXPERIENCE
)

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "match_algorithm"

DEFAULT_WEIGHTS: Dict[str, int] = {
    FACTOR_SEMANTIC: 35,
    FACTOR_KEYWORD: 40,
    FACTOR_EXPERIENCE: 25,
}

DEFAULT_DESCRIPTIONS: Dict[str, str] = {
    FACTOR_SEMANTIC: "AI-powered semantic similarity between candidate and job",
    FACTOR_KEYWORD: "Direct skill keyword matching",
    FACTOR_EXPERIENCE: "Experience level alignment",
}

ADJUSTMENT_STEP = 2
MIN_WEIGHT = 10
MAX_WEIGHT = 100

ACCEPT = "accept"
REJECT = "reject"


def default_entries(scheme_id: str) -> List[WeightEntry]:
    return [
        WeightEntry(
            scheme_id=scheme_id,
            factor=factor,
            weight=DEFAULT_WEIGHTS[factor],
            description=DEFAULT_DESCRIPTIONS[factor],
            active=True
        )
        for factor in FACTORS
    ]


def adjusted_weight(weight: int, direction: str) -> int:
    """Apply one feedback step to a weight."""
    if direction == ACCEPT:
        return min(MAX_WEIGHT, weight + ADJUSTMENT_STEP)
    if direction == REJECT:
        return max(MIN_WEIGHT, weight - ADJUSTMENT_STEP)
    raise ValueError(f"Unknown feedback direction: {direction!r} (expected 'accept' or 'reject')")


@dataclass(frozen=True)
class WeightSet:
    """Immutable snapshot of a scheme's weights, injected into the scorer."""
    scheme_id: str = DEFAULT_SCHEME
    version: int = 0
    weights: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_entries(cls, scheme_id: str, entries: Sequence[WeightEntry], version: int = 0) -> 'WeightSet':
        # Later rows win if a bootstrap race left duplicates behind
        weights = {e.factor: int(e.weight) for e in entries if e.active}
        return cls(scheme_id=scheme_id, version=version, weights=weights)

    @classmethod
    def defaults(cls, scheme_id: str = DEFAULT_SCHEME) -> 'WeightSet':
        return cls(scheme_id=scheme_id, version=0, weights=dict(DEFAULT_WEIGHTS))

    def weight_for(self, factor: str) -> int:
        """Weight of a factor, falling back to its default when absent."""
        return self.weights.get(factor, DEFAULT_WEIGHTS[factor])


@runtime_checkable
class WeightEntryStore(Protocol):
    """Persistence contract for weight entries."""

    def list_by_scheme(self, scheme_id: str) -> List[WeightEntry]:
        ...

    def insert(self, entry: WeightEntry) -> WeightEntry:
        ...

    def update(self, entry_id, weight: int) -> None:
        ...

    def scheme_version(self, scheme_id: str) -> int:
        ...


class WeightStore:
    """Read, bootstrap and adjust weighting schemes on top of a WeightEntryStore."""

    def __init__(self, entries: WeightEntryStore):
        self.entries = entries

    def get_weights(self, scheme_id: str = DEFAULT_SCHEME) -> List[WeightEntry]:
        """
        Return the scheme's entries, creating the defaults if it has none.

        Safe to call repeatedly; defaults are only inserted for an empty scheme.
        """
        existing = self.entries.list_by_scheme(scheme_id)
        if existing:
            return existing

        logger.info(f"No weights for scheme '{scheme_id}', creating defaults")
        for entry in default_entries(scheme_id):
            self.entries.insert(entry)
        return self.entries.list_by_scheme(scheme_id)

    def get_weight_set(self, scheme_id: str = DEFAULT_SCHEME) -> WeightSet:
        entries = self.get_weights(scheme_id)
        return WeightSet.from_entries(scheme_id, entries, version=self.entries.scheme_version(scheme_id))

    def adjust(self, scheme_id: str, factor: str, direction: str) -> Optional[WeightEntry]:
        """
        Nudge one factor's weight by feedback.

        Args:
            scheme_id: Weighting scheme
            factor: semantic, keyword or experience
            direction: "accept" (+2, max 100) or "reject" (-2, min 10)

        Returns:
            The adjusted entry, or None if the scheme has no such factor
        """
        entries = self.get_weights(scheme_id)
        # Same row WeightSet.from_entries reads: the last active one
        entry = next((e for e in reversed(entries) if e.factor == factor and e.active), None)
        if entry is None:
            logger.warning(f"Ignoring feedback for unknown factor '{factor}' in scheme '{scheme_id}'")
            return None

        new_weight = adjusted_weight(entry.weight, direction)
        if new_weight != entry.weight:
            self.entries.update(entry.id, new_weight)
            logger.info(f"Weight {scheme_id}/{factor}: {entry.weight} -> {new_weight} ({direction})")
        entry.weight = new_weight
        return entry

    def apply_feedback(
        self,
        feedback_type: str,
        factors: Sequence[str],
        scheme_id: str = DEFAULT_SCHEME
    ) -> List[WeightEntry]:
        """Apply one accept/reject signal to every listed factor."""
        adjusted_weight(0, feedback_type)  # validate before touching anything
        adjusted = []
        for factor in factors:
            entry = self.adjust(scheme_id, factor, feedback_type)
            if entry is not None:
                adjusted.append(entry)
        return adjusted


class InMemoryWeightEntryStore:
    """In-memory WeightEntryStore for tests and local runs."""

    def __init__(self):
        self._entries: List[WeightEntry] = []
        self._next_id = 1
        self._revisions: Dict[str, int] = {}

    def list_by_scheme(self, scheme_id: str) -> List[WeightEntry]:
        return [
            WeightEntry(**vars(e)) for e in self._entries if e.scheme_id == scheme_id
        ]

    def insert(self, entry: WeightEntry) -> WeightEntry:
        stored = WeightEntry(**vars(entry))
        stored.id = self._next_id
        self._next_id += 1
        self._entries.append(stored)
        self._bump(stored.scheme_id)
        return WeightEntry(**vars(stored))

    def update(self, entry_id, weight: int) -> None:
        for entry in self._entries:
            if entry.id == entry_id:
                entry.weight = weight
                self._bump(entry.scheme_id)
                return
        raise KeyError(f"No weight entry with id {entry_id}")

    def scheme_version(self, scheme_id: str) -> int:
        return self._revisions.get(scheme_id, 0)

    def _bump(self, scheme_id: str) -> None:
        self._revisions[scheme_id] = self._revisions.get(scheme_id, 0) + 1
