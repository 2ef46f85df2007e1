import logging
from typing import Any, List
from sqlalchemy import select, func

from core.matcher.models import WeightEntry
from database.models import MatchingWeight
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _to_entry(row: MatchingWeight) -> WeightEntry:
    return WeightEntry(
        id=row.id,
        scheme_id=row.weight_type,
        factor=row.factor,
        weight=row.weight,
        description=row.description or "",
        active=bool(row.is_active)
    )


class WeightRepository(BaseRepository):
    """SQL-backed WeightEntryStore."""

    def list_by_scheme(self, scheme_id: str) -> List[WeightEntry]:
        stmt = (
            select(MatchingWeight)
            .where(MatchingWeight.weight_type == scheme_id)
            .order_by(MatchingWeight.created_at, MatchingWeight.id)
        )
        return [_to_entry(row) for row in self.db.execute(stmt).scalars().all()]

    def insert(self, entry: WeightEntry) -> WeightEntry:
        row = MatchingWeight(
            weight_type=entry.scheme_id,
            factor=entry.factor,
            weight=entry.weight,
            description=entry.description,
            is_active=entry.active,
            revision=1
        )
        self.db.add(row)
        self.db.flush()
        return _to_entry(row)

    def update(self, entry_id: Any, weight: int) -> None:
        row = self.db.get(MatchingWeight, entry_id)
        if row is None:
            raise KeyError(f"No matching weight with id {entry_id}")
        row.weight = weight
        row.revision = (row.revision or 0) + 1
        self.db.flush()

    def scheme_version(self, scheme_id: str) -> int:
        stmt = select(func.coalesce(func.sum(MatchingWeight.revision), 0)).where(
            MatchingWeight.weight_type == scheme_id
        )
        return int(self.db.execute(stmt).scalar_one())
