#!/usr/bin/env python3
"""
Embedding Store & Provider - Read-through cache for entity embeddings.

The provider is the only caching boundary in the scorer: the remote embedding
call is skipped whenever the entity's derived text is unchanged since the last
scoring run, which is the common case when one profile is scored against many
jobs.

Staleness is exact string inequality between the stored source text and the
current text. Any change in how that text is assembled invalidates every
cached record (see core.matcher.text_builder).
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol, runtime_checkable, List, Dict, Optional, Sequence, Tuple
import logging

from core.llm.interfaces import EmbeddingService
from core.matcher.exceptions import ProviderError
from core.matcher.models import EmbeddingRecord

logger = logging.getLogger(__name__)

# (entity_type, entity_id, text)
EmbeddingRequest = Tuple[str, str, str]


@runtime_checkable
class EmbeddingStore(Protocol):
    """Protocol for persisting entity embeddings."""

    def find(self, entity_type: str, entity_id: str) -> Optional[EmbeddingRecord]:
        """
        Return the live record for the entity, or None.

        Args:
            entity_type: "job_seeker" or "job"
            entity_id: Identifier of the entity
        """
        ...

    def upsert(self, record: EmbeddingRecord) -> None:
        """Create the record, or overwrite the existing one for the same entity."""
        ...


class InMemoryEmbeddingStore:
    """In-memory implementation of embedding store for testing."""

    def __init__(self):
        self._storage: Dict[Tuple[str, str], EmbeddingRecord] = {}

    def find(self, entity_type: str, entity_id: str) -> Optional[EmbeddingRecord]:
        return self._storage.get((entity_type, str(entity_id)))

    def upsert(self, record: EmbeddingRecord) -> None:
        self._storage[(record.entity_type, str(record.entity_id))] = record

    def __len__(self) -> int:
        return len(self._storage)

    def clear(self) -> None:
        """Clear all stored data."""
        self._storage.clear()


class EmbeddingProvider:
    """Generate embeddings through a remote service, caching them per entity."""

    def __init__(
        self,
        service: EmbeddingService,
        store: EmbeddingStore,
        max_workers: int = 2
    ):
        self.service = service
        self.store = store
        self.max_workers = max(1, max_workers)

    @property
    def model_name(self) -> str:
        return getattr(self.service, 'model_name', 'unknown')

    def embed(self, text: str) -> List[float]:
        """
        Call the remote embedding service.

        Raises:
            ProviderError: On any network or API failure. Not retried here.
        """
        try:
            return list(self.service.generate_embedding(text))
        except Exception as e:
            logger.error(f"Embedding generation failed: {e}")
            raise ProviderError(f"Failed to generate embedding: {e}") from e

    def get_or_refresh(self, entity_type: str, entity_id: str, text: str) -> List[float]:
        """
        Return the cached vector for the entity, regenerating it when stale.

        Args:
            entity_type: "job_seeker" or "job"
            entity_id: Identifier of the entity
            text: Current derived text of the entity

        Returns:
            Embedding vector for ``text``
        """
        return self.get_or_refresh_many([(entity_type, entity_id, text)])[0]

    def get_or_refresh_many(self, requests: Sequence[EmbeddingRequest]) -> List[List[float]]:
        """
        Resolve several embeddings, issuing the network calls concurrently.

        Store lookups and writes run on the calling thread (a database session
        is not shareable across threads); only the remote calls fan out.
        If any call fails nothing is written and ProviderError propagates.

        Returns:
            Vectors in the same order as ``requests``
        """
        vectors: List[Optional[List[float]]] = [None] * len(requests)
        stale: List[int] = []

        for i, (entity_type, entity_id, text) in enumerate(requests):
            record = self.store.find(entity_type, str(entity_id))
            if record is not None and record.source_text == text:
                logger.debug(f"Embedding cache hit for {entity_type}:{entity_id}")
                vectors[i] = list(record.vector)
            else:
                reason = "missing" if record is None else "stale"
                logger.info(f"Embedding {reason} for {entity_type}:{entity_id}, regenerating")
                stale.append(i)

        if not stale:
            return vectors

        texts = [requests[i][2] for i in stale]
        if len(texts) == 1:
            fresh = [self.embed(texts[0])]
        else:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(texts))) as pool:
                fresh = list(pool.map(self.embed, texts))

        for i, vector in zip(stale, fresh):
            entity_type, entity_id, text = requests[i]
            self.store.upsert(EmbeddingRecord(
                entity_type=entity_type,
                entity_id=str(entity_id),
                source_text=text,
                vector=vector,
                model_name=self.model_name
            ))
            vectors[i] = vector

        return vectors
