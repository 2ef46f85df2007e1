from dataclasses import dataclass

from core.config_loader import AppConfig, LlmConfig
from core.llm.interfaces import EmbeddingService
from core.llm.openai_service import OpenAIEmbeddingService
from core.matcher.batch import BatchMatcher
from core.matcher.embedding_store import EmbeddingProvider
from core.matcher.service import MatchScorer
from core.matcher.weights import WeightStore
from database.repository import MatchingRepository


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Holds the session-independent services. Session-bound objects (scorer,
    weight store, batch matcher) are built per unit of work from a
    MatchingRepository obtained via match_uow().
    """
    config: AppConfig
    embedding_service: EmbeddingService

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance (no DB session attached)
        """
        return cls(
            config=config,
            embedding_service=cls._build_embedding_service(config.llm or LlmConfig())
        )

    @staticmethod
    def _build_embedding_service(llm_config: LlmConfig) -> OpenAIEmbeddingService:
        """Build OpenAI embedding service from LLM configuration."""
        model_config = {
            'embedding_model': llm_config.embedding_model,
            'embedding_dimensions': llm_config.embedding_dimensions,
            'timeout_seconds': llm_config.timeout_seconds,
            'max_retries': llm_config.max_retries,
        }

        return OpenAIEmbeddingService(
            api_key=llm_config.api_key,
            base_url=llm_config.base_url,
            model_config=model_config
        )

    def build_weight_store(self, repo: MatchingRepository) -> WeightStore:
        return WeightStore(repo.weights)

    def build_scorer(self, repo: MatchingRepository) -> MatchScorer:
        provider = EmbeddingProvider(
            self.embedding_service,
            repo.embeddings,
            max_workers=self.config.matching.embedding_workers
        )
        return MatchScorer(
            embeddings=provider,
            weight_store=self.build_weight_store(repo),
            scheme_id=self.config.matching.weight_scheme
        )

    def build_batch_matcher(self, repo: MatchingRepository) -> BatchMatcher:
        return BatchMatcher(
            scorer=self.build_scorer(repo),
            sink=repo.matches,
            config=self.config.matching.batch
        )
