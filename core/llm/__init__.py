"""LLM Module - Embedding services and interfaces."""
from core.llm.interfaces import EmbeddingService
from core.llm.openai_service import OpenAIEmbeddingService

__all__ = ['EmbeddingService', 'OpenAIEmbeddingService']
