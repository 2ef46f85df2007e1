"""
Embedding Service Interface - Abstract base for embedding providers.

This module defines the interface for remote text-embedding services
(OpenAI, Ollama's OpenAI-compatible endpoint, etc.).
"""
from abc import ABC, abstractmethod
from typing import List


class EmbeddingService(ABC):
    """
    Abstract Interface for Embedding Service Providers.
    """

    model_name: str = "unknown"

    @abstractmethod
    def generate_embedding(self, text: str) -> List[float]:
        """
        Generate a vector embedding for the given text.

        Implementations raise their transport's own exceptions; the matcher
        wraps them into ProviderError.
        """
        pass
