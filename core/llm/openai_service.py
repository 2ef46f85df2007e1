"""
OpenAI Service - Embedding generation using the OpenAI API.

Works against api.openai.com or any OpenAI-compatible endpoint (e.g. Ollama)
via ``base_url``.
"""
from typing import Any, Dict, List, Optional
import logging
import re

import openai
from openai import OpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState

from core.llm.interfaces import EmbeddingService

logger = logging.getLogger(__name__)

DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"

TRANSIENT_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)


# ---------------------------------------------------------------------------
# Retry helpers
# ---------------------------------------------------------------------------

def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    if isinstance(exc, openai.RateLimitError):
        logger.warning(
            "Rate limit hit (attempt %s). Waiting %.1fs before retry. Details: %s",
            retry_state.attempt_number, wait, exc,
        )
    else:
        logger.warning(
            "Transient API error (attempt %s). Waiting %.1fs before retry. Details: %s",
            retry_state.attempt_number, wait, exc,
        )


def _parse_reset_duration(value: str) -> float:
    """Parse an OpenAI reset-timer header value like '1s', '500ms', '1m30s' into seconds."""
    total = 0.0
    for amount, unit in re.findall(r"([\d.]+)(ms|s|m|h)", value):
        a = float(amount)
        if unit == "ms":
            total += a / 1000
        elif unit == "s":
            total += a
        elif unit == "m":
            total += a * 60
        else:  # h
            total += a * 3600
    return total


def _wait_from_rate_limit_headers(exc: openai.RateLimitError) -> float:
    """Longest declared wait from retry-after / x-ratelimit-reset-* headers, 0.0 if none."""
    headers = getattr(getattr(exc, "response", None), "headers", None)
    if not headers:
        return 0.0

    candidates: List[float] = []
    retry_after = headers.get("retry-after", "")
    if retry_after:
        try:
            candidates.append(float(retry_after))
        except ValueError:
            pass

    for header in ("x-ratelimit-reset-requests", "x-ratelimit-reset-tokens"):
        parsed = _parse_reset_duration(headers.get(header, ""))
        if parsed > 0:
            candidates.append(parsed)

    return max(candidates) if candidates else 0.0


def _wait_respecting_retry_after(retry_state: RetryCallState) -> float:
    """Honour server-declared rate-limit timers, else capped exponential backoff."""
    exc = retry_state.outcome.exception()
    if isinstance(exc, openai.RateLimitError):
        wait = _wait_from_rate_limit_headers(exc)
        if wait > 0:
            return min(wait, 120)

    exp = wait_exponential(multiplier=1, min=2, max=60)
    return exp(retry_state)


class OpenAIEmbeddingService(EmbeddingService):
    """
    OpenAI embedding client.

    Transient failures are retried only when ``max_retries`` > 0. The default
    is no retry: the matcher surfaces provider failures to its caller, who
    decides whether to retry, skip or fail a batch item.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model_config: Optional[Dict[str, Any]] = None,
    ):
        self.model_config = model_config or {}
        self.model_name = self.model_config.get('embedding_model', DEFAULT_EMBEDDING_MODEL)
        self.embedding_dimensions = self.model_config.get('embedding_dimensions')
        self.max_retries = int(self.model_config.get('max_retries', 0))

        client_kwargs: Dict[str, Any] = {'max_retries': 0}
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url
        timeout = self.model_config.get('timeout_seconds')
        if timeout:
            client_kwargs['timeout'] = timeout

        self.client = OpenAI(**client_kwargs)

    def generate_embedding(self, text: str) -> List[float]:
        """Generate embedding vector for text."""
        if self.max_retries <= 0:
            return self._create_embedding(text)

        retrying = retry(
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            wait=_wait_respecting_retry_after,
            stop=stop_after_attempt(self.max_retries + 1),
            before_sleep=_log_retry,
            reraise=True,
        )
        return retrying(self._create_embedding)(text)

    def _create_embedding(self, text: str) -> List[float]:
        kwargs: Dict[str, Any] = {'input': text, 'model': self.model_name}
        if self.embedding_dimensions:
            kwargs['dimensions'] = self.embedding_dimensions
        response = self.client.embeddings.create(**kwargs)
        return list(response.data[0].embedding)
