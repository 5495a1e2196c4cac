"""Generation Backend Implementations for the Glossário service."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Any

from .config import settings, get_model_config
from .errors import GenerationFailed
from .prompts import build_term_messages
from .schemas import GeneratedTerm

logger = logging.getLogger(__name__)


class TermGenerator(ABC):
    @abstractmethod
    async def generate(self, term: str) -> GeneratedTerm:
        """Synthesize a structured record for `term`; raise GenerationFailed on any failure."""
        raise NotImplementedError

    @abstractmethod
    async def close(self):
        pass


class OpenAICompatibleBackend(TermGenerator):
    """Structured generation over any OpenAI-compatible chat endpoint (Gemini by default)."""

    def __init__(self, config: Dict[str, Any], client: Any = None):
        self.model_name = config.get("model_name")
        self.temperature = config.get("temperature", 0.4)
        self.max_tokens = config.get("max_tokens", 4096)
        self.timeout = config.get("timeout", 60.0)
        self._openai_client = None

        if client is not None:
            self.client = client
            return

        import openai
        import instructor

        api_key = config.get("api_key")
        if not api_key:
            raise ValueError("Generation API key not found in config")

        openai_client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=config.get("base_url"),
            timeout=self.timeout,
            max_retries=0
        )
        self._openai_client = openai_client

        # Structured output: the reply is parsed and validated into GeneratedTerm
        self.client = instructor.from_openai(openai_client, mode=instructor.Mode.JSON)
        logger.info(f"Generation backend initialized: {self.model_name}")

    async def generate(self, term: str) -> GeneratedTerm:
        params = {
            "model": self.model_name,
            "messages": build_term_messages(term),
            "response_model": GeneratedTerm,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            # one attempt, no validation re-asks
            "max_retries": 1,
        }
        try:
            result = await asyncio.wait_for(
                self.client.chat.completions.create(**params),
                timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Generation timed out after {self.timeout}s for '{term}'")
            raise GenerationFailed(term, "timeout") from e
        except Exception as e:
            logger.error(f"AI generation failed for '{term}': {type(e).__name__}: {e}")
            raise GenerationFailed(term, str(e)) from e

        if not isinstance(result, GeneratedTerm):
            raise GenerationFailed(term, f"unexpected payload type {type(result).__name__}")
        return result

    async def close(self):
        if self._openai_client is not None:
            await self._openai_client.close()


def get_term_generator(backend_name: Optional[str] = None) -> Optional[TermGenerator]:
    """Build the configured generation backend, or None when it has no API key."""
    backend_name = backend_name or settings.default_backend
    model_config = get_model_config(backend_name)
    safe_config = {k: ('***' if 'key' in k.lower() else v) for k, v in model_config.items()}
    logger.info(f"Generation backend '{backend_name}' config (sanitized): {safe_config}")

    if not model_config.get("api_key"):
        logger.warning(f"No API key for generation backend '{backend_name}'; generation disabled")
        return None

    backend_map = {"openai_compatible": OpenAICompatibleBackend}
    provider = model_config.get("provider")
    if provider is None:
        raise ValueError("Provider not specified in model config")
    backend_class = backend_map.get(provider)
    if not backend_class:
        raise ValueError(f"Unsupported generation provider: '{provider}'")
    return backend_class(model_config)
