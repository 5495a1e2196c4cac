"""Configuration management for the Glossário service."""

import os
from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class StoreConfig:
    """Connection details for the hosted term store (Supabase/PostgREST)."""
    url: Optional[str] = None
    anon_key: Optional[str] = None
    table: str = "terms"
    timeout: float = 10.0

    @property
    def is_configured(self) -> bool:
        return bool(self.url) and bool(self.anon_key)


class AppSettings:
    # Service Info
    service_name: str = "glossario-tecnico"
    environment: str = os.getenv("ENVIRONMENT", "production")

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 8000))
    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")

    # Persistent store (both secrets must be present)
    supabase_url: Optional[str] = os.getenv("SUPABASE_URL")
    supabase_anon_key: Optional[str] = os.getenv("SUPABASE_ANON_KEY")
    store_timeout: float = float(os.getenv("STORE_TIMEOUT", "10"))

    # Default generation backend to use
    default_backend: str = os.getenv("GLOSSARIO_LLM_PROVIDER", "gemini")

    # Generation Backend Configurations
    model_config: Dict[str, Any] = {
        "gemini": {
            "provider": "openai_compatible",
            "model_name": os.getenv("GLOSSARIO_MODEL", "gemini-3-flash-preview"),
            "api_key": os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
            "base_url": os.getenv(
                "GLOSSARIO_LLM_BASE_URL",
                "https://generativelanguage.googleapis.com/v1beta/openai/"
            ),
        },
        "openai": {
            "provider": "openai_compatible",
            "model_name": os.getenv("GLOSSARIO_MODEL", "gpt-4o-mini"),
            "api_key": os.getenv("OPENAI_API_KEY"),
            "base_url": os.getenv("GLOSSARIO_LLM_BASE_URL"),
        },
    }

    # General Model Parameters
    model_temperature: float = 0.4
    max_tokens: int = 4096
    generation_timeout: float = float(os.getenv("GENERATION_TIMEOUT", "60"))

    # Seeding
    seed_delay_seconds: float = 1.5

    def store_config(self) -> StoreConfig:
        return StoreConfig(
            url=self.supabase_url,
            anon_key=self.supabase_anon_key,
            timeout=self.store_timeout,
        )

settings = AppSettings()

def get_model_config(backend_name: str) -> Dict[str, Any]:
    """Retrieve and enrich the configuration for a specific generation backend."""
    backend_conf = settings.model_config.get(backend_name)
    if not backend_conf:
        raise ValueError(f"No configuration found for generation backend: '{backend_name}'")

    backend_conf = dict(backend_conf)
    backend_conf['temperature'] = settings.model_temperature
    backend_conf['max_tokens'] = settings.max_tokens
    backend_conf['timeout'] = settings.generation_timeout
    return backend_conf
