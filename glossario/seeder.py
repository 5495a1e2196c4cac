"""
Batch Seeder for the Glossário service

Walks a list of terms through the resolver one at a time so every miss gets
generated and persisted. Items are spaced out to stay under the generation
backend's rate limits.
"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

from .config import settings
from .errors import SeedingPreconditionFailed
from .resolver import TermResolver
from .seed_data import DEFAULT_SEED_TERMS

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]

MSG_NOT_CONFIGURED = "ERRO: Supabase não configurado. Verifique suas chaves API."


class BatchSeeder:
    """Populates the store by resolving a list of terms sequentially"""

    def __init__(
        self,
        resolver: TermResolver,
        delay: Optional[float] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        self.resolver = resolver
        self.delay = settings.seed_delay_seconds if delay is None else delay
        self._sleep = sleep

    def check_precondition(self):
        if not self.resolver.store_configured:
            raise SeedingPreconditionFailed(MSG_NOT_CONFIGURED)

    async def seed(self, on_progress: ProgressCallback, terms: Optional[List[str]] = None) -> None:
        """Resolve every term in `terms` (or the default list), reporting through `on_progress`"""
        try:
            self.check_precondition()
        except SeedingPreconditionFailed as e:
            logger.error("Seeding aborted: term store not configured")
            on_progress(str(e))
            return

        to_process = terms if terms else DEFAULT_SEED_TERMS

        on_progress(f"Iniciando carga de {len(to_process)} termos...")
        on_progress("Atenção: Isso consome tokens da sua API Key.")

        for term in to_process:
            if not term.strip():
                continue

            on_progress(f"Processando: {term}...")
            try:
                resolution = await self.resolver.resolve_detailed(term)
                if resolution.write_back is not None:
                    await resolution.write_back
                on_progress(f"✅ {term} salvo/verificado com sucesso.")
            except Exception as e:
                logger.warning(f"Seeding failed for '{term}': {e}")
                on_progress(f"❌ Erro ao processar {term}: Tente novamente.")

            await self._sleep(self.delay)

        on_progress("Carga finalizada! Seu banco de dados agora está mais inteligente.")
