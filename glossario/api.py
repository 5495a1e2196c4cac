"""HTTP API for the Glossário service."""

from contextlib import asynccontextmanager
from typing import List, Optional
import logging

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel

from . import __version__
from .catalog import ALL_CATEGORIES, TermCatalog, filter_terms
from .config import settings
from .errors import GenerationFailed, TermNotFound
from .llm_backends import TermGenerator, get_term_generator
from .resolver import TermResolver
from .seeder import BatchSeeder
from .store import TermStoreClient

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class SeedRequest(BaseModel):
    terms: Optional[List[str]] = None


class SeedResponse(BaseModel):
    log: List[str]


def build_store() -> Optional[TermStoreClient]:
    store_config = settings.store_config()
    if not store_config.is_configured:
        logger.warning("Term store not configured; running in seed/generation-only mode")
        return None
    return TermStoreClient(store_config)


def create_app(
    store: Optional[TermStoreClient] = None,
    generator: Optional[TermGenerator] = None,
    seeder_delay: Optional[float] = None,
    from_settings: bool = True
) -> FastAPI:
    """Wire the resolver, seeder and catalog into a FastAPI app.

    With `from_settings` the missing collaborators are built from the
    environment; tests pass their own and set it to False.
    """
    if from_settings:
        store = store if store is not None else build_store()
        generator = generator if generator is not None else get_term_generator()

    resolver = TermResolver(store=store, generator=generator)
    seeder = BatchSeeder(resolver, delay=seeder_delay)
    catalog = TermCatalog(store=store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        try:
            outcome = await resolver.drain()
            logger.info(f"Pending write-backs drained: {outcome}")
        finally:
            if generator is not None:
                await generator.close()
            if store is not None:
                await store.close()

    app = FastAPI(title="Glossário Técnico API", version=__version__, lifespan=lifespan)
    app.state.resolver = resolver
    app.state.seeder = seeder
    app.state.catalog = catalog

    @app.get("/")
    async def root():
        """Root endpoint - service info"""
        return {
            "service": settings.service_name,
            "version": __version__,
            "status": "running",
            "store_configured": resolver.store_configured,
            "generation_enabled": resolver.generator is not None
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy", "service": settings.service_name, "version": __version__}

    @app.get("/terms")
    async def list_terms(category: str = ALL_CATEGORIES, search: str = "", letter: Optional[str] = None):
        terms = await catalog.list_terms()
        filtered = filter_terms(terms, category=category, search=search, letter=letter)
        return [item.to_json_dict() for item in filtered]

    @app.get("/terms/{term:path}")
    async def get_term(term: str, response: Response):
        try:
            resolution = await resolver.resolve_detailed(term)
        except TermNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        except GenerationFailed as e:
            logger.error(f"Generation failed for '{term}': {e.reason}")
            raise HTTPException(status_code=502, detail="Falha ao gerar a explicação do termo.")

        response.headers["X-Term-Source"] = resolution.source
        return resolution.record.to_json_dict()

    @app.post("/seed", response_model=SeedResponse)
    async def seed(request: Optional[SeedRequest] = None):
        log: List[str] = []
        await seeder.seed(log.append, request.terms if request else None)
        return SeedResponse(log=log)

    return app


app = create_app()
