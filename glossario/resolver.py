"""
Term Resolver for the Glossário service

Read-through cache over three tiers: the hosted store (source of truth), the
bundled seed terms, and the generation backend. Generated records are written
back to the store in a detached task.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Set

from pydantic import ValidationError

from .errors import StoreUnavailable, StoreWriteFailed, TermNotFound
from .llm_backends import TermGenerator
from .normalizer import normalize_id
from .schemas import TermRecord
from .seed_data import LOCAL_TERMS
from .store import TermStoreClient

logger = logging.getLogger(__name__)

SOURCE_STORE = "store"
SOURCE_SEED = "seed"
SOURCE_GENERATED = "generated"


@dataclass
class Resolution:
    """Outcome of a resolve: the record, the tier that produced it and the write-back handle"""
    record: TermRecord
    source: str
    write_back: Optional["asyncio.Task[bool]"] = None


class TermResolver:
    """
    Resolves raw term text into a TermRecord.

    `store` and `generator` are optional; a missing store degrades to
    seed/generation-only mode and a missing generator ends the chain at the
    seed tier.

    Input that normalizes to an empty id (blank or punctuation only) is
    rejected with TermNotFound up front, before the seed tier and without
    asking the generator.
    """

    def __init__(
        self,
        store: Optional[TermStoreClient] = None,
        generator: Optional[TermGenerator] = None,
        local_terms: Optional[Mapping[str, TermRecord]] = None
    ):
        self.store = store
        self.generator = generator
        self.local_terms: Mapping[str, TermRecord] = LOCAL_TERMS if local_terms is None else local_terms
        self._pending_writes: Set["asyncio.Task[bool]"] = set()

    @property
    def store_configured(self) -> bool:
        return self.store is not None

    async def resolve(self, raw_term: str) -> TermRecord:
        """Resolve a term, raising TermNotFound or GenerationFailed when no tier answers"""
        resolution = await self.resolve_detailed(raw_term)
        return resolution.record

    async def resolve_detailed(self, raw_term: str) -> Resolution:
        # Seed keys use the plain lower-cased text, the store uses the slug
        raw_key = raw_term.lower().strip()
        term_id = normalize_id(raw_term)

        if not term_id:
            raise TermNotFound(raw_term)

        # A. Store (source of truth)
        stored = await self._lookup_store(term_id)
        if stored is not None:
            logger.info(f"Hit from store: {term_id}")
            return Resolution(record=stored, source=SOURCE_STORE)

        # B. Bundled seed terms
        local = self.local_terms.get(raw_key)
        if local is not None:
            logger.info(f"Hit from local seed data: {raw_key}")
            return Resolution(record=local, source=SOURCE_SEED)

        # C. Generation (cache miss)
        if self.generator is None:
            logger.info(f"No generation backend configured; '{term_id}' not found")
            raise TermNotFound(raw_term)

        generated = await self.generator.generate(raw_term)
        record = generated.to_record(term_id)
        logger.info(f"Generated term: {term_id}")

        # D. Write back without blocking the caller
        write_back = None
        if self.store is not None:
            write_back = self._schedule_write_back(record)

        return Resolution(record=record, source=SOURCE_GENERATED, write_back=write_back)

    async def _lookup_store(self, term_id: str) -> Optional[TermRecord]:
        if self.store is None:
            return None

        try:
            row = await self.store.get_term(term_id)
        except StoreUnavailable as e:
            logger.warning(f"Store fetch failed, falling back to local/AI: {e}")
            return None

        if not row or not row.get("content"):
            return None

        try:
            return TermRecord.model_validate(row["content"])
        except ValidationError as e:
            logger.warning(f"Stored content for '{term_id}' is not a valid record, ignoring it: {e}")
            return None

    def _schedule_write_back(self, record: TermRecord) -> "asyncio.Task[bool]":
        task = asyncio.create_task(self._write_back(record))
        self._pending_writes.add(task)
        task.add_done_callback(self._write_back_done)
        return task

    def _write_back_done(self, task: "asyncio.Task[bool]") -> None:
        self._pending_writes.discard(task)
        if not task.cancelled() and task.exception() is not None:
            exc = task.exception()
            logger.error(f"Write-back crashed: {type(exc).__name__}: {exc}")

    async def _write_back(self, record: TermRecord) -> bool:
        try:
            await self.store.insert_term(record)
        except StoreWriteFailed as e:
            logger.error(f"Error saving to store: {e}")
            return False
        logger.info(f"Saved to store: {record.id}")
        return True

    @property
    def pending_writes(self) -> int:
        return len(self._pending_writes)

    async def drain(self) -> Dict[str, int]:
        """Wait for every write-back still in flight"""
        if not self._pending_writes:
            return {"saved": 0, "failed": 0}

        # crashes are already logged by _write_back_done
        results = await asyncio.gather(*list(self._pending_writes), return_exceptions=True)
        saved = sum(1 for ok in results if ok is True)
        return {"saved": saved, "failed": len(results) - saved}
