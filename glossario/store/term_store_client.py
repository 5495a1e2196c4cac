"""
Term Store API Client for the Glossário service

Talks to the hosted `terms` table through its PostgREST interface (Supabase).
Rows hold a few plain columns for listing and search plus the full record as
a JSON `content` blob.
"""

import httpx
import logging
from typing import Dict, List, Optional, Any

from ..config import StoreConfig
from ..errors import StoreUnavailable, StoreWriteFailed
from ..schemas import TermRecord, TermSummary

logger = logging.getLogger(__name__)


class TermStoreClient:
    """Client for the hosted term store"""

    def __init__(self, config: StoreConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize term store client

        Args:
            config: Store connection details; must be configured
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        if not config.is_configured:
            raise ValueError("Term store is not configured (SUPABASE_URL / SUPABASE_ANON_KEY)")

        self.config = config
        self.base_url = config.url.rstrip('/')
        self.table_url = f"/rest/v1/{config.table}"
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=config.timeout,
            headers=self._get_headers(),
            transport=transport
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_headers(self) -> Dict[str, str]:
        return {
            'apikey': self.config.anon_key,
            'Authorization': f'Bearer {self.config.anon_key}',
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        }

    async def get_term(self, term_id: str) -> Optional[Dict[str, Any]]:
        """Point lookup by normalized id

        Args:
            term_id: Normalized term id

        Returns:
            The stored row, or None when no row has this id

        Raises:
            StoreUnavailable: on transport errors or a non-2xx reply
        """
        try:
            response = await self.client.get(
                self.table_url,
                params={"id": f"eq.{term_id}", "select": "*"}
            )
            response.raise_for_status()
            rows = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise StoreUnavailable(f"Lookup of '{term_id}' failed: {e}") from e

        if not isinstance(rows, list) or not rows:
            return None
        return rows[0]

    async def insert_term(self, record: TermRecord) -> None:
        """Insert a new row for a generated record

        Raises:
            StoreWriteFailed: on any failure, duplicate ids included
        """
        payload = {
            "id": record.id,
            "term": record.term,
            "category": record.category,
            "definition": record.definition,
            "content": record.to_json_dict()
        }
        try:
            response = await self.client.post(
                self.table_url,
                json=payload,
                headers={'Prefer': 'return=minimal'}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise StoreWriteFailed(
                f"Insert of '{record.id}' rejected: {e.response.status_code} - {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise StoreWriteFailed(f"Insert of '{record.id}' failed: {e}") from e

    async def list_terms(self) -> List[TermSummary]:
        """Listing projection of every stored term, ordered by display name

        Raises:
            StoreUnavailable: on transport errors or a non-2xx reply
        """
        try:
            response = await self.client.get(
                self.table_url,
                params={"select": "id,term,category,definition", "order": "term.asc"}
            )
            response.raise_for_status()
            return [TermSummary.model_validate(row) for row in response.json() or []]
        except (httpx.HTTPError, ValueError) as e:
            raise StoreUnavailable(f"Listing failed: {e}") from e

    async def health_check(self) -> bool:
        """Check if the store answers at all"""
        try:
            response = await self.client.get(
                self.table_url,
                params={"select": "id", "limit": "1"},
                timeout=5.0
            )
            return response.status_code == 200
        except httpx.HTTPError as e:
            logger.warning(f"Term store health check failed: {e}")
            return False

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()
