"""
Populate the term store by generating every term in a list.

Usage:
    glossario-seed                     # built-in default list
    glossario-seed Kafka "Data Lake"
    glossario-seed --file terms.txt
"""

import argparse
import asyncio
import logging
from typing import List, Optional

from .config import settings
from .llm_backends import get_term_generator
from .resolver import TermResolver
from .seeder import BatchSeeder
from .store import TermStoreClient

logger = logging.getLogger(__name__)


def read_terms(path: str) -> List[str]:
    with open(path, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip() and not line.startswith('#')]


async def run(terms: List[str]) -> None:
    store_config = settings.store_config()
    store = TermStoreClient(store_config) if store_config.is_configured else None
    generator = get_term_generator()
    resolver = TermResolver(store=store, generator=generator)

    try:
        await BatchSeeder(resolver).seed(print, terms)
    finally:
        outcome = await resolver.drain()
        logger.info(f"Write-backs still pending at exit: {outcome}")
        if generator is not None:
            await generator.close()
        if store is not None:
            await store.close()


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Seed the glossary store through the AI generator")
    ap.add_argument("terms", nargs="*", help="Terms to seed (default: built-in list)")
    ap.add_argument("--file", help="Text file with one term per line")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    terms = list(args.terms)
    if args.file:
        terms.extend(read_terms(args.file))

    asyncio.run(run(terms))


if __name__ == "__main__":
    main()
