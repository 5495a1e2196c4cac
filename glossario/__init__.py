"""
Glossário Técnico

Portuguese technical glossary: read-through cache of AI-generated term
explanations over a hosted store, plus a batch seeder to populate it.
"""

__version__ = "0.1.0"

from .errors import (
    GenerationFailed,
    GlossaryError,
    SeedingPreconditionFailed,
    StoreUnavailable,
    StoreWriteFailed,
    TermNotFound,
)
from .normalizer import normalize_id
from .resolver import Resolution, TermResolver
from .schemas import TermRecord, TermSummary
from .seeder import BatchSeeder

__all__ = [
    "BatchSeeder",
    "GenerationFailed",
    "GlossaryError",
    "Resolution",
    "SeedingPreconditionFailed",
    "StoreUnavailable",
    "StoreWriteFailed",
    "TermNotFound",
    "TermRecord",
    "TermResolver",
    "TermSummary",
    "normalize_id",
]
