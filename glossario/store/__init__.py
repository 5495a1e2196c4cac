"""
Persistent store components for the Glossário service
"""

from .term_store_client import TermStoreClient

__all__ = ["TermStoreClient"]
