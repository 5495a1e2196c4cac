"""
Error taxonomy for the Glossário service.

Only TermNotFound and GenerationFailed ever reach callers of the resolver;
the store errors are soft and get logged where they happen.
"""


class GlossaryError(Exception):
    """Base class for every error raised by this package."""


class StoreUnavailable(GlossaryError):
    """The term store could not be queried (transport or query error)."""


class StoreWriteFailed(GlossaryError):
    """Inserting a record into the term store failed."""


class TermNotFound(GlossaryError):
    """No tier produced a record for the requested term."""

    def __init__(self, term: str):
        self.term = term
        super().__init__("Termo não encontrado.")


class GenerationFailed(GlossaryError):
    """The generation backend call failed or returned an invalid payload."""

    def __init__(self, term: str, reason: str):
        self.term = term
        self.reason = reason
        super().__init__(f"Falha ao gerar o termo '{term}': {reason}")


class SeedingPreconditionFailed(GlossaryError):
    """Seeding was requested but the term store is not configured."""
