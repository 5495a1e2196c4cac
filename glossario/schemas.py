"""
Data Schemas for the Glossário service

This module defines the Pydantic models for term records. GeneratedTerm doubles
as the structured-output schema handed to the generation backend, so its field
descriptions are written as instructions for the model.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PRACTICAL_USAGE_TITLE = "Contexto Geral"
DEFAULT_PRACTICAL_USAGE_CONTENT = "Termo usado frequentemente em reuniões de tecnologia."
MAX_RELATED_TERMS = 6


class Category(str, Enum):
    DESENVOLVIMENTO = "Desenvolvimento"
    INFRAESTRUTURA = "Infraestrutura"
    DADOS_IA = "Dados & IA"
    SEGURANCA = "Segurança"
    AGILE_PRODUTO = "Agile & Produto"


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> dict:
        """Dump with the camelCase field names used on the wire and in the store."""
        return self.model_dump(mode="json", by_alias=True)


class TitledText(_CamelModel):
    """A business example or an analogy."""
    title: str = Field(description="Short title in upper case.")
    description: str = Field(description="One or two sentences in Portuguese.")


class PracticalUsage(_CamelModel):
    title: str = Field(description="Where the sentence is said, e.g. 'Na reunião de alinhamento (Daily)'.")
    content: str = Field(description="Realistic sentence in Portuguese, as a developer would say it.")


def default_practical_usage() -> PracticalUsage:
    return PracticalUsage(
        title=DEFAULT_PRACTICAL_USAGE_TITLE,
        content=DEFAULT_PRACTICAL_USAGE_CONTENT,
    )


class TermRecord(_CamelModel):
    """
    A fully resolved glossary entry.

    Category stays a plain string here: records already in the store are
    returned as they are, even when they predate the current category set.
    """
    id: str
    term: str
    full_term: str = Field(alias="fullTerm")
    category: str
    definition: str
    phonetic: str
    translation: str
    slang: Optional[str] = None
    examples: List[TitledText] = Field(default_factory=list)
    analogies: List[TitledText] = Field(default_factory=list)
    practical_usage: PracticalUsage = Field(alias="practicalUsage", default_factory=default_practical_usage)
    related_terms: List[str] = Field(alias="relatedTerms", default_factory=list)


class TermSummary(_CamelModel):
    """Listing projection of a stored record."""
    id: str
    term: str
    category: Optional[str] = None
    definition: Optional[str] = None


class GeneratedTerm(_CamelModel):
    """
    Payload requested from the generation backend: a TermRecord without id.

    Only the documented defaults are applied on ingestion (missing or non-list
    sequences become empty, fullTerm and practicalUsage are optional). Anything
    else that does not fit is a validation error.
    """
    term: str = Field(description="Display name of the term, as commonly written.")
    full_term: Optional[str] = Field(
        default=None,
        alias="fullTerm",
        description="The full English name or expansion."
    )
    category: Category = Field(
        description="Pick one: Desenvolvimento, Infraestrutura, Dados & IA, Segurança, Agile & Produto."
    )
    definition: str = Field(description="A clear, business-focused definition in Portuguese.")
    phonetic: str = Field(description="Portuguese pronunciation hint.")
    translation: str = Field(description="The essence of the term translated to Portuguese.")
    slang: Optional[str] = Field(default=None, description="Common slang, or null.")
    examples: List[TitledText] = Field(default_factory=list, description="2 business contexts.")
    analogies: List[TitledText] = Field(default_factory=list, description="2 simple analogies.")
    practical_usage: Optional[PracticalUsage] = Field(
        default=None,
        alias="practicalUsage",
        description="Realistic sentence in Portuguese used by developers."
    )
    related_terms: List[str] = Field(
        default_factory=list,
        alias="relatedTerms",
        max_length=MAX_RELATED_TERMS,
        description="Up to 6 related keywords."
    )

    @field_validator("examples", "analogies", "related_terms", mode="before")
    @classmethod
    def _list_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []

    def to_record(self, term_id: str) -> TermRecord:
        """Build the final record under the given id, filling the documented defaults."""
        return TermRecord(
            id=term_id,
            term=self.term,
            full_term=self.full_term or self.term,
            category=self.category.value,
            definition=self.definition,
            phonetic=self.phonetic,
            translation=self.translation,
            slang=self.slang,
            examples=self.examples,
            analogies=self.analogies,
            practical_usage=self.practical_usage or default_practical_usage(),
            related_terms=self.related_terms,
        )
