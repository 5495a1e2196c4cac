"""
Prompt templates for term generation.

The JSON shape itself travels as the structured-output schema (see
schemas.GeneratedTerm); these prompts carry the editorial instructions.
"""

SYSTEM_PROMPT = (
    "Você é um glossário técnico para executivos de negócios. "
    "Responda sempre com um único objeto JSON, sem texto fora dele."
)

TERM_PROMPT_TEMPLATE = """You are a technical glossary for business executives. Define the term "{term}".

Requirements:
1. 'fullTerm': The full English name or expansion.
2. 'translation': Translate the essence to Portuguese.
3. 'definition': A clear, business-focused definition in Portuguese.
4. 'phonetic': Portuguese pronunciation hint.
5. 'slang': Common slang (or null).
6. 'examples': 2 business contexts.
7. 'analogies': 2 simple analogies.
8. 'practicalUsage': Realistic sentence in Portuguese used by developers.
9. 'relatedTerms': Up to 6 related keywords.
10. 'category': Pick one: Desenvolvimento, Infraestrutura, Dados & IA, Segurança, Agile & Produto.
"""


def build_term_messages(term: str) -> list:
    """Chat messages asking the model to define a single term."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": TERM_PROMPT_TEMPLATE.format(term=term)},
    ]
