"""Canonical lookup keys for free-text terms."""

import re

_NON_SLUG_RUN = re.compile(r'[^a-z0-9]+')


def normalize_id(text: str) -> str:
    """Turn raw term text into its store key, e.g. "React JS" -> "react-js".

    Lower-cases and trims, collapses every run of characters outside
    [a-z0-9] into one hyphen and drops hyphens at the edges.
    """
    slug = _NON_SLUG_RUN.sub('-', text.lower().strip())
    return slug.strip('-')
