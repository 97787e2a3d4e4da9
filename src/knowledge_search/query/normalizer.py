"""Query normalization."""


def normalize_query(raw_query: str) -> str:
    """Trim surrounding whitespace and lowercase a raw query.

    An empty return value means "no query".
    """
    return raw_query.strip().lower()


def is_empty_query(raw_query: str) -> bool:
    """Whether the raw query normalizes to the empty string."""
    return not normalize_query(raw_query)
