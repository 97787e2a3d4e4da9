from knowledge_search.query.normalizer import is_empty_query, normalize_query

__all__ = [
    "is_empty_query",
    "normalize_query",
]
