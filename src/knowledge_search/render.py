"""Plain-text rendering of selection results."""

from knowledge_search.data import Article, Match, NoMatch, SelectionResult

PROMPT_TEXT = "Start typing to search knowledge..."


def render_article(article: Article) -> str:
    """Render an article as a text card: id and tags, title, summary, body."""
    header = article.id
    if article.tags:
        header = f"{header}  [{', '.join(article.tags)}]"
    return "\n".join([header, "", article.title, article.summary, "", article.body])


def render_result(result: SelectionResult, raw_query: str) -> str:
    """Render a selection result for display.

    Args:
        result: Result to render.
        raw_query: Query as typed, echoed back in the no-match message.
    """
    if isinstance(result, Match):
        return render_article(result.article)
    if isinstance(result, NoMatch):
        return f"No matching articles found for: {raw_query}"
    return PROMPT_TEXT
