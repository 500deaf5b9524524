"""ScryfallMCP: natural-language Magic card search over MCP."""

__version__ = "1.0.0"

from scryfallmcp.knowledge import (
    CategoryInfo,
    CategoryTag,
    KnowledgeResult,
    MTGKnowledgeBase,
    SearchResult,
    calculate_relevance,
)
from scryfallmcp.translator import QueryTranslator, color_code
from scryfallmcp.scryfall import ScryfallAPIError, ScryfallCard, ScryfallClient
from scryfallmcp.settings import Settings, get_settings


def translate(query: str, use_knowledge: bool = True) -> str:
    """Translate a natural-language query with a fresh translator.

    Convenience wrapper for one-off use. Long-running callers should keep
    their own QueryTranslator and MTGKnowledgeBase.

    Args:
        query: Natural-language query.
        use_knowledge: Also tag keywords and card types found word by word.

    Returns:
        Scryfall query string.
    """
    translator = QueryTranslator()
    if use_knowledge:
        return translator.translate_with_knowledge(query, MTGKnowledgeBase())
    return translator.translate(query)


__all__ = [
    "__version__",
    "translate",
    "QueryTranslator",
    "color_code",
    "MTGKnowledgeBase",
    "KnowledgeResult",
    "CategoryInfo",
    "CategoryTag",
    "SearchResult",
    "calculate_relevance",
    "ScryfallClient",
    "ScryfallCard",
    "ScryfallAPIError",
    "Settings",
    "get_settings",
]
