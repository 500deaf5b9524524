"""Rule-based translation of natural-language card queries to Scryfall syntax.

Phrases are rewritten one after another over the accumulating query string,
category by category in MAPPING_CATEGORIES order. A fragment inserted by an
earlier rule can therefore be matched again by a later rule, e.g.
"sacrifice" expands to a fragment containing "sac a", which the later "sac"
rule rewrites again. Output compatibility depends on this, so it is kept.
"""

import logging
import re
from typing import Mapping, Optional

from scryfallmcp.knowledge import CategoryTag, MTGKnowledgeBase
from scryfallmcp.mappings import COLOR_CODES, MAPPING_CATEGORIES

logger = logging.getLogger(__name__)

MAX_MAPPING_SUGGESTIONS = 5


def _phrase_pattern(phrase: str) -> re.Pattern:
    """Whole-phrase, case-insensitive pattern for a literal phrase.

    Word boundaries are ASCII-only, so accented letters next to a phrase
    do not block a match.
    """
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE | re.ASCII)


def format_suggestion(phrase: str, fragment: str) -> str:
    """Render a mapping entry the way suggestion lists show it."""
    return f'"{phrase}" → {fragment}'


def color_code(name: str) -> Optional[str]:
    """Get the letter code for a color, guild, shard or wedge name."""
    return COLOR_CODES.get(name.lower())


class QueryTranslator:
    """Translates natural-language queries using ordered mapping tables.

    Example:
        translator = QueryTranslator()
        translator.translate("cheap blue counterspells")
        # -> 'cmc<=2 c:u o:"counter" and o:"spell"'
    """

    def __init__(
        self, categories: Optional[Mapping[str, Mapping[str, str]]] = None
    ) -> None:
        """Initialize the translator.

        Args:
            categories: Ordered mapping of category name to phrase table.
                Defaults to the built-in tables in application order.
        """
        self._categories = categories if categories is not None else MAPPING_CATEGORIES
        self._rules: list[tuple[re.Pattern, str]] = [
            (_phrase_pattern(phrase), fragment)
            for table in self._categories.values()
            for phrase, fragment in table.items()
        ]
        logger.debug(f"Compiled {len(self._rules)} translation rules")

    @property
    def categories(self) -> Mapping[str, Mapping[str, str]]:
        return self._categories

    def translate(self, query: str) -> str:
        """Translate a natural-language query into Scryfall syntax.

        Args:
            query: Free-form query text. Any string is accepted.

        Returns:
            The lowercased query with every known phrase replaced by its
            fragment. Text with no known phrase is returned lowercased.
        """
        translated = query.lower()
        for pattern, fragment in self._rules:
            translated = pattern.sub(lambda _m, f=fragment: f, translated)
        return translated

    def translate_with_knowledge(self, query: str, kb: MTGKnowledgeBase) -> str:
        """Translate a query, then tag keywords and card types it missed.

        Each whitespace-separated word of the original query is classified.
        Keyword abilities become o:"word" and card types become t:word unless
        that predicate is already in the translation.

        Args:
            query: Free-form query text.
            kb: Knowledge base used to classify each word.

        Returns:
            Translated query string.
        """
        translated = self.translate(query)

        for word in query.lower().split():
            knowledge = kb.classify(word)
            if not knowledge.found:
                continue

            if knowledge.has_category(CategoryTag.KEYWORD_ABILITY):
                predicate = f'o:"{word}"'
            elif knowledge.has_category(CategoryTag.CARD_TYPE):
                predicate = f"t:{word}"
            else:
                continue

            if predicate not in translated:
                translated = _phrase_pattern(word).sub(
                    lambda _m, p=predicate: p, translated
                )
                logger.debug(f"Knowledge rewrite: {word!r} -> {predicate}")

        return translated

    def suggest_mappings(self, query: str) -> list[str]:
        """Find mapping entries textually related to a query.

        An entry is related when the query contains its phrase or the phrase
        contains the query.

        Args:
            query: Raw query text.

        Returns:
            Up to 5 formatted suggestions in table order.
        """
        lower_query = query.lower()

        # Phrases shared by two tables keep their first position
        merged: dict[str, str] = {}
        for table in self._categories.values():
            merged.update(table)

        suggestions = [
            format_suggestion(phrase, fragment)
            for phrase, fragment in merged.items()
            if phrase in lower_query or lower_query in phrase
        ]
        return suggestions[:MAX_MAPPING_SUGGESTIONS]
