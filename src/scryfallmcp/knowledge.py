"""MTG knowledge base: term classification and fuzzy term search."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Sequence

from scryfallmcp import knowledge_data as data

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5
MAX_SEARCH_RESULTS = 10
# Non-evergreen keywords and archetypes are sampled for suggestions
SUGGESTION_SAMPLE_SIZE = 10


class CategoryTag(Enum):
    """Knowledge categories a term can be classified into."""
    CARD_TYPE = "Card Type"
    KEYWORD_ABILITY = "Keyword Ability"
    COLOR_IDENTITY = "Color Identity"
    FORMAT = "Format"
    DECK_ARCHETYPE = "Deck Archetype"


@dataclass
class CategoryInfo:
    """Description of a term within one category."""

    category: CategoryTag
    information: str
    examples: list[str]


@dataclass
class KnowledgeResult:
    """Outcome of classifying a single term."""

    found: bool = False
    categories: list[CategoryInfo] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def has_category(self, tag: CategoryTag) -> bool:
        return any(info.category == tag for info in self.categories)


@dataclass
class SearchResult:
    """A knowledge term matching a search pattern."""

    term: str
    category: CategoryTag
    relevance: int


@dataclass
class _CategoryTable:
    terms: frozenset[str]
    info: Mapping[str, str]
    examples: Mapping[str, Sequence[str]]
    fallback: str

    def describe(self, tag: CategoryTag, term: str) -> CategoryInfo:
        return CategoryInfo(
            category=tag,
            information=self.info.get(term, self.fallback),
            examples=list(self.examples.get(term, ())),
        )


def calculate_relevance(term: str, pattern: str) -> int:
    """Score how strongly a term matches a pattern.

    Returns:
        100 for an exact match, 80 for a prefix match, 60 for a substring
        match and 0 otherwise.
    """
    if term == pattern:
        return 100
    if term.startswith(pattern):
        return 80
    if pattern in term:
        return 60
    return 0


class MTGKnowledgeBase:
    """Classifies MTG terms against curated knowledge tables.

    All tables are read-only, so one instance can be shared freely.

    Example:
        kb = MTGKnowledgeBase()
        result = kb.classify("flying")
        result.found                  # True
        result.categories[0].category # CategoryTag.KEYWORD_ABILITY
    """

    def __init__(self) -> None:
        """Initialize the per-category lookup tables."""
        self._all_keywords = data.EVERGREEN_KEYWORDS + data.NON_EVERGREEN_KEYWORDS
        self._all_colors = {
            **data.SINGLE_COLORS, **data.GUILDS, **data.SHARDS, **data.WEDGES,
        }
        all_formats = (
            data.CONSTRUCTED_FORMATS + data.LIMITED_FORMATS + data.CASUAL_FORMATS
        )

        # Classification order
        self._tables: dict[CategoryTag, _CategoryTable] = {
            CategoryTag.CARD_TYPE: _CategoryTable(
                terms=frozenset(data.CARD_TYPES),
                info=data.CARD_TYPE_INFO,
                examples=data.CARD_TYPE_EXAMPLES,
                fallback="No information available.",
            ),
            CategoryTag.KEYWORD_ABILITY: _CategoryTable(
                terms=frozenset(self._all_keywords),
                info=data.KEYWORD_INFO,
                examples=data.KEYWORD_EXAMPLES,
                fallback="Keyword ability with specific rules interactions.",
            ),
            CategoryTag.COLOR_IDENTITY: _CategoryTable(
                terms=frozenset(self._all_colors),
                info=data.COLOR_INFO,
                examples=data.COLOR_EXAMPLES,
                fallback="Color combination with specific mechanical identity.",
            ),
            CategoryTag.FORMAT: _CategoryTable(
                terms=frozenset(all_formats),
                info=data.FORMAT_INFO,
                examples=data.FORMAT_EXAMPLES,
                fallback="Magic: The Gathering competitive format.",
            ),
            CategoryTag.DECK_ARCHETYPE: _CategoryTable(
                terms=frozenset(data.DECK_ARCHETYPES),
                info=data.DECK_ARCHETYPE_INFO,
                examples=data.DECK_ARCHETYPE_EXAMPLES,
                fallback="Magic: The Gathering deck archetype.",
            ),
        }

        self._category_terms: dict[str, tuple[str, ...]] = {
            "Card Types": data.CARD_TYPES,
            "Keyword Abilities": self._all_keywords,
            "Color Identities": tuple(self._all_colors),
            "Formats": tuple(dict.fromkeys(all_formats)),
            "Deck Archetypes": data.DECK_ARCHETYPES,
            "Game Zones": data.GAME_ZONES,
            "Game Actions": data.GAME_ACTIONS,
            "Common Terms": data.CARD_ADVANTAGE_TERMS + data.SLANG,
        }

    def classify(self, term: str) -> KnowledgeResult:
        """Look up a term in every knowledge category.

        Args:
            term: Term to classify, matched case-insensitively.

        Returns:
            KnowledgeResult listing each matching category in classification
            order. When nothing matches, suggestions holds up to 5 related
            terms.
        """
        lower_term = term.lower()
        result = KnowledgeResult()

        for tag, table in self._tables.items():
            if lower_term in table.terms:
                result.found = True
                result.categories.append(table.describe(tag, lower_term))

        if not result.found:
            result.suggestions = self._generate_suggestions(lower_term)
            logger.debug(f"No knowledge match for {term!r}, {len(result.suggestions)} suggestions")

        return result

    def search_terms(self, pattern: str) -> list[SearchResult]:
        """Find card types, keywords and colors containing a pattern.

        Args:
            pattern: Substring to look for, matched case-insensitively.

        Returns:
            Up to 10 results, highest relevance first. Ties keep scan order.
        """
        lower_pattern = pattern.lower()
        candidates = [
            (data.CARD_TYPES, CategoryTag.CARD_TYPE),
            (self._all_keywords, CategoryTag.KEYWORD_ABILITY),
            (tuple(data.SINGLE_COLORS) + tuple(data.GUILDS), CategoryTag.COLOR_IDENTITY),
        ]

        results = [
            SearchResult(term=term, category=tag,
                         relevance=calculate_relevance(term, lower_pattern))
            for terms, tag in candidates
            for term in terms
            if lower_pattern in term
        ]
        results = [r for r in results if r.relevance > 0]
        results.sort(key=lambda r: r.relevance, reverse=True)
        return results[:MAX_SEARCH_RESULTS]

    def available_categories(self) -> list[str]:
        """Get the names of all knowledge categories."""
        return list(self._category_terms)

    def terms_in_category(self, category: str) -> Optional[tuple[str, ...]]:
        """Get the stored terms for a category name (case-insensitive).

        Returns:
            Tuple of terms, or None if the category is unknown.
        """
        for name, terms in self._category_terms.items():
            if name.lower() == category.strip().lower():
                return terms
        return None

    def _generate_suggestions(self, term: str) -> list[str]:
        """Collect sampled terms that contain, or are contained in, term."""
        sample = (
            data.CARD_TYPES
            + data.EVERGREEN_KEYWORDS
            + data.NON_EVERGREEN_KEYWORDS[:SUGGESTION_SAMPLE_SIZE]
            + tuple(data.SINGLE_COLORS)
            + tuple(data.GUILDS)
            + data.DECK_ARCHETYPES[:SUGGESTION_SAMPLE_SIZE]
        )
        matches = [t for t in sample if t in term or term in t]
        return matches[:MAX_SUGGESTIONS]
