"""FastMCP server exposing Scryfall card search and MTG knowledge tools.

Natural-language queries are translated to Scryfall syntax locally by the
QueryTranslator and MTGKnowledgeBase; only the translated query goes over
the network. Every tool returns Markdown display text.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from scryfallmcp import __version__
from scryfallmcp.formatting import (
    format_card, format_card_list, format_card_summary, format_prices,
    format_purchase_links, text_snippet,
)
from scryfallmcp.help_text import get_search_help, get_translation_help
from scryfallmcp.knowledge import CategoryTag, MTGKnowledgeBase
from scryfallmcp.scryfall import PAGE_SIZE, ScryfallAPIError, ScryfallClient
from scryfallmcp.settings import get_settings
from scryfallmcp.translator import QueryTranslator, color_code

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".scryfallmcp"
LOG_FILE = LOG_DIR / "server.log"

NATURAL_SEARCH_MAX = 100
KNOWLEDGE_HITS_SHOWN = 3

SearchOrder = Literal[
    "name", "set", "released", "rarity", "color", "usd", "tix", "eur", "cmc",
    "power", "toughness", "edhrec", "penny", "artist", "review",
]
ListOrder = Literal[
    "name", "set", "released", "rarity", "color", "usd", "tix", "eur", "cmc",
    "power", "toughness", "edhrec",
]
SetOrder = Literal[
    "name", "set", "released", "rarity", "color", "usd", "tix", "eur", "cmc",
    "power", "toughness", "collector_number",
]
Unique = Literal["cards", "art", "prints"]

# Initialize FastMCP server with STDIO transport
mcp = FastMCP("scryfall")

# Read-only translation state shared by all tools
translator: QueryTranslator = QueryTranslator()
knowledge: MTGKnowledgeBase = MTGKnowledgeBase()

# Lazy-loaded HTTP client
_scryfall: Optional[ScryfallClient] = None


def _get_scryfall() -> ScryfallClient:
    """Get or initialize the Scryfall client (lazy loading)."""
    global _scryfall
    if _scryfall is None:
        logger.info("Initializing Scryfall client...")
        _scryfall = ScryfallClient()
    return _scryfall


def _error_text(context: str, error: Exception) -> str:
    logger.error(f"{context}: {error}")
    return f"Error: {error}"


def _render_search_page(query: str, page, page_number: int, translated: Optional[str] = None) -> str:
    result = f'**Search Results for "{query}"**\n'
    if translated:
        result += f'*Your query was automatically translated to: "{translated}"*\n\n'
    result += f"Found {page.total_cards} total cards"
    if page.has_more:
        result += f" (showing page {page_number})"
    result += "\n\n"
    result += format_card_list(page.cards)
    if page.has_more:
        result += f"*There are more results. Use page {page_number + 1} to see more.*"
    return result.strip()


@mcp.tool()
def scryfall_natural_search(
    query: str,
    show_translation: bool = False,
    unique: Unique = "cards",
    order: SearchOrder = "name",
    limit: Optional[int] = None,
) -> str:
    """Search for Magic cards using natural language.

    Translates phrases like 'leaves the battlefield', 'sacrifice' or
    'big creatures' into Scryfall syntax before searching.

    Args:
        query: Natural language query (e.g., 'cheap blue counterspells',
            'angels with flying').
        show_translation: Show the original and translated query.
        unique: Strategy for omitting similar cards.
        order: Sort order for returned cards.
        limit: Maximum number of cards to return (1-100). Defaults to the
            default_search_limit setting.

    Returns:
        Markdown listing of matching cards with translation hints.
    """
    translated = translator.translate_with_knowledge(query, knowledge)
    if limit is None:
        limit = get_settings().get("default_search_limit")
    limit = max(1, min(limit, NATURAL_SEARCH_MAX))

    suggestions = translator.suggest_mappings(query)
    term_hits = knowledge.search_terms(query)
    logger.info(f"Natural search {query!r} -> {translated!r}")

    result = "**Natural Language Search Results**\n"
    if show_translation:
        result += f'**Original Query:** "{query}"\n'
        result += f'**Translated Query:** "{translated}"\n\n'

    if suggestions and translated.lower() == query.lower():
        result += "**Suggested mappings for your query:**\n"
        result += "".join(f"• {s}\n" for s in suggestions)
        result += "\n"

    if term_hits:
        result += "**MTG terms found in your query:**\n"
        for hit in term_hits[:KNOWLEDGE_HITS_SHOWN]:
            result += f"• **{hit.term}** ({hit.category.value})\n"
        result += "\n"

    try:
        cards = _get_scryfall().search_all(translated, limit, unique=unique, order=order)
    except ScryfallAPIError as e:
        logger.error(f"Natural search failed: {e}")
        result += f"**Search Error:** {e}\n\n"
        if suggestions:
            result += "**Try these suggested mappings:**\n"
            result += "".join(f"• {s}\n" for s in suggestions)
        elif term_hits:
            result += "**Learn more about these MTG terms:**\n"
            for hit in term_hits[:KNOWLEDGE_HITS_SHOWN]:
                result += f'• Use `mtg_knowledge_lookup` with "{hit.term}"\n'
        else:
            result += ("Try rephrasing your query or using the regular "
                       "`scryfall_search_cards` tool with exact Scryfall syntax.")
        return result.strip()

    if not cards:
        result += "**No cards found matching your query.**\n\n"
        if suggestions:
            result += "Try using more specific terms, or use one of the suggested mappings above."
        elif term_hits:
            result += ("Try using the `mtg_knowledge_lookup` tool to learn more "
                       "about the MTG terms found in your query.")
        else:
            result += "Try using more specific terms or different keywords."
        return result.strip()

    result += f"Found {len(cards)} cards (showing up to {limit})\n\n"
    result += format_card_list(cards)
    if len(cards) == limit:
        result += f"*Limited to {limit} results. Use the regular search for more comprehensive results.*"
    return result.strip()


@mcp.tool()
def scryfall_search_cards(
    query: str,
    try_natural_language: bool = True,
    unique: Unique = "cards",
    order: SearchOrder = "name",
    dir: Literal["auto", "asc", "desc"] = "auto",
    page: int = 1,
) -> str:
    """Search for cards using Scryfall's search syntax.

    If the raw query fails and try_natural_language is set, the query is
    translated from natural language and retried.

    Args:
        query: Scryfall query (e.g., 'c:blue t:creature', 't:instant cmc<=3').
        try_natural_language: Retry with a translated query on failure.
        unique: Strategy for omitting similar cards.
        order: Sort order for returned cards.
        dir: Sort direction.
        page: Page of results to return.

    Returns:
        Markdown listing of one page of matching cards.
    """
    client = _get_scryfall()
    page = max(1, page)

    try:
        result_page = client.search(query, unique=unique, order=order, direction=dir, page=page)
        return _render_search_page(query, result_page, page)
    except ScryfallAPIError as error:
        if not try_natural_language:
            return _error_text("Search failed", error)

        translated = translator.translate(query)
        if translated == query.lower():
            return _error_text("Search failed", error)

        logger.info(f"Retrying search with translation {translated!r}")
        try:
            result_page = client.search(
                translated, unique=unique, order=order, direction=dir, page=page,
            )
            return _render_search_page(query, result_page, page, translated=translated)
        except ScryfallAPIError as translation_error:
            logger.error(f"Translated search failed: {translation_error}")
            result = f'**Search failed for "{query}"**\n\n'
            result += f"Original error: {error}\n"
            result += f"Translation attempt also failed: {translation_error}\n\n"
            suggestions = translator.suggest_mappings(query)
            if suggestions:
                result += "**Suggested mappings:**\n"
                result += "".join(f"• {s}\n" for s in suggestions)
                result += "\nTry using the `scryfall_natural_search` tool for better natural language support."
            return result


@mcp.tool()
def scryfall_get_card_named(name: str, fuzzy: bool = False, set: Optional[str] = None) -> str:
    """Get a specific card by exact or fuzzy name match.

    Args:
        name: Card name to look up.
        fuzzy: Use fuzzy name matching instead of exact.
        set: Optional set code to search within (e.g., 'khm').
    """
    try:
        return format_card(_get_scryfall().named(name, fuzzy=fuzzy, set_code=set))
    except ScryfallAPIError as e:
        return _error_text(f"Card lookup failed for {name!r}", e)


@mcp.tool()
def scryfall_get_random_card(query: Optional[str] = None) -> str:
    """Get a random card, optionally filtered by a Scryfall query."""
    try:
        return f"**Random Card:**\n\n{format_card(_get_scryfall().random(query))}"
    except ScryfallAPIError as e:
        return _error_text("Random card failed", e)


@mcp.tool()
def scryfall_get_card_by_id(id: str) -> str:
    """Get a specific card by its Scryfall ID."""
    try:
        return format_card(_get_scryfall().by_id(id))
    except ScryfallAPIError as e:
        return _error_text(f"Card lookup failed for id {id}", e)


@mcp.tool()
def scryfall_autocomplete(query: str, include_extras: bool = False) -> str:
    """Get autocomplete suggestions for a partial card name.

    Args:
        query: Partial card name.
        include_extras: Include extra cards such as tokens.
    """
    try:
        names = _get_scryfall().autocomplete(query, include_extras=include_extras)
    except ScryfallAPIError as e:
        return _error_text("Autocomplete failed", e)

    listing = "\n".join(f"{index}. {name}" for index, name in enumerate(names, 1))
    return f'**Autocomplete suggestions for "{query}":**\n\n{listing}'


@mcp.tool()
def scryfall_card_prices(name: str, fuzzy: bool = False, set: Optional[str] = None) -> str:
    """Get a card's current prices and purchase links.

    Args:
        name: Card name to look up.
        fuzzy: Use fuzzy name matching instead of exact.
        set: Optional set code for a specific printing.
    """
    try:
        card = _get_scryfall().named(name, fuzzy=fuzzy, set_code=set)
    except ScryfallAPIError as e:
        return _error_text(f"Price lookup failed for {name!r}", e)

    result = f"**{card.name}** ({card.set_name}, {card.set_code.upper()})\n\n"
    prices = format_prices(card)
    result += f"**Prices:** {prices}\n" if prices else "*No pricing data available for this printing.*\n"
    links = format_purchase_links(card)
    if links:
        result += f"**Purchase:** {links}\n"
    result += f"**Scryfall ID:** {card.id}"
    return result


@mcp.tool()
def scryfall_get_all_cards_in_set(
    set_code: str,
    order: SetOrder = "collector_number",
    include_variations: bool = False,
) -> str:
    """Get the cards of a specific set.

    Args:
        set_code: Set code (e.g., 'ltr', 'khm', 'neo').
        order: Sort order for returned cards.
        include_variations: Include variations such as alternate arts.
    """
    query = f"s:{set_code}"
    if not include_variations:
        query += " -is:variation"

    try:
        page = _get_scryfall().search(query, order=order, direction="asc")
    except ScryfallAPIError as e:
        return _error_text(f"Set listing failed for {set_code}", e)

    result = f'**All Cards in Set "{set_code.upper()}"**\n'
    result += f"Found {page.total_cards} total cards\n\n"
    for index, card in enumerate(page.cards, 1):
        result += f"{index}. {format_card_summary(card, show_set_name=False)}\n\n"
    if page.has_more:
        result += f"*Note: This set has more cards. This shows the first {len(page.cards)} results.*"
    return result.strip()


def _listing(title: str, query: str, additional_filters: Optional[str], limit: int,
             order: str, search_term: Optional[str] = None, skip_names: bool = False) -> str:
    """Fetch and render a paginated card listing for type and text tools."""
    if additional_filters:
        query += f" {additional_filters}"
    limit = max(1, min(limit, PAGE_SIZE))

    try:
        cards = _get_scryfall().search_all(query, limit, order=order, direction="asc")
    except ScryfallAPIError as e:
        return _error_text(f"Listing failed for {query!r}", e)

    result = f"{title}\n"
    if additional_filters:
        result += f"**Additional Filters:** {additional_filters}\n"
    result += f"Found {len(cards)} cards (showing up to {limit})\n\n"

    for index, card in enumerate(cards, 1):
        result += f"{index}. {format_card_summary(card)}"
        if search_term and not (skip_names and search_term.lower() in card.name.lower()):
            oracle = card.full_oracle_text
            if search_term.lower() in oracle.lower():
                result += f'\n   📝 "{text_snippet(oracle, search_term)}"'
        result += "\n\n"
    return result.strip()


@mcp.tool()
def scryfall_get_cards_by_type(
    type_query: str,
    additional_filters: Optional[str] = None,
    limit: int = 50,
    order: ListOrder = "name",
) -> str:
    """Get cards matching a type or subtype.

    Args:
        type_query: Type to search for (e.g., 'goblin', 'legendary creature').
        additional_filters: Extra Scryfall filters (e.g., 'legal:modern c:red').
        limit: Maximum number of cards to return (1-175).
        order: Sort order for returned cards.
    """
    return _listing(
        f'**Cards with Type "{type_query}"**',
        f"t:{type_query}", additional_filters, limit, order,
    )


@mcp.tool()
def scryfall_get_cards_with_text(
    search_text: str,
    search_in: Literal["name", "oracle", "both"] = "oracle",
    additional_filters: Optional[str] = None,
    limit: int = 50,
    order: ListOrder = "name",
) -> str:
    """Get cards containing text in their name or rules text.

    Args:
        search_text: Text to look for (e.g., 'storm', 'draw a card').
        search_in: Search card names, oracle text or both.
        additional_filters: Extra Scryfall filters (e.g., 'legal:standard').
        limit: Maximum number of cards to return (1-175).
        order: Sort order for returned cards.
    """
    if search_in == "name":
        query = f'name:"{search_text}"'
    elif search_in == "both":
        query = f'(name:"{search_text}" or o:"{search_text}")'
    else:
        query = f'o:"{search_text}"'

    where = "oracle text" if search_in == "oracle" else search_in
    return _listing(
        f'**Cards with "{search_text}" in {where}**',
        query, additional_filters, limit, order,
        search_term=search_text, skip_names=search_in == "name",
    )


@mcp.tool()
def scryfall_search_help(
    topic: Literal[
        "all", "basics", "keywords", "operators", "colors", "types",
        "sets", "formats", "prices", "advanced", "examples",
    ] = "all",
) -> str:
    """Get documentation about Scryfall search syntax, keywords and operators."""
    return get_search_help(topic)


@mcp.tool()
def scryfall_translation_help(
    query: Optional[str] = None,
    category: Literal["all", "text", "colors", "types", "formats", "costs"] = "all",
) -> str:
    """Show how natural-language terms translate to Scryfall syntax.

    Args:
        query: Optional natural-language term to translate.
        category: Mapping category to list.
    """
    return get_translation_help(translator, query, category)


@mcp.tool()
def mtg_knowledge_lookup(query: str, search_similar: bool = True) -> str:
    """Look up an MTG term: card types, keywords, colors, formats, archetypes.

    Args:
        query: Term to look up (e.g., 'flying', 'azorius', 'modern', 'aggro').
        search_similar: Search for similar terms when there is no exact match.

    Returns:
        Markdown description with examples and related Scryfall searches.
    """
    found = knowledge.classify(query)
    result = f'# MTG Knowledge: "{query}"\n\n'

    if found.found:
        for info in found.categories:
            result += f"## {info.category.value}\n\n{info.information}\n\n"
            if info.examples:
                result += f"**Examples:** {', '.join(info.examples)}\n\n"

        result += "---\n\n**Related Scryfall Searches:**\n"
        translated = translator.translate(query)
        if translated != query.lower():
            result += f'• **Natural Language:** "{query}" → `{translated}`\n'
        if found.has_category(CategoryTag.KEYWORD_ABILITY):
            result += f'• **Cards with this ability:** `o:"{query}"`\n'
        if found.has_category(CategoryTag.CARD_TYPE):
            result += f"• **All {query}s:** `t:{query}`\n"
        if found.has_category(CategoryTag.COLOR_IDENTITY):
            code = color_code(query)
            if code:
                result += f"• **{query} cards:** `c:{code}`\n"
        return result

    result += f'**No direct match found for "{query}"**\n\n'

    if search_similar:
        similar = knowledge.search_terms(query)
        if similar:
            result += "**Similar terms found:**\n\n"
            result += "".join(f"• **{s.term}** ({s.category.value})\n" for s in similar)
            result += "\nTry using one of these terms with the `mtg_knowledge_lookup` tool.\n\n"

    if found.suggestions:
        result += "**Did you mean:**\n"
        result += "".join(f"• {s}\n" for s in found.suggestions)
        result += "\n"

    result += "**Available categories:**\n"
    result += "".join(f"• {c}\n" for c in knowledge.available_categories())
    return result


@mcp.tool()
def mtg_knowledge_terms(category: str) -> str:
    """List the terms the knowledge base knows for one category.

    Args:
        category: Category name, e.g. 'Keyword Abilities' or 'Game Zones'.
    """
    terms = knowledge.terms_in_category(category)
    if terms is None:
        available = ", ".join(knowledge.available_categories())
        return f'**Error**: Unknown category "{category}". Available categories: {available}'
    return f"# {category.strip().title()}\n\n" + ", ".join(terms)


def _configure_logging(level: str) -> None:
    """Log to ~/.scryfallmcp/server.log and stderr.

    stdout carries the MCP stdio transport, so nothing is logged there.
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(LOG_FILE, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))

    # Configure root logger directly (basicConfig is a no-op if already configured)
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def main() -> None:
    """Entry point for the Scryfall MCP server."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Scryfall MCP server - natural-language MTG card search over stdio",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Console log level (default: settings log_level)",
    )
    parser.add_argument(
        "--show-log",
        action="store_true",
        help="Show the log file path and its last lines, then exit",
    )
    args = parser.parse_args()

    if args.show_log:
        print(f"Log file: {LOG_FILE}")
        if LOG_FILE.exists():
            with open(LOG_FILE, encoding="utf-8") as f:
                for line in f.readlines()[-20:]:
                    print(line, end="")
        return

    _configure_logging(args.log_level or get_settings().get("log_level"))
    logger.info(f"Scryfall MCP server {__version__} starting on stdio")
    mcp.run()


# Entry point for running as module
if __name__ == "__main__":
    main()
