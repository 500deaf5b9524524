"""Tests for the MCP tool functions with a stubbed Scryfall client."""

import pytest

from scryfallmcp import server
from scryfallmcp.scryfall import ScryfallAPIError, ScryfallCard, SearchPage
from scryfallmcp.settings import ENV_OVERRIDES, Settings


def make_card(name="Lightning Bolt", **overrides):
    fields = dict(
        id=f"{name.lower().replace(' ', '-')}-id",
        name=name,
        type_line="Instant",
        mana_cost="{R}",
        oracle_text="Lightning Bolt deals 3 damage to any target.",
        set_code="2xm",
        set_name="Double Masters",
        rarity="uncommon",
        prices={"usd": "1.50"},
    )
    fields.update(overrides)
    return ScryfallCard(**fields)


class StubScryfall:
    """Scryfall client double that records queries.

    Any query listed in failing raises a 400 ScryfallAPIError.
    """

    def __init__(self, cards=None, failing=(), has_more=False):
        self.cards = cards if cards is not None else [make_card()]
        self.failing = set(failing)
        self.has_more = has_more
        self.queries = []

    def _check(self, query):
        self.queries.append(query)
        if query in self.failing:
            raise ScryfallAPIError(400, f"bad query {query}", "bad_request")

    def search(self, query, unique="cards", order="name", direction="auto", page=1):
        self._check(query)
        return SearchPage(total_cards=len(self.cards), has_more=self.has_more, cards=self.cards)

    def search_all(self, query, limit, **kwargs):
        self._check(query)
        return self.cards[:limit]

    def named(self, name, fuzzy=False, set_code=None):
        self._check(name)
        return self.cards[0]

    def random(self, query=None):
        self._check(query)
        return self.cards[0]

    def by_id(self, card_id):
        self._check(card_id)
        return self.cards[0]

    def autocomplete(self, query, include_extras=False):
        self._check(query)
        return [c.name for c in self.cards]


@pytest.fixture
def settings(tmp_path, monkeypatch):
    for env_name in ENV_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)
    settings = Settings(settings_file=tmp_path / "settings.json")
    monkeypatch.setattr(server, "get_settings", lambda: settings)
    return settings


@pytest.fixture
def stub(monkeypatch, settings):
    stub = StubScryfall()
    monkeypatch.setattr(server, "_scryfall", stub)
    return stub


class TestNaturalSearch:
    """Tests for scryfall_natural_search."""

    def test_translated_query_sent(self, stub):
        result = server.scryfall_natural_search("cheap blue counterspells", show_translation=True)

        assert stub.queries == ['cmc<=2 c:u o:"counter" and o:"spell"']
        assert '**Translated Query:** "cmc<=2 c:u o:"counter" and o:"spell""' in result
        assert "Found 1 cards (showing up to 25)" in result
        assert "1. **Lightning Bolt**" in result

    def test_limit_clamped(self, stub):
        stub.cards = [make_card(f"Card {i}") for i in range(150)]

        result = server.scryfall_natural_search("goblins", limit=500)

        assert "Found 100 cards (showing up to 100)" in result
        assert "*Limited to 100 results." in result

    def test_default_limit_from_settings(self, stub, settings):
        """Without an explicit limit the configured default applies."""
        settings.set("default_search_limit", 3, save=False)
        stub.cards = [make_card(f"Card {i}") for i in range(10)]

        result = server.scryfall_natural_search("goblins")

        assert "Found 3 cards (showing up to 3)" in result
        assert "*Limited to 3 results." in result

    def test_term_hits_listed(self, stub):
        result = server.scryfall_natural_search("flying")
        assert "**MTG terms found in your query:**\n• **flying** (Keyword Ability)" in result

    def test_no_results(self, stub):
        stub.cards = []

        result = server.scryfall_natural_search("shiny things")

        assert "**No cards found matching your query.**" in result
        assert result.endswith("Try using more specific terms or different keywords.")

    def test_api_error_reported(self, stub):
        stub.failing.add("t:creature and (pow>=4 or tou>=4)")

        result = server.scryfall_natural_search("big creatures")

        assert "**Search Error:** Scryfall API Error (400)" in result
        assert "**Try these suggested mappings:**" in result


class TestSearchCards:
    """Tests for scryfall_search_cards and its translation fallback."""

    def test_raw_query(self, stub):
        result = server.scryfall_search_cards("c:r t:instant")

        assert stub.queries == ["c:r t:instant"]
        assert result.startswith('**Search Results for "c:r t:instant"**')
        assert "automatically translated" not in result

    def test_more_pages_hint(self, stub):
        stub.has_more = True

        result = server.scryfall_search_cards("t:goblin", page=2)

        assert "(showing page 2)" in result
        assert result.endswith("*There are more results. Use page 3 to see more.*")

    def test_falls_back_to_translation(self, stub):
        stub.failing.add("big creatures")

        result = server.scryfall_search_cards("big creatures")

        assert stub.queries == ["big creatures", "t:creature and (pow>=4 or tou>=4)"]
        assert '*Your query was automatically translated to: "t:creature and (pow>=4 or tou>=4)"*' in result

    def test_no_translation_returns_error(self, stub):
        stub.failing.add("zzz:1")

        result = server.scryfall_search_cards("zzz:1")

        assert result == "Error: Scryfall API Error (400): bad query zzz:1"
        assert stub.queries == ["zzz:1"]

    def test_fallback_disabled(self, stub):
        stub.failing.add("big creatures")

        result = server.scryfall_search_cards("big creatures", try_natural_language=False)

        assert result.startswith("Error: ")
        assert len(stub.queries) == 1

    def test_both_attempts_fail(self, stub):
        stub.failing.update({"big creatures", "t:creature and (pow>=4 or tou>=4)"})

        result = server.scryfall_search_cards("big creatures")

        assert result.startswith('**Search failed for "big creatures"**')
        assert "Original error: Scryfall API Error (400): bad query big creatures" in result
        assert "Translation attempt also failed:" in result
        assert "**Suggested mappings:**" in result


class TestCardTools:
    """Tests for the single-card tools."""

    def test_get_card_named(self, stub):
        result = server.scryfall_get_card_named("Lightning Bolt")
        assert result.startswith("**Lightning Bolt** {R}")

    def test_get_card_named_error(self, stub):
        stub.failing.add("Nope")
        assert server.scryfall_get_card_named("Nope").startswith("Error: Scryfall API Error (400)")

    def test_random_card(self, stub):
        assert server.scryfall_get_random_card("t:instant").startswith("**Random Card:**\n\n**Lightning Bolt**")

    def test_card_by_id(self, stub):
        assert "**Scryfall ID:** lightning-bolt-id" in server.scryfall_get_card_by_id("lightning-bolt-id")

    def test_autocomplete(self, stub):
        stub.cards = [make_card("Lightning Bolt"), make_card("Lightning Helix")]

        result = server.scryfall_autocomplete("lightning")

        assert result == '**Autocomplete suggestions for "lightning":**\n\n1. Lightning Bolt\n2. Lightning Helix'

    def test_card_prices(self, stub):
        result = server.scryfall_card_prices("Lightning Bolt")

        assert result.startswith("**Lightning Bolt** (Double Masters, 2XM)")
        assert "**Prices:** USD: $1.50" in result

    def test_card_prices_missing(self, stub):
        stub.cards = [make_card(prices={})]
        assert "*No pricing data available for this printing.*" in server.scryfall_card_prices("Lightning Bolt")


class TestListings:
    """Tests for set, type and text listings."""

    def test_set_listing(self, stub):
        result = server.scryfall_get_all_cards_in_set("neo")

        assert stub.queries == ["s:neo -is:variation"]
        assert result.startswith('**All Cards in Set "NEO"**')
        assert "#2xm" in result

    def test_set_listing_with_variations(self, stub):
        server.scryfall_get_all_cards_in_set("neo", include_variations=True)
        assert stub.queries == ["s:neo"]

    def test_cards_by_type(self, stub):
        result = server.scryfall_get_cards_by_type("goblin", additional_filters="legal:modern")

        assert stub.queries == ["t:goblin legal:modern"]
        assert "**Additional Filters:** legal:modern" in result

    def test_cards_with_text_snippet(self, stub):
        stub.cards = [make_card("Elvish Visionary", type_line="Creature — Elf Shaman",
                                oracle_text="When this creature enters, draw a card.")]

        result = server.scryfall_get_cards_with_text("draw a card")

        assert stub.queries == ['o:"draw a card"']
        assert 'in oracle text**' in result
        assert '📝 "' in result

    def test_cards_with_text_in_name(self, stub):
        server.scryfall_get_cards_with_text("bolt", search_in="both")
        assert stub.queries == ['(name:"bolt" or o:"bolt")']

    def test_listing_error(self, stub):
        stub.failing.add("t:zzz")
        assert server.scryfall_get_cards_by_type("zzz").startswith("Error: ")


class TestHelpTools:
    """Tests for the help tools."""

    def test_search_help_topic(self):
        assert server.scryfall_search_help("basics").startswith("# Scryfall Search Basics")

    def test_search_help_all(self):
        result = server.scryfall_search_help()
        assert result.startswith("# Complete Scryfall Search Reference")
        assert "# Scryfall Search Basics" in result

    def test_search_help_unknown(self):
        assert server.scryfall_search_help("nonsense").startswith('**Error**: Unknown help topic "nonsense"')

    def test_translation_help_category(self):
        result = server.scryfall_translation_help(category="costs")

        assert '• **"cheap"** → `cmc<=2`' in result
        assert '**"azorius"**' not in result

    def test_translation_help_query(self):
        result = server.scryfall_translation_help(query="big creatures", category="types")
        assert '**Translated To:** "t:creature and (pow>=4 or tou>=4)"' in result


class TestKnowledgeTools:
    """Tests for the knowledge lookup tools."""

    def test_keyword_lookup(self):
        result = server.mtg_knowledge_lookup("flying")

        assert "## Keyword Ability" in result
        assert "**Examples:** Serra Angel" in result
        assert '`o:"flying"`' in result

    def test_color_lookup(self):
        result = server.mtg_knowledge_lookup("azorius")

        assert "## Color Identity" in result
        assert "`c:wu`" in result

    def test_card_type_lookup(self):
        assert "`t:creature`" in server.mtg_knowledge_lookup("creature")

    def test_unknown_term(self):
        result = server.mtg_knowledge_lookup("fly")

        assert '**No direct match found for "fly"**' in result
        assert "• **flying** (Keyword Ability)" in result
        assert "**Did you mean:**\n• flying" in result
        assert "• Game Zones" in result

    def test_unknown_without_similar(self):
        result = server.mtg_knowledge_lookup("fly", search_similar=False)
        assert "Similar terms found" not in result

    def test_terms_listing(self):
        result = server.mtg_knowledge_terms("game zones")
        assert result == "# Game Zones\n\nbattlefield, graveyard, hand, library, exile, stack, command"

    def test_terms_unknown_category(self):
        assert server.mtg_knowledge_terms("spells").startswith('**Error**: Unknown category "spells"')
