"""Tests for card display formatting."""

from scryfallmcp.formatting import (
    format_card,
    format_card_list,
    format_card_summary,
    format_prices,
    format_purchase_links,
    text_snippet,
)
from scryfallmcp.scryfall import CardFace, ScryfallCard


def make_bolt(**overrides):
    fields = dict(
        id="bolt-id",
        name="Lightning Bolt",
        type_line="Instant",
        mana_cost="{R}",
        oracle_text="Lightning Bolt deals 3 damage to any target.",
        colors=["R"],
        set_code="2xm",
        set_name="Double Masters",
        rarity="uncommon",
        prices={"usd": "1.50", "usd_foil": None, "eur": "1.20", "tix": "0.02"},
        purchase_uris={"tcgplayer": "https://tcgplayer.example/bolt"},
    )
    fields.update(overrides)
    return ScryfallCard(**fields)


class TestPrices:
    """Tests for price and purchase link text."""

    def test_available_prices_only(self):
        assert format_prices(make_bolt()) == "USD: $1.50, EUR: €1.20, MTGO: 0.02 tix"

    def test_no_prices(self):
        assert format_prices(make_bolt(prices={})) is None

    def test_purchase_links(self):
        assert format_purchase_links(make_bolt()) == "[TCGPlayer](https://tcgplayer.example/bolt)"
        assert format_purchase_links(make_bolt(purchase_uris={})) is None


class TestFormatCard:
    """Tests for full card display."""

    def test_single_faced(self):
        text = format_card(make_bolt())

        assert text.startswith("**Lightning Bolt** {R}\n*Instant*")
        assert "**Set:** Double Masters (2XM)" in text
        assert "**Prices:** USD: $1.50" in text
        assert "**Purchase:** [TCGPlayer]" in text
        assert "Power/Toughness" not in text
        assert text.endswith("**Scryfall ID:** bolt-id")

    def test_creature_stats(self):
        text = format_card(make_bolt(type_line="Creature — Goblin", power="2", toughness="1"))
        assert "**Power/Toughness:** 2/1" in text

    def test_faces_listed(self):
        card = make_bolt(
            name="Delver of Secrets // Insectile Aberration",
            mana_cost="{U}",
            oracle_text="",
            faces=[
                CardFace(name="Delver of Secrets", type_line="Creature — Human Wizard",
                         mana_cost="{U}", power="1", toughness="1"),
                CardFace(name="Insectile Aberration", type_line="Creature — Human Insect",
                         oracle_text="Flying", power="3", toughness="2"),
            ],
        )
        text = format_card(card)

        assert "**Card Faces:**" in text
        assert "*Face 1: Delver of Secrets* {U}" in text
        assert "*Face 2: Insectile Aberration*\nCreature — Human Insect\nFlying" in text
        assert "Power/Toughness: 3/2" in text

    def test_list_numbered(self):
        text = format_card_list([make_bolt(), make_bolt(name="Chain Lightning")])

        assert text.startswith("1. **Lightning Bolt**")
        assert "\n\n---\n\n2. **Chain Lightning**" in text
        assert text.endswith("\n\n---\n\n")

    def test_empty_list(self):
        assert format_card_list([]) == ""


class TestSummary:
    """Tests for two-line listing summaries."""

    def test_with_set_name(self):
        summary = format_card_summary(make_bolt())
        assert summary == "**Lightning Bolt** {R}\n   *Instant* • Double Masters • uncommon • $1.50"

    def test_without_set_name(self):
        summary = format_card_summary(make_bolt(prices={}), show_set_name=False)
        assert summary == "**Lightning Bolt** {R}\n   *Instant* • uncommon • #2xm"

    def test_no_mana_cost(self):
        summary = format_card_summary(make_bolt(name="Forest", mana_cost="", type_line="Basic Land — Forest",
                                                prices={}))
        assert summary.startswith("**Forest**\n")


class TestTextSnippet:
    """Tests for excerpting oracle text around a match."""

    def test_centered_on_match(self):
        text = "Flying. When this creature enters, draw a card."
        assert text_snippet(text, "draw") == "...g. When this creature enters, draw a card."

    def test_case_insensitive(self):
        assert text_snippet("Draw a card.", "DRAW") == "Draw a card."

    def test_truncated_both_ends(self):
        text = "x" * 100 + "target" + "y" * 100
        snippet = text_snippet(text, "target", context_length=10)
        assert snippet == "...xxxxxtargetyyyyy..."

    def test_no_match(self):
        assert text_snippet("abc", "zzz") == "abc..."
