"""Markdown display text for Scryfall cards."""

from typing import Optional

from scryfallmcp.scryfall import ScryfallCard

SNIPPET_CONTEXT = 60

# (price key, label, prefix, suffix)
_PRICE_FIELDS = (
    ("usd", "USD", "$", ""),
    ("usd_foil", "USD Foil", "$", ""),
    ("usd_etched", "USD Etched", "$", ""),
    ("eur", "EUR", "€", ""),
    ("eur_foil", "EUR Foil", "€", ""),
    ("eur_etched", "EUR Etched", "€", ""),
    ("tix", "MTGO", "", " tix"),
)

_PURCHASE_LABELS = (
    ("tcgplayer", "TCGPlayer"),
    ("cardmarket", "Cardmarket"),
    ("cardhoarder", "Cardhoarder"),
)


def format_prices(card: ScryfallCard) -> Optional[str]:
    """Comma-separated price list, or None if Scryfall has no prices."""
    prices = [
        f"{label}: {prefix}{card.prices[key]}{suffix}"
        for key, label, prefix, suffix in _PRICE_FIELDS
        if card.prices.get(key)
    ]
    return ", ".join(prices) if prices else None


def format_purchase_links(card: ScryfallCard) -> Optional[str]:
    links = [
        f"[{label}]({card.purchase_uris[key]})"
        for key, label in _PURCHASE_LABELS
        if card.purchase_uris.get(key)
    ]
    return " • ".join(links) if links else None


def format_card(card: ScryfallCard) -> str:
    """Full card display: cost, type, text, stats, set, prices and faces."""
    lines = [f"**{card.name}**" + (f" {card.mana_cost}" if card.mana_cost else "")]
    lines.append(f"*{card.type_line}*")

    if card.oracle_text:
        lines.append(f"\n{card.oracle_text}")

    if card.power and card.toughness:
        lines.append(f"\n**Power/Toughness:** {card.power}/{card.toughness}")

    lines.append(f"**Set:** {card.set_name} ({card.set_code.upper()})")
    lines.append(f"**Rarity:** {card.rarity}")

    if card.colors:
        lines.append(f"**Colors:** {', '.join(card.colors)}")

    prices = format_prices(card)
    if prices:
        lines.append(f"**Prices:** {prices}")

    links = format_purchase_links(card)
    if links:
        lines.append(f"**Purchase:** {links}")

    if len(card.faces) > 1:
        lines.append("\n**Card Faces:**")
        for index, face in enumerate(card.faces, 1):
            header = f"\n*Face {index}: {face.name}*"
            if face.mana_cost:
                header += f" {face.mana_cost}"
            lines.append(header)
            lines.append(face.type_line)
            if face.oracle_text:
                lines.append(face.oracle_text)
            if face.power and face.toughness:
                lines.append(f"Power/Toughness: {face.power}/{face.toughness}")

    lines.append(f"**Scryfall ID:** {card.id}")
    return "\n".join(lines)


def format_card_list(cards: list[ScryfallCard]) -> str:
    """Numbered full-card listing separated by rules."""
    return "".join(
        f"{index}. {format_card(card)}\n\n---\n\n"
        for index, card in enumerate(cards, 1)
    )


def format_card_summary(card: ScryfallCard, show_set_name: bool = True) -> str:
    """Two-line summary used by set, type and text listings."""
    summary = f"**{card.name}** {card.mana_cost}".rstrip()
    if show_set_name:
        details = [card.type_line and f"*{card.type_line}*", card.set_name, card.rarity]
        if card.power and card.toughness:
            details.append(f"{card.power}/{card.toughness}")
    else:
        details = [f"*{card.type_line}*", card.rarity, f"#{card.set_code}"]
    if card.prices.get("usd"):
        details.append(f"${card.prices['usd']}")
    return summary + "\n   " + " • ".join(d for d in details if d)


def text_snippet(text: str, search_term: str, context_length: int = SNIPPET_CONTEXT) -> str:
    """Extract text around the first case-insensitive match of search_term.

    Args:
        text: Text to excerpt.
        search_term: Term to center the excerpt on.
        context_length: Total characters of context around the match.

    Returns:
        Excerpt with "..." marking truncated ends. Without a match, the
        start of the text is returned.
    """
    index = text.lower().find(search_term.lower())
    if index == -1:
        return text[:context_length] + "..."

    start = max(0, index - context_length // 2)
    end = min(len(text), index + len(search_term) + context_length // 2)

    snippet = text[start:end]
    if start > 0:
        snippet = "..." + snippet
    if end < len(text):
        snippet = snippet + "..."
    return snippet
