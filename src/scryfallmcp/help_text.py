"""Scryfall search syntax reference and translation help text."""

from typing import Optional

from scryfallmcp.mappings import MAPPING_TITLES
from scryfallmcp.translator import QueryTranslator

SEARCH_HELP_SECTIONS = {
    "basics": """# Scryfall Search Basics

## Basic Syntax
- Search for card names: `Lightning Bolt`
- Use quotes for phrases: `"Serra Angel"`
- Exact names with a bang: `!"Lightning Bolt"`
- Searches are case-insensitive

## Boolean Logic
- **AND** (default): `red creature` (red AND creature)
- **OR**: `red or blue`
- **NOT** / **-**: `-red` or `not red`
- Parentheses for grouping: `(red or blue) creature`""",

    "keywords": """# Search Keywords

## Card Properties
- **name** or **n**: `name:bolt`
- **oracle** or **o**: `o:flying` (rules text contains "flying")
- **type** or **t**: `t:creature`, `type:legendary`
- **mana** or **m**: `m:2WU` (mana cost)
- **cmc** or **mv**: `cmc:3` (mana value)
- **power** or **pow**: `pow>=4`
- **toughness** or **tou**: `tou<=2`
- **loyalty**: `loyalty:4` (planeswalker loyalty)""",

    "operators": """# Comparison Operators

Numeric fields (cmc, pow, tou, loyalty, usd, eur, tix, year) accept:
- **=** or **:** equals: `cmc=3`
- **<** less than: `cmc<3`
- **<=** at most: `cmc<=3`
- **>** greater than: `cmc>3`
- **>=** at least: `cmc>=3`
- **!=** not equal: `cmc!=3`

Fields can also be compared to each other: `pow>tou`.
Use `~` inside oracle text to stand for the card's own name: `o:"when ~ enters"`.""",

    "colors": """# Color Search

## Color Keywords
- **c** or **color**: `c:red` or `c:r`
- Combinations: `c:wr` (white and red), `c:wubrg` (all five)
- **id** or **identity**: `id:wu` (white-blue color identity)
- Guild, shard and wedge names work too: `c:azorius`, `id:esper`

## Color Comparisons
- **Exactly**: `c=wu`
- **Including**: `c>=wu`
- **At most**: `c<=wu`
- **Colorless**: `c:c`
- **Multicolored**: `c:m`
- **Monocolored**: `c=1`""",

    "types": """# Type & Subtype Search

## Common Types
- **Creature**: `t:creature`
- **Instant**: `t:instant`
- **Sorcery**: `t:sorcery`
- **Artifact**: `t:artifact`
- **Enchantment**: `t:enchantment`
- **Planeswalker**: `t:planeswalker`
- **Land**: `t:land`

## Supertypes & Subtypes
- **Legendary**: `t:legendary`
- **Basic**: `t:basic`
- **Creature types**: `t:angel`, `t:dragon`, `t:human`
- **Equipment**: `t:equipment`

## Combinations
- Full type line phrase: `t:"legendary creature"`
- Any of several: `t:instant or t:sorcery`""",

    "sets": """# Set & Release Search

## Set Keywords
- **set**, **s** or **e**: `s:khm` (Kaldheim)
- **block**: `block:zendikar`
- **cn** or **number**: `cn:100` (collector number)

## Release Date
- **year**: `year:2023`, `year>=2020`
- **date**: `date>=2020-01-01`

## Printings
- **is:reprint**, **is:firstprint**, **is:promo**
- **st:expansion**, **st:core**, **st:masters** (set type)""",

    "formats": """# Format Legality

## Format Keywords
- **legal** or **f**: `legal:modern`
- **banned**: `banned:legacy`
- **restricted**: `restricted:vintage`

## Format Names
`standard`, `pioneer`, `modern`, `legacy`, `vintage`, `commander`,
`pauper`, `historic`, `explorer`, `alchemy`, `brawl`, `oathbreaker`""",

    "prices": """# Price Search

## Price Keywords
- **usd**: `usd<1`, `usd>=10`
- **eur**: `eur<=5`
- **tix**: `tix>=1` (MTGO tickets)

## Examples
- Budget cards: `usd<1`
- Expensive cards: `usd>=100`
- Price range: `usd>=5 usd<=20`""",

    "advanced": """# Advanced Search

## Card Properties
- **rarity** or **r**: `r:mythic`, `r>=rare`
- **artist** or **a**: `a:"Rebecca Guay"`
- **flavor** or **ft**: `ft:victory`
- **watermark** or **wm**: `wm:mirran`
- **frame**: `frame:2015`, **border**: `border:black`

## Card Shapes
- `is:split`, `is:flip`, `is:transform`, `is:meld`, `is:leveler`
- `is:spell`, `is:permanent`, `is:vanilla`, `is:commander`

## Printing Options
- `is:foil`, `is:nonfoil`, `is:promo`, `-is:variation`""",

    "examples": """# Search Examples

- `c:red t:creature` - red creatures
- `cmc<=3 legal:standard` - Standard-legal cards costing 3 or less
- `(t:instant or t:sorcery) c:blue cmc<=2` - cheap blue spells
- `t:creature pow>=4 tou>=4 cmc<=4` - efficient big creatures
- `legal:modern usd<5` - Modern cards under $5
- `legal:commander id:wubrg is:commander` - five-color commanders
- `s:khm r:mythic` - mythics from Kaldheim
- `o:"when ~ enters" t:creature` - creatures with enter triggers""",
}

_ALL_FOOTER = (
    "**Tip**: Combine multiple search terms for precise results. Use "
    "parentheses for complex logic; searches are case-insensitive."
)


def get_search_help(topic: str = "all") -> str:
    """Get help text for one search topic, or every topic for "all"."""
    if topic == "all":
        body = "\n\n".join(SEARCH_HELP_SECTIONS.values())
        return f"# Complete Scryfall Search Reference\n\n{body}\n\n---\n\n{_ALL_FOOTER}"

    section = SEARCH_HELP_SECTIONS.get(topic)
    if section is None:
        topics = ", ".join(SEARCH_HELP_SECTIONS)
        return f'**Error**: Unknown help topic "{topic}". Available topics: {topics}, all'
    return section


def _render_mapping_table(name: str, table) -> str:
    lines = [f"## {MAPPING_TITLES.get(name, name.title())}\n"]
    lines.extend(f'• **"{phrase}"** → `{fragment}`' for phrase, fragment in table.items())
    return "\n".join(lines) + "\n\n"


def get_translation_help(
    translator: QueryTranslator,
    query: Optional[str] = None,
    category: str = "all",
) -> str:
    """Explain how natural-language phrases translate.

    Args:
        translator: Translator whose tables are shown.
        query: Optional phrase to translate and find related mappings for.
        category: Mapping category to list (text, colors, types, formats,
            costs) or "all".

    Returns:
        Markdown help text.
    """
    result = "# Natural Language Translation Help\n\n"

    if query:
        result += f'**Your Query:** "{query}"\n'
        result += f'**Translated To:** "{translator.translate(query)}"\n\n'

        suggestions = translator.suggest_mappings(query)
        if suggestions:
            result += "**Related Mappings:**\n"
            result += "".join(f"• {s}\n" for s in suggestions)
            result += "\n"

    tables = translator.categories
    if category == "all":
        for name, table in tables.items():
            result += _render_mapping_table(name, table)
    elif category in tables:
        result += _render_mapping_table(category, tables[category])
    else:
        result += f'**Unknown category "{category}".** Available: {", ".join(tables)}, all\n\n'

    result += "---\n\n"
    result += "**Tips:**\n"
    result += "• Use `scryfall_natural_search` for automatic translation\n"
    result += '• Combine terms: "red creatures with flying" → `c:r t:creature with o:"flying"`\n'
    result += "• Use `show_translation: true` to see how your query was translated\n"
    result += "• `scryfall_search_cards` falls back to translation when a raw query fails\n"
    return result
