"""Curated MTG terminology used by the knowledge base.

Term lists are grouped the way players talk about them (card types, keyword
abilities, color identities, formats, deck archetypes, zones, actions and
slang). Descriptions and examples cover the common terms; anything else in
a category falls back to that category's generic description.
"""

from types import MappingProxyType


# =========================================================================
# CARD TYPES
# =========================================================================
CARD_TYPES = (
    "creature", "instant", "sorcery", "artifact", "enchantment",
    "planeswalker", "land", "tribal",
)

SUPERTYPES = ("basic", "legendary", "snow", "world")

SUBTYPES = MappingProxyType({
    "artifact": ("equipment", "vehicle", "fortification", "contraption"),
    "creature": (
        # Races
        "human", "elf", "goblin", "angel", "demon", "dragon", "zombie", "vampire",
        "spirit", "beast", "dwarf", "orc", "troll", "giant", "elemental", "construct",
        "golem", "horror", "illusion", "merfolk", "faerie", "kithkin", "kor", "vedalken",
        # Classes
        "warrior", "wizard", "knight", "soldier", "shaman", "rogue", "cleric", "archer",
        "berserker", "druid", "monk", "ninja", "pirate", "pilot", "assassin", "advisor",
        "artificer", "barbarian", "bard", "scout", "spellshaper", "minion",
    ),
    "land": ("plains", "island", "swamp", "mountain", "forest", "desert", "gate", "locus"),
    "enchantment": ("aura", "cartouche", "curse", "saga", "shrine"),
    "instant": ("adventure", "arcane", "trap"),
    "sorcery": ("adventure", "arcane", "lesson"),
})

# =========================================================================
# KEYWORD ABILITIES
# =========================================================================
EVERGREEN_KEYWORDS = (
    "flying", "first strike", "double strike", "deathtouch", "haste", "hexproof",
    "indestructible", "lifelink", "menace", "reach", "trample", "vigilance", "ward",
)

NON_EVERGREEN_KEYWORDS = (
    "flashback", "scry", "convoke", "delve", "cycling", "kicker", "morph", "suspend",
    "echo", "buyback", "madness", "threshold", "storm", "affinity", "dredge",
    "bloodthirst", "unleash", "evolve", "cipher", "bestow", "prowess", "dash",
    "exploit", "megamorph", "awaken", "surge", "skulk", "emerge", "escalate",
    "crew", "fabricate", "energy", "revolt", "improvise", "aftermath", "embalm",
    "eternalize", "afflict", "ascend", "jump-start", "mentor", "undergrowth",
    "surveil", "spectacle", "riot", "addendum", "afterlife", "amass", "escape",
    "companion", "mutate", "landfall", "party", "foretell",
    "boast", "disturb", "cleave", "training", "decayed", "daybound", "nightbound",
)

# =========================================================================
# COLOR IDENTITIES
# =========================================================================
SINGLE_COLORS = MappingProxyType({
    "white": "w", "blue": "u", "black": "b", "red": "r", "green": "g",
})

GUILDS = MappingProxyType({
    "azorius": "wu", "dimir": "ub", "rakdos": "br", "gruul": "rg", "selesnya": "gw",
    "orzhov": "wb", "izzet": "ur", "golgari": "bg", "boros": "rw", "simic": "gu",
})

SHARDS = MappingProxyType({
    "bant": "gwu", "esper": "wub", "grixis": "ubr", "jund": "brg", "naya": "rgw",
})

WEDGES = MappingProxyType({
    "abzan": "wbg", "jeskai": "urw", "sultai": "bgu", "mardu": "rwb", "temur": "gur",
})

# =========================================================================
# FORMATS
# =========================================================================
CONSTRUCTED_FORMATS = (
    "standard", "pioneer", "modern", "legacy", "vintage", "commander", "pauper", "historic",
)
LIMITED_FORMATS = ("draft", "sealed")
CASUAL_FORMATS = ("commander", "edh", "brawl", "oathbreaker", "60-card-casual")

# =========================================================================
# COMMON TERMS
# =========================================================================
DECK_ARCHETYPES = (
    "aggro", "control", "midrange", "combo", "tempo", "ramp", "mill", "burn",
    "tribal", "toolbox", "prison", "stax", "storm", "dredge", "reanimator",
    "delver", "voltron", "group hug", "pillowfort", "aristocrats",
)

CARD_ADVANTAGE_TERMS = (
    "card advantage", "tempo", "value", "2-for-1", "cantrip", "card selection",
    "card quality", "virtual card advantage", "board presence",
)

SLANG = (
    "etb", "ltb", "eot", "eob", "gy", "cmc", "p/t", "rtfc", "bolt", "doom blade",
    "wrath", "tutor", "ramp", "dork", "lord", "hate bear", "french vanilla",
)

GAME_ZONES = ("battlefield", "graveyard", "hand", "library", "exile", "stack", "command")

GAME_ACTIONS = (
    "cast", "play", "activate", "attack", "block", "tap", "untap", "destroy",
    "exile", "return", "search", "sacrifice", "discard", "draw", "mill",
    "scry", "surveil", "explore", "adapt", "monstrosity",
)

# =========================================================================
# DESCRIPTIONS & EXAMPLES
# =========================================================================
CARD_TYPE_INFO = MappingProxyType({
    "creature": "Permanents that can attack and block. They have power and toughness.",
    "instant": "Spells that can be cast any time you have priority, including during combat and on opponents' turns.",
    "sorcery": "Spells that can only be cast during your main phase while the stack is empty.",
    "artifact": "Permanents representing magical items. Many have activated abilities.",
    "enchantment": "Permanents representing ongoing magical effects.",
    "planeswalker": "Permanents representing powerful allies that use loyalty abilities.",
    "land": "Permanents that produce mana. You may play one land each turn.",
    "tribal": "Non-creature cards that carry creature types so they count for tribal effects.",
})

CARD_TYPE_EXAMPLES = MappingProxyType({
    "creature": ("Tarmogoyf", "Snapcaster Mage", "Llanowar Elves"),
    "instant": ("Lightning Bolt", "Counterspell", "Path to Exile"),
    "sorcery": ("Wrath of God", "Demonic Tutor", "Time Walk"),
    "artifact": ("Sol Ring", "Sword of Fire and Ice", "Mox Ruby"),
    "enchantment": ("Rhystic Study", "Smothering Tithe", "Necropotence"),
    "planeswalker": ("Jace, the Mind Sculptor", "Liliana of the Veil", "Chandra, Torch of Defiance"),
    "land": ("Polluted Delta", "Steam Vents", "Urza's Saga"),
    "tribal": ("Bitterblossom", "Tarfire", "Eldrazi Conscription"),
})

KEYWORD_INFO = MappingProxyType({
    "flying": "This creature can only be blocked by creatures with flying or reach.",
    "trample": "Excess combat damage beyond lethal to blockers is dealt to the player or planeswalker it's attacking.",
    "deathtouch": "Any amount of damage this deals to a creature is enough to destroy it.",
    "lifelink": "Damage dealt by this source also causes its controller to gain that much life.",
    "haste": "This creature can attack and use tap abilities the turn it comes under your control.",
    "vigilance": "Attacking doesn't cause this creature to tap.",
    "first strike": "This creature deals combat damage before creatures without first strike.",
    "double strike": "This creature deals both first-strike and regular combat damage.",
    "hexproof": "This permanent can't be the target of spells or abilities your opponents control.",
    "indestructible": "This permanent can't be destroyed by damage or by effects that say \"destroy\".",
    "menace": "This creature can't be blocked except by two or more creatures.",
    "reach": "This creature can block creatures with flying.",
    "ward": "Whenever this becomes the target of a spell or ability an opponent controls, counter it unless that player pays the ward cost.",
    "flashback": "You may cast this card from your graveyard for its flashback cost, then exile it.",
    "scry": "Look at the top cards of your library, then put any of them on the bottom and the rest back in any order.",
    "cycling": "Pay the cycling cost and discard this card to draw a card.",
    "kicker": "You may pay an additional cost as you cast this spell for an extra effect.",
    "storm": "When you cast this spell, copy it for each spell cast before it this turn.",
    "dredge": "If you would draw a card, you may instead mill cards and return this card from your graveyard to your hand.",
    "prowess": "Whenever you cast a noncreature spell, this creature gets +1/+1 until end of turn.",
    "landfall": "Ability word for effects that trigger whenever a land enters under your control.",
})

KEYWORD_EXAMPLES = MappingProxyType({
    "flying": ("Serra Angel", "Delver of Secrets", "Dragon Hatchling"),
    "trample": ("Tarmogoyf", "Craterhoof Behemoth", "Ghalta, Primal Hunger"),
    "deathtouch": ("Vampire Nighthawk", "Deadly Recluse", "Thornweald Archer"),
    "lifelink": ("Vampire Nighthawk", "Baneslayer Angel", "Rhox Faithmender"),
    "haste": ("Goblin Guide", "Dragon Hatchling", "Questing Beast"),
    "vigilance": ("Serra Angel", "Baneslayer Angel", "Brimaz, King of Oreskos"),
    "hexproof": ("Slippery Bogle", "Carnage Tyrant", "Sigarda, Host of Herons"),
    "flashback": ("Deep Analysis", "Think Twice", "Faithless Looting"),
    "storm": ("Grapeshot", "Tendrils of Agony", "Brain Freeze"),
    "dredge": ("Golgari Grave-Troll", "Stinkweed Imp", "Life from the Loam"),
})

COLOR_INFO = MappingProxyType({
    "white": "The color of order, law and community. Small efficient creatures, lifegain and broad removal.",
    "blue": "The color of knowledge and control. Card draw, counterspells and tempo.",
    "black": "The color of ambition and sacrifice. Uses life as a resource and excels at removal and recursion.",
    "red": "The color of freedom and impulse. Aggressive, with direct damage and hasty creatures.",
    "green": "The color of nature and growth. The biggest creatures and mana acceleration.",
    "azorius": "White-blue guild focused on control, law and bureaucracy.",
    "dimir": "Blue-black guild of secrets, information and manipulation.",
    "rakdos": "Black-red guild of chaos and violent spectacle.",
    "gruul": "Red-green guild embracing wild nature and rejecting civilization.",
    "selesnya": "Green-white guild promoting community, growth and harmony.",
    "orzhov": "White-black guild of wealth, faith and drained life totals.",
    "izzet": "Blue-red guild of invention, spells-matter and reckless experiments.",
    "golgari": "Black-green guild of the life cycle, graveyards and recursion.",
    "boros": "Red-white guild of zealous armies and aggressive combat.",
    "simic": "Green-blue guild of adaptation, +1/+1 counters and card flow.",
})

COLOR_EXAMPLES = MappingProxyType({
    "white": ("Wrath of God", "Swords to Plowshares", "Serra Angel"),
    "blue": ("Counterspell", "Ancestral Recall", "Jace, the Mind Sculptor"),
    "black": ("Dark Ritual", "Necropotence", "Liliana of the Veil"),
    "red": ("Lightning Bolt", "Goblin Guide", "Chandra, Torch of Defiance"),
    "green": ("Birds of Paradise", "Tarmogoyf", "Green Sun's Zenith"),
    "azorius": ("Supreme Verdict", "Sphinx's Revelation", "Teferi, Hero of Dominaria"),
    "dimir": ("Baleful Strix", "Thief of Sanity", "Fallen Shinobi"),
    "rakdos": ("Kolaghan's Command", "Bloodtithe Harvester", "Terminate"),
    "gruul": ("Bloodbraid Elf", "Questing Beast", "Domri Rade"),
    "selesnya": ("Trostani, Selesnya's Voice", "Knight of Autumn", "Collected Company"),
})

FORMAT_INFO = MappingProxyType({
    "standard": "Rotating format using roughly the last few years of sets.",
    "pioneer": "Non-rotating format using sets from Return to Ravnica forward.",
    "modern": "Non-rotating format using sets from 8th Edition and Mirrodin forward.",
    "legacy": "Eternal format allowing all cards except those on its banned list.",
    "vintage": "Eternal format allowing nearly all cards, with some restricted to one copy.",
    "commander": "100-card singleton multiplayer format led by a legendary commander.",
    "edh": "Elder Dragon Highlander, the original name for Commander.",
    "pauper": "Format using only cards printed at common rarity.",
    "historic": "MTG Arena non-rotating format built from Arena card pools.",
    "draft": "Limited format where players pick cards from passed booster packs.",
    "sealed": "Limited format where players build from a fixed pool of opened packs.",
    "brawl": "Commander variant with smaller decks and a rotating card pool.",
    "oathbreaker": "Multiplayer format led by a planeswalker and a signature spell.",
})

FORMAT_EXAMPLES = MappingProxyType({
    "standard": ("Rotating card pool", "Balanced power level", "FNM format"),
    "modern": ("Lightning Bolt legal", "High power level", "Large card pool"),
    "legacy": ("Force of Will legal", "Very high power", "Eternal format"),
    "vintage": ("Black Lotus restricted", "Highest power level", "Eternal format"),
    "commander": ("100 cards", "Singleton", "Multiplayer focused"),
    "pauper": ("Commons only", "Budget friendly", "Online and paper"),
})

DECK_ARCHETYPE_INFO = MappingProxyType({
    "aggro": "Fast, aggressive strategy aiming to win quickly with efficient threats.",
    "control": "Reactive strategy using counterspells and removal to win the long game.",
    "midrange": "Balanced approach with efficient threats and answers.",
    "combo": "Deck built around specific card interactions that win at once.",
    "tempo": "Cheap threats backed by disruption that keeps the opponent off balance.",
    "ramp": "Accelerates mana to cast expensive spells ahead of curve.",
    "mill": "Wins by emptying the opponent's library rather than dealing damage.",
    "burn": "Direct damage strategy aiming to deal the last 20 points with spells.",
    "tribal": "Deck built around a single creature type and its lords.",
    "storm": "Chains many cheap spells in one turn to power up a storm finisher.",
    "dredge": "Fills the graveyard with dredge cards and wins from it.",
    "reanimator": "Discards or mills huge creatures and returns them to the battlefield cheaply.",
})

DECK_ARCHETYPE_EXAMPLES = MappingProxyType({
    "aggro": ("Red Deck Wins", "White Weenie", "Affinity"),
    "control": ("Azorius Control", "Esper Control", "Counter-Top"),
    "combo": ("Storm", "Dredge", "Reanimator"),
    "midrange": ("Jund", "Abzan", "Sultai"),
    "burn": ("Mono-Red Burn", "Boros Burn"),
})
