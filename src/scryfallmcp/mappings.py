"""Natural-language to Scryfall syntax mapping tables.

Each table maps a lowercase phrase to a Scryfall query fragment. Tables are
applied in MAPPING_CATEGORIES order and each table in insertion order, so
the ordering of entries here is part of the translation behavior.
"""

from types import MappingProxyType


# =========================================================================
# TEXT & ABILITIES
# =========================================================================
TEXT_MAPPINGS = MappingProxyType({
    # Enters the battlefield
    "enters the battlefield": 'o:"enters the battlefield" or o:"enters tapped" or o:"when ~ enters"',
    "etb": 'o:"enters the battlefield" or o:"when ~ enters"',
    "comes into play": 'o:"enters the battlefield"',
    "enters tapped": 'o:"enters tapped"',

    # Leaves the battlefield
    "leaves the battlefield": 'o:"leaves the battlefield" or o:"when ~ leaves" or o:"dies"',
    "ltb": 'o:"leaves the battlefield" or o:"when ~ leaves"',
    "dies": 'o:"dies" or o:"when ~ dies"',
    "is put into a graveyard": 'o:"is put into a graveyard"',

    # Sacrifice
    "sacrifice": 'o:"sacrifice" or o:"sac a" or o:"sac an"',
    "sac": 'o:"sacrifice" or o:"sac"',
    "sacrificial": 'o:"sacrifice"',

    # Removal
    "destroy": 'o:"destroy" or o:"destroys"',
    "removal": 'o:"destroy" or o:"exile" or o:"return" or o:"bounce"',
    "exile": 'o:"exile" or o:"exiled"',
    "remove from the game": 'o:"exile"',
    "banish": 'o:"exile"',

    # Card draw
    "draw cards": 'o:"draw" and (o:"card" or o:"cards")',
    "card draw": 'o:"draw" and (o:"card" or o:"cards")',
    "draw a card": 'o:"draw a card"',
    "draws cards": 'o:"draw" and o:"card"',

    # Discard and mill
    "discard": 'o:"discard"',
    "discards": 'o:"discard"',
    "mill": 'o:"mill" or o:"put" and o:"library" and o:"graveyard"',

    # Combat
    "can't be blocked": 'o:"can\'t be blocked" or o:"unblockable"',
    "unblockable": 'o:"can\'t be blocked" or o:"unblockable"',
    "menace": 'o:"menace"',
    "trample": 'o:"trample"',
    "flying": 'o:"flying"',
    "first strike": 'o:"first strike"',
    "double strike": 'o:"double strike"',
    "deathtouch": 'o:"deathtouch"',
    "lifelink": 'o:"lifelink"',
    "vigilance": 'o:"vigilance"',
    "haste": 'o:"haste"',
    "reach": 'o:"reach"',
    "defender": 'o:"defender"',

    # Protection
    "protection": 'o:"protection"',
    "hexproof": 'o:"hexproof"',
    "shroud": 'o:"shroud"',
    "ward": 'o:"ward"',
    "indestructible": 'o:"indestructible"',

    # Mana
    "mana dork": 't:creature and (o:"add" and o:"mana")',
    "ramp": 'o:"search" and o:"land" or (o:"add" and o:"mana")',
    "mana acceleration": 'o:"add" and o:"mana"',
    "fixes mana": 'o:"add" and o:"any color"',

    # Counterspells
    "counters": 'o:"counter" and (o:"spell" or o:"ability")',
    "counterspell": 'o:"counter" and o:"spell"',
    "counterspells": 'o:"counter" and o:"spell"',
    "negate": 'o:"counter" and (o:"noncreature" or o:"instant" or o:"sorcery")',

    # +1/+1 counters
    "+1/+1 counters": 'o:"+1/+1 counter"',
    "plus one counters": 'o:"+1/+1 counter"',
    "growth counters": 'o:"+1/+1 counter"',

    # Tokens
    "makes tokens": 'o:"create" and o:"token"',
    "token generation": 'o:"create" and o:"token"',
    "creates tokens": 'o:"create" and o:"token"',

    # Graveyard
    "graveyard": 'o:"graveyard"',
    "from your graveyard": 'o:"from your graveyard"',
    "reanimation": 'o:"return" and o:"graveyard" and (o:"battlefield" or o:"hand")',
    "recursion": 'o:"return" and o:"graveyard"',

    # Cost reduction
    "cost reduction": 'o:"cost" and (o:"less" or o:"reduced")',
    "costs less": 'o:"costs" and o:"less"',
    "free spell": 'o:"without paying" and o:"mana cost"',

    # Tutors
    "tutor": 'o:"search" and o:"library"',
    "search": 'o:"search" and o:"library"',
    "find a card": 'o:"search" and o:"library"',

    # Creature size
    "big creatures": "t:creature and (pow>=4 or tou>=4)",
    "small creatures": "t:creature and pow<=2 and tou<=2",
    "efficient creatures": "t:creature",
    "aggressive creatures": 't:creature and (o:"haste" or o:"trample" or pow>=3)',

    # Planeswalkers
    "plus ability": 't:planeswalker and o:"+"',
    "minus ability": 't:planeswalker and o:"-"',
    "ultimate": 't:planeswalker and (o:"ultimate" or o:"-" and loyalty>=6)',

    # Artifacts
    "artifact synergy": 'o:"artifact" and not t:artifact',
    "artifact matters": 'o:"artifact" and not t:artifact',
    "equipment": "t:equipment",
    "vehicles": "t:vehicle",

    # Lands
    "land destruction": 'o:"destroy" and o:"land"',
    "landfall": 'o:"landfall"',
    "land ramp": 'o:"search" and o:"land" and o:"battlefield"',
    "fetch lands": 't:land and o:"search" and o:"library"',

    # Win conditions
    "alternate win": 'o:"you win the game"',
    "win condition": 'o:"you win the game" or o:"loses the game"',
    "combo piece": 'o:"infinite" or o:"win the game"',
})

# =========================================================================
# COLORS
# =========================================================================
COLOR_MAPPINGS = MappingProxyType({
    "white": "c:w",
    "blue": "c:u",
    "black": "c:b",
    "red": "c:r",
    "green": "c:g",
    "colorless": "c:c",
    "multicolor": "c:m",
    "monocolor": "c=1",
    "two color": "c=2",
    "three color": "c=3",
    "four color": "c=4",
    "five color": "c=5",
    "azorius": "c:wu",
    "dimir": "c:ub",
    "rakdos": "c:br",
    "gruul": "c:rg",
    "selesnya": "c:gw",
    "orzhov": "c:wb",
    "izzet": "c:ur",
    "golgari": "c:bg",
    "boros": "c:rw",
    "simic": "c:gu",
})

# =========================================================================
# CARD TYPES
# =========================================================================
TYPE_MAPPINGS = MappingProxyType({
    "creatures": "t:creature",
    "instants": "t:instant",
    "sorceries": "t:sorcery",
    "artifacts": "t:artifact",
    "enchantments": "t:enchantment",
    "planeswalkers": "t:planeswalker",
    "lands": "t:land",
    "legendary": "t:legendary",
    "basic lands": 't:"basic land"',
    "nonbasic lands": "t:land -t:basic",
    "spells": "t:instant or t:sorcery",
    "permanents": "not t:instant and not t:sorcery",
    "angels": "t:angel",
    "demons": "t:demon",
    "dragons": "t:dragon",
    "elves": "t:elf",
    "goblins": "t:goblin",
    "humans": "t:human",
    "zombies": "t:zombie",
    "vampires": "t:vampire",
    "spirits": "t:spirit",
    "beasts": "t:beast",
    "equipment": "t:equipment",
    "auras": "t:aura",
    "vehicles": "t:vehicle",
})

# =========================================================================
# FORMATS
# =========================================================================
FORMAT_MAPPINGS = MappingProxyType({
    "standard legal": "legal:standard",
    "modern legal": "legal:modern",
    "legacy legal": "legal:legacy",
    "vintage legal": "legal:vintage",
    "commander legal": "legal:commander",
    "pioneer legal": "legal:pioneer",
    "pauper legal": "legal:pauper",
    "historic legal": "legal:historic",
    "banned in standard": "banned:standard",
    "banned in modern": "banned:modern",
    "restricted in vintage": "restricted:vintage",
})

# =========================================================================
# COSTS & PRICES
# =========================================================================
COST_MAPPINGS = MappingProxyType({
    "cheap": "cmc<=2",
    "low cost": "cmc<=3",
    "expensive": "cmc>=6",
    "high cost": "cmc>=5",
    "free": "cmc=0",
    "one mana": "cmc=1",
    "two mana": "cmc=2",
    "three mana": "cmc=3",
    "four mana": "cmc=4",
    "five mana": "cmc=5",
    "six mana": "cmc=6",
    "seven mana": "cmc=7",
    "budget": "usd<=5",
    "budget friendly": "usd<=10",
    "expensive cards": "usd>=50",
    "under a dollar": "usd<1",
})

# Application order. Keys double as the category names accepted by the
# translation help tool.
MAPPING_CATEGORIES = MappingProxyType({
    "text": TEXT_MAPPINGS,
    "colors": COLOR_MAPPINGS,
    "types": TYPE_MAPPINGS,
    "formats": FORMAT_MAPPINGS,
    "costs": COST_MAPPINGS,
})

MAPPING_TITLES = MappingProxyType({
    "text": "Text & Ability Mappings",
    "colors": "Color Mappings",
    "types": "Type Mappings",
    "formats": "Format Mappings",
    "costs": "Cost & Price Mappings",
})

# Display-only color codes for colors, guilds, shards and wedges
COLOR_CODES = MappingProxyType({
    "white": "w", "blue": "u", "black": "b", "red": "r", "green": "g",
    "azorius": "wu", "dimir": "ub", "rakdos": "br", "gruul": "rg", "selesnya": "gw",
    "orzhov": "wb", "izzet": "ur", "golgari": "bg", "boros": "rw", "simic": "gu",
    "bant": "gwu", "esper": "wub", "grixis": "ubr", "jund": "brg", "naya": "rgw",
    "abzan": "wbg", "jeskai": "urw", "sultai": "bgu", "mardu": "rwb", "temur": "gur",
})
