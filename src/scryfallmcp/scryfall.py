"""Scryfall REST API client with rate limiting and error decoding."""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from scryfallmcp.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Scryfall returns at most this many cards per search page
PAGE_SIZE = 175


class ScryfallAPIError(Exception):
    """Error response (or transport failure) from the Scryfall API."""

    def __init__(self, status: int, details: str, code: str = "") -> None:
        self.status = status
        self.details = details
        self.code = code
        super().__init__(f"Scryfall API Error ({status}): {details}")


@dataclass
class CardFace:
    """One face of a multi-faced card."""

    name: str
    type_line: str
    mana_cost: str = ""
    oracle_text: str = ""
    power: Optional[str] = None
    toughness: Optional[str] = None


@dataclass
class ScryfallCard:
    """Scryfall card data with the fields used for display."""

    id: str
    name: str
    type_line: str
    mana_cost: str = ""
    cmc: float = 0.0
    oracle_text: str = ""
    power: Optional[str] = None
    toughness: Optional[str] = None
    colors: list[str] = field(default_factory=list)
    color_identity: list[str] = field(default_factory=list)
    legalities: dict[str, str] = field(default_factory=dict)
    set_code: str = ""
    set_name: str = ""
    rarity: str = ""
    prices: dict[str, Optional[str]] = field(default_factory=dict)
    purchase_uris: dict[str, str] = field(default_factory=dict)
    faces: list[CardFace] = field(default_factory=list)

    @property
    def full_oracle_text(self) -> str:
        """Oracle text, falling back to the joined text of all faces."""
        if self.oracle_text:
            return self.oracle_text
        return "\n---\n".join(f.oracle_text for f in self.faces if f.oracle_text)


@dataclass
class SearchPage:
    """One page of /cards/search results."""

    total_cards: int
    has_more: bool
    cards: list[ScryfallCard]


def card_from_json(card: dict[str, Any]) -> ScryfallCard:
    """Convert raw Scryfall JSON dict to a ScryfallCard.

    Faces are kept for double-faced and split cards so each can be shown.
    """
    faces = [
        CardFace(
            name=face.get("name", ""),
            type_line=face.get("type_line", ""),
            mana_cost=face.get("mana_cost", ""),
            oracle_text=face.get("oracle_text", ""),
            power=face.get("power"),
            toughness=face.get("toughness"),
        )
        for face in card.get("card_faces", [])
    ]

    # Get mana cost from front face if not at top level
    mana_cost = card.get("mana_cost", "")
    if not mana_cost and faces:
        mana_cost = faces[0].mana_cost

    return ScryfallCard(
        id=card.get("id", ""),
        name=card.get("name", ""),
        type_line=card.get("type_line", ""),
        mana_cost=mana_cost,
        cmc=card.get("cmc", 0.0),
        oracle_text=card.get("oracle_text", ""),
        power=card.get("power"),
        toughness=card.get("toughness"),
        colors=card.get("colors", []),
        color_identity=card.get("color_identity", []),
        legalities=card.get("legalities", {}),
        set_code=card.get("set", ""),
        set_name=card.get("set_name", ""),
        rarity=card.get("rarity", ""),
        prices=card.get("prices", {}) or {},
        purchase_uris=card.get("purchase_uris", {}) or {},
        faces=faces,
    )


class ScryfallClient:
    """Thin client for the Scryfall card API.

    Every request is rate limited and non-OK responses are raised as
    ScryfallAPIError with the details Scryfall sends back.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the client.

        Args:
            settings: Settings to read the API base, user agent, timeout and
                rate limit from. Defaults to the global settings.
        """
        settings = settings or get_settings()
        self._base_url = settings.get("api_base").rstrip("/")
        self._timeout = settings.get("request_timeout")
        self._rate_limit_ms = settings.get("rate_limit_ms")
        self._last_api_call: float = 0.0

        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": settings.get("user_agent"),
            "Accept": "application/json",
        })

    def _rate_limit_api(self) -> None:
        """Enforce rate limiting for API calls."""
        now = time.time()
        elapsed_ms = (now - self._last_api_call) * 1000
        if elapsed_ms < self._rate_limit_ms:
            sleep_time = (self._rate_limit_ms - elapsed_ms) / 1000
            time.sleep(sleep_time)
        self._last_api_call = time.time()

    def _request(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET an endpoint and return the decoded JSON body."""
        self._rate_limit_api()

        url = f"{self._base_url}{endpoint}"
        logger.debug(f"GET {url} params={params}")

        try:
            response = self.session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning(f"API request failed for {endpoint}: {e}")
            raise ScryfallAPIError(0, str(e)) from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.ok:
            if isinstance(data, dict):
                raise ScryfallAPIError(
                    data.get("status", response.status_code),
                    data.get("details", response.reason),
                    data.get("code", ""),
                )
            raise ScryfallAPIError(response.status_code, response.reason or "Request failed")

        if data is None:
            raise ScryfallAPIError(response.status_code, "Response was not valid JSON")
        return data

    def search(
        self,
        query: str,
        unique: str = "cards",
        order: str = "name",
        direction: str = "auto",
        page: int = 1,
    ) -> SearchPage:
        """Run a full-text Scryfall search and return one page.

        Args:
            query: Query in Scryfall search syntax.
            unique: Strategy for omitting similar cards (cards, art, prints).
            order: Sort field.
            direction: Sort direction (auto, asc, desc).
            page: 1-based page number.

        Returns:
            SearchPage with the page's cards.
        """
        data = self._request("/cards/search", {
            "q": query,
            "unique": unique,
            "order": order,
            "dir": direction,
            "page": page,
        })
        return SearchPage(
            total_cards=data.get("total_cards", 0),
            has_more=data.get("has_more", False),
            cards=[card_from_json(c) for c in data.get("data", [])],
        )

    def search_all(self, query: str, limit: int, **kwargs: Any) -> list[ScryfallCard]:
        """Collect up to limit cards across result pages.

        Scryfall answers 404 when nothing matches, which yields an empty
        list. Any other failure on the first page is raised. A failure on a
        later page ends paging and keeps the cards gathered so far.
        """
        cards: list[ScryfallCard] = []
        total_pages = -(-limit // PAGE_SIZE)

        for page in range(1, total_pages + 1):
            try:
                result = self.search(query, page=page, **kwargs)
            except ScryfallAPIError as e:
                if page == 1 and e.status != 404:
                    raise
                logger.info(f"Stopping pagination at page {page}: {e}")
                break

            cards.extend(result.cards[:limit - len(cards)])
            if not result.has_more or len(cards) >= limit:
                break

        return cards

    def named(self, name: str, fuzzy: bool = False, set_code: Optional[str] = None) -> ScryfallCard:
        """Get a card by exact or fuzzy name."""
        params = {"fuzzy" if fuzzy else "exact": name}
        if set_code:
            params["set"] = set_code
        return card_from_json(self._request("/cards/named", params))

    def random(self, query: Optional[str] = None) -> ScryfallCard:
        """Get a random card, optionally restricted by a search query."""
        params = {"q": query} if query else None
        return card_from_json(self._request("/cards/random", params))

    def by_id(self, card_id: str) -> ScryfallCard:
        """Get a card by its Scryfall ID."""
        return card_from_json(self._request(f"/cards/{card_id}"))

    def autocomplete(self, query: str, include_extras: bool = False) -> list[str]:
        """Get up to 20 card name completions for a partial name."""
        params: dict[str, Any] = {"q": query}
        if include_extras:
            params["include_extras"] = "true"
        return self._request("/cards/autocomplete", params).get("data", [])
