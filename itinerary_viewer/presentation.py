"""Presentation helpers: icons, badge colours, map links and travel tips.

Everything here is keyword heuristics over the free text of a record;
none of it affects parsing or filtering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple
from urllib.parse import quote

from .config import MapsConfig

PLACEHOLDER = "-"

TRAVEL_TIPS: Tuple[str, ...] = (
    "El transporte público es muy eficiente en Budapest, considera comprar "
    "un pase para varios días",
    "No olvides visitar alguno de los famosos baños termales de la ciudad",
    "Prueba el Goulash (sopa tradicional) y los langos (pan frito)",
    "La moneda local es el Florín Húngaro (HUF), no el Euro",
    "Lleva calzado cómodo, hay muchas zonas empedradas",
)


class ActivityCategory(Enum):
    """Kind of activity, with the icon shown next to it."""

    WALK = "🚲"
    MEAL = "🍽️"
    COFFEE = "☕"
    OTHER = "📅"

    @property
    def icon(self) -> str:
        return self.value


class TransportStyle(Enum):
    """Badge colours (background, text) for a transport suggestion."""

    WALKING = ("#dcfce7", "#166534")
    TAXI = ("#fef9c3", "#854d0e")
    PUBLIC = ("#dbeafe", "#1e40af")
    BIKE = ("#f3e8ff", "#6b21a8")
    OTHER = ("#f3f4f6", "#1f2937")

    @property
    def background(self) -> str:
        return self.value[0]

    @property
    def foreground(self) -> str:
        return self.value[1]


_ACTIVITY_KEYWORDS: Tuple[Tuple[ActivityCategory, Tuple[str, ...]], ...] = (
    (ActivityCategory.WALK, ("Paseo", "barrio")),
    (ActivityCategory.MEAL, ("Almuerzo", "Cena")),
    (ActivityCategory.COFFEE, ("Café", "Merienda")),
)

_TRANSPORT_KEYWORDS: Tuple[Tuple[TransportStyle, Tuple[str, ...]], ...] = (
    (TransportStyle.WALKING, ("pie",)),
    (TransportStyle.TAXI, ("Taxi",)),
    (TransportStyle.PUBLIC, ("Metro", "Tranvía", "Autobús")),
    (TransportStyle.BIKE, ("Bici",)),
)


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def activity_category(activity: str) -> ActivityCategory:
    """Pick the category of an activity; first matching rule wins."""
    for category, keywords in _ACTIVITY_KEYWORDS:
        if _contains_any(activity, keywords):
            return category
    return ActivityCategory.OTHER


def transport_style(transport: str) -> TransportStyle:
    """Pick the badge style of a transport suggestion (case-sensitive)."""
    for style, keywords in _TRANSPORT_KEYWORDS:
        if _contains_any(transport, keywords):
            return style
    return TransportStyle.OTHER


def has_value(text: str) -> bool:
    """True unless ``text`` is empty or the "-" placeholder."""
    return bool(text) and text != PLACEHOLDER


def map_search_url(place: str, config: MapsConfig) -> Optional[str]:
    """External map search URL for a place, or None if it has no location.

    Places that are empty, listed in ``config.excluded_places`` or
    containing one of ``config.excluded_fragments`` (flights, mostly)
    get no link.
    """
    if not place or place in config.excluded_places:
        return None
    if _contains_any(place, config.excluded_fragments):
        return None

    query = f"{place} {config.city_suffix}" if config.city_suffix else place
    return config.search_url.format(query=quote(query, safe="-_.!~*'()"))


@dataclass(frozen=True)
class UsefulLink:
    label: str
    url: str
    icon: str


def useful_links(config: MapsConfig) -> Tuple[UsefulLink, ...]:
    return (
        UsefulLink(
            label=f"Mapa turístico de {config.city_suffix}".strip(),
            url=config.tourist_map_url,
            icon="🗺️",
        ),
        UsefulLink(
            label="Estaciones de transporte",
            url=config.transport_search_url,
            icon="📍",
        ),
    )
