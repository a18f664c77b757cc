"""Offline location lookups for picking a picnic spot.

There is no live geocoding: searches run against a small catalogue of
well-known parks and addresses are resolved through a city/landmark table.
Anything unrecognised resolves to the geographic centre of the contiguous US
so callers always receive coordinates.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple
from urllib.parse import quote

from plancraft.schemas import LocationData

_PARK_CATALOGUE: Tuple[LocationData, ...] = (
    LocationData(lat=40.7829, lng=-73.9654, address="Central Park, New York, NY, USA", name="Central Park", place_id="central-park"),
    LocationData(lat=37.7749, lng=-122.4194, address="Golden Gate Park, San Francisco, CA, USA", name="Golden Gate Park", place_id="golden-gate-park"),
    LocationData(lat=34.0522, lng=-118.2437, address="Griffith Park, Los Angeles, CA, USA", name="Griffith Park", place_id="griffith-park"),
    LocationData(lat=41.8781, lng=-87.6298, address="Grant Park, Chicago, IL, USA", name="Grant Park", place_id="grant-park"),
    LocationData(lat=25.7617, lng=-80.1918, address="Bayfront Park, Miami, FL, USA", name="Bayfront Park", place_id="bayfront-park"),
    LocationData(lat=51.5074, lng=-0.1278, address="Hyde Park, London, UK", name="Hyde Park", place_id="hyde-park"),
    LocationData(lat=48.8566, lng=2.3522, address="Luxembourg Gardens, Paris, France", name="Luxembourg Gardens", place_id="luxembourg-gardens"),
    LocationData(lat=52.5200, lng=13.4050, address="Tiergarten, Berlin, Germany", name="Tiergarten", place_id="tiergarten"),
    LocationData(lat=35.6762, lng=139.6503, address="Ueno Park, Tokyo, Japan", name="Ueno Park", place_id="ueno-park"),
    LocationData(lat=-33.8688, lng=151.2093, address="Royal Botanic Gardens, Sydney, Australia", name="Royal Botanic Gardens", place_id="royal-botanic-gardens-sydney"),
)

# Order matters: the first key contained in the address wins.
_KNOWN_PLACES: Dict[str, Tuple[float, float, Optional[str]]] = {
    "new york": (40.7128, -74.0060, "Central Park"),
    "los angeles": (34.0522, -118.2437, "Griffith Park"),
    "chicago": (41.8781, -87.6298, "Grant Park"),
    "houston": (29.7604, -95.3698, "Hermann Park"),
    "phoenix": (33.4484, -112.0740, "Papago Park"),
    "philadelphia": (39.9526, -75.1652, "Fairmount Park"),
    "san antonio": (29.4241, -98.4936, "Brackenridge Park"),
    "san diego": (32.7157, -117.1611, "Balboa Park"),
    "dallas": (32.7767, -96.7970, "White Rock Lake Park"),
    "san francisco": (37.7749, -122.4194, "Golden Gate Park"),
    "seattle": (47.6062, -122.3321, "Discovery Park"),
    "denver": (39.7392, -104.9903, "City Park"),
    "washington": (38.9072, -77.0369, "National Mall"),
    "boston": (42.3601, -71.0589, "Boston Common"),
    "miami": (25.7617, -80.1918, "Bayfront Park"),
    "atlanta": (33.7490, -84.3880, "Piedmont Park"),
    "london": (51.5074, -0.1278, "Hyde Park"),
    "paris": (48.8566, 2.3522, "Luxembourg Gardens"),
    "berlin": (52.5200, 13.4050, "Tiergarten"),
    "tokyo": (35.6762, 139.6503, "Ueno Park"),
    "sydney": (-33.8688, 151.2093, "Royal Botanic Gardens"),
    "toronto": (43.6532, -79.3832, "High Park"),
    "vancouver": (49.2827, -123.1207, "Stanley Park"),
    "melbourne": (-37.8136, 144.9631, "Royal Botanic Gardens"),
    "central park": (40.7829, -73.9654, "Central Park"),
    "golden gate park": (37.7749, -122.4194, "Golden Gate Park"),
    "hyde park": (51.5074, -0.1278, "Hyde Park"),
    "stanley park": (49.2827, -123.1207, "Stanley Park"),
    "balboa park": (32.7157, -117.1611, "Balboa Park"),
}

DEFAULT_COORDINATES: Tuple[float, float] = (39.8283, -98.5795)


def search_places(query: str, *, limit: int = 5) -> List[LocationData]:
    """Return catalogue parks matching ``query``.

    An empty or unmatched query returns the first ``limit`` parks so the
    picker is never blank.
    """

    needle = query.strip().lower()
    if needle:
        matches = [
            park
            for park in _PARK_CATALOGUE
            if needle in (park.name or "").lower()
            or needle in park.address.lower()
            or (park.name or "").lower().split(" ")[0] in needle
        ]
        if matches:
            return matches
    return list(_PARK_CATALOGUE[:limit])


def geocode_address(address: str) -> LocationData:
    """Resolve a free-text address against the known-places table."""

    lowered = address.lower()
    for key, (lat, lng, name) in _KNOWN_PLACES.items():
        if key in lowered:
            return LocationData(lat=lat, lng=lng, address=address, name=name)
    lat, lng = DEFAULT_COORDINATES
    return LocationData(lat=lat, lng=lng, address=address)


def current_location(lat: float, lng: float) -> LocationData:
    """Wrap a device-reported coordinate as a location."""

    return LocationData(lat=lat, lng=lng, address=f"{lat:.4f}, {lng:.4f}")


def map_url(location: LocationData) -> str:
    query = quote(location.display_name)
    return f"https://www.google.com/maps/search/?api=1&query={query}"


def directions_url(location: LocationData) -> str:
    query = quote(location.display_name)
    return f"https://www.google.com/maps/dir/?api=1&destination={query}"


__all__ = [
    "DEFAULT_COORDINATES",
    "current_location",
    "directions_url",
    "geocode_address",
    "map_url",
    "search_places",
]
