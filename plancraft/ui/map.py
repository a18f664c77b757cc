"""Map view of the picnic spot and nearby catalogue parks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import pydeck as pdk
import streamlit as st

from plancraft.core.locations import directions_url, map_url, search_places
from plancraft.schemas import LocationData
from plancraft.ui.picnic import PICNIC_LOCATION_KEY

_SPOT_LAYER_ID = "picnic-spot"
_SPOT_COLOR: Tuple[int, int, int, int] = (34, 197, 94, 230)
_PARK_COLOR: Tuple[int, int, int, int] = (59, 130, 246, 160)


@dataclass
class _Marker:
    position: Tuple[float, float]
    title: str
    subtitle: str
    color: Tuple[int, int, int, int]
    radius: int

    def as_dict(self) -> Dict[str, object]:
        longitude, latitude = self.position
        return {
            "longitude": longitude,
            "latitude": latitude,
            "color": list(self.color),
            "radius": self.radius,
            "title": self.title,
            "subtitle": self.subtitle,
        }


def _collect_markers(spot: Optional[LocationData], parks: Sequence[LocationData]) -> List[_Marker]:
    markers: List[_Marker] = []
    if spot:
        markers.append(
            _Marker(
                position=(spot.lng, spot.lat),
                title=spot.display_name,
                subtitle="Picnic spot",
                color=_SPOT_COLOR,
                radius=160,
            )
        )
    for park in parks:
        if spot and (park.lat, park.lng) == (spot.lat, spot.lng):
            continue
        markers.append(
            _Marker(
                position=(park.lng, park.lat),
                title=park.display_name,
                subtitle=park.address,
                color=_PARK_COLOR,
                radius=90,
            )
        )
    return markers


def _compute_view_state(markers: Sequence[_Marker]) -> pdk.ViewState:
    if not markers:
        return pdk.ViewState(latitude=0, longitude=0, zoom=1)
    first = markers[0]
    if first.subtitle == "Picnic spot":
        return pdk.ViewState(latitude=first.position[1], longitude=first.position[0], zoom=13)
    avg_lat = sum(marker.position[1] for marker in markers) / len(markers)
    avg_lon = sum(marker.position[0] for marker in markers) / len(markers)
    return pdk.ViewState(latitude=avg_lat, longitude=avg_lon, zoom=1)


def _build_deck(markers: List[_Marker]) -> pdk.Deck:
    layers = []
    if markers:
        layers.append(
            pdk.Layer(
                "ScatterplotLayer",
                data=[marker.as_dict() for marker in markers],
                id=_SPOT_LAYER_ID,
                get_position="[longitude, latitude]",
                get_fill_color="color",
                get_line_color="color",
                get_radius="radius",
                radius_units="meters",
                radius_min_pixels=4,
                pickable=True,
                stroked=True,
            )
        )

    tooltip = {
        "html": "<b>{title}</b><br/>{subtitle}",
        "style": {"backgroundColor": "#111", "color": "white"},
    }
    return pdk.Deck(
        map_style="https://basemaps.cartocdn.com/gl/positron-gl-style/style.json",
        layers=layers,
        initial_view_state=_compute_view_state(markers),
        tooltip=tooltip,
    )


def render_map_tab(container) -> None:
    """Render the picnic location map tab."""

    spot: Optional[LocationData] = st.session_state.get(PICNIC_LOCATION_KEY)

    with container:
        st.subheader("Map")

        markers = _collect_markers(spot, search_places("", limit=10))
        if not spot:
            st.info("Plan a picnic to pin its location. Showing popular parks meanwhile.")

        st.pydeck_chart(_build_deck(markers), key="picnic_map")

        if spot:
            link_cols = st.columns(2)
            link_cols[0].link_button("Open in Maps", map_url(spot), use_container_width=True)
            link_cols[1].link_button("Directions", directions_url(spot), use_container_width=True)


__all__ = ["render_map_tab"]
