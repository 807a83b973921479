"""Leaflet map view: click events in, workout markers out."""

from __future__ import annotations

import logging

from nicegui import ui

from constants import MAP_TILE_ATTRIBUTION, MAP_TILE_URL
from workouts import Coordinates


logger = logging.getLogger(__name__)


class LeafletMapView:
    """Thin wrapper over ui.leaflet exposing on_click and place_marker."""

    def __init__(self, leaflet):
        self.leaflet = leaflet
        self.markers = []

    @classmethod
    def factory(cls, container):
        """Return a create_view(center, zoom) callable that builds the map inside `container`."""

        def create_view(center, zoom):
            container.clear()
            with container:
                m = ui.leaflet(center=tuple(center), zoom=zoom).classes('w-full h-full')
                m.tile_layer(
                    url_template=MAP_TILE_URL,
                    options={'attribution': MAP_TILE_ATTRIBUTION, 'maxZoom': 19},
                )
            return cls(m)

        return create_view

    def on_click(self, callback) -> None:
        def _handle(e):
            latlng = e.args.get('latlng') or {}
            try:
                location = Coordinates(float(latlng['lat']), float(latlng['lng']))
            except (KeyError, TypeError, ValueError):
                logger.warning("Ignoring map click without coordinates: %s", e.args)
                return
            callback(location)

        self.leaflet.on('map-click', _handle)

    def place_marker(self, coordinates, popup_content, styling_options) -> None:
        marker = self.leaflet.marker(latlng=tuple(coordinates))
        marker.run_method('bindPopup', popup_content, styling_options)
        marker.run_method('openPopup')
        self.markers.append(marker)
