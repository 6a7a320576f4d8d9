"""
Geofence classification.
Uses the Haversine formula to label a captured coordinate against the site.
"""
from __future__ import annotations

import math
from typing import Optional

from ..core.constants import COORDINATE_PRECISION, EARTH_RADIUS_M, NO_LOCATION_LABEL
from ..entries.model import Location
from .model import Site


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on Earth.

    Returns:
        Distance in meters
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def format_coordinates(point: Location) -> str:
    return f"{point.latitude:.{COORDINATE_PRECISION}f}, {point.longitude:.{COORDINATE_PRECISION}f}"


def classify(point: Optional[Location], reference: Site, radius_m: float) -> str:
    """
    Label a captured point.

    Returns:
        The site name when the point is within ``radius_m`` of it, the raw
        coordinates otherwise, or NO_LOCATION_LABEL when no fix was captured.
    """
    if point is None:
        return NO_LOCATION_LABEL

    distance = haversine_distance(point.latitude, point.longitude, reference.latitude, reference.longitude)
    if distance <= radius_m:
        return reference.name
    return format_coordinates(point)


class GeofenceClassifier:
    def __init__(self, site: Site):
        self._site = site

    @property
    def site(self) -> Site:
        return self._site

    def distance_to(self, point: Location) -> float:
        return haversine_distance(point.latitude, point.longitude, self._site.latitude, self._site.longitude)

    def classify(self, point: Optional[Location]) -> str:
        return classify(point, self._site, self._site.radius_m)
