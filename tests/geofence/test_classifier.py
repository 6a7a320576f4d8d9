from __future__ import annotations

import pytest

from control_horari.core.constants import NO_LOCATION_LABEL
from control_horari.entries.model import Location
from control_horari.geofence.classifier import GeofenceClassifier, classify, haversine_distance


def test_point_on_reference_returns_site_name(site):
    point = Location(latitude=site.latitude, longitude=site.longitude)

    assert classify(point, site, 500) == "Obra Tarragona"


def test_point_600m_away_returns_coordinates(site):
    # 0.0054 deg of latitude is ~600 m
    point = Location(latitude=41.1243, longitude=1.2445)

    assert haversine_distance(point.latitude, point.longitude, site.latitude, site.longitude) == pytest.approx(600, abs=5)
    assert classify(point, site, 500) == "41.1243, 1.2445"


def test_point_inside_radius(site):
    point = Location(latitude=41.1219, longitude=1.2445)

    assert classify(point, site, 500) == site.name


def test_missing_point_returns_no_location_label(site):
    assert classify(None, site, 500) == NO_LOCATION_LABEL


def test_coordinates_are_rounded_to_four_decimals(site):
    point = Location(latitude=40.416775, longitude=-3.703790)

    assert classify(point, site, 500) == "40.4168, -3.7038"


def test_haversine_known_distance():
    # Barcelona to Tarragona, roughly 82 km
    d = haversine_distance(41.3874, 2.1686, 41.1189, 1.2445)

    assert 80_000 < d < 85_000


def test_classifier_uses_site_radius(site):
    classifier = GeofenceClassifier(site)

    assert classifier.classify(Location(latitude=41.1219, longitude=1.2445)) == site.name
    assert classifier.classify(Location(latitude=41.1243, longitude=1.2445)) == "41.1243, 1.2445"
    assert classifier.classify(None) == NO_LOCATION_LABEL
    assert classifier.distance_to(Location(latitude=site.latitude, longitude=site.longitude)) == 0
