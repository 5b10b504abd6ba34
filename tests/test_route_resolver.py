import asyncio
import math

import pytest
import requests

from locations.models import Point
from routing.geometry import haversine_m
from routing.models import EstimatedRoute, LineStyle, NetworkRoute
from routing.osrm_client import OSRMError
from routing.policy import RoutingPolicy
from routing.route_service import RouteResolver

MARKET = Point(index=0, lat=45.5364, lon=-73.6147, name="Jean-Talon Market")
CHURCH = Point(index=1, lat=45.5339, lon=-73.6113, name="Madonna della Difesa")


class MockOSRM:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def compute_route(self, coordinates):
        self.calls.append(coordinates)
        if self.error is not None:
            raise self.error
        return self.result


def test_haversine_one_degree_of_longitude_at_equator():
    assert haversine_m((0.0, 0.0), (0.0, 1.0)) == pytest.approx(6371000 * math.pi / 180)


def test_haversine_is_symmetric_and_zero_on_same_point():
    assert haversine_m(MARKET.coordinates, CHURCH.coordinates) == pytest.approx(
        haversine_m(CHURCH.coordinates, MARKET.coordinates)
    )
    assert haversine_m(MARKET.coordinates, MARKET.coordinates) == 0


def test_network_route_converts_units():
    osrm = MockOSRM(result={
        "coordinates": [(45.5364, -73.6147), (45.5339, -73.6113)],
        "distance": 1234.0,
        "duration": 890.0,
    })
    route = asyncio.run(RouteResolver(osrm=osrm).resolve(MARKET, CHURCH))

    assert isinstance(route, NetworkRoute)
    assert route.distance_km == pytest.approx(1.234)
    assert route.duration_min == 15
    assert route.polyline == ((45.5364, -73.6147), (45.5339, -73.6113))
    assert route.line_style is LineStyle.SOLID
    assert not route.is_estimate
    assert osrm.calls == [[MARKET.coordinates, CHURCH.coordinates]]


@pytest.mark.parametrize("error", [
    requests.ConnectionError("connection refused"),
    requests.Timeout("read timed out"),
    requests.HTTPError("502 Bad Gateway"),
    OSRMError("OSRM returned no routes"),
])
def test_failures_fall_back_to_estimate(error):
    """The estimate uses the widget's distance and a 4.3 km/h walking speed."""
    distance_m = haversine_m(MARKET.coordinates, CHURCH.coordinates)
    resolver = RouteResolver(osrm=MockOSRM(error=error), distance_fn=haversine_m)

    route = asyncio.run(resolver.resolve(MARKET, CHURCH))

    assert isinstance(route, EstimatedRoute)
    assert route.distance_km == pytest.approx(distance_m / 1000)
    assert route.duration_min == round(route.distance_km / 4.3 * 60)
    assert route.polyline == (MARKET.coordinates, CHURCH.coordinates)
    assert route.line_style is LineStyle.DASHED
    assert route.is_estimate


def test_estimate_uses_injected_distance_and_policy_speed():
    resolver = RouteResolver(
        osrm=MockOSRM(error=OSRMError("down")),
        policy=RoutingPolicy(walking_speed_kmh=6.0),
        distance_fn=lambda a, b: 3000.0,
    )
    route = resolver.estimate(MARKET, CHURCH)
    assert route.distance_km == 3.0
    assert route.duration_min == 30


def test_estimate_rounds_to_nearest_minute():
    # 1.0 km at 4.3 km/h = 13.95 min
    resolver = RouteResolver(osrm=MockOSRM(), distance_fn=lambda a, b: 1000.0)
    assert resolver.estimate(MARKET, CHURCH).duration_min == 14


def test_policy_validation():
    with pytest.raises(ValueError):
        RoutingPolicy(walking_speed_kmh=0).validate()
    with pytest.raises(ValueError):
        RoutingPolicy(line_opacity=1.5).validate()


@pytest.mark.parametrize("duration", [float("nan"), float("inf"), -60.0])
def test_bad_totals_in_http_payload_fall_back(duration):
    """A NaN/Infinity/negative duration from the service still yields an estimate."""
    from unittest.mock import MagicMock, patch
    from routing.osrm_client import OSRMClient

    response = MagicMock()
    response.json.return_value = {
        "code": "Ok",
        "routes": [{
            "geometry": {"coordinates": [[-73.6147, 45.5364], [-73.6113, 45.5339]]},
            "distance": 1234.0,
            "duration": duration,
        }],
    }
    resolver = RouteResolver(osrm=OSRMClient(base_url="http://osrm.test"))
    with patch("routing.osrm_client.requests.get", return_value=response):
        route = asyncio.run(resolver.resolve(MARKET, CHURCH))

    assert isinstance(route, EstimatedRoute)


@pytest.mark.parametrize("result", [
    {"coordinates": [(45.5364, -73.6147)], "distance": 1234.0, "duration": float("nan")},
    {"coordinates": [(45.5364, -73.6147)], "distance": 1234.0, "duration": float("inf")},
    {"coordinates": [(45.5364, -73.6147)], "distance": 1234.0},
])
def test_unconvertible_client_result_falls_back(result):
    route = asyncio.run(RouteResolver(osrm=MockOSRM(result=result)).resolve(MARKET, CHURCH))
    assert isinstance(route, EstimatedRoute)


def test_default_client_uses_configured_profile():
    from routing import osrm_client
    assert RouteResolver().osrm.profile == osrm_client.PROFILE
