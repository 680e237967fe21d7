"""
Test directions query serialization and the directions client.
"""

import asyncio
import json

import httpx
import pytest

from ..clients.directions import DirectionsClient, DirectionsError, build_route_query
from ..models.options import Approach, Point, RouteRequestOptions


def make_options(**overrides) -> RouteRequestOptions:
    fields = {
        "coordinates": [
            Point(lon=13.4, lat=52.5),
            Point(lon=13.41, lat=52.51),
            Point(lon=13.42, lat=52.52),
        ],
    }
    fields.update(overrides)
    return RouteRequestOptions(**fields)


def route_response(**overrides) -> dict:
    body = {
        "code": "Ok",
        "routes": [
            {
                "distance": 1234.5,
                "duration": 321.0,
                "geometry": "abc",
                "legs": [{"summary": "Main St", "distance": 1234.5, "duration": 321.0}],
            }
        ],
        "waypoints": [
            {"name": "Main St", "location": [13.4, 52.5]},
            {"name": "Side St", "location": [13.42, 52.52]},
        ],
    }
    body.update(overrides)
    return body


def test_build_query_minimal():
    """Path carries user, profile and coordinates; empty hints omitted."""
    print("\n=== Testing minimal query ===")

    path, params = build_route_query(make_options())

    assert path == "/directions/v5/mapbox/driving-traffic/13.4,52.5;13.41,52.51;13.42,52.52"
    assert params["steps"] == "true"
    assert params["alternatives"] == "false"
    assert params["geometries"] == "polyline6"
    for key in ("bearings", "radiuses", "approaches", "waypoints", "waypoint_names", "waypoint_targets"):
        assert key not in params

    print("✓ Minimal query built")


def test_build_query_hints():
    """Per-coordinate and per-waypoint hints are ;-separated with empty slots."""
    print("\n=== Testing query hints ===")

    options = make_options(
        bearings=[(45.0, 90.0), None, (180.0, 20.0)],
        radiuses=[5.0, float("inf"), 12.5],
        approaches=[None, Approach.CURB, Approach.UNRESTRICTED],
        waypoint_indices=[0, 2],
        waypoint_names=["home", "work"],
        waypoint_targets=[None, Point(lon=13.425, lat=52.525)],
        exclude=["toll", "ferry"],
        language="de",
    )
    _, params = build_route_query(options)

    assert params["bearings"] == "45,90;;180,20"
    assert params["radiuses"] == "5;unlimited;12.5"
    assert params["approaches"] == ";curb;unrestricted"
    assert params["waypoints"] == "0;2"
    assert params["waypoint_names"] == "home;work"
    assert params["waypoint_targets"] == ";13.425,52.525"
    assert params["exclude"] == "toll,ferry"
    assert params["language"] == "de"

    print("✓ Hints serialized")


def test_get_route():
    """Successful response is summarized."""
    print("\n=== Testing get_route ===")

    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        return httpx.Response(200, json=route_response())

    async def run():
        client = DirectionsClient(
            base_url="https://directions.test/",
            access_token="pk.client",
            transport=httpx.MockTransport(handler),
        )
        try:
            return await client.get_route(make_options())
        finally:
            await client.close()

    route = asyncio.run(run())

    assert route["distance_m"] == 1234.5
    assert route["duration_s"] == 321.0
    assert route["legs"][0]["summary"] == "Main St"
    assert route["waypoints"][1]["name"] == "Side St"
    assert seen["url"].host == "directions.test"
    assert seen["url"].params["access_token"] == "pk.client"

    print("✓ Route fetched and summarized")


def test_request_token_wins():
    """A token on the request overrides the client token."""
    print("\n=== Testing request token ===")

    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["token"] = request.url.params["access_token"]
        return httpx.Response(200, json=route_response())

    async def run():
        client = DirectionsClient(access_token="pk.client", transport=httpx.MockTransport(handler))
        try:
            await client.get_route(make_options(access_token="pk.request"))
        finally:
            await client.close()

    asyncio.run(run())
    assert seen["token"] == "pk.request"

    print("✓ Request token used")


def test_get_route_error_code():
    """A non-Ok backend response raises DirectionsError."""
    print("\n=== Testing backend error ===")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"code": "InvalidInput", "message": "bad bearings"})

    async def run():
        client = DirectionsClient(transport=httpx.MockTransport(handler))
        try:
            await client.get_route(make_options())
        finally:
            await client.close()

    with pytest.raises(DirectionsError, match="InvalidInput"):
        asyncio.run(run())

    print("✓ DirectionsError raised")


def test_get_route_invalid_body():
    """A non-JSON response raises DirectionsError."""
    print("\n=== Testing invalid body ===")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, content=b"<html>bad gateway</html>")

    async def run():
        client = DirectionsClient(transport=httpx.MockTransport(handler))
        try:
            await client.get_route(make_options())
        finally:
            await client.close()

    with pytest.raises(DirectionsError):
        asyncio.run(run())

    print("✓ Invalid body rejected")


def test_connection_without_token():
    """No token means no connectivity check."""
    print("\n=== Testing test_connection without token ===")

    async def run():
        client = DirectionsClient()
        try:
            return await client.test_connection()
        finally:
            await client.close()

    assert asyncio.run(run()) is False

    print("✓ Unconfigured backend reported")


def test_options_json_roundtrip():
    """Request options survive the API's JSON encoding."""
    print("\n=== Testing options JSON ===")

    options = make_options(bearings=[(45.0, 90.0), None, None], approaches=[None, Approach.CURB, None])
    data = json.loads(options.model_dump_json())

    assert data["bearings"][0] == [45.0, 90.0]
    assert data["approaches"][1] == "curb"
    assert RouteRequestOptions.model_validate(data) == options

    print("✓ Options JSON round-trip")


def run_all_tests():
    """Run all directions client tests."""
    print("\n" + "=" * 60)
    print("DIRECTIONS CLIENT - TEST SUITE")
    print("=" * 60)

    test_build_query_minimal()
    test_build_query_hints()
    test_get_route()
    test_request_token_wins()
    test_get_route_error_code()
    test_get_route_invalid_body()
    test_connection_without_token()
    test_options_json_roundtrip()

    print("\n" + "=" * 60)
    print("✅ ALL DIRECTIONS CLIENT TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    run_all_tests()
