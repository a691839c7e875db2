"""Tests for NominatimAdapter and GoogleMapsAdapter against mocked HTTP."""

import httpx
import pytest
import respx
from httpx import Response

from geosync.adapters.geocoder.google_maps_adapter import GOOGLE_GEOCODE_URL, GoogleMapsAdapter
from geosync.adapters.geocoder.nominatim_adapter import NOMINATIM_URL, NominatimAdapter
from geosync.domain.value_objects.enums import GeocodeStatus
from geosync.domain.value_objects.geo_point import GeoPoint


@pytest.fixture
def nominatim():
    return NominatimAdapter(user_agent="test-agent", timeout=5.0)


@pytest.fixture
def google():
    return GoogleMapsAdapter(api_key="test-key", timeout=5.0)


# ─── Nominatim ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_nominatim_success(nominatim):
    with respx.mock:
        route = respx.get(NOMINATIM_URL).mock(
            return_value=Response(200, json=[{"lat": "-41.28", "lon": "174.77", "display_name": "x"}])
        )
        result = await nominatim.geocode("12 Main St, Wellington", "nz")

    assert result.status == GeocodeStatus.OK
    assert result.point == GeoPoint(latitude=-41.28, longitude=174.77)

    request = route.calls.last.request
    assert request.url.params["q"] == "12 Main St, Wellington"
    assert request.url.params["format"] == "json"
    assert request.url.params["limit"] == "1"
    assert request.url.params["countrycodes"] == "nz"
    assert request.headers["User-Agent"] == "test-agent"


@pytest.mark.asyncio
async def test_nominatim_empty_result(nominatim):
    with respx.mock:
        respx.get(NOMINATIM_URL).mock(return_value=Response(200, json=[]))
        result = await nominatim.geocode("Nowhere", "nz")
    assert result.status == GeocodeStatus.NO_RESULT
    assert result.point is None


@pytest.mark.asyncio
async def test_nominatim_non_200(nominatim):
    with respx.mock:
        respx.get(NOMINATIM_URL).mock(return_value=Response(429))
        result = await nominatim.geocode("12 Main St", "nz")
    assert result.status == GeocodeStatus.NO_RESULT


@pytest.mark.asyncio
async def test_nominatim_malformed_json(nominatim):
    with respx.mock:
        respx.get(NOMINATIM_URL).mock(return_value=Response(200, text="<html>oops</html>"))
        result = await nominatim.geocode("12 Main St", "nz")
    assert result.status == GeocodeStatus.NO_RESULT


@pytest.mark.asyncio
async def test_nominatim_missing_lon(nominatim):
    with respx.mock:
        respx.get(NOMINATIM_URL).mock(return_value=Response(200, json=[{"lat": "-41.28"}]))
        result = await nominatim.geocode("12 Main St", "nz")
    assert result.status == GeocodeStatus.NO_RESULT


@pytest.mark.asyncio
async def test_nominatim_transport_error(nominatim):
    with respx.mock:
        respx.get(NOMINATIM_URL).mock(side_effect=httpx.ConnectError("boom"))
        result = await nominatim.geocode("12 Main St", "nz")
    assert result.status == GeocodeStatus.NO_RESULT


# ─── Google ─────────────────────────────────────────────────────────


def _google_ok(lat=-36.85, lng=174.76):
    return {
        "status": "OK",
        "results": [{"geometry": {"location": {"lat": lat, "lng": lng}}}],
    }


@pytest.mark.asyncio
async def test_google_success(google):
    with respx.mock:
        route = respx.get(GOOGLE_GEOCODE_URL).mock(return_value=Response(200, json=_google_ok()))
        result = await google.geocode("5 Queen St, Auckland", "nz")

    assert result.status == GeocodeStatus.OK
    assert result.point == GeoPoint(latitude=-36.85, longitude=174.76)

    params = route.calls.last.request.url.params
    assert params["address"] == "5 Queen St, Auckland"
    assert params["key"] == "test-key"
    assert params["components"] == "country:nz"


@pytest.mark.asyncio
async def test_google_request_denied_is_auth_rejected(google):
    with respx.mock:
        respx.get(GOOGLE_GEOCODE_URL).mock(
            return_value=Response(
                200, json={"status": "REQUEST_DENIED", "error_message": "The provided API key is invalid."}
            )
        )
        result = await google.geocode("5 Queen St", "nz")
    assert result.status == GeocodeStatus.AUTH_REJECTED


@pytest.mark.asyncio
async def test_google_zero_results(google):
    with respx.mock:
        respx.get(GOOGLE_GEOCODE_URL).mock(
            return_value=Response(200, json={"status": "ZERO_RESULTS", "results": []})
        )
        result = await google.geocode("Nowhere", "nz")
    assert result.status == GeocodeStatus.NO_RESULT


@pytest.mark.asyncio
async def test_google_ok_without_location(google):
    with respx.mock:
        respx.get(GOOGLE_GEOCODE_URL).mock(
            return_value=Response(200, json={"status": "OK", "results": [{"geometry": {}}]})
        )
        result = await google.geocode("5 Queen St", "nz")
    assert result.status == GeocodeStatus.NO_RESULT


@pytest.mark.asyncio
async def test_google_malformed_json_is_no_result(google):
    with respx.mock:
        respx.get(GOOGLE_GEOCODE_URL).mock(return_value=Response(500, text="Internal error"))
        result = await google.geocode("5 Queen St", "nz")
    assert result.status == GeocodeStatus.NO_RESULT


@pytest.mark.asyncio
async def test_google_transport_error(google):
    with respx.mock:
        respx.get(GOOGLE_GEOCODE_URL).mock(side_effect=httpx.ReadTimeout("slow"))
        result = await google.geocode("5 Queen St", "nz")
    assert result.status == GeocodeStatus.NO_RESULT


@pytest.mark.asyncio
async def test_google_without_key_makes_no_request():
    adapter = GoogleMapsAdapter(api_key="")
    assert adapter.is_configured is False
    with respx.mock(assert_all_called=False) as respx_mock:
        route = respx_mock.get(GOOGLE_GEOCODE_URL).mock(return_value=Response(200, json=_google_ok()))
        result = await adapter.geocode("5 Queen St", "nz")
    assert result.status == GeocodeStatus.NO_RESULT
    assert route.call_count == 0
