from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import requests

from ridegenie.utils import geolocation
from ridegenie.utils.geolocation import LocationUnavailable, detect_current_location


def _ip_response(payload, status_error=None):
    response = MagicMock()
    response.json.return_value = payload
    if status_error:
        response.raise_for_status.side_effect = status_error
    return response


class FakeGeocoder:
    address = "Connaught Place, Block A, New Delhi, Delhi, 110001, India"

    def __init__(self, user_agent):
        self.user_agent = user_agent

    def reverse(self, point, timeout=None, language=None):
        if self.address is None:
            return None
        return SimpleNamespace(address=self.address, point=point)


@pytest.fixture
def fake_geocoder(monkeypatch):
    monkeypatch.setattr(geolocation, "Nominatim", FakeGeocoder)
    yield FakeGeocoder
    FakeGeocoder.address = "Connaught Place, Block A, New Delhi, Delhi, 110001, India"


def test_detects_short_address(monkeypatch, fake_geocoder):
    monkeypatch.setattr(
        geolocation.requests, "get",
        lambda url, timeout: _ip_response({"status": "success", "lat": 28.63, "lon": 77.21}),
    )

    assert detect_current_location() == "Connaught Place, Block A, New Delhi"


def test_network_failure_is_location_unavailable(monkeypatch, fake_geocoder):
    def boom(url, timeout):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(geolocation.requests, "get", boom)

    with pytest.raises(LocationUnavailable):
        detect_current_location()


def test_http_error_is_location_unavailable(monkeypatch, fake_geocoder):
    monkeypatch.setattr(
        geolocation.requests, "get",
        lambda url, timeout: _ip_response({}, status_error=requests.HTTPError("503")),
    )

    with pytest.raises(LocationUnavailable):
        detect_current_location()


def test_failed_lookup_status(monkeypatch, fake_geocoder):
    monkeypatch.setattr(
        geolocation.requests, "get",
        lambda url, timeout: _ip_response({"status": "fail", "message": "private range"}),
    )

    with pytest.raises(LocationUnavailable, match="private range"):
        detect_current_location()


def test_no_address_found(monkeypatch, fake_geocoder):
    fake_geocoder.address = None
    monkeypatch.setattr(
        geolocation.requests, "get",
        lambda url, timeout: _ip_response({"lat": 0.0, "lon": 0.0}),
    )

    with pytest.raises(LocationUnavailable):
        detect_current_location()
