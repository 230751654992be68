import pytest

from ridegenie.models import Provider
from ridegenie.utils.booking import build_booking_url
from ridegenie.utils.maps import build_map_embed_url, generate_directions_url


# --- Booking ---

def test_uber_link_embeds_encoded_locations():
    url = build_booking_url("uber", "MG Road, Bangalore", "Kempegowda Airport")

    assert url.startswith("https://m.uber.com/ul/?action=setPickup")
    assert "pickup[formatted_address]=MG+Road%2C+Bangalore" in url
    assert "dropoff[formatted_address]=Kempegowda+Airport" in url


def test_uber_link_accepts_enum_provider():
    assert build_booking_url(Provider.UBER, "A", "B").startswith("https://m.uber.com/")


@pytest.mark.parametrize("provider, expected", [
    ("ola", "https://book.olacabs.com/"),
    ("OLA", "https://book.olacabs.com/"),
    ("rapido", "https://www.rapido.bike/"),
    (Provider.RAPIDO, "https://www.rapido.bike/"),
])
def test_ola_and_rapido_ignore_locations(provider, expected):
    assert build_booking_url(provider, "Anywhere & Co", "Somewhere") == expected


def test_unknown_provider_gets_directions_link():
    url = build_booking_url("blablacar", "Connaught Place", "India Gate")

    assert url == (
        "https://www.google.com/maps/dir/?api=1"
        "&origin=Connaught+Place&destination=India+Gate"
    )


# --- Maps ---

def test_map_shows_route_for_both_ends():
    url = build_map_embed_url("Bandra West", "Andheri & Juhu")

    assert url == "https://maps.google.com/maps?saddr=Bandra+West&daddr=Andheri+%26+Juhu&output=embed"


def test_map_shows_pickup_only():
    assert build_map_embed_url("Powai", "") == "https://maps.google.com/maps?q=Powai&output=embed"


@pytest.mark.parametrize("pickup, dropoff", [("", ""), ("  ", "  "), ("", "Goa")])
def test_map_defaults_to_region(pickup, dropoff):
    assert build_map_embed_url(pickup, dropoff) == "https://maps.google.com/maps?q=India&output=embed"


def test_directions_url_encodes_both_ends():
    url = generate_directions_url("Nandi Hills", "Lalbagh Botanical Garden")
    assert "origin=Nandi+Hills" in url
    assert "destination=Lalbagh+Botanical+Garden" in url
