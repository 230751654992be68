# ridegenie/utils/geolocation.py
import os
from typing import Tuple

import requests
from dotenv import load_dotenv
from geopy.geocoders import Nominatim

load_dotenv()

# --- Configuration ---
IP_LOOKUP_URL = os.getenv("IP_LOOKUP_URL", "http://ip-api.com/json/")
GEOCODER_USER_AGENT = os.getenv("GEOCODER_USER_AGENT", "ridegenie_locator")


class LocationUnavailable(Exception):
    """Raised when the current position can't be turned into an address."""


def lookup_coordinates() -> Tuple[float, float]:
    """
    Step 1: Approximate Lat/Lon of the visitor from their IP address.
    """
    try:
        response = requests.get(IP_LOOKUP_URL, timeout=10)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        raise LocationUnavailable(f"IP lookup failed: {e}") from e

    if data.get("status", "success") != "success" or "lat" not in data or "lon" not in data:
        raise LocationUnavailable(f"IP lookup returned no position: {data.get('message', data)}")

    return float(data["lat"]), float(data["lon"])


def reverse_geocode(lat: float, lon: float) -> str:
    """
    Step 2: Turns Lat/Lon into a short display address via Nominatim.
    """
    geocoder = Nominatim(user_agent=GEOCODER_USER_AGENT)
    try:
        location = geocoder.reverse((lat, lon), timeout=10, language="en")
    except Exception as e:
        raise LocationUnavailable(f"Reverse geocoding failed: {e}") from e

    if not location:
        raise LocationUnavailable(f"No address found near {lat}, {lon}")

    # Full Nominatim addresses are long, keep the first few parts
    parts = [part.strip() for part in location.address.split(",") if part.strip()]
    return ", ".join(parts[:3])


def detect_current_location() -> str:
    """
    MASTER FUNCTION: What the 'Use Current Location' button calls.
    """
    print("📍 Detecting current location...")
    lat, lon = lookup_coordinates()
    address = reverse_geocode(lat, lon)
    print(f"✅ Located: {address}")
    return address
