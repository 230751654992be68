# ridegenie/utils/maps.py
import urllib.parse

DEFAULT_REGION = "India"


def _encode(value: str) -> str:
    return urllib.parse.quote_plus(value.strip())


def build_map_embed_url(pickup: str, dropoff: str) -> str:
    """
    Builds the read-only Google Maps embed URL for the iframe.
    Route view when both ends are known, a single pin for pickup only,
    otherwise the default region.
    """
    pickup = (pickup or "").strip()
    dropoff = (dropoff or "").strip()

    if pickup and dropoff:
        return (
            "https://maps.google.com/maps"
            f"?saddr={_encode(pickup)}&daddr={_encode(dropoff)}&output=embed"
        )
    if pickup:
        return f"https://maps.google.com/maps?q={_encode(pickup)}&output=embed"
    return f"https://maps.google.com/maps?q={DEFAULT_REGION}&output=embed"


def generate_directions_url(origin: str, destination: str) -> str:
    """Free Google Maps directions link between two free-text places."""
    base_url = "https://www.google.com/maps/dir/?api=1"
    return f"{base_url}&origin={_encode(origin)}&destination={_encode(destination)}"
