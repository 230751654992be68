# ridegenie/utils/booking.py
import urllib.parse

from ridegenie.utils.maps import generate_directions_url

OLA_BOOKING_URL = "https://book.olacabs.com/"
RAPIDO_URL = "https://www.rapido.bike/"


def build_booking_url(provider: str, pickup: str, dropoff: str) -> str:
    """Deep link that opens the provider's booking flow in a new tab."""
    provider = str(getattr(provider, "value", provider)).lower()

    if provider == "uber":
        # Universal link: opens the app when installed, m.uber.com otherwise
        p = urllib.parse.quote_plus(pickup)
        d = urllib.parse.quote_plus(dropoff)
        return (
            "https://m.uber.com/ul/?action=setPickup"
            f"&pickup[formatted_address]={p}&dropoff[formatted_address]={d}"
        )
    if provider == "ola":
        return OLA_BOOKING_URL
    if provider == "rapido":
        # App-only booking, send users to the site
        return RAPIDO_URL
    return generate_directions_url(pickup, dropoff)
