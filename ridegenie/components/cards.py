# ridegenie/components/cards.py
import html

import pandas as pd

from ridegenie.models import ComparisonResult, RideOption

PROVIDER_COLORS = {
    "uber": ("#000000", "#FFFFFF"),
    "ola": ("#CDDC39", "#000000"),
    "rapido": ("#F9C935", "#000000"),
}
DEFAULT_COLORS = ("#D1D5DB", "#4B5563")

CARD_CSS = """
    <style>
    .stButton>button {
        width: 100%;
        background-color: #000000;
        color: white;
    }
    .ride-card {
        padding: 14px 16px;
        border-radius: 10px;
        border: 1px solid #e0e0e0;
        margin-bottom: 6px;
        background-color: #ffffff;
        position: relative;
    }
    .ride-logo {
        font-size: 12px;
        font-weight: 700;
        padding: 2px 8px;
        border-radius: 4px;
    }
    .ride-badge {
        position: absolute;
        top: 0;
        right: 0;
        background: #FEE2E2;
        color: #DC2626;
        font-size: 10px;
        font-weight: 700;
        padding: 2px 8px;
        border-bottom-left-radius: 6px;
    }
    .analysis-card {
        padding: 15px;
        border-radius: 10px;
        border: 1px solid #bbf7d0;
        background-color: #f0fdf4;
        margin-bottom: 12px;
    }
    .map-overlay {
        padding: 12px 16px;
        border-radius: 10px;
        border: 1px solid #e5e7eb;
        background-color: #ffffff;
        display: inline-block;
    }
    </style>
"""


def format_price(option: RideOption) -> str:
    return f"{option.currency}{round(option.price)}"


def render_ride_card(option: RideOption) -> str:
    """HTML for a single estimate. The Book Now button is rendered by Streamlit."""
    provider = option.provider
    accent, logo_text = PROVIDER_COLORS.get(provider, DEFAULT_COLORS)
    description = html.escape(option.description or provider.title())

    badge = '<div class="ride-badge">High Demand</div>' if option.high_demand else ""
    surge = ""
    if option.is_surging:
        surge = f'<div style="font-size:10px;color:#EF4444">↑ {option.surge_multiplier:g}x surge</div>'

    return f"""
    <div class="ride-card" style="border-left: 4px solid {accent}">
        {badge}
        <div style="display:flex;justify-content:space-between;align-items:center">
            <div>
                <span class="ride-logo" style="background:{accent};color:{logo_text}">{html.escape(provider.title())}</span>
                <b style="margin-left:8px">{description}</b><br>
                <span style="color:gray;font-size:12px">🕒 {html.escape(option.eta)} away • {html.escape(option.trip_duration)} trip</span>
            </div>
            <div style="text-align:right">
                <div style="font-size:18px;font-weight:700">{format_price(option)}</div>
                {surge}
            </div>
        </div>
    </div>
    """


def render_analysis(result: ComparisonResult) -> str:
    return f"""
    <div class="analysis-card">
        <div style="font-size:12px;font-weight:700;color:#166534;text-transform:uppercase">✨ Smart Recommendation</div>
        <div style="font-size:14px;color:#374151">{html.escape(result.analysis)}</div>
    </div>
    """


def render_map_overlay(map_pickup: str, map_dropoff: str) -> str:
    routing = bool(map_pickup and map_dropoff)
    title = "Route Visualizer" if routing else "Live Traffic Data"
    headline = "Routing" if routing else "Active"
    caption = "Calculating Path" if routing else "Map Region"
    return f"""
    <div class="map-overlay">
        <div style="font-size:10px;font-weight:700;color:#2563EB;text-transform:uppercase">{title}</div>
        <b>{headline}</b> <span style="color:gray;font-size:12px">{caption}</span>
        &nbsp;|&nbsp; <b>GPS</b> <span style="color:gray;font-size:12px">Connected</span>
    </div>
    """


def comparison_table(result: ComparisonResult) -> pd.DataFrame:
    """Side-by-side table of the estimates, cheapest first."""
    rows = [
        {
            "Provider": option.provider.title(),
            "Service": option.description or "",
            "Price": format_price(option),
            "ETA": option.eta,
            "Trip": option.trip_duration,
            "Surge": f"{option.surge_multiplier:g}x",
            "_price": option.price,
        }
        for option in result.estimates
    ]
    df = pd.DataFrame(rows)
    if df.empty:
        return df
    return df.sort_values("_price").drop(columns="_price").reset_index(drop=True)
