import os
import json
import re
from abc import ABC, abstractmethod
from datetime import datetime
from functools import lru_cache
from typing import Dict, List, Optional

from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.messages import SystemMessage, HumanMessage
from dotenv import load_dotenv

from ridegenie.models import ComparisonResult, Provider, RideOption, TransportMode
from ridegenie.utils.traffic import describe_traffic, format_clock, format_weekday

# Load environment variables
load_dotenv()

# --- Configuration ---
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_TEMPERATURE = float(os.getenv("GEMINI_TEMPERATURE", "0.2"))

SYSTEM_INSTRUCTION = (
    "You are a precise pricing engine. You use real-time logic to estimate prices. "
    "Bikes are always cheapest. Cabs are most expensive."
)

OFFLINE_ANALYSIS = (
    "Offline Mode: Showing estimated standard rates. "
    "Check internet connection for live AI pricing."
)

# Price band (INR) the model must stay inside, per mode
PRICE_BANDS = {
    TransportMode.BIKE: (30, 120),
    TransportMode.AUTO: (60, 250),
    TransportMode.CAB: (150, 800),
}

SERVICE_NAMES: Dict[TransportMode, Dict[Provider, str]] = {
    TransportMode.BIKE: {Provider.UBER: "Uber Moto", Provider.OLA: "Ola Bike", Provider.RAPIDO: "Rapido Bike"},
    TransportMode.AUTO: {Provider.UBER: "Uber Auto", Provider.OLA: "Ola Auto", Provider.RAPIDO: "Rapido Auto"},
    TransportMode.CAB: {Provider.UBER: "Uber Go", Provider.OLA: "Ola Mini", Provider.RAPIDO: "Rapido Cab"},
}

MODE_HINTS = {
    TransportMode.BIKE: "If prices are above ₹150, they are wrong for bikes unless the trip is very long.",
    TransportMode.AUTO: "Prices should be roughly 1.5x - 2x of Bike prices.",
    TransportMode.CAB: "Prices should be roughly 2.5x - 4x of Bike prices.",
}

MODE_LABELS = {
    TransportMode.BIKE: "BIKE/MOTO",
    TransportMode.AUTO: "AUTO RICKSHAW",
    TransportMode.CAB: "CAB/CAR",
}

PRICE_LEVELS = {
    TransportMode.BIKE: "very low",
    TransportMode.AUTO: "moderate",
    TransportMode.CAB: "higher",
}

# --- Offline fallback table ---
BASE_RATES = {TransportMode.BIKE: 40, TransportMode.AUTO: 80, TransportMode.CAB: 180}

# provider -> (price multiplier, eta, trip duration)
FALLBACK_PROFILE = [
    (Provider.UBER, 1.15, "5 mins", "32 mins"),
    (Provider.OLA, 1.0, "8 mins", "35 mins"),
    (Provider.RAPIDO, 0.85, "3 mins", "30 mins"),
]

# Structured output contract handed to Gemini
RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "estimates": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "provider": {"type": "string", "description": "one of: uber, ola, rapido"},
                    "price": {"type": "number"},
                    "currency": {"type": "string", "description": "Currency symbol, use ₹"},
                    "eta": {"type": "string", "description": "Time to arrival, e.g. '3 mins'"},
                    "tripDuration": {"type": "string", "description": "Duration of trip, e.g. '45 mins'"},
                    "surgeMultiplier": {"type": "number", "description": "1.0 for normal, >1.0 for surge"},
                    "description": {
                        "type": "string",
                        "description": "Specific service name, e.g. 'Uber Go', 'Ola Auto', 'Rapido Bike'",
                    },
                },
                "required": ["provider", "price", "eta", "tripDuration", "description"],
            },
        },
        "analysis": {
            "type": "string",
            "description": "A short analysis identifying the cheapest option and the best value option.",
        },
    },
    "required": ["estimates", "analysis"],
}


class MissingCredentials(RuntimeError):
    pass


# --- Model access ---
class EstimateSource(ABC):
    """Anything that turns a pricing prompt into raw JSON text."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        ...


class GeminiEstimateSource(EstimateSource):
    def __init__(self, api_key: Optional[str] = None, model: str = GEMINI_MODEL,
                 temperature: float = GEMINI_TEMPERATURE):
        api_key = api_key or GOOGLE_API_KEY
        if not api_key:
            raise MissingCredentials("GOOGLE_API_KEY is not set. Check your .env file.")

        self.llm = ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=temperature,
            response_mime_type="application/json",
            response_schema=RESPONSE_SCHEMA,
        )

    def generate(self, prompt: str) -> str:
        response = self.llm.invoke([SystemMessage(content=SYSTEM_INSTRUCTION), HumanMessage(content=prompt)])
        content = response.content

        # Newer langchain versions may hand back a list of content parts
        if isinstance(content, list):
            content = "".join(
                part if isinstance(part, str) else part.get("text", "")
                for part in content
            )
        return content


@lru_cache(maxsize=1)
def get_default_source() -> EstimateSource:
    return GeminiEstimateSource()


# --- Prompt ---
def build_mode_prompt(mode: TransportMode) -> str:
    low, high = PRICE_BANDS[mode]
    names = ", ".join(SERVICE_NAMES[mode].values())
    return f"""
      CRITICAL: You are estimating {MODE_LABELS[mode]} prices.
      Prices MUST be {PRICE_LEVELS[mode]}: between ₹{low} and ₹{high} depending on distance.
      Service Names: {names}.
      {MODE_HINTS[mode]}
    """


def build_prompt(pickup: str, dropoff: str, mode: TransportMode, now: datetime) -> str:
    current_time = format_clock(now)
    day_of_week = format_weekday(now)

    return f"""
    Act as a real-time ride aggregator API for Indian cities.

    CONTEXT:
    - Current Time: {current_time} on {day_of_week}
    - Trip: From "{pickup}" to "{dropoff}".
    - Traffic Condition: {describe_traffic(now)}

    {build_mode_prompt(mode)}

    TASK:
    1. Generate 3 distinct estimates (one for Uber, one for Ola, one for Rapido).
    2. VARY the prices. They should not be identical.
    3. Apply a "surge" (high demand) factor to ONE provider only if it is currently rush hour ({current_time}), making it 1.2x - 1.5x more expensive than usual.
    4. In the 'analysis' field, recommend the absolute cheapest option and mention how much cheaper it is than the most expensive one.
    """


# --- Parsing ---
def parse_comparison(text: str) -> ComparisonResult:
    """Raises ValueError (pydantic's ValidationError included) on bad output."""
    if not text or not text.strip():
        raise ValueError("No response from AI")

    content = text.strip()
    # Tolerate ```json fences around the object
    match = re.search(r"\{.*\}", content, re.DOTALL)
    if match:
        content = match.group(0)

    result = ComparisonResult.model_validate(json.loads(content))
    if not result.estimates:
        raise ValueError("AI returned no estimates")
    return result


# --- Fallback ---
def build_fallback(mode: TransportMode) -> ComparisonResult:
    """Static standard rates used whenever the live call fails."""
    base_rate = BASE_RATES[mode]
    estimates: List[RideOption] = []
    for provider, multiplier, eta, trip_duration in FALLBACK_PROFILE:
        estimates.append(RideOption(
            provider=provider,
            price=round(base_rate * multiplier),
            currency="₹",
            eta=eta,
            trip_duration=trip_duration,
            surge_multiplier=1.0,
            description=SERVICE_NAMES[mode][provider],
        ))
    return ComparisonResult(estimates=estimates, analysis=OFFLINE_ANALYSIS)


# --- Main Execution Function ---
def get_estimates(pickup: str, dropoff: str, mode: TransportMode,
                  source: Optional[EstimateSource] = None,
                  now: Optional[datetime] = None) -> ComparisonResult:
    mode = TransportMode(mode)
    now = now or datetime.now()

    print(f"🤖 Asking Gemini for {mode.value} prices: {pickup} ➔ {dropoff}")
    prompt = build_prompt(pickup, dropoff, mode, now)

    try:
        source = source or get_default_source()
        result = parse_comparison(source.generate(prompt))
        print(f"✅ Got {len(result.estimates)} live estimates")
        return result
    except Exception as e:
        print(f"❌ Error fetching ride estimates: {e}")
        return build_fallback(mode)
