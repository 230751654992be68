# ridegenie/models.py
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransportMode(str, Enum):
    CAB = "cab"
    AUTO = "auto"
    BIKE = "bike"


class Provider(str, Enum):
    UBER = "uber"
    OLA = "ola"
    RAPIDO = "rapido"


class RideOption(BaseModel):
    """One provider's estimate, shaped like the JSON the model returns."""

    model_config = ConfigDict(populate_by_name=True)

    # Usually a Provider value; anything else is kept and shown as a generic card
    provider: str
    price: float = Field(ge=0)
    currency: str = "₹"
    eta: str
    trip_duration: str = Field(alias="tripDuration")
    surge_multiplier: float = Field(default=1.0, alias="surgeMultiplier")
    description: Optional[str] = None

    @field_validator("provider", mode="before")
    @classmethod
    def _lower_provider(cls, value):
        # Gemini sometimes answers "Uber" instead of "uber"
        if isinstance(value, Provider):
            return value.value
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("currency", mode="before")
    @classmethod
    def _default_currency(cls, value):
        return value or "₹"

    @field_validator("surge_multiplier", mode="before")
    @classmethod
    def _clamp_surge(cls, value):
        if value is None:
            return 1.0
        try:
            return max(float(value), 1.0)
        except (TypeError, ValueError):
            # leave it for pydantic to reject
            return value

    @property
    def is_surging(self) -> bool:
        return self.surge_multiplier > 1.0

    @property
    def high_demand(self) -> bool:
        return self.surge_multiplier > 1.1


class ComparisonResult(BaseModel):
    estimates: List[RideOption]
    analysis: str

    def cheapest(self) -> Optional[RideOption]:
        if not self.estimates:
            return None
        return min(self.estimates, key=lambda option: option.price)

    def savings(self) -> float:
        """Most expensive price minus the cheapest one."""
        if not self.estimates:
            return 0.0
        prices = [option.price for option in self.estimates]
        return max(prices) - min(prices)
