# ridegenie/session.py
from dataclasses import dataclass
from typing import Optional

from ridegenie.models import ComparisonResult, TransportMode


@dataclass
class SearchState:
    """
    Everything the page needs between Streamlit reruns.

    pickup/dropoff track the text inputs. map_pickup/map_dropoff are only
    assigned when a search starts, so the map never follows half-typed input.
    """

    pickup: str = ""
    dropoff: str = ""
    mode: TransportMode = TransportMode.CAB
    map_pickup: str = ""
    map_dropoff: str = ""
    loading: bool = False
    result: Optional[ComparisonResult] = None
    request_seq: int = 0

    @property
    def has_locations(self) -> bool:
        return bool(self.pickup.strip() and self.dropoff.strip())

    @property
    def can_search(self) -> bool:
        return self.has_locations and not self.loading

    def begin_search(self, pickup: str, dropoff: str, mode: TransportMode) -> Optional[int]:
        """Starts a search and returns its request token, or None if inputs are blank."""
        if not pickup.strip() or not dropoff.strip():
            return None

        self.pickup, self.dropoff, self.mode = pickup, dropoff, mode
        self.loading = True
        self.result = None
        self.map_pickup = pickup
        self.map_dropoff = dropoff
        self.request_seq += 1
        return self.request_seq

    def complete_search(self, token: int, result: ComparisonResult) -> bool:
        # A newer search has started since this one, drop the stale answer
        if token != self.request_seq:
            return False
        self.result = result
        self.loading = False
        return True

    def fail_search(self, token: int) -> None:
        if token == self.request_seq:
            self.loading = False

    def change_mode(self, mode: TransportMode) -> bool:
        """Switches mode. True means the shown result should be refreshed."""
        mode = TransportMode(mode)
        changed = mode != self.mode
        self.mode = mode
        return changed and self.has_locations and self.result is not None
