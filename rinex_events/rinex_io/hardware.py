from dataclasses import dataclass, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class Antenna:
    """
    Receiver antenna description. Every field is optional so that
    `ANT # / TYPE`, `ANTENNA: DELTA X/Y/Z` and `ANTENNA: DELTA H/E/N`
    lines can each fill in their own part.
    """

    model: str = ""
    serial_number: str = ""
    coords: Optional[Tuple[float, float, float]] = None
    height: Optional[float] = None
    eastern: Optional[float] = None
    northern: Optional[float] = None

    def with_model(self, model: str) -> "Antenna":
        return replace(self, model=model)

    def with_serial_number(self, serial_number: str) -> "Antenna":
        return replace(self, serial_number=serial_number)

    def with_base_coordinates(self, coords: Tuple[float, float, float]) -> "Antenna":
        return replace(self, coords=coords)

    def with_height(self, height: float) -> "Antenna":
        return replace(self, height=height)

    def with_eastern_component(self, eastern: float) -> "Antenna":
        return replace(self, eastern=eastern)

    def with_northern_component(self, northern: float) -> "Antenna":
        return replace(self, northern=northern)
