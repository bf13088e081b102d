from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class MarkerType(Enum):
    GEODETIC = "GEODETIC"
    NON_GEODETIC = "NON_GEODETIC"
    NON_PHYSICAL = "NON_PHYSICAL"
    SPACEBORNE = "SPACEBORNE"
    GROUND_CRAFT = "GROUND_CRAFT"
    WATER_CRAFT = "WATER_CRAFT"
    AIRBORNE = "AIRBORNE"
    FIXED_BUOY = "FIXED_BUOY"
    FLOATING_BUOY = "FLOATING_BUOY"
    FLOATING_ICE = "FLOATING_ICE"
    GLACIER = "GLACIER"
    BALLISTIC = "BALLISTIC"
    ANIMAL = "ANIMAL"
    HUMAN = "HUMAN"

    @classmethod
    def parse(cls, code: str) -> "MarkerType":
        try:
            return cls(code.strip().upper())
        except ValueError as e:
            raise ValueError(f"Unknown marker type: {code!r}") from e


@dataclass(frozen=True)
class GeodeticMarker:
    name: str = ""
    number: Optional[str] = None
    marker_type: Optional[MarkerType] = None

    def with_name(self, name: str) -> "GeodeticMarker":
        return replace(self, name=name)

    def with_number(self, number: str) -> "GeodeticMarker":
        return replace(self, number=number)

    def with_marker_type(self, marker_type: MarkerType) -> "GeodeticMarker":
        return replace(self, marker_type=marker_type)
