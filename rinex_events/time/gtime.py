"""
Split whole / fractional second time representation.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GTime:
    whole_seconds: int
    frac_seconds: float

    def __post_init__(self):
        if self.frac_seconds < 0 or self.frac_seconds >= 1:
            raise ValueError("frac_seconds must be in range [0, 1)")

    def __repr__(self) -> str:
        return f"GTime({self.whole_seconds}, {self.frac_seconds:9.7f})"

    def __lt__(self, other: "GTime") -> bool:
        return self.whole_seconds < other.whole_seconds or (
            self.whole_seconds == other.whole_seconds
            and self.frac_seconds < other.frac_seconds
        )

    def __le__(self, other: "GTime") -> bool:
        return self.whole_seconds < other.whole_seconds or (
            self.whole_seconds == other.whole_seconds
            and self.frac_seconds <= other.frac_seconds
        )

    def __gt__(self, other: "GTime") -> bool:
        return other < self

    def __ge__(self, other: "GTime") -> bool:
        return other <= self

    def add_integer_seconds(self, seconds: int) -> "GTime":
        return GTime(self.whole_seconds + seconds, self.frac_seconds)

    def round_frac(self, decimals: int) -> "GTime":
        """
        Rounds the fractional part to `decimals` digits, carrying into the
        whole seconds when the rounding reaches 1.
        """
        ticks_per_second = 10**decimals
        ticks = round(self.frac_seconds * ticks_per_second)
        if ticks >= ticks_per_second:
            return GTime(self.whole_seconds + 1, 0.0)
        return GTime(self.whole_seconds, ticks / ticks_per_second)
