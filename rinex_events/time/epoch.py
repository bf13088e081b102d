"""
Epochs as found in RINEX observation files: a calendar timestamp read in
one of the GNSS time systems.

Epochs are stored as TAI seconds since the GPS epoch, so epochs naming
the same instant in different time systems compare (and hash) equal.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional, Tuple

from .gtime import GTime
from .leap_seconds import OffsetEpoch, utc_tai_offset

GPS_EPOCH = datetime(year=1980, month=1, day=6, hour=0, minute=0, second=0)
GLONASS_UTC_OFFSET = timedelta(hours=3)
EPOCH_DECIMALS = 7


class TimeScale(Enum):
    GPS = "GPS"
    GLO = "GLO"
    GAL = "GAL"
    QZS = "QZS"
    BDT = "BDT"
    IRN = "IRN"
    UTC = "UTC"
    TAI = "TAI"


# TAI - <time system> for the time systems without leap seconds
_FIXED_TAI_OFFSETS = {
    TimeScale.GPS: timedelta(seconds=19),
    TimeScale.GAL: timedelta(seconds=19),
    TimeScale.QZS: timedelta(seconds=19),
    TimeScale.IRN: timedelta(seconds=19),
    TimeScale.BDT: timedelta(seconds=33),
    TimeScale.TAI: timedelta(0),
}


LeapSecondTable = Optional[List[OffsetEpoch]]


def _tai_offset_from_label(
    label: datetime, time_scale: TimeScale, leap_second_epochs: LeapSecondTable = None
) -> timedelta:
    # offset to add to a calendar label in `time_scale` to obtain the TAI label
    if time_scale in _FIXED_TAI_OFFSETS:
        return _FIXED_TAI_OFFSETS[time_scale]
    if time_scale == TimeScale.UTC:
        return utc_tai_offset(label, leap_second_epochs)
    utc_label = label - GLONASS_UTC_OFFSET
    return utc_tai_offset(utc_label, leap_second_epochs) - GLONASS_UTC_OFFSET


def _tai_offset_from_tai_label(
    tai_label: datetime, time_scale: TimeScale, leap_second_epochs: LeapSecondTable = None
) -> timedelta:
    if time_scale in _FIXED_TAI_OFFSETS:
        return _FIXED_TAI_OFFSETS[time_scale]
    utc_guess = tai_label - utc_tai_offset(tai_label, leap_second_epochs)
    offset = utc_tai_offset(utc_guess, leap_second_epochs)
    if time_scale == TimeScale.UTC:
        return offset
    return offset - GLONASS_UTC_OFFSET


def _seconds_since_gps_epoch(label: datetime) -> int:
    delta = label - GPS_EPOCH
    return delta.days * 86400 + delta.seconds


@dataclass(frozen=True, slots=True, order=True)
class Epoch:
    tai: GTime
    time_scale: TimeScale = field(default=TimeScale.GPS, compare=False)
    # TAI - UTC table used for UTC and GLO labels, None for the built-in one
    leap_second_epochs: LeapSecondTable = field(default=None, compare=False, repr=False)

    @classmethod
    def from_calendar(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        frac_seconds: float = 0.0,
        time_scale: TimeScale = TimeScale.GPS,
        leap_second_epochs: LeapSecondTable = None,
    ) -> "Epoch":
        """
        Builds an epoch from calendar fields read in `time_scale`.

        `second` may be 60 to name an inserted leap second (UTC, GLO).
        """
        leap_second = second == 60
        label = datetime(year, month, day, hour, minute, 59 if leap_second else second)
        tai_label = label + _tai_offset_from_label(label, time_scale, leap_second_epochs)
        tai = GTime(_seconds_since_gps_epoch(tai_label), frac_seconds)
        if leap_second:
            tai = tai.add_integer_seconds(1)
        return cls(tai, time_scale, leap_second_epochs)

    @classmethod
    def from_datetime(
        cls,
        dt: datetime,
        time_scale: TimeScale = TimeScale.GPS,
        leap_second_epochs: LeapSecondTable = None,
    ) -> "Epoch":
        """
        Builds an epoch from a naive `datetime` whose fields are read in `time_scale`.
        """
        return cls.from_calendar(
            dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second,
            dt.microsecond / 1e6, time_scale, leap_second_epochs,
        )

    @classmethod
    def parse(
        cls,
        text: str,
        time_scale: TimeScale = TimeScale.GPS,
        leap_second_epochs: LeapSecondTable = None,
    ) -> "Epoch":
        """
        Parses the epoch part of an epoch header, e.g. `2022 01 09 00 00  0.0000000`.
        Two-digit years (RINEX 2) are mapped to 1980-2079.
        """
        items = text.split()
        if len(items) != 6:
            raise ValueError(f"Invalid epoch: {text!r}")
        try:
            year, month, day, hour, minute = map(int, items[:5])
            whole_str, _, frac_str = items[5].partition(".")
            second = int(whole_str)
            frac_seconds = float(f"0.{frac_str}") if frac_str else 0.0
        except ValueError as e:
            raise ValueError(f"Invalid epoch: {text!r}") from e
        if year < 100:
            year += 2000 if year < 80 else 1900
        return cls.from_calendar(
            year, month, day, hour, minute, second, frac_seconds,
            time_scale, leap_second_epochs,
        )

    def in_time_scale(self, time_scale: TimeScale) -> "Epoch":
        return Epoch(self.tai, time_scale, self.leap_second_epochs)

    def calendar(self, decimals: int = EPOCH_DECIMALS) -> Tuple[datetime, int, float]:
        """
        Returns the calendar fields in this epoch's own time system: the
        label down to the minute, the whole second (60 during an inserted
        leap second) and the fractional seconds rounded to `decimals` digits.
        """
        tai = self.tai.round_frac(decimals)
        tai_label = GPS_EPOCH + timedelta(seconds=tai.whole_seconds)
        offset = _tai_offset_from_tai_label(tai_label, self.time_scale, self.leap_second_epochs)
        label = tai_label - offset
        if _tai_offset_from_label(label, self.time_scale, self.leap_second_epochs) != offset:
            # the instant right before the offset step: hh:mm:60 of the previous minute
            label -= timedelta(seconds=1)
            return label.replace(second=0), 60, tai.frac_seconds
        return label.replace(second=0), label.second, tai.frac_seconds

    def to_datetime(self) -> datetime:
        """
        Returns the naive calendar time in this epoch's time system. A leap
        second has no `datetime` form and maps onto the following minute.
        """
        label, second, frac_seconds = self.calendar(decimals=6)
        return label + timedelta(seconds=second, microseconds=round(frac_seconds * 1e6))

    def format(self, version: int = 3) -> str:
        label, second, frac_seconds = self.calendar()
        seconds = second + frac_seconds
        if version >= 3:
            return f"{label:%Y %m %d %H %M}{seconds:11.7f}"
        return (
            f"{label.year % 100:3d}{label.month:3d}{label.day:3d}"
            f"{label.hour:3d}{label.minute:3d}{seconds:11.7f}"
        )

    def __str__(self) -> str:
        return f"{self.format()} {self.time_scale.value}"
