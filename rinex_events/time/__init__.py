from .gtime import GTime

from .epoch import (
    GPS_EPOCH,
    EPOCH_DECIMALS,
    TimeScale,
    Epoch,
)

from .leap_seconds import OffsetEpoch, NTP_EPOCH, LEAP_SECOND_EPOCHS, parse_tai_leap_seconds, utc_tai_offset
