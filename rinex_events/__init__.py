"""
Epoch events of RINEX observation files: parsing and formatting of the
header-like blocks that follow flagged epochs, and merging of event and
observation records into one timeline.
"""

from .time import Epoch, TimeScale, OffsetEpoch, parse_tai_leap_seconds

from .rinex_io import (
    EpochFlag,
    ParsingError,
    EventLengthError,
    CoordinatesParsingError,
    NotImplementedFlagError,
    UnsupportedVersionError,
    CombinationError,
    RinexVersion,
    HeaderContext,
    MarkerType,
    GeodeticMarker,
    GroundPosition,
    Antenna,
    Event,
    parse_event,
    format_event,
    format_epoch_header,
    parse_epoch_header,
    ObservationRecord,
    EventRecord,
    ObservationEntry,
    EventEntry,
    MixedTimeline,
    combine,
    parse_event_records,
    format_timeline,
)
