from .epoch_flag import EpochFlag

from .errors import (
    ParsingError,
    EventLengthError,
    CoordinatesParsingError,
    NotImplementedFlagError,
    UnsupportedVersionError,
    CombinationError,
)

from .header import RinexVersion, HeaderContext

from .marker import MarkerType, GeodeticMarker
from .ground_position import GroundPosition
from .hardware import Antenna

from .event import (
    Event,
    parse_event,
    format_event,
    format_event_lines,
    event_line_count,
)

from .epoch_header import format_epoch_header, parse_epoch_header

from .record import (
    EpochKey,
    ObservationRecord,
    EventRecord,
    ObservationEntry,
    EventEntry,
    MixedTimeline,
    combine,
)

from .event_records import parse_event_body, parse_event_records, format_timeline
