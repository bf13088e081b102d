"""
Header-like blocks embedded in the observation body.

Epochs flagged 2 to 5 (antenna moved, new site occupation, header
information follows, external event) are followed by lines using the
header layout: a 60-column content field and a label. Only the labels
describing the station (marker, approximate position, antenna) are
interpreted here; comments are kept verbatim.
"""

from dataclasses import dataclass
import logging
from typing import List, Optional, Tuple

from .errors import CoordinatesParsingError
from .ground_position import GroundPosition
from .hardware import Antenna
from .marker import GeodeticMarker, MarkerType

CONTENT_WIDTH = 60

LABEL_END_OF_HEADER = "END OF HEADER"
LABEL_COMMENT = "COMMENT"
LABEL_MARKER_NAME = "MARKER NAME"
LABEL_MARKER_NUMBER = "MARKER NUMBER"
LABEL_MARKER_TYPE = "MARKER TYPE"
LABEL_APPROX_POSITION_XYZ = "APPROX POSITION XYZ"
LABEL_ANT_TYPE = "ANT # / TYPE"
LABEL_ANTENNA_DELTA_XYZ = "ANTENNA: DELTA X/Y/Z"
LABEL_ANTENNA_DELTA_HEN = "ANTENNA: DELTA H/E/N"


@dataclass(frozen=True)
class Event:
    # comments found in the block, in file order
    comments: Tuple[str, ...] = ()
    geodetic_marker: Optional[GeodeticMarker] = None
    # station approximate coordinates
    ground_position: Optional[GroundPosition] = None
    rcvr_antenna: Optional[Antenna] = None

    @classmethod
    def parse(cls, text: str) -> "Event":
        return parse_event(text)

    def __str__(self) -> str:
        return format_event(self)


def parse_float(text: str) -> float:
    """
    `float` restricted to plain decimal notation: digit group underscores
    are not valid in RINEX fields.
    """
    if "_" in text:
        raise ValueError(f"could not convert string to float: {text!r}")
    return float(text)


def parse_xyz(content: str, field_name: str) -> Tuple[float, float, float]:
    """
    Reads three whitespace separated coordinates. Any missing or invalid
    value is an error naming the axis (e.g. `APPROX POSITION Y`).
    """
    items = content.split()
    values = []
    for i, axis in enumerate("XYZ"):
        raw = items[i] if i < len(items) else ""
        try:
            values.append(parse_float(raw))
        except ValueError:
            raise CoordinatesParsingError(f"{field_name} {axis}", raw) from None
    return (values[0], values[1], values[2])


def parse_antenna_delta_hen(content: str) -> Optional[Tuple[float, float, float]]:
    try:
        height = parse_float(content[0:15])
        eastern = parse_float(content[15:30])
        northern = parse_float(content[30:45])
    except ValueError:
        return None
    return (height, eastern, northern)


def parse_event(text: str) -> Event:
    comments: List[str] = []
    geodetic_marker: Optional[GeodeticMarker] = None
    ground_position: Optional[GroundPosition] = None
    rcvr_antenna: Optional[Antenna] = None

    for line in text.splitlines():
        if len(line) < CONTENT_WIDTH:
            # stray blank or truncated lines are common in the wild
            logging.debug(f"Skipping short event line: {line!r}")
            continue
        content = line[:CONTENT_WIDTH]
        line_label = line[CONTENT_WIDTH:].strip()

        if line_label == LABEL_END_OF_HEADER:
            break
        elif line_label == LABEL_COMMENT:
            comments.append(content.strip())
        elif LABEL_MARKER_NAME in line_label:
            geodetic_marker = GeodeticMarker(name=content[:20].strip())
        elif LABEL_MARKER_NUMBER in line_label:
            if geodetic_marker is not None:
                geodetic_marker = geodetic_marker.with_number(content[:20].strip())
            else:
                logging.debug("Ignoring MARKER NUMBER without MARKER NAME")
        elif LABEL_MARKER_TYPE in line_label:
            try:
                marker_type = MarkerType.parse(content[:20])
            except ValueError as e:
                logging.warning(f"Ignoring MARKER TYPE: {e}")
                continue
            if geodetic_marker is not None:
                geodetic_marker = geodetic_marker.with_marker_type(marker_type)
        elif LABEL_APPROX_POSITION_XYZ in line_label:
            xyz = parse_xyz(content, "APPROX POSITION")
            ground_position = GroundPosition.from_ecef_wgs84(xyz)
        elif LABEL_ANT_TYPE in line_label:
            model = content[:20].strip()
            serial_number = content[20:40].strip()
            rcvr_antenna = (rcvr_antenna or Antenna()).with_model(model).with_serial_number(serial_number)
        elif LABEL_ANTENNA_DELTA_XYZ in line_label:
            xyz = parse_xyz(content, "ANTENNA DELTA")
            rcvr_antenna = (rcvr_antenna or Antenna()).with_base_coordinates(xyz)
        elif LABEL_ANTENNA_DELTA_HEN in line_label:
            hen = parse_antenna_delta_hen(content)
            if hen is None:
                logging.warning(f"Skipping unreadable ANTENNA: DELTA H/E/N line: {content.rstrip()!r}")
                continue
            height, eastern, northern = hen
            rcvr_antenna = (
                (rcvr_antenna or Antenna())
                .with_height(height)
                .with_eastern_component(eastern)
                .with_northern_component(northern)
            )

    return Event(
        comments=tuple(comments),
        geodetic_marker=geodetic_marker,
        ground_position=ground_position,
        rcvr_antenna=rcvr_antenna,
    )


def format_line(content: str, label: str) -> str:
    return f"{content: <{CONTENT_WIDTH}}{label}"


def format_event_lines(event: Event) -> List[str]:
    """
    Renders the event block, one string per line without terminator.

    Comments and the antenna model / serial number are not written.
    """
    lines = []
    marker = event.geodetic_marker
    if marker is not None:
        lines.append(format_line(marker.name, LABEL_MARKER_NAME))
        if marker.number is not None:
            lines.append(format_line(marker.number, LABEL_MARKER_NUMBER))
    if event.ground_position is not None:
        lines.append(format_line(event.ground_position.format_xyz(), LABEL_APPROX_POSITION_XYZ))
    antenna = event.rcvr_antenna
    if antenna is not None:
        if antenna.coords is not None:
            x, y, z = antenna.coords
            lines.append(format_line(f"{x:14.4f}{y:14.4f}{z:14.4f}", LABEL_ANTENNA_DELTA_XYZ))
        height = antenna.height if antenna.height is not None else 0.0
        eastern = antenna.eastern if antenna.eastern is not None else 0.0
        northern = antenna.northern if antenna.northern is not None else 0.0
        lines.append(
            format_line(f"{height:14.4f}{eastern:14.4f}{northern:14.4f}", LABEL_ANTENNA_DELTA_HEN)
        )
    return lines


def format_event(event: Event) -> str:
    return "".join(f"{line}\n" for line in format_event_lines(event))


def event_line_count(event: Event) -> int:
    """Number of non-empty lines `format_event` writes for `event`."""
    text = format_event(event).strip()
    if not text:
        return 0
    return sum(1 for line in text.splitlines() if line.strip())
