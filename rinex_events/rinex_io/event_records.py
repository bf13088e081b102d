"""
Reading the event epochs of an observation body and writing a combined
timeline back out.

Numeric observation records are handled by the caller: their epochs are
skipped when reading, and they are rendered through a caller supplied
function when writing.
"""

import logging
from typing import Callable, Iterable, List, Optional

from ..time import OffsetEpoch, TimeScale
from .epoch_flag import EpochFlag
from .epoch_header import EPOCH_MARKER, format_epoch_header, parse_epoch_header
from .errors import EventLengthError, NotImplementedFlagError
from .event import Event, format_event_lines, parse_event
from .header import VersionLike
from .record import EpochKey, EventEntry, EventRecord, MixedTimeline, ObservationEntry


def parse_event_body(lines: List[str], flag: EpochFlag, declared: int) -> Event:
    """
    Parses the lines following an epoch header whose flag announces an event.
    """
    if not flag.has_event_body:
        raise NotImplementedFlagError(flag)
    if len(lines) != declared:
        raise EventLengthError(len(lines), declared)
    return parse_event("\n".join(lines))


def parse_event_records(
    input: Iterable[str],
    time_scale: TimeScale = TimeScale.GPS,
    strict: bool = True,
    leap_second_epochs: Optional[List[OffsetEpoch]] = None,
) -> EventRecord:
    """
    Collects the event epochs of a RINEX 3 observation body (the lines after
    `END OF HEADER`). Bodies of other epochs are skipped using the count
    declared in their epoch header.

    `leap_second_epochs` replaces the built-in TAI - UTC table when reading
    UTC or GLO epochs.
    """
    lines = [line.rstrip("\r\n") for line in input]
    records: EventRecord = {}

    i = 0
    while i < len(lines):
        line = lines[i]
        i += 1
        if not line.startswith(EPOCH_MARKER):
            if not line.strip():
                continue
            if strict:
                raise ValueError(f"Unexpected line outside of an epoch: {line!r}")
            logging.warning(f"Skipping line outside of an epoch: {line!r}")
            continue

        try:
            epoch, flag, num_lines, clock_offset = parse_epoch_header(
                line, time_scale, leap_second_epochs
            )
        except ValueError:
            if strict:
                raise
            logging.warning(f"Skipping unreadable epoch header: {line!r}")
            continue

        body: List[str] = []
        while len(body) < num_lines and i < len(lines) and not lines[i].startswith(EPOCH_MARKER):
            body.append(lines[i])
            i += 1
        if len(body) != num_lines:
            raise EventLengthError(len(body), num_lines)

        if not flag.has_event_body:
            continue

        key = (epoch, flag)
        if key in records:
            if strict:
                raise ValueError(f"Duplicate event at epoch {epoch} with flag {flag}")
            logging.warning(f"Replacing duplicate event at epoch {epoch} with flag {flag}")
        records[key] = (clock_offset, parse_event_body(body, flag, num_lines))

    return records


def format_timeline(
    timeline: MixedTimeline,
    header: VersionLike,
    format_observations: Callable[[EpochKey, ObservationEntry], List[str]],
) -> List[str]:
    """
    Renders every epoch of `timeline` in order, as lines without terminators.

    Event epochs are written as an epoch header followed by the event block;
    observation epochs are delegated to `format_observations`, which must
    return their complete lines (epoch header included).
    """
    lines = []
    for key, entry in timeline.items():
        if isinstance(entry, EventEntry):
            epoch, flag = key
            lines.append(
                format_epoch_header(epoch, flag, entry.clock_offset, entry.event, header).rstrip("\n")
            )
            lines.extend(format_event_lines(entry.event))
        else:
            lines.extend(format_observations(key, entry))
    return lines
