from typing import List, Optional, Tuple

from ..time import Epoch, OffsetEpoch, TimeScale
from .epoch_flag import EpochFlag
from .errors import UnsupportedVersionError
from .event import Event, event_line_count
from .header import VersionLike, major_version_of

EPOCH_MARKER = ">"
EPOCH_FIELD_WIDTH = 29


def format_epoch_header(
    epoch: Epoch,
    flag: EpochFlag,
    clock_offset: Optional[float],
    event: Event,
    header: VersionLike,
) -> str:
    """
    Formats the line introducing an event epoch, e.g.
    `> 2022 01 09 00 00  0.0000000  3  3`.

    The line count is always recomputed from the formatted event so that it
    matches the lines written after it.
    """
    major_version = major_version_of(header)
    if major_version < 3:
        raise UnsupportedVersionError(major_version)

    num_lines = event_line_count(event)
    line = f"{EPOCH_MARKER} {epoch.format(major_version): <{EPOCH_FIELD_WIDTH}}{flag} {num_lines:2d}"
    if clock_offset is not None:
        line += f"{clock_offset:13.4f}"
    return line.rstrip() + "\n"


def parse_epoch_header(
    line: str,
    time_scale: TimeScale = TimeScale.GPS,
    leap_second_epochs: Optional[List[OffsetEpoch]] = None,
) -> Tuple[Epoch, EpochFlag, int, Optional[float]]:
    """
    Reads a RINEX 3 epoch line.

    Returns:
        (epoch, flag, number of following lines, receiver clock offset or None)
    """
    if not line.startswith(EPOCH_MARKER):
        raise ValueError(f"Error parsing epoch header: missing `{EPOCH_MARKER}` in {line!r}")
    try:
        epoch = Epoch.parse(line[2:29], time_scale, leap_second_epochs)
        flag = EpochFlag.parse(line[30:32])
        num_lines = int(line[32:35])
        clock_offset_str = line[35:].strip()
        clock_offset = float(clock_offset_str) if clock_offset_str else None
    except ValueError as e:
        raise ValueError(f"Error parsing epoch header: {e}") from e
    return epoch, flag, num_lines, clock_offset
