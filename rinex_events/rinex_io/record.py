"""
Epoch-keyed record collections and the combined observation / event timeline.

The observation and event records are typically produced by separate
passes over the same file. `combine` merges them into one read-only,
epoch-ordered view. Entries of the view reference the payloads of the
source records without copying them, so the source records must not be
modified while a view built from them is in use; build a new view after
any change.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from ..time import Epoch
from .epoch_flag import EpochFlag
from .errors import CombinationError
from .event import Event

EpochKey = Tuple[Epoch, EpochFlag]

# (epoch, flag) -> (receiver clock offset, satellite -> signal -> value)
ObservationRecord = Dict[EpochKey, Tuple[Optional[float], Any]]
# (epoch, flag) -> (receiver clock offset, event)
EventRecord = Dict[EpochKey, Tuple[Optional[float], Event]]


@dataclass(frozen=True, eq=False)
class ObservationEntry:
    clock_offset: Optional[float]
    observations: Any


@dataclass(frozen=True, eq=False)
class EventEntry:
    clock_offset: Optional[float]
    event: Event


TimelineEntry = Union[ObservationEntry, EventEntry]


class MixedTimeline(Mapping):
    """
    Read-only mapping (epoch, flag) -> `ObservationEntry` | `EventEntry`,
    iterated in (epoch, flag) order.
    """

    def __init__(self, entries: Dict[EpochKey, TimelineEntry]):
        self._keys: List[EpochKey] = sorted(entries)
        self._entries = entries

    def __getitem__(self, key: EpochKey) -> TimelineEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[EpochKey]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"MixedTimeline({len(self)} entries)"

    def observations(self) -> Iterator[Tuple[EpochKey, ObservationEntry]]:
        for key in self._keys:
            entry = self._entries[key]
            if isinstance(entry, ObservationEntry):
                yield key, entry

    def events(self) -> Iterator[Tuple[EpochKey, EventEntry]]:
        for key in self._keys:
            entry = self._entries[key]
            if isinstance(entry, EventEntry):
                yield key, entry


def combine(observations: ObservationRecord, events: EventRecord) -> MixedTimeline:
    """
    Merges observation and event records into one timeline.

    Raises `CombinationError` if an (epoch, flag) key is present in both.
    """
    entries: Dict[EpochKey, TimelineEntry] = {
        key: ObservationEntry(clock_offset, payload)
        for key, (clock_offset, payload) in observations.items()
    }
    for key, (clock_offset, event) in events.items():
        if key in entries:
            epoch, flag = key
            raise CombinationError(epoch, flag)
        entries[key] = EventEntry(clock_offset, event)
    return MixedTimeline(entries)
