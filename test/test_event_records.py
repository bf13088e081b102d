from datetime import datetime

import pytest

from rinex_events import (
    Epoch,
    EpochFlag,
    Event,
    GeodeticMarker,
    HeaderContext,
    NotImplementedFlagError,
    OffsetEpoch,
    RinexVersion,
    TimeScale,
    combine,
    format_timeline,
    parse_event,
    parse_event_records,
)
from rinex_events.rinex_io import EventLengthError, ObservationEntry, parse_event_body

E0 = Epoch.parse("2022 01 09 00 00  0.0000000", TimeScale.GPS)
E1 = Epoch.parse("2022 01 09 00 00 30.0000000", TimeScale.GPS)

EVENT_LINES = [
    "STOP_04                                                     MARKER NAME",
    "  2715785.3091 -4504346.1482 -3595759.8391                  APPROX POSITION XYZ",
    "        1.4885        0.0000        0.0000                  ANTENNA: DELTA H/E/N",
]

BODY = [
    "> 2022 01 09 00 00  0.0000000  0  2",
    "G01  22345079.240   117424213.48008        48.850",
    "G03  25106377.980   131934909.06607        43.000",
    "> 2022 01 09 00 00  0.0000000  3  3",
    *EVENT_LINES,
    "> 2022 01 09 00 00 30.0000000  0  1",
    "G01  22345079.240   117424213.48008        48.850",
]


def test_parse_event_records() -> None:
    records = parse_event_records(BODY)
    assert list(records) == [(E0, EpochFlag.NEW_SITE_OCCUPATION)]
    clock_offset, event = records[(E0, EpochFlag.NEW_SITE_OCCUPATION)]
    assert clock_offset is None
    assert event == parse_event("\n".join(EVENT_LINES))
    assert event.geodetic_marker == GeodeticMarker(name="STOP_04")


def test_parse_event_records_accepts_line_terminators() -> None:
    records = parse_event_records(f"{line}\n" for line in BODY)
    assert len(records) == 1


def test_parse_event_records_time_scale() -> None:
    records = parse_event_records(BODY, time_scale=TimeScale.GAL)
    ((epoch, _),) = records
    assert epoch.time_scale == TimeScale.GAL
    assert epoch == E0


def test_parse_event_records_leap_second() -> None:
    body = ["> 2016 12 31 23 59 60.0000000  5  1", EVENT_LINES[0]]
    records = parse_event_records(body, time_scale=TimeScale.UTC)
    ((epoch, flag),) = records
    assert flag == EpochFlag.EXTERNAL_EVENT
    assert epoch.format() == "2016 12 31 23 59 60.0000000"
    assert epoch == Epoch.parse("2017 01 01 00 00 17.0000000", TimeScale.GPS)


def test_parse_event_records_leap_second_table() -> None:
    table = [OffsetEpoch(datetime(1972, 1, 1), 10)]
    body = ["> 2022 01 09 00 00  0.0000000  3  3", *EVENT_LINES]
    records = parse_event_records(body, time_scale=TimeScale.UTC, leap_second_epochs=table)
    ((epoch, _),) = records
    assert epoch == Epoch.parse("2022 01 09 00 00 10.0000000", TimeScale.TAI)


def test_event_body_interrupted_by_next_epoch() -> None:
    body = ["> 2022 01 09 00 00  0.0000000  3  3", *EVENT_LINES[:2], "> 2022 01 09 00 00 30.0000000  0  0"]
    with pytest.raises(EventLengthError) as excinfo:
        parse_event_records(body)
    assert (excinfo.value.actual, excinfo.value.declared) == (2, 3)


def test_event_body_truncated_at_end() -> None:
    with pytest.raises(EventLengthError):
        parse_event_records(["> 2022 01 09 00 00  0.0000000  5  4", *EVENT_LINES])


def test_unreadable_epoch_header() -> None:
    body = ["> 2022 01 09 00 00  0.0000000  9  0", *BODY]
    with pytest.raises(ValueError):
        parse_event_records(body)
    assert len(parse_event_records(body, strict=False)) == 1


def test_stray_line() -> None:
    body = ["G01  22345079.240", *BODY]
    with pytest.raises(ValueError):
        parse_event_records(body)
    assert len(parse_event_records(body, strict=False)) == 1


@pytest.mark.parametrize("flag", [EpochFlag.OK, EpochFlag.POWER_FAILURE, EpochFlag.CYCLE_SLIP])
def test_event_body_for_observation_flags(flag: EpochFlag) -> None:
    with pytest.raises(NotImplementedFlagError):
        parse_event_body(EVENT_LINES, flag, len(EVENT_LINES))


def test_event_body_length_mismatch() -> None:
    with pytest.raises(EventLengthError):
        parse_event_body(EVENT_LINES, EpochFlag.EXTERNAL_EVENT, 4)


def format_observations(key, entry: ObservationEntry):
    epoch, flag = key
    lines = [f"> {epoch.format():<29}{flag} {len(entry.observations):2d}"]
    lines.extend(f"{sat_id}{value:14.3f}" for sat_id, value in entry.observations.items())
    return lines


def test_format_timeline() -> None:
    observations = {
        (E0, EpochFlag.OK): (None, {"G01": 22345079.24}),
        (E1, EpochFlag.OK): (None, {"G01": 22345080.64, "G03": 25106377.98}),
    }
    event = parse_event("\n".join(EVENT_LINES))
    events = {(E0, EpochFlag.NEW_SITE_OCCUPATION): (None, event)}
    lines = format_timeline(combine(observations, events), HeaderContext(RinexVersion(3, 4)), format_observations)
    assert lines == [
        "> 2022 01 09 00 00  0.0000000  0  1",
        "G01  22345079.240",
        "> 2022 01 09 00 00  0.0000000  3  3",
        *EVENT_LINES,
        "> 2022 01 09 00 00 30.0000000  0  2",
        "G01  22345080.640",
        "G03  25106377.980",
    ]
    assert parse_event_records(lines) == events


def test_format_then_parse_with_clock_offset() -> None:
    event = Event(geodetic_marker=GeodeticMarker(name="MARC", number="10001M001"))
    events = {(E1, EpochFlag.EXTERNAL_EVENT): (0.25, event)}
    lines = format_timeline(combine({}, events), 3, format_observations)
    assert lines[0] == "> 2022 01 09 00 00 30.0000000  5  2       0.2500"
    assert parse_event_records(lines) == events
