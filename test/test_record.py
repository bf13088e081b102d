import pytest

from rinex_events import (
    CombinationError,
    Epoch,
    EpochFlag,
    Event,
    EventEntry,
    GeodeticMarker,
    MixedTimeline,
    ObservationEntry,
    TimeScale,
    combine,
)

E0 = Epoch.parse("2022 01 09 00 00  0.0000000", TimeScale.GPS)
E1 = Epoch.parse("2022 01 09 00 00 30.0000000", TimeScale.GPS)
E2 = Epoch.parse("2022 01 09 00 01  0.0000000", TimeScale.GPS)

EVENT = Event(geodetic_marker=GeodeticMarker(name="MARC"))


def observations_at(*keys):
    return {key: (None, {"G01": {"C1C": 22345079.24}}) for key in keys}


def test_same_epoch_different_flags() -> None:
    observations = observations_at((E0, EpochFlag.OK))
    events = {(E0, EpochFlag.NEW_SITE_OCCUPATION): (None, EVENT)}
    timeline = combine(observations, events)
    assert len(timeline) == 2
    assert list(timeline) == [(E0, EpochFlag.OK), (E0, EpochFlag.NEW_SITE_OCCUPATION)]
    assert isinstance(timeline[(E0, EpochFlag.OK)], ObservationEntry)
    assert isinstance(timeline[(E0, EpochFlag.NEW_SITE_OCCUPATION)], EventEntry)


def test_event_before_observation_flag_order() -> None:
    observations = observations_at((E0, EpochFlag.CYCLE_SLIP))
    events = {(E0, EpochFlag.POWER_FAILURE): (None, EVENT)}
    assert next(iter(combine(observations, events))) == (E0, EpochFlag.POWER_FAILURE)


def test_ordering_follows_epochs_then_flags() -> None:
    observations = observations_at((E2, EpochFlag.OK), (E0, EpochFlag.OK), (E1, EpochFlag.OK))
    events = {
        (E1, EpochFlag.EXTERNAL_EVENT): (0.5, EVENT),
        (E0, EpochFlag.ANTENNA_BEING_MOVED): (None, EVENT),
    }
    timeline = combine(observations, events)
    assert list(timeline) == [
        (E0, EpochFlag.OK),
        (E0, EpochFlag.ANTENNA_BEING_MOVED),
        (E1, EpochFlag.OK),
        (E1, EpochFlag.EXTERNAL_EVENT),
        (E2, EpochFlag.OK),
    ]
    assert [key for key, _ in timeline.events()] == [
        (E0, EpochFlag.ANTENNA_BEING_MOVED),
        (E1, EpochFlag.EXTERNAL_EVENT),
    ]
    assert [key for key, _ in timeline.observations()] == [
        (E0, EpochFlag.OK),
        (E1, EpochFlag.OK),
        (E2, EpochFlag.OK),
    ]
    assert timeline[(E1, EpochFlag.EXTERNAL_EVENT)].clock_offset == 0.5


def test_collision_fails() -> None:
    observations = observations_at((E0, EpochFlag.OK), (E1, EpochFlag.NEW_SITE_OCCUPATION))
    events = {(E1, EpochFlag.NEW_SITE_OCCUPATION): (None, EVENT)}
    with pytest.raises(CombinationError) as excinfo:
        combine(observations, events)
    assert excinfo.value.epoch == E1
    assert excinfo.value.flag == EpochFlag.NEW_SITE_OCCUPATION


def test_collision_across_time_scales() -> None:
    # 2022-01-09 00:00:00 GPST is 00:00:19 TAI
    same_instant = Epoch.parse("2022 01 09 00 00 19.0000000", TimeScale.TAI)
    observations = observations_at((E0, EpochFlag.OK))
    events = {(same_instant, EpochFlag.OK): (None, EVENT)}
    with pytest.raises(CombinationError):
        combine(observations, events)


def test_payloads_are_not_copied() -> None:
    observations = observations_at((E0, EpochFlag.OK))
    events = {(E1, EpochFlag.NEW_SITE_OCCUPATION): (None, EVENT)}
    timeline = combine(observations, events)
    assert timeline[(E0, EpochFlag.OK)].observations is observations[(E0, EpochFlag.OK)][1]
    assert timeline[(E1, EpochFlag.NEW_SITE_OCCUPATION)].event is EVENT


def test_empty_sources() -> None:
    timeline = combine({}, {})
    assert isinstance(timeline, MixedTimeline)
    assert len(timeline) == 0
    assert list(timeline.items()) == []


def test_sources_are_left_untouched() -> None:
    observations = observations_at((E0, EpochFlag.OK))
    events = {(E1, EpochFlag.NEW_SITE_OCCUPATION): (None, EVENT)}
    combine(observations, events)
    assert list(observations) == [(E0, EpochFlag.OK)]
    assert list(events) == [(E1, EpochFlag.NEW_SITE_OCCUPATION)]
