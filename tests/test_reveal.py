from hex_map import Coordinate, RevealSchedule, generate_hex_map

COORDS = [Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, -1)]


def test_first_tile_waits_one_delay():
    schedule = RevealSchedule(COORDS, delay_seconds=0.5)

    assert schedule.latest is None
    assert schedule.update(0.25) == []
    assert schedule.update(0.25) == [Coordinate(0, 0)]
    assert schedule.latest == Coordinate(0, 0)


def test_long_frame_catches_up_several_tiles():
    schedule = RevealSchedule(COORDS, delay_seconds=0.5)
    schedule.update(0.5)

    assert schedule.update(1.0) == [Coordinate(0, 1), Coordinate(0, -1)]
    assert schedule.revealed == COORDS
    assert not schedule.done

    assert schedule.update(0.5) == []
    assert schedule.done
    assert schedule.update(10.0) == []


def test_non_positive_delay_reveals_everything_at_once():
    schedule = RevealSchedule(COORDS, delay_seconds=0)

    assert schedule.update(0.0) == COORDS
    assert schedule.done


def test_reveal_all_drains_the_rest():
    schedule = RevealSchedule(COORDS, delay_seconds=0.5)
    schedule.update(0.5)

    assert schedule.reveal_all() == COORDS[1:]
    assert schedule.done
    assert schedule.latest == Coordinate(0, -1)


def test_negative_frame_time_does_not_advance():
    schedule = RevealSchedule(COORDS, delay_seconds=0.5)

    assert schedule.update(-1.0) == []
    assert schedule.update(0.5) == [Coordinate(0, 0)]


def test_on_reveal_sees_each_tile():
    seen = []
    schedule = RevealSchedule(COORDS, delay_seconds=0.5, on_reveal=seen.append)
    schedule.reveal_all()

    assert seen == COORDS


def test_schedule_pulls_generation_only_as_tiles_come_due():
    discovered = []
    schedule = RevealSchedule(
        generate_hex_map(1.0, 5, on_discovered=discovered.append),
        delay_seconds=0.5,
    )

    schedule.update(0.25)
    assert discovered == []
    schedule.update(0.25)
    assert len(discovered) == 1

    schedule.reveal_all()
    assert len(discovered) == 91
    assert schedule.revealed == discovered
