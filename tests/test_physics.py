import numpy as np
import pytest

from contagion_sims.core import (
    CollisionEvent,
    HitWallEvent,
    InfectionEvent,
    RecoveryEvent,
    SimConfig,
    Status,
    generate_subjects,
    step_subjects,
)

from helpers import ARENA, make

SICK_TIME = 50.0


def test_coincident_pair_healthy_first_infected_with_full_timer() -> None:
    healthy = make((250.0, 250.0), direction=(1.0, 0.0))
    sick = make((250.0, 250.0), direction=(0.0, 1.0), sick=True, sick_time=5.0)

    step_subjects([healthy, sick], ARENA, sick_time=SICK_TIME, dt=1.0)

    assert healthy.status is Status.SICK
    assert healthy.sick_time_remaining == SICK_TIME
    assert sick.status is Status.SICK
    assert sick.sick_time_remaining == 4.0


def test_coincident_pair_sick_first_both_sick_none_recovered() -> None:
    sick = make((250.0, 250.0), direction=(1.0, 0.0), sick=True, sick_time=5.0)
    healthy = make((250.0, 250.0), direction=(0.0, 1.0))

    events = step_subjects([sick, healthy], ARENA, sick_time=SICK_TIME, dt=1.0)

    assert sick.status is Status.SICK
    assert healthy.status is Status.SICK
    # infected during subject 0's turn, then decays in its own turn
    assert healthy.sick_time_remaining == SICK_TIME - 1.0
    infections = [e for e in events if isinstance(e, InfectionEvent)]
    assert [(e.a_id, e.b_id) for e in infections] == [(1, 0)]
    assert not any(isinstance(e, RecoveryEvent) for e in events)


def test_collision_moves_actor_back_and_flips_both_directions() -> None:
    a = make((250.0, 250.0), direction=(1.0, 0.0))
    b = make((250.0, 250.0), direction=(0.0, 1.0), frozen=True)

    events = step_subjects([a, b], ARENA, sick_time=SICK_TIME, dt=1.0)

    # candidate 251 -> flipped and pushed back by 2 * speed * dt
    np.testing.assert_allclose(a.pos, [249.0, 250.0])
    np.testing.assert_allclose(a.direction, [-1.0, 0.0])
    np.testing.assert_allclose(b.direction, [0.0, -1.0])
    np.testing.assert_allclose(b.pos, [250.0, 250.0])
    collisions = [e for e in events if isinstance(e, CollisionEvent)]
    assert len(collisions) == 1
    assert (collisions[0].a_id, collisions[0].b_id) == (0, 1)
    assert a.status is Status.HEALTHY and b.status is Status.HEALTHY


def test_collision_scan_does_not_stop_at_first_hit() -> None:
    mover = make((250.0, 250.0), direction=(1.0, 0.0))
    right = make((251.0, 250.0), direction=(0.0, 1.0), frozen=True)
    left = make((249.0, 250.0), direction=(0.0, 1.0), frozen=True)

    events = step_subjects([mover, right, left], ARENA, sick_time=SICK_TIME, dt=1.0)

    hits = [e for e in events if isinstance(e, CollisionEvent) and e.a_id == 0]
    assert [e.b_id for e in hits] == [1, 2]
    # flipped twice, so back to the original heading
    np.testing.assert_allclose(mover.direction, [1.0, 0.0])
    np.testing.assert_allclose(mover.pos, [251.0, 250.0])
    np.testing.assert_allclose(right.direction, [0.0, -1.0])
    np.testing.assert_allclose(left.direction, [0.0, -1.0])


def test_distant_subjects_do_not_collide() -> None:
    a = make((100.0, 100.0), direction=(1.0, 0.0), sick=True, sick_time=5.0)
    b = make((200.0, 200.0), direction=(0.0, 1.0))

    events = step_subjects([a, b], ARENA, sick_time=SICK_TIME, dt=1.0)

    np.testing.assert_allclose(a.pos, [101.0, 100.0])
    np.testing.assert_allclose(b.pos, [200.0, 201.0])
    assert b.status is Status.HEALTHY
    assert events == []


def test_contact_at_exactly_two_radii_counts() -> None:
    a = make((100.0, 100.0), direction=(1.0, 0.0), sick=True, sick_time=5.0)
    b = make((111.0, 100.0), direction=(0.0, 1.0), frozen=True)

    step_subjects([a, b], ARENA, sick_time=SICK_TIME, dt=1.0)

    assert b.status is Status.SICK


def test_recovered_subjects_are_immune() -> None:
    recovered = make((250.0, 250.0), direction=(1.0, 0.0))
    recovered.status = Status.RECOVERED
    sick = make((250.0, 250.0), direction=(0.0, 1.0), sick=True, sick_time=5.0)

    step_subjects([recovered, sick], ARENA, sick_time=SICK_TIME, dt=1.0)

    assert recovered.status is Status.RECOVERED


def test_sick_timer_running_out_recovers() -> None:
    subject = make((250.0, 250.0), sick=True, sick_time=0.5)

    events = step_subjects([subject], ARENA, sick_time=SICK_TIME, dt=1.0)

    assert subject.status is Status.RECOVERED
    # timer is not reset to the sentinel
    assert subject.sick_time_remaining == pytest.approx(-0.5)
    assert [type(e) for e in events] == [RecoveryEvent]


def test_timer_reaching_exactly_zero_stays_sick() -> None:
    subject = make((250.0, 250.0), sick=True, sick_time=1.0)

    step_subjects([subject], ARENA, sick_time=SICK_TIME, dt=1.0)

    assert subject.status is Status.SICK
    assert subject.sick_time_remaining == 0.0


def test_sick_subject_with_negative_timer_is_rejected() -> None:
    subject = make((250.0, 250.0), sick=True, sick_time=1.0)
    subject.sick_time_remaining = -0.1

    with pytest.raises(ValueError):
        step_subjects([subject], ARENA, sick_time=SICK_TIME, dt=1.0)


def test_frozen_subject_keeps_position_for_100_ticks() -> None:
    frozen = make((123.456, 321.123), direction=(0.6, 0.8), sick=True, sick_time=50.0, frozen=True)
    before = frozen.pos.tobytes()

    statuses = []
    for _ in range(100):
        step_subjects([frozen], ARENA, sick_time=SICK_TIME, dt=1.0)
        statuses.append(frozen.status)

    assert frozen.pos.tobytes() == before
    assert statuses[49] is Status.SICK
    assert statuses[50] is Status.RECOVERED
    assert frozen.status is Status.RECOVERED


def test_frozen_subject_is_an_obstacle_that_still_gets_infected() -> None:
    frozen = make((250.0, 250.0), direction=(0.0, 1.0), frozen=True)
    mover = make((245.0, 250.0), direction=(1.0, 0.0), sick=True, sick_time=20.0)
    before = frozen.pos.tobytes()

    for _ in range(10):
        step_subjects([frozen, mover], ARENA, sick_time=SICK_TIME, dt=1.0)

    assert frozen.pos.tobytes() == before
    assert frozen.status is Status.SICK


@pytest.mark.parametrize(
    "pos, direction, expected_pos, expected_dir, axes",
    [
        ((496.0, 250.0), (1.0, 0.0), (495.0, 250.0), (-1.0, 0.0), [0]),
        ((6.0, 250.0), (-1.0, 0.0), (7.0, 250.0), (1.0, 0.0), [0]),
        ((250.0, 496.0), (0.0, 1.0), (250.0, 495.0), (0.0, -1.0), [1]),
        ((250.0, 6.0), (0.0, -1.0), (250.0, 7.0), (0.0, 1.0), [1]),
    ],
)
def test_wall_reflection_flips_axis_and_pushes_back(pos, direction, expected_pos, expected_dir, axes) -> None:
    subject = make(pos, direction=direction)

    events = step_subjects([subject], ARENA, sick_time=SICK_TIME, dt=1.0)

    np.testing.assert_allclose(subject.pos, expected_pos)
    np.testing.assert_allclose(subject.direction, expected_dir)
    assert [e.axis for e in events if isinstance(e, HitWallEvent)] == axes


def test_corner_reflects_both_axes() -> None:
    d = np.array([1.0, 1.0]) / np.sqrt(2.0)
    subject = make((497.0, 497.0), direction=d, speed=1.0)

    events = step_subjects([subject], ARENA, sick_time=SICK_TIME, dt=1.0)

    np.testing.assert_allclose(subject.direction, -d)
    np.testing.assert_allclose(subject.pos, [497.0, 497.0] - d)
    assert sorted(e.axis for e in events if isinstance(e, HitWallEvent)) == [0, 1]
    assert np.linalg.norm(subject.direction) == pytest.approx(1.0)


def test_subject_well_inside_does_not_reflect() -> None:
    subject = make((250.0, 250.0), direction=(0.6, 0.8), speed=2.0)

    events = step_subjects([subject], ARENA, sick_time=SICK_TIME, dt=0.5)

    np.testing.assert_allclose(subject.pos, [250.6, 250.8])
    assert events == []


def test_status_never_regresses_and_directions_stay_unit() -> None:
    config = SimConfig(
        n_subjects=60,
        sick_percentage=0.2,
        freeze_percentage=0.3,
        radius=8.0,
        sick_time=40.0,
        minimal_speed=4.0,
        speed_scale=100.0,
        arena_size=200.0,
    )
    arena = config.make_arena()
    subjects = generate_subjects(config, arena, np.random.default_rng(7))
    order = {Status.HEALTHY: 0, Status.SICK: 1, Status.RECOVERED: 2}
    last = [order[s.status] for s in subjects]

    for _ in range(300):
        step_subjects(subjects, arena, sick_time=config.sick_time, dt=config.delta_t)
        now = [order[s.status] for s in subjects]
        assert all(n >= p for n, p in zip(now, last))
        last = now

    norms = np.array([np.linalg.norm(s.direction) for s in subjects])
    np.testing.assert_allclose(norms, 1.0)
    assert any(s.status is Status.RECOVERED for s in subjects)
