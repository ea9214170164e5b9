import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.patches import Circle

from contagion_sims.core import SimConfig, Status, World, run_simulation
from contagion_sims.render import MatplotlibRenderer, RendererConfig, plot_curves
from contagion_sims.themes import StatusColorTheme


def _world() -> World:
    return World.from_config(SimConfig(n_subjects=12, arena_size=100.0), generator=np.random.default_rng(1))


def test_status_colours_are_distinct() -> None:
    theme = StatusColorTheme()
    colours = {theme.color_for(s) for s in Status}
    assert len(colours) == 3


def test_theme_rejects_duplicate_colours() -> None:
    with pytest.raises(ValueError):
        StatusColorTheme(healthy="red", sick="red")


def test_renderer_draws_one_circle_per_subject() -> None:
    world = _world()
    renderer = MatplotlibRenderer(world.arena, RendererConfig())
    renderer.init_figure()

    renderer.render_snapshot(world.snapshot())
    world.step()
    renderer.render_snapshot(world.snapshot())

    circles = [p for p in renderer.ax.patches if isinstance(p, Circle)]
    assert len(circles) == 12
    theme = renderer.theme
    expected = sorted(theme.color_for(s.status) for s in renderer.last_snapshot.subjects)
    drawn = sorted(tuple(float(c) for c in p.get_facecolor()[:3]) for p in circles)
    np.testing.assert_allclose(drawn, expected)
    assert len(renderer.curve_ax.lines) == 4
    plt.close(renderer.fig)


def test_renderer_without_curves() -> None:
    world = _world()
    renderer = MatplotlibRenderer(world.arena, RendererConfig(show_curves=False))

    renderer.render_snapshot(world.snapshot())

    assert renderer.curve_ax is None
    assert renderer.fig is not None
    plt.close(renderer.fig)


def test_plot_curves_from_recording() -> None:
    recording = run_simulation(_world(), 20, log_interval=1000)

    fig, ax = plot_curves(recording.curves(capacity=0.3))

    assert [line.get_label() for line in ax.lines] == ["sick", "recovered", "total sick", "capacity"]
    assert len(ax.lines[0].get_xdata()) == 21
    plt.close(fig)


def test_world_plot() -> None:
    world = _world()
    fig, ax = world.plot()
    assert sum(isinstance(p, Circle) for p in ax.patches) == 12
    plt.close(fig)


def test_count_outside_flags_subjects_past_the_walls() -> None:
    world = _world()
    inside = [s.pos.copy() for s in world.subjects]
    for s, pos in zip(world.subjects, inside):
        s.pos = np.clip(pos, 10.0, 90.0)
    world.subjects[0].pos = np.array([99.0, 50.0])
    world.subjects[1].pos = np.array([50.0, -3.0])
    renderer = MatplotlibRenderer(world.arena, RendererConfig(show_curves=False))

    snapshot = world.snapshot()
    renderer.render_snapshot(snapshot)

    assert renderer.count_outside(snapshot) == 2
    assert renderer.ax.get_title().endswith("outside 2")
    plt.close(renderer.fig)


def test_arena_plot_limits_follow_bounds() -> None:
    world = _world()
    fig, ax = world.arena.plot(delta=5.0)
    xmin, xmax, ymin, ymax = world.arena.bounds()
    assert ax.get_xlim() == (xmin - 5.0, xmax + 5.0)
    assert ax.get_ylim() == (ymin - 5.0, ymax + 5.0)
    plt.close(fig)
