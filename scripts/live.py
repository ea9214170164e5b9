# scripts/live.py

from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import Button, Slider

from contagion_sims.core import SimulationController
from contagion_sims.render import MatplotlibRenderer, RendererConfig
from contagion_sims.utils.cli import build_parser, config_from_args
from contagion_sims.utils.random import seed_all


def main():
    parser = build_parser()
    args = parser.parse_args()
    sim_config = config_from_args(args)
    seed_all(args.seed)

    controller = SimulationController(sim_config)
    renderer = MatplotlibRenderer(
        controller.world.arena,
        RendererConfig(figsize=(11.0, 6.5), capacity=sim_config.capacity),
    )
    fig = renderer.init_figure()
    fig.subplots_adjust(bottom=0.35)

    def redraw(snapshot):
        renderer.arena = controller.world.arena
        renderer.render_snapshot(snapshot)
        fig.canvas.draw_idle()

    controller.on_snapshot = redraw
    redraw(controller.world.snapshot())

    # --- controls, laid out like the original window ---
    def slider(row, label, vmin, vmax, init, step=1):
        ax = fig.add_axes([0.15, 0.25 - 0.035 * row, 0.5, 0.025])
        return Slider(ax, label, vmin, vmax, valinit=init, valstep=step)

    number = slider(0, "number", 1, 500, sim_config.n_subjects)
    sick = slider(1, "sick %", 0, 100, round(sim_config.sick_percentage * 100))
    freeze = slider(2, "freeze %", 0, 100, round(sim_config.freeze_percentage * 100))
    radius = slider(3, "radius", 1, 20, sim_config.radius)
    sick_time = slider(4, "sick time", 1, 200, round(sim_config.sick_time / 10))
    speed = slider(5, "speed", 1, 50, sim_config.minimal_speed)

    number.on_changed(controller.update_number)
    sick.on_changed(controller.update_sick_percentage)
    freeze.on_changed(controller.update_freeze_percentage)
    radius.on_changed(controller.update_radius)
    sick_time.on_changed(controller.update_sick_time)
    speed.on_changed(controller.update_speed)

    start_btn = Button(fig.add_axes([0.75, 0.2, 0.1, 0.05]), "Start")
    stop_btn = Button(fig.add_axes([0.75, 0.13, 0.1, 0.05]), "Stop")
    recreate_btn = Button(fig.add_axes([0.75, 0.06, 0.1, 0.05]), "Recreate")
    def on_start(_):
        if not controller.running:
            controller.start()

    def on_stop(_):
        if controller.running:
            controller.stop()

    start_btn.on_clicked(on_start)
    stop_btn.on_clicked(on_stop)
    recreate_btn.on_clicked(lambda _: controller.recreate())

    # the periodic driver; ticks are no-ops while stopped
    anim = FuncAnimation(
        fig,
        lambda _: controller.tick(),
        interval=sim_config.tick_interval_ms,
        cache_frame_data=False,
    )
    plt.show()
    return anim


if __name__ == "__main__":
    main()
