# scripts/main.py

from __future__ import annotations

from pathlib import Path
from dataclasses import asdict

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from contagion_sims.core import World, run_simulation
from contagion_sims.render import MatplotlibRenderer, RendererConfig, plot_curves
from contagion_sims.utils.cli import build_parser, config_from_args
from contagion_sims.utils.io import unique_path
from contagion_sims.utils.random import seed_all

PROJECT_ROOT = Path(__file__).parent.parent


def main():
    parser = build_parser()
    args = parser.parse_args()
    sim_config = config_from_args(args)

    seed_all(args.seed)

    # 1. Build the population
    world = World.from_config(sim_config)

    # 2. Run simulation and record
    recording = run_simulation(world, args.ticks, log_interval=args.log_interval)
    print("Simulation completed.")
    recording.meta = {
        "sim_config": asdict(sim_config),
        "seed": args.seed,
        "engine_version": "0.1.0",
    }

    # 3. Output paths
    exp_dir = PROJECT_ROOT / args.outdir / args.exp_name
    exp_dir.mkdir(exist_ok=True, parents=True)
    recording.save(unique_path(exp_dir / "recording.pkl.xz"))

    fig, _ = plot_curves(recording.curves(capacity=sim_config.capacity))
    curves_path = unique_path(exp_dir / "curves.png")
    fig.savefig(curves_path, dpi=150)
    plt.close(fig)
    print(f"Saved epidemic curves to {curves_path}")

    # 4. Video
    if not args.no_video:
        from contagion_sims.render.video import render_video

        renderer = MatplotlibRenderer(world.arena, RendererConfig(capacity=sim_config.capacity))
        video_path = render_video(
            recording,
            world.arena,
            output_path=unique_path(exp_dir / "video.mp4"),
            fps=args.frame_rate,
            ticks_per_frame=args.ticks_per_frame,
            renderer=renderer,
            preview=args.preview,
        )
        print(f"Saved video to {video_path}")


if __name__ == "__main__":
    main()
