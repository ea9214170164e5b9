#!/usr/bin/env python

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

from contagion_sims.core import SimConfig, SimulationRecording
from contagion_sims.render import MatplotlibRenderer, RendererConfig
from contagion_sims.render.video import render_video


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a saved recording to MP4.")
    parser.add_argument("recording", type=str, help="Path to recording pickle (.pkl.xz).")
    parser.add_argument("--output", type=str, default=None,
                        help="Output MP4 path (default: next to the recording).")
    parser.add_argument("--frame_rate", type=int, default=60)
    parser.add_argument("--ticks_per_frame", type=int, default=5)
    parser.add_argument("--preview", action="store_true")
    args = parser.parse_args()

    recording_path = Path(args.recording)
    recording = SimulationRecording.load(recording_path)
    sim_config = SimConfig(**recording.meta["sim_config"])
    arena = sim_config.make_arena()

    output = Path(args.output) if args.output else recording_path.with_name("video.mp4")
    render_video(
        recording,
        arena,
        output_path=output,
        fps=args.frame_rate,
        ticks_per_frame=args.ticks_per_frame,
        renderer=MatplotlibRenderer(arena, RendererConfig(capacity=sim_config.capacity)),
        preview=args.preview,
    )
    print(f"Saved video to {output}")


if __name__ == "__main__":
    main()
