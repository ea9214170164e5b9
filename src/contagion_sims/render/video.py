# src/contagion_sims/render/video.py

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
import shutil

import matplotlib.pyplot as plt
from matplotlib.animation import FFMpegWriter

from .renderer import MatplotlibRenderer, RendererConfig

if TYPE_CHECKING:
    from contagion_sims.core import SimulationRecording, SquareArena

PREVIEW_FFMPEG_ARGS = [
    "-crf", "35",
    "-preset", "ultrafast",
    "-pix_fmt", "yuv420p",
]
FINAL_FFMPEG_ARGS = [
    "-crf", "18",
    "-preset", "slow",
    "-pix_fmt", "yuv420p",
]


def render_video(
    recording: SimulationRecording,
    arena: SquareArena,
    *,
    output_path: str | Path,
    fps: int = 60,
    ticks_per_frame: int = 1,
    renderer: MatplotlibRenderer | None = None,
    bitrate: int | None = None,
    preview: bool = False,
    log_interval: int = 10,  # seconds of video
) -> Path:
    """
    Render a SimulationRecording to an MP4 using Matplotlib + ffmpeg,
    drawing every `ticks_per_frame`-th frame.
    """
    if shutil.which("ffmpeg") is None:
        raise RuntimeError(
            "ffmpeg not found. Install with: conda install -c conda-forge ffmpeg"
        )
    if ticks_per_frame < 1:
        raise ValueError(f"ticks_per_frame must be >= 1, got {ticks_per_frame}")
    if renderer is None:
        renderer = MatplotlibRenderer(arena, RendererConfig())

    output_path = Path(output_path)
    writer = FFMpegWriter(
        fps=fps,
        metadata={"artist": "contagion_sims"},
        bitrate=bitrate,
        extra_args=PREVIEW_FFMPEG_ARGS if preview else FINAL_FFMPEG_ARGS,
    )

    fig = renderer.init_figure()
    frames = recording.frames[::ticks_per_frame]
    with writer.saving(fig, str(output_path), renderer.config.dpi):
        for idx, frame in enumerate(frames):
            renderer.render_snapshot(frame)
            if (idx + 1) % (fps * log_interval) == 0:
                print(f"Rendered {(idx + 1) / fps:.1f} seconds of video...")
            writer.grab_frame()
    plt.close(fig)
    return output_path
