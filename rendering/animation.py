"""
Animation drivers for a running TreeGenerator.

Both drivers advance the generator's scheduler once per frame: the recorder
by a fixed frame interval (fast, exact), the live viewer by the wall-clock
time elapsed since the previous frame.
"""

import time
from pathlib import Path
from typing import List, Optional, Tuple

import imageio
import imageio.v3 as iio
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation
from tqdm import tqdm


def collect_frames(generator, num_frames: int, frame_interval_ms: float,
                   show_progress: bool = True) -> List[np.ndarray]:
    """Advance the generator frame by frame and snapshot the surface after each."""
    if not generator.running:
        generator.start()

    frames = []
    for _ in tqdm(range(num_frames), desc="Growing trees", disable=not show_progress):
        generator.scheduler.advance(frame_interval_ms)
        frames.append(generator.surface.to_numpy()[:, :, :3])
    return frames


def save_animation(frames: List[np.ndarray], output_path: str, fps: int = 30):
    if not frames:
        print("No frames to save")
        return
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() == '.gif':
        iio.imwrite(path, np.stack(frames), duration=1000.0 / fps, loop=0)
    else:
        imageio.mimsave(str(path), frames, fps=fps)
    print(f"  Saved animation: {path} ({len(frames)} frames)")


def save_frame(surface, output_path: str):
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    imageio.imwrite(str(path), surface.to_numpy())
    print(f"  Saved frame: {path}")


def record_animation(generator, output_path: str, num_frames: int, fps: int = 30):
    frames = collect_frames(generator, num_frames, 1000.0 / fps)
    save_animation(frames, output_path, fps=fps)
    return frames


def play_animation(
    generator,
    interval: int = 33,
    figsize: Tuple[int, int] = (10, 8),
    max_step_ms: Optional[float] = 250.0
) -> FuncAnimation:
    """
    Show the growing trees live in a matplotlib window.

    max_step_ms caps how far the clock jumps after a stall (window drag,
    breakpoint) so the scheduler does not fire a burst of stale timers.
    """
    if not generator.running:
        generator.start()

    surface = generator.surface
    fig, ax = plt.subplots(figsize=figsize)
    image = ax.imshow(surface.to_numpy(), origin='upper')
    ax.set_axis_off()
    fig.tight_layout()

    last = [time.perf_counter()]

    def update(_frame):
        now = time.perf_counter()
        elapsed_ms = (now - last[0]) * 1000.0
        last[0] = now
        if max_step_ms is not None:
            elapsed_ms = min(elapsed_ms, max_step_ms)
        generator.scheduler.advance(elapsed_ms)
        image.set_data(surface.to_numpy())
        return [image]

    anim = FuncAnimation(
        fig, update,
        interval=interval,
        blit=True,
        cache_frame_data=False
    )

    def on_close(_event):
        generator.stop()
        stats = generator.stats()
        print(f"Stopped after {stats['time_ms'] / 1000:.1f}s: {stats['segments']} segments, "
              f"{stats['spawns']} spawns")

    fig.canvas.mpl_connect('close_event', on_close)
    plt.show()
    return anim
