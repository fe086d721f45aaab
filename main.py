"""
Tree Generator

Grows an animated forest of stochastic branching trees on a Cairo surface.

Configuration is loaded from config/generator.json (defaults if missing);
command-line flags override individual settings.

Modes:
    show   - Live matplotlib window, grows in real time until closed
    record - Render a fixed-length animation (.gif or .mp4) and final frame
"""

import argparse
import json
from dataclasses import replace

from config import load_config
from growth import TreeGenerator
from rendering import CairoSurface, record_animation, play_animation, save_frame


def build_generator(pipeline) -> TreeGenerator:
    render = pipeline.render
    surface = CairoSurface(
        render.width, render.height,
        background_color=render.background_color,
        antialiasing=render.antialiasing
    )
    return TreeGenerator(surface, pipeline.tree, background_color=render.background_color)


def record(pipeline, output_path: str = None):
    pipeline.create_output_dirs()
    output_path = output_path or str(pipeline.animation_path)

    generator = build_generator(pipeline)
    render = pipeline.render
    record_animation(generator, output_path, render.num_frames, fps=render.fps)
    generator.stop()

    save_frame(generator.surface, str(pipeline.final_frame_path))

    stats = generator.stats()
    metadata_path = pipeline.output_dir / 'trees_metadata.json'
    with open(metadata_path, 'w') as f:
        json.dump({'tree': pipeline.tree.to_dict(), 'render': render.to_dict(), 'stats': stats}, f, indent=2)
    print(f"Saved metadata to {metadata_path}")

    print(f"\nGrew {stats['segments']} segments in {stats['time_ms'] / 1000:.1f}s "
          f"({stats['spawns']} spawns, {stats['lineages_finished']} finished branches)")


def main():
    parser = argparse.ArgumentParser(description="Grow animated 2D trees.")
    parser.add_argument(
        '--mode',
        type=str,
        choices=['show', 'record'],
        default='show',
        help='show: live window, record: write an animation file (default: show)'
    )
    parser.add_argument('--config', type=str, default='config/generator.json',
                        help='Path to the JSON config file')
    parser.add_argument('--output', type=str, default=None,
                        help='Animation path for record mode (default: <output_dir>/trees.gif)')
    parser.add_argument('--duration', type=float, default=None, help='Recording length in seconds')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--colorful', action='store_true', help='Random colors for new trees')
    parser.add_argument('--no-fade', action='store_true', help='Disable the fade-out overlay')
    args = parser.parse_args()

    pipeline = load_config(args.config)

    tree_overrides = {}
    if args.seed is not None:
        tree_overrides['random_seed'] = args.seed
    if args.colorful:
        tree_overrides['colorful'] = True
    if args.no_fade:
        tree_overrides['fade_out'] = False
    if tree_overrides:
        pipeline.tree = replace(pipeline.tree, **tree_overrides)
    if args.duration is not None:
        pipeline.render = replace(pipeline.render, duration_seconds=args.duration)

    tree = pipeline.tree
    render = pipeline.render
    print(f"Surface: {render.width}x{render.height}")
    print(f"  Spawn interval: {tree.spawn_interval}ms (auto spawn: {tree.auto_spawn})")
    print(f"  Loss: {tree.loss}, new branch threshold: {tree.new_branch}")
    print(f"Mode: {args.mode}")
    print()

    if args.mode == 'show':
        play_animation(build_generator(pipeline), interval=int(render.frame_interval_ms))
    elif args.mode == 'record':
        record(pipeline, args.output)


if __name__ == '__main__':
    main()
