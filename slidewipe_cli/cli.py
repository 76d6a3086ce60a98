"""
Slidewipe CLI - Main entry point.

Provides command-line access to the wipe geometry and renderer.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

from slidewipe_view.config import WipeConfig, WipeStyle
from slidewipe_view.geometry import Rect, compute_wipe_geometry
from slidewipe_view.logging import LogEvent, StructuredLogger, create_logger, set_log_level
from slidewipe_view.pipeline import WipeView, render_sweep
from slidewipe_view.rendering import load_image
from utils import get_target_run_folder

STYLE_OPTIONS = (
    ("indicator_image", Path),
    ("indicator_image_width", int),
    ("indicator_image_color", str),
    ("indicator_color", str),
    ("indicator_width", int),
    ("divider_color", str),
    ("divider_width", int),
    ("initial_progress", float),
)


def parse_size(value: str) -> Tuple[int, int]:
    """Parse "WIDTHxHEIGHT" (e.g. 1280x720)."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Size must look like 1280x720, got {value!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Size must be positive, got {value!r}")
    return width, height


def build_style(args: argparse.Namespace, base: Optional[WipeStyle] = None) -> WipeStyle:
    """Apply --style flags on top of a base style (YAML or defaults)."""
    style = base or WipeStyle()
    overrides = {
        name: getattr(args, name)
        for name, _ in STYLE_OPTIONS
        if getattr(args, name, None) is not None
    }
    return style.replace(**overrides) if overrides else style


def resolve_inputs(
    args: argparse.Namespace,
    logger: StructuredLogger,
) -> Tuple[Path, Path, Optional[Tuple[int, int]], WipeStyle]:
    """
    Merge the optional YAML config with command-line arguments.

    Command-line values win over the config file.
    """
    config: Optional[WipeConfig] = None
    if args.config:
        try:
            config = WipeConfig.from_yaml(Path(args.config))
        except (FileNotFoundError, ValueError) as e:
            logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Config rejected",
                exc_info=e,
                metadata={'path': str(args.config)},
            )
            raise
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Config loaded",
            metadata={
                'path': str(args.config),
                'lhs_path': str(config.lhs_path),
                'rhs_path': str(config.rhs_path),
                'frame_resolution_wh': config.frame_resolution_wh,
            },
        )

    lhs = args.lhs or (config.lhs_path if config else None)
    rhs = args.rhs or (config.rhs_path if config else None)
    if lhs is None or rhs is None:
        raise ValueError("Both lhs and rhs images are required (arguments or --config)")

    size_wh = args.size or (config.frame_resolution_wh if config else None)
    style = build_style(args, config.style if config else None)
    return Path(lhs), Path(rhs), size_wh, style


def cmd_geometry(args: argparse.Namespace) -> None:
    rect = Rect(
        min_x=args.min_x,
        min_y=args.min_y,
        max_x=args.min_x + args.width,
        max_y=args.min_y + args.height,
    )
    geometry = compute_wipe_geometry(rect, args.progress)
    print(json.dumps(geometry.to_dict(), indent=2))


def cmd_render(args: argparse.Namespace, logger) -> None:
    import cv2

    lhs_path, rhs_path, size_wh, style = resolve_inputs(args, logger)
    lhs = load_image(lhs_path, logger)
    rhs = load_image(rhs_path, logger)

    view = WipeView(style=style)
    if args.progress is not None:
        view.set_progress(args.progress)
    frame = view.render(lhs, rhs, size_wh=size_wh)

    output = args.output or f"{get_target_run_folder(application_name='render', root=args.runs_dir)}/wipe.png"
    Path(output).parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(output), frame):
        raise ValueError(f"Could not write image: {output}")
    print(f"✓ Wipe rendered at progress {view.progress:.3f}. Output: {output}")


def cmd_sweep(args: argparse.Namespace, logger) -> None:
    lhs_path, rhs_path, size_wh, style = resolve_inputs(args, logger)
    lhs = load_image(lhs_path, logger)
    rhs = load_image(rhs_path, logger)

    output = args.output or f"{get_target_run_folder(application_name='sweep', root=args.runs_dir)}/sweep.mp4"
    render_sweep(
        WipeView(style=style),
        lhs,
        rhs,
        output_path=str(output),
        frames=args.frames,
        start=args.start,
        end=args.end,
        fps=args.fps,
        size_wh=size_wh,
    )
    print(f"✓ Sweep completed. Output: {output}")


def cmd_interactive(args: argparse.Namespace, logger) -> None:
    from slidewipe_view.interactive import InteractiveSession

    lhs_path, rhs_path, size_wh, style = resolve_inputs(args, logger)
    lhs = load_image(lhs_path, logger)
    rhs = load_image(rhs_path, logger)

    session = InteractiveSession(WipeView(style=style), lhs, rhs, size_wh=size_wh)
    progress = session.run()
    print(f"Final progress: {progress:.3f}")


def add_image_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('lhs', nargs='?', help='Image revealed below the cut line')
    parser.add_argument('rhs', nargs='?', help='Base image')
    parser.add_argument('--config', help='Path to wipe config YAML')
    parser.add_argument('--size', type=parse_size, help='Output size WIDTHxHEIGHT (default: lhs size)')

    style = parser.add_argument_group('style (overrides config)')
    for name, kind in STYLE_OPTIONS:
        style.add_argument(f"--{name.replace('_', '-')}", dest=name, type=kind, default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slidewipe",
        description="Slidewipe - Diagonal before/after wipe comparison",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Cut geometry as JSON
  slidewipe geometry --width 100 --height 50 --progress 0.5

  # Still image at a given progress
  slidewipe render before.jpg after.jpg --progress 0.3 --output wipe.png

  # From a YAML config
  slidewipe render --config config/wipe.yaml

  # Video sweeping the cut line across the frame
  slidewipe sweep before.jpg after.jpg --frames 90 --fps 30

  # Drag the cut line with the mouse
  slidewipe interactive before.jpg after.jpg
"""
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for JSON logs on stderr (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    geometry = subparsers.add_parser('geometry', help='Print cut geometry as JSON')
    geometry.add_argument('--width', type=float, required=True)
    geometry.add_argument('--height', type=float, required=True)
    geometry.add_argument('--progress', type=float, default=0.5)
    geometry.add_argument('--min-x', type=float, default=0.0)
    geometry.add_argument('--min-y', type=float, default=0.0)

    render = subparsers.add_parser('render', help='Render one wipe frame to an image')
    add_image_arguments(render)
    render.add_argument('--progress', type=float, help='Progress (default: style initial_progress)')
    render.add_argument('--output', help='Output image path')
    render.add_argument('--runs-dir', default='./runs', help='Root of timestamped output folders (default: ./runs)')

    sweep = subparsers.add_parser('sweep', help='Render a progress sweep to a video')
    add_image_arguments(sweep)
    sweep.add_argument('--frames', type=int, default=60)
    sweep.add_argument('--start', type=float, default=0.0)
    sweep.add_argument('--end', type=float, default=1.0)
    sweep.add_argument('--fps', type=int, default=30)
    sweep.add_argument('--output', help='Output video path')
    sweep.add_argument('--runs-dir', default='./runs', help='Root of timestamped output folders (default: ./runs)')

    interactive = subparsers.add_parser('interactive', help='Drag the wipe in a window')
    add_image_arguments(interactive)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    set_log_level(getattr(logging, args.log_level))
    logger = create_logger("cli")

    try:
        if args.command == 'geometry':
            cmd_geometry(args)
        elif args.command == 'render':
            cmd_render(args, logger)
        elif args.command == 'sweep':
            cmd_sweep(args, logger)
        elif args.command == 'interactive':
            cmd_interactive(args, logger)

    except Exception as e:
        logger.error(
            event=LogEvent.CLI_ERROR,
            message=f"{args.command} failed",
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
