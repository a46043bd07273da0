"""
CLI entry point for previewing the Game of Life generator.

Usage:
    ledcanvas-life [options]
    python -m ledcanvas [options]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from ledcanvas.audio.loudness import EnvelopeParams, FixedLoudness, ManifestLoudness
from ledcanvas.core.buffer import gray_to_packed
from ledcanvas.effect.voluminize import Voluminize
from ledcanvas.generator.life import GameOfLife, LifeConfig, SeedMode
from ledcanvas.io.preview import PreviewConfig, save_gif, to_image


def _progress_bar(current: int, total: int, width: int = 35):
    """Print a progress bar to stdout."""
    pct = current / max(total, 1) * 100
    filled = int(width * current / max(total, 1))
    bar = "#" * filled + "-" * (width - filled)
    if sys.stdout.isatty():
        sys.stdout.write(f"\r[{bar}] {pct:5.1f}%  frame {current}/{total}")
        sys.stdout.flush()
        if current >= total:
            sys.stdout.write("\n")
    else:
        if current % max(1, total // 20) == 0 or current >= total:
            print(f"{pct:5.1f}%  frame {current}/{total}", flush=True)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledcanvas-life",
        description="Render the Game of Life generator to an animated GIF preview",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("life.gif"),
        help="Output GIF path (default: life.gif)",
    )

    # Resolution
    parser.add_argument("--width", type=int, default=64, help="Generator buffer width (default: 64)")
    parser.add_argument("--height", type=int, default=64, help="Generator buffer height (default: 64)")
    parser.add_argument("--board-width", type=int, default=8, help="Life board width (default: 8)")
    parser.add_argument("--board-height", type=int, default=8, help="Life board height (default: 8)")

    # Animation
    parser.add_argument("-n", "--frames", type=_non_negative_int, default=120, help="Frames to render (default: 120)")
    parser.add_argument(
        "--speed", type=_non_negative_int, default=1,
        help="Generations per frame (default: 1)",
    )
    parser.add_argument(
        "--seed-mode", type=str, default="random",
        choices=["random", "glider"],
        help="Initial board population (default: random)",
    )
    parser.add_argument("--no-reseed", action="store_true", help="Do not reseed a stalled board")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    # Loudness
    parser.add_argument(
        "--loudness", type=float, default=None,
        help="Scale brightness by a fixed loudness in [0, 1]",
    )
    parser.add_argument(
        "--manifest", type=Path, default=None,
        help="Audio-analysis manifest JSON driving the brightness per frame",
    )
    parser.add_argument(
        "--release-ms", type=float, default=0.0,
        help="Release time applied to the manifest loudness (default: 0, no smoothing)",
    )

    # Output
    parser.add_argument("--scale", type=_positive_int, default=4, help="Pixel upscale factor (default: 4)")
    parser.add_argument("-f", "--fps", type=_positive_int, default=30, help="GIF frame rate (default: 30)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.manifest is not None and not args.manifest.exists():
        print(f"Error: Manifest not found: {args.manifest}", file=sys.stderr)
        sys.exit(1)

    config = LifeConfig(
        board_width=args.board_width,
        board_height=args.board_height,
        seed_mode=SeedMode[args.seed_mode.upper()],
        reseed_on_stasis=not args.no_reseed,
    )
    preview = PreviewConfig(scale=args.scale, fps=args.fps)

    try:
        generator = GameOfLife(args.width, args.height, config, seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    loudness = None
    if args.manifest is not None:
        envelope = EnvelopeParams(release_ms=args.release_ms) if args.release_ms > 0 else None
        try:
            loudness = ManifestLoudness.from_manifest(args.manifest, envelope=envelope, loop=True)
        except (OSError, ValueError) as e:
            print(f"Error: Invalid manifest {args.manifest}: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Loaded loudness track: {len(loudness)} frames @ {loudness.fps}fps")
    elif args.loudness is not None:
        loudness = FixedLoudness(args.loudness)

    effect = Voluminize(loudness, buffer_size=generator.size) if loudness is not None else None

    print(f"Rendering {args.frames} frames at {args.width}x{args.height} "
          f"(board {args.board_width}x{args.board_height}, speed {args.speed})")
    t0 = time.time()

    images = []
    for i in range(args.frames):
        generator.update(args.speed)
        frame = gray_to_packed(generator.buffer)
        if isinstance(loudness, ManifestLoudness):
            # Track and preview may run at different frame rates
            loudness.seek_time(i / preview.fps)
        if effect is not None:
            frame = effect.apply(frame)
        images.append(to_image(frame, args.width, args.height, preview.scale))
        _progress_bar(i + 1, args.frames)

    generator.close()

    if not images:
        print("Nothing to render")
        return

    output = save_gif(images, args.output, fps=preview.fps)
    elapsed = time.time() - t0

    print(f"\nDone! Rendered in {elapsed:.1f}s")
    print(f"  Output: {output}")


if __name__ == "__main__":
    main()
