#!/usr/bin/env python3
"""Render the three-sphere scene.

Traces the default scene (or a scene loaded from JSON) and writes the image as
ASCII PPM to stdout, or to a file when --output is given. Progress goes to
stderr so that stdout can be redirected to a .ppm file.

Usage:
    python examples/render_three_spheres.py [options] > image.ppm

Options:
    --width WIDTH           Image width in pixels (default: 400)
    --aspect-ratio RATIO    Width divided by height (default: 16/9)
    --samples SAMPLES       Number of samples per pixel (default: 100)
    --max-depth DEPTH       Maximum number of bounces (default: 50)
    --seed SEED             Random seed for a reproducible render
    --scene SCENE           JSON scene description (default: three spheres)
    --output OUTPUT         Write to a .ppm or .png file instead of stdout
    --preview               Show the result in a Matplotlib window
    --quiet                 Suppress progress output

Example:
    python examples/render_three_spheres.py --width 200 --samples 20 --seed 1 --output spheres.png
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional

from pathtracer.camera.pinhole import DEFAULT_ASPECT_RATIO
from pathtracer.core.integrator import MAX_DEPTH
from pathtracer.core.render import RenderSettings, render_image
from pathtracer.preview.export import save_image, write_ppm
from pathtracer.scene.default_scene import build_default_scene
from pathtracer.scene.manager import SceneManager


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the three-sphere scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--aspect-ratio",
        type=float,
        default=DEFAULT_ASPECT_RATIO,
        help="Width divided by height (default: 16/9)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=100,
        help="Number of samples per pixel (default: 100)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Maximum number of bounces (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: fresh entropy)",
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene description (default: built-in three-sphere scene)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output .ppm or .png file (default: PPM on stdout)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the rendered image in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_three_spheres(args: argparse.Namespace) -> None:
    """Render according to parsed arguments and write the result.

    Args:
        args: Namespace returned by ``parse_args``.
    """
    settings = RenderSettings(
        image_width=args.width,
        aspect_ratio=args.aspect_ratio,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        seed=args.seed,
    )

    if args.scene is not None:
        manager = SceneManager.load_json(args.scene)
    else:
        manager = build_default_scene()
    camera = manager.make_camera(settings.aspect_ratio)

    if not args.quiet:
        print(
            f"Rendering {manager.get_sphere_count()} spheres at "
            f"{settings.image_width}x{settings.image_height}, "
            f"{settings.samples_per_pixel} SPP...",
            file=sys.stderr,
        )

    start_time = time.time()

    def progress_callback(remaining: int, total: int) -> None:
        if not args.quiet:
            print(f"\rScanlines remaining: {remaining}      ", end="", file=sys.stderr, flush=True)

    image = render_image(manager.scene, camera, settings, progress=progress_callback)

    if not args.quiet:
        print("\rOperation complete.      ", file=sys.stderr)

    if args.output is not None:
        save_image(image, args.output)
    else:
        write_ppm(image, sys.stdout)
        sys.stdout.flush()

    if not args.quiet:
        if args.output is not None:
            print(f"Saved to: {args.output}", file=sys.stderr)
        print(f"Total time: {time.time() - start_time:.2f}s", file=sys.stderr)

    if args.preview:
        from pathtracer.preview.display import show_preview

        show_preview(image, samples_per_pixel=settings.samples_per_pixel)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        render_three_spheres(args)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
