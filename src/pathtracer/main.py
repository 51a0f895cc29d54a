# main.py
import argparse
import logging
import random
import sys
import threading
from typing import List, Optional
from pathtracer.camera.camera import Camera
from pathtracer.config import QUALITY_LEVELS, DEFAULT_QUALITY, RenderSettings, setup_logging
from pathtracer.renderer.image_io import save_png, write_ppm
from pathtracer.renderer.raytracer import CancellationToken, RenderCancelled, Renderer, stderr_progress
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer.main")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a sphere scene with a CPU path tracer and write a PPM image.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default=DEFAULT_QUALITY)
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, help="width / height")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum bounces per ray")
    parser.add_argument("--seed", type=int, help="random seed for a reproducible image")
    parser.add_argument("--aperture", type=float, help="lens aperture, 0 for a pinhole")
    parser.add_argument("--output", "-o", help="PPM output path (default: stdout)")
    parser.add_argument("--png", help="also save a PNG to this path")
    parser.add_argument("--time-limit", type=float, help="cancel the render after this many seconds")
    parser.add_argument("--no-progress", action="store_true", help="hide the scanline counter")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser

def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    return RenderSettings.from_quality(
        args.quality,
        width=args.width,
        aspect_ratio=args.aspect_ratio,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        seed=args.seed,
        scene=args.scene,
        aperture=args.aperture,
        output=args.output,
        png=args.png,
        time_limit=args.time_limit,
    )

def render(settings: RenderSettings, cancel_token: Optional[CancellationToken] = None,
           progress=None):
    """
    Build the configured scene and camera and render it to 8-bit pixels.
    """
    # The scene layout gets its own generator so it does not shift with the
    # number of samples drawn during rendering.
    scene_rng = random.Random(settings.seed)
    world, camera_params = build_scene(settings.scene, scene_rng)
    if settings.aperture is not None:
        camera_params["aperture"] = settings.aperture
    camera = Camera(aspect_ratio=settings.aspect_ratio, **camera_params)
    logger.debug("Camera at %r looking at %r, aperture %.3f",
                 camera.look_from, camera.look_at, camera.aperture)

    renderer = Renderer(settings.width, settings.height,
                        samples_per_pixel=settings.samples_per_pixel,
                        max_depth=settings.max_depth,
                        seed=settings.seed)
    return renderer.render_pixels(camera, world, cancel_token=cancel_token, progress=progress)

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        logger.error("Invalid settings: %s", e)
        return 2
    logger.info("Starting %r", settings)

    cancel_token = CancellationToken()
    timer = None
    if settings.time_limit is not None:
        timer = threading.Timer(settings.time_limit, cancel_token.cancel)
        timer.daemon = True
        timer.start()

    try:
        pixels = render(settings, cancel_token=cancel_token,
                        progress=None if args.no_progress else stderr_progress)
    except RenderCancelled as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        cancel_token.cancel()
        logger.error("Render interrupted")
        return 130
    finally:
        if timer is not None:
            timer.cancel()

    write_ppm(settings.output if settings.output else sys.stdout, pixels)
    if settings.png:
        save_png(settings.png, pixels)
    return 0

if __name__ == "__main__":
    sys.exit(main())
