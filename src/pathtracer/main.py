# main.py
import argparse
import logging
import sys

from pathtracer.config import QUALITY_LEVELS, RenderSettings
from pathtracer.renderer.ppm import write_ppm
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, build_scene, default_camera

logger = logging.getLogger("pathtracer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a sphere scene with a Monte Carlo path tracer and write a P3 PPM image.")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--samples", type=int, help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, help="Maximum number of bounces per path")
    parser.add_argument("--seed", type=int, help="Seed for sampling the image")
    parser.add_argument("--scene-seed", type=int, help="Seed for generating the scene")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random",
                        help="Scene to render (default: random)")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS),
                        help="Preset for size and samples; explicit options win")
    parser.add_argument("--workers", type=int, help="Number of worker processes")
    parser.add_argument("--vfov", type=float, help="Vertical field of view in degrees")
    parser.add_argument("--aperture", type=float, help="Lens aperture, 0 for a pinhole camera")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every rendered row")
    return parser


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    overrides = dict(width=args.width, height=args.height, samples=args.samples,
                     max_depth=args.max_depth, seed=args.seed, scene_seed=args.scene_seed,
                     workers=args.workers, vfov=args.vfov, aperture=args.aperture)
    if args.quality:
        return RenderSettings.from_quality(
            args.quality, **{k: v for k, v in overrides.items() if v is not None})
    return RenderSettings().with_overrides(**overrides)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # stdout may carry the image, so diagnostics go to stderr.
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                        stream=sys.stderr)

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    world = build_scene(args.scene, settings.scene_seed)
    camera = default_camera(settings)
    image = Renderer(settings).render(world, camera)

    if args.output is None:
        write_ppm(image, sys.stdout)
        sys.stdout.flush()
        return 0

    try:
        with open(args.output, "w") as f:
            write_ppm(image, f)
    except OSError as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1
    logger.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
