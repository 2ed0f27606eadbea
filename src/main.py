import argparse
import logging
import sys
from pathlib import Path

from core.logging_config import setup_logging
from renderer.cpu_renderer import Renderer, RenderSettings
from renderer.ppm import write_ppm
from scenes import SCENES

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Offline Monte-Carlo path tracer')
    parser.add_argument('--scene', choices=sorted(SCENES), default='cornell_box',
                        help='Scene to render')
    parser.add_argument('--width', '-w', type=int, default=None,
                        help='Image width in pixels (height follows the scene aspect ratio)')
    parser.add_argument('--samples', '-s', type=int, default=None,
                        help='Samples per pixel')
    parser.add_argument('--depth', '-d', type=int, default=None,
                        help='Maximum bounces per path')
    parser.add_argument('--workers', '-j', type=int, default=None,
                        help='Worker processes, 0 for one per CPU')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for a reproducible render')
    parser.add_argument('--output', '-o', default='-',
                        help='Output PPM file, - for stdout')
    parser.add_argument('--log-level', default=None,
                        help='DEBUG, INFO, WARNING, ERROR or CRITICAL')
    parser.add_argument('--log-file', type=Path, default=None,
                        help='Also log to this rotating file')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        settings = RenderSettings.from_env(
            samples_per_pixel=args.samples,
            max_depth=args.depth,
            workers=args.workers,
            seed=args.seed,
        )
        builder = SCENES[args.scene]
        kwargs = {'seed': settings.seed}
        if args.width is not None:
            kwargs['image_width'] = args.width
        scene, camera = builder(**kwargs)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    logger.info("Scene %s ready, image %dx%d", args.scene, camera.image_width, camera.image_height)
    image = Renderer(settings).render(scene, camera)

    if args.output == '-':
        write_ppm(image, sys.stdout)
        sys.stdout.flush()
    else:
        write_ppm(image, args.output)
        logger.info("Image saved: %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
