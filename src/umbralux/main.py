# main.py
import argparse
import logging
import sys
from typing import List, Optional

from umbralux.camera.camera import Camera
from umbralux.config import LOG_SETTINGS, RENDER_SETTINGS
from umbralux.core.matrix import MatrixError
from umbralux.logging_config import setup_logging
from umbralux.renderer.image_io import export_image
from umbralux.scenes import SCENES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render one of the umbralux demo scenes")
    parser.add_argument("scene", nargs="?", default="spheres-and-planes",
                        choices=sorted(SCENES), help="Scene to render")
    parser.add_argument("--width", type=int, default=None,
                        help="Image width in pixels")
    parser.add_argument("--height", type=int, default=None,
                        help="Image height in pixels (defaults to the configured "
                             "height, or to the width when only --width is given)")
    parser.add_argument("--output", "-o", default=RENDER_SETTINGS['output'],
                        help="Output file (.ppm, .png, .jpg)")
    parser.add_argument("--workers", type=int, default=RENDER_SETTINGS['workers'],
                        help="Number of render threads")
    parser.add_argument("--preview", action="store_true",
                        help="Show the result in a pygame window")
    parser.add_argument("--log-level", default=LOG_SETTINGS['level'],
                        help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    width, height = args.width, args.height
    if width is None:
        width = RENDER_SETTINGS['width']
        if height is None:
            height = RENDER_SETTINGS['height']
    elif height is None:
        height = width
    if width <= 0 or height <= 0:
        logger.error("Image size must be positive, got %dx%d", width, height)
        return 2

    world, view = SCENES[args.scene]()
    logger.info("Scene '%s': %d objects", args.scene, len(world))

    camera = Camera(width, height, RENDER_SETTINGS['field_of_view'], view)

    try:
        canvas = camera.render(world, workers=args.workers)
        export_image(canvas, args.output)
    except MatrixError as e:
        logger.error("Malformed scene: %s", e)
        return 1
    except (OSError, ValueError) as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1

    if args.preview:
        from umbralux.renderer.preview import show
        show(canvas, title=f"umbralux - {args.scene}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
