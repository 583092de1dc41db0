"""Digital rain in a desktop window or full-screen."""

import os
import sys

# Fix for 4K/High-DPI displays
os.environ["QT_AUTO_SCREEN_SCALE_FACTOR"] = "1"

from rain.cli import build_parser, format_available_options, resolve_config
from rain.logger import log
from rain.settings import manager as settings


def main(argv=None):
    parser = build_parser(__doc__)
    parser.add_argument("--fullscreen", action="store_true",
                        help="cover the whole primary screen")
    parser.add_argument("--width", type=int, help="window width in pixels")
    parser.add_argument("--height", type=int, help="window height in pixels")
    args = parser.parse_args(argv)

    if args.list:
        print(format_available_options())
        return 0

    width = args.width or settings.get("window_width")
    height = args.height or settings.get("window_height")
    try:
        rain_config = resolve_config(args, width, height, settings)
    except ValueError as e:
        parser.error(str(e))
    if args.save:
        settings.store_rain_config(rain_config)

    # Imported late so --list works without a display
    from ui.overlay import run_overlay
    try:
        return run_overlay(rain_config, settings=settings, fullscreen=args.fullscreen,
                           width=args.width, height=args.height, duration=args.duration)
    except Exception as e:
        log(f"Window front-end failed: {e}", "error")
        raise


if __name__ == "__main__":
    sys.exit(main())
