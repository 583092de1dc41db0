"""Digital rain in the terminal."""

import sys

from rain.cli import build_parser, format_available_options, resolve_config
from rain.logger import log
from rain.settings import manager as settings

from tui.app import RainTui


def main(argv=None):
    parser = build_parser(__doc__)
    args = parser.parse_args(argv)

    if args.list:
        print(format_available_options())
        return 0

    # Real size is picked up from the widget on the first tick
    rain_config = resolve_config(args, 1, 1, settings)
    if args.save:
        settings.store_rain_config(rain_config)

    app = RainTui(rain_config, settings=settings, duration=args.duration)
    try:
        app.run()
    except Exception as e:
        log(f"Terminal front-end failed: {e}", "error")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
