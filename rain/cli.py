"""
Command line options shared by the terminal and window front-ends.
"""

import argparse

from rain.charsets import CharacterSet
from rain.colors import ColorScheme
from rain.options import RainConfig
from rain.speed import RainSpeed


def _enum_arg(parser_fn):
    def parse(text):
        try:
            return parser_fn(text)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    return parse


def _positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def build_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("-c", "--charset", type=_enum_arg(CharacterSet.from_name),
                        help="character set (japanese, hindi, tamil, sinhala, korean, jawi, mixed)")
    parser.add_argument("-o", "--color", type=_enum_arg(ColorScheme.from_name),
                        help="color scheme (matrix-green, dark-blue, purple, ...)")
    parser.add_argument("-s", "--speed", type=_enum_arg(RainSpeed.from_name),
                        help="speed tier (very-slow, slow, medium, fast, very-fast)")
    parser.add_argument("-d", "--duration", type=_positive_int,
                        help="run for this many seconds, then exit")
    parser.add_argument("-l", "--list", action="store_true",
                        help="list available options and exit")
    parser.add_argument("--no-background", action="store_true",
                        help="disable the dimmer background depth layer")
    parser.add_argument("--save", action="store_true",
                        help="remember the chosen options for next time")
    return parser


def resolve_config(args, width: int, height: int, settings=None) -> RainConfig:
    """Merge command line choices over stored settings (or built-in defaults)."""
    base = settings.to_rain_config(width, height) if settings is not None else RainConfig().with_size(width, height)
    changes = {}
    if args.charset is not None:
        changes["character_set"] = args.charset
    if args.color is not None:
        changes["color_scheme"] = args.color
    if args.speed is not None:
        changes["speed"] = args.speed
    if args.no_background:
        changes["enable_background_layer"] = False
    return base.replace(**changes)


def format_available_options() -> str:
    lines = ["Digital Rain - Available Options", "", "Character Sets:"]
    for char_set in CharacterSet.all_sets():
        lines.append(f"  {char_set.value:<14} - {char_set.label}")
    lines += ["", "Color Schemes:"]
    for scheme in ColorScheme.all_schemes():
        lines.append(f"  {scheme.value:<14} - {scheme.label}")
    lines += ["", "Speed Settings:"]
    for speed in RainSpeed.all_speeds():
        lines.append(f"  {speed.value:<14} - {speed.update_interval_ms()} ms/tick, "
                     f"trails up to {speed.max_trail_length()}")
    lines += [
        "",
        "Examples:",
        "  main_tui.py",
        "  main_tui.py --charset korean --color purple --speed fast",
        "  main_tui.py -c hindi -o cyan -s slow --duration 30",
    ]
    return "\n".join(lines)
