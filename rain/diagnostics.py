"""
Manual diagnostics for terminal and font support.

Run:
  python -m rain.diagnostics
"""

import json
import os
from rain.charsets import CharacterSet
from rain.logger import log
from rain.settings import manager as settings

GRADIENT_SAMPLES = (0.0, 0.1, 0.3, 0.7, 1.0)


def collect_report(environ=None, rain_config=None):
    environ = os.environ if environ is None else environ
    rain_config = rain_config or settings.to_rain_config()

    colorterm = environ.get("COLORTERM", "")
    report = {
        "environment": {
            "TERM": environ.get("TERM", "NOT SET"),
            "LANG": environ.get("LANG", "NOT SET"),
            "COLORTERM": colorterm or "NOT SET",
            "truecolor": colorterm in ("truecolor", "24bit"),
        },
        "character_sets": {},
        "config": rain_config.to_dict(),
        "gradient": {},
    }

    for char_set in CharacterSet.all_sets():
        chars = char_set.get_characters()
        report["character_sets"][char_set.value] = {
            "count": len(chars),
            "sample": "".join(chars[:20]),
            "has_replacement": "\ufffd" in chars,
        }

    for pos in GRADIENT_SAMPLES:
        report["gradient"][str(pos)] = rain_config.color_scheme.get_color_with_alpha(pos)

    return report


def print_report(report):
    print("=== Terminal ===")
    print(json.dumps(report["environment"], indent=2))
    if not report["environment"]["truecolor"]:
        print("COLORTERM is not 'truecolor' - trail colors may be approximated.")

    # Boxes or question marks below mean the font is missing glyphs.
    print("\n=== Character sets ===")
    for name, info in report["character_sets"].items():
        flag = "  (contains U+FFFD)" if info["has_replacement"] else ""
        print(f"{name:<10} {info['count']:>5} glyphs  {info['sample']}{flag}")

    print("\n=== Configuration ===")
    print(json.dumps(report["config"], indent=2, ensure_ascii=False))

    print("\n=== Trail gradient ===")
    for pos, (r, g, b, a) in report["gradient"].items():
        print(f"{pos:>4}: RGB({r:3}, {g:3}, {b:3}) alpha {a:.2f}")


def main():
    try:
        print_report(collect_report())
    except Exception as e:
        log(f"Diagnostics failed: {e}", "error")
        raise


if __name__ == "__main__":
    main()
