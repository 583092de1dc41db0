import pytest

from rain.charsets import CharacterSet
from rain.cli import build_parser, format_available_options, resolve_config
from rain.colors import ColorScheme
from rain.options import RainConfig
from rain.settings import SettingsManager
from rain.speed import RainSpeed


@pytest.fixture
def parser():
    return build_parser("Digital rain")


class TestParsing:
    def test_no_arguments(self, parser):
        args = parser.parse_args([])
        assert args.charset is None
        assert args.color is None
        assert args.speed is None
        assert args.duration is None
        assert not args.list
        assert not args.no_background

    def test_short_flags(self, parser):
        args = parser.parse_args(["-c", "korean", "-o", "purple", "-s", "fast", "-d", "30"])
        assert args.charset is CharacterSet.KOREAN
        assert args.color is ColorScheme.PURPLE
        assert args.speed is RainSpeed.FAST
        assert args.duration == 30

    def test_aliases_accepted(self, parser):
        args = parser.parse_args(["--charset", "jp", "--color", "green", "--speed", "vf"])
        assert args.charset is CharacterSet.JAPANESE
        assert args.color is ColorScheme.MATRIX_GREEN
        assert args.speed is RainSpeed.VERY_FAST

    @pytest.mark.parametrize("argv", [
        ["--speed", "warp"],
        ["--charset", "klingon"],
        ["--color", "mauve"],
        ["--duration", "0"],
        ["--duration", "soon"],
    ])
    def test_invalid_values_exit(self, parser, argv, capsys):
        with pytest.raises(SystemExit) as excinfo:
            parser.parse_args(argv)
        assert excinfo.value.code == 2
        assert "error" in capsys.readouterr().err


class TestResolve:
    def test_defaults_without_settings(self, parser):
        cfg = resolve_config(parser.parse_args([]), 800, 600)
        assert cfg == RainConfig(screen_width=800, screen_height=600)

    def test_flags_override_settings(self, parser, tmp_path):
        settings = SettingsManager(str(tmp_path / "s.json"))
        settings.store_rain_config(RainConfig(color_scheme=ColorScheme.RED, speed=RainSpeed.SLOW))
        cfg = resolve_config(parser.parse_args(["--speed", "fast", "--no-background"]), 640, 480, settings)
        assert cfg.color_scheme is ColorScheme.RED
        assert cfg.speed is RainSpeed.FAST
        assert cfg.enable_background_layer is False
        assert (cfg.screen_width, cfg.screen_height) == (640, 480)


class TestListing:
    def test_lists_every_option(self):
        text = format_available_options()
        for item in CharacterSet.all_sets() + ColorScheme.all_schemes() + RainSpeed.all_speeds():
            assert item.value in text
        assert "Examples:" in text
