from rain.colors import ColorScheme
from rain.diagnostics import GRADIENT_SAMPLES, collect_report, print_report
from rain.options import RainConfig


class TestReport:
    def test_environment_flags(self):
        report = collect_report({"COLORTERM": "truecolor", "TERM": "xterm-256color"}, RainConfig())
        env = report["environment"]
        assert env["truecolor"] is True
        assert env["TERM"] == "xterm-256color"
        assert env["LANG"] == "NOT SET"

    def test_no_truecolor(self):
        report = collect_report({}, RainConfig())
        assert report["environment"]["truecolor"] is False

    def test_character_sets_listed(self):
        report = collect_report({}, RainConfig())
        sets = report["character_sets"]
        assert set(sets) == {"japanese", "hindi", "tamil", "sinhala", "korean", "jawi", "mixed"}
        assert all(info["count"] > 0 and not info["has_replacement"] for info in sets.values())

    def test_gradient_follows_scheme(self):
        report = collect_report({}, RainConfig(color_scheme=ColorScheme.CYAN))
        assert len(report["gradient"]) == len(GRADIENT_SAMPLES)
        assert report["gradient"]["0.0"] == (255, 255, 255, 1.0)
        assert report["config"]["color_scheme"] == "cyan"

    def test_print_report(self, capsys):
        print_report(collect_report({}, RainConfig()))
        out = capsys.readouterr().out
        assert "=== Character sets ===" in out
        assert "trail colors may be approximated" in out
