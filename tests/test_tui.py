import asyncio
import json

import pytest

from rain.colors import Color
from rain.engine import RainField
from rain.options import RainConfig
from rain.renderer import RenderChar, Renderer
from rain.settings import SettingsManager
from rain.speed import RainSpeed
from tui.app import RainTui
from tui.matrix import TerminalCanvas


CW = 16.0 * 0.6
CH = 16.0 * 1.2


def glyph(ch, col, row, color=Color.WHITE):
    return RenderChar(ch, col * CW, row * CH, color, 16.0)


class TestTerminalCanvas:
    def test_two_cells_per_column(self):
        canvas = TerminalCanvas(21, 5)
        assert canvas.cols == 10
        assert canvas.rows == 5
        assert canvas.surface_width() == 96
        assert canvas.surface_height() == 96

    def test_is_a_renderer(self):
        assert isinstance(TerminalCanvas(10, 10), Renderer)

    def test_pixels_map_to_cells(self):
        canvas = TerminalCanvas(20, 5)
        canvas.draw_batch([glyph("A", 3, 2), glyph("B", 9, 4)])
        assert canvas.cells[2][3][0] == "A"
        assert canvas.cells[4][9][0] == "B"

    def test_out_of_bounds_dropped(self):
        canvas = TerminalCanvas(20, 5)
        canvas.draw_batch([glyph("A", 10, 0), glyph("B", 0, 5), glyph("C", -1, 0)])
        assert all(cell is None for row in canvas.cells for cell in row)

    def test_later_records_win(self):
        canvas = TerminalCanvas(20, 5)
        canvas.draw_batch([glyph("A", 1, 1), glyph("B", 1, 1)])
        assert canvas.cells[1][1][0] == "B"

    def test_clear_and_present(self):
        canvas = TerminalCanvas(20, 5)
        canvas.draw_batch([glyph("A", 1, 1)])
        canvas.clear(Color.BLACK)
        canvas.present()
        assert canvas.cells[1][1] is None
        assert canvas.frames == 1

    def test_shade_bands(self):
        base = Color(200, 100, 50, 1.0)
        assert TerminalCanvas.shade(base) == (200, 100, 50)
        mid = base.with_alpha(0.5)
        dimmed = mid.darken(0.6)
        assert TerminalCanvas.shade(mid) == (dimmed.r, dimmed.g, dimmed.b)
        faint = base.with_alpha(0.1)
        dark = faint.darken(0.3)
        assert TerminalCanvas.shade(faint) == (dark.r, dark.g, dark.b)

    def test_to_text(self):
        canvas = TerminalCanvas(4, 2)
        canvas.draw_batch([glyph("한", 0, 0), glyph("7", 1, 1)])
        text = canvas.to_text()
        assert text.plain == "한  \n  7 "
        assert text.no_wrap

    def test_field_columns_line_up(self):
        canvas = TerminalCanvas(80, 24)
        field = RainField(RainConfig().with_size(canvas.surface_width(), canvas.surface_height()))
        assert field.total_columns() == canvas.cols
        for _ in range(20):
            field.update()
        field.render(canvas)
        drawn = sum(1 for row in canvas.cells for cell in row if cell is not None)
        assert 0 < drawn <= len(field.get_render_data())

    def test_columns_line_up_at_every_width(self):
        for term_cols in range(2, 400):
            canvas = TerminalCanvas(term_cols, 10)
            field = RainField(RainConfig(enable_background_layer=False)
                              .with_size(canvas.surface_width(), canvas.surface_height()))
            assert field.total_columns() == canvas.cols, term_cols

    def test_surface_never_overshoots_grid(self):
        for rows in range(1, 200):
            canvas = TerminalCanvas(20, rows)
            assert canvas.surface_height() <= rows * CH
            assert canvas.surface_height() > (rows - 1) * CH


class TestRainTui:
    def run_keys(self, keys, settings=None):
        async def scenario():
            app = RainTui(RainConfig(), settings=settings)
            async with app.run_test(size=(40, 12)) as pilot:
                for key in keys:
                    await pilot.press(key)
                await pilot.pause(0.3)
                return app.matrix.rain_config
        return asyncio.run(scenario())

    def test_speed_and_depth_keys(self):
        cfg = self.run_keys(["s", "b"])
        assert cfg.speed is RainSpeed.FAST
        assert cfg.enable_background_layer is False

    def test_cycle_color_and_glyphs(self):
        cfg = self.run_keys(["c", "g"])
        assert cfg.color_scheme.value == "dark-blue"
        assert cfg.character_set.value == "hindi"

    def test_save_key_writes_settings(self, tmp_path):
        path = tmp_path / "user_settings.json"
        self.run_keys(["s", "w"], settings=SettingsManager(str(path)))
        assert json.loads(path.read_text(encoding="utf-8"))["speed"] == "fast"

    def test_surface_follows_terminal(self):
        cfg = self.run_keys([])
        assert cfg.screen_width > 1
        assert cfg.screen_height > 1
