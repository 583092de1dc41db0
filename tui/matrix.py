import math
from textual.widget import Widget
from rich.cells import cell_len
from rich.text import Text
import config
from rain.colors import Color
from rain.engine import RainField
from rain.logger import log

# Every rain column gets two terminal cells so wide glyphs (Katakana, Hangul) line up
CELL_SPAN = 2


class TerminalCanvas:
    """
    Renderer over a grid of terminal cells.

    The engine thinks in pixels; one grid cell is exactly one engine glyph
    cell, so positions map back without drift. Records later in a batch
    overwrite earlier ones, which puts the foreground on top.
    """

    def __init__(self, term_cols, term_rows,
                 char_width=config.FONT_SIZE * config.CHAR_WIDTH_RATIO,
                 char_height=config.FONT_SIZE * config.CHAR_HEIGHT_RATIO):
        self.char_width = char_width
        self.char_height = char_height
        self.background = Color.BLACK
        self.frames = 0
        self.resize(term_cols, term_rows)

    def resize(self, term_cols, term_rows):
        self.term_cols = max(1, term_cols)
        self.cols = max(1, self.term_cols // CELL_SPAN)
        self.rows = max(1, term_rows)
        self.cells = [[None] * self.cols for _ in range(self.rows)]

    # --- Renderer ---

    def surface_width(self):
        return int(self.cols * self.char_width)

    def surface_height(self):
        return int(self.rows * self.char_height)

    def clear(self, color):
        self.background = color
        for row in self.cells:
            for i in range(len(row)):
                row[i] = None

    def draw_batch(self, chars):
        for rc in chars:
            col = math.floor(rc.x / self.char_width + 1e-6)
            row = math.floor(rc.y / self.char_height + 1e-6)
            if 0 <= col < self.cols and 0 <= row < self.rows:
                self.cells[row][col] = (rc.character, self.shade(rc.color))

    def present(self):
        self.frames += 1

    # --- Terminal output ---

    @staticmethod
    def shade(color):
        # No real transparency in a terminal: fold alpha into brightness
        if color.a < 0.3:
            color = color.darken(0.3)
        elif color.a < 0.7:
            color = color.darken(0.6)
        return (color.r, color.g, color.b)

    def to_text(self):
        bg = self.background
        base = f"on rgb({bg.r},{bg.g},{bg.b})"
        final_text = Text(no_wrap=True, overflow="crop")
        for y, row in enumerate(self.cells):
            for cell in row:
                if cell is None:
                    final_text.append(" " * CELL_SPAN, style=base)
                    continue
                char, (r, g, b) = cell
                pad = max(0, CELL_SPAN - cell_len(char))
                final_text.append(char + " " * pad, style=f"rgb({r},{g},{b}) {base}")
            if y < self.rows - 1:
                final_text.append("\n")
        return final_text


class MatrixRain(Widget):
    """
    A Matrix Rain widget for Textual.
    Drives a RainField at its speed tier's interval and paints it with Rich.
    """

    DEFAULT_CSS = """
    MatrixRain {
        width: 100%;
        height: 100%;
        background: #000000;
    }
    """

    def __init__(self, rain_config, name=None, id=None):
        super().__init__(name=name, id=id)
        self.canvas = TerminalCanvas(1, 1)
        self.field = RainField(rain_config.with_size(self.canvas.surface_width(),
                                                     self.canvas.surface_height()))
        self._timer = None

    @property
    def rain_config(self):
        return self.field.config

    def on_mount(self):
        self._start_timer()

    def _start_timer(self):
        if self._timer is not None:
            self._timer.stop()
        self._timer = self.set_interval(self.field.update_interval_ms() / 1000.0, self.update_rain)

    def _sync_size(self):
        w, h = self.size
        if w == 0 or h == 0:
            return False
        if (w, h) != (self.canvas.term_cols, self.canvas.rows):
            self.canvas.resize(w, h)
            self.field.set_config(self.field.config.with_size(self.canvas.surface_width(),
                                                              self.canvas.surface_height()))
            log(f"Terminal resized to {w}x{h} cells", "debug")
        return True

    def apply_config(self, rain_config):
        """Swap in new options, keeping the current surface size."""
        old_speed = self.field.config.speed
        self.field.set_config(rain_config.with_size(self.canvas.surface_width(),
                                                    self.canvas.surface_height()))
        if rain_config.speed != old_speed and self._timer is not None:
            self._start_timer()
        self.refresh()

    def update_rain(self):
        if not self._sync_size():
            return
        self.field.update()
        self.field.render(self.canvas)
        self.refresh()

    def render(self):
        return self.canvas.to_text()
