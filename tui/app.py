import logging
from textual.app import App, ComposeResult
from textual.widgets import Footer, Static, Log
from textual.containers import Container
from textual.binding import Binding
from tui.matrix import MatrixRain
from rain import logger as rain_logger
from rain.logger import log


class StatusWidget(Static):
    """Displays the active character set, color scheme and speed."""
    DEFAULT_CSS = """
    StatusWidget {
        width: 100%;
        height: 1;
        background: #001a00;
        color: #00ff46;
        text-style: bold;
    }
    """
    def update_status(self, rain_config):
        layer = "on" if rain_config.enable_background_layer else "off"
        self.update(
            f" {rain_config.character_set.label} | {rain_config.color_scheme.label} | "
            f"{rain_config.speed.label} ({rain_config.speed.update_interval_ms()} ms) | depth {layer}"
        )


class _LogPanelHandler(logging.Handler):
    """Mirrors log records into the on-screen log panel."""
    def __init__(self, log_widget):
        super().__init__()
        self.log_widget = log_widget
        self.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", "%H:%M:%S"))

    def emit(self, record):
        try:
            self.log_widget.write_line(self.format(record))
        except Exception:
            self.handleError(record)


class RainTui(App):
    """Full-screen digital rain in the terminal."""

    CSS = """
    Screen {
        background: #000000;
    }

    #rain-pane {
        width: 100%;
        height: 1fr;
    }

    Log {
        background: #050505;
        color: #00ff00;
        height: 8;
        display: none;
    }

    Log.visible {
        display: block;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False),
        Binding("s", "next_speed", "Speed"),
        Binding("c", "next_color", "Color"),
        Binding("g", "next_charset", "Glyphs"),
        Binding("b", "toggle_background", "Depth"),
        Binding("w", "save_settings", "Save"),
        Binding("l", "toggle_log", "Log"),
    ]

    def __init__(self, rain_config, settings=None, duration=None):
        super().__init__()
        self.matrix = MatrixRain(rain_config)
        self.status_widget = StatusWidget()
        self.log_widget = Log()
        self.settings = settings
        self.duration = duration
        self._console_handlers = []
        self._panel_handler = None

    def compose(self) -> ComposeResult:
        with Container(id="rain-pane"):
            yield self.matrix
        yield self.log_widget
        yield self.status_widget
        yield Footer()

    def on_mount(self):
        # The console handler would scribble over the screen
        self._console_handlers = rain_logger.detach_console()
        self._panel_handler = _LogPanelHandler(self.log_widget)
        rain_logger.attach([self._panel_handler])

        self.status_widget.update_status(self.matrix.rain_config)
        log(f"Rain started: {self.matrix.rain_config.to_dict()}", "info")
        if self.duration:
            self.set_timer(self.duration, self.exit)

    def on_unmount(self):
        root = logging.getLogger()
        if self._panel_handler is not None:
            root.removeHandler(self._panel_handler)
        rain_logger.attach(self._console_handlers)

    def _apply(self, **changes):
        rain_config = self.matrix.rain_config.replace(**changes)
        self.matrix.apply_config(rain_config)
        self.status_widget.update_status(rain_config)
        log(f"Config changed: {changes}", "info")

    def action_next_speed(self):
        self._apply(speed=self.matrix.rain_config.speed.next())

    def action_next_color(self):
        self._apply(color_scheme=self.matrix.rain_config.color_scheme.next())

    def action_next_charset(self):
        self._apply(character_set=self.matrix.rain_config.character_set.next())

    def action_toggle_background(self):
        self._apply(enable_background_layer=not self.matrix.rain_config.enable_background_layer)

    def action_save_settings(self):
        if self.settings is None:
            log("No settings store attached; nothing saved.", "warning")
            return
        self.settings.store_rain_config(self.matrix.rain_config)

    def action_toggle_log(self):
        self.log_widget.toggle_class("visible")
