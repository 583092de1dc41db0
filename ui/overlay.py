import sys
from PyQt6.QtWidgets import QApplication, QWidget, QMenu
from PyQt6.QtCore import Qt, QTimer, QPointF
from PyQt6.QtGui import QPainter, QColor, QFont, QAction, QActionGroup
from rain.charsets import CharacterSet
from rain.colors import ColorScheme
from rain.engine import RainField
from rain.logger import log
from rain.speed import RainSpeed


class OverlayBaseWidget(QWidget):
    def __init__(self, settings=None, fullscreen=False):
        super().__init__()
        self.settings = settings
        self.locked = bool(settings.get("overlay_locked")) if settings else True
        self.drag_pos = None

        if fullscreen:
            self.setWindowFlags(Qt.WindowType.FramelessWindowHint)
        else:
            # Window Flags: Frameless, On Top, Tool
            self.setWindowFlags(
                Qt.WindowType.FramelessWindowHint
                | Qt.WindowType.WindowStaysOnTopHint
                | Qt.WindowType.Tool
            )
            self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

    # --- Mouse Interaction ---
    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            if not self.locked:
                self.drag_pos = event.globalPosition().toPoint() - self.frameGeometry().topLeft()

    def mouseMoveEvent(self, event):
        if event.buttons() == Qt.MouseButton.LeftButton and not self.locked and self.drag_pos:
            self.move(event.globalPosition().toPoint() - self.drag_pos)

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key.Key_Escape, Qt.Key.Key_Q):
            QApplication.instance().quit()
        else:
            super().keyPressEvent(event)

    def toggle_lock(self):
        self.locked = not self.locked
        if self.settings:
            self.settings.set("overlay_locked", self.locked)
        self.update()


class MatrixRainWidget(OverlayBaseWidget):
    """
    Window that runs a RainField and is also its renderer: each tick the
    field draws into this widget, and paintEvent replays the last batch.
    """

    def __init__(self, rain_config, settings=None, fullscreen=False, width=None, height=None):
        super().__init__(settings=settings, fullscreen=fullscreen)

        screen = QApplication.primaryScreen().geometry()
        if fullscreen:
            self.width_, self.height_ = screen.width(), screen.height()
            self.setGeometry(screen)
        else:
            self.width_ = width or (settings.get("window_width") if settings else 960)
            self.height_ = height or (settings.get("window_height") if settings else 600)
            # Start Bottom Right
            x = max(0, screen.width() - self.width_ - 10)
            y = max(0, screen.height() - self.height_ - 50)
            self.setGeometry(x, y, self.width_, self.height_)

        self.field = RainField(rain_config.with_size(self.width_, self.height_))
        self._background = QColor(0, 0, 0)
        self._batch = []
        self._fonts = {}

        # Animation
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.animate)
        self.timer.start(self.field.update_interval_ms())

        if fullscreen:
            self.showFullScreen()
        else:
            self.show()

    @property
    def rain_config(self):
        return self.field.config

    # --- Renderer ---
    def surface_width(self):
        return self.width_

    def surface_height(self):
        return self.height_

    def clear(self, color):
        bg_alpha = 255 if self.locked else 200
        self._background = QColor(color.r, color.g, color.b, bg_alpha)
        self._batch = []

    def draw_batch(self, chars):
        self._batch = list(chars)

    def present(self):
        self.update()

    # --- Animation ---
    def animate(self):
        self.field.update()
        self.field.render(self)

    def apply_config(self, rain_config):
        old_speed = self.field.config.speed
        self.field.set_config(rain_config.with_size(self.width_, self.height_))
        if rain_config.speed != old_speed:
            self.timer.setInterval(self.field.update_interval_ms())
        log(f"Config changed: {rain_config.to_dict()}", "info")

    def resizeEvent(self, event):
        size = event.size()
        if size.width() > 0 and size.height() > 0 and (size.width(), size.height()) != (self.width_, self.height_):
            self.width_, self.height_ = size.width(), size.height()
            self.field.set_config(self.field.config.with_size(self.width_, self.height_))
        super().resizeEvent(event)

    def _font(self, size):
        font = self._fonts.get(size)
        if font is None:
            font = QFont("Monospace")
            font.setStyleHint(QFont.StyleHint.TypeWriter)
            font.setPixelSize(max(1, int(round(size))))
            self._fonts[size] = font
        return font

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)

        if not self.locked:
            painter.setPen(QColor(255, 255, 0))
            painter.drawRect(0, 0, self.width()-1, self.height()-1)

        # Batch order is depth order: background layer first
        for rc in self._batch:
            painter.setFont(self._font(rc.font_size))
            painter.setPen(QColor(rc.color.r, rc.color.g, rc.color.b, int(rc.color.a * 255)))
            # Records carry the cell top; drawText wants the baseline
            painter.drawText(QPointF(rc.x, rc.y + rc.font_size), rc.character)
        painter.end()

    # --- Context Menu ---
    def contextMenuEvent(self, event):
        menu = QMenu(self)
        current = self.field.config

        self._add_choice_menu(menu, "Speed", RainSpeed.all_speeds(), current.speed,
                              lambda v: current.replace(speed=v))
        self._add_choice_menu(menu, "Color", ColorScheme.all_schemes(), current.color_scheme,
                              lambda v: current.replace(color_scheme=v))
        self._add_choice_menu(menu, "Characters", CharacterSet.all_sets(), current.character_set,
                              lambda v: current.replace(character_set=v))

        depth_action = QAction("Background Layer", self)
        depth_action.setCheckable(True)
        depth_action.setChecked(current.enable_background_layer)
        depth_action.triggered.connect(
            lambda checked: self.apply_config(current.replace(enable_background_layer=checked)))
        menu.addAction(depth_action)

        menu.addSeparator()

        if self.settings:
            save_action = QAction("Save Settings", self)
            save_action.triggered.connect(lambda: self.settings.store_rain_config(self.field.config))
            menu.addAction(save_action)

        lock_action = QAction("Lock Position" if not self.locked else "Unlock Position", self)
        lock_action.triggered.connect(self.toggle_lock)
        menu.addAction(lock_action)

        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(QApplication.instance().quit)
        menu.addAction(quit_action)

        menu.exec(event.globalPos())

    def _add_choice_menu(self, menu, title, options, selected, make_config):
        sub = menu.addMenu(title)
        group = QActionGroup(sub)
        for option in options:
            action = QAction(option.label, sub)
            action.setCheckable(True)
            action.setChecked(option == selected)
            action.triggered.connect(lambda _checked, v=option: self.apply_config(make_config(v)))
            group.addAction(action)
            sub.addAction(action)


def run_overlay(rain_config, settings=None, fullscreen=False, width=None, height=None,
                duration=None, app=None):
    if app is None:
        app = QApplication(sys.argv)

    widget = MatrixRainWidget(rain_config, settings=settings, fullscreen=fullscreen,
                              width=width, height=height)
    log(f"Window started: {widget.rain_config.to_dict()}", "info")

    if duration:
        QTimer.singleShot(int(duration * 1000), app.quit)

    return app.exec()
