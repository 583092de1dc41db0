"""
The rain field: two layers of columns, advanced together and composed into
one back-to-front draw list.

The foreground layer has a column in every cell slot. The optional
background layer takes every third slot and runs slower, shorter, smaller
and dimmer, which reads as depth once the foreground is drawn over it.
"""

import math
import random

import config
from rain.colors import Color
from rain.column import RainColumn
from rain.logger import log
from rain.options import RainConfig
from rain.renderer import RenderChar


class RainField:
    def __init__(self, rain_config: RainConfig = None, rng=None):
        self._config = rain_config if rain_config is not None else RainConfig()
        self._rng = rng if rng is not None else random.Random()

        self.font_size = config.FONT_SIZE
        self.char_width = self.font_size * config.CHAR_WIDTH_RATIO
        self.char_height = self.font_size * config.CHAR_HEIGHT_RATIO

        self.columns = []
        self.background_columns = []
        self._build_columns()

    @property
    def config(self) -> RainConfig:
        return self._config

    # --- Construction ---

    def _column_count(self) -> int:
        return math.ceil(self._config.screen_width / self.char_width)

    def _build_columns(self):
        num_columns = self._column_count()
        max_length = self._config.speed.max_trail_length()
        base_speed = self._config.speed.speed_multiplier()

        self.columns = [RainColumn(x, max_length, base_speed, self._rng)
                        for x in range(num_columns)]
        self._build_background()

        log(f"Rain field built: {len(self.columns)} columns, "
            f"{len(self.background_columns)} background columns "
            f"({self._config.screen_width}x{self._config.screen_height}, {self._config.speed.value})",
            "debug")

    def _build_background(self):
        self.background_columns = []
        if not self._config.enable_background_layer:
            return
        max_length = self._config.speed.max_trail_length()
        bg_speed = self._config.speed.speed_multiplier() * config.BACKGROUND_SPEED_FACTOR
        for x in range(0, self._column_count(), config.BACKGROUND_SLOT_STEP):
            self.background_columns.append(RainColumn(x, max_length // 2, bg_speed, self._rng))

    # --- Simulation ---

    def _advance_layer(self, columns, reset_probability, reactivate_probability):
        char_set = self._config.character_set
        screen_height = self._config.screen_height

        # Idle columns get the off-surface roll too; update() leaves them in place
        idled = set()
        for column in columns:
            was_active = column.active
            column.update(char_set, self._rng)
            if column.is_off_screen(screen_height, self.char_height):
                if self._rng.random() < reset_probability:
                    column.reset(self._rng)
                else:
                    column.active = False
                    if was_active:
                        idled.add(id(column))

        # Separate pass: a column idled above waits at least one tick
        for column in columns:
            if column.active or id(column) in idled:
                continue
            if self._rng.random() < reactivate_probability:
                column.reset(self._rng)

    def update(self):
        self._advance_layer(self.columns,
                            config.FOREGROUND_RESET_PROBABILITY,
                            config.FOREGROUND_REACTIVATE_PROBABILITY)

        if self._config.enable_background_layer:
            self._advance_layer(self.background_columns,
                                config.BACKGROUND_RESET_PROBABILITY,
                                config.BACKGROUND_REACTIVATE_PROBABILITY)

    # --- Composition ---

    def _layer_records(self, columns, alpha_factor, font_size):
        scheme = self._config.color_scheme
        screen_height = self._config.screen_height
        records = []

        for column in columns:
            if not column.active:
                continue

            x_pixel = column.x * self.char_width
            for ch, y_pos, trail_pos in column.get_trail_positions():
                if y_pos < 0.0:
                    continue
                y_pixel = y_pos * self.char_height
                if y_pixel > screen_height:
                    continue

                color = scheme.color_at(trail_pos)
                if alpha_factor != 1.0:
                    color = color.with_alpha(color.a * alpha_factor)
                records.append(RenderChar(ch, x_pixel, y_pixel, color, font_size))

        return records

    def get_render_data(self) -> list:
        """Build this frame's draw list without touching a renderer."""
        records = []
        if self._config.enable_background_layer:
            records.extend(self._layer_records(self.background_columns,
                                               config.BACKGROUND_ALPHA_FACTOR,
                                               self.font_size * config.BACKGROUND_FONT_FACTOR))
        records.extend(self._layer_records(self.columns, 1.0, self.font_size))
        return records

    def render(self, renderer):
        renderer.clear(Color.BLACK)
        renderer.draw_batch(self.get_render_data())
        renderer.present()

    # --- Reconfiguration ---

    def set_config(self, rain_config: RainConfig):
        old = self._config
        self._config = rain_config

        dimensions_changed = (rain_config.screen_width != old.screen_width
                              or rain_config.screen_height != old.screen_height)

        if dimensions_changed:
            self._build_columns()
        elif rain_config.speed != old.speed:
            max_length = rain_config.speed.max_trail_length()
            base_speed = rain_config.speed.speed_multiplier()
            for column in self.columns:
                column.reroll(base_speed, max_length // 2, max_length, self._rng)
            bg_speed = base_speed * config.BACKGROUND_SPEED_FACTOR
            for column in self.background_columns:
                column.reroll(bg_speed, max_length // 4, max_length // 2, self._rng)
            log(f"Rain speed changed: {old.speed.value} -> {rain_config.speed.value}", "debug")

        # Toggling the depth layer leaves foreground trails alone
        if not dimensions_changed and rain_config.enable_background_layer != old.enable_background_layer:
            self._build_background()

    # --- Introspection ---

    def active_columns(self) -> int:
        return sum(1 for c in self.columns if c.active)

    def total_columns(self) -> int:
        return len(self.columns)

    def total_background_columns(self) -> int:
        return len(self.background_columns)

    def update_interval_ms(self) -> int:
        return self._config.speed.update_interval_ms()
