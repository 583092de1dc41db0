import config


def _start_offset(rng) -> float:
    # Heads start a few cells above the visible area
    return -float(rng.randint(config.START_OFFSET_MIN, config.START_OFFSET_MAX))


class RainColumn:
    """
    One vertical trail of falling glyphs.

    Positions are in character cells. ``characters[0]`` sits at the head and
    ``characters[i]`` is drawn ``i`` cells above it, so the trail grows upward
    as the head falls.
    """

    def __init__(self, x: int, max_length: int, base_speed: float, rng):
        self.x = x
        self.y = _start_offset(rng)
        self.speed = base_speed * rng.uniform(config.SPEED_JITTER_MIN, config.SPEED_JITTER_MAX)
        self.max_length = rng.randint(max_length // 2, max_length)
        self.characters = []
        self.active = True

    def __repr__(self):
        state = "active" if self.active else "idle"
        return (f"RainColumn(x={self.x}, y={self.y:.2f}, len={len(self.characters)}/"
                f"{self.max_length}, speed={self.speed:.2f}, {state})")

    def update(self, char_set, rng):
        if not self.active:
            return

        self.y += self.speed

        if len(self.characters) < self.max_length and rng.random() < config.GROW_PROBABILITY:
            self.characters.append(char_set.random_character(rng))

        # Glitch: swap one glyph in place, length unchanged
        if self.characters and rng.random() < config.GLITCH_PROBABILITY:
            idx = rng.randrange(len(self.characters))
            self.characters[idx] = char_set.random_character(rng)

    def is_off_screen(self, screen_height: float, char_height: float) -> bool:
        max_chars = int(screen_height / char_height)
        return self.y > max_chars + len(self.characters)

    def reset(self, rng):
        self.y = _start_offset(rng)
        self.characters.clear()
        self.active = True

    def reroll(self, base_speed: float, min_length: int, max_length: int, rng):
        """Re-randomize speed and trail cap for a new speed tier, keeping position."""
        self.speed = base_speed * rng.uniform(config.SPEED_JITTER_MIN, config.SPEED_JITTER_MAX)
        self.max_length = rng.randint(min_length, max_length)
        del self.characters[self.max_length:]

    def get_trail_positions(self):
        """Return ``(glyph, y_position, trail_offset)`` for each glyph, head first.

        ``trail_offset`` runs from 0.0 at the head to 1.0 at the tail; a
        single-glyph trail is all head.
        """
        count = len(self.characters)
        positions = []
        for i, ch in enumerate(self.characters):
            trail_pos = 0.0 if count <= 1 else i / (count - 1)
            positions.append((ch, self.y - i, trail_pos))
        return positions
