"""Battery level reading and low-battery notification pacing."""

from dataclasses import dataclass
from pathlib import Path

CAPACITY_PATH = Path("/sys/class/power_supply/BAT0/capacity")

LOW_BATTERY_THRESHOLD = 10
MAX_NOTIFICATIONS = 4
TICK_INTERVAL = 0.5
NOTIFY_PAUSE = 60.0
COOLDOWN = 180.0


@dataclass
class PowerManager:
    """Counts low-battery notifications and decides how long to wait."""

    notifications: int = 0
    delay: float = 0.0

    def next_delay(self, silent, low_battery):
        """Advance one tick and return ``(notify, delay)``.

        In silent mode a low battery triggers a notification followed by a
        pause, up to ``MAX_NOTIFICATIONS`` times; after that the counter is
        reset and a longer cooldown follows. Otherwise the next tick comes
        after ``TICK_INTERVAL`` seconds.
        """
        if silent and low_battery and self.notifications < MAX_NOTIFICATIONS:
            self.notifications += 1
            self.delay = NOTIFY_PAUSE
            return True, self.delay
        if self.notifications >= MAX_NOTIFICATIONS:
            self.notifications = 0
            self.delay = COOLDOWN
            return False, self.delay
        self.delay = TICK_INTERVAL
        return False, self.delay


def show(path=CAPACITY_PATH):
    """Return the battery capacity text with surrounding whitespace removed.

    Raises ``OSError`` if the capacity file cannot be read.
    """
    return Path(path).read_text().strip()


def check(path=CAPACITY_PATH):
    """Return True when the battery is below the low threshold.

    Unparsable capacity text is treated as zero.
    """
    try:
        level = int(show(path))
    except ValueError:
        level = 0
    return level < LOW_BATTERY_THRESHOLD