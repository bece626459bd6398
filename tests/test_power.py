import pytest

from powercheck import power
from powercheck.power import PowerManager, check, show


@pytest.fixture
def capacity(tmp_path):
    def write(text):
        path = tmp_path / "capacity"
        path.write_text(text)
        return path

    return write


def test_show_strips_whitespace(capacity):
    assert show(capacity("  57\n")) == "57"


def test_show_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        show(tmp_path / "absent")


def test_check_below_threshold(capacity):
    assert check(capacity(f"{power.LOW_BATTERY_THRESHOLD - 1}\n")) is True


def test_check_at_threshold(capacity):
    assert check(capacity(f"{power.LOW_BATTERY_THRESHOLD}\n")) is False


def test_check_full(capacity):
    assert check(capacity("100\n")) is False


def test_check_unparsable_counts_as_empty(capacity):
    assert check(capacity("unknown\n")) is True


def test_silent_low_battery_notifies_then_cools_down():
    manager = PowerManager()
    results = [manager.next_delay(True, True) for _ in range(power.MAX_NOTIFICATIONS)]
    assert results == [(True, power.NOTIFY_PAUSE)] * power.MAX_NOTIFICATIONS
    assert manager.notifications == power.MAX_NOTIFICATIONS
    assert manager.next_delay(True, True) == (False, power.COOLDOWN)
    assert manager.notifications == 0
    assert manager.next_delay(True, True) == (True, power.NOTIFY_PAUSE)


def test_not_silent_never_notifies():
    manager = PowerManager()
    for _ in range(10):
        assert manager.next_delay(False, True) == (False, power.TICK_INTERVAL)
    assert manager.notifications == 0


def test_healthy_battery_ticks():
    manager = PowerManager()
    assert manager.next_delay(True, False) == (False, power.TICK_INTERVAL)
    assert manager.delay == power.TICK_INTERVAL


def test_full_counter_resets_even_when_not_silent():
    manager = PowerManager(notifications=power.MAX_NOTIFICATIONS)
    assert manager.next_delay(False, False) == (False, power.COOLDOWN)
    assert manager.notifications == 0


def test_counter_kept_when_battery_recovers():
    manager = PowerManager()
    manager.next_delay(True, True)
    manager.next_delay(True, False)
    assert manager.notifications == 1