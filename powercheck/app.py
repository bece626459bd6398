"""Battery level overlay with shutdown and suspend buttons."""

import argparse
import logging
import queue
import threading
import time

from powercheck import power, ui
from powercheck.power import MAX_NOTIFICATIONS, TICK_INTERVAL, PowerManager

logger = logging.getLogger(__name__)

_IDLE_SLEEP = 0.016
_SCREEN_RIGHT_MARGIN = 220
_SCREEN_TOP_MARGIN = 1075


def parse_args(argv=None):
    """Parse the command line; ``smode`` is True in silence mode."""
    parser = argparse.ArgumentParser(
        prog="powercheck",
        description="Show the battery level with shutdown and suspend buttons.",
    )
    parser.add_argument(
        "-smode",
        "--smode",
        dest="smode",
        action="store_true",
        help="Silence mode: only show the window when the battery runs low",
    )
    return parser.parse_args(argv)


def create_window():
    """Open the borderless overlay window, or return None if that fails."""
    import pyglet
    from pyglet.graphics.shader import ShaderException
    from pyglet.window import Window, mouse

    from powercheck.render import Renderer

    config = pyglet.gl.Config(
        major_version=4,
        minor_version=1,
        forward_compatible=True,
        double_buffer=True,
        alpha_size=8,
    )
    try:
        window = Window(
            ui.WINDOW_WIDTH,
            ui.WINDOW_HEIGHT,
            caption="TimeCheck",
            resizable=False,
            style=Window.WINDOW_STYLE_BORDERLESS,
            config=config,
            vsync=True,
        )
    except pyglet.window.NoSuchConfigException as exc:
        logger.error("Create window error: %s", exc)
        return None

    screen = window.screen
    window.set_location(
        screen.width - _SCREEN_RIGHT_MARGIN, screen.height - _SCREEN_TOP_MARGIN
    )

    try:
        renderer = Renderer()
    except ShaderException as exc:
        logger.error("Shader compile error: %s", exc)
        window.close()
        return None

    @window.event
    def on_draw():
        window.clear()
        renderer.digits()
        renderer.buttons()

    @window.event
    def on_mouse_press(x, y, button, modifiers):
        if button == mouse.LEFT:
            ui.on_click(x, window.height - y)

    return window


def _monitor(manager, silent, requests, stop):
    """Post a request to show the window whenever the battery runs low."""
    try:
        while not stop.wait(TICK_INTERVAL):
            low = (
                silent
                and manager.notifications < MAX_NOTIFICATIONS
                and power.check()
            )
            notify, delay = manager.next_delay(silent, low)
            if notify:
                requests.put(None)
            if delay != TICK_INTERVAL and stop.wait(delay):
                return
    except OSError as exc:
        requests.put(exc)


def _draw(window):
    window.switch_to()
    window.dispatch_event("on_draw")
    window.flip()


def main(argv=None):
    """Run the overlay until its window is closed (or forever in silence mode)."""
    logging.basicConfig(level=logging.INFO)
    args = parse_args(argv)
    silent = args.smode

    try:
        window = None if silent else create_window()
        requests = queue.Queue(maxsize=1)
        stop = threading.Event()
        monitor = threading.Thread(
            target=_monitor,
            args=(PowerManager(), silent, requests, stop),
            daemon=True,
        )
        monitor.start()
        try:
            while True:
                try:
                    request = requests.get_nowait()
                except queue.Empty:
                    pass
                else:
                    if isinstance(request, Exception):
                        raise request
                    if window is None:
                        window = create_window()
                    continue

                if window is not None and not window.has_exit:
                    _draw(window)
                    window.dispatch_events()
                    if window.has_exit and not silent:
                        window.close()
                        return 0
                elif window is not None:
                    window.close()
                    window = None
                else:
                    time.sleep(_IDLE_SLEEP)
        finally:
            stop.set()
    except OSError as exc:
        logger.error("Cannot read battery capacity: %s", exc)
        return 1