"""Battery level indicator window with shutdown and suspend buttons."""

__version__ = "0.1.0"