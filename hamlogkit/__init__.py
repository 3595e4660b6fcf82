"""Contest logging helpers for amateur radio: settings, satellite data, Doppler tracking, rig commands."""

__version__ = "0.1.0"