"""Wallpaper Gallery - wallpaper catalog and resolution-matched downloads."""

try:
    from importlib.metadata import version

    __version__ = version("wallpaper-gallery")
except Exception:
    __version__ = "1.0.0"
