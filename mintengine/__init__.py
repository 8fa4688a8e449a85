"""Building blocks for small 2D games on pygame: window, renderer, assets, sprites, timers and UI."""

__version__ = "0.1.0"