"""A small 2D game toolkit built on pygame: window, camera, drawing, textures, text, audio, timers, input, files and math helpers."""

__version__ = "0.1.0"